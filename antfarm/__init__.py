"""
antfarm — the ant farm program: colony reader, pipeline and CLI.

The algorithm itself lives in farm_core.
"""

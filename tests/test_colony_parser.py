"""
tests/test_colony_parser.py
───────────────────────────
The colony description reader.

Reading guide
─────────────
Group 1 — Well-formed files: rooms, tunnels, markers, comments
Group 2 — InvalidFormatError cases
Group 3 — MissingEndpointError cases
Group 4 — load_colony() from disk
"""

from __future__ import annotations

import pytest

from antfarm.pipeline import (
    InvalidFormatError,
    MissingEndpointError,
    load_colony,
    parse_colony,
)
from antfarm.shared.models import RoomKind

SAMPLE = """\
2
##start
start 0 0
A 1 0
##end
end 2 0
start-A
A-end
"""


def _parse(text: str):
    return parse_colony(text.splitlines())


# ─────────────────────────────────────────────────────────────────────────────
# GROUP 1 — Well-formed input
# ─────────────────────────────────────────────────────────────────────────────

class TestParseValid:

    def test_sample_colony(self):
        desc = _parse(SAMPLE)
        colony = desc.colony
        assert desc.ant_count == 2
        assert colony.start.name == "start"
        assert colony.end.name == "end"
        assert set(colony.rooms) == {"start", "A", "end"}
        assert colony.rooms["A"].x == 1 and colony.rooms["A"].y == 0

    def test_room_kinds(self):
        colony = _parse(SAMPLE).colony
        assert colony.rooms["start"].kind == RoomKind.START
        assert colony.rooms["end"].kind == RoomKind.END
        assert colony.rooms["A"].kind == RoomKind.ORDINARY

    def test_tunnels_are_symmetric(self):
        colony = _parse(SAMPLE).colony
        assert colony.neighbours("A") == ["start", "end"]
        assert colony.neighbours("start") == ["A"]
        assert colony.neighbours("end") == ["A"]

    def test_comments_and_blank_lines_ignored(self):
        text = "# a colony\n\n3\n##start\nstart 0 0\n   \n#comment\n##end\nend 1 1\nstart-end\n"
        desc = _parse(text)
        assert desc.ant_count == 3
        assert desc.colony.neighbours("start") == ["end"]

    def test_surrounding_whitespace_stripped(self):
        text = "  4  \n##start\n  s 0 0\n##end\ne 1 1  \n  s-e  \n"
        desc = _parse(text)
        assert desc.ant_count == 4
        assert desc.colony.start.name == "s"
        assert desc.colony.neighbours("e") == ["s"]

    def test_tunnel_to_undeclared_room_tolerated(self):
        text = "1\n##start\ns 0 0\n##end\ne 5 5\ns-ghost\nghost-e\n"
        colony = _parse(text).colony
        assert colony.neighbours("ghost") == ["s", "e"]
        assert "ghost" not in colony.rooms

    def test_negative_coordinates(self):
        text = "1\n##start\ns -3 -4\n##end\ne 0 0\ns-e\n"
        start = _parse(text).colony.start
        assert (start.x, start.y) == (-3, -4)

    def test_marker_applies_to_next_room_line_only(self):
        """A tunnel between the marker and the room does not consume the marker."""
        text = "1\n##start\na-b\nstart 0 0\nc 1 1\n##end\nend 2 2\n"
        colony = _parse(text).colony
        assert colony.start.name == "start"
        assert colony.rooms["c"].kind == RoomKind.ORDINARY

    def test_redeclared_start_last_wins(self, caplog):
        text = "1\n##start\nold 0 0\n##start\nnew 1 1\n##end\ne 2 2\nnew-e\n"
        colony = _parse(text).colony
        assert colony.start.name == "new"
        assert colony.rooms["old"].kind == RoomKind.ORDINARY
        assert "redeclared" in caplog.text

    def test_tunnel_declaration_order_preserved(self):
        text = "1\n##start\ns 0 0\n##end\ne 0 1\ns-c\ns-a\ns-b\n"
        assert _parse(text).colony.neighbours("s") == ["c", "a", "b"]


# ─────────────────────────────────────────────────────────────────────────────
# GROUP 2 — InvalidFormatError
# ─────────────────────────────────────────────────────────────────────────────

class TestParseInvalid:

    def test_tunnel_with_three_names(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            _parse("1\n##start\ns 0 0\n##end\ne 1 1\ns-a-e\n")
        assert exc_info.value.line_no == 6
        assert exc_info.value.line == "s-a-e"

    def test_tunnel_with_empty_name(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\ns 0 0\n##end\ne 1 1\ns-\n")

    def test_room_missing_coordinate(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\ns 0\n##end\ne 1 1\n")

    def test_room_extra_field(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\ns 0 0 0\n##end\ne 1 1\n")

    def test_room_non_integer_coordinate(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\ns zero 0\n##end\ne 1 1\n")

    def test_room_name_with_dash(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\na-b 0 0\n##end\ne 1 1\n")

    def test_room_name_starting_with_l(self):
        with pytest.raises(InvalidFormatError):
            _parse("1\n##start\ns 0 0\nLroom 1 1\n##end\ne 1 1\n")

    def test_duplicate_room(self):
        with pytest.raises(InvalidFormatError, match="duplicate"):
            _parse("1\n##start\ns 0 0\na 1 1\na 2 2\n##end\ne 3 3\n")

    def test_ant_count_not_a_number(self):
        with pytest.raises(InvalidFormatError):
            _parse("many\n##start\ns 0 0\n##end\ne 1 1\ns-e\n")

    def test_zero_ants(self):
        with pytest.raises(InvalidFormatError):
            _parse("0\n##start\ns 0 0\n##end\ne 1 1\ns-e\n")

    def test_negative_ant_count_is_not_a_tunnel(self):
        """A dash and no space, but -5 is an ant count, not a tunnel."""
        with pytest.raises(InvalidFormatError, match="must be positive") as exc_info:
            _parse("-5\n##start\ns 0 0\n##end\ne 1 1\ns-e\n")
        assert "tunnel" not in exc_info.value.reason

    def test_missing_ant_count(self):
        with pytest.raises(InvalidFormatError):
            _parse("##start\ns 0 0\n##end\ne 1 1\ns-e\n")

    def test_message_prefix(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            _parse("x\n")
        assert str(exc_info.value).startswith("ERROR: invalid data format")


# ─────────────────────────────────────────────────────────────────────────────
# GROUP 3 — MissingEndpointError
# ─────────────────────────────────────────────────────────────────────────────

class TestParseMissingEndpoint:

    def test_missing_end(self):
        with pytest.raises(MissingEndpointError) as exc_info:
            _parse("1\n##start\ns 0 0\na 1 1\ns-a\n")
        assert exc_info.value.missing_end
        assert not exc_info.value.missing_start

    def test_missing_start(self):
        with pytest.raises(MissingEndpointError) as exc_info:
            _parse("1\na 0 0\n##end\ne 1 1\na-e\n")
        assert exc_info.value.missing_start

    def test_marker_at_end_of_file(self):
        """A trailing ##end with no room line after it declares nothing."""
        with pytest.raises(MissingEndpointError):
            _parse("1\n##start\ns 0 0\n##end\n")

    def test_message(self):
        with pytest.raises(MissingEndpointError, match="missing ##start or ##end"):
            _parse("1\n")


# ─────────────────────────────────────────────────────────────────────────────
# GROUP 4 — Files
# ─────────────────────────────────────────────────────────────────────────────

class TestLoadColony:

    def test_load_from_file(self, tmp_path):
        f = tmp_path / "colony.txt"
        f.write_text(SAMPLE, encoding="utf-8")
        desc = load_colony(f)
        assert desc.ant_count == 2
        assert desc.colony.neighbours("A") == ["start", "end"]

    def test_undecodable_file_is_invalid_format(self, tmp_path):
        f = tmp_path / "colony.txt"
        f.write_bytes(b"1\n##start\ns\xff 0 0\n")
        with pytest.raises(InvalidFormatError, match="not valid UTF-8"):
            load_colony(f)

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_colony(tmp_path / "nope.txt")

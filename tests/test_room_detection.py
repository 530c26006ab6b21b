"""Tests for segment content parsing and room aggregation."""

import pytest

from floorplan_parser.exceptions import MalformedTitle, SegmentParseError, UnknownSymbol
from floorplan_parser.room_detection import Room, parse_segment
from floorplan_parser.symbols import ParserConfig
from floorplan_parser.wall_detection import Segment


class TestParseSegment:
    """Tests for parse_segment."""

    def test_room_with_all_elements(self):
        room = parse_segment("(Living Room) WPSSC")
        assert room.name == "Living Room"
        assert room.chairs == {'W': 1, 'P': 1, 'S': 2, 'C': 1}

    def test_blank_text(self):
        room = parse_segment("      ")
        assert room.name is None
        assert room.chairs == {}

    def test_unclosed_title(self):
        with pytest.raises(MalformedTitle) as exc_info:
            parse_segment("(Living room WPSC")
        assert exc_info.value.title == "Living room WPSC"
        assert exc_info.value.text == "(Living room WPSC"

    def test_unknown_symbol_outside_title(self):
        # Z is inside the title and allowed, X is not
        with pytest.raises(UnknownSymbol) as exc_info:
            parse_segment("W(PZ)C X")
        assert exc_info.value.symbol == "X"
        assert exc_info.value.position == 7

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_segment("?")
        assert issubclass(MalformedTitle, SegmentParseError)

    def test_title_characters_are_not_counted(self):
        room = parse_segment("(WPSC) W")
        assert room.name == "WPSC"
        assert room.chairs == {'W': 1}

    def test_last_title_wins(self):
        assert parse_segment("(kitchen) (office)").name == "office"

    def test_empty_title_sets_no_name(self):
        assert parse_segment("(   ) W").name is None

    def test_stray_closing_parenthesis(self):
        room = parse_segment(") W")
        assert room.name is None
        assert room.chairs == {'W': 1}

    def test_custom_furniture(self):
        config = ParserConfig.from_furniture("T")
        assert parse_segment("T T", config).chairs == {'T': 2}
        with pytest.raises(UnknownSymbol):
            parse_segment("W", config)


class TestRoom:
    """Tests for the Room aggregate."""

    def test_merge_adds_counts(self):
        room = Room(chairs={'W': 1})
        room.merge(Room(chairs={'W': 2, 'C': 1}))
        assert room.chairs == {'W': 3, 'C': 1}

    def test_merge_keeps_name_on_empty_fragment(self):
        room = Room(name="office")
        room.merge(Room(chairs={'P': 1}))
        assert room.name == "office"

    def test_merge_overwrites_name(self):
        room = Room(name="office")
        room.merge(Room(name="study"))
        assert room.name == "study"

    def test_absorb_segments(self):
        room = Room().absorb([Segment(1, " W "), Segment(5, "(hall) P")])
        assert room.name == "hall"
        assert room.chairs == {'W': 1, 'P': 1}

    @pytest.mark.parametrize("room, expected", [
        (Room(), "(no data)"),
        (Room(name="closet"), "closet"),
        (Room(name="Living Room", chairs={'A': 1}), "Living Room:\nA: 1"),
        (Room(name="Bedroom", chairs={'A': 1, 'B': 2}), "Bedroom:\nA: 1, B: 2"),
        (Room(name="Kitchen", chairs={'B': 2, 'A': 1}), "Kitchen:\nA: 1, B: 2"),
        (Room(chairs={'W': 1}), ":\nW: 1"),
    ], ids=["empty", "name-only", "one-chair", "multiple-chairs", "unordered", "unnamed"])
    def test_render(self, room, expected):
        assert str(room) == expected

    def test_to_dict(self):
        room = Room(name="hall", chairs={'W': 2, 'C': 1})
        assert room.to_dict() == {'name': "hall", 'chairs': {'C': 1, 'W': 2}}

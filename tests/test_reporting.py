"""Tests for the room report."""

from floorplan_parser.reporting import render, report_to_dict, sort_rooms, totals
from floorplan_parser.room_detection import Room
from floorplan_parser.symbols import ParserConfig


class TestTotals:
    """Tests for totals."""

    def test_sums_every_room(self):
        rooms = [
            Room(name="a", chairs={'W': 1}),
            Room(name="a", chairs={'W': 2, 'C': 1}),
            Room(name="b", chairs={'P': 4}),
        ]
        total = totals(rooms)
        assert total.name == "total"
        assert total.chairs == {'W': 3, 'C': 1, 'P': 4}

    def test_does_not_touch_rooms(self):
        rooms = [Room(name="a", chairs={'W': 1})]
        totals(rooms)
        assert rooms[0].chairs == {'W': 1}
        assert rooms[0].name == "a"


class TestRender:
    """Tests for render."""

    def test_no_rooms(self):
        assert render([]) == "total"

    def test_sorted_by_name_unnamed_first(self):
        rooms = [
            Room(name="kitchen", chairs={'W': 1}),
            Room(chairs={'S': 1}),
            Room(name="bathroom"),
        ]
        assert [room.name for room in sort_rooms(rooms)] == [None, "bathroom", "kitchen"]
        assert render(rooms) == (
            "total:\nS: 1, W: 1\n"
            ":\nS: 1\n"
            "bathroom\n"
            "kitchen:\nW: 1"
        )

    def test_same_names_are_listed_separately(self):
        rooms = [Room(name="a", chairs={'W': 1}), Room(name="a", chairs={'W': 2, 'C': 1})]
        assert render(rooms) == "total:\nC: 1, W: 3\na:\nW: 1\na:\nC: 1, W: 2"

    def test_config_names(self):
        config = ParserConfig(placeholder="-", total_name="all")
        assert render([Room()], config) == "all\n-"

    def test_report_to_dict(self):
        rooms = [Room(name="b", chairs={'P': 1}), Room(name="a")]
        assert report_to_dict(rooms) == {
            'total': {'name': "total", 'chairs': {'P': 1}},
            'rooms': [
                {'name': "a", 'chairs': {}},
                {'name': "b", 'chairs': {'P': 1}},
            ],
        }

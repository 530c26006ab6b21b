"""
Report Module
==============
Renders closed rooms, preceded by a synthetic total room, as text or dicts.
"""

from typing import List, Dict, Any, Sequence

from .room_detection import Room
from .symbols import ParserConfig, DEFAULT_CONFIG, TOTAL_ROOM_NAME


def totals(rooms: Sequence[Room], name: str = TOTAL_ROOM_NAME) -> Room:
    """Sum the furniture of every room. Room names are not merged."""
    total = Room()
    for room in rooms:
        total.merge(Room(chairs=room.chairs))
    total.name = name
    return total


def sort_rooms(rooms: Sequence[Room]) -> List[Room]:
    """Rooms sorted by name; rooms without a name come first."""
    return sorted(rooms, key=lambda room: room.name or "")


def render(rooms: Sequence[Room], config: ParserConfig = DEFAULT_CONFIG) -> str:
    """
    Render the report: the total room followed by every room sorted by name.

    Args:
        rooms: Closed rooms
        config: Provides the total room name and the empty room placeholder

    Returns:
        Report text, one block per room joined by newlines
    """
    blocks = [totals(rooms, config.total_name).render(config.placeholder)]
    blocks.extend(room.render(config.placeholder) for room in sort_rooms(rooms))
    return "\n".join(blocks)


def report_to_dict(rooms: Sequence[Room], config: ParserConfig = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Same report as render(), as JSON-serializable data."""
    return {
        'total': totals(rooms, config.total_name).to_dict(),
        'rooms': [room.to_dict() for room in sort_rooms(rooms)],
    }

"""
Room Detection Module
======================
Room contents read from the interior segments of a floor plan:
1. Room aggregate (title and furniture counts)
2. Segment content parsing (titles in parentheses, furniture symbols)
3. Merging of fragments collected across lines
"""

from typing import Dict, Optional, Iterable
from dataclasses import dataclass, field
import logging

from .exceptions import MalformedTitle, UnknownSymbol
from .symbols import CharClass, ParserConfig, DEFAULT_CONFIG, EMPTY_ROOM_PLACEHOLDER, classify
from .wall_detection import Segment

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class Room:
    """Title and furniture counts of one room."""
    name: Optional[str] = None
    chairs: Dict[str, int] = field(default_factory=dict)

    def merge(self, other: "Room") -> "Room":
        """
        Add another fragment of the same room into this one.
        A non-empty name overwrites the current one, counts are summed.
        """
        if other.name:
            self.name = other.name
        for symbol, count in other.chairs.items():
            self.chairs[symbol] = self.chairs.get(symbol, 0) + count
        return self

    def absorb(self, segments: Iterable[Segment], config: ParserConfig = DEFAULT_CONFIG) -> "Room":
        """Parse each segment's content and merge it into this room."""
        for segment in segments:
            self.merge(parse_segment(segment.content, config))
        return self

    def render(self, placeholder: str = EMPTY_ROOM_PLACEHOLDER) -> str:
        """
        Text representation, furniture sorted by symbol:

        living room:
        C: 1, W: 3
        """
        if not self.chairs:
            return self.name or placeholder
        pairs = ", ".join(f"{symbol}: {self.chairs[symbol]}" for symbol in sorted(self.chairs))
        return f"{self.name or ''}:\n{pairs}"

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'chairs': {symbol: self.chairs[symbol] for symbol in sorted(self.chairs)},
        }

    def __str__(self) -> str:
        return self.render()


def parse_segment(text: str, config: ParserConfig = DEFAULT_CONFIG) -> Room:
    """
    Look for a title and furniture inside a segment's text.

    Args:
        text: Raw segment content
        config: Symbol configuration providing the furniture alphabet

    Returns:
        Room fragment for this text

    Raises:
        MalformedTitle: if a title is still open at the end of the text
        UnknownSymbol: if a character outside a title is not recognized
    """
    room = Room()
    title = ""
    inside_title = False

    for position, char in enumerate(text):
        kind = classify(char, config)
        if kind is CharClass.TITLE_OPEN:
            if not inside_title:
                title = ""
            inside_title = True
        elif kind is CharClass.TITLE_CLOSE:
            if inside_title:
                inside_title = False
                if title.strip():
                    room.name = title.strip()
        elif inside_title:
            title += char
        elif kind is CharClass.FURNITURE:
            room.chairs[char] = room.chairs.get(char, 0) + 1
        elif kind is CharClass.WHITESPACE:
            continue
        else:
            raise UnknownSymbol(char, position, text)

    if inside_title:
        raise MalformedTitle(title, text)

    return room

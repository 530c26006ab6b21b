"""
Floor Plan Symbols Module
==========================
Character alphabet of an ASCII floor plan:
1. Wall delimiters that bound room interiors
2. Furniture markers counted inside rooms
3. Title parentheses
4. A single classification function shared by the segmenter and the content parser
"""

from typing import FrozenSet
from dataclasses import dataclass, field, replace
from enum import Enum
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DELIMITERS = "+-|/\\"
FURNITURE_SYMBOLS = "WPSC"  # wooden, plastic, sofa, china
TRIM_CHARS = "+-"
TITLE_OPEN = "("
TITLE_CLOSE = ")"
EMPTY_ROOM_PLACEHOLDER = "(no data)"
TOTAL_ROOM_NAME = "total"


class CharClass(Enum):
    """Classification of a single floor plan character."""
    DELIMITER = "delimiter"
    FURNITURE = "furniture"
    WHITESPACE = "whitespace"
    TITLE_OPEN = "title_open"
    TITLE_CLOSE = "title_close"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for segmenting and parsing a floor plan."""
    delimiters: FrozenSet[str] = field(default_factory=lambda: frozenset(DELIMITERS))
    furniture: FrozenSet[str] = field(default_factory=lambda: frozenset(FURNITURE_SYMBOLS))
    trim_chars: str = TRIM_CHARS
    placeholder: str = EMPTY_ROOM_PLACEHOLDER
    total_name: str = TOTAL_ROOM_NAME

    def with_furniture(self, symbols: str) -> "ParserConfig":
        """
        Return a copy of this config using another furniture alphabet.

        Args:
            symbols: One character per furniture kind, e.g. "WPSC"

        Raises:
            ValueError: if a symbol would collide with walls, titles or whitespace
        """
        if not symbols:
            raise ValueError("Furniture alphabet must not be empty")
        for symbol in symbols:
            if symbol.isspace() or symbol in self.delimiters or symbol in (TITLE_OPEN, TITLE_CLOSE):
                raise ValueError(f"Invalid furniture symbol: {symbol!r}")
        return replace(self, furniture=frozenset(symbols))

    @classmethod
    def from_furniture(cls, symbols: str) -> "ParserConfig":
        return cls().with_furniture(symbols)


DEFAULT_CONFIG = ParserConfig()


def classify(char: str, config: ParserConfig = DEFAULT_CONFIG) -> CharClass:
    """Classify one character of a floor plan line."""
    if char in config.delimiters:
        return CharClass.DELIMITER
    if char in config.furniture:
        return CharClass.FURNITURE
    if char == TITLE_OPEN:
        return CharClass.TITLE_OPEN
    if char == TITLE_CLOSE:
        return CharClass.TITLE_CLOSE
    if char.isspace():
        return CharClass.WHITESPACE
    return CharClass.INVALID

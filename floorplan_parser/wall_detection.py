"""
Wall Detection Module
======================
Finds the walls drawn on a single line of an ASCII floor plan and returns
the interior spans between them:
1. Delimiter scanning (+ - | / \\)
2. Interior span extraction with column offsets
3. Trimming of horizontal wall runs from the span text
"""

from typing import List, Iterable
from dataclasses import dataclass
import logging

from .symbols import CharClass, ParserConfig, DEFAULT_CONFIG, classify

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """Interior text between two walls on one line, addressed by column."""
    start: int
    content: str

    @property
    def length(self) -> int:
        return len(self.content)

    @property
    def end(self) -> int:
        """Column just past the last character of the segment."""
        return self.start + len(self.content)

    def intersects(self, other: "Segment") -> bool:
        """Check if the column spans of two segments overlap."""
        return not (self.end <= other.start or other.end <= self.start)

    def is_in(self, segments: Iterable["Segment"]) -> bool:
        """Check if a structurally identical segment is in segments."""
        return any(self == seg for seg in segments)

    def __str__(self) -> str:
        return f"[{self.start}: '{self.content}']"


class LineSegmenter:
    """
    Splits floor plan lines into interior segments.
    Anything before the first wall or after the last wall is outside the plan.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        """
        Initialize the segmenter.

        Args:
            config: Symbol configuration providing the delimiter set
        """
        self.config = config

    def split(self, line: str) -> List[Segment]:
        """
        Split a line into the segments enclosed by delimiters.

        Args:
            line: One raw line of the floor plan

        Returns:
            Segments ordered by column
        """
        segments = []
        start = -1
        found_first_delimiter = False

        for i, char in enumerate(line):
            if classify(char, self.config) is CharClass.DELIMITER:
                if start >= 0 and found_first_delimiter and i > start:
                    content = line[start:i].strip(self.config.trim_chars)
                    segments.append(Segment(start, content))
                found_first_delimiter = True
                start = i + 1
                continue
            if start == -1 and found_first_delimiter:
                start = i

        return segments


def split_line(line: str, config: ParserConfig = DEFAULT_CONFIG) -> List[Segment]:
    """Convenience function for segmenting a single line."""
    return LineSegmenter(config).split(line)

"""Errors raised while parsing a floor plan."""

from typing import Optional


class FloorPlanError(Exception):
    """Base class for floor plan parsing errors."""


class SegmentParseError(FloorPlanError, ValueError):
    """The text inside a segment could not be parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class MalformedTitle(SegmentParseError):
    """A room title was opened with '(' and never closed."""

    def __init__(self, title: str, text: str = ""):
        super().__init__(f"room title did not close. It starts with '{title}'", text)
        self.title = title


class UnknownSymbol(SegmentParseError):
    """A character outside any title is neither furniture, whitespace nor a parenthesis."""

    def __init__(self, symbol: str, position: int, text: str = ""):
        super().__init__(f"strange character encountered: {symbol}", text)
        self.symbol = symbol
        self.position = position


class LineParseError(FloorPlanError):
    """A segment on a given input line failed to parse."""

    def __init__(self, line_number: int, segment: str, cause: Optional[SegmentParseError] = None):
        message = f"[line {line_number}] [segment: '{segment}'] error parsing segment"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.line_number = line_number
        self.segment = segment

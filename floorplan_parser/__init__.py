# ASCII Floor Plan Parser Package
# Line by line room detection for floor plans drawn in plain text

__version__ = "1.0.0"

# Import main classes for easy access
from .symbols import ParserConfig, CharClass, DEFAULT_CONFIG, classify
from .wall_detection import Segment, LineSegmenter, split_line
from .segment_matching import overlaps, multiple_overlaps, segments_diff
from .room_detection import Room, parse_segment
from .reporting import render, totals
from .pipeline import FloorPlanParser, OpenRoom, parse_floorplan
from .exceptions import (
    FloorPlanError,
    SegmentParseError,
    MalformedTitle,
    UnknownSymbol,
    LineParseError,
)

__all__ = [
    'ParserConfig',
    'CharClass',
    'DEFAULT_CONFIG',
    'classify',
    'Segment',
    'LineSegmenter',
    'split_line',
    'overlaps',
    'multiple_overlaps',
    'segments_diff',
    'Room',
    'parse_segment',
    'render',
    'totals',
    'FloorPlanParser',
    'OpenRoom',
    'parse_floorplan',
    'FloorPlanError',
    'SegmentParseError',
    'MalformedTitle',
    'UnknownSymbol',
    'LineParseError',
]

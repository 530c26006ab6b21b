"""
Floor Plan Parsing Pipeline
============================
Main entry point for floor plan parsing.
Feeds the plan line by line through wall detection, segment matching and
room detection, keeping track of which rooms are still open.
"""

import json
import logging
import sys
from typing import Dict, Any, Iterable, List, Optional
from dataclasses import dataclass, field

from .exceptions import LineParseError, SegmentParseError
from .reporting import render, report_to_dict
from .room_detection import Room
from .segment_matching import multiple_overlaps
from .symbols import ParserConfig, DEFAULT_CONFIG, FURNITURE_SYMBOLS
from .wall_detection import LineSegmenter, Segment

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class OpenRoom:
    """A room whose walls were still present on the last line."""
    room_id: int
    room: Room
    # Segments the room occupied on the most recent line only. New lines are
    # matched against these to find out which of their segments belong here.
    last_segments: List[Segment] = field(default_factory=list)


class FloorPlanParser:
    """
    Line by line room tracker.

    Each line is split into segments. An open room claims every segment that
    overlaps the segments it held on the previous line; a room that claims
    nothing is closed. Segments nobody claims open new rooms. Rooms are
    matched in the order they were opened, and a claimed segment is not
    offered to later rooms on the same line.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        """
        Initialize the parser.

        Args:
            config: Symbol configuration shared by all components
        """
        self.config = config
        self.segmenter = LineSegmenter(config)
        self.line = 0
        self._open_rooms: Dict[int, OpenRoom] = {}
        self._closed_rooms: List[Room] = []
        self._next_room_id = 0

    @property
    def open_rooms(self) -> List[OpenRoom]:
        return list(self._open_rooms.values())

    @property
    def closed_rooms(self) -> List[Room]:
        return list(self._closed_rooms)

    def has_open_rooms(self) -> bool:
        return len(self._open_rooms) > 0

    def ingest(self, line: str) -> None:
        """
        Process one line of the floor plan.

        Changes already applied to rooms earlier on a failing line are kept.

        Raises:
            LineParseError: if a segment on this line cannot be parsed
        """
        self.line += 1
        pool = self.segmenter.split(line)
        logger.debug(f"Line {self.line}: {len(pool)} segments, {len(self._open_rooms)} open rooms")

        for room_id in list(self._open_rooms):
            open_room = self._open_rooms[room_id]
            overlapping, rest = multiple_overlaps(open_room.last_segments, pool)
            if not overlapping:
                self._close_room(room_id)
                continue

            self._absorb(open_room.room, overlapping)
            open_room.last_segments = overlapping
            pool = rest

        for segment in pool:
            room = self._absorb(Room(), [segment])
            self._open_room(room, [segment])

    def ingest_all(self, lines: Iterable[str]) -> None:
        """
        Process lines until the input is exhausted.

        Args:
            lines: Any iterable of lines, e.g. an open text file

        Raises:
            LineParseError: on the first line that fails to parse
        """
        for line in lines:
            self.ingest(line.rstrip("\r\n"))

        logger.info(
            f"Parsed {self.line} lines: {len(self._closed_rooms)} closed rooms, "
            f"{len(self._open_rooms)} still open"
        )

    def render(self) -> str:
        """Text report of the closed rooms."""
        return render(self._closed_rooms, self.config)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'lines': self.line,
            'open_rooms': len(self._open_rooms),
        }
        result.update(report_to_dict(self._closed_rooms, self.config))
        return result

    def _absorb(self, room: Room, segments: List[Segment]) -> Room:
        try:
            return room.absorb(segments, self.config)
        except SegmentParseError as e:
            raise LineParseError(self.line, e.text, e) from e

    def _open_room(self, room: Room, segments: List[Segment]) -> None:
        room_id = self._next_room_id
        self._next_room_id += 1
        self._open_rooms[room_id] = OpenRoom(room_id, room, segments)
        logger.debug(f"Line {self.line}: opened room #{room_id} at {segments[0]}")

    def _close_room(self, room_id: int) -> None:
        open_room = self._open_rooms.pop(room_id)
        self._closed_rooms.append(open_room.room)
        logger.debug(f"Line {self.line}: closed room #{room_id} ({open_room.room.name or 'unnamed'})")


def parse_floorplan(path: str, config: ParserConfig = DEFAULT_CONFIG) -> FloorPlanParser:
    """
    Convenience function for parsing a floor plan file.

    Args:
        path: Path to the floor plan text file
        config: Symbol configuration

    Returns:
        Parser holding the rooms found in the file
    """
    parser = FloorPlanParser(config)
    with open(path, encoding="utf-8", errors="replace") as handle:
        parser.ingest_all(handle)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface."""
    import argparse

    arg_parser = argparse.ArgumentParser(description="ASCII Floor Plan Room Parser")
    arg_parser.add_argument("input", nargs="?", help="Input floor plan text file")
    arg_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    arg_parser.add_argument("--furniture", default=FURNITURE_SYMBOLS,
                            help=f"Furniture symbols to count (default: {FURNITURE_SYMBOLS})")
    arg_parser.add_argument("--verbose", "-v", action="store_true", help="Log every line")

    args = arg_parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.input is None:
        print("Missing input file argument")
        return 1

    try:
        config = DEFAULT_CONFIG.with_furniture(args.furniture)
    except ValueError as e:
        arg_parser.error(str(e))

    try:
        handle = open(args.input, encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Could not open file {args.input}: {e}")
        return 1

    parser = FloorPlanParser(config)
    with handle:
        try:
            parser.ingest_all(handle)
        except LineParseError as e:
            # Reported without the room report, exit status stays 0
            logger.error(f"Parsing failed on line {e.line_number}")
            print(f"Error processing input: {e}")
            return 0

    if parser.has_open_rooms():
        logger.warning(f"{len(parser.open_rooms)} rooms were never closed")

    if args.json:
        print(json.dumps(parser.to_dict(), indent=2))
    else:
        print(parser.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())

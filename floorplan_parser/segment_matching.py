"""
Segment Matching Module
========================
Matches the segments of a new line against the segments a room occupied
on the previous line:
1. Span overlap queries
2. Pairwise overlap between two segment sets (wall merges keep duplicates)
3. Structural set difference for the unclaimed residual
"""

import numpy as np
from typing import List, Tuple, Sequence
import logging

from .wall_detection import Segment

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _spans(segments: Sequence[Segment]) -> Tuple[np.ndarray, np.ndarray]:
    """Return (starts, ends) arrays for a sequence of segments."""
    starts = np.fromiter((s.start for s in segments), dtype=np.int64, count=len(segments))
    ends = np.fromiter((s.end for s in segments), dtype=np.int64, count=len(segments))
    return starts, ends


def _overlap_matrix(set_a: Sequence[Segment], set_b: Sequence[Segment]) -> np.ndarray:
    """
    Boolean matrix of shape (len(set_b), len(set_a)).
    Entry [i, j] is True when set_b[i] and set_a[j] overlap.
    """
    a_starts, a_ends = _spans(set_a)
    b_starts, b_ends = _spans(set_b)
    disjoint = (a_ends[np.newaxis, :] <= b_starts[:, np.newaxis]) | \
               (b_ends[:, np.newaxis] <= a_starts[np.newaxis, :])
    return ~disjoint


def overlaps(start: int, length: int, segments: Sequence[Segment]) -> List[Segment]:
    """
    Return all segments that overlap the span [start, start + length).

    Touching spans never overlap. A zero-length span strictly inside a
    segment does overlap it, as the span formula gives.
    """
    if not segments:
        return []

    starts, ends = _spans(segments)
    mask = ~((ends <= start) | (start + length <= starts))
    return [segment for segment, hit in zip(segments, mask) if hit]


def segments_diff(set_a: Sequence[Segment], set_b: Sequence[Segment]) -> List[Segment]:
    """Segments of set_a that are not structurally present in set_b."""
    if not set_b:
        return list(set_a)
    return [segment for segment in set_a if not segment.is_in(set_b)]


def multiple_overlaps(
    set_a: Sequence[Segment],
    set_b: Sequence[Segment]
) -> Tuple[List[Segment], List[Segment]]:
    """
    Find the segments of set_b that overlap any segment of set_a.

    A segment of set_b is reported once per segment of set_a it overlaps,
    so a new segment spanning two old ones (walls merging) appears twice.

    Args:
        set_a: Segments a room occupied on the previous line
        set_b: Candidate segments of the current line

    Returns:
        Tuple of (overlapping, non_overlapping)
    """
    if not set_a or not set_b:
        return [], list(set_b)

    matrix = _overlap_matrix(set_a, set_b)
    overlapping = []
    for i, row in enumerate(matrix):
        overlapping.extend([set_b[i]] * int(np.count_nonzero(row)))

    non_overlapping = segments_diff(set_b, overlapping)
    return overlapping, non_overlapping

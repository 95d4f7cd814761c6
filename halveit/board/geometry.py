"""
Dartboard layout: segment order, adjacency and ring colors.
"""
from types import MappingProxyType
from typing import List, Optional
import logging

import numpy as np

from halveit.core import BULL_NUMBER, MISS_NUMBER, Modifier

logger = logging.getLogger(__name__)

# Official sector sequence (clockwise from top)
BOARD_SEQUENCE = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                  3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

BLACK = "black"
WHITE = "white"
RED = "red"
GREEN = "green"


def _build_neighbours(sequence) -> MappingProxyType:
    """Map each segment to its (counter-clockwise, clockwise) neighbours."""
    seq = np.asarray(sequence, dtype=np.int64)
    ccw = np.roll(seq, 1)
    cw = np.roll(seq, -1)
    return MappingProxyType({
        int(n): (int(left), int(right))
        for n, left, right in zip(seq, ccw, cw)
    })


def _build_colors(sequence, even: str, odd: str) -> MappingProxyType:
    """Alternate two colors around the board, starting at the top sector."""
    return MappingProxyType({
        n: even if i % 2 == 0 else odd
        for i, n in enumerate(sequence)
    })


_NEIGHBOURS = _build_neighbours(BOARD_SEQUENCE)

# Single areas alternate black/white; double and triple rings are red on
# black segments and green on white ones.
SINGLE_COLORS = _build_colors(BOARD_SEQUENCE, BLACK, WHITE)
RING_COLORS = _build_colors(BOARD_SEQUENCE, RED, GREEN)


def get_adjacent_numbers(number: int) -> List[int]:
    """
    Get the two board neighbours of a segment.

    Args:
        number: Segment number (1-20)

    Returns:
        [counter_clockwise, clockwise] neighbours, or [] for miss, bull
        or any number that is not on the board
    """
    neighbours = _NEIGHBOURS.get(number)
    if neighbours is None:
        return []
    return list(neighbours)


def is_adjacent(a: int, b: int) -> bool:
    """Check whether two segments sit next to each other on the board."""
    return b in _NEIGHBOURS.get(a, ())


def get_dart_color(dart) -> Optional[str]:
    """
    Get the color of the board area a dart landed in.

    Singles use the segment color (black/white), doubles and triples the
    ring color (red/green). Single bull is green, double bull red.

    Args:
        dart: Dart-like record with number and modifier

    Returns:
        Color name, or None for a miss or an unknown number

    Raises:
        ValueError: If given a triple bull
    """
    if dart.number == MISS_NUMBER:
        return None

    if dart.number == BULL_NUMBER:
        if dart.modifier == Modifier.TRIPLE:
            raise ValueError("Bull has no triple ring")
        return RED if dart.modifier == Modifier.DOUBLE else GREEN

    if dart.modifier in (Modifier.DOUBLE, Modifier.TRIPLE):
        return RING_COLORS.get(dart.number)
    return SINGLE_COLORS.get(dart.number)

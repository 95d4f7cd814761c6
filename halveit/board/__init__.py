"""
Board module - segment order, adjacency and colors.
"""
from .geometry import (
    BOARD_SEQUENCE,
    SINGLE_COLORS,
    RING_COLORS,
    BLACK,
    WHITE,
    RED,
    GREEN,
    get_adjacent_numbers,
    is_adjacent,
    get_dart_color,
)

__all__ = [
    "BOARD_SEQUENCE",
    "SINGLE_COLORS",
    "RING_COLORS",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "get_adjacent_numbers",
    "is_adjacent",
    "get_dart_color",
]

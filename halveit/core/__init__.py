"""
Core module - shared data types, YAML loading and configuration.
"""
from .types import (
    MISS_NUMBER,
    BULL_NUMBER,
    Modifier,
    get_multiplier,
    Dart,
    create_dart,
    ContractResult,
    KillerEvent,
    KillerPlayerState,
    KillerUpdate,
    ClockTurnResult,
    ClockPlayerState,
    ClockWinner,
)
from .io_utils import load_yaml
from .config_loader import Config

__all__ = [
    # Types
    "MISS_NUMBER",
    "BULL_NUMBER",
    "Modifier",
    "get_multiplier",
    "Dart",
    "create_dart",
    "ContractResult",
    "KillerEvent",
    "KillerPlayerState",
    "KillerUpdate",
    "ClockTurnResult",
    "ClockPlayerState",
    "ClockWinner",
    # I/O
    "load_yaml",
    # Config
    "Config",
]

"""
Game module - contract rules and game modes (Halve-It, Killer, Clock).
"""
from .base import GameMode
from .contracts import (
    CONTRACT_IDS,
    NUMBER_CONTRACTS,
    VALIDATION_RULES,
    ValidationRule,
    are_adjacent,
    are_consecutive,
    meets_contract,
    score_contract,
    get_valid_contracts,
    get_validation_rule,
    validate_score,
)
from .killer import (
    KILLER_MAX_LIVES,
    KILLER_ELIMINATION_THRESHOLD,
    KillerMode,
)
from .clock import (
    CLOCK_POSITION_BULL,
    CLOCK_POSITION_FINISHED,
    CLOCK_MAX_TURNS,
    ClockMode,
    get_target_name,
)
from .game_modes import ClassicMode, YahtzeeMode, create_game_mode

__all__ = [
    "GameMode",
    # Contracts
    "CONTRACT_IDS",
    "NUMBER_CONTRACTS",
    "VALIDATION_RULES",
    "ValidationRule",
    "are_adjacent",
    "are_consecutive",
    "meets_contract",
    "score_contract",
    "get_valid_contracts",
    "get_validation_rule",
    "validate_score",
    # Modes
    "ClassicMode",
    "YahtzeeMode",
    "KillerMode",
    "ClockMode",
    "create_game_mode",
    # Killer
    "KILLER_MAX_LIVES",
    "KILLER_ELIMINATION_THRESHOLD",
    # Clock
    "CLOCK_POSITION_BULL",
    "CLOCK_POSITION_FINISHED",
    "CLOCK_MAX_TURNS",
    "get_target_name",
]

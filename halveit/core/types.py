"""
Core data types for the darts rules engine.
Defines the records passed between the board, contract and game modules.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


MISS_NUMBER = 0
BULL_NUMBER = 25


class Modifier(str, Enum):
    """Ring a dart landed in."""
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"


def get_multiplier(modifier) -> int:
    """
    Get the multiplier for a ring modifier.

    Args:
        modifier: "single", "double" or "triple" (Modifier or plain string)

    Returns:
        2 for double, 3 for triple, 1 for anything else
    """
    if modifier == Modifier.DOUBLE:
        return 2
    if modifier == Modifier.TRIPLE:
        return 3
    return 1


@dataclass(frozen=True)
class Dart:
    """
    A single thrown dart.

    number is 1-20 for a board segment, 25 for the bull and 0 for a miss.
    score is derived from number and modifier unless given explicitly
    (manual scoring flows).
    """
    number: int
    modifier: Modifier = Modifier.SINGLE
    score: Optional[int] = None

    def __post_init__(self):
        try:
            modifier = Modifier(self.modifier)
        except ValueError:
            raise ValueError(f"Unknown dart modifier: {self.modifier!r}") from None
        if self.number == BULL_NUMBER and modifier is Modifier.TRIPLE:
            raise ValueError("Bull has no triple ring")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "modifier", modifier)
        if self.score is None:
            object.__setattr__(self, "score", self._derive_score())

    def _derive_score(self) -> int:
        if self.number == MISS_NUMBER:
            return 0
        if self.number == BULL_NUMBER:
            return 50 if self.modifier is Modifier.DOUBLE else 25
        return self.number * self.multiplier

    @property
    def multiplier(self) -> int:
        return get_multiplier(self.modifier)

    @property
    def is_miss(self) -> bool:
        return self.number == MISS_NUMBER

    @property
    def is_bull(self) -> bool:
        return self.number == BULL_NUMBER


def create_dart(number: int, modifier="single", score: Optional[int] = None) -> Dart:
    """
    Create a dart record.

    Args:
        number: Number hit (1-20, 25 for bull, 0 for miss)
        modifier: "single", "double" or "triple"
        score: Explicit score override (None = derive from number/modifier)

    Returns:
        Dart with its score filled in
    """
    return Dart(number=number, modifier=Modifier(modifier), score=score)


@dataclass(frozen=True)
class ContractResult:
    """Outcome of evaluating one turn against one contract."""
    contract_id: str
    qualified: bool
    score: int


@dataclass(frozen=True)
class KillerEvent:
    """
    A single life change produced by a Killer turn.

    reason is one of "own", "adjacent", "killed", "adj-killed".
    """
    player: str
    delta: int
    reason: str


@dataclass(frozen=True)
class KillerPlayerState:
    """Per-player Killer snapshot."""
    number: int
    lives: int = 0
    is_killer: bool = False
    eliminated: bool = False


@dataclass(frozen=True)
class KillerUpdate:
    """Fresh Killer maps produced by applying a turn's events."""
    lives: Dict[str, int]
    is_killer: Dict[str, bool]
    eliminated: Dict[str, bool]
    newly_eliminated: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ClockTurnResult:
    """Outcome of a Clock turn."""
    end_position: int
    last_dart_hit: bool = False
    finished: bool = False
    extra_turn: bool = False


@dataclass(frozen=True)
class ClockPlayerState:
    """
    Per-player Clock snapshot.

    position is 1-10 for a number target, 11 for Bull and 12 once finished.
    """
    position: int = 1
    turns_taken: int = 0
    finish_rank: Optional[int] = None

    @property
    def finished(self) -> bool:
        return self.finish_rank is not None


@dataclass(frozen=True)
class ClockWinner:
    """Winner(s) of a Clock game."""
    winners: List[str]
    is_tie: bool = False

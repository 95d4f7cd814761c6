"""
Base class shared by all game modes.
"""
from abc import ABC, abstractmethod


class GameMode(ABC):
    """
    Abstract base class for game modes.

    Modes hold rule parameters only. Player state is owned by the caller
    and passed in as snapshots, so one instance can serve many games.
    """

    #: Darts a player throws per visit
    darts_per_turn: int = 3

    @abstractmethod
    def get_name(self) -> str:
        """Get game mode name."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

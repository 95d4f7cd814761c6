"""
Clock game mode.

Rules:
- Hit 1, then 2, 3, ... 10, then Bull to finish
- Doubles and triples advance 2 and 3 positions, but never past Bull
- At Bull, single or double bull finishes
- Each dart is checked against the target current at that dart
- If the last dart of a turn hits (without finishing), the player throws again
- First player to finish wins; otherwise the furthest player after the
  turn limit wins, ties possible
"""
from dataclasses import replace
from typing import Mapping, Optional, Sequence, Tuple
import logging

from halveit.core import (
    BULL_NUMBER,
    Config,
    ClockPlayerState,
    ClockTurnResult,
    ClockWinner,
    get_multiplier,
)
from .base import GameMode

logger = logging.getLogger(__name__)

# Target positions: 1-10 = numbers, 11 = Bull, 12 = finished
CLOCK_POSITION_START = 1
CLOCK_POSITION_LAST_NUMBER = 10
CLOCK_POSITION_BULL = 11
CLOCK_POSITION_FINISHED = 12
CLOCK_MAX_TURNS = 10


def get_target_name(position: int) -> str:
    """Get the display name for a clock position."""
    if position >= CLOCK_POSITION_FINISHED:
        return "Finished"
    if position >= CLOCK_POSITION_BULL:
        return "Bull"
    return str(position)


class ClockMode(GameMode):
    """Round-the-clock rules over per-player positions."""

    def __init__(self, max_turns: int = CLOCK_MAX_TURNS):
        """
        Initialize Clock mode.

        Args:
            max_turns: Turns per player before the game is decided on position
        """
        self.max_turns = max_turns

    @classmethod
    def from_config(cls, config: Config) -> "ClockMode":
        """Build Clock mode from the `clock` config section."""
        return cls(max_turns=config.get("clock", "max_turns", CLOCK_MAX_TURNS))

    def get_name(self) -> str:
        """Get game mode name."""
        return "Clock"

    def process_turn(self, darts: Optional[Sequence], start_position: int) -> ClockTurnResult:
        """
        Play darts against a starting position.

        Darts after the one that finishes are ignored.

        Args:
            darts: Darts of the turn (1-3), in throw order
            start_position: Clock position before the turn

        Returns:
            ClockTurnResult with end position and extra-turn flag
        """
        if not darts:
            return ClockTurnResult(end_position=start_position)

        if start_position >= CLOCK_POSITION_FINISHED:
            return ClockTurnResult(end_position=CLOCK_POSITION_FINISHED, finished=True)

        pos = start_position
        last_dart_hit = False

        for dart in darts:
            if pos >= CLOCK_POSITION_FINISHED:
                break

            hit = False
            if pos <= CLOCK_POSITION_LAST_NUMBER:
                if dart.number == pos:
                    hit = True
                    # Cap at bull, never skip it
                    pos = min(pos + get_multiplier(dart.modifier), CLOCK_POSITION_BULL)
            elif dart.number == BULL_NUMBER:
                hit = True
                pos = CLOCK_POSITION_FINISHED

            last_dart_hit = hit

        finished = pos >= CLOCK_POSITION_FINISHED
        result = ClockTurnResult(
            end_position=pos,
            last_dart_hit=last_dart_hit,
            finished=finished,
            extra_turn=last_dart_hit and not finished,
        )
        logger.debug(f"Clock turn from {get_target_name(start_position)}: {result}")
        return result

    def get_preview_target(self, darts: Optional[Sequence], start_position: int) -> int:
        """
        Get the target for the next dart while a turn is being entered.

        Args:
            darts: Darts entered so far
            start_position: Player's clock position before the turn

        Returns:
            Position the next dart aims at
        """
        return self.process_turn(darts, start_position).end_position

    def get_progress(self, position: int, finished: bool = False) -> float:
        """Progress percentage (0-100) for a clock position."""
        if finished:
            return 100.0
        return (position - CLOCK_POSITION_START) / (CLOCK_POSITION_FINISHED - CLOCK_POSITION_START) * 100

    def apply_turn(
            self,
            state: ClockPlayerState,
            darts: Optional[Sequence],
            finish_rank: int
    ) -> Tuple[ClockPlayerState, ClockTurnResult]:
        """
        Advance a player's snapshot by one turn.

        A turn that earns an extra turn does not use up one of the
        player's turns.

        Args:
            state: Player snapshot before the turn
            darts: Darts of the turn
            finish_rank: Rank to record if this turn finishes (1 = first)

        Returns:
            (new snapshot, turn result)
        """
        if state.finished:
            return state, ClockTurnResult(end_position=CLOCK_POSITION_FINISHED, finished=True)

        result = self.process_turn(darts, state.position)
        turns_taken = state.turns_taken if result.extra_turn else state.turns_taken + 1
        new_state = replace(
            state,
            position=result.end_position,
            turns_taken=turns_taken,
            finish_rank=finish_rank if result.finished else None,
        )
        if result.finished:
            logger.info(f"Clock finished in {turns_taken} turns (rank {finish_rank})")
        return new_state, result

    def is_out_of_turns(self, state: ClockPlayerState) -> bool:
        """Check if a player has used all their turns."""
        return state.turns_taken >= self.max_turns

    def is_game_over(self, states: Mapping[str, ClockPlayerState]) -> bool:
        """Game ends when anyone finishes or everybody is out of turns."""
        if not states:
            return False
        if any(s.finished for s in states.values()):
            return True
        return all(self.is_out_of_turns(s) for s in states.values())

    def determine_winner(
            self,
            players: Sequence[str],
            positions: Mapping[str, int],
            finish_order: Optional[Sequence[str]] = None
    ) -> ClockWinner:
        """
        Decide the winner(s) of a Clock game.

        Args:
            players: All player names, in roster order
            positions: Player name -> clock position (missing = start)
            finish_order: Players in the order they finished

        Returns:
            ClockWinner; the first finisher wins outright, otherwise every
            player on the furthest position shares the win
        """
        if finish_order:
            logger.debug(f"Clock winner: {finish_order[0]}")
            return ClockWinner(winners=[finish_order[0]], is_tie=False)

        if not players:
            return ClockWinner(winners=[], is_tie=False)

        reached = {p: positions.get(p, CLOCK_POSITION_START) for p in players}
        best = max(reached.values())
        winners = [p for p in players if reached[p] == best]

        logger.debug(f"Clock turn limit reached, furthest at {get_target_name(best)}: {winners}")
        return ClockWinner(winners=winners, is_tie=len(winners) > 1)

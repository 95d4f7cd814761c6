"""
Killer game mode.

Rules:
- Each player picks a unique number (1-20)
- Hitting your own number gains 3 lives, a neighbouring number 1 life,
  times the ring multiplier
- At max lives (9) a player becomes a Killer and may attack: hitting an
  opponent's number costs them 3 lives, a neighbour of it 1 life
  (times the multiplier)
- Killer status counts from the dart after the one that earned it
- Lives are capped at 9; a player at -1 or below is eliminated
- Bull and misses are ignored
- Last player standing wins
"""
from collections import OrderedDict
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import logging

from halveit.core import (
    BULL_NUMBER,
    MISS_NUMBER,
    Config,
    KillerEvent,
    KillerPlayerState,
    KillerUpdate,
    get_multiplier,
)
from halveit.board import BOARD_SEQUENCE, get_adjacent_numbers
from .base import GameMode

logger = logging.getLogger(__name__)

KILLER_MAX_LIVES = 9
KILLER_ELIMINATION_THRESHOLD = -1

OWN = "own"
ADJACENT = "adjacent"
KILLED = "killed"
ADJ_KILLED = "adj-killed"

KillerState = Mapping[str, KillerPlayerState]


class KillerMode(GameMode):
    """Killer rules over immutable per-player snapshots."""

    def __init__(
            self,
            max_lives: int = KILLER_MAX_LIVES,
            elimination_threshold: int = KILLER_ELIMINATION_THRESHOLD
    ):
        """
        Initialize Killer mode.

        Args:
            max_lives: Lives cap, also the threshold for becoming a Killer
            elimination_threshold: Lives at or below which a player is out
        """
        self.max_lives = max_lives
        self.elimination_threshold = elimination_threshold

    @classmethod
    def from_config(cls, config: Config) -> "KillerMode":
        """Build Killer mode from the `killer` config section."""
        return cls(
            max_lives=config.get("killer", "max_lives", KILLER_MAX_LIVES),
            elimination_threshold=config.get(
                "killer", "elimination_threshold", KILLER_ELIMINATION_THRESHOLD),
        )

    def get_name(self) -> str:
        """Get game mode name."""
        return "Killer"

    def new_game(self, numbers: Mapping[str, int], starting_lives: int = 0) -> Dict[str, KillerPlayerState]:
        """
        Build the opening snapshot.

        Args:
            numbers: Player name -> chosen board number, in roster order
            starting_lives: Lives every player starts with

        Returns:
            Ordered mapping of player name -> KillerPlayerState

        Raises:
            ValueError: If a number is not on the board or is taken twice
        """
        taken = set()
        for player, number in numbers.items():
            if number not in BOARD_SEQUENCE:
                raise ValueError(f"{player}: {number} is not a board number")
            if number in taken:
                raise ValueError(f"{player}: number {number} already taken")
            taken.add(number)

        return OrderedDict(
            (player, KillerPlayerState(number=number, lives=starting_lives))
            for player, number in numbers.items()
        )

    def process_turn(self, thrower: str, darts: Optional[Sequence], state: KillerState) -> List[KillerEvent]:
        """
        Resolve a turn into life change events.

        Each dart is checked against the thrower's own number and its
        neighbours for gains, and, if the thrower was already a Killer
        before that dart, against every live opponent for damage.

        Args:
            thrower: Name of the player throwing
            darts: Darts of the turn, in throw order
            state: Current snapshot (player name -> KillerPlayerState)

        Returns:
            Events in the order they happened
        """
        events: List[KillerEvent] = []
        me = state[thrower]
        my_adjacent = get_adjacent_numbers(me.number)
        is_killer = me.is_killer
        running_lives = me.lives

        for dart in darts or ():
            if dart.number in (MISS_NUMBER, BULL_NUMBER):
                continue

            multiplier = get_multiplier(dart.modifier)
            was_killer = is_killer

            gained = 0
            if dart.number == me.number:
                gained = 3 * multiplier
                events.append(KillerEvent(thrower, gained, OWN))
            elif dart.number in my_adjacent:
                gained = 1 * multiplier
                events.append(KillerEvent(thrower, gained, ADJACENT))

            running_lives += gained
            if not is_killer and running_lives >= self.max_lives:
                is_killer = True
                logger.debug(f"{thrower} becomes a Killer on {dart.number}")

            if not was_killer:
                continue

            for other, other_state in state.items():
                if other == thrower or other_state.eliminated:
                    continue
                if dart.number == other_state.number:
                    events.append(KillerEvent(other, -3 * multiplier, KILLED))
                elif dart.number in get_adjacent_numbers(other_state.number):
                    events.append(KillerEvent(other, -1 * multiplier, ADJ_KILLED))

        logger.debug(f"{thrower} turn events: {events}")
        return events

    def apply_changes(
            self,
            events: Sequence[KillerEvent],
            lives: Mapping[str, int],
            is_killer: Mapping[str, bool],
            eliminated: Mapping[str, bool]
    ) -> KillerUpdate:
        """
        Apply a turn's events to the life, killer and elimination maps.

        Deltas are summed per player before the cap is applied. Inputs
        are copied, never mutated.

        Args:
            events: Events from process_turn
            lives: Player name -> lives
            is_killer: Player name -> killer status
            eliminated: Player name -> eliminated status

        Returns:
            KillerUpdate with fresh maps and the players knocked out this turn
        """
        new_lives = dict(lives)
        new_is_killer = dict(is_killer)
        new_eliminated = dict(eliminated)

        totals: Dict[str, int] = {}
        for event in events:
            totals[event.player] = totals.get(event.player, 0) + event.delta

        for player, delta in totals.items():
            new_lives[player] = min(new_lives.get(player, 0) + delta, self.max_lives)

        for player, player_lives in new_lives.items():
            if not new_eliminated.get(player, False) and player_lives >= self.max_lives:
                new_is_killer[player] = True

        newly_eliminated = []
        for player, player_lives in new_lives.items():
            if not new_eliminated.get(player, False) and player_lives <= self.elimination_threshold:
                new_eliminated[player] = True
                newly_eliminated.append(player)
                logger.info(f"{player} eliminated ({player_lives} lives)")

        return KillerUpdate(
            lives=new_lives,
            is_killer=new_is_killer,
            eliminated=new_eliminated,
            newly_eliminated=newly_eliminated,
        )

    def apply_turn(
            self,
            state: KillerState,
            events: Sequence[KillerEvent]
    ) -> Tuple[Dict[str, KillerPlayerState], List[str]]:
        """
        Reduce a snapshot and a turn's events to the next snapshot.

        Args:
            state: Snapshot before the turn
            events: Events from process_turn

        Returns:
            (new snapshot, players eliminated this turn)
        """
        update = self.apply_changes(
            events,
            {p: s.lives for p, s in state.items()},
            {p: s.is_killer for p, s in state.items()},
            {p: s.eliminated for p, s in state.items()},
        )
        new_state = OrderedDict(
            (player, KillerPlayerState(
                number=s.number,
                lives=update.lives[player],
                is_killer=update.is_killer[player],
                eliminated=update.eliminated[player],
            ))
            for player, s in state.items()
        )
        return new_state, update.newly_eliminated

    def is_game_over(self, players: Sequence[str], eliminated: Mapping[str, bool]) -> bool:
        """Check if 1 or fewer players are still alive."""
        return len(_alive(players, eliminated)) <= 1

    def get_winner(self, players: Sequence[str], eliminated: Mapping[str, bool]) -> Optional[str]:
        """
        Get the last player standing.

        Returns:
            Winner name, or None while several (or no) players are alive
        """
        alive = _alive(players, eliminated)
        if len(alive) == 1:
            logger.debug(f"Killer winner: {alive[0]}")
            return alive[0]
        return None


def _alive(players: Sequence[str], eliminated: Mapping[str, bool]) -> List[str]:
    return [p for p in players if not eliminated.get(p, False)]

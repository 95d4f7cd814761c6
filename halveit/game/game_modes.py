"""
Halve-It game modes (Classic, Yahtzee) and the mode factory.
"""
from typing import Iterable, List, Optional, Sequence
import logging

from halveit.core import Config, ContractResult
from .base import GameMode
from .contracts import (
    CONTRACT_IDS,
    meets_contract,
    score_contract,
    get_valid_contracts,
)
from .killer import KillerMode
from .clock import ClockMode

logger = logging.getLogger(__name__)


class ContractMode(GameMode):
    """Common turn evaluation for the contract-based modes."""

    def evaluate_turn(self, darts: Optional[Sequence], contract_id: str) -> ContractResult:
        """
        Evaluate a turn against one contract.

        Args:
            darts: Darts of the turn
            contract_id: Contract the turn is played for

        Returns:
            ContractResult with qualification and score (0 if not qualified)
        """
        qualified = meets_contract(darts, contract_id)
        score = score_contract(darts, contract_id) if qualified else 0
        logger.debug(f"{self.get_name()} {contract_id}: qualified={qualified}, score={score}")
        return ContractResult(contract_id=contract_id, qualified=qualified, score=score)


class ClassicMode(ContractMode):
    """
    Classic Halve-It.

    Rules:
    - Contracts are played in fixed order, one per round
    - The capital round sets the starting score
    - Meeting a contract adds its score, failing it halves the score
    """

    def get_name(self) -> str:
        """Get game mode name."""
        return "Halve-It"

    @property
    def contract_order(self) -> Sequence[str]:
        return CONTRACT_IDS

    def next_capital(self, capital: int, darts: Optional[Sequence], contract_id: str) -> int:
        """
        Compute a player's running score after a round.

        Args:
            capital: Score before the round
            darts: Darts of the turn
            contract_id: Contract of the round

        Returns:
            New running score (halved, rounded down, on a failed contract)
        """
        result = self.evaluate_turn(darts, contract_id)

        if contract_id == 'capital':
            return result.score
        if result.qualified:
            return capital + result.score
        return capital // 2


class YahtzeeMode(ContractMode):
    """
    Yahtzee-style Halve-It.

    Rules:
    - Each turn the player picks any contract not used yet
    - Only contracts the turn qualifies for may be picked
    """

    def get_name(self) -> str:
        """Get game mode name."""
        return "Halve-It (Yahtzee)"

    def valid_contracts(self, darts: Optional[Sequence], used: Iterable[str] = ()) -> List[str]:
        """
        List the contracts the player can still take with this turn.

        Args:
            darts: Darts of the turn
            used: Contract IDs already taken by the player

        Returns:
            Qualifying, unused contract IDs in play order
        """
        taken = set(used)
        return [cid for cid in get_valid_contracts(darts) if cid not in taken]


_MODES = {
    "classic": lambda config: ClassicMode(),
    "yahtzee": lambda config: YahtzeeMode(),
    "killer": KillerMode.from_config,
    "clock": ClockMode.from_config,
}


def create_game_mode(name: str, config: Optional[Config] = None) -> GameMode:
    """
    Create a game mode by name.

    Args:
        name: "classic", "yahtzee", "killer" or "clock"
        config: Rule configuration (None = defaults)

    Returns:
        Configured game mode

    Raises:
        ValueError: If the mode name is unknown
    """
    factory = _MODES.get(name.lower())
    if factory is None:
        raise ValueError(f"Unknown game mode: {name!r}")

    mode = factory(config or Config())
    logger.info(f"Game mode created: {mode.get_name()}")
    return mode

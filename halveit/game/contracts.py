"""
Halve-It contracts: qualification, scoring and manual score validation.

Shared by Classic mode (one fixed contract per round) and Yahtzee mode
(player picks any still-open contract the turn qualifies for).
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence
import logging

from halveit.core import BULL_NUMBER, MISS_NUMBER, Modifier
from halveit.board import BOARD_SEQUENCE, get_dart_color

logger = logging.getLogger(__name__)

# Contract IDs in order of play
CONTRACT_IDS = ('capital', '20', 'side', '19', '3row', '18', 'color', '17',
                'double', '16', 'triple', '15', '57', '14', 'bull')

NUMBER_CONTRACTS = ('20', '19', '18', '17', '16', '15', '14')

DARTS_PER_TURN = 3
TARGET_TOTAL = 57
MIN_COLORS = 3


def _is_single_bull(dart) -> bool:
    return dart.number == BULL_NUMBER and dart.modifier == Modifier.SINGLE


def _total(darts) -> int:
    return sum(d.score for d in darts)


def are_adjacent(dart1, dart2, dart3) -> bool:
    """
    Check if 3 darts hit neighbouring segments.

    Single bull counts as adjacent to everything; double bull and misses
    are dropped, so they can never help complete a side.

    Args:
        dart1, dart2, dart3: Darts of the turn

    Returns:
        True if the three numbers occupy 3 consecutive board positions
    """
    darts = (dart1, dart2, dart3)
    if any(_is_single_bull(d) for d in darts):
        return True

    nums = {d.number for d in darts if d.number not in (MISS_NUMBER, BULL_NUMBER)}
    if len(nums) < 3:
        return False

    size = len(BOARD_SEQUENCE)
    for i in range(size):
        window = {BOARD_SEQUENCE[(i + k) % size] for k in range(3)}
        if window == nums:
            return True
    return False


def are_consecutive(num1, num2, num3) -> bool:
    """
    Check if 3 numbers form a run (e.g. 14-15-16) in any order.

    Misses, bulls and anything that is not a number are ignored, so they
    leave fewer than 3 values and fail the check.
    """
    nums = sorted(
        n for n in (num1, num2, num3)
        if isinstance(n, int) and n not in (MISS_NUMBER, BULL_NUMBER)
    )
    if len(nums) < 3:
        return False
    return nums[1] == nums[0] + 1 and nums[2] == nums[1] + 1


def _distinct_colors(darts) -> set:
    colors = {get_dart_color(d) for d in darts}
    colors.discard(None)
    return colors


def _is_full_turn(darts) -> bool:
    """Contracts are only judged on a complete turn of 3 darts."""
    return bool(darts) and len(darts) >= DARTS_PER_TURN


def _side(darts) -> bool:
    return are_adjacent(*darts[:DARTS_PER_TURN])


def _three_in_a_row(darts) -> bool:
    return are_consecutive(*(d.number for d in darts[:DARTS_PER_TURN]))


_QUALIFIERS: Dict[str, Callable[[Sequence], bool]] = {
    'capital': lambda darts: True,
    'side': _side,
    '3row': _three_in_a_row,
    'color': lambda darts: len(_distinct_colors(darts)) >= MIN_COLORS,
    'double': lambda darts: any(d.modifier == Modifier.DOUBLE for d in darts),
    'triple': lambda darts: any(d.modifier == Modifier.TRIPLE for d in darts),
    '57': lambda darts: _total(darts) == TARGET_TOTAL,
    'bull': lambda darts: any(d.number == BULL_NUMBER for d in darts),
}


def meets_contract(darts: Optional[Sequence], contract_id: str) -> bool:
    """
    Check if darts meet the contract requirements (Classic mode).

    Args:
        darts: Darts of the turn (fewer than 3 = turn not complete)
        contract_id: Contract identifier

    Returns:
        True if the turn qualifies for the contract
    """
    if not _is_full_turn(darts):
        return False

    if contract_id in NUMBER_CONTRACTS:
        target = int(contract_id)
        return any(d.number == target for d in darts)

    qualifier = _QUALIFIERS.get(contract_id)
    if qualifier is None:
        logger.warning(f"Unknown contract: {contract_id!r}")
        return False
    return qualifier(darts)


def score_contract(darts: Optional[Sequence], contract_id: str) -> int:
    """
    Calculate the score a turn earns for a contract.

    Number, double, triple and bull contracts only count the darts that
    match; every other contract counts the whole turn.

    Args:
        darts: Darts of the turn
        contract_id: Contract identifier

    Returns:
        Contract score (0 for a turn of fewer than 3 darts)
    """
    if not _is_full_turn(darts):
        return 0

    if contract_id in NUMBER_CONTRACTS:
        target = int(contract_id)
        return _total(d for d in darts if d.number == target)

    if contract_id == 'double':
        return _total(d for d in darts if d.modifier == Modifier.DOUBLE)
    if contract_id == 'triple':
        return _total(d for d in darts if d.modifier == Modifier.TRIPLE)
    if contract_id == 'bull':
        return _total(d for d in darts if d.number == BULL_NUMBER)

    # capital, side, 3row, color, 57
    return _total(darts)


def get_valid_contracts(darts: Optional[Sequence]) -> List[str]:
    """
    List every contract the turn qualifies for (Yahtzee mode).

    Capital is always included once a full turn has been thrown, even
    for three misses.

    Args:
        darts: Darts of the turn

    Returns:
        Qualifying contract IDs in play order ([] for a turn of fewer than 3 darts)
    """
    if not _is_full_turn(darts):
        return []

    valid = [cid for cid in CONTRACT_IDS if meets_contract(darts, cid)]
    logger.debug(f"Valid contracts for {[d.score for d in darts]}: {valid}")
    return valid


@dataclass(frozen=True)
class ValidationRule:
    """Check for a manually entered contract score, with a hint for the UI."""
    validate: Callable[[int], bool]
    message: str = ""


def _non_negative(score: int) -> bool:
    return score >= 0


def _multiple_of(target: int) -> Callable[[int], bool]:
    return lambda score: score == 0 or (score > 0 and score % target == 0)


def _build_validation_rules() -> Dict[str, ValidationRule]:
    rules = {
        cid: ValidationRule(_non_negative, "Any score of 0 or more")
        for cid in ('capital', 'side', '3row', 'color', 'triple')
    }
    for cid in NUMBER_CONTRACTS:
        rules[cid] = ValidationRule(_multiple_of(int(cid)), f"0 or a multiple of {cid}")
    rules['double'] = ValidationRule(
        lambda score: score >= 0 and score % 2 == 0, "0 or an even number")
    rules['57'] = ValidationRule(lambda score: score in (0, TARGET_TOTAL), "0 or exactly 57")
    rules['bull'] = ValidationRule(
        lambda score: score in (0, 25, 50, 75, 100), "0, 25, 50, 75 or 100")
    return rules


VALIDATION_RULES: Dict[str, ValidationRule] = _build_validation_rules()

_DEFAULT_RULE = ValidationRule(lambda score=None: True, "")


def get_validation_rule(contract_id: str) -> ValidationRule:
    """Get the validation rule for a contract (accept-all for unknown IDs)."""
    return VALIDATION_RULES.get(contract_id, _DEFAULT_RULE)


def validate_score(score: int, contract_id: str) -> bool:
    """
    Check a manually entered score against what the contract allows.

    Args:
        score: Raw score typed in for the turn
        contract_id: Contract identifier

    Returns:
        True if the score is achievable for the contract
    """
    return get_validation_rule(contract_id).validate(score)

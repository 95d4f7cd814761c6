"""
Tests for Clock game mode.
"""
import logging

import pytest

from halveit.core import ClockPlayerState, ClockTurnResult, Config, create_dart
from halveit.game import (
    ClockMode, CLOCK_POSITION_BULL, CLOCK_POSITION_FINISHED, CLOCK_MAX_TURNS,
    get_target_name,
)


@pytest.fixture
def mode():
    return ClockMode()


def miss():
    return create_dart(0)


def test_constants():
    """Test position sentinels and turn limit."""
    assert CLOCK_POSITION_BULL == 11
    assert CLOCK_POSITION_FINISHED == 12
    assert CLOCK_MAX_TURNS == 10


def test_target_names():
    """Test display names for positions."""
    for i in range(1, 11):
        assert get_target_name(i) == str(i)
    assert get_target_name(11) == "Bull"
    assert get_target_name(12) == "Finished"


def test_single_hit_advances(mode):
    """Test hitting the target advances by one."""
    result = mode.process_turn([create_dart(1)], 1)
    assert result.end_position == 2


def test_multiplier_advances(mode):
    """Test doubles and triples advance further."""
    assert mode.process_turn([create_dart(3, "double")], 3).end_position == 5
    assert mode.process_turn([create_dart(2, "triple")], 2).end_position == 5


def test_each_dart_uses_current_target(mode):
    """Test targets move within the turn."""
    darts = [create_dart(1), create_dart(2), create_dart(3)]
    assert mode.process_turn(darts, 1).end_position == 4

    # Second dart aims at 2, so another 1 is a miss
    darts = [create_dart(1), create_dart(1), miss()]
    assert mode.process_turn(darts, 1).end_position == 2


def test_wrong_number_is_miss(mode):
    """Test non-matching darts change nothing."""
    result = mode.process_turn([create_dart(5), create_dart(20), miss()], 4)
    assert result == ClockTurnResult(end_position=4)


def test_advance_caps_at_bull(mode):
    """Test advancing past 10 stops at Bull."""
    result = mode.process_turn([create_dart(9, "triple")], 9)
    assert result.end_position == CLOCK_POSITION_BULL
    assert not result.finished

    result = mode.process_turn([create_dart(10, "double")], 10)
    assert result.end_position == CLOCK_POSITION_BULL


def test_bull_after_cap_finishes(mode):
    """Test T9 then bull in the same turn finishes."""
    result = mode.process_turn([create_dart(9, "triple"), create_dart(25)], 9)
    assert result.end_position == CLOCK_POSITION_FINISHED
    assert result.finished


def test_bull_target(mode):
    """Test single and double bull both finish; numbers do not."""
    assert mode.process_turn([create_dart(25)], 11).finished
    assert mode.process_turn([create_dart(25, "double")], 11).finished

    result = mode.process_turn([create_dart(11), create_dart(20)], 11)
    assert result.end_position == 11
    assert not result.finished


def test_bull_is_not_a_number_target(mode):
    """Test bull does nothing while aiming at a number."""
    assert mode.process_turn([create_dart(25)], 5).end_position == 5


def test_finishing_ignores_remaining_darts(mode):
    """Test darts after the finish are not processed."""
    result = mode.process_turn([miss(), create_dart(25), create_dart(20)], 11)
    assert result.end_position == CLOCK_POSITION_FINISHED
    assert result.finished
    assert result.last_dart_hit
    assert not result.extra_turn


def test_extra_turn_on_last_dart(mode):
    """Test a hit with the last dart grants another turn."""
    result = mode.process_turn([miss(), miss(), create_dart(1)], 1)
    assert result.end_position == 2
    assert result.last_dart_hit
    assert result.extra_turn
    assert not result.finished

    assert mode.process_turn([create_dart(5)], 5).extra_turn
    assert mode.process_turn([miss(), create_dart(3)], 3).extra_turn


def test_no_extra_turn_when_last_dart_misses(mode):
    """Test earlier hits do not grant another turn."""
    assert not mode.process_turn([create_dart(1), miss(), miss()], 1).extra_turn
    assert not mode.process_turn([create_dart(1), miss()], 1).extra_turn


def test_finish_suppresses_extra_turn(mode):
    """Test finishing never grants another turn."""
    result = mode.process_turn([create_dart(25)], 11)
    assert result.end_position == 12
    assert result.finished
    assert not result.extra_turn

    result = mode.process_turn([create_dart(10), miss(), create_dart(25)], 10)
    assert result.finished
    assert not result.extra_turn


def test_empty_turn(mode):
    """Test empty or None darts leave the position alone."""
    assert mode.process_turn([], 1) == ClockTurnResult(end_position=1)
    assert mode.process_turn(None, 5) == ClockTurnResult(end_position=5)


def test_already_finished(mode):
    """Test a finished start position stays finished."""
    result = mode.process_turn([create_dart(1)], 12)
    assert result.end_position == 12
    assert result.finished
    assert not result.extra_turn


def test_position_never_decreases(mode):
    """Test position is monotonic for every single dart from every target."""
    for start in range(1, 12):
        for number in list(range(0, 21)) + [25]:
            for modifier in ("single", "double", "triple"):
                if number == 25 and modifier == "triple":
                    continue
                end = mode.process_turn([create_dart(number, modifier)], start).end_position
                assert start <= end <= CLOCK_POSITION_FINISHED
                if end == CLOCK_POSITION_FINISHED:
                    assert start == CLOCK_POSITION_BULL


def test_preview_target(mode):
    """Test preview follows darts entered so far."""
    assert mode.get_preview_target([], 3) == 3
    assert mode.get_preview_target([miss()], 3) == 3
    assert mode.get_preview_target([create_dart(3)], 3) == 4
    assert mode.get_preview_target([create_dart(3), create_dart(4, "double")], 3) == 6


def test_progress(mode):
    """Test progress percentages."""
    assert mode.get_progress(1, False) == 0
    assert mode.get_progress(12, False) == pytest.approx(100.0)
    assert mode.get_progress(11, False) == pytest.approx(10 / 11 * 100)
    assert mode.get_progress(6, False) == pytest.approx(5 / 11 * 100)
    assert mode.get_progress(3, True) == 100


def test_winner_first_finisher(mode):
    """Test first to finish wins outright."""
    result = mode.determine_winner(["A", "B"], {"A": 12, "B": 11}, ["A"])
    assert result.winners == ["A"]
    assert not result.is_tie

    result = mode.determine_winner(["A", "B", "C"], {"A": 12, "B": 11, "C": 12}, ["C", "A"])
    assert result.winners == ["C"]


def test_winner_by_position(mode):
    """Test furthest player wins at the turn limit."""
    result = mode.determine_winner(["A", "B"], {"A": 8, "B": 5}, [])
    assert result.winners == ["A"]
    assert not result.is_tie

    result = mode.determine_winner(["A", "B"], {"A": 8, "B": 5}, None)
    assert result.winners == ["A"]


def test_winner_tie(mode):
    """Test shared furthest position is a tie in roster order."""
    result = mode.determine_winner(["A", "B"], {"A": 9, "B": 9}, [])
    assert result.winners == ["A", "B"]
    assert result.is_tie

    result = mode.determine_winner(["A", "B", "C"], {"A": 9, "B": 3, "C": 9}, [])
    assert result.winners == ["A", "C"]
    assert result.is_tie


def test_winner_missing_position_defaults_to_start(mode):
    """Test players without a position count as position 1."""
    result = mode.determine_winner(["A", "B"], {"A": 5}, [])
    assert result.winners == ["A"]

    result = mode.determine_winner(["A", "B"], {}, [])
    assert result.winners == ["A", "B"]
    assert result.is_tie


def test_winner_single_player(mode):
    """Test a lone player always wins."""
    result = mode.determine_winner(["A"], {"A": 3}, [])
    assert result.winners == ["A"]
    assert not result.is_tie


def test_determine_winner_is_quiet(mode, caplog):
    """Test winner checks do not log at info level."""
    with caplog.at_level(logging.INFO, logger="halveit.game.clock"):
        mode.determine_winner(["A", "B"], {"A": 12, "B": 11}, ["A"])
        mode.determine_winner(["A", "B"], {"A": 9, "B": 9}, [])
    assert not caplog.records


def test_apply_turn_counts_turns(mode):
    """Test turns count unless an extra turn was earned."""
    state = ClockPlayerState()

    state, result = mode.apply_turn(state, [create_dart(1), miss(), miss()], finish_rank=1)
    assert state.position == 2
    assert state.turns_taken == 1

    state, result = mode.apply_turn(state, [miss(), miss(), create_dart(2)], finish_rank=1)
    assert result.extra_turn
    assert state.position == 3
    assert state.turns_taken == 1


def test_apply_turn_records_finish(mode):
    """Test finishing stores the rank."""
    state = ClockPlayerState(position=11, turns_taken=4)

    state, result = mode.apply_turn(state, [create_dart(25)], finish_rank=2)
    assert result.finished
    assert state.finished
    assert state.finish_rank == 2
    assert state.turns_taken == 5

    # Finished players are left untouched
    again, _ = mode.apply_turn(state, [create_dart(25)], finish_rank=3)
    assert again is state


def test_game_over(mode):
    """Test game ends on a finish or when everyone is out of turns."""
    assert not mode.is_game_over({})

    states = {"A": ClockPlayerState(5, 3), "B": ClockPlayerState(7, 3)}
    assert not mode.is_game_over(states)

    states["B"] = ClockPlayerState(12, 3, finish_rank=1)
    assert mode.is_game_over(states)

    states = {"A": ClockPlayerState(5, 10), "B": ClockPlayerState(7, 10)}
    assert mode.is_out_of_turns(states["A"])
    assert mode.is_game_over(states)


def test_from_config(tmp_path):
    """Test turn limit from YAML."""
    path = tmp_path / "rules.yaml"
    path.write_text("clock:\n  max_turns: 3\n")

    mode = ClockMode.from_config(Config(path))
    assert mode.max_turns == 3
    assert mode.is_out_of_turns(ClockPlayerState(turns_taken=3))

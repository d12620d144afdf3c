"""
Greedy - Turn State Machine Tests
"""

import pytest

from greedy.engine.base import (
    Action,
    ActionType,
    CarryoverPot,
    InvalidActionError,
    TurnPhase,
    TurnState,
)
from greedy.engine.turn import can_bank, create_turn_state, turn_reducer


def run(state: TurnState, *actions: Action) -> TurnState:
    for action in actions:
        state = turn_reducer(state, action)
    return state


class TestCreateTurnState:
    def test_fresh_turn(self):
        turn = create_turn_state()
        assert turn.phase == TurnPhase.ROLLING
        assert turn.turn_score == 0
        assert turn.dice_remaining == 5
        assert turn.current_roll is None
        assert turn.has_carryover is False

    def test_turn_from_carryover(self):
        turn = create_turn_state(CarryoverPot(points=1500, dice_count=2))
        assert turn.phase == TurnPhase.STEAL_REQUIRED
        assert turn.turn_score == 1500
        assert turn.dice_remaining == 2
        assert turn.has_carryover is True
        assert turn.carryover_claimed is False
        assert turn.carryover_points == 1500


class TestRolling:
    """Tests for ROLL from a fresh turn."""

    def test_scoring_roll_moves_to_keeping(self):
        turn = run(create_turn_state(), Action.roll([1, 2, 3, 4, 6]))
        assert turn.phase == TurnPhase.KEEPING
        assert turn.current_roll == (1, 2, 3, 4, 6)
        assert turn.turn_score == 0

    def test_bust_roll_ends_turn(self):
        turn = run(create_turn_state(), Action.roll([2, 3, 4, 6, 6]))
        assert turn.phase == TurnPhase.ENDED
        assert turn.is_bust is True
        assert turn.turn_score == 0
        assert turn.current_roll == (2, 3, 4, 6, 6)

    @pytest.mark.parametrize("dice", [[1, 2, 3], [1, 2, 3, 4, 5, 6], []])
    def test_roll_must_match_dice_remaining(self, dice: list):
        with pytest.raises(InvalidActionError) as excinfo:
            turn_reducer(create_turn_state(), Action.roll(dice))
        assert excinfo.value.phase == TurnPhase.ROLLING
        assert excinfo.value.action == ActionType.ROLL

    def test_roll_rejects_bad_faces(self):
        with pytest.raises(InvalidActionError):
            turn_reducer(create_turn_state(), Action.roll([1, 2, 3, 4, 7]))


class TestKeeping:
    """Tests for KEEP."""

    def test_hot_dice_resets_to_five(self):
        turn = run(
            create_turn_state(),
            Action.roll([1, 1, 1, 5, 5]),
            Action.keep([1, 1, 1, 5, 5]),
        )
        assert turn.turn_score == 1100
        assert turn.dice_remaining == 5
        assert turn.phase == TurnPhase.DECIDING
        assert turn.kept_dice == (1, 1, 1, 5, 5)

    def test_partial_keep_reduces_dice(self):
        turn = run(
            create_turn_state(),
            Action.roll([1, 1, 1, 5, 2]),
            Action.keep([1, 1, 1, 5]),
        )
        assert turn.turn_score == 1050
        assert turn.dice_remaining == 1

    def test_keep_accumulates_across_rolls(self):
        turn = run(
            create_turn_state(),
            Action.roll([1, 2, 3, 4, 6]),
            Action.keep([1]),
            Action.roll([5, 2, 3, 6]),
            Action.keep([5]),
        )
        assert turn.turn_score == 150
        assert turn.dice_remaining == 3
        assert turn.kept_dice == (1, 5)

    def test_hot_dice_then_roll_five(self):
        turn = run(
            create_turn_state(),
            Action.roll([1, 2, 3, 4, 5]),
            Action.keep([1, 2, 3, 4, 5]),
            Action.roll([2, 2, 2, 3, 4]),
        )
        assert turn.phase == TurnPhase.KEEPING
        assert turn.turn_score == 1500

    def test_bust_after_keep_loses_turn_score(self):
        turn = run(
            create_turn_state(),
            Action.roll([1, 2, 3, 4, 6]),
            Action.keep([1, 2, 3, 4]),
            Action.roll([6]),
        )
        assert turn.phase == TurnPhase.ENDED
        assert turn.turn_score == 0
        assert turn.is_bust

    @pytest.mark.parametrize("keep", [[2], [1, 6], [], [1, 1], [2, 3, 4]])
    def test_illegal_keep_rejected(self, keep: list):
        state = turn_reducer(create_turn_state(), Action.roll([1, 2, 3, 4, 6]))
        with pytest.raises(InvalidActionError) as excinfo:
            turn_reducer(state, Action.keep(keep))
        assert excinfo.value.phase == TurnPhase.KEEPING

    def test_rejected_keep_leaves_state_untouched(self):
        state = turn_reducer(create_turn_state(), Action.roll([1, 2, 3, 4, 6]))
        with pytest.raises(InvalidActionError):
            turn_reducer(state, Action.keep([6]))
        assert state.phase == TurnPhase.KEEPING
        assert state.turn_score == 0


class TestDeciding:
    def test_bank_ends_turn_and_keeps_score(self, deciding_turn):
        turn = turn_reducer(deciding_turn(700, 2), Action.bank())
        assert turn.phase == TurnPhase.ENDED
        assert turn.turn_score == 700
        assert turn.is_bust is False

    def test_roll_again(self, deciding_turn):
        turn = turn_reducer(deciding_turn(300, 3), Action.roll([1, 4, 6]))
        assert turn.phase == TurnPhase.KEEPING
        assert turn.turn_score == 300


class TestSteal:
    """Tests for turns that start from a carryover pot."""

    def test_successful_steal_claims_pot(self):
        turn = run(
            create_turn_state(CarryoverPot(points=1500, dice_count=2)),
            Action.roll([1, 2]),
            Action.keep([1]),
        )
        assert turn.turn_score == 1600
        assert turn.carryover_claimed is True
        assert turn.dice_remaining == 1
        assert turn.own_score == 100

    def test_failed_steal_loses_pot(self):
        turn = run(
            create_turn_state(CarryoverPot(points=1500, dice_count=2)),
            Action.roll([3, 4]),
        )
        assert turn.phase == TurnPhase.ENDED
        assert turn.turn_score == 0
        assert turn.is_bust

    def test_steal_with_hot_dice(self):
        turn = run(
            create_turn_state(CarryoverPot(points=1050, dice_count=1)),
            Action.roll([5]),
            Action.keep([5]),
        )
        assert turn.turn_score == 1100
        assert turn.dice_remaining == 5

    def test_steal_roll_must_use_inherited_dice(self):
        turn = create_turn_state(CarryoverPot(points=400, dice_count=2))
        with pytest.raises(InvalidActionError):
            turn_reducer(turn, Action.roll([1, 2, 3, 4, 5]))

    def test_decline_starts_fresh_turn(self):
        turn = turn_reducer(
            create_turn_state(CarryoverPot(points=400, dice_count=2)),
            Action.decline_carryover(),
        )
        assert turn == create_turn_state()


class TestIllegalPairs:
    """Every (phase, action) pair outside the transition table is rejected."""

    @pytest.mark.parametrize("state,action", [
        (TurnState(), Action.keep([1])),
        (TurnState(), Action.bank()),
        (TurnState(), Action.end_turn()),
        (TurnState(), Action.decline_carryover()),
        (TurnState(phase=TurnPhase.KEEPING, current_roll=(1, 5)), Action.roll([1, 5])),
        (TurnState(phase=TurnPhase.KEEPING, current_roll=(1, 5)), Action.bank()),
        (TurnState(phase=TurnPhase.DECIDING, turn_score=100), Action.keep([1])),
        (TurnState(phase=TurnPhase.DECIDING, turn_score=100), Action.decline_carryover()),
        (TurnState(phase=TurnPhase.STEAL_REQUIRED, dice_remaining=2), Action.bank()),
        (TurnState(phase=TurnPhase.STEAL_REQUIRED, dice_remaining=2), Action.keep([1])),
        (TurnState(phase=TurnPhase.ENDED), Action.roll([1, 2, 3, 4, 5])),
        (TurnState(phase=TurnPhase.ENDED), Action.bank()),
        (TurnState(phase=TurnPhase.ENDED), Action.end_turn()),
    ])
    def test_rejected(self, state: TurnState, action: Action):
        with pytest.raises(InvalidActionError) as excinfo:
            turn_reducer(state, action)
        assert excinfo.value.phase == state.phase
        assert excinfo.value.action == action.type


class TestCanBank:
    def test_on_board_can_bank_any_score(self, deciding_turn):
        assert can_bank(deciding_turn(50, 4), is_on_board=True) is True

    def test_on_board_only_while_deciding(self):
        assert can_bank(TurnState(phase=TurnPhase.KEEPING), is_on_board=True) is False

    @pytest.mark.parametrize("turn_score,expected", [
        (550, False),
        (599, False),
        (600, True),
        (1050, True),
    ])
    def test_entry_threshold(self, deciding_turn, turn_score: int, expected: bool):
        assert can_bank(deciding_turn(turn_score, 2), is_on_board=False) is expected

    def test_carryover_does_not_count_toward_entry(self, deciding_turn):
        turn = deciding_turn(1600, 1, carryover_points=1500)
        assert can_bank(turn, is_on_board=False) is False

    def test_own_points_on_top_of_carryover(self, deciding_turn):
        turn = deciding_turn(2100, 1, carryover_points=1500)
        assert can_bank(turn, is_on_board=False) is True

    def test_custom_threshold(self, deciding_turn):
        assert can_bank(deciding_turn(300, 2), is_on_board=False, entry_threshold=250)

"""
Greedy - Turn State Machine

Governs one player's turn: roll, keep, decide, end. `turn_reducer` is a
pure function over (TurnState, Action); every legal (phase, action) pair
has a handler in the transition table and anything else is rejected with
InvalidActionError.

Phases:
    STEAL_REQUIRED -- ROLL --> KEEPING | ENDED (bust)
    STEAL_REQUIRED -- DECLINE_CARRYOVER --> ROLLING (fresh turn)
    ROLLING        -- ROLL --> KEEPING | ENDED (bust)
    KEEPING        -- KEEP --> DECIDING
    DECIDING       -- ROLL --> KEEPING | ENDED (bust)
    DECIDING       -- BANK --> ENDED
"""

from dataclasses import replace
from typing import Callable

from greedy.engine.base import (
    DICE_COUNT,
    ENTRY_THRESHOLD,
    Action,
    ActionType,
    CarryoverPot,
    InvalidActionError,
    TurnPhase,
    TurnState,
)
from greedy.engine.scoring import is_bust, score_selection
from greedy.engine.selection import validate_keep
from greedy.engine.validators import validate_roll


def create_turn_state(carryover: CarryoverPot | None = None) -> TurnState:
    """
    Create the initial state for a new turn.

    Args:
        carryover: Pot inherited from the previous player, if any

    Returns:
        A ROLLING turn with five dice, or a STEAL_REQUIRED turn seeded
        with the pot's points and dice
    """
    if carryover is None:
        return TurnState()

    return TurnState(
        phase=TurnPhase.STEAL_REQUIRED,
        turn_score=carryover.points,
        dice_remaining=carryover.dice_count,
        has_carryover=True,
        carryover_claimed=False,
        carryover_points=carryover.points,
    )


def can_bank(state: TurnState, is_on_board: bool, entry_threshold: int = ENTRY_THRESHOLD) -> bool:
    """
    Check whether the turn score may be banked.

    Players already on the board may bank whenever they are deciding.
    Otherwise the points earned this turn, not counting any carryover,
    must reach the entry threshold.
    """
    if is_on_board:
        return state.phase == TurnPhase.DECIDING
    return state.own_score >= entry_threshold


def turn_reducer(state: TurnState, action: Action) -> TurnState:
    """
    Apply an action to a turn and return the resulting turn.

    Raises:
        InvalidActionError: If the action is not legal in the current phase,
            or its dice are rejected
    """
    handler = _TRANSITIONS.get((state.phase, action.type))
    if handler is None:
        raise InvalidActionError(
            f"{action.type.value} is not allowed while {state.phase.value}.",
            phase=state.phase,
            action=action.type,
        )
    return handler(state, action)


def _roll(state: TurnState, action: Action) -> TurnState:
    try:
        roll = validate_roll(action.dice, state.dice_remaining)
    except ValueError as exc:
        raise InvalidActionError(str(exc), phase=state.phase, action=action.type) from exc

    if is_bust(roll):
        return replace(
            state,
            phase=TurnPhase.ENDED,
            current_roll=roll,
            turn_score=0,  # Lose everything, carryover included
            is_bust=True,
        )

    return replace(state, phase=TurnPhase.KEEPING, current_roll=roll)


def _keep(state: TurnState, action: Action) -> TurnState:
    validation = validate_keep(state.current_roll or (), action.dice)
    if not validation.valid:
        raise InvalidActionError(validation.error, phase=state.phase, action=action.type)

    dice_remaining = state.dice_remaining - len(action.dice)
    if dice_remaining == 0:
        # Hot dice
        dice_remaining = DICE_COUNT

    return replace(
        state,
        phase=TurnPhase.DECIDING,
        turn_score=state.turn_score + score_selection(action.dice).score,
        kept_dice=state.kept_dice + tuple(action.dice),
        dice_remaining=dice_remaining,
        carryover_claimed=state.carryover_claimed or state.has_carryover,
    )


def _bank(state: TurnState, action: Action) -> TurnState:
    return replace(state, phase=TurnPhase.ENDED)


def _decline_carryover(state: TurnState, action: Action) -> TurnState:
    return create_turn_state()


_TRANSITIONS: dict[tuple[TurnPhase, ActionType], Callable[[TurnState, Action], TurnState]] = {
    (TurnPhase.ROLLING, ActionType.ROLL): _roll,
    (TurnPhase.STEAL_REQUIRED, ActionType.ROLL): _roll,
    (TurnPhase.STEAL_REQUIRED, ActionType.DECLINE_CARRYOVER): _decline_carryover,
    (TurnPhase.KEEPING, ActionType.KEEP): _keep,
    (TurnPhase.DECIDING, ActionType.ROLL): _roll,
    (TurnPhase.DECIDING, ActionType.BANK): _bank,
}

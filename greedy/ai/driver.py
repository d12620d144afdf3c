"""
Greedy - AI Turn Driver

Runs computer players through the public game reducer: ask the decision
layer what to do, roll dice with the supplied DiceRoller when it says
ROLL, and close the turn with END_TURN once it has ended. Pacing and
animation delays belong to the presentation layer, not here.
"""

import logging

from greedy.ai.strategies import AIDecision, DeclinePolicy, Strategy, make_ai_decision, resolve_strategy
from greedy.config.settings import get_settings
from greedy.engine.base import Action, ActionType, GameState, InvalidActionError, TurnPhase
from greedy.engine.dice import DiceRoller
from greedy.engine.game import game_reducer, get_current_player
from greedy.events.events import EventPayload, GameEvent
from greedy.events.recorder import GameRecorder

logger = logging.getLogger(__name__)


def take_ai_step(
    state: GameState,
    roller: DiceRoller,
    strategy: Strategy | None = None,
    recorder: GameRecorder | None = None,
    decline_carryover: DeclinePolicy | None = None,
) -> tuple[GameState, AIDecision]:
    """
    Make and apply one decision for the current AI player.

    Args:
        state: Current game state; the current player must be an AI
        roller: Source of dice values for ROLL decisions
        strategy: Personality override (defaults to the player's own, or
            the configured default when the seat names none)
        recorder: Optional trace recorder
        decline_carryover: Optional policy for turning down a pot

    Returns:
        Tuple of (new_state, decision). If the step ended the turn, the
        returned state already belongs to the next player.

    Raises:
        InvalidActionError: If the game is over or the player is human
    """
    new_state, decision, _ = _step(state, roller, strategy, recorder, decline_carryover)
    return new_state, decision


def play_ai_turn(
    state: GameState,
    roller: DiceRoller,
    strategy: Strategy | None = None,
    recorder: GameRecorder | None = None,
    decline_carryover: DeclinePolicy | None = None,
) -> GameState:
    """Play the current AI player's whole turn and return the next state."""
    turn_over = False
    while not turn_over:
        state, _, turn_over = _step(state, roller, strategy, recorder, decline_carryover)
    return state


def _step(
    state: GameState,
    roller: DiceRoller,
    strategy: Strategy | None,
    recorder: GameRecorder | None,
    decline_carryover: DeclinePolicy | None,
) -> tuple[GameState, AIDecision, bool]:
    if state.is_game_over:
        raise InvalidActionError("The game is over.", phase=state.turn.phase)

    player = get_current_player(state)
    if not player.is_ai:
        raise InvalidActionError(f"{player.name} is not an AI player.", phase=state.turn.phase)

    strategy_name = player.ai_strategy or get_settings().default_ai_strategy
    if strategy is None:
        strategy = resolve_strategy(strategy_name, roller)

    decision = make_ai_decision(
        state.turn,
        player.is_on_board,
        strategy,
        entry_threshold=state.entry_threshold,
        decline_carryover=decline_carryover,
    )
    logger.debug(
        "AI %s (%s) in %s: %s %s",
        player.name, strategy_name, state.turn.phase.value,
        decision.action.value, list(decision.dice),
    )
    if recorder is not None:
        recorder.record(EventPayload(
            event=GameEvent.AI_DECISION,
            player_id=player.id,
            data={
                "strategy": strategy_name,
                "phase": state.turn.phase.value,
                "action": decision.action.value,
                "dice": list(decision.dice),
                "turn_score": state.turn.turn_score,
                "dice_remaining": state.turn.dice_remaining,
            },
        ))

    apply = recorder.dispatch if recorder is not None else game_reducer

    if decision.action == ActionType.ROLL:
        action = Action.roll(roller.roll(state.turn.dice_remaining))
    else:
        action = decision.to_action()

    new_state = apply(state, action)

    if new_state.turn.phase != TurnPhase.ENDED:
        return new_state, decision, False

    new_state = apply(new_state, Action.end_turn())
    return new_state, decision, True

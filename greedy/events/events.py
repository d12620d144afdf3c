"""
Greedy - Game Event Definitions

Event types and payloads describing what a single reducer step did.
Events are derived by comparing the game state before and after an
action, so the reducers themselves stay free of side effects.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from greedy.engine.base import Action, ActionType, GameState
from greedy.engine.game import get_winner
from greedy.engine.scoring import score_selection


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_KEPT = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    CARRYOVER_CREATED = auto()
    CARRYOVER_DECLINED = auto()
    TURN_ENDED = auto()
    FINAL_ROUND_STARTED = auto()
    GAME_WON = auto()
    AI_DECISION = auto()


@dataclass
class EventPayload:
    """Wrapper for trace event data."""

    event: GameEvent
    player_id: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


def classify_transition(
    before: GameState, after: GameState, action: Action
) -> list[EventPayload]:
    """Determine the events produced by one game_reducer step."""
    player = before.players[before.current_player_index]
    turn_before, turn_after = before.turn, after.turn
    events: list[EventPayload] = []

    def emit(event: GameEvent, **data: Any) -> None:
        events.append(EventPayload(event=event, player_id=player.id, data=data))

    if action.type == ActionType.ROLL:
        emit(
            GameEvent.DICE_ROLLED,
            dice=list(action.dice),
            turn_score_before=turn_before.turn_score,
        )
        if turn_after.is_bust:
            emit(GameEvent.PLAYER_BUST, dice=list(action.dice), lost=turn_before.turn_score)

    elif action.type == ActionType.KEEP:
        emit(
            GameEvent.DICE_KEPT,
            dice=list(action.dice),
            points=score_selection(action.dice).score,
            turn_score=turn_after.turn_score,
            dice_remaining=turn_after.dice_remaining,
            hot_dice=len(action.dice) == turn_before.dice_remaining,
        )

    elif action.type == ActionType.BANK:
        emit(
            GameEvent.TURN_BANKED,
            turn_score=turn_after.turn_score,
            dice_remaining=turn_after.dice_remaining,
        )

    elif action.type == ActionType.DECLINE_CARRYOVER:
        pot = before.carryover_pot
        emit(GameEvent.CARRYOVER_DECLINED, points=pot.points if pot else turn_before.carryover_points)

    elif action.type == ActionType.END_TURN:
        committed = after.players[before.current_player_index]
        emit(
            GameEvent.TURN_ENDED,
            turn_score=turn_before.turn_score,
            total_score=committed.score,
            was_on_board=player.is_on_board,
            is_on_board=committed.is_on_board,
        )
        if after.carryover_pot is not None:
            emit(
                GameEvent.CARRYOVER_CREATED,
                points=after.carryover_pot.points,
                dice_count=after.carryover_pot.dice_count,
            )
        if after.is_final_round and not before.is_final_round:
            emit(GameEvent.FINAL_ROUND_STARTED, score_to_beat=after.score_to_beat)
        if after.is_game_over:
            scores = {p.id: p.score for p in after.players}
            winner = get_winner(after)
            events.append(EventPayload(
                event=GameEvent.GAME_WON,
                player_id=winner.id,
                data={"winner": winner.name, "scores": scores},
            ))

    return events

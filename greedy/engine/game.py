"""
Greedy - Game State Machine

Wraps the turn state machine with the player roster, turn order, the
carryover pot handed from one player to the next, and endgame detection.
`game_reducer` is pure: it returns a new GameState for every legal action
and raises InvalidActionError for anything else.
"""

from dataclasses import replace
from typing import Any, Mapping, Sequence

from greedy.engine.base import (
    Action,
    ActionType,
    CarryoverPot,
    GameConfig,
    GameState,
    InvalidActionError,
    PlayerState,
    TurnPhase,
)
from greedy.engine.models import PlayerConfig
from greedy.engine.turn import can_bank, create_turn_state, turn_reducer
from greedy.engine.validators import validate_player_count


def create_game_state(
    player_configs: Sequence[PlayerConfig | Mapping[str, Any]],
    config: GameConfig | None = None,
) -> GameState:
    """
    Create a new game.

    Args:
        player_configs: Seats in turn order, as PlayerConfig models or
            plain mappings with the same fields
        config: Rule overrides (target score, entry threshold)

    Returns:
        GameState with every player at zero and off the board, and the
        first player about to roll

    Raises:
        ValueError: If the player list or a player config is invalid
    """
    configs = [
        c if isinstance(c, PlayerConfig) else PlayerConfig.model_validate(c)
        for c in player_configs
    ]
    validate_player_count(len(configs))
    if config is None:
        config = GameConfig(num_players=len(configs))
    elif config.num_players != len(configs):
        config = replace(config, num_players=len(configs))

    players = tuple(
        PlayerState(
            id=f"player-{index + 1}",
            name=c.name,
            is_ai=c.is_ai,
            ai_strategy=c.ai_strategy if c.is_ai else None,
        )
        for index, c in enumerate(configs)
    )

    return GameState(
        players=players,
        turn=create_turn_state(),
        target_score=config.target_score,
        entry_threshold=config.entry_threshold,
    )


def get_current_player(state: GameState) -> PlayerState:
    """Return the player whose turn it is."""
    return state.players[state.current_player_index]


def get_winner(state: GameState) -> PlayerState | None:
    """
    Return the winner of a finished game, or None while it is running.

    On a tie for the top score the current record holder wins; failing
    that, the earliest seat with the top score.
    """
    if not state.is_game_over:
        return None

    top_score = max(p.score for p in state.players)
    holder = state.score_to_beat_player_index
    if holder is not None and state.players[holder].score == top_score:
        return state.players[holder]
    return next(p for p in state.players if p.score == top_score)


def game_reducer(state: GameState, action: Action) -> GameState:
    """
    Apply an action to the game and return the resulting game.

    ROLL, KEEP, BANK and DECLINE_CARRYOVER are delegated to the turn
    state machine. END_TURN commits the finished turn and hands play to
    the next seat.

    Raises:
        InvalidActionError: If the game is over or the action is illegal
    """
    if state.is_game_over:
        raise InvalidActionError(
            "The game is over.", phase=state.turn.phase, action=action.type
        )

    if action.type == ActionType.END_TURN:
        return _end_turn(state)

    if action.type == ActionType.BANK and state.turn.phase == TurnPhase.DECIDING:
        player = get_current_player(state)
        if not can_bank(state.turn, player.is_on_board, state.entry_threshold):
            raise InvalidActionError(
                f"{player.name} needs {state.entry_threshold} points in one turn "
                f"to get on the board.",
                phase=state.turn.phase,
                action=action.type,
            )

    turn = turn_reducer(state.turn, action)

    if action.type == ActionType.DECLINE_CARRYOVER:
        return replace(state, turn=turn, carryover_pot=None)
    return replace(state, turn=turn)


def _end_turn(state: GameState) -> GameState:
    turn = state.turn
    if turn.phase != TurnPhase.ENDED:
        raise InvalidActionError(
            "Cannot end a turn that is still in progress.",
            phase=turn.phase,
            action=ActionType.END_TURN,
        )

    index = state.current_player_index
    player = state.players[index]

    # 1. Commit the turn score
    if turn.turn_score > 0:
        player = replace(
            player,
            score=player.score + turn.turn_score,
            is_on_board=True,
        )
    players = state.players[:index] + (player,) + state.players[index + 1:]

    # 2. Carryover handoff
    if not turn.is_bust and turn.turn_score > 0 and turn.dice_remaining > 0:
        carryover_pot = CarryoverPot(points=turn.turn_score, dice_count=turn.dice_remaining)
    else:
        carryover_pot = None

    # 3. Endgame bookkeeping
    is_final_round = state.is_final_round
    final_round_trigger_index = state.final_round_trigger_index
    score_to_beat = state.score_to_beat
    score_to_beat_player_index = state.score_to_beat_player_index

    if not is_final_round:
        if player.score >= state.target_score:
            is_final_round = True
            final_round_trigger_index = index
            score_to_beat = player.score
            score_to_beat_player_index = index
    elif score_to_beat is None or player.score > score_to_beat:
        score_to_beat = player.score
        score_to_beat_player_index = index

    # 4. Advance to the next seat
    next_index = (index + 1) % len(players)

    # 5. A full lap without a new record ends the game
    is_game_over = is_final_round and next_index == score_to_beat_player_index

    return replace(
        state,
        players=players,
        current_player_index=next_index,
        turn=state.turn if is_game_over else create_turn_state(carryover_pot),
        carryover_pot=None if is_game_over else carryover_pot,
        is_final_round=is_final_round,
        final_round_trigger_index=final_round_trigger_index,
        score_to_beat=score_to_beat,
        score_to_beat_player_index=score_to_beat_player_index,
        is_game_over=is_game_over,
    )

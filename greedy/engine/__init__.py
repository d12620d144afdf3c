"""
Greedy Game Engine.

Pure Python rules engine with zero UI/database dependencies.
Handles scoring, keep validation, the turn and game state machines,
carryover pots and endgame detection.
"""

from greedy.engine.base import (
    DICE_COUNT,
    ENTRY_THRESHOLD,
    STRATEGY_NAMES,
    TARGET_SCORE,
    Action,
    ActionType,
    CarryoverPot,
    GameConfig,
    GameState,
    InvalidActionError,
    KeepValidation,
    PlayerState,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnPhase,
    TurnState,
)
from greedy.engine.dice import DiceRoller
from greedy.engine.game import create_game_state, game_reducer, get_current_player, get_winner
from greedy.engine.models import PlayerConfig
from greedy.engine.scoring import count_dice, has_scoring, is_bust, score_selection, score_singles
from greedy.engine.selection import get_selectable_indices, validate_keep
from greedy.engine.turn import can_bank, create_turn_state, turn_reducer

__all__ = [
    # Constants
    "DICE_COUNT",
    "ENTRY_THRESHOLD",
    "STRATEGY_NAMES",
    "TARGET_SCORE",
    # Data Classes
    "Action",
    "CarryoverPot",
    "GameConfig",
    "GameState",
    "KeepValidation",
    "PlayerConfig",
    "PlayerState",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnState",
    # Enums
    "ActionType",
    "ScoringCategory",
    "TurnPhase",
    # Errors
    "InvalidActionError",
    # Scoring
    "count_dice",
    "has_scoring",
    "is_bust",
    "score_selection",
    "score_singles",
    # Validation
    "get_selectable_indices",
    "validate_keep",
    # State machines
    "can_bank",
    "create_game_state",
    "create_turn_state",
    "game_reducer",
    "get_current_player",
    "get_winner",
    "turn_reducer",
    # Randomness
    "DiceRoller",
]

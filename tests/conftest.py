"""
Greedy - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from dataclasses import replace
from typing import Callable

import pytest

from greedy.engine.base import Action, GameState, TurnPhase, TurnState
from greedy.engine.game import create_game_state, game_reducer
from greedy.engine.models import PlayerConfig


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common roll patterns with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Sets
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),
        "four_twos": ((2, 2, 2, 2), 400, "Four 2s"),
        "five_ones": ((1, 1, 1, 1, 1), 4000, "Five 1s"),

        # Straights
        "small_straight_low": ((1, 2, 3, 4), 750, "Small straight 1-4"),
        "small_straight_high": ((2, 3, 4, 5), 750, "Small straight 2-5"),
        "large_straight_low": ((1, 2, 3, 4, 5), 1500, "Large straight 1-5"),
        "large_straight_high": ((2, 3, 4, 5, 6), 1500, "Large straight 2-6"),

        # Mixed
        "triple_ones_two_fives": ((1, 1, 1, 5, 5), 1100, "Three 1s + two 5s"),
        "bust_roll": ((2, 3, 4, 6, 6), 0, "Bust roll"),
    }


@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls that should result in a bust."""
    return [
        (2,),
        (3,),
        (4,),
        (6,),
        (2, 3),
        (4, 6),
        (2, 4, 6),
        (3, 4, 6),
        (2, 3, 4, 6),
        (2, 3, 4, 6, 6),
        (3, 4, 6, 6, 2),
    ]


# =============================================================================
# STATE FIXTURES
# =============================================================================

def make_deciding_turn(
    turn_score: int,
    dice_remaining: int,
    carryover_points: int = 0,
) -> TurnState:
    """A turn waiting for the roll-or-bank decision."""
    return TurnState(
        phase=TurnPhase.DECIDING,
        turn_score=turn_score,
        dice_remaining=dice_remaining,
        has_carryover=carryover_points > 0,
        carryover_claimed=carryover_points > 0,
        carryover_points=carryover_points,
    )


@pytest.fixture
def deciding_turn() -> Callable[..., TurnState]:
    return make_deciding_turn


@pytest.fixture
def make_players() -> Callable[..., list[PlayerConfig]]:
    """Factory for human player configs from names."""
    def _make(*names: str) -> list[PlayerConfig]:
        return [PlayerConfig(name=name) for name in names]
    return _make


@pytest.fixture
def two_player_game(make_players) -> GameState:
    return create_game_state(make_players("Alice", "Bob"))


@pytest.fixture
def three_player_game(make_players) -> GameState:
    return create_game_state(make_players("Alice", "Bob", "Charlie"))


@pytest.fixture
def with_scores() -> Callable[..., GameState]:
    """Return a copy of a game with player totals replaced."""
    def _with(state: GameState, *scores: int, on_board: bool = True) -> GameState:
        players = tuple(
            replace(p, score=s, is_on_board=on_board)
            for p, s in zip(state.players, scores)
        ) + state.players[len(scores):]
        return replace(state, players=players)
    return _with


@pytest.fixture
def play() -> Callable[..., GameState]:
    """Apply a sequence of actions with game_reducer."""
    def _play(state: GameState, *actions: Action) -> GameState:
        for action in actions:
            state = game_reducer(state, action)
        return state
    return _play

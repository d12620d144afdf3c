"""
Greedy AI Players.

Strategies, the decision layer, a turn driver and headless simulation.
"""

from greedy.ai.driver import play_ai_turn, take_ai_step
from greedy.ai.simulation import SimulationResult, simulate_game
from greedy.ai.strategies import (
    AI_STRATEGIES,
    AIDecision,
    aggressive_strategy,
    balanced_strategy,
    chaos_strategy,
    choose_keep,
    conservative_strategy,
    get_strategy,
    make_ai_decision,
    make_chaos_strategy,
    resolve_strategy,
)

__all__ = [
    "AI_STRATEGIES",
    "AIDecision",
    "SimulationResult",
    "aggressive_strategy",
    "balanced_strategy",
    "chaos_strategy",
    "choose_keep",
    "conservative_strategy",
    "get_strategy",
    "make_ai_decision",
    "make_chaos_strategy",
    "resolve_strategy",
    "play_ai_turn",
    "simulate_game",
    "take_ai_step",
]

"""
Greedy - AI Simulation

Plays complete AI-only games with a seeded DiceRoller. The same seed and
roster always produce the same game, which makes this useful for
benchmarking personalities against each other.

Usage: greedy-sim [--games N] [--seed S] [--players NAME [NAME ...]]
"""

import argparse
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from greedy.ai.driver import play_ai_turn
from greedy.ai.strategies import Strategy, resolve_strategy
from greedy.config.settings import configure_logging, get_settings
from greedy.engine.base import STRATEGY_NAMES, GameConfig, GameState, PlayerState
from greedy.engine.dice import DiceRoller
from greedy.engine.game import create_game_state, get_winner
from greedy.engine.models import PlayerConfig
from greedy.events.recorder import GameRecorder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one simulated game."""
    state: GameState
    winner: PlayerState | None
    turns: int

    @property
    def finished(self) -> bool:
        return self.state.is_game_over


def simulate_game(
    player_configs: Sequence[PlayerConfig | Mapping[str, Any]],
    seed: int | None = None,
    max_turns: int = 10_000,
    recorder: GameRecorder | None = None,
    config: GameConfig | None = None,
) -> SimulationResult:
    """
    Play an AI-only game to completion.

    Args:
        player_configs: Seats in turn order; every seat must be an AI
        seed: Seed for dice and chaos coin flips
        max_turns: Safety cap; the game is returned unfinished past it
        recorder: Optional trace recorder
        config: Rule overrides

    Returns:
        SimulationResult with the final state and winner

    Raises:
        ValueError: If any seat is human
    """
    configs = [
        c if isinstance(c, PlayerConfig) else PlayerConfig.model_validate(c)
        for c in player_configs
    ]
    humans = [c.name for c in configs if not c.is_ai]
    if humans:
        raise ValueError(f"Simulation needs AI players only; human seats: {', '.join(humans)}.")

    roller = DiceRoller(seed)
    default_strategy = get_settings().default_ai_strategy
    strategies: list[Strategy] = [
        resolve_strategy(c.ai_strategy or default_strategy, roller) for c in configs
    ]

    state = create_game_state(configs, config)
    if recorder is not None:
        recorder.game_started(state)

    turns = 0
    while not state.is_game_over:
        if turns >= max_turns:
            logger.warning("Simulation stopped after %d turns without a winner", turns)
            break
        strategy = strategies[state.current_player_index]
        state = play_ai_turn(state, roller, strategy=strategy, recorder=recorder)
        turns += 1

    winner = get_winner(state)
    logger.info(
        "Simulated game (seed=%s) finished in %d turns, winner: %s",
        seed, turns, winner.name if winner else None,
    )
    return SimulationResult(state=state, winner=winner, turns=turns)


def benchmark(
    strategy_names: Sequence[str], num_games: int, start_seed: int = 0
) -> Counter[str]:
    """Play `num_games` games and count wins per seat label."""
    labels = [f"{i + 1}:{name}" for i, name in enumerate(strategy_names)]
    configs = [
        PlayerConfig(name=label, is_ai=True, ai_strategy=name)
        for label, name in zip(labels, strategy_names)
    ]
    settings = get_settings()
    game_config = settings.game_config(len(configs))

    wins: Counter[str] = Counter({label: 0 for label in labels})
    for seed in range(start_seed, start_seed + num_games):
        result = simulate_game(configs, seed=seed, config=game_config)
        if result.winner is not None:
            wins[result.winner.name] += 1
    return wins


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Greedy AI Benchmark")
    parser.add_argument("--games", type=int, default=100,
                        help="Number of games to play (default: 100)")
    parser.add_argument("--seed", type=int, default=settings.seed or 0,
                        help="Seed of the first game; later games count up from it")
    parser.add_argument("--players", nargs="+", choices=STRATEGY_NAMES,
                        default=list(STRATEGY_NAMES),
                        help="Strategy for each seat, in turn order (default: one of each)")
    args = parser.parse_args(argv)

    configure_logging(settings)

    wins = benchmark(args.players, args.games, start_seed=args.seed)

    print(f"Greedy AI Benchmark - {args.games} games, target {settings.target_score}")
    print("=" * 60)
    for label, count in wins.items():
        print(f"  {label:20s}  wins={count:5d}  ({count / args.games:6.1%})")
    print("=" * 60)


if __name__ == "__main__":
    main()

"""
Greedy - Seedable Dice Source

The reducers never roll dice themselves; callers roll with a DiceRoller
and pass the values in a ROLL action. Two rollers built from the same
seed produce identical sequences, which makes whole games replayable.
"""

import random

from greedy.engine.base import DICE_COUNT, DIE_FACES


class DiceRoller:
    """Random source for dice values and AI coin flips."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Restart the sequence from `seed`."""
        self._seed = seed
        self._rng.seed(seed)

    def roll(self, count: int = DICE_COUNT) -> tuple[int, ...]:
        """
        Roll the specified number of D6 dice.

        Args:
            count: Number of dice to roll (1-5)

        Returns:
            Tuple of die values
        """
        if not 1 <= count <= DICE_COUNT:
            raise ValueError(f"Can roll between 1 and {DICE_COUNT} dice, got {count}.")
        return tuple(self._rng.randint(1, DIE_FACES) for _ in range(count))

    def chance(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

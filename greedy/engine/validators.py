"""
Greedy - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from greedy.engine.base import DICE_COUNT, DIE_FACES, MAX_PLAYERS


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 1,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if not values:
        if min_count > 0:
            raise ValueError(f"At least {min_count} dice required.")
        return tuple()

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_roll(values: Sequence[int], dice_remaining: int) -> tuple[int, ...]:
    """
    Validate a roll against the number of dice the player may throw.

    Raises:
        ValueError: If the roll has the wrong number of dice or bad faces
    """
    roll = validate_dice_values(values, min_count=1, max_count=DICE_COUNT)
    if len(roll) != dice_remaining:
        raise ValueError(
            f"Expected a roll of {dice_remaining} dice, got {len(roll)}."
        )
    return roll


def validate_held_indices(
    indices: Sequence[int] | frozenset[int] | set[int],
    dice_count: int
) -> frozenset[int]:
    """
    Validate indices of selected dice.

    Args:
        indices: Collection of dice indices that are selected
        dice_count: Total number of dice in the roll

    Returns:
        Validated indices as a frozenset

    Raises:
        ValueError: If any index is out of range
    """
    if not indices:
        return frozenset()

    indices_set = frozenset(indices)

    for idx in indices_set:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise ValueError(f"Selected index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise ValueError(
                f"Selected index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )

    return indices_set


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Raises:
        ValueError: If count is not 1-12
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (1 <= count <= MAX_PLAYERS):
        raise ValueError(f"Player count must be 1-{MAX_PLAYERS}, got {count}.")

    return count

"""
Greedy - Keep Validation and Dice Selectability

Decides whether a proposed keep is legal and which dice of a roll a player
may toggle next. Both functions are pure and build on the scoring calculator.
"""

from collections import Counter
from typing import Sequence

from greedy.engine.base import KeepValidation
from greedy.engine.scoring import score_selection
from greedy.engine.validators import validate_dice_values, validate_held_indices


# Windows a selection may grow into one die at a time
STRAIGHT_WINDOWS: tuple[frozenset[int], ...] = (
    frozenset({1, 2, 3, 4}),
    frozenset({2, 3, 4, 5}),
    frozenset({1, 2, 3, 4, 5}),
    frozenset({2, 3, 4, 5, 6}),
)

ALWAYS_SCORING = frozenset({1, 5})


def validate_keep(roll: Sequence[int], keep: Sequence[int]) -> KeepValidation:
    """
    Check that `keep` is a legal keep from `roll`.

    A keep is legal when it is non-empty, every die is available in the
    roll at the required multiplicity, and every kept die contributes to
    the score.

    Returns:
        KeepValidation with valid=False and an error message on rejection
    """
    if not keep:
        return KeepValidation(valid=False, error="Must keep at least one die.")

    try:
        roll_values = validate_dice_values(roll, min_count=0)
        keep_values = validate_dice_values(keep)
    except ValueError as exc:
        return KeepValidation(valid=False, error=str(exc))

    missing = Counter(keep_values) - Counter(roll_values)
    if missing:
        value = min(missing)
        return KeepValidation(
            valid=False,
            error=f"Cannot keep {value}: not enough {value}s in the roll.",
        )

    result = score_selection(keep_values)
    if result.remaining_dice:
        unused = ", ".join(str(v) for v in result.remaining_dice)
        return KeepValidation(
            valid=False,
            error=f"Every kept die must score; {unused} would not.",
        )

    return KeepValidation(valid=True)


def get_selectable_indices(
    roll: Sequence[int],
    selected_indices: Sequence[int] | frozenset[int] | set[int],
) -> frozenset[int]:
    """
    Compute which dice positions a player may toggle next.

    Already selected positions are always included so they can be
    deselected. An unselected position is selectable when adding its die:
        - raises the score of the current selection, or
        - is a 1 or a 5, or
        - keeps the selection a repeat-free subset of a straight window
          the roll can still complete, or
        - works toward a set the roll holds at least three of, while the
          selection holds nothing but that face, 1s and 5s.

    The last two let a straight or a triple be built one die at a time
    even though the partial selection scores nothing yet.

    Args:
        roll: Dice values of the current roll
        selected_indices: Positions in `roll` already selected

    Returns:
        Frozenset of selectable positions (a superset of the selection)
    """
    values = validate_dice_values(roll, min_count=0)
    selected = validate_held_indices(selected_indices, len(values))

    roll_counts = Counter(values)
    roll_faces = frozenset(values)
    selected_values = [values[i] for i in sorted(selected)]
    base_score = score_selection(selected_values).score

    selectable = set(selected)
    for index, value in enumerate(values):
        if index in selected:
            continue

        candidate = selected_values + [value]
        if (
            value in ALWAYS_SCORING
            or score_selection(candidate).score > base_score
            or _extends_straight(candidate, roll_faces)
            or _builds_set(value, selected_values, roll_counts)
        ):
            selectable.add(index)

    return frozenset(selectable)


def _builds_set(value: int, selected_values: list[int], roll_counts: Counter[int]) -> bool:
    """True if `value` can still grow into a set alongside the selection."""
    return roll_counts[value] >= 3 and set(selected_values) <= {value} | ALWAYS_SCORING


def _extends_straight(candidate: list[int], roll_faces: frozenset[int]) -> bool:
    """True if `candidate` fits inside a straight window the roll can complete."""
    if len(set(candidate)) != len(candidate):
        return False
    faces = frozenset(candidate)
    return any(
        faces <= window and window <= roll_faces
        for window in STRAIGHT_WINDOWS
    )

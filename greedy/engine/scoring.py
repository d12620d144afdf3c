"""
Greedy - Scoring Calculator

Computes the best score available from a handful of D6 dice and
reports which dice contributed. All functions are pure and operate on
immutable inputs; dice order never affects the result.

Scoring Rules:
    - Single 1: 100 points
    - Single 5: 50 points
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Four of a kind: three-of-a-kind value × 2
    - Five of a kind: three-of-a-kind value × 4
    - 1-2-3-4 or 2-3-4-5 (Small Straight): 750 points
    - 1-2-3-4-5 or 2-3-4-5-6 (Large Straight): 1,500 points

Detection order matters: straights are checked before sets, and sets before
singles, so that a die is only ever consumed once.
"""

from collections import Counter
from typing import Sequence

from greedy.engine.base import ScoringBreakdown, ScoringCategory, ScoringResult
from greedy.engine.validators import validate_dice_values


# Scoring values
SINGLE_ONE_POINTS = 100
SINGLE_FIVE_POINTS = 50
THREE_ONES_POINTS = 1000
SMALL_STRAIGHT_POINTS = 750
LARGE_STRAIGHT_POINTS = 1500

LARGE_STRAIGHTS: tuple[tuple[int, ...], ...] = ((1, 2, 3, 4, 5), (2, 3, 4, 5, 6))
SMALL_STRAIGHTS: tuple[tuple[int, ...], ...] = ((1, 2, 3, 4), (2, 3, 4, 5))

# Checked in order; the first window fully present wins
_STRAIGHT_RULES = (
    *((w, LARGE_STRAIGHT_POINTS, ScoringCategory.LARGE_STRAIGHT, "Large") for w in LARGE_STRAIGHTS),
    *((w, SMALL_STRAIGHT_POINTS, ScoringCategory.SMALL_STRAIGHT, "Small") for w in SMALL_STRAIGHTS),
)

_COUNT_WORDS = {3: "Three", 4: "Four", 5: "Five"}


def count_dice(dice: Sequence[int]) -> Counter[int]:
    """
    Build a face -> count histogram.

    Faces that do not appear are absent from the mapping.
    """
    return Counter(validate_dice_values(dice, min_count=0))


def score_singles(dice: Sequence[int]) -> int:
    """Sum 100 per 1 and 50 per 5, ignoring every combination."""
    counts = count_dice(dice)
    return counts[1] * SINGLE_ONE_POINTS + counts[5] * SINGLE_FIVE_POINTS


def score_selection(dice: Sequence[int]) -> ScoringResult:
    """
    Calculate the best score for the given dice.

    Identifies all scoring combinations and returns a complete breakdown
    together with the dice that were used and the dice that were not.

    Args:
        dice: Dice values to score (any order)

    Returns:
        ScoringResult whose scoring_dice and remaining_dice together
        contain every input die exactly once
    """
    values = validate_dice_values(dice, min_count=0)
    if not values:
        return ScoringResult(score=0)

    breakdown: list[ScoringBreakdown] = []
    remaining = Counter(values)

    # Check straights first (they consume multiple distinct dice)
    straight = _check_straights(remaining)
    if straight is not None:
        breakdown.append(straight)

    # Check for sets (three or more of a kind)
    breakdown.extend(_check_sets(remaining))

    # Check remaining singles (1s and 5s)
    breakdown.extend(_check_singles(remaining))

    scoring_dice = tuple(v for item in breakdown for v in item.dice_values)

    leftover = Counter(remaining)
    remaining_dice: list[int] = []
    for value in values:
        if leftover[value] > 0:
            remaining_dice.append(value)
            leftover[value] -= 1

    return ScoringResult(
        score=sum(item.points for item in breakdown),
        scoring_dice=scoring_dice,
        remaining_dice=tuple(remaining_dice),
        breakdown=tuple(breakdown),
    )


def has_scoring(dice: Sequence[int]) -> bool:
    """Returns True if the dice contain at least one scoring combination."""
    return score_selection(dice).score > 0


def is_bust(dice: Sequence[int]) -> bool:
    """
    Check if a roll is a bust (no scoring dice).

    An empty roll is a bust.
    """
    return not has_scoring(dice)


def _check_straights(remaining: Counter[int]) -> ScoringBreakdown | None:
    """
    Check for straight combinations.

    Straights are mutually exclusive - only one can be scored. Large
    straights take precedence over small ones. Consumed dice are removed
    from `remaining`.
    """
    for window, points, category, label in _STRAIGHT_RULES:
        if all(remaining[v] >= 1 for v in window):
            for v in window:
                remaining[v] -= 1
            return ScoringBreakdown(
                category=category,
                dice_values=window,
                points=points,
                description=f"{label} Straight ({'-'.join(str(v) for v in window)})",
            )
    return None


def _check_sets(remaining: Counter[int]) -> list[ScoringBreakdown]:
    """
    Check for three or more of a kind.

    Points double for each additional die beyond three.
    Special case: Three 1s = 1000 points.
    """
    breakdown: list[ScoringBreakdown] = []

    for face_value in range(1, 7):
        count = remaining[face_value]
        if count < 3:
            continue

        if face_value == 1:
            base_points = THREE_ONES_POINTS
        else:
            base_points = face_value * 100

        points = base_points * 2 ** (count - 3)

        if count == 3:
            category = ScoringCategory.THREE_OF_A_KIND
        elif count == 4:
            category = ScoringCategory.FOUR_OF_A_KIND
        else:
            category = ScoringCategory.FIVE_OF_A_KIND

        word = _COUNT_WORDS.get(count, f"{count}x")
        remaining[face_value] = 0

        breakdown.append(ScoringBreakdown(
            category=category,
            dice_values=(face_value,) * count,
            points=points,
            description=f"{word} {face_value}s",
        ))

    return breakdown


def _check_singles(remaining: Counter[int]) -> list[ScoringBreakdown]:
    """
    Check for remaining single 1s and 5s.

    Only 1s and 5s score as singles.
    """
    breakdown: list[ScoringBreakdown] = []

    for face_value, unit_points, category in (
        (1, SINGLE_ONE_POINTS, ScoringCategory.SINGLE_ONE),
        (5, SINGLE_FIVE_POINTS, ScoringCategory.SINGLE_FIVE),
    ):
        count = remaining[face_value]
        if count == 0:
            continue
        remaining[face_value] = 0

        if count == 1:
            description = f"Single {face_value}"
        else:
            description = f"{count}x Single {face_value}s"

        breakdown.append(ScoringBreakdown(
            category=category,
            dice_values=(face_value,) * count,
            points=count * unit_points,
            description=description,
        ))

    return breakdown

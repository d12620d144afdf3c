"""
Greedy - AI Strategies

Pluggable personalities for computer players. A strategy only chooses
between rolling on and banking; which dice to keep is always the
maximum-scoring selection, shared by every personality. Decisions are
plain actions, so AI players drive the engine through exactly the same
reducers as humans.
"""

from dataclasses import dataclass, field
from typing import Callable

from greedy.engine.base import (
    ENTRY_THRESHOLD,
    STRATEGY_NAMES,
    Action,
    ActionType,
    InvalidActionError,
    TurnPhase,
    TurnState,
)
from greedy.engine.dice import DiceRoller
from greedy.engine.scoring import score_selection
from greedy.engine.turn import can_bank


@dataclass(frozen=True)
class AIDecision:
    """What an AI player wants to do next."""
    action: ActionType
    dice: tuple[int, ...] = field(default_factory=tuple)

    def to_action(self) -> Action:
        """Convert to a reducer action. ROLL decisions carry no dice yet."""
        return Action(self.action, self.dice)


Strategy = Callable[[TurnState, bool, int], AIDecision]
DeclinePolicy = Callable[[TurnState, bool], bool]

ROLL = AIDecision(ActionType.ROLL)
BANK = AIDecision(ActionType.BANK)

# Thresholds
CONSERVATIVE_BANK_AT = 300
AGGRESSIVE_BANK_AT = 3000
BALANCED_BANK_AT = 1000
BALANCED_FEW_DICE = 2
BALANCED_FEW_DICE_BANK_AT = 400
CHAOS_BANK_PROBABILITY = 0.5


def choose_keep(roll: tuple[int, ...]) -> tuple[int, ...]:
    """Return the maximum-scoring selection of dice from a roll."""
    return score_selection(roll).scoring_dice


def _below_entry(turn: TurnState, is_on_board: bool, entry_threshold: int) -> bool:
    return not is_on_board and turn.own_score < entry_threshold


def conservative_strategy(
    turn: TurnState, is_on_board: bool, entry_threshold: int = ENTRY_THRESHOLD
) -> AIDecision:
    """Bank as soon as a modest score of its own is secured."""
    threshold = CONSERVATIVE_BANK_AT if is_on_board else entry_threshold
    return BANK if turn.own_score >= threshold else ROLL


def aggressive_strategy(
    turn: TurnState, is_on_board: bool, entry_threshold: int = ENTRY_THRESHOLD
) -> AIDecision:
    """Push through almost every score, chasing hot dice even with one die left."""
    if _below_entry(turn, is_on_board, entry_threshold):
        return ROLL
    return BANK if turn.turn_score >= AGGRESSIVE_BANK_AT else ROLL


def balanced_strategy(
    turn: TurnState, is_on_board: bool, entry_threshold: int = ENTRY_THRESHOLD
) -> AIDecision:
    """
    Weigh the score against the dice left.

    Banks above a high ceiling no matter how many dice remain, and banks
    a moderate score when only a couple of dice are left to roll.
    """
    if _below_entry(turn, is_on_board, entry_threshold):
        return ROLL
    if turn.turn_score >= BALANCED_BANK_AT:
        return BANK
    if turn.dice_remaining <= BALANCED_FEW_DICE and turn.turn_score >= BALANCED_FEW_DICE_BANK_AT:
        return BANK
    return ROLL


def make_chaos_strategy(
    roller: DiceRoller | None = None,
    bank_probability: float = CHAOS_BANK_PROBABILITY,
) -> Strategy:
    """
    Build a coin-flipping strategy.

    Pass a seeded DiceRoller for reproducible choices. The strategy never
    banks while off the board and short of the entry threshold.
    """
    source = roller if roller is not None else DiceRoller()

    def chaos(
        turn: TurnState, is_on_board: bool, entry_threshold: int = ENTRY_THRESHOLD
    ) -> AIDecision:
        if _below_entry(turn, is_on_board, entry_threshold):
            return ROLL
        return BANK if source.chance() < bank_probability else ROLL

    return chaos


chaos_strategy = make_chaos_strategy()


AI_STRATEGIES: dict[str, Strategy] = {
    "conservative": conservative_strategy,
    "aggressive": aggressive_strategy,
    "balanced": balanced_strategy,
    "chaos": chaos_strategy,
}

if tuple(AI_STRATEGIES) != STRATEGY_NAMES:
    raise RuntimeError(
        f"AI_STRATEGIES {tuple(AI_STRATEGIES)} does not match STRATEGY_NAMES {STRATEGY_NAMES}."
    )


def get_strategy(name: str) -> Strategy:
    """Look up a strategy by name."""
    try:
        return AI_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown AI strategy {name!r}; expected one of {', '.join(STRATEGY_NAMES)}."
        ) from None


def resolve_strategy(name: str, roller: DiceRoller) -> Strategy:
    """
    Look up a strategy by name, binding chaos to `roller`.

    Coin flips then come from the same seeded source as the dice, so a
    game replays exactly from its seed.
    """
    if name == "chaos":
        return make_chaos_strategy(roller)
    return get_strategy(name)


def make_ai_decision(
    turn: TurnState,
    is_on_board: bool,
    strategy: Strategy,
    entry_threshold: int = ENTRY_THRESHOLD,
    decline_carryover: DeclinePolicy | None = None,
) -> AIDecision:
    """
    Decide the next action for an AI player.

    Args:
        turn: Current turn state
        is_on_board: Whether the player has already got on the board
        strategy: Personality consulted for the roll/bank choice; it is
            passed the entry threshold as its third argument
        entry_threshold: Self-earned points needed to get on the board
        decline_carryover: Optional policy asked before rolling for a
            carryover pot; returning True turns the pot down

    Returns:
        KEEP with the best dice after a roll, ROLL when dice must be
        thrown, otherwise the strategy's ROLL or BANK (forced to ROLL
        while banking is not allowed)

    Raises:
        InvalidActionError: If the turn has already ended
    """
    phase = turn.phase

    if phase == TurnPhase.ENDED:
        raise InvalidActionError(
            "No decision to make: the turn has ended.", phase=phase
        )

    if turn.current_roll is not None and phase in (TurnPhase.KEEPING, TurnPhase.STEAL_REQUIRED):
        return AIDecision(ActionType.KEEP, choose_keep(turn.current_roll))

    if phase == TurnPhase.STEAL_REQUIRED:
        if decline_carryover is not None and decline_carryover(turn, is_on_board):
            return AIDecision(ActionType.DECLINE_CARRYOVER)
        return ROLL

    if phase == TurnPhase.ROLLING:
        return ROLL

    decision = strategy(turn, is_on_board, entry_threshold)
    if decision.action == ActionType.BANK and not can_bank(turn, is_on_board, entry_threshold):
        return ROLL
    return decision

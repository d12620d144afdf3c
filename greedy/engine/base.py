"""
Greedy - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All state classes are immutable (frozen dataclasses): every
transition returns a new instance, so any number of independent games can be
advanced side by side without shared mutable storage.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence


# Rule constants
DICE_COUNT = 5
DIE_FACES = 6
ENTRY_THRESHOLD = 600
TARGET_SCORE = 10000
MAX_PLAYERS = 12

# Names accepted for computer players, in registry order
STRATEGY_NAMES = ("conservative", "aggressive", "balanced", "chaos")


class TurnPhase(Enum):
    """Phases of a single player's turn."""
    ROLLING = "rolling"
    STEAL_REQUIRED = "steal_required"  # Inherited a carryover pot
    KEEPING = "keeping"
    DECIDING = "deciding"
    ENDED = "ended"


class ActionType(Enum):
    """Actions accepted by the turn and game reducers."""
    ROLL = "ROLL"
    KEEP = "KEEP"
    BANK = "BANK"
    END_TURN = "END_TURN"
    DECLINE_CARRYOVER = "DECLINE_CARRYOVER"


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FIVE_OF_A_KIND = auto()
    SMALL_STRAIGHT = auto()    # 1-2-3-4 or 2-3-4-5
    LARGE_STRAIGHT = auto()    # 1-2-3-4-5 or 2-3-4-5-6


class InvalidActionError(ValueError):
    """Raised when an action is not legal for the current state."""

    def __init__(
        self,
        message: str,
        phase: TurnPhase | None = None,
        action: ActionType | None = None,
    ) -> None:
        super().__init__(message)
        self.phase = phase
        self.action = action


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a selection.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a set of dice.

    Attributes:
        score: Total points scored
        scoring_dice: Dice consumed by scoring rules, in discovery order
        remaining_dice: Dice that did not contribute, in input order
        breakdown: Individual scoring components, in discovery order
    """
    score: int
    scoring_dice: tuple[int, ...] = field(default_factory=tuple)
    remaining_dice: tuple[int, ...] = field(default_factory=tuple)
    breakdown: tuple[ScoringBreakdown, ...] = field(default_factory=tuple)

    @property
    def is_bust(self) -> bool:
        """Returns True if nothing scored."""
        return self.score == 0

    @property
    def uses_all_dice(self) -> bool:
        """Returns True if every die contributed to the score."""
        return not self.remaining_dice and bool(self.scoring_dice)

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! No scoring dice."
        lines = [f"Total: {self.score} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class KeepValidation:
    """Outcome of checking a proposed keep against a roll."""
    valid: bool
    error: str | None = None


@dataclass(frozen=True)
class CarryoverPot:
    """
    Points and dice left unclaimed by a bank, offered to the next player.

    Attributes:
        points: Turn score the previous player banked
        dice_count: Dice the previous player left unrolled (1-5)
    """
    points: int
    dice_count: int

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Carryover points cannot be negative, got {self.points}.")
        if not 1 <= self.dice_count <= DICE_COUNT:
            raise ValueError(
                f"Carryover dice count must be between 1 and {DICE_COUNT}, "
                f"got {self.dice_count}."
            )


@dataclass(frozen=True)
class TurnState:
    """
    Complete state of a player's turn.

    Attributes:
        phase: Current phase of the turn
        turn_score: Points accumulated this turn (not yet banked)
        dice_remaining: Dice available for the next roll
        current_roll: Dice shown by the latest roll, if any
        kept_dice: All dice kept so far this turn
        has_carryover: Whether the turn started from a carryover pot
        carryover_claimed: Whether a keep has claimed the pot
        carryover_points: Points inherited from the pot
        is_bust: Whether the turn ended on a bust
    """
    phase: TurnPhase = TurnPhase.ROLLING
    turn_score: int = 0
    dice_remaining: int = DICE_COUNT
    current_roll: tuple[int, ...] | None = None
    kept_dice: tuple[int, ...] = field(default_factory=tuple)
    has_carryover: bool = False
    carryover_claimed: bool = False
    carryover_points: int = 0
    is_bust: bool = False

    @property
    def own_score(self) -> int:
        """Points earned this turn, excluding any inherited carryover."""
        return self.turn_score - self.carryover_points

    @property
    def is_over(self) -> bool:
        return self.phase == TurnPhase.ENDED


@dataclass(frozen=True)
class PlayerState:
    """A seat at the table."""
    id: str
    name: str
    score: int = 0
    is_on_board: bool = False
    is_ai: bool = False
    ai_strategy: str | None = None


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game.

    Attributes:
        players: Players in turn order
        current_player_index: Seat whose turn it is
        turn: State of the current turn
        carryover_pot: Pot waiting for the current or next player
        is_final_round: Whether someone has reached the target score
        final_round_trigger_index: Seat that started the final round
        score_to_beat: Highest total during the final round
        score_to_beat_player_index: Seat holding score_to_beat
        is_game_over: Terminal flag
        target_score: Total that triggers the final round
        entry_threshold: Self-earned points needed to get on the board
    """
    players: tuple[PlayerState, ...]
    current_player_index: int = 0
    turn: TurnState = field(default_factory=TurnState)
    carryover_pot: CarryoverPot | None = None
    is_final_round: bool = False
    final_round_trigger_index: int | None = None
    score_to_beat: int | None = None
    score_to_beat_player_index: int | None = None
    is_game_over: bool = False
    target_score: int = TARGET_SCORE
    entry_threshold: int = ENTRY_THRESHOLD

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_index]


@dataclass(frozen=True)
class Action:
    """
    Tagged action dispatched to the reducers.

    Only ROLL and KEEP carry dice; use the named constructors.
    """
    type: ActionType
    dice: tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def roll(cls, dice: Sequence[int]) -> "Action":
        return cls(ActionType.ROLL, tuple(dice))

    @classmethod
    def keep(cls, dice: Sequence[int]) -> "Action":
        return cls(ActionType.KEEP, tuple(dice))

    @classmethod
    def bank(cls) -> "Action":
        return cls(ActionType.BANK)

    @classmethod
    def end_turn(cls) -> "Action":
        return cls(ActionType.END_TURN)

    @classmethod
    def decline_carryover(cls) -> "Action":
        return cls(ActionType.DECLINE_CARRYOVER)


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        target_score: Total that triggers the final round
        entry_threshold: Self-earned points needed in one turn to get on the board
        num_players: Number of seats (1-12)
    """
    target_score: int = TARGET_SCORE
    entry_threshold: int = ENTRY_THRESHOLD
    num_players: int = 2

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not 1 <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"Number of players must be between 1 and {MAX_PLAYERS}."
            )
        if self.target_score <= 0:
            raise ValueError(f"Target score must be positive, got {self.target_score}.")
        if self.entry_threshold < 0:
            raise ValueError(
                f"Entry threshold cannot be negative, got {self.entry_threshold}."
            )

"""
Greedy - Player Configuration Models

Pydantic models validating the seat configuration a game is created from.
"""

from pydantic import BaseModel, Field, field_validator

from greedy.engine.base import STRATEGY_NAMES


class PlayerConfig(BaseModel):
    """
    One seat at the table, as chosen before the game starts.

    An AI seat without an ai_strategy plays the configured default.
    """

    name: str = Field(min_length=1, max_length=30)
    is_ai: bool = False
    ai_strategy: str | None = None

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Player name cannot be blank.")
        return value

    @field_validator("ai_strategy")
    @classmethod
    def _known_strategy(cls, value: str | None) -> str | None:
        if value is not None and value not in STRATEGY_NAMES:
            raise ValueError(
                f"Unknown AI strategy {value!r}; expected one of {', '.join(STRATEGY_NAMES)}."
            )
        return value

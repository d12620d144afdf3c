"""
Greedy - Application Settings

Loads configuration from environment variables (prefixed GREEDY_) and an
optional .env file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greedy.engine.base import ENTRY_THRESHOLD, STRATEGY_NAMES, TARGET_SCORE, GameConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Rules
    target_score: int = Field(default=TARGET_SCORE, gt=0)
    entry_threshold: int = Field(default=ENTRY_THRESHOLD, ge=0)

    # Simulation
    seed: int | None = None
    default_ai_strategy: str = "balanced"

    model_config = SettingsConfigDict(
        env_prefix="GREEDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("default_ai_strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        if value not in STRATEGY_NAMES:
            raise ValueError(
                f"Unknown AI strategy {value!r}; expected one of {', '.join(STRATEGY_NAMES)}."
            )
        return value

    def game_config(self, num_players: int) -> GameConfig:
        """Build the rule configuration for a game with `num_players` seats."""
        return GameConfig(
            target_score=self.target_score,
            entry_threshold=self.entry_threshold,
            num_players=num_players,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings (DEBUG when debug is on)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)

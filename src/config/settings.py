"""
Le Jeu du 5000 - Application Settings

Loads configuration from environment variables (or a `.env` file) using
Pydantic Settings. The game-rule fields seed the default GameSettings used
when no settings file has been saved yet.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from src.engine.base import GameSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Settings store (JSON file); in-memory when unset
    settings_file: str | None = None

    # Game rule defaults
    opening_score_threshold: int = 500
    victory_score: int = 5000
    must_win_on_exact_score: bool = False
    cancel_opponent_score_on_match: bool = False
    allow_fifty_point_scores: bool = False
    use_three_lives_rule: bool = False
    allow_steal_on_pass: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_settings(self) -> GameSettings:
        """Immutable rules snapshot built from the configured defaults."""
        return GameSettings(
            opening_score_threshold=self.opening_score_threshold,
            victory_score=self.victory_score,
            must_win_on_exact_score=self.must_win_on_exact_score,
            cancel_opponent_score_on_match=self.cancel_opponent_score_on_match,
            allow_fifty_point_scores=self.allow_fifty_point_scores,
            use_three_lives_rule=self.use_three_lives_rule,
            allow_steal_on_pass=self.allow_steal_on_pass,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from LOG_LEVEL (DEBUG when DEBUG is set)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)

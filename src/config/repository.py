"""
Le Jeu du 5000 - Game Settings Repository

Storage for the rules a game is played with. The engine only ever sees the
immutable GameSettings snapshot returned by `get_game_settings()`; updates
replace the stored record wholesale.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, replace
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

from src.config.settings import Settings, get_settings
from src.engine.base import GameSettings

logger = logging.getLogger(__name__)


class GameSettingsRecord(BaseModel):
    """Serialized form of GameSettings."""

    opening_score_threshold: int = Field(default=500, ge=0)
    victory_score: int = Field(default=5000, gt=0)
    must_win_on_exact_score: bool = False
    cancel_opponent_score_on_match: bool = False
    allow_fifty_point_scores: bool = False
    use_three_lives_rule: bool = False
    allow_steal_on_pass: bool = False

    model_config = {"frozen": True}

    @classmethod
    def from_game_settings(cls, settings: GameSettings) -> "GameSettingsRecord":
        return cls.model_validate(asdict(settings))

    def to_game_settings(self) -> GameSettings:
        return GameSettings(**self.model_dump())


class SettingsRepository(ABC):
    """
    Base settings store.

    Subclasses implement `_load` and `_save`; the update methods are shared.
    """

    def get_game_settings(self) -> GameSettings:
        """Current rules snapshot."""
        return self._load()

    def update_opening_score_threshold(self, threshold: int) -> GameSettings:
        return self._update(opening_score_threshold=threshold)

    def update_victory_score(self, score: int) -> GameSettings:
        return self._update(victory_score=score)

    def update_must_win_on_exact_score(self, must_be_exact: bool) -> GameSettings:
        return self._update(must_win_on_exact_score=must_be_exact)

    def update_cancel_opponent_score_on_match(self, cancel_on_match: bool) -> GameSettings:
        return self._update(cancel_opponent_score_on_match=cancel_on_match)

    def update_allow_fifty_point_scores(self, allow_fifty: bool) -> GameSettings:
        return self._update(allow_fifty_point_scores=allow_fifty)

    def update_use_three_lives_rule(self, use_three_lives: bool) -> GameSettings:
        return self._update(use_three_lives_rule=use_three_lives)

    def update_allow_steal_on_pass(self, allow_steal: bool) -> GameSettings:
        return self._update(allow_steal_on_pass=allow_steal)

    def _update(self, **changes: object) -> GameSettings:
        updated = replace(self._load(), **changes)
        self._save(updated)
        logger.debug("Game settings updated: %s", changes)
        return updated

    @abstractmethod
    def _load(self) -> GameSettings:
        """Read the stored rules."""

    @abstractmethod
    def _save(self, settings: GameSettings) -> None:
        """Replace the stored rules."""


class InMemorySettingsRepository(SettingsRepository):
    """Keeps settings for the lifetime of the process."""

    def __init__(self, initial: GameSettings | None = None) -> None:
        self._settings = initial or GameSettings()

    def _load(self) -> GameSettings:
        return self._settings

    def _save(self, settings: GameSettings) -> None:
        self._settings = settings


class JsonFileSettingsRepository(SettingsRepository):
    """
    Persists settings as a JSON document.

    A missing file yields the defaults. A file holding invalid values raises
    pydantic.ValidationError on load.
    """

    def __init__(self, path: str | Path, defaults: GameSettings | None = None) -> None:
        self.path = Path(path)
        self.defaults = defaults or GameSettings()

    def _load(self) -> GameSettings:
        if not self.path.exists():
            return self.defaults
        record = GameSettingsRecord.model_validate_json(self.path.read_text(encoding="utf-8"))
        return record.to_game_settings()

    def _save(self, settings: GameSettings) -> None:
        record = GameSettingsRecord.from_game_settings(settings)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(record.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Saved game settings to %s", self.path)


def build_settings_repository(settings: Settings) -> SettingsRepository:
    """File store when SETTINGS_FILE is set, otherwise in-memory."""
    defaults = settings.game_settings()
    if settings.settings_file:
        return JsonFileSettingsRepository(settings.settings_file, defaults=defaults)
    return InMemorySettingsRepository(defaults)


@lru_cache(maxsize=1)
def get_settings_repository() -> SettingsRepository:
    """Cached repository built from the application settings."""
    return build_settings_repository(get_settings())

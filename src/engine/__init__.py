"""
Le Jeu du 5000 Game Engine.

Pure Python game logic with zero UI/storage dependencies.
Handles dice rolling, scoring, bust detection, hot dice and turn finalization.
"""

from src.engine.base import (
    Die,
    GameSettings,
    GameState,
    Player,
    ScoreEntry,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
    TurnPhase,
    TurnState,
)
from src.engine.dice import FaceSource, RandomFaceSource, roll_pool
from src.engine.events import GameEvent
from src.engine.finalizer import TurnFinalizer
from src.engine.five_thousand import FiveThousandEngine
from src.engine.scoring import FullHouseKind, ScoringEngine

__all__ = [
    # Data Classes
    "Die",
    "GameSettings",
    "GameState",
    "Player",
    "ScoreEntry",
    "ScoringBreakdown",
    "ScoringResult",
    "TurnState",
    # Enums
    "FullHouseKind",
    "GameEvent",
    "ScoringCategory",
    "TurnPhase",
    # Dice
    "FaceSource",
    "RandomFaceSource",
    "roll_pool",
    # Engines
    "FiveThousandEngine",
    "ScoringEngine",
    "TurnFinalizer",
]

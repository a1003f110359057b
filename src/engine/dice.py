"""
Le Jeu du 5000 - Dice Rolling

Face sources and the roll action. The engine never reaches for global
randomness directly: a face source is injected so games stay reproducible
under test.
"""

import random
from dataclasses import replace
from typing import Protocol, Sequence

from src.engine.base import MAX_FACE, MIN_FACE, POOL_SIZE, Die
from src.engine.validators import validate_face, validate_pool


class FaceSource(Protocol):
    """Produces uniform die faces in 1..6."""

    def next(self) -> int:
        ...


class RandomFaceSource:
    """Face source backed by `random.Random`, optionally seeded."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next(self) -> int:
        return self._rng.randint(MIN_FACE, MAX_FACE)


def roll_pool(dice: Sequence[Die], source: FaceSource) -> tuple[Die, ...]:
    """
    Roll every available die in a pool.

    If no die is available (all held this turn), the pool is replaced by
    five fresh available dice, all rolled: the hot-dice re-roll. Otherwise
    only available dice get a new face; held dice are returned untouched.

    Args:
        dice: The current pool of five dice
        source: Where new faces come from

    Returns:
        The new pool

    Raises:
        ValueError: If the pool is malformed or the source yields a bad face
    """
    pool = validate_pool(dice)

    if not any(d.is_available for d in pool):
        return tuple(Die(value=validate_face(source.next())) for _ in range(POOL_SIZE))

    return tuple(
        replace(d, value=validate_face(source.next())) if d.is_available else d
        for d in pool
    )

"""
Le Jeu du 5000 - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
These guard the engine boundary against integration errors; game-rule
rejections are reported as events instead.
"""

from typing import Iterable, Sequence

from src.engine.base import MAX_FACE, MAX_PLAYERS, MIN_FACE, POOL_SIZE, Die

MAX_NAME_LENGTH = 30


def validate_face(value: int) -> int:
    """
    Validate a single face value produced by a face source.

    Raises:
        ValueError: If the value is not an integer in 1..6
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Die face must be an integer, got {type(value).__name__}.")
    if not (MIN_FACE <= value <= MAX_FACE):
        raise ValueError(f"Die face {value} is out of range, must be between {MIN_FACE} and {MAX_FACE}.")
    return value


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int | None = POOL_SIZE
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (MIN_FACE <= value <= MAX_FACE):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {MIN_FACE} and {MAX_FACE}."
            )

    return values_tuple


def validate_pool(dice: Sequence[Die]) -> tuple[Die, ...]:
    """
    Validate a dice pool: exactly five dice with distinct ids.

    Raises:
        ValueError: If the pool has the wrong size or duplicate ids
    """
    pool = tuple(dice)
    if len(pool) != POOL_SIZE:
        raise ValueError(f"A dice pool holds exactly {POOL_SIZE} dice, got {len(pool)}.")
    ids = {d.id for d in pool}
    if len(ids) != POOL_SIZE:
        raise ValueError("Dice in a pool must have distinct ids.")
    return pool


def validate_selection(
    die_ids: Iterable[str],
    dice: Sequence[Die]
) -> frozenset[str]:
    """
    Validate the ids of dice selected for a hold.

    Args:
        die_ids: Ids picked by the player
        dice: The pool the ids must refer to

    Returns:
        Validated ids as a frozenset

    Raises:
        ValueError: If an id is unknown or refers to a die that is not available
    """
    selected = frozenset(die_ids)
    by_id = {d.id: d for d in dice}

    for die_id in selected:
        die = by_id.get(die_id)
        if die is None:
            raise ValueError(f"Unknown die id {die_id!r}.")
        if not die.is_available:
            raise ValueError(f"Die {die_id!r} is not available for selection.")

    return selected


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate the names of the players joining a new game.

    Returns:
        Stripped names as a tuple

    Raises:
        ValueError: If the count is not 1-5 or a name is empty or too long
    """
    if isinstance(names, str):
        raise ValueError("Player names must be a sequence of strings, not a single string.")

    cleaned = tuple(str(name).strip() for name in names)

    if not (1 <= len(cleaned) <= MAX_PLAYERS):
        raise ValueError(f"Player count must be 1-{MAX_PLAYERS}, got {len(cleaned)}.")

    for i, name in enumerate(cleaned):
        if not name:
            raise ValueError(f"Player name at index {i} cannot be empty.")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Player name at index {i} is longer than {MAX_NAME_LENGTH} characters."
            )

    return cleaned


def validate_score(score: int, allow_negative: bool = False) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is invalid
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if not allow_negative and score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score

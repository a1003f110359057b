"""
Le Jeu du 5000 - Scoring Engine

Maps any set of zero to five D6 faces to a point value. All methods are
stateless class methods; the result never depends on dice order.

Scoring Rules (five dice, first match wins):
    - Five 1s: 5,000 points (instant win)
    - 1-2-3-4-5 or 2-3-4-5-6 (Straight): 1,500 points
    - Full house (three X + pair Y):
        three 1s + pair of 5s -> 1,100
        three 1s + other pair -> 1,000
        three X + pair of 1s  -> X × 100 + 200
        otherwise             -> X × Y × 100
Otherwise, and for fewer dice:
    - Three 1s: 1,000 points, three of X (2-6): X × 100 points,
      extracted in face order 1, 6, 5, 4, 3, 2
    - Each remaining 1: 100 points, each remaining 5: 50 points
"""

from enum import Enum
from typing import Callable, Sequence

from src.engine.base import (
    MAX_FACE,
    POOL_SIZE,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from src.engine.validators import validate_dice_values

# Order in which three-of-a-kind sets are taken out of a roll
THREE_OF_A_KIND_PRIORITY: tuple[int, ...] = (1, 6, 5, 4, 3, 2)

LOW_STRAIGHT: tuple[int, ...] = (1, 2, 3, 4, 5)
HIGH_STRAIGHT: tuple[int, ...] = (2, 3, 4, 5, 6)


class FullHouseKind(Enum):
    """Closed set of full-house shapes, keyed by (three-face, pair-face)."""
    ONES_WITH_FIVES = "ones_with_fives"
    ONES_WITH_OTHER_PAIR = "ones_with_other_pair"
    PAIR_OF_ONES = "pair_of_ones"
    GENERAL = "general"


def classify_full_house(three_face: int, pair_face: int) -> FullHouseKind:
    """Pick the full-house shape for a three-of-a-kind face and a pair face."""
    if three_face == pair_face:
        raise ValueError("A full house needs two distinct faces.")
    if three_face == 1:
        if pair_face == 5:
            return FullHouseKind.ONES_WITH_FIVES
        return FullHouseKind.ONES_WITH_OTHER_PAIR
    if pair_face == 1:
        return FullHouseKind.PAIR_OF_ONES
    return FullHouseKind.GENERAL


class ScoringEngine:
    """
    Stateless scoring for the 5000 dice game.

    All methods are class methods operating on immutable data.
    """

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    STRAIGHT_POINTS = 1500
    FIVE_ONES_POINTS = 5000
    PAIR_OF_FIVES_BONUS = 100
    PAIR_OF_ONES_POINTS = 200

    FULL_HOUSE_POINTS: dict[FullHouseKind, Callable[[int, int], int]] = {
        FullHouseKind.ONES_WITH_FIVES: lambda three, pair: ScoringEngine.THREE_ONES_POINTS + ScoringEngine.PAIR_OF_FIVES_BONUS,
        FullHouseKind.ONES_WITH_OTHER_PAIR: lambda three, pair: ScoringEngine.THREE_ONES_POINTS,
        FullHouseKind.PAIR_OF_ONES: lambda three, pair: three * 100 + ScoringEngine.PAIR_OF_ONES_POINTS,
        FullHouseKind.GENERAL: lambda three, pair: three * pair * 100,
    }

    @classmethod
    def score(cls, dice: Sequence[int]) -> int:
        """Point value of the given faces (0 when nothing scores)."""
        return cls.calculate_score(dice).points

    @classmethod
    def calculate_score(cls, dice: Sequence[int]) -> ScoringResult:
        """
        Calculate the score for a set of dice.

        Five-dice combinations (five 1s, straights, full houses) consume the
        whole roll and are checked first. Anything else falls back to the
        additive rules: three-of-a-kind sets, then single 1s and 5s.

        Args:
            dice: Zero to five face values, in any order

        Returns:
            ScoringResult with total points, breakdown, and scoring indices
        """
        values = validate_dice_values(dice)

        if not values:
            return ScoringResult(points=0, breakdown=tuple(), scoring_dice_indices=frozenset())

        counts = cls._count_faces(values)

        if len(values) == POOL_SIZE:
            combination = cls._check_five_dice_combinations(values, counts)
            if combination is not None:
                return ScoringResult(
                    points=combination.points,
                    breakdown=(combination,),
                    scoring_dice_indices=frozenset(range(POOL_SIZE)),
                )

        return cls._score_additive(values, counts)

    @classmethod
    def _count_faces(cls, values: tuple[int, ...]) -> list[int]:
        """Counts indexed by face value; slot 0 is unused."""
        counts = [0] * (MAX_FACE + 1)
        for value in values:
            counts[value] += 1
        return counts

    @classmethod
    def _check_five_dice_combinations(
        cls,
        values: tuple[int, ...],
        counts: list[int]
    ) -> ScoringBreakdown | None:
        """
        Check the terminal five-dice combinations in priority order.

        Returns:
            The matching breakdown, or None to fall through to additive scoring
        """
        if counts[1] == POOL_SIZE:
            return ScoringBreakdown(
                category=ScoringCategory.FIVE_ONES,
                dice_values=values,
                points=cls.FIVE_ONES_POINTS,
                description="Five 1s",
            )

        faces = tuple(sorted(values))
        if faces in (LOW_STRAIGHT, HIGH_STRAIGHT):
            return ScoringBreakdown(
                category=ScoringCategory.STRAIGHT,
                dice_values=faces,
                points=cls.STRAIGHT_POINTS,
                description=f"Straight ({faces[0]}-{faces[-1]})",
            )

        present = [face for face in range(1, MAX_FACE + 1) if counts[face]]
        if len(present) == 2 and sorted(counts[face] for face in present) == [2, 3]:
            three_face = next(face for face in present if counts[face] == 3)
            pair_face = next(face for face in present if counts[face] == 2)
            kind = classify_full_house(three_face, pair_face)
            return ScoringBreakdown(
                category=ScoringCategory.FULL_HOUSE,
                dice_values=(three_face,) * 3 + (pair_face,) * 2,
                points=cls.FULL_HOUSE_POINTS[kind](three_face, pair_face),
                description=f"Full house (three {three_face}s, pair of {pair_face}s)",
            )

        return None

    @classmethod
    def _score_additive(
        cls,
        values: tuple[int, ...],
        counts: list[int]
    ) -> ScoringResult:
        """Three-of-a-kind extraction followed by single 1s and 5s."""
        breakdown: list[ScoringBreakdown] = []
        indices: set[int] = set()
        remaining = list(counts)

        for face in THREE_OF_A_KIND_PRIORITY:
            if remaining[face] >= 3:
                points = cls.THREE_ONES_POINTS if face == 1 else face * 100
                indices.update(cls._find_indices_for_value(values, face, 3, exclude=indices))
                remaining[face] -= 3
                breakdown.append(ScoringBreakdown(
                    category=ScoringCategory.THREE_OF_A_KIND,
                    dice_values=(face, face, face),
                    points=points,
                    description=f"Three {face}s",
                ))

        singles = (
            (1, cls.SINGLE_ONE_POINTS, ScoringCategory.SINGLE_ONE),
            (5, cls.SINGLE_FIVE_POINTS, ScoringCategory.SINGLE_FIVE),
        )
        for face, unit, category in singles:
            count = remaining[face]
            if count > 0:
                indices.update(cls._find_indices_for_value(values, face, count, exclude=indices))
                remaining[face] = 0
                breakdown.append(ScoringBreakdown(
                    category=category,
                    dice_values=(face,) * count,
                    points=count * unit,
                    description=f"{count}x Single {face}{'s' if count > 1 else ''}",
                ))

        return ScoringResult(
            points=sum(item.points for item in breakdown),
            breakdown=tuple(breakdown),
            scoring_dice_indices=frozenset(indices),
        )

    @classmethod
    def _find_indices_for_value(
        cls,
        values: tuple[int, ...],
        target: int,
        count: int,
        exclude: set[int] | None = None
    ) -> set[int]:
        """Find `count` indices with the target value."""
        indices: set[int] = set()
        exclude = exclude or set()

        for i, v in enumerate(values):
            if len(indices) == count:
                break
            if v == target and i not in exclude:
                indices.add(i)

        return indices

    @classmethod
    def is_bust(cls, dice: Sequence[int]) -> bool:
        """
        Check if dice on the table are a bust.

        An empty table is not a bust: there is nothing left to roll.
        """
        values = tuple(dice)
        return len(values) > 0 and cls.score(values) == 0

    @classmethod
    def scoring_faces(cls) -> frozenset[int]:
        """Faces that score on their own."""
        return frozenset(
            face for face in range(1, MAX_FACE + 1) if cls.score((face,)) > 0
        )

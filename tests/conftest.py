"""
Le Jeu du 5000 - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from dataclasses import replace
from typing import Iterable

import pytest

from src.engine.base import Die, GameSettings, GameState, Player, TurnPhase, TurnState
from src.engine.five_thousand import FiveThousandEngine


class ScriptedFaceSource:
    """Face source replaying a fixed list of faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = list(faces)
        self.calls = 0

    def next(self) -> int:
        if self.calls >= len(self._faces):
            raise AssertionError("Scripted face source exhausted.")
        face = self._faces[self.calls]
        self.calls += 1
        return face


def make_state(
    *,
    totals: tuple[int, ...] = (0, 0),
    dice: tuple[Die, ...] | None = None,
    turn_score: int = 0,
    phase: TurnPhase = TurnPhase.AWAITING_ROLL,
    current: int = 0,
) -> GameState:
    """Game state with the given player totals and current turn."""
    state = FiveThousandEngine.new_game([f"Player {i + 1}" for i in range(len(totals))])
    players = tuple(replace(p, total_score=t) for p, t in zip(state.players, totals))
    turn = TurnState(
        dice=dice if dice is not None else TurnState().dice,
        turn_score=turn_score,
        roll_count=0 if phase is TurnPhase.AWAITING_ROLL else 1,
        phase=phase,
    )
    return replace(state, players=players, turn=turn, current_player_index=current)


def ids_of(state: GameState, *positions: int) -> list[str]:
    """Ids of the dice at the given pool positions."""
    return [state.turn.dice[i].id for i in positions]


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def five_dice_combinations() -> dict[str, tuple[tuple[int, ...], int]]:
    """
    Five-dice rolls with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points)
    """
    return {
        "five_ones": ((1, 1, 1, 1, 1), 5000),
        "low_straight": ((1, 2, 3, 4, 5), 1500),
        "high_straight": ((2, 3, 4, 5, 6), 1500),
        "full_house_threes_twos": ((3, 3, 3, 2, 2), 600),
        "full_house_twos_fives": ((2, 2, 2, 5, 5), 1000),
        "full_house_ones_twos": ((1, 1, 1, 2, 2), 1000),
        "full_house_ones_fives": ((1, 1, 1, 5, 5), 1100),
        "full_house_twos_ones": ((2, 2, 2, 1, 1), 400),
        "five_twos": ((2, 2, 2, 2, 2), 200),
        "five_fives": ((5, 5, 5, 5, 5), 600),
        "bust": ((2, 3, 4, 6, 6), 0),
    }


@pytest.fixture
def default_settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def exact_settings() -> GameSettings:
    return GameSettings(must_win_on_exact_score=True)


@pytest.fixture
def two_player_game() -> GameState:
    return FiveThousandEngine.new_game(["Alice", "Bob"])


@pytest.fixture
def single_player() -> Player:
    return Player(name="Solo")


# =============================================================================
# FACTORIES
# =============================================================================

@pytest.fixture
def faces():
    """Factory for scripted face sources: faces(1, 1, 1, 2, 3)."""
    def _make(*values: int) -> ScriptedFaceSource:
        return ScriptedFaceSource(values)
    return _make


@pytest.fixture
def state_factory():
    """Factory building a game state, see make_state()."""
    return make_state


@pytest.fixture
def die_ids():
    """Helper returning the ids of dice at pool positions."""
    return ids_of

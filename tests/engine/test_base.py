"""
Le Jeu du 5000 - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

from dataclasses import FrozenInstanceError

import pytest
from src.engine.base import (
    POOL_SIZE,
    Die,
    GameSettings,
    GameState,
    Player,
    ScoreEntry,
    TurnPhase,
    TurnState,
    fresh_pool,
)
from src.engine.validators import (
    validate_dice_values,
    validate_face,
    validate_player_names,
    validate_pool,
    validate_score,
    validate_selection,
)


class TestDie:
    """Tests for the Die dataclass."""

    def test_defaults(self):
        die = Die()
        assert die.value == 1
        assert die.is_available is True
        assert die.is_held is False

    def test_ids_are_unique(self):
        assert Die().id != Die().id

    @pytest.mark.parametrize("value", [0, 7])
    def test_invalid_value_raises(self, value: int):
        with pytest.raises(ValueError, match="Invalid die value"):
            Die(value=value)

    def test_held_die_cannot_be_available(self):
        with pytest.raises(ValueError, match="held die"):
            Die(value=3, is_available=True, is_held=True)

    def test_immutable(self):
        die = Die(value=4)
        with pytest.raises(FrozenInstanceError):
            die.value = 5  # type: ignore[misc]


class TestTurnState:
    """Tests for the TurnState dataclass."""

    def test_fresh_turn(self):
        turn = TurnState()
        assert len(turn.dice) == POOL_SIZE
        assert turn.turn_score == 0
        assert turn.roll_count == 0
        assert turn.phase is TurnPhase.AWAITING_ROLL
        assert turn.available_dice_count == POOL_SIZE

    def test_fresh_pool_is_all_available(self):
        pool = fresh_pool()
        assert all(d.is_available and not d.is_held for d in pool)

    def test_pool_size_enforced(self):
        with pytest.raises(ValueError, match="exactly 5"):
            TurnState(dice=fresh_pool()[:4])

    def test_negative_score_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            TurnState(turn_score=-50)

    def test_available_and_held_views(self):
        dice = (
            Die(value=1, is_available=False, is_held=True),
            Die(value=5, is_available=False, is_held=True),
            Die(value=2),
            Die(value=3),
            Die(value=4),
        )
        turn = TurnState(dice=dice, turn_score=150)
        assert turn.available_values == (2, 3, 4)
        assert [d.value for d in turn.held_dice] == [1, 5]
        assert turn.available_dice_count == 3


class TestPlayer:
    """Tests for Player and its history."""

    def test_new_player_has_not_opened(self, single_player):
        assert single_player.total_score == 0
        assert single_player.has_opened is False
        assert single_player.lives == 3

    def test_player_with_score_has_opened(self):
        assert Player(name="A", total_score=600).has_opened is True

    def test_history_counts_as_opened(self):
        player = Player(name="A", score_history=(ScoreEntry(recorded_score=500),))
        assert player.has_opened is True

    def test_score_entry_timestamp_is_utc(self):
        entry = ScoreEntry(recorded_score=1000)
        assert entry.recorded_at.tzinfo is not None


class TestGameSettings:
    """Tests for GameSettings validation."""

    def test_defaults(self, default_settings):
        assert default_settings.opening_score_threshold == 500
        assert default_settings.victory_score == 5000
        assert default_settings.must_win_on_exact_score is False
        assert default_settings.allow_fifty_point_scores is False

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError, match="threshold"):
            GameSettings(opening_score_threshold=-1)

    def test_zero_victory_rejected(self):
        with pytest.raises(ValueError, match="Victory score"):
            GameSettings(victory_score=0)


class TestGameState:
    """Tests for GameState accessors."""

    def test_current_player(self, two_player_game):
        assert two_player_game.current_player.name == "Alice"

    def test_no_winner_until_game_over(self, two_player_game):
        assert two_player_game.winner is None

    def test_winner_lookup(self):
        alice, bob = Player(name="Alice"), Player(name="Bob")
        state = GameState(players=(alice, bob), is_game_over=True, winner_id=bob.id)
        assert state.winner == bob


class TestValidators:
    """Tests for validation utilities."""

    def test_validate_face(self):
        assert validate_face(6) == 6
        with pytest.raises(ValueError, match="out of range"):
            validate_face(7)
        with pytest.raises(ValueError, match="integer"):
            validate_face(True)

    def test_validate_dice_values_limits(self):
        assert validate_dice_values([]) == ()
        assert validate_dice_values([1, 2], min_count=1) == (1, 2)
        with pytest.raises(ValueError, match="At least 1"):
            validate_dice_values([], min_count=1)
        with pytest.raises(ValueError, match="integer"):
            validate_dice_values(["1"])  # type: ignore[list-item]

    def test_validate_pool(self):
        pool = fresh_pool()
        assert validate_pool(list(pool)) == pool
        with pytest.raises(ValueError, match="exactly 5"):
            validate_pool(pool[:3])
        duplicate = (pool[0],) * 5
        with pytest.raises(ValueError, match="distinct"):
            validate_pool(duplicate)

    def test_validate_selection(self):
        pool = (Die(value=1, is_available=False, is_held=True),) + fresh_pool()[:4]
        assert validate_selection([pool[1].id], pool) == frozenset({pool[1].id})
        with pytest.raises(ValueError, match="Unknown die id"):
            validate_selection(["nope"], pool)
        with pytest.raises(ValueError, match="not available"):
            validate_selection([pool[0].id], pool)

    def test_validate_player_names(self):
        assert validate_player_names([" Alice ", "Bob"]) == ("Alice", "Bob")
        with pytest.raises(ValueError, match="Player count"):
            validate_player_names([])
        with pytest.raises(ValueError, match="Player count"):
            validate_player_names(["a", "b", "c", "d", "e", "f"])
        with pytest.raises(ValueError, match="empty"):
            validate_player_names(["Alice", "  "])
        with pytest.raises(ValueError, match="longer than 30"):
            validate_player_names(["x" * 31])
        with pytest.raises(ValueError, match="single string"):
            validate_player_names("Alice")

    def test_validate_score(self):
        assert validate_score(0) == 0
        assert validate_score(-50, allow_negative=True) == -50
        with pytest.raises(ValueError, match="negative"):
            validate_score(-50)

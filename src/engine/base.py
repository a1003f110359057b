"""
Le Jeu du 5000 - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses): every game
action returns a new instance instead of patching the previous one.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from uuid import uuid4

from src.engine.events import GameEvent

# Constants
POOL_SIZE = 5
MIN_FACE = 1
MAX_FACE = 6
DEFAULT_FACE = 1
MAX_PLAYERS = 5
DEFAULT_LIVES = 3


def _new_id() -> str:
    return str(uuid4())


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    THREE_OF_A_KIND = auto()
    FULL_HOUSE = auto()
    STRAIGHT = auto()         # 1-2-3-4-5 or 2-3-4-5-6
    FIVE_ONES = auto()


class TurnPhase(Enum):
    """Where the current player stands within their turn."""
    AWAITING_ROLL = "awaiting_roll"   # turn start, or right after hot dice
    AWAITING_HOLD = "awaiting_hold"   # rolled, scoring dice must be set aside
    READY = "ready"                   # held since last roll


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a roll.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a set of dice.

    Attributes:
        points: Total points scored
        breakdown: Individual scoring components
        scoring_dice_indices: Indices of dice that scored
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...]
    scoring_dice_indices: frozenset[int]

    @property
    def is_bust(self) -> bool:
        """Returns True if nothing scored."""
        return self.points == 0

    def __str__(self) -> str:
        if self.is_bust:
            return "No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Die:
    """
    A single six-sided die on the table.

    Attributes:
        value: Face value (1-6)
        is_available: Whether the die can still be rolled or held this turn
        is_held: Whether the die is locked into the turn score
        id: Opaque identifier, stable across rolls for UI correlation
    """
    value: int = DEFAULT_FACE
    is_available: bool = True
    is_held: bool = False
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not (MIN_FACE <= self.value <= MAX_FACE):
            raise ValueError(
                f"Invalid die value {self.value}. "
                f"Must be between {MIN_FACE} and {MAX_FACE}."
            )
        if self.is_held and self.is_available:
            raise ValueError("A held die cannot be available.")


def fresh_pool() -> tuple[Die, ...]:
    """Five available dice showing the default face."""
    return tuple(Die() for _ in range(POOL_SIZE))


@dataclass(frozen=True)
class TurnState:
    """
    Complete state of a player's turn.

    Attributes:
        dice: The five dice on the table
        turn_score: Points accumulated this turn (not yet banked)
        roll_count: Number of rolls taken this turn
        is_hot_dice: Whether the last hold used every die
        phase: What the player may do next
    """
    dice: tuple[Die, ...] = field(default_factory=fresh_pool)
    turn_score: int = 0
    roll_count: int = 0
    is_hot_dice: bool = False
    phase: TurnPhase = TurnPhase.AWAITING_ROLL

    def __post_init__(self) -> None:
        if len(self.dice) != POOL_SIZE:
            raise ValueError(
                f"A dice pool holds exactly {POOL_SIZE} dice, got {len(self.dice)}."
            )
        if self.turn_score < 0:
            raise ValueError(f"Turn score cannot be negative, got {self.turn_score}.")

    @property
    def available_dice(self) -> tuple[Die, ...]:
        """Dice that can still be rolled or held."""
        return tuple(d for d in self.dice if d.is_available)

    @property
    def available_values(self) -> tuple[int, ...]:
        return tuple(d.value for d in self.available_dice)

    @property
    def held_dice(self) -> tuple[Die, ...]:
        return tuple(d for d in self.dice if d.is_held)

    @property
    def available_dice_count(self) -> int:
        """Number of dice that can still be rolled."""
        return len(self.available_dice)


@dataclass(frozen=True)
class ScoreEntry:
    """
    One successful bank in a player's history.

    Attributes:
        recorded_score: The player's total AFTER this bank
        recorded_at: When the bank happened (UTC)
        entry_id: Unique identifier of the entry
    """
    recorded_score: int
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entry_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class Player:
    """
    A participant in the game.

    Attributes:
        name: Display name
        total_score: Lifetime banked score
        score_history: Chronological bank events
        lives: Remaining lives for the three-lives house rule
        id: Stable identifier
    """
    name: str
    total_score: int = 0
    score_history: tuple[ScoreEntry, ...] = field(default_factory=tuple)
    lives: int = DEFAULT_LIVES
    id: str = field(default_factory=_new_id)

    @property
    def has_opened(self) -> bool:
        """True once the player has banked points."""
        return self.total_score > 0 or len(self.score_history) > 0


@dataclass(frozen=True)
class GameSettings:
    """
    Rules for a game session. Snapshot consumed per decision point.

    Attributes:
        opening_score_threshold: Minimum single-turn score needed to open
        victory_score: Score needed to win
        must_win_on_exact_score: Victory requires hitting the score exactly
        cancel_opponent_score_on_match: Declared house rule, not enforced
        allow_fifty_point_scores: Declared house rule, not enforced
        use_three_lives_rule: Declared house rule, not enforced
        allow_steal_on_pass: Declared house rule, not enforced
    """
    opening_score_threshold: int = 500
    victory_score: int = 5000
    must_win_on_exact_score: bool = False
    cancel_opponent_score_on_match: bool = False
    allow_fifty_point_scores: bool = False
    use_three_lives_rule: bool = False
    allow_steal_on_pass: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.opening_score_threshold < 0:
            raise ValueError(
                f"Opening score threshold cannot be negative, got {self.opening_score_threshold}."
            )
        if self.victory_score <= 0:
            raise ValueError(f"Victory score must be positive, got {self.victory_score}.")


@dataclass(frozen=True)
class GameState:
    """
    Single source of truth for a game in progress.

    Attributes:
        players: Players in turn order
        current_player_index: Whose turn it is (the winner once the game is over)
        turn: State of the current turn
        is_game_over: Whether someone has won
        winner_id: Id of the winning player, if any
        last_event: Outcome of the transition that produced this state
        message: User-facing description of that outcome
    """
    players: tuple[Player, ...]
    current_player_index: int = 0
    turn: TurnState = field(default_factory=TurnState)
    is_game_over: bool = False
    winner_id: str | None = None
    last_event: GameEvent | None = None
    message: str = ""

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def winner(self) -> Player | None:
        for player in self.players:
            if player.id == self.winner_id:
                return player
        return None

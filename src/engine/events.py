"""
Le Jeu du 5000 - Game Event Definitions

Outcome of every engine transition, plus the user-facing messages that go
with them. Rejections (invalid selection, failed opening, ...) are reported
through these events on the returned state, never raised.
"""

from enum import Enum, auto


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_HELD = auto()
    HOT_DICE = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    TURN_PASSED = auto()
    GAME_WON = auto()
    GAME_OVER = auto()
    # Rejections
    INVALID_SELECTION = auto()
    ILLEGAL_ROLL = auto()
    FAILED_OPENING = auto()
    WIN_VOIDED = auto()


REJECTION_EVENTS: frozenset[GameEvent] = frozenset({
    GameEvent.INVALID_SELECTION,
    GameEvent.ILLEGAL_ROLL,
    GameEvent.FAILED_OPENING,
    GameEvent.WIN_VOIDED,
})


def is_rejection(event: GameEvent | None) -> bool:
    """True for outcomes where the player's intent was refused."""
    return event in REJECTION_EVENTS


def game_started_message(first_player: str) -> str:
    return f"Welcome! It's {first_player}'s turn. Roll the dice to start."


def dice_rolled_message(potential: int) -> str:
    return f"Potential score: {potential}. Select dice to keep or bank."


def bust_message(first_roll: bool, next_player: str) -> str:
    """Bust on a turn's opening roll vs. bust with the remaining dice."""
    if first_roll:
        return f"Bust! No points this roll. It's {next_player}'s turn."
    return f"Bust! No points with remaining dice. Score for this turn is lost. It's {next_player}'s turn."


def dice_held_message(kept: int, turn_score: int) -> str:
    return f"Score kept: {kept}. Total turn score: {turn_score}. Roll again or bank."


def hot_dice_message(kept: int, turn_score: int) -> str:
    return f"Hot dice! Score kept: {kept}. Total turn score: {turn_score}. Roll all five dice again."


def invalid_selection_message(selected_any: bool) -> str:
    if selected_any:
        return "Invalid selection. These dice don't score."
    return "Invalid action: selected score is 0. Select scoring dice."


def hold_before_roll_message() -> str:
    return "Roll the dice before keeping any."


def illegal_roll_message(game_over: bool) -> str:
    if game_over:
        return "The game is over. Start a new game to play again."
    return "Keep at least one scoring die before rolling again."


def failed_opening_message(threshold: int, attempted: int, next_player: str) -> str:
    return (
        f"You need {threshold} points to open. Your score of {attempted} was not banked. "
        f"It's {next_player}'s turn."
    )


def win_voided_message(victory_score: int, would_be: int, next_player: str) -> str:
    return (
        f"Score not exact: {would_be} overshoots {victory_score}. Nothing banked. "
        f"It's {next_player}'s turn."
    )


def turn_banked_message(banked: int, total: int, next_player: str) -> str:
    return f"Banked {banked} points (total {total}). It's {next_player}'s turn."


def turn_passed_message(next_player: str) -> str:
    return f"No points banked. It's {next_player}'s turn."


def game_won_message(winner: str, total: int) -> str:
    return f"Game Over! Winner: {winner} with {total} points."


def five_ones_message(winner: str, total: int) -> str:
    return f"Five 1s! {winner} wins the game with {total} points."


def game_over_message(winner: str | None) -> str:
    return f"The game is over. Winner: {winner or 'N/A'}."

"""
Le Jeu du 5000 - Turn Finalizer

Ends the current player's turn, whether banked by choice or forced by a
bust, and produces the next game state.

Rules, applied in order:
    1. A player who has not opened keeps the turn score only if it reaches
       the opening threshold; otherwise it is discarded.
    2. A player who has opened banks any positive turn score.
    3. In exact-score mode, a bank that would overshoot the victory score
       is voided and the total reverts to its pre-turn value.
    4. Reaching the victory score (exactly, in exact-score mode) ends the
       game; the winner stays the current player. A bust banks nothing and
       never wins.
    5. Otherwise play passes to the next player with a fresh turn.

Five 1s on one roll bypasses all of this: `win_outright` banks the roll and
the turn score and ends the game.
"""

import logging
from dataclasses import replace

from src.engine import events
from src.engine.base import GameSettings, GameState, Player, ScoreEntry, TurnState
from src.engine.events import GameEvent
from src.engine.validators import validate_score

logger = logging.getLogger(__name__)


class TurnFinalizer:
    """
    Stateless turn finalization.

    State is passed in and returned, never stored. Every input yields a
    well-defined transition: failed openings and voided wins are reported
    through the returned state's event and message.
    """

    @classmethod
    def finalize(
        cls,
        state: GameState,
        settings: GameSettings,
        *,
        busted: bool = False,
    ) -> GameState:
        """
        Finalize the current turn.

        Args:
            state: Game state at the end of the turn
            settings: Rules snapshot for this decision
            busted: The turn ended on a bust; its whole score is forfeited

        Returns:
            New GameState for the next player, or the finished game
        """
        player = state.current_player
        turn_score = 0 if busted else validate_score(state.turn.turn_score)
        previous_total = player.total_score

        new_total, event = cls._apply_bank(player.has_opened, previous_total, turn_score, settings)
        would_be = new_total

        if settings.must_win_on_exact_score and new_total > settings.victory_score:
            new_total = previous_total
            event = GameEvent.WIN_VOIDED

        banked = new_total > previous_total
        players = cls._with_total(state, new_total) if banked else state.players

        if not busted and cls.has_won(new_total, settings):
            logger.info("%s wins with %d points", player.name, new_total)
            return cls._game_won(
                state, players, events.game_won_message(player.name, new_total)
            )

        next_index = (state.current_player_index + 1) % len(players)
        next_name = players[next_index].name

        if busted:
            event = GameEvent.PLAYER_BUST
            message = events.bust_message(state.turn.roll_count == 1, next_name)
        elif event is GameEvent.WIN_VOIDED:
            message = events.win_voided_message(settings.victory_score, would_be, next_name)
        elif event is GameEvent.FAILED_OPENING:
            message = events.failed_opening_message(
                settings.opening_score_threshold, turn_score, next_name
            )
        elif banked:
            event = GameEvent.TURN_BANKED
            message = events.turn_banked_message(turn_score, new_total, next_name)
        else:
            event = GameEvent.TURN_PASSED
            message = events.turn_passed_message(next_name)

        logger.debug(
            "Turn of %s finalized: %s (total %d -> %d)",
            player.name, event.name, previous_total, new_total,
        )

        return replace(
            state,
            players=players,
            current_player_index=next_index,
            turn=TurnState(),
            last_event=event,
            message=message,
        )

    @classmethod
    def win_outright(cls, state: GameState, points: int) -> GameState:
        """
        End the game in the current player's favour.

        The given roll points and the turn score are banked with no opening or
        exact-score check.

        Args:
            state: Game state holding the winning roll
            points: Points of the winning roll

        Returns:
            The finished GameState
        """
        player = state.current_player
        new_total = player.total_score + validate_score(state.turn.turn_score) + validate_score(points)
        logger.info("%s wins outright with %d points", player.name, new_total)
        return cls._game_won(
            state,
            cls._with_total(state, new_total),
            events.five_ones_message(player.name, new_total),
        )

    @classmethod
    def _with_total(cls, state: GameState, new_total: int) -> tuple[Player, ...]:
        """Players with the current one's bank recorded."""
        player = state.current_player
        updated = replace(
            player,
            total_score=new_total,
            score_history=player.score_history + (ScoreEntry(recorded_score=new_total),),
        )
        return tuple(
            updated if i == state.current_player_index else p
            for i, p in enumerate(state.players)
        )

    @classmethod
    def _game_won(
        cls,
        state: GameState,
        players: tuple[Player, ...],
        message: str,
    ) -> GameState:
        return replace(
            state,
            players=players,
            turn=TurnState(),
            is_game_over=True,
            winner_id=state.current_player.id,
            last_event=GameEvent.GAME_WON,
            message=message,
        )

    @classmethod
    def _apply_bank(
        cls,
        has_opened: bool,
        total: int,
        turn_score: int,
        settings: GameSettings,
    ) -> tuple[int, GameEvent | None]:
        """Opening-threshold rules. Returns the new total and any rejection."""
        if not has_opened:
            if turn_score >= settings.opening_score_threshold:
                return total + turn_score, None
            if turn_score > 0:
                return total, GameEvent.FAILED_OPENING
            return total, None

        if turn_score > 0:
            return total + turn_score, None
        return total, None

    @classmethod
    def has_won(cls, total: int, settings: GameSettings) -> bool:
        """Win condition for a player's total under the given rules."""
        if settings.must_win_on_exact_score:
            return total == settings.victory_score
        return total >= settings.victory_score

"""
Le Jeu du 5000 - Game Engine

Turn mechanics for the 5000 dice game: new game, roll, hold, bank. All
methods are stateless class methods; every action takes the current
GameState and returns a new one, with the outcome recorded in
`last_event` and `message`.

Turn flow:
    - Roll the available dice. If none of them score, the turn busts and
      everything accumulated this turn is lost. Five 1s on one roll wins
      the game on the spot.
    - Hold a scoring selection of the rolled dice to add it to the turn
      score. Holding every die ("hot dice") brings back five fresh dice.
    - Roll again to push your luck, or end the turn to bank.
"""

import logging
from dataclasses import replace
from typing import Iterable, Sequence

from src.engine import events
from src.engine.base import (
    POOL_SIZE,
    GameSettings,
    GameState,
    Player,
    TurnPhase,
    TurnState,
    fresh_pool,
)
from src.engine.dice import FaceSource, RandomFaceSource, roll_pool
from src.engine.events import GameEvent
from src.engine.finalizer import TurnFinalizer
from src.engine.scoring import ScoringEngine
from src.engine.validators import validate_player_names, validate_selection

FIVE_ONES = (1,) * POOL_SIZE

logger = logging.getLogger(__name__)


class FiveThousandEngine:
    """
    Stateless engine for the 5000 dice game.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def new_game(cls, player_names: Sequence[str]) -> GameState:
        """
        Start a game with every player at zero.

        Args:
            player_names: One to five display names, in turn order

        Returns:
            Fresh GameState with the first player to roll
        """
        names = validate_player_names(player_names)
        players = tuple(Player(name=name) for name in names)
        logger.info("New game with %d player(s): %s", len(players), ", ".join(names))
        return GameState(
            players=players,
            last_event=GameEvent.GAME_STARTED,
            message=events.game_started_message(players[0].name),
        )

    @classmethod
    def roll(
        cls,
        state: GameState,
        settings: GameSettings,
        source: FaceSource | None = None,
    ) -> GameState:
        """
        Roll the available dice for the current player.

        A roll is refused while the game is over or while the previous roll
        still awaits a hold. A roll whose available dice cannot score is a
        bust: the turn is finalized with its whole score forfeited. Five 1s
        across the whole pool ends the game for the current player.

        Args:
            state: Current game state
            settings: Rules snapshot used if the roll busts
            source: Face source (defaults to an unseeded RandomFaceSource)

        Returns:
            New GameState
        """
        if state.is_game_over:
            return cls._reject(state, GameEvent.ILLEGAL_ROLL, events.illegal_roll_message(True))
        if state.turn.phase is TurnPhase.AWAITING_HOLD:
            return cls._reject(state, GameEvent.ILLEGAL_ROLL, events.illegal_roll_message(False))

        source = source or RandomFaceSource()
        dice = roll_pool(state.turn.dice, source)
        turn = replace(
            state.turn,
            dice=dice,
            roll_count=state.turn.roll_count + 1,
            is_hot_dice=False,
            phase=TurnPhase.AWAITING_HOLD,
        )
        rolled = replace(state, turn=turn)
        potential = ScoringEngine.score(turn.available_values)

        logger.debug(
            "%s rolled %s (potential %d)",
            state.current_player.name, turn.available_values, potential,
        )

        if turn.available_values == FIVE_ONES:
            return TurnFinalizer.win_outright(rolled, potential)

        if ScoringEngine.is_bust(turn.available_values):
            logger.info("%s busted, losing %d turn points", state.current_player.name, turn.turn_score)
            return TurnFinalizer.finalize(rolled, settings, busted=True)

        return replace(
            rolled,
            last_event=GameEvent.DICE_ROLLED,
            message=events.dice_rolled_message(potential),
        )

    @classmethod
    def evaluate_selection(cls, state: GameState, die_ids: Iterable[str]) -> int:
        """
        Score the selected dice without changing anything.

        Returns 0 while the turn awaits a roll: the dice on the table have
        not been rolled.

        Raises:
            ValueError: If an id is unknown or refers to an unavailable die
        """
        selected = validate_selection(die_ids, state.turn.dice)
        if state.turn.phase is TurnPhase.AWAITING_ROLL:
            return 0
        return ScoringEngine.score(
            tuple(d.value for d in state.turn.dice if d.id in selected)
        )

    @classmethod
    def hold(cls, state: GameState, die_ids: Iterable[str]) -> GameState:
        """
        Set aside a scoring selection and add its value to the turn score.

        A selection scoring zero is rejected and the state is returned with
        only the outcome changed. If the hold uses the last available dice,
        the pool is replaced by five fresh dice to roll (hot dice).

        Raises:
            ValueError: If an id is unknown or refers to an unavailable die
        """
        if state.is_game_over:
            winner = state.winner
            return cls._reject(
                state, GameEvent.GAME_OVER, events.game_over_message(winner.name if winner else None)
            )

        selected = validate_selection(die_ids, state.turn.dice)

        if state.turn.phase is TurnPhase.AWAITING_ROLL:
            return cls._reject(state, GameEvent.INVALID_SELECTION, events.hold_before_roll_message())

        points = cls.evaluate_selection(state, selected)
        if points == 0:
            return cls._reject(
                state, GameEvent.INVALID_SELECTION, events.invalid_selection_message(bool(selected))
            )

        dice = tuple(
            replace(d, is_available=False, is_held=True) if d.id in selected else d
            for d in state.turn.dice
        )
        turn_score = state.turn.turn_score + points

        if all(d.is_held for d in dice):
            turn = replace(
                state.turn,
                dice=fresh_pool(),
                turn_score=turn_score,
                is_hot_dice=True,
                phase=TurnPhase.AWAITING_ROLL,
            )
            logger.debug("%s has hot dice at %d", state.current_player.name, turn_score)
            return replace(
                state,
                turn=turn,
                last_event=GameEvent.HOT_DICE,
                message=events.hot_dice_message(points, turn_score),
            )

        turn = replace(state.turn, dice=dice, turn_score=turn_score, phase=TurnPhase.READY)
        return replace(
            state,
            turn=turn,
            last_event=GameEvent.DICE_HELD,
            message=events.dice_held_message(points, turn_score),
        )

    @classmethod
    def end_turn(cls, state: GameState, settings: GameSettings) -> GameState:
        """Bank the turn score and pass play on (see TurnFinalizer)."""
        if state.is_game_over:
            winner = state.winner
            return cls._reject(
                state, GameEvent.GAME_OVER, events.game_over_message(winner.name if winner else None)
            )
        return TurnFinalizer.finalize(state, settings)

    @classmethod
    def potential_score(cls, state: GameState) -> int:
        """Score of the dice still available on the table, once rolled."""
        if state.turn.phase is TurnPhase.AWAITING_ROLL:
            return 0
        return ScoringEngine.score(state.turn.available_values)

    @classmethod
    def can_roll(cls, state: GameState) -> bool:
        return not state.is_game_over and state.turn.phase is not TurnPhase.AWAITING_HOLD

    @classmethod
    def can_bank(cls, state: GameState, settings: GameSettings) -> bool:
        """
        Whether banking now would add points.

        The turn must hold points, and the player must either have opened
        already or reach the opening threshold with this turn.
        """
        if state.is_game_over:
            return False
        turn_score = state.turn.turn_score
        if turn_score <= 0:
            return False
        return state.current_player.has_opened or turn_score >= settings.opening_score_threshold

    @classmethod
    def holdable_die_ids(cls, state: GameState) -> frozenset[str]:
        """Available dice that score on their own, once the dice are rolled."""
        if state.is_game_over or state.turn.phase is TurnPhase.AWAITING_ROLL:
            return frozenset()
        faces = ScoringEngine.scoring_faces()
        return frozenset(d.id for d in state.turn.available_dice if d.value in faces)

    @classmethod
    def _reject(cls, state: GameState, event: GameEvent, message: str) -> GameState:
        logger.info("Rejected action for %s: %s", state.current_player.name, event.name)
        return replace(state, last_event=event, message=message)

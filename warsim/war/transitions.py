"""
State transition functions for the War card game.

A game advances one round at a time through ``StateTransitionEngine.step``,
which either hands the state back for another round or reports the final
score. ``play_game`` drives a game to completion.
"""

import logging
import random

from warsim.common.deck import Deck
from warsim.events import EventBus, EngineEventType
from warsim.war.constants import MAX_MOVES, WAR_CARDS
from warsim.war.state import Continuing, Done, GameState, Score, StepResult

logger = logging.getLogger(__name__)


def new_game(rng: random.Random) -> GameState:
    """
    Create the initial state of a game.

    The computer starts with a half deck in canonical order and the player
    with a half deck shuffled by ``rng``.

    Args:
        rng: Seedable random source used for the player's shuffle

    Returns:
        A fresh game state with no moves played
    """
    return GameState(
        computer=Deck.new_half_deck(),
        player=Deck.new_shuffled(rng),
        moves=0,
    )


class StateTransitionEngine:
    """
    Transition function for War.

    ``step`` takes ownership of the state passed in. On continuation the same
    state object comes back, updated; on termination it is discarded.
    """

    @staticmethod
    def step(state: GameState) -> StepResult:
        """
        Resolve one round, including any wars it escalates into.

        Args:
            state: Current game state

        Returns:
            Continuing with the updated state, or Done with the final score
        """
        if state.moves >= MAX_MOVES:
            assert state.moves == MAX_MOVES, f"move count {state.moves} passed the cap"
            return Done(Score.finish_with(state.player.size))

        computer_pile = Deck.new_empty()
        player_pile = Deck.new_empty()

        while True:
            # Exhaustion only ends the game on the face-up draw
            computer_card = state.computer.draw()
            player_card = state.player.draw()
            if computer_card is None and player_card is None:
                return Done(Score.tied_at(state.moves))
            if computer_card is None:
                return Done(Score.win_after(state.moves))
            if player_card is None:
                return Done(Score.lose_after(state.moves))

            computer_pile.add(computer_card)
            player_pile.add(player_card)

            if computer_card < player_card:
                state.player.add_pile(player_pile)
                state.player.add_pile(computer_pile)
                state.moves += 1
                return Continuing(state)

            if computer_card > player_card:
                state.computer.add_pile(computer_pile)
                state.computer.add_pile(player_pile)
                state.moves += 1
                return Continuing(state)

            # War: each side commits up to WAR_CARDS more, an empty side adds nothing
            for _ in range(WAR_CARDS):
                card = state.computer.draw()
                if card is not None:
                    computer_pile.add(card)
                card = state.player.draw()
                if card is not None:
                    player_pile.add(card)


def play_game(state: GameState) -> Score:
    """
    Advance a game until it ends.

    Emits GAME_STARTED before the first round and GAME_ENDED with the result.

    Args:
        state: Initial game state, consumed by the game

    Returns:
        The final score
    """
    event_bus = EventBus.get_instance()
    event_bus.emit(EngineEventType.GAME_STARTED, state.to_dict())

    step = StateTransitionEngine.step
    while True:
        result = step(state)
        if isinstance(result, Done):
            break
        state = result.state

    score = result.score
    logger.debug("Game finished after %d moves: %s", state.moves, score)
    event_bus.emit(
        EngineEventType.GAME_ENDED,
        {**score.to_dict(), "moves": state.moves},
    )
    return score

"""
State models for the War card game.

This module provides the game state consumed by the transition function,
the tagged score reported when a game ends, and the two step results
(``Continuing`` and ``Done``) the transition function can return.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from warsim.common.deck import Deck
from warsim.war.constants import MAX_MOVES, RANKS_PER_SUIT, SUITS_PER_PLAYER


class Outcome(Enum):
    """Possible ways a game of War can end, from the player's point of view."""

    WIN_AFTER = "WinAfter"  # computer ran out first
    LOSE_AFTER = "LoseAfter"  # player ran out first
    FINISH_WITH = "FinishWith"  # move cap reached, value is the player's card count
    TIED_AT = "TiedAt"  # both decks ran out on the same draw


@dataclass(frozen=True)
class Score:
    """
    Final result of one game.

    Attributes:
        outcome: How the game ended
        value: Moves played, or the player's card count for FINISH_WITH
    """

    outcome: Outcome
    value: int

    @classmethod
    def win_after(cls, moves: int) -> "Score":
        return cls(Outcome.WIN_AFTER, moves)

    @classmethod
    def lose_after(cls, moves: int) -> "Score":
        return cls(Outcome.LOSE_AFTER, moves)

    @classmethod
    def finish_with(cls, cards: int) -> "Score":
        return cls(Outcome.FINISH_WITH, cards)

    @classmethod
    def tied_at(cls, moves: int) -> "Score":
        return cls(Outcome.TIED_AT, moves)

    def to_int(self) -> int:
        """
        Map the score onto a single integer for cross-run comparison.

        Losses rank below ties, ties below capped finishes, and those below
        wins. Among wins, fewer moves rank higher.

        Returns:
            Integer rank of this score
        """
        full_half_deck = RANKS_PER_SUIT * SUITS_PER_PLAYER
        if self.outcome is Outcome.LOSE_AFTER:
            return self.value
        if self.outcome is Outcome.TIED_AT:
            return MAX_MOVES + full_half_deck
        if self.outcome is Outcome.FINISH_WITH:
            return MAX_MOVES + self.value
        return MAX_MOVES + full_half_deck * 2 + (MAX_MOVES - self.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the score to a dictionary suitable for serialization."""
        return {
            "outcome": self.outcome.name,
            "value": self.value,
            "score": self.to_int(),
        }

    def _sort_key(self):
        # Scores sharing an integer rank (every TIED_AT, for one) still order
        # consistently with equality
        return (self.to_int(), self.outcome.value, self.value)

    def __lt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "Score") -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return f"{self.outcome.value}({self.value})"


@dataclass
class GameState:
    """
    State of one game of War.

    The transition function takes ownership of the state it is given and
    mutates its decks in place.

    Attributes:
        computer: The computer's pile, top card first
        player: The player's pile, top card first
        moves: Number of resolved rounds so far
    """

    computer: Deck
    player: Deck
    moves: int = 0

    @property
    def total_cards(self) -> int:
        """Cards held by both sides combined."""
        return self.computer.size + self.player.size

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "moves": self.moves,
            "computer_cards": self.computer.size,
            "player_cards": self.player.size,
        }


@dataclass
class Continuing:
    """Step result for a game that has not ended yet."""

    state: GameState


@dataclass(frozen=True)
class Done:
    """Step result for a finished game."""

    score: Score


StepResult = Union[Continuing, Done]

"""
This module contains the Deck class, an ordered pile of card ranks.

Only the numeric rank of a card matters, so a card is a plain ``int``
between 2 and 14. The front of the deck is the top of the pile.

>>> deck = Deck([2, 3, 4])
>>> deck.draw()
2
>>> deck.size
2
"""

import random
from collections import deque
from typing import Iterable, Iterator, Optional

from warsim.war.constants import HIGHEST_RANK, LOWEST_RANK, SUITS_PER_PLAYER


class Deck:
    """
    A class representing a pile of card ranks.
    """

    # Precompute one ascending run of ranks
    _rank_run = list(range(LOWEST_RANK, HIGHEST_RANK + 1))

    def __init__(self, cards: Optional[Iterable[int]] = None):
        """
        Initialize a Deck instance.

        :param cards: Ranks to populate the deck with, front first (optional).
                      If not provided, the deck starts empty.
        >>> Deck().size
        0
        """
        self.cards: deque = deque(cards) if cards is not None else deque()

    @classmethod
    def new_half_deck(cls) -> "Deck":
        """
        Construct the canonical half deck dealt to each side.

        :return: A deck of ``SUITS_PER_PLAYER`` ascending runs of 2..14.
        >>> Deck.new_half_deck().size
        3328
        """
        return cls(cls._rank_run * SUITS_PER_PLAYER)

    @classmethod
    def new_shuffled(cls, rng: random.Random) -> "Deck":
        """
        Construct a half deck and shuffle it with the given generator.

        :param rng: A seedable ``random.Random`` compatible generator.
        :return: A shuffled half deck.
        """
        cards = cls._rank_run * SUITS_PER_PLAYER
        rng.shuffle(cards)
        return cls(cards)

    @classmethod
    def new_empty(cls) -> "Deck":
        """
        Construct an empty deck, used as a transient pile during a round.
        """
        return cls()

    def draw(self) -> Optional[int]:
        """
        Remove and return the top card.

        :return: The rank drawn, or None if the deck is empty.
        >>> Deck().draw() is None
        True
        """
        if not self.cards:
            return None
        return self.cards.popleft()

    def add(self, card: int) -> None:
        """Add one card to the bottom of the deck."""
        self.cards.append(card)

    def add_pile(self, pile: "Deck") -> None:
        """
        Move every card of ``pile`` to the bottom of this deck.

        The pile's order is preserved and the pile is left empty.

        >>> deck = Deck([5])
        >>> pile = Deck([4, 2])
        >>> deck.add_pile(pile)
        >>> list(deck), pile.size
        ([5, 4, 2], 0)
        """
        self.cards.extend(pile.cards)
        pile.cards.clear()

    @property
    def size(self) -> int:
        """
        Return the number of cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.
        """
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self.cards == other.cards

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.

        >>> repr(Deck([2, 14]))
        'Deck([2, 14])'
        """
        return f"Deck({list(self.cards)})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        >>> str(Deck([2, 14]))
        'Deck of 2 cards'
        """
        return f"Deck of {len(self.cards)} cards"

import random
from collections import Counter

from warsim.common.deck import Deck
from warsim.war.constants import SUITS_PER_PLAYER


def test_deck_initialization_empty():
    deck = Deck()
    assert deck.size == 0
    assert deck.is_empty()


def test_deck_initialization_with_custom_cards():
    deck = Deck([2, 14, 11])
    assert list(deck) == [2, 14, 11]


def test_new_half_deck_size():
    deck = Deck.new_half_deck()
    assert deck.size == 13 * 256
    assert len(deck) == 3328


def test_new_half_deck_order():
    cards = list(Deck.new_half_deck())
    assert cards[:13] == list(range(2, 15))
    assert cards[13:26] == list(range(2, 15))
    assert cards[-1] == 14


def test_new_half_deck_composition():
    counts = Counter(Deck.new_half_deck())
    assert set(counts) == set(range(2, 15))
    assert all(count == SUITS_PER_PLAYER for count in counts.values())


def test_new_shuffled_same_composition():
    shuffled = Deck.new_shuffled(random.Random(1))
    assert Counter(shuffled) == Counter(Deck.new_half_deck())
    assert shuffled != Deck.new_half_deck()


def test_new_shuffled_reproducible_with_seed():
    assert Deck.new_shuffled(random.Random(42)) == Deck.new_shuffled(random.Random(42))
    assert Deck.new_shuffled(random.Random(1)) != Deck.new_shuffled(random.Random(2))


def test_new_empty():
    assert Deck.new_empty().size == 0


def test_deck_draw_from_front():
    deck = Deck([4, 5, 6])
    assert deck.draw() == 4
    assert list(deck) == [5, 6]


def test_deck_draw_empty_deck():
    deck = Deck()
    assert deck.draw() is None
    assert deck.size == 0
    # Drawing again is still harmless
    assert deck.draw() is None
    assert deck == Deck()


def test_deck_draw_until_empty():
    deck = Deck([2, 3])
    assert deck.draw() == 2
    assert deck.draw() == 3
    assert deck.draw() is None
    assert deck.is_empty()


def test_deck_add_to_back():
    deck = Deck([7])
    deck.add(9)
    assert list(deck) == [7, 9]


def test_deck_add_pile_preserves_order_and_empties_pile():
    deck = Deck([5])
    pile = Deck([4, 2, 9])
    deck.add_pile(pile)
    assert list(deck) == [5, 4, 2, 9]
    assert pile.is_empty()


def test_deck_add_empty_pile():
    deck = Deck([5])
    deck.add_pile(Deck())
    assert list(deck) == [5]


def test_deck_equality():
    assert Deck([2, 3]) == Deck([2, 3])
    assert Deck([2, 3]) != Deck([3, 2])
    assert Deck([2]) != [2]


def test_deck_repr():
    deck = Deck([2, 14])
    assert repr(deck) == "Deck([2, 14])"


def test_deck_str():
    deck = Deck([2, 14])
    assert str(deck) == "Deck of 2 cards"

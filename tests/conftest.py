"""Pytest fixtures for blackjack tests."""

import pytest
from hypothesis import strategies as st
from random import Random

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackGame


class CountingRng:
    """A deliberately non-random source (for testing): returns 0, 1, 2, ... modulo the bound."""

    def __init__(self, start: int = 0) -> None:
        self.value = start
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        self.value += 1
        return self.value % stop


class StackedDeck(Deck):
    """A deck that deals a fixed sequence of cards."""

    def __init__(self, *cards: str) -> None:
        super().__init__(1, Random(0))
        self._stack = [Card.from_string(card) for card in cards]

    def draw(self) -> Card:
        return self._stack.pop(0)


def stacked_game(*cards: str, **kwargs) -> BlackjackGame:
    """Game whose deal order is dealer, dealer, player, player, then hits."""
    game = BlackjackGame(rng=Random(0), **kwargs)
    game.deck = StackedDeck(*cards)
    return game


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for card in cards:
        hand.add(Card.from_string(card))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def counting_rng():
    """Deterministic counting random source."""
    return CountingRng()


@pytest.fixture
def deck(rng):
    """A single deck."""
    return Deck(1, rng)


@pytest.fixture
def six_decks(rng):
    """A six-deck game deck."""
    return Deck(6, rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add(Card(Rank.ACE, Suit.SPADES))
    hand.add(Card(Rank.JACK, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_17_hand():
    """A hard 17 hand (10-7)."""
    return make_hand("10S", "7C")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


# Hypothesis strategies for property-based testing

@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_cards_strategy(draw, min_cards=0, max_cards=8):
    """Generate a list of cards for a hand."""
    return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))

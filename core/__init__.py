"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckExhaustedError, RandomSource, Rank, Suit
from core.hand import Hand, evaluate_hands

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "RandomSource",
    "Rank",
    "Suit",
    "Hand",
    "evaluate_hands",
]

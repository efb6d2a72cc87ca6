"""Boxed text rendering of cards for the terminal."""

from typing import Sequence

from core.cards import Card, Rank
from core.hand import Hand

CARD_TOP = "┌──┐"
CARD_BOTTOM = "└──┘"
CARD_HIDDEN = "│░░│"

# Single-glyph ranks keep every card the same width
RANK_GLYPHS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "0",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

def render_card_face(card: Card) -> str:
    """Return the middle row of a face-up card, e.g. ``│K♦│``."""
    return f"│{RANK_GLYPHS[card.rank]}{card.suit}│"


def render_cards(cards: Sequence[Card], hidden: Sequence[bool]) -> str:
    """
    Lay out cards side by side as three rows of boxes.

    Args:
        cards: Cards in display order
        hidden: One flag per card; True draws the card face down

    Returns:
        Three newline-terminated rows
    """
    if len(cards) != len(hidden):
        raise ValueError("Need exactly one hidden flag per card")

    top = " ".join(CARD_TOP for _ in cards)
    bottom = " ".join(CARD_BOTTOM for _ in cards)
    middle = " ".join(
        CARD_HIDDEN if is_hidden else render_card_face(card)
        for card, is_hidden in zip(cards, hidden)
    )
    return f"{top}\n{middle}\n{bottom}\n"


class DrawHand:
    """A hand ready to print, optionally with the dealer's hole card hidden."""

    def __init__(self, hand: Hand, hide: bool = False) -> None:
        self.hand = hand
        self.hide = hide

    @classmethod
    def for_player(cls, hand: Hand) -> "DrawHand":
        """Show every card of the player's hand."""
        return cls(hand, hide=False)

    @classmethod
    def for_dealer(cls, hand: Hand, hide: bool) -> "DrawHand":
        """
        Show the dealer's hand.

        If ``hide`` is true the hand must hold exactly two cards and the
        second one is drawn face down.
        """
        if hide and len(hand) != 2:
            raise ValueError("Only hide cards when exactly 2")
        return cls(hand, hide=hide)

    def __str__(self) -> str:
        cards = self.hand.cards
        hidden = [self.hide and index > 0 for index in range(len(cards))]
        return render_cards(cards, hidden)

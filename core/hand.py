"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card


@dataclass
class Hand:
    """
    A blackjack hand with value calculation.

    Cards are only added through ``add`` and only removed by handing the
    hand back to ``Deck.discard``.
    """

    _cards: list[Card] = field(default_factory=list, init=False)

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self._cards.append(card)

    def _release(self) -> list[Card]:
        """Empty the hand, returning the cards it held."""
        cards = self._cards
        self._cards = []
        return cards

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in the order they were dealt."""
        return tuple(self._cards)

    @property
    def total(self) -> int:
        """
        Calculate the highest total that does not bust.

        Every Ace starts at 1; Aces are then promoted to 11 one at a time
        while the sum stays at or below 21. If no promotion fits, this is
        the hard total.
        """
        total = 0
        aces = 0

        for card in self._cards:
            total += card.score_ace_as_1()
            if card.is_ace:
                aces += 1

        while total <= 11 and aces > 0:
            total += 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (has an ace counted as 11)."""
        hard_total = sum(card.score_ace_as_1() for card in self._cards)
        return self.total != hard_total

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self._cards) == 2 and self.total == 21

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > 21

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self._cards)
        total_str = f"({self.total})"
        if self.is_soft:
            total_str = f"(soft {self.total})"
        if self.is_blackjack:
            total_str = "(BLACKJACK)"
        if self.is_bust:
            total_str = "(BUST)"
        return f"{cards_str} {total_str}"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, total={self.total})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare player and dealer hands.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if push (tie)
    """
    # Player busts always loses
    if player_hand.is_bust:
        return -1

    # Dealer busts, player wins
    if dealer_hand.is_bust:
        return 1

    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and dealer_bj:
        return 0
    if player_bj:
        return 1
    if dealer_bj:
        return -1

    if player_hand.total > dealer_hand.total:
        return 1
    if dealer_hand.total > player_hand.total:
        return -1
    return 0

"""Card and Deck classes - immutable cards drawn from a self-refilling deck."""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

from logging_utils import get_logger

if TYPE_CHECKING:
    from core.hand import Hand

logger = get_logger(__name__)


class Suit(Enum):
    """Card suits. Cosmetic only, suits never affect scoring."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks from Two to Ace."""

    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return _RANK_LABELS[self]

    def score_ace_as_1(self) -> int:
        """Return the point value of this rank, counting an Ace as 1."""
        return _SCORE_ACE_AS_1[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_SCORE_ACE_AS_1: dict[Rank, int] = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.ACE: 1,
}

_RANK_LABELS: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card. Equal cards from different decks compare equal."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def score_ace_as_1(self) -> int:
        """Return the sub-total score for this card, counting an Ace as 1."""
        return self.rank.score_ace_as_1()

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Th' or '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {label: rank for rank, label in _RANK_LABELS.items()}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class RandomSource(Protocol):
    """Anything producing uniform integers on demand, e.g. ``random.Random``."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in ``[0, stop)``."""
        ...


class DeckExhaustedError(RuntimeError):
    """Raised when a card is drawn while no card is left in either pool."""


class Deck:
    """
    A draw pile and a discard pile of cards from one or more 52-card decks.

    Typically a few decks are used (~6) to make card counting harder. Cards
    start in the discard pile and are shuffled into the draw pile as soon as
    the discard pile outgrows it.
    """

    def __init__(self, decks: int, rng: RandomSource) -> None:
        """
        Initialize a deck.

        Args:
            decks: Number of full 52-card decks (at least 1)
            rng: Random source used for every shuffle; borrowed, not owned
        """
        if decks < 1:
            raise ValueError("At least 1 deck is required")

        self._rng = rng
        self._draw: deque[Card] = deque()
        self._discard: list[Card] = [
            Card(rank, suit)
            for _ in range(decks)
            for rank in Rank
            for suit in Suit
        ]
        self._shuffle_count = 0

    def draw(self) -> Card:
        """
        Draw a card from the front of the draw pile.

        If the discard pile is larger than the draw pile, every card is
        shuffled back into the draw pile first.
        """
        if len(self._discard) > len(self._draw):
            self._reshuffle()

        if not self._draw:
            raise DeckExhaustedError(
                f"Should have had cards remaining (discard = {len(self._discard)})"
            )
        return self._draw.popleft()

    def discard(self, hand: "Hand") -> None:
        """Move every card of a hand to the discard pile and empty the hand."""
        self._discard.extend(hand._release())

    @property
    def shuffle_count(self) -> int:
        """Return how many times the deck has been reshuffled."""
        return self._shuffle_count

    def _reshuffle(self) -> None:
        pool = self._discard
        pool.extend(self._draw)
        self._fisher_yates(pool)

        self._draw = deque(pool)
        self._discard = []
        self._shuffle_count += 1
        logger.debug("Reshuffled %d cards (shuffle #%d)", len(pool), self._shuffle_count)

    def _fisher_yates(self, cards: list[Card]) -> None:
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]

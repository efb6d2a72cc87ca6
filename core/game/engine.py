"""Blackjack round engine with state machine."""

from typing import Callable

from transitions import Machine

from core.cards import Card, Deck, RandomSource
from core.hand import Hand, evaluate_hands
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState
from logging_utils import get_logger

logger = get_logger(__name__)


class BlackjackGame:
    """
    Single-player blackjack against the dealer, using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_round", "source": ["waiting_for_deal", "round_complete"], "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "round_decided", "source": "player_turn", "dest": "round_complete"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "round_complete"},
        {"trigger": "end_game", "source": "*", "dest": "game_over"},
    ]

    def __init__(
        self,
        rng: RandomSource,
        num_decks: int = 6,
        dealer_stands_on: int = 17,
        dealer_hits_soft_17: bool = False,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            rng: Random source the deck shuffles with
            num_decks: Number of 52-card decks
            dealer_stands_on: Total at which the dealer stops drawing
            dealer_hits_soft_17: Whether the dealer draws on a soft total
                equal to ``dealer_stands_on``
        """
        self.deck = Deck(num_decks, rng)
        self.dealer_hand = Hand()
        self.player_hand = Hand()
        self.dealer_stands_on = dealer_stands_on
        self.dealer_hits_soft_17 = dealer_hits_soft_17
        self.events = EventEmitter()
        self.outcome: int | None = None
        self._hole_card_hidden = False

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def _log_state(self) -> None:
        logger.debug("Game state -> %s", self.state)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Start a new round.

        Returns the previous round's cards to the deck, then deals two cards
        to the dealer and two to the player. A natural blackjack on either
        side settles the round immediately.

        Returns:
            True if the round was dealt
        """
        if not self.can_deal:
            return self._invalid("Cannot deal in current state")

        self.deck.discard(self.dealer_hand)
        self.deck.discard(self.player_hand)
        self.outcome = None
        self._hole_card_hidden = True

        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)

        self.start_round()
        self.events.emit_new(EventType.ROUND_STARTED)

        player_bj = self.player_hand.is_blackjack
        dealer_bj = self.dealer_hand.is_blackjack

        if player_bj:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)

        if player_bj or dealer_bj:
            self._reveal_hole_card()
            if dealer_bj:
                self.events.emit_new(EventType.DEALER_BLACKJACK)
            self.round_decided()
            self._resolve_round()

        return True

    def hit(self) -> bool:
        """Player draws another card."""
        if not self.can_hit:
            return self._invalid("Cannot hit in current state")

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.total)

        if self.player_hand.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.total)
            self.round_decided()
            self._resolve_round()
            return True

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stays; the dealer plays out the round."""
        if not self.can_stand:
            return self._invalid("Cannot stand in current state")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.total)
        self.player_done()
        self._play_dealer()
        return True

    def quit(self) -> bool:
        """End the game from any state."""
        if self.state == GameState.GAME_OVER:
            return self._invalid("Game already over")

        self.events.emit_new(EventType.GAME_ENDED, reason="quit")
        self.end_game()
        return True

    def _invalid(self, message: str) -> bool:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )
        return False

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        shuffles_before = self.deck.shuffle_count
        card = self.deck.draw()
        if self.deck.shuffle_count != shuffles_before:
            self.events.emit_new(EventType.DECK_SHUFFLED)

        hand.add(card)
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_value=None if is_dealer and self._hole_card_hidden else hand.total,
        )
        return card

    def _reveal_hole_card(self) -> None:
        self._hole_card_hidden = False
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[1]),
            hand_value=self.dealer_hand.total,
        )

    def _play_dealer(self) -> None:
        """Dealer draws to its standing total, then the round resolves."""
        self._reveal_hole_card()

        while self._dealer_should_hit():
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.total)

        if self.dealer_hand.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.total)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.total)

        self.dealer_plays()
        self._resolve_round()

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        value = self.dealer_hand.total
        if value < self.dealer_stands_on:
            return True
        if (
            value == self.dealer_stands_on
            and self.dealer_hand.is_soft
            and self.dealer_hits_soft_17
        ):
            return True
        return False

    def _resolve_round(self) -> None:
        """Compare hands and announce the result."""
        self.outcome = evaluate_hands(self.player_hand, self.dealer_hand)
        player_value = self.player_hand.total
        dealer_value = self.dealer_hand.total

        if self.outcome == 1:
            self.events.emit_new(EventType.PLAYER_WINS, player=player_value, dealer=dealer_value)
        elif self.outcome == -1:
            self.events.emit_new(EventType.PLAYER_LOSES, player=player_value, dealer=dealer_value)
        else:
            self.events.emit_new(EventType.PUSH, player=player_value, dealer=dealer_value)

        self.events.emit_new(EventType.ROUND_ENDED, outcome=self.outcome)
        logger.debug(
            "Round resolved: player %d, dealer %d, outcome %d",
            player_value,
            dealer_value,
            self.outcome,
        )

    @property
    def dealer_hole_card_hidden(self) -> bool:
        """Check if the dealer's second card is still face down."""
        return self._hole_card_hidden

    @property
    def can_deal(self) -> bool:
        """Check if a new round can be dealt."""
        return self.state in (GameState.WAITING_FOR_DEAL, GameState.ROUND_COMPLETE)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN and not self.player_hand.is_bust

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

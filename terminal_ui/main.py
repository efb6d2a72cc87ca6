"""Main entry point for terminal Blackjack."""

import argparse
from random import Random
from typing import Callable, Iterable, Optional

from config import AppConfig
from core.game import BlackjackGame, EventType, GameEvent, GameState
from logging_utils import get_logger, setup_logging
from terminal_ui.menu import MenuChoice, prompt_choice
from terminal_ui.render import DrawHand

logger = get_logger(__name__)


class Application:
    """Interactive loop: deal, let the player draw or stay, settle, repeat."""

    def __init__(
        self,
        game: BlackjackGame,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.read = read
        self.write = write
        self.running = True

        game.subscribe(self._on_dealer_shown, EventType.DEALER_REVEALS)
        game.subscribe(self._on_dealer_shown, EventType.DEALER_HITS)
        game.subscribe(self._on_shuffle, EventType.DECK_SHUFFLED)
        game.subscribe(self._on_player_blackjack, EventType.PLAYER_BLACKJACK)

    def run(self) -> None:
        """Play rounds until the player quits."""
        self.write("Welcome to BlackJack!")
        while self.running:
            self.play_round()
        self.write("\nBye!")

    def play_round(self) -> None:
        """Play one full round."""
        game = self.game
        game.deal()

        if game.dealer_hole_card_hidden:
            self.write("DEALER: ??")
            self.write(str(DrawHand.for_dealer(game.dealer_hand, hide=True)))

        self._player_turn()
        if not self.running:
            return

        if game.player_hand.is_bust:
            self.write("** bust **")
            return

        self.write("")
        self._announce_result()

    def _player_turn(self) -> None:
        game = self.game
        while True:
            self.write(f"PLAYER: {game.player_hand.total}")
            self.write(str(DrawHand.for_player(game.player_hand)))

            if not game.can_hit:
                return

            choice = prompt_choice(self.read, self.write)
            if choice is MenuChoice.QUIT:
                game.quit()
                self.running = False
                return
            if choice is MenuChoice.STAY:
                self.write("")
                game.stand()
                return

            game.hit()
            self.write("")

    def _announce_result(self) -> None:
        game = self.game
        if game.state != GameState.ROUND_COMPLETE:
            return

        if game.dealer_hand.is_bust:
            self.write("Dealer busts ... You win!\n")
        elif game.outcome == 1:
            self.write("You win!\n")
        elif game.outcome == -1:
            self.write("You lose!\n")
        else:
            self.write("You tie!\n")

    def _on_dealer_shown(self, event: GameEvent) -> None:
        hand = self.game.dealer_hand
        self.write(f"DEALER: {hand.total}")
        self.write(str(DrawHand.for_dealer(hand, hide=False)))

    def _on_shuffle(self, event: GameEvent) -> None:
        self.write("(shuffling the deck)")

    def _on_player_blackjack(self, event: GameEvent) -> None:
        self.write("BLACKJACK!")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blackjack against the dealer in the terminal.")
    parser.add_argument("--decks", type=int, help="Number of 52-card decks in play")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible shuffle order")
    parser.add_argument(
        "--dealer-hits-soft-17",
        action=argparse.BooleanOptionalAction,
        help="The dealer draws on a soft 17",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")

    # Environment defaults are validated here so a bad value exits like a bad flag
    try:
        config = AppConfig()
    except ValueError as exc:
        parser.error(f"invalid environment configuration: {exc}")

    parser.set_defaults(
        decks=config.game.num_decks,
        seed=config.game.seed,
        dealer_hits_soft_17=config.game.dealer_hits_soft_17,
        log_level=config.logging.level,
        dealer_stands_on=config.game.dealer_stands_on,
    )
    args = parser.parse_args(None if argv is None else list(argv))
    if args.decks < 1:
        parser.error("--decks must be at least 1")
    return args


def main(argv: Optional[Iterable[str]] = None) -> None:
    """Entry point for the terminal UI."""
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger.info("Starting with %d deck(s), seed %s", args.decks, args.seed)

    game = BlackjackGame(
        rng=Random(args.seed),
        num_decks=args.decks,
        dealer_stands_on=args.dealer_stands_on,
        dealer_hits_soft_17=args.dealer_hits_soft_17,
    )
    Application(game).run()


if __name__ == "__main__":
    main()

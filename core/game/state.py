"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: WAITING_FOR_DEAL → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Initial state, no cards on the table yet
    WAITING_FOR_DEAL = auto()

    # Player draws or stays
    PLAYER_TURN = auto()

    # Dealer plays
    DEALER_TURN = auto()

    # Round resolved, ready to deal again
    ROUND_COMPLETE = auto()

    # Player quit
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

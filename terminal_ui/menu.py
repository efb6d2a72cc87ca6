"""Keystroke menu for the player's turn."""

from enum import Enum
from typing import Callable


class MenuChoice(Enum):
    """Possible choices from the player."""

    QUIT = "Q"
    DRAW = "D"
    STAY = "S"

    @property
    def label(self) -> str:
        return self.name.title()


MENU_PROMPT = " | ".join(f"{choice.value}: {choice.label}" for choice in MenuChoice)


def parse_choice(text: str) -> MenuChoice | None:
    """Map a line of input to a menu choice, or None if unsupported."""
    try:
        return MenuChoice(text.strip().upper())
    except ValueError:
        return None


def prompt_choice(
    read: Callable[[], str],
    write: Callable[[str], None],
) -> MenuChoice:
    """
    Ask the player until a supported choice is entered.

    Args:
        read: Returns one line of input; raises EOFError at end of input
        write: Prints one line of output

    Returns:
        The chosen action (QUIT once input is exhausted)
    """
    write(MENU_PROMPT)

    while True:
        try:
            raw = read()
        except EOFError:
            return MenuChoice.QUIT

        choice = parse_choice(raw)
        if choice is not None:
            return choice
        write(f"Unsupported: {raw.strip()}")

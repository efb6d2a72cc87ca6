"""Tests for the player menu."""

import pytest

from terminal_ui.menu import MENU_PROMPT, MenuChoice, parse_choice, prompt_choice


def scripted(*lines):
    """A read function returning the given lines, then end of input."""
    remaining = list(lines)

    def read():
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


@pytest.mark.parametrize(
    "text,choice",
    [
        ("q", MenuChoice.QUIT),
        ("Q", MenuChoice.QUIT),
        ("d\n", MenuChoice.DRAW),
        ("  S  ", MenuChoice.STAY),
    ],
)
def test_parse_choice(text, choice):
    assert parse_choice(text) is choice


@pytest.mark.parametrize("text", ["", "x", "draw", "qq"])
def test_parse_choice_unsupported(text):
    assert parse_choice(text) is None


def test_prompt_text():
    assert MENU_PROMPT == "Q: Quit | D: Draw | S: Stay"


def test_prompt_reprompts_until_valid():
    output = []
    choice = prompt_choice(scripted("x", "hit", "d"), output.append)

    assert choice is MenuChoice.DRAW
    assert output == [MENU_PROMPT, "Unsupported: x", "Unsupported: hit"]


def test_prompt_end_of_input_quits():
    assert prompt_choice(scripted(), lambda line: None) is MenuChoice.QUIT

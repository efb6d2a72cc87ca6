"""Tests for boxed card rendering."""

import pytest

from core.cards import Card
from terminal_ui.render import DrawHand, render_card_face, render_cards
from conftest import make_hand


def test_draw_dealer_hidden():
    hand = make_hand("8C", "10C")
    assert str(DrawHand.for_dealer(hand, hide=True)) == (
        "┌──┐ ┌──┐\n"
        "│8♣│ │░░│\n"
        "└──┘ └──┘\n"
    )


def test_draw_dealer_shown():
    hand = make_hand("JH", "QS")
    assert str(DrawHand.for_dealer(hand, hide=False)) == (
        "┌──┐ ┌──┐\n"
        "│J♥│ │Q♠│\n"
        "└──┘ └──┘\n"
    )


def test_draw_player():
    hand = make_hand("KD", "AC")
    assert str(DrawHand.for_player(hand)) == (
        "┌──┐ ┌──┐\n"
        "│K♦│ │A♣│\n"
        "└──┘ └──┘\n"
    )


def test_ten_uses_single_glyph():
    hand = make_hand("10H", "2S", "9D")
    assert str(DrawHand.for_player(hand)).splitlines()[1] == "│0♥│ │2♠│ │9♦│"


def test_dealer_hide_requires_two_cards():
    with pytest.raises(ValueError):
        DrawHand.for_dealer(make_hand("8C", "10C", "2D"), hide=True)


def test_empty_hand_renders_blank_rows():
    assert render_cards([], []) == "\n\n\n"


def test_render_cards_per_card_flags():
    cards = [Card.from_string("AS"), Card.from_string("2H"), Card.from_string("3D")]
    middle = render_cards(cards, [False, True, False]).splitlines()[1]
    assert middle == "│A♠│ │░░│ │3♦│"


def test_render_cards_flag_count_mismatch():
    with pytest.raises(ValueError):
        render_cards([Card.from_string("AS")], [])


@pytest.mark.parametrize("text,face", [("2C", "│2♣│"), ("10D", "│0♦│"), ("QH", "│Q♥│"), ("AS", "│A♠│")])
def test_render_card_face_uses_suit_symbol(text, face):
    assert render_card_face(Card.from_string(text)) == face

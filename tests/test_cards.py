"""Tests covering cards and the deck."""

from __future__ import annotations

import random

import pytest

from indigo.cards import (
    Card,
    Deck,
    InsufficientCards,
    InvalidDrawAmount,
    Rank,
    Suit,
    iter_full_deck,
)


def _card(code: str) -> Card:
    return Card.from_code(code)


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("A♦", "A♠", True),
        ("A♦", "2♦", True),
        ("2♠", "3♥", False),
        ("10C", "10H", True),
        ("QH", "KC", False),
    ],
)
def test_match_by_rank_or_suit(left: str, right: str, expected: bool) -> None:
    assert _card(left).match(_card(right)) is expected
    assert _card(right).match(_card(left)) is expected


def test_card_matches_itself_and_equality_is_structural() -> None:
    card = Card(Rank.SEVEN, Suit.CLUBS)
    assert card.match(card)
    assert card == Card(Rank.SEVEN, Suit.CLUBS)
    assert len({card, Card(Rank.SEVEN, Suit.CLUBS)}) == 1


def test_from_code_accepts_letters_and_symbols() -> None:
    assert Card.from_code("10d") == Card(Rank.TEN, Suit.DIAMONDS)
    assert Card.from_code("Q♥") == Card(Rank.QUEEN, Suit.HEARTS)
    assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
    with pytest.raises(ValueError):
        Card.from_code("1X")


def test_full_deck_is_suit_major() -> None:
    cards = list(iter_full_deck())
    assert len(cards) == 52
    assert len(set(cards)) == 52
    assert cards[0] == Card(Rank.ACE, Suit.DIAMONDS)
    assert cards[12] == Card(Rank.KING, Suit.DIAMONDS)
    assert cards[13] == Card(Rank.ACE, Suit.HEARTS)
    assert cards[-1] == Card(Rank.KING, Suit.CLUBS)


@pytest.mark.parametrize("amount", [0, -1, 53])
def test_pick_cards_rejects_invalid_amounts(amount: int) -> None:
    deck = Deck()
    with pytest.raises(InvalidDrawAmount):
        deck.pick_cards(amount)
    assert len(deck) == 52


def test_pick_all_cards_empties_deck() -> None:
    deck = Deck()
    taken = deck.pick_cards(52)
    assert taken == list(iter_full_deck())
    assert deck.is_empty()


def test_pick_cards_takes_from_front_in_order() -> None:
    deck = Deck()
    first = deck.pick_cards(6)
    assert first == list(iter_full_deck())[:6]
    assert deck.cards[0] == Card(Rank.SEVEN, Suit.DIAMONDS)
    assert len(deck) == 46


def test_pick_cards_beyond_remaining_leaves_deck_untouched() -> None:
    deck = Deck()
    deck.pick_cards(50)
    remaining = deck.cards
    with pytest.raises(InsufficientCards):
        deck.pick_cards(4)
    assert deck.cards == remaining


def test_shuffle_is_seeded_permutation() -> None:
    one = Deck(random.Random(5))
    two = Deck(random.Random(5))
    one.shuffle()
    two.shuffle()
    assert one.cards == two.cards
    assert set(one.cards) == set(iter_full_deck())
    assert one.cards != tuple(iter_full_deck())

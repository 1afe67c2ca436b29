"""Tests covering the computer's card selection heuristic."""

from __future__ import annotations

import random

import pytest

from indigo import strategy
from indigo.cards import Card


def _cards(*codes: str) -> list[Card]:
    return [Card.from_code(code) for code in codes]


@pytest.mark.parametrize("top", [None, "5♠", "2♥"])
def test_single_card_is_always_played(top: str | None) -> None:
    top_card = Card.from_code(top) if top else None
    hand = _cards("5♦")
    assert strategy.choose_card(hand, top_card, random.Random(0)) == hand[0]


def test_same_rank_candidates_are_preferred_when_suit_group_is_single() -> None:
    hand = _cards("K♠", "K♥", "7♦")
    top = Card.from_code("K♦")
    assert len(strategy.match_candidates(hand, top)) == 3
    picks = {strategy.choose_card(hand, top, random.Random(seed)) for seed in range(50)}
    assert picks <= set(_cards("K♠", "K♥"))
    assert picks == set(_cards("K♠", "K♥"))


def test_same_suit_candidates_are_preferred_over_rank() -> None:
    hand = _cards("2♦", "9♦", "Q♠", "Q♥")
    top = Card.from_code("Q♦")
    picks = {strategy.choose_card(hand, top, random.Random(seed)) for seed in range(50)}
    assert picks == set(_cards("2♦", "9♦"))


def test_single_candidate_is_played() -> None:
    hand = _cards("3♣", "8♥", "J♠")
    assert strategy.choose_card(hand, Card.from_code("8♦"), random.Random(1)) == Card.from_code("8♥")


def test_mixed_single_matches_pick_among_all_candidates() -> None:
    hand = _cards("4♦", "Q♣", "7♥")
    top = Card.from_code("Q♦")
    picks = {strategy.choose_card(hand, top, random.Random(seed)) for seed in range(50)}
    assert picks == set(_cards("4♦", "Q♣"))


def test_no_candidates_falls_back_to_suit_group() -> None:
    hand = _cards("3♣", "5♥", "9♣", "J♥")
    top = Card.from_code("2♦")
    assert strategy.choose_card(hand, top, random.Random(2)) == Card.from_code("3♣")


def test_empty_table_uses_first_repeated_suit_in_hand_order() -> None:
    hand = _cards("4♠", "6♥", "K♥", "2♠")
    assert strategy.choose_card(hand, None, random.Random(3)) == Card.from_code("4♠")


def test_empty_table_falls_back_to_repeated_rank() -> None:
    hand = _cards("4♠", "6♥", "6♣", "J♦")
    assert strategy.choose_card(hand, None, random.Random(3)) == Card.from_code("6♥")


def test_empty_table_without_groups_picks_random_card() -> None:
    hand = _cards("4♠", "6♥", "8♣", "J♦")
    picks = {strategy.choose_card(hand, None, random.Random(seed)) for seed in range(60)}
    assert picks <= set(hand)
    assert len(picks) > 1


def test_choose_card_does_not_modify_hand() -> None:
    hand = _cards("4♠", "6♥")
    strategy.choose_card(hand, None, random.Random(0))
    assert hand == _cards("4♠", "6♥")


def test_empty_hand_is_rejected() -> None:
    with pytest.raises(ValueError):
        strategy.choose_card([], None, random.Random(0))

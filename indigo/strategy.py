"""Heuristic card selection for the computer player."""

from __future__ import annotations

import random
from typing import Callable, Hashable, Sequence, TypeVar

from .cards import Card

__all__ = ["choose_card", "select_without_top_card", "match_candidates"]

_K = TypeVar("_K", bound=Hashable)


def _first_repeated_group(hand: Sequence[Card], key: Callable[[Card], _K]) -> list[Card] | None:
    """Return the first group of two or more cards sharing ``key``, in hand order."""

    groups: dict[_K, list[Card]] = {}
    for card in hand:
        groups.setdefault(key(card), []).append(card)
    for group in groups.values():
        if len(group) >= 2:
            return group
    return None


def match_candidates(hand: Sequence[Card], top_card: Card) -> list[Card]:
    """Return the cards in ``hand`` that would win the table against ``top_card``."""

    return [card for card in hand if card.match(top_card)]


def select_without_top_card(hand: Sequence[Card], rng: random.Random) -> Card:
    """Pick a card when nothing on the table can be matched.

    Prefers the first card of the first suit held twice or more, then of the
    first rank held twice or more, so singleton suits and ranks stay in hand.
    """

    if not hand:
        raise ValueError("cannot select a card from an empty hand")
    by_suit = _first_repeated_group(hand, lambda card: card.suit)
    if by_suit is not None:
        return by_suit[0]
    by_rank = _first_repeated_group(hand, lambda card: card.rank)
    if by_rank is not None:
        return by_rank[0]
    return rng.choice(list(hand))


def choose_card(hand: Sequence[Card], top_card: Card | None, rng: random.Random) -> Card:
    """Return the card the computer should throw; ``hand`` is not modified."""

    if not hand:
        raise ValueError("cannot select a card from an empty hand")
    if len(hand) == 1:
        return hand[0]
    if top_card is None:
        return select_without_top_card(hand, rng)

    candidates = match_candidates(hand, top_card)
    if not candidates:
        return select_without_top_card(hand, rng)
    if len(candidates) == 1:
        return candidates[0]

    same_suit = [card for card in candidates if card.suit == top_card.suit]
    if len(same_suit) >= 2:
        return rng.choice(same_suit)
    same_rank = [card for card in candidates if card.rank == top_card.rank]
    if len(same_rank) >= 2:
        return rng.choice(same_rank)
    return rng.choice(candidates)

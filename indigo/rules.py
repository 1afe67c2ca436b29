"""Rule constants and scoring helpers for Indigo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from .cards import Card

__all__ = [
    "HAND_SIZE",
    "TABLE_CARDS",
    "DECK_SIZE",
    "BONUS_POINTS",
    "PlayerTally",
    "score_value",
    "bonus_recipient",
    "apply_final_bonus",
]

HAND_SIZE: Final[int] = 6
TABLE_CARDS: Final[int] = 4
DECK_SIZE: Final[int] = 52
BONUS_POINTS: Final[int] = 3


def score_value(cards: Iterable[Card]) -> int:
    """Return the points carried by ``cards`` (one per scoring-rank card)."""

    return sum(1 for card in cards if card.is_scoring)


@dataclass(slots=True)
class PlayerTally:
    """Running totals of won cards and points for a single player."""

    cards_won: int = 0
    score_won: int = 0

    def receive(self, cards: Sequence[Card]) -> None:
        """Credit a batch of won cards, whether from a trick or the final sweep."""

        self.cards_won += len(cards)
        self.score_won += score_value(cards)


def bonus_recipient(tallies: Sequence[PlayerTally], first_index: int) -> int:
    """Return the index of the player who earns the end-of-game bonus.

    The player with strictly more won cards gets it; on a tie it goes to the
    player seated first for the whole game.
    """

    if len(tallies) != 2:
        raise ValueError("the bonus is defined for exactly two players")
    if first_index not in (0, 1):
        raise ValueError("first_index must be 0 or 1")
    left, right = tallies
    if left.cards_won == right.cards_won:
        return first_index
    return 0 if left.cards_won > right.cards_won else 1


def apply_final_bonus(tallies: Sequence[PlayerTally], first_index: int) -> int:
    """Award ``BONUS_POINTS`` to the bonus recipient and return its index."""

    winner = bonus_recipient(tallies, first_index)
    tallies[winner].score_won += BONUS_POINTS
    return winner

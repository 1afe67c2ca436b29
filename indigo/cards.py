"""Card abstractions and the deck used by Indigo."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Iterator, List

__all__ = [
    "Suit",
    "Rank",
    "SCORING_RANKS",
    "Card",
    "Deck",
    "DeckError",
    "InvalidDrawAmount",
    "InsufficientCards",
    "iter_full_deck",
    "format_cards",
]

MAX_DRAW: Final[int] = 52


class Suit(str, Enum):
    """Enumeration of the four suits in an Indigo deck."""

    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"

    @classmethod
    def from_code(cls, code: str) -> "Suit":
        """Parse a suit from its symbol or its letter (``D``, ``H``, ``S``, ``C``)."""

        letters = {"D": cls.DIAMONDS, "H": cls.HEARTS, "S": cls.SPADES, "C": cls.CLUBS}
        upper = code.upper()
        if upper in letters:
            return letters[upper]
        return cls(code)


class Rank(str, Enum):
    """Enumeration of the thirteen ranks, in deck construction order."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


SCORING_RANKS: Final[frozenset[Rank]] = frozenset(
    {Rank.ACE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING}
)


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.label()

    def label(self) -> str:
        """Create a display label such as ``10♦``."""

        return f"{self.rank.value}{self.suit.value}"

    def match(self, other: "Card") -> bool:
        """Return ``True`` when ``other`` shares this card's rank or suit."""

        return self.rank == other.rank or self.suit == other.suit

    @property
    def is_scoring(self) -> bool:
        return self.rank in SCORING_RANKS

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse labels such as ``"A♦"``, ``"10S"`` or ``"qh"``."""

        code = code.strip()
        if len(code) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank_part, suit_part = code[:-1], code[-1]
        try:
            rank = Rank(rank_part.upper())
            suit = Suit.from_code(suit_part)
        except ValueError as exc:
            raise ValueError(f"invalid card code '{code}'") from exc
        return cls(rank=rank, suit=suit)


def iter_full_deck() -> Iterator[Card]:
    """Yield all 52 cards in suit-major, rank-minor order."""

    for suit in Suit:
        for rank in Rank:
            yield Card(rank=rank, suit=suit)


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.label() for card in cards)


class DeckError(RuntimeError):
    """Base class for invalid deck operations."""


class InvalidDrawAmount(DeckError):
    """Raised when a draw request is outside ``[1, 52]``."""


class InsufficientCards(DeckError):
    """Raised when a draw request exceeds the remaining cards."""


class Deck:
    """Ordered pile of the cards not yet dealt."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: List[Card] = list(iter_full_deck())

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the remaining cards, front first."""

        return tuple(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self) -> None:
        """Randomly permute the remaining cards using the deck's random source."""

        self._rng.shuffle(self._cards)

    def pick_cards(self, amount: int) -> list[Card]:
        """Remove and return ``amount`` cards from the front of the deck.

        Nothing is removed when the request fails.
        """

        if not 1 <= amount <= MAX_DRAW:
            raise InvalidDrawAmount("Invalid number of cards.")
        if amount > len(self._cards):
            raise InsufficientCards("The remaining cards are insufficient to meet the request.")
        taken = self._cards[:amount]
        del self._cards[:amount]
        return taken

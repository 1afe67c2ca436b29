"""Human and computer players behind a single contract."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Final, Protocol, Sequence, Union

from . import strategy
from .cards import Card
from .rules import PlayerTally
from .state import ScoreSummary, TableSnapshot

__all__ = [
    "Played",
    "Cancelled",
    "CANCEL",
    "TurnOutcome",
    "CardChooser",
    "Player",
    "ComputerPlayer",
    "HumanPlayer",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Played:
    """A card thrown on the table."""

    card: Card


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The player asked to leave the game."""


CANCEL: Final[Cancelled] = Cancelled()

TurnOutcome = Union[Played, Cancelled]


class CardChooser(Protocol):
    """Input collaborator that picks a card for a human player.

    Must return a valid 1-based index into ``hand`` or ``CANCEL``; invalid
    input is handled on the collaborator's side.
    """

    def __call__(self, hand: Sequence[Card], table: TableSnapshot) -> int | Cancelled:  # pragma: no cover - protocol only
        ...


StatusCallback = Callable[["Player", ScoreSummary], None]


class Player(ABC):
    """State and behaviour common to both kinds of player."""

    is_human = False

    def __init__(
        self,
        label: str,
        hand: Sequence[Card] = (),
        *,
        on_status: StatusCallback | None = None,
    ) -> None:
        self.label = label
        self._hand: list[Card] = list(hand)
        self.tally = PlayerTally()
        self._on_status = on_status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r}, hand={len(self._hand)})"

    @property
    def hand(self) -> tuple[Card, ...]:
        return tuple(self._hand)

    @property
    def cards_won(self) -> int:
        return self.tally.cards_won

    @property
    def score_won(self) -> int:
        return self.tally.score_won

    def fill_cards(self, new_cards: Sequence[Card]) -> None:
        """Refill an empty hand with ``new_cards``."""

        if self._hand:
            raise AssertionError(f"{self.label} refilled with {len(self._hand)} card(s) still in hand")
        self._hand.extend(new_cards)

    def receive_win_cards(self, cards: Sequence[Card]) -> None:
        self.tally.receive(cards)

    def report_status(self, summary: ScoreSummary) -> None:
        """Hook called after this player wins a trick."""

        if self._on_status is not None:
            self._on_status(self, summary)

    def share_rng(self, rng: random.Random) -> None:
        """Adopt the game's random source; only players that draw randomness use it."""

    @abstractmethod
    def throw_card(self, table: TableSnapshot) -> TurnOutcome:
        ...

    def _remove(self, card: Card) -> Card:
        self._hand.remove(card)
        return card


class ComputerPlayer(Player):
    """Player driven by the heuristic in :mod:`indigo.strategy`."""

    def __init__(
        self,
        label: str = "Computer",
        hand: Sequence[Card] = (),
        *,
        rng: random.Random | None = None,
        on_status: StatusCallback | None = None,
    ) -> None:
        super().__init__(label, hand, on_status=on_status)
        self.rng: random.Random | None = rng

    def share_rng(self, rng: random.Random) -> None:
        if self.rng is None:
            self.rng = rng

    def throw_card(self, table: TableSnapshot) -> TurnOutcome:
        if self.rng is None:
            self.rng = random.Random()
        card = strategy.choose_card(self.hand, table.top_card, self.rng)
        logger.debug("%s chose %s from %s", self.label, card, self.hand)
        return Played(self._remove(card))


class HumanPlayer(Player):
    """Player whose choices come from an external input collaborator."""

    is_human = True

    def __init__(
        self,
        chooser: CardChooser,
        label: str = "Player",
        hand: Sequence[Card] = (),
        *,
        on_status: StatusCallback | None = None,
    ) -> None:
        super().__init__(label, hand, on_status=on_status)
        self.chooser = chooser

    def throw_card(self, table: TableSnapshot) -> TurnOutcome:
        if not self._hand:
            raise AssertionError("cards in hand can't be zero")
        choice = self.chooser(self.hand, table)
        if isinstance(choice, Cancelled):
            return choice
        if not 1 <= choice <= len(self._hand):
            raise ValueError(f"card index {choice} outside 1-{len(self._hand)}")
        return Played(self._remove(self._hand[choice - 1]))

"""Game state data structures shared by the engine, players and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cards import Card

__all__ = ["GamePhase", "TableSnapshot", "PlayerScore", "ScoreSummary", "GameConfig"]


class GamePhase(str, Enum):
    """Lifecycle phases of a single game."""

    DEALING = "dealing"
    PLAYING = "playing"
    FINISHED = "finished"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class TableSnapshot:
    """Immutable view of the face-up table pile handed to players."""

    cards: tuple[Card, ...] = ()

    @classmethod
    def of(cls, cards: Sequence[Card]) -> "TableSnapshot":
        return cls(cards=tuple(cards))

    @property
    def top_card(self) -> Card | None:
        return self.cards[-1] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)

    def status_line(self) -> str:
        """Return the human-readable table summary shown before every throw."""

        top = self.top_card
        if top is None:
            return "No cards on the table"
        return f"{len(self.cards)} cards on the table, and the top card is {top.label()}"


@dataclass(frozen=True, slots=True)
class PlayerScore:
    """Score and won-card tallies for one seat at a point in time."""

    label: str
    score_won: int
    cards_won: int


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Both players' tallies in seat order."""

    scores: tuple[PlayerScore, ...]

    def for_label(self, label: str) -> PlayerScore:
        for entry in self.scores:
            if entry.label == label:
                return entry
        raise KeyError(label)


@dataclass(slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    human_first: bool = True
    seed: int | None = None

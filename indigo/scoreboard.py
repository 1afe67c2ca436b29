"""Helpers for tracking results across several games in one process."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .engine import GameResult
from .state import PlayerScore

__all__ = ["GameSummary", "PlayerMatchTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Final tallies captured after a single finished game."""

    game_number: int
    first_label: str
    scores: Sequence[PlayerScore]
    bonus_winner: str | None = None

    @classmethod
    def from_result(cls, game_number: int, first_label: str, result: GameResult) -> "GameSummary":
        if result.cancelled:
            raise ValueError("cancelled games are not recorded")
        return cls(
            game_number=game_number,
            first_label=first_label,
            scores=result.summary.scores,
            bonus_winner=result.bonus_winner,
        )

    @property
    def winner_label(self) -> str | None:
        """Label of the higher scorer, ``None`` on equal scores."""

        ordered = sorted(self.scores, key=lambda entry: entry.score_won, reverse=True)
        if len(ordered) > 1 and ordered[0].score_won == ordered[1].score_won:
            return None
        return ordered[0].label


@dataclass(frozen=True, slots=True)
class PlayerMatchTotal:
    """Aggregate totals accumulated across all recorded games."""

    label: str
    wins: int
    score_won: int
    cards_won: int
    bonuses: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries for fixed player labels."""

    labels: tuple[str, ...]
    games: list[GameSummary] = field(default_factory=list)
    ties: int = 0
    _wins: dict[str, int] = field(init=False, repr=False)
    _score: dict[str, int] = field(init=False, repr=False)
    _cards: dict[str, int] = field(init=False, repr=False)
    _bonuses: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.labels) != 2 or len(set(self.labels)) != 2:
            raise ValueError("a match needs two distinct player labels")
        self._wins = {label: 0 for label in self.labels}
        self._score = {label: 0 for label in self.labels}
        self._cards = {label: 0 for label in self.labels}
        self._bonuses = {label: 0 for label in self.labels}

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if sorted(entry.label for entry in summary.scores) != sorted(self.labels):
            raise ValueError("summary labels do not match the tracked players")
        self.games.append(summary)
        for entry in summary.scores:
            self._score[entry.label] += entry.score_won
            self._cards[entry.label] += entry.cards_won
        winner = summary.winner_label
        if winner is None:
            self.ties += 1
        else:
            self._wins[winner] += 1
        if summary.bonus_winner is not None:
            self._bonuses[summary.bonus_winner] += 1

    def totals(self) -> list[PlayerMatchTotal]:
        """Return the cumulative totals in label order."""

        return [
            PlayerMatchTotal(
                label=label,
                wins=self._wins[label],
                score_won=self._score[label],
                cards_won=self._cards[label],
                bonuses=self._bonuses[label],
            )
            for label in self.labels
        ]

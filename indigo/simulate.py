"""Batch runner pitting two computer players against each other."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from . import rules, scoreboard
from .engine import IndigoGame
from .players import ComputerPlayer

__all__ = ["SeatStatistics", "SimulationReport", "run_simulation", "DEFAULT_LABELS"]

logger = logging.getLogger(__name__)

DEFAULT_LABELS = ("Computer A", "Computer B")


@dataclass(frozen=True, slots=True)
class SeatStatistics:
    """Aggregate statistics for one computer player across the batch."""

    label: str
    wins: int
    mean_score: float
    std_score: float
    mean_cards: float
    bonuses: int


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Summary of a batch of computer-vs-computer games."""

    history: scoreboard.MatchHistory
    players: tuple[SeatStatistics, SeatStatistics]
    first_seat_wins: int
    first_seat_bonus_rate: float

    @property
    def ties(self) -> int:
        return self.history.ties


def _play_one(game_number: int, rng: random.Random, labels: tuple[str, str]) -> scoreboard.GameSummary:
    first_label, second_label = labels if game_number % 2 == 1 else labels[::-1]
    first = ComputerPlayer(first_label, rng=rng)
    second = ComputerPlayer(second_label, rng=rng)
    game = IndigoGame(first, second, rng=rng)
    result = game.play()
    accounting = game.card_accounting()
    if accounting.total != rules.DECK_SIZE:
        raise RuntimeError(f"game {game_number} lost track of cards: {accounting}")
    return scoreboard.GameSummary.from_result(game_number, first_label, result)


def run_simulation(
    games: int,
    *,
    seed: int = 123,
    labels: tuple[str, str] = DEFAULT_LABELS,
) -> SimulationReport:
    """Play ``games`` games alternating the first seat and aggregate the results."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    history = scoreboard.MatchHistory(labels=labels)
    scores = np.zeros((games, 2), dtype=np.int64)
    cards = np.zeros((games, 2), dtype=np.int64)
    first_seat_wins = 0
    first_seat_bonuses = 0

    for game_number in range(1, games + 1):
        summary = _play_one(game_number, rng, labels)
        history.record(summary)
        for column, label in enumerate(labels):
            entry = next(item for item in summary.scores if item.label == label)
            scores[game_number - 1, column] = entry.score_won
            cards[game_number - 1, column] = entry.cards_won
        if summary.winner_label == summary.first_label:
            first_seat_wins += 1
        if summary.bonus_winner == summary.first_label:
            first_seat_bonuses += 1

    logger.debug("simulated %d game(s) with seed %d", games, seed)

    totals = {total.label: total for total in history.totals()}
    seats = tuple(
        SeatStatistics(
            label=label,
            wins=totals[label].wins,
            mean_score=float(np.mean(scores[:, column])),
            std_score=float(np.std(scores[:, column])),
            mean_cards=float(np.mean(cards[:, column])),
            bonuses=totals[label].bonuses,
        )
        for column, label in enumerate(labels)
    )
    return SimulationReport(
        history=history,
        players=(seats[0], seats[1]),
        first_seat_wins=first_seat_wins,
        first_seat_bonus_rate=first_seat_bonuses / games,
    )

"""Turn state machine driving a two-player Indigo game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from . import rules
from .cards import Card, Deck, format_cards
from .players import Cancelled, Player
from .state import GamePhase, PlayerScore, ScoreSummary, TableSnapshot

__all__ = [
    "GameObserver",
    "NullObserver",
    "CardAccounting",
    "GameResult",
    "IndigoGame",
    "seat_players",
]

logger = logging.getLogger(__name__)


class GameObserver(Protocol):
    """Presentation hooks called by the engine as the game progresses."""

    def game_started(self, table: TableSnapshot) -> None:  # pragma: no cover - protocol only
        ...

    def turn_started(self, player: Player, table: TableSnapshot) -> None:  # pragma: no cover - protocol only
        ...

    def card_played(self, player: Player, card: Card, table: TableSnapshot) -> None:  # pragma: no cover - protocol only
        ...

    def game_finished(self, table: TableSnapshot, summary: ScoreSummary) -> None:  # pragma: no cover - protocol only
        ...


class NullObserver:
    """Observer that ignores every event."""

    def game_started(self, table: TableSnapshot) -> None:
        pass

    def turn_started(self, player: Player, table: TableSnapshot) -> None:
        pass

    def card_played(self, player: Player, card: Card, table: TableSnapshot) -> None:
        pass

    def game_finished(self, table: TableSnapshot, summary: ScoreSummary) -> None:
        pass


@dataclass(frozen=True, slots=True)
class CardAccounting:
    """Where every card of the deck currently is."""

    deck: int
    table: int
    hands: tuple[int, int]
    won: tuple[int, int]

    @property
    def total(self) -> int:
        return self.deck + self.table + sum(self.hands) + sum(self.won)


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome returned by :meth:`IndigoGame.play`."""

    phase: GamePhase
    summary: ScoreSummary
    throws: int
    last_trick_winner: str | None = None
    bonus_winner: str | None = None

    @property
    def cancelled(self) -> bool:
        return self.phase is GamePhase.CANCELLED


class IndigoGame:
    """Owns the deck, the table pile and the seating of both players.

    ``first`` throws first in every round for the whole game.
    """

    def __init__(
        self,
        first: Player,
        second: Player,
        *,
        rng: random.Random | None = None,
        deck: Deck | None = None,
        observer: GameObserver | None = None,
    ) -> None:
        if first is second:
            raise ValueError("a game needs two distinct players")
        self.rng = rng if rng is not None else random.Random()
        self.deck = deck if deck is not None else Deck(self.rng)
        self.players: tuple[Player, Player] = (first, second)
        for player in self.players:
            player.share_rng(self.rng)
        self.observer: GameObserver = observer if observer is not None else NullObserver()
        self.phase = GamePhase.DEALING
        self.last_trick_winner: Player | None = None
        self.throws = 0
        self._table: list[Card] = []
        self._round_counter = 0

    @property
    def table(self) -> TableSnapshot:
        return TableSnapshot.of(self._table)

    @property
    def top_card(self) -> Card | None:
        return self._table[-1] if self._table else None

    def summary(self) -> ScoreSummary:
        return ScoreSummary(
            scores=tuple(
                PlayerScore(label=player.label, score_won=player.score_won, cards_won=player.cards_won)
                for player in self.players
            )
        )

    def card_accounting(self) -> CardAccounting:
        first, second = self.players
        return CardAccounting(
            deck=len(self.deck),
            table=len(self._table),
            hands=(len(first.hand), len(second.hand)),
            won=(first.cards_won, second.cards_won),
        )

    def deal(self) -> None:
        """Shuffle, deal both hands and lay the opening table cards."""

        if self.phase is not GamePhase.DEALING:
            raise RuntimeError(f"cannot deal during phase {self.phase.value}")
        self.deck.shuffle()
        for player in self.players:
            player.fill_cards(self.deck.pick_cards(rules.HAND_SIZE))
        self._table.extend(self.deck.pick_cards(rules.TABLE_CARDS))
        self.phase = GamePhase.PLAYING
        logger.debug("dealt hands; table starts with %s", format_cards(self._table))
        self.observer.game_started(self.table)

    def is_over(self) -> bool:
        first, second = self.players
        return first.cards_won + second.cards_won + len(self._table) == rules.DECK_SIZE

    def play(self) -> GameResult:
        """Run the game to completion or until a player cancels."""

        if self.phase is GamePhase.DEALING:
            self.deal()
        if self.phase is not GamePhase.PLAYING:
            raise RuntimeError(f"cannot play during phase {self.phase.value}")

        while not self.is_over():
            for player in self.players:
                if not self._take_turn(player):
                    self.phase = GamePhase.CANCELLED
                    logger.info("game cancelled by %s after %d throw(s)", player.label, self.throws)
                    return self._result()
            self._round_counter += 1
            if self._round_counter % rules.HAND_SIZE == 0 and not self.deck.is_empty():
                self._refill()

        bonus_winner = self.apply_final_rules()
        self.phase = GamePhase.FINISHED
        self.observer.game_finished(self.table, self.summary())
        return self._result(bonus_winner)

    def apply_final_rules(self) -> Player:
        """Sweep the leftover table to the last trick winner and award the bonus."""

        if self.last_trick_winner is not None and self._table:
            logger.debug(
                "%s takes the remaining %d table card(s)", self.last_trick_winner.label, len(self._table)
            )
            self.last_trick_winner.receive_win_cards(list(self._table))
            self._table.clear()
        tallies = [player.tally for player in self.players]
        winner = self.players[rules.apply_final_bonus(tallies, first_index=0)]
        logger.debug("%s receives the %d point bonus", winner.label, rules.BONUS_POINTS)
        return winner

    def _take_turn(self, player: Player) -> bool:
        table = self.table
        logger.debug("%s to throw; %s", player.label, table.status_line())
        self.observer.turn_started(player, table)
        outcome = player.throw_card(table)
        if isinstance(outcome, Cancelled):
            return False

        card = outcome.card
        self.throws += 1
        top = self.top_card
        self._table.append(card)
        self.observer.card_played(player, card, self.table)
        if top is not None and top.match(card):
            won = list(self._table)
            self._table.clear()
            player.receive_win_cards(won)
            self.last_trick_winner = player
            logger.debug("%s wins %d card(s) with %s", player.label, len(won), card)
            player.report_status(self.summary())
        return True

    def _refill(self) -> None:
        for player in self.players:
            player.fill_cards(self.deck.pick_cards(rules.HAND_SIZE))
        self._round_counter = 0
        logger.debug("refilled hands; %d card(s) left in deck", len(self.deck))

    def _result(self, bonus_winner: Player | None = None) -> GameResult:
        return GameResult(
            phase=self.phase,
            summary=self.summary(),
            throws=self.throws,
            last_trick_winner=self.last_trick_winner.label if self.last_trick_winner else None,
            bonus_winner=bonus_winner.label if bonus_winner else None,
        )


def seat_players(human: Player, computer: Player, human_first: bool) -> Sequence[Player]:
    """Return the fixed turn order for the game."""

    return (human, computer) if human_first else (computer, human)

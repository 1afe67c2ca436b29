"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Suit
from ..state import ScoreSummary, TableSnapshot
from .views import ScoreTableView

_SUIT_COLORS = {
    Suit.SPADES: "cyan",
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
    Suit.CLUBS: "green",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _SUIT_COLORS.get(card.suit, "white")
    return f"[{color}]{card.label()}[/{color}]"


def format_hand(cards: Sequence[Card], *, numbered: bool = False) -> str:
    """Return ``cards`` separated by spaces, optionally as ``1)A♦ 2)7♠``."""

    if numbered:
        return " ".join(f"{idx}){format_card(card)}" for idx, card in enumerate(cards, start=1))
    return " ".join(format_card(card) for card in cards)


def format_status(table: TableSnapshot) -> str:
    top = table.top_card
    if top is None:
        return "No cards on the table"
    return f"{len(table)} cards on the table, and the top card is {format_card(top)}"


def score_lines(summary: ScoreSummary, labels: Sequence[str]) -> list[str]:
    """Return the two ``Score:``/``Cards:`` lines with players in ``labels`` order."""

    entries = [summary.for_label(label) for label in labels]
    score = " - ".join(f"{entry.label} {entry.score_won}" for entry in entries)
    cards = " - ".join(f"{entry.label} {entry.cards_won}" for entry in entries)
    return [f"Score: {score}", f"Cards: {cards}"]


def render_summary(summary: ScoreSummary, *, first_label: str, title: str = "Final Score") -> RenderableType:
    """Return a Rich panel with the final tallies."""

    view = ScoreTableView(summary=summary, first_label=first_label)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")

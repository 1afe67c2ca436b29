"""Composable view primitives for the Indigo CLI."""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.console import RenderableType
from rich.table import Table

from ..scoreboard import MatchHistory
from ..simulate import SimulationReport
from ..state import ScoreSummary


@dataclass(slots=True)
class ScoreTableView:
    """Renderable listing both players' score and won cards."""

    summary: ScoreSummary
    first_label: str

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=False)
        table.add_column("Player", justify="left", style="bold")
        table.add_column("Seat", justify="left")
        table.add_column("Score", justify="right")
        table.add_column("Cards", justify="right")

        best = max(entry.score_won for entry in self.summary.scores)
        for entry in self.summary.scores:
            seat = "First" if entry.label == self.first_label else "Second"
            label = entry.label
            score = str(entry.score_won)
            if entry.score_won == best:
                label = f"[bold green]{label}[/bold green]"
                score = f"[bold green]{score}[/bold green]"
            table.add_row(label, seat, score, str(entry.cards_won))
        return table


@dataclass(slots=True)
class SimulationView:
    """Renderable summarising a computer-vs-computer batch."""

    report: SimulationReport

    def render(self) -> RenderableType:
        history: MatchHistory = self.report.history
        games = len(history.games)
        table = Table(title=f"Simulation of {games} game(s)", box=box.SIMPLE_HEAVY)
        table.add_column("Player", justify="center")
        table.add_column("Wins", justify="right")
        table.add_column("Mean score", justify="right")
        table.add_column("Std score", justify="right")
        table.add_column("Mean cards", justify="right")
        table.add_column("Bonuses", justify="right")

        best_wins = max(stats.wins for stats in self.report.players)
        for stats in self.report.players:
            label = stats.label
            if stats.wins == best_wins and games:
                label = f"[bold blue]{label}[/bold blue]"
            table.add_row(
                label,
                str(stats.wins),
                f"{stats.mean_score:.2f}",
                f"{stats.std_score:.2f}",
                f"{stats.mean_cards:.2f}",
                str(stats.bonuses),
            )
        table.add_row("[dim]Ties[/dim]", str(self.report.ties), "", "", "", "")
        return table

"""Typer entry-point wiring for the Indigo CLI."""

from __future__ import annotations

import random
from typing import Callable, Sequence

import typer
from rich.console import Console

from .. import simulate as simulate_module
from ..cards import Card
from ..engine import IndigoGame, seat_players
from ..logging_utils import setup_logging
from ..players import CANCEL, Cancelled, ComputerPlayer, HumanPlayer, Player
from ..state import GameConfig, ScoreSummary, TableSnapshot
from .render import format_card, format_hand, format_status, render_summary, score_lines
from .views import SimulationView

HUMAN_LABEL = "Player"
COMPUTER_LABEL = "Computer"
EXIT_COMMAND = "exit"

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

Reader = Callable[[str], str]


def parse_choice(text: str, hand_size: int) -> int | Cancelled | None:
    """Interpret a line typed by the human; ``None`` means ask again."""

    value = text.strip()
    if value == EXIT_COMMAND:
        return CANCEL
    if not value.isdecimal():
        return None
    index = int(value)
    if 1 <= index <= hand_size:
        return index
    return None


def parse_yes_no(text: str) -> bool | None:
    value = text.strip().lower()
    if value == "yes":
        return True
    if value == "no":
        return False
    return None


class ConsoleChooser:
    """Blocking input collaborator for the human player."""

    def __init__(self, out: Console, read: Reader | None = None) -> None:
        self.out = out
        self.read = read if read is not None else out.input

    def __call__(self, hand: Sequence[Card], table: TableSnapshot) -> int | Cancelled:
        self.out.print(f"Cards in hand: {format_hand(hand, numbered=True)}")
        while True:
            try:
                text = self.read(f"Choose a card to play (1-{len(hand)}): ")
            except EOFError:
                return CANCEL
            choice = parse_choice(text, len(hand))
            if choice is not None:
                return choice


class ConsoleObserver:
    """Prints game progress the way a table-side narrator would."""

    def __init__(self, out: Console, labels: Sequence[str] = (HUMAN_LABEL, COMPUTER_LABEL)) -> None:
        self.out = out
        self.labels = tuple(labels)
        self.first_label = self.labels[0]

    def game_started(self, table: TableSnapshot) -> None:
        self.out.print(f"Initial cards on the table: {format_hand(table.cards)}")

    def turn_started(self, player: Player, table: TableSnapshot) -> None:
        self.out.print()
        self.out.print(format_status(table))
        if not player.is_human:
            self.out.print(f"[dim]{format_hand(player.hand)}[/dim]")

    def card_played(self, player: Player, card: Card, table: TableSnapshot) -> None:
        if not player.is_human:
            self.out.print(f"[cyan]{player.label}[/cyan] plays {format_card(card)}")

    def announce_trick(self, player: Player, summary: ScoreSummary) -> None:
        colour = "yellow" if player.is_human else "cyan"
        self.out.print(f"[{colour}]{player.label}[/{colour}] wins cards")
        for line in score_lines(summary, self.labels):
            self.out.print(line)

    def game_finished(self, table: TableSnapshot, summary: ScoreSummary) -> None:
        self.out.print()
        self.out.print(format_status(table))
        for line in score_lines(summary, self.labels):
            self.out.print(line)
        self.out.print(render_summary(summary, first_label=self.first_label))


def ask_first(out: Console, read: Reader | None = None) -> bool:
    """Ask ``Play first?`` until the answer is ``yes`` or ``no``."""

    reader = read if read is not None else out.input
    while True:
        answer = parse_yes_no(reader("Play first? "))
        if answer is not None:
            return answer


def run_game(
    config: GameConfig,
    out: Console,
    read: Reader | None = None,
) -> None:
    """Play one interactive game, always ending with ``Game Over``."""

    seed = config.seed if config.seed is not None else random.SystemRandom().randrange(0, 2**63)
    rng = random.Random(seed)
    observer = ConsoleObserver(out)
    human = HumanPlayer(ConsoleChooser(out, read), HUMAN_LABEL, on_status=observer.announce_trick)
    computer = ComputerPlayer(COMPUTER_LABEL, rng=rng, on_status=observer.announce_trick)
    first, second = seat_players(human, computer, config.human_first)
    observer.first_label = first.label
    game = IndigoGame(first, second, rng=rng, observer=observer)
    try:
        game.play()
    finally:
        out.print("Game Over")


@app.command()
def play(
    first: bool | None = typer.Option(
        None,
        "--first/--second",
        help="Throw first or second; omit to be asked.",
    ),
    seed: int | None = typer.Option(
        None,
        envvar="INDIGO_SEED",
        help="Random seed for reproducible games (omit for randomness).",
    ),
    log_level: str | None = typer.Option(None, help="Logging level (defaults to $LOG_LEVEL or WARNING)."),
) -> None:
    """Play Indigo against the computer."""

    setup_logging(log_level)
    console.print("[bold]Indigo Card Game[/bold]")
    human_first = first if first is not None else ask_first(console)
    run_game(GameConfig(human_first=human_first, seed=seed), console)


@app.command("simulate")
def simulate_cli(
    games: int = typer.Option(100, min=1, help="Number of computer-vs-computer games."),
    seed: int = typer.Option(123, envvar="INDIGO_SEED", help="Random seed for the batch."),
    log_level: str | None = typer.Option(None, help="Logging level (defaults to $LOG_LEVEL or WARNING)."),
) -> None:
    """Run computer-vs-computer games and summarise the heuristic's results."""

    setup_logging(log_level)
    report = simulate_module.run_simulation(games, seed=seed)
    console.print(SimulationView(report).render())
    console.print(
        f"[cyan]First seat won {report.first_seat_wins} game(s) and took the bonus "
        f"{report.first_seat_bonus_rate:.0%} of the time.[/cyan]"
    )


def main() -> None:
    """Entry-point for ``python -m indigo.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()

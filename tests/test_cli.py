from __future__ import annotations

import io

import pytest
from rich.console import Console
from typer.testing import CliRunner

from indigo.cards import Card
from indigo.cli.main import ConsoleChooser, app, ask_first, parse_choice, parse_yes_no, run_game
from indigo.players import CANCEL
from indigo.state import GameConfig, TableSnapshot

runner = CliRunner()


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


@pytest.mark.parametrize(
    ("text", "hand_size", "expected"),
    [
        ("1", 6, 1),
        (" 6 ", 6, 6),
        ("7", 6, None),
        ("0", 6, None),
        ("two", 6, None),
        ("", 6, None),
        ("²", 6, None),
        ("exit", 3, CANCEL),
    ],
)
def test_parse_choice(text: str, hand_size: int, expected: object) -> None:
    assert parse_choice(text, hand_size) == expected


def test_ask_first_reprompts_until_yes_or_no() -> None:
    out, buffer = _console()
    answers = iter(["maybe", "", "no"])
    assert ask_first(out, lambda prompt: next(answers)) is False
    assert parse_yes_no("YES") is True


def test_run_game_prints_game_over_after_exit() -> None:
    out, buffer = _console()
    answers = iter(["9", "abc", "exit"])
    run_game(GameConfig(human_first=True, seed=3), out, lambda prompt: next(answers))

    text = buffer.getvalue()
    assert "Initial cards on the table:" in text
    assert "Cards in hand: 1)" in text
    assert text.rstrip().endswith("Game Over")
    assert "Final Score" not in text


def test_run_game_to_the_end() -> None:
    out, buffer = _console()
    run_game(GameConfig(human_first=False, seed=8), out, lambda prompt: "1")

    text = buffer.getvalue()
    assert "Computer plays" in text
    assert "Score: Player" in text
    assert "Final Score" in text
    assert text.rstrip().endswith("Game Over")


def test_play_command_exit() -> None:
    result = runner.invoke(app, ["play", "--first", "--seed", "3"], input="exit\n")
    assert result.exit_code == 0
    assert "Indigo Card Game" in result.output
    assert "Game Over" in result.output


def test_simulate_command() -> None:
    result = runner.invoke(app, ["simulate", "--games", "3", "--seed", "1"])
    assert result.exit_code == 0
    assert "Simulation of 3 game(s)" in result.output


def test_chooser_reprompts_on_superscript_digits() -> None:
    out, buffer = _console()
    answers = iter(["²", "³", "2"])
    chooser = ConsoleChooser(out, lambda prompt: next(answers))
    hand = [Card.from_code("A♦"), Card.from_code("7♠")]
    assert chooser(hand, TableSnapshot()) == 2

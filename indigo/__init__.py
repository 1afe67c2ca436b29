"""Top-level package for the Indigo card game engine."""

from . import cards, engine, players, rules, state, strategy

__all__ = [
    "cards",
    "engine",
    "players",
    "rules",
    "state",
    "strategy",
]

"""Kwazam rules engine."""

from . import core, persistence
from .config import ConfigError, KwazamConfig, load_config
from .controller import GameController, Interaction
from .core import GameEvent, GameOverError, GameState, IllegalMoveError, MoveResult
from .persistence import SaveFileError
from .render import render_board, render_status

__all__ = [
    "core",
    "persistence",
    "ConfigError",
    "KwazamConfig",
    "load_config",
    "GameController",
    "Interaction",
    "GameEvent",
    "GameOverError",
    "GameState",
    "IllegalMoveError",
    "MoveResult",
    "SaveFileError",
    "render_board",
    "render_status",
]

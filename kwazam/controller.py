from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from .config import KwazamConfig
from .core import GameState, IllegalMoveError, Piece, Player, Position, is_valid_coordinate
from .core.state import Listener
from .persistence import SaveFileError

HELP_TEXT = """\
Pieces:
  Ram  moves one step forward. At the far edge it turns around and heads back.
  Biz  moves in a 3x2 L shape in any orientation. The only piece that jumps over others.
  Tor  moves orthogonally any distance without jumping.
  Xor  moves diagonally any distance without jumping.
  Sau  moves one step in any direction.
Every two full turns (one move by each side is one turn) all Tor pieces become
Xor pieces and all Xor pieces become Tor pieces.

Win condition:
  The game ends when a side captures the other side's Sau.
"""


class Interaction(Enum):
    IGNORED = "ignored"
    SELECTED = "selected"
    MOVED = "moved"
    CAPTURED = "captured"
    INVALID_MOVE = "invalid_move"
    INVALID_CAPTURE = "invalid_capture"
    GAME_OVER = "game_over"


class GameController:
    """Click-driven selection protocol on top of a :class:`GameState`."""

    def __init__(self, state: Optional[GameState] = None, config: Optional[KwazamConfig] = None) -> None:
        self.state = state or GameState()
        self.config = config or KwazamConfig()
        self.selected_piece: Optional[Piece] = None

    def add_listener(self, listener: Listener) -> None:
        self.state.add_listener(listener)

    def is_player_turn(self, player: Player) -> bool:
        return self.state.current_player == player

    def selected_moves(self) -> List[Position]:
        if self.selected_piece is None:
            return []
        return self.state.valid_moves_for(self.selected_piece)

    def deselect(self) -> None:
        self.selected_piece = None

    def interact(self, col: int, row: int) -> Interaction:
        if self.state.game_ended:
            return Interaction.GAME_OVER
        if not is_valid_coordinate(col, row):
            return Interaction.IGNORED

        clicked = self.state.get_piece(col, row)
        if self.selected_piece is None:
            if clicked is None or not self.is_player_turn(clicked.owner):
                return Interaction.IGNORED
            self.selected_piece = clicked
            return Interaction.SELECTED

        if clicked is None:
            return self._attempt(self.selected_piece, col, row, capture=False)
        if clicked.owner == self.selected_piece.owner:
            logger.info("Same owner; switching selection to {}.", clicked)
            self.selected_piece = clicked
            return Interaction.SELECTED
        return self._attempt(self.selected_piece, col, row, capture=True)

    def _attempt(self, piece: Piece, col: int, row: int, *, capture: bool) -> Interaction:
        if (col, row) not in self.state.valid_moves_for(piece):
            logger.info("Invalid {} by {} to ({}, {}).", "capture" if capture else "move", piece, col, row)
            return Interaction.INVALID_CAPTURE if capture else Interaction.INVALID_MOVE
        try:
            if capture:
                self.state.capture_piece(piece, (col, row))
            else:
                self.state.move_piece(piece, (col, row))
        except IllegalMoveError as exc:
            logger.info("Rejected: {}", exc)
            return Interaction.INVALID_CAPTURE if capture else Interaction.INVALID_MOVE
        self.selected_piece = None
        return Interaction.CAPTURED if capture else Interaction.MOVED

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------
    def save(self, name: Union[str, Path]) -> bool:
        path = self.config.resolve_save_path(name)
        try:
            self.state.save(path)
        except SaveFileError as exc:
            logger.error("{}", exc)
            return False
        return True

    def load(self, path: Union[str, Path]) -> bool:
        try:
            self.state.load(path)
        except SaveFileError as exc:
            logger.error("{}", exc)
            return False
        self.selected_piece = None
        logger.info("Game state loaded from {}", path)
        return True

    def restart(self) -> None:
        logger.info("Restarting the game.")
        self.selected_piece = None
        self.state.restart()

    @staticmethod
    def help_text() -> str:
        return HELP_TEXT


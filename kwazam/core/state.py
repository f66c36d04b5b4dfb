from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from loguru import logger

from ..persistence import deserialize, read_save_file, serialize, write_save_file
from .board import Board, Position, Tile
from .pieces import Piece, PieceKind, Player, create_piece
from .rules import (
    STARTING_TURN,
    STARTING_TURN_COUNT,
    create_players,
    describe_move,
    format_square,
    initialize_pieces,
    transformed_kind,
    transforms_at,
)

Destination = Union[Tile, Position]


class IllegalMoveError(ValueError):
    pass


class GameOverError(IllegalMoveError):
    pass


class GameEvent(Enum):
    MOVE = "move"
    CAPTURE = "capture"
    RESTART = "restart"
    LOAD = "load"
    GAME_END = "game_end"


Listener = Callable[[GameEvent, "GameState"], None]


@dataclass(frozen=True)
class MoveResult:
    piece: Piece
    origin: Position
    destination: Position
    notation: str
    captured: Optional[Piece] = None
    transformed: bool = False
    game_ended: bool = False


class GameState:
    """Board, players, turn bookkeeping and move history of one Kwazam game."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._reset()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def current_player(self) -> Player:
        return self.players[self.current_turn]

    def get_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def get_piece(self, col: int, row: int) -> Optional[Piece]:
        return self.board.get_piece(col, row)

    def get_tile(self, col: int, row: int) -> Tile:
        return self.board.tile(col, row)

    def is_occupied(self, col: int, row: int) -> bool:
        return self.board.is_occupied(col, row)

    def valid_moves_for(self, piece: Piece) -> List[Position]:
        return piece.compute_moves(self.board)

    def pieces_of(self, player: Player) -> List[Piece]:
        return [piece for piece in self.pieces if piece.owner == player]

    def snapshot(self) -> Tuple:
        placement = tuple(sorted((p.col, p.row, p.name, p.owner.name) for p in self.pieces))
        return (placement, self.turn_count, self.current_turn, tuple(self.moves_history))

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def move_piece(self, piece: Piece, destination: Destination) -> MoveResult:
        target = _as_position(destination)
        self._check_move(piece, target)
        if self.board.is_occupied(*target):
            raise IllegalMoveError(f"{format_square(*target)} is occupied; capture it instead.")

        origin = self._relocate(piece, target)
        notation = describe_move(piece, target)
        self.moves_history.append(notation)
        transformed = self._advance_turn()

        self._notify(GameEvent.MOVE)
        return MoveResult(piece, origin, target, notation, transformed=transformed)

    def capture_piece(self, piece: Piece, destination: Destination) -> MoveResult:
        target = _as_position(destination)
        self._check_move(piece, target)
        captured = self.board.get_piece(*target)
        if captured is None:
            raise IllegalMoveError(f"Nothing to capture on {format_square(*target)}.")
        if not piece.is_opponent(captured):
            raise IllegalMoveError(f"Cannot capture own piece on {format_square(*target)}.")

        self.pieces.remove(captured)
        origin = self._relocate(piece, target)
        notation = describe_move(piece, target, capture=True)
        self.moves_history.append(notation)

        if captured.kind is PieceKind.SAU:
            self.game_ended = True
            self.winner = piece.owner.name
            logger.info("{} captured the Sau; {} wins.", piece.name, self.winner)
            self._notify(GameEvent.CAPTURE)
            self._notify(GameEvent.GAME_END)
            return MoveResult(piece, origin, target, notation, captured=captured, game_ended=True)

        transformed = self._advance_turn()
        self._notify(GameEvent.CAPTURE)
        return MoveResult(piece, origin, target, notation, captured=captured, transformed=transformed)

    def switch_tor_xor(self) -> None:
        # Decide from the pre-pass list so freshly swapped pieces are not swapped back.
        replacements: List[Tuple[Piece, Piece]] = []
        for piece in self.pieces:
            kind = transformed_kind(piece.kind)
            if kind is not None:
                replacements.append((piece, create_piece(kind, piece.col, piece.row, piece.owner)))

        for old, new in replacements:
            self.pieces[self.pieces.index(old)] = new
            self.board.set_piece(new.col, new.row, new)

    def restart(self) -> None:
        self._reset()
        self._notify(GameEvent.RESTART)

    def save(self, path: Union[str, Path]) -> Path:
        text = serialize(self.pieces, self.turn_count, self.current_turn, self.moves_history)
        return write_save_file(path, text)

    def load(self, path: Union[str, Path]) -> None:
        loaded = deserialize(read_save_file(path), self.players)
        self.pieces.clear()
        self.board.clear()
        for piece in loaded.pieces:
            if self.board.is_occupied(piece.col, piece.row):
                logger.debug("Skipping {}: {} already occupied.", piece, format_square(*piece.position))
                continue
            self.pieces.append(piece)
            self.board.set_piece(piece.col, piece.row, piece)
        self.turn_count = loaded.turn_count
        self.current_turn = loaded.current_turn
        self.moves_history[:] = loaded.history
        self.game_ended = False
        self.winner = None
        self._notify(GameEvent.LOAD)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _reset(self) -> None:
        self.board = Board()
        self.players: Tuple[Player, Player] = create_players()
        self.pieces: List[Piece] = initialize_pieces(self.players)
        for piece in self.pieces:
            self.board.set_piece(piece.col, piece.row, piece)
        self.current_turn = STARTING_TURN
        self.turn_count = STARTING_TURN_COUNT
        self.game_ended = False
        self.winner: Optional[str] = None
        self.moves_history: List[str] = []

    def _check_move(self, piece: Piece, target: Position) -> None:
        if self.game_ended:
            raise GameOverError("The game has ended.")
        if self.board.get_piece(piece.col, piece.row) is not piece:
            raise IllegalMoveError(f"{piece!r} is not on the board.")
        if piece.owner != self.current_player:
            raise IllegalMoveError(f"It is {self.current_player.name}'s turn.")
        if target not in self.valid_moves_for(piece):
            raise IllegalMoveError(f"{piece.name} cannot reach {format_square(*target)}.")

    def _relocate(self, piece: Piece, target: Position) -> Position:
        origin = piece.position
        self.board.set_piece(*origin, None)
        self.board.set_piece(*target, piece)
        piece.col, piece.row = target
        return origin

    def _advance_turn(self) -> bool:
        self.current_turn = (self.current_turn + 1) % len(self.players)
        if self.current_turn != 0:
            return False
        self.turn_count += 1
        if not transforms_at(self.turn_count):
            return False
        logger.info("Transforming Xor and Tor.")
        self.switch_tor_xor()
        return True

    def __repr__(self) -> str:
        return (
            f"GameState(turn={self.current_player.name}, turn_count={self.turn_count}, "
            f"pieces={len(self.pieces)}, ended={self.game_ended})"
        )


def _as_position(destination: Destination) -> Position:
    if isinstance(destination, Tile):
        return destination.position
    col, row = destination
    return int(col), int(row)


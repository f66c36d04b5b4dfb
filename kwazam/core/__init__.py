"""Core game logic for Kwazam."""

from .board import COLUMNS, ROWS, Board, Position, Tile, is_valid_coordinate
from .pieces import Biz, Piece, PieceKind, Player, Ram, Sau, Tor, Xor, create_piece
from .rules import (
    PLAYER_NAMES,
    TRANSFORM_INTERVAL,
    describe_move,
    format_square,
    initialize_pieces,
    parse_square,
)
from .state import GameEvent, GameOverError, GameState, IllegalMoveError, MoveResult

__all__ = [
    "Board",
    "Tile",
    "Position",
    "COLUMNS",
    "ROWS",
    "is_valid_coordinate",
    "Piece",
    "PieceKind",
    "Player",
    "Ram",
    "Biz",
    "Sau",
    "Tor",
    "Xor",
    "create_piece",
    "PLAYER_NAMES",
    "TRANSFORM_INTERVAL",
    "describe_move",
    "format_square",
    "initialize_pieces",
    "parse_square",
    "GameEvent",
    "GameState",
    "GameOverError",
    "IllegalMoveError",
    "MoveResult",
]

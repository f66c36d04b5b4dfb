from __future__ import annotations

import string
from typing import List, Optional, Sequence, Tuple

from .board import COLUMNS, Position, ROWS, is_valid_coordinate
from .pieces import Piece, PieceKind, Player, create_piece

PLAYER_NAMES: Tuple[str, str] = ("P1", "P2")
STARTING_TURN = 0
STARTING_TURN_COUNT = 1
TRANSFORM_INTERVAL = 2  # full turns between Tor/Xor swaps

BACK_RANK_P1: Tuple[PieceKind, ...] = (
    PieceKind.XOR,
    PieceKind.BIZ,
    PieceKind.SAU,
    PieceKind.BIZ,
    PieceKind.TOR,
)
BACK_RANK_P2: Tuple[PieceKind, ...] = (
    PieceKind.TOR,
    PieceKind.BIZ,
    PieceKind.SAU,
    PieceKind.BIZ,
    PieceKind.XOR,
)

# (back rank row, ram row, back rank) per player index
STARTING_LAYOUT: Tuple[Tuple[int, int, Tuple[PieceKind, ...]], ...] = (
    (ROWS - 1, ROWS - 2, BACK_RANK_P1),
    (0, 1, BACK_RANK_P2),
)

TRANSFORMATIONS = {PieceKind.TOR: PieceKind.XOR, PieceKind.XOR: PieceKind.TOR}


def create_players() -> Tuple[Player, Player]:
    return (Player(PLAYER_NAMES[0], 0), Player(PLAYER_NAMES[1], 1))


def initialize_pieces(players: Sequence[Player]) -> List[Piece]:
    pieces: List[Piece] = []
    for player, (back_row, ram_row, back_rank) in zip(players, STARTING_LAYOUT):
        for col in range(COLUMNS):
            pieces.append(create_piece(PieceKind.RAM, col, ram_row, player))
        for col, kind in enumerate(back_rank):
            pieces.append(create_piece(kind, col, back_row, player))
    return pieces


def transforms_at(turn_count: int) -> bool:
    """Whether the pass runs when the turn counter has just reached ``turn_count``."""
    return turn_count % TRANSFORM_INTERVAL == 1


def transformed_kind(kind: PieceKind) -> Optional[PieceKind]:
    return TRANSFORMATIONS.get(kind)


def column_letter(col: int) -> str:
    return chr(ord("A") + col)


def format_square(col: int, row: int) -> str:
    return f"{column_letter(col)}{row + 1}"


def parse_square(text: str) -> Position:
    """Parse ``"A7"`` style squares into ``(col, row)``."""
    text = text.strip().upper()
    if len(text) < 2 or text[0] not in string.ascii_uppercase or not text[1:].isdigit():
        raise ValueError(f"Not a square: {text!r}")
    col = ord(text[0]) - ord("A")
    row = int(text[1:]) - 1
    if not is_valid_coordinate(col, row):
        raise ValueError(f"Square {text} is off the board.")
    return col, row


def describe_move(piece: Piece, destination: Position, *, capture: bool = False) -> str:
    square = format_square(*destination)
    if capture:
        return f"{piece.name} x {square}"
    return f"{piece.name} {square}"

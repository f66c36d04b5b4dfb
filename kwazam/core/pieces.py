from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Tuple, Type

from .board import Board, Position, ROWS, is_valid_coordinate

Offset = Tuple[int, int]

KNIGHT_OFFSETS: Tuple[Offset, ...] = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
KING_OFFSETS: Tuple[Offset, ...] = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
ORTHOGONAL: Tuple[Offset, ...] = ((1, 0), (0, -1), (-1, 0), (0, 1))
DIAGONAL: Tuple[Offset, ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))


@dataclass(frozen=True)
class Player:
    name: str
    index: int

    def __str__(self) -> str:
        return self.name


class PieceKind(Enum):
    RAM = "Ram"
    BIZ = "Biz"
    SAU = "Sau"
    TOR = "Tor"
    XOR = "Xor"

    @classmethod
    def from_name(cls, name: str) -> "PieceKind":
        return cls(name)


@dataclass(eq=False)
class Piece:
    col: int
    row: int
    owner: Player

    kind: ClassVar[PieceKind]

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def position(self) -> Position:
        return (self.col, self.row)

    def compute_moves(self, board: Board) -> List[Position]:
        raise NotImplementedError

    def is_opponent(self, other: "Piece") -> bool:
        return other.owner != self.owner

    def __repr__(self) -> str:
        return f"{self.name}({self.owner.name}@{self.col},{self.row})"


@dataclass(eq=False, repr=False)
class Ram(Piece):
    """Steps one row forward; turns around on the far edge.

    The destination cell is not checked for occupancy, so nothing blocks a Ram.
    """

    kind: ClassVar[PieceKind] = PieceKind.RAM
    promotion_multiplier: int = field(init=False)

    def __post_init__(self) -> None:
        self.promotion_multiplier = 1 if self.owner.index == 0 else -1

    def compute_moves(self, board: Board) -> List[Position]:
        if self.row == 0 and self.promotion_multiplier > 0:
            self.promotion_multiplier = -1
        if self.row == ROWS - 1 and self.promotion_multiplier < 0:
            self.promotion_multiplier = 1

        col, row = self.col, self.row - self.promotion_multiplier
        if is_valid_coordinate(col, row):
            return [(col, row)]
        return []


@dataclass(eq=False, repr=False)
class Biz(Piece):
    kind: ClassVar[PieceKind] = PieceKind.BIZ

    def compute_moves(self, board: Board) -> List[Position]:
        # Jumps; occupancy of the landing cell is arbitrated when the move executes.
        moves: List[Position] = []
        for dc, dr in KNIGHT_OFFSETS:
            col, row = self.col + dc, self.row + dr
            if is_valid_coordinate(col, row):
                moves.append((col, row))
        return moves


@dataclass(eq=False, repr=False)
class Sau(Piece):
    kind: ClassVar[PieceKind] = PieceKind.SAU

    def compute_moves(self, board: Board) -> List[Position]:
        moves: List[Position] = []
        for dc, dr in KING_OFFSETS:
            col, row = self.col + dc, self.row + dr
            if not is_valid_coordinate(col, row):
                continue
            occupant = board.get_piece(col, row)
            if occupant is None or self.is_opponent(occupant):
                moves.append((col, row))
        return moves


@dataclass(eq=False, repr=False)
class Tor(Piece):
    kind: ClassVar[PieceKind] = PieceKind.TOR

    def compute_moves(self, board: Board) -> List[Position]:
        return _slide(self, board, ORTHOGONAL)


@dataclass(eq=False, repr=False)
class Xor(Piece):
    kind: ClassVar[PieceKind] = PieceKind.XOR

    def compute_moves(self, board: Board) -> List[Position]:
        return _slide(self, board, DIAGONAL)


def _slide(piece: Piece, board: Board, directions: Tuple[Offset, ...]) -> List[Position]:
    moves: List[Position] = []
    for dc, dr in directions:
        col, row = piece.col + dc, piece.row + dr
        while is_valid_coordinate(col, row) and board.get_piece(col, row) is None:
            moves.append((col, row))
            col += dc
            row += dr
        if is_valid_coordinate(col, row):
            blocker = board.get_piece(col, row)
            if blocker is not None and piece.is_opponent(blocker):
                moves.append((col, row))
    return moves


PIECE_TYPES: Dict[PieceKind, Type[Piece]] = {
    PieceKind.RAM: Ram,
    PieceKind.BIZ: Biz,
    PieceKind.SAU: Sau,
    PieceKind.TOR: Tor,
    PieceKind.XOR: Xor,
}


def create_piece(kind: PieceKind, col: int, row: int, owner: Player) -> Piece:
    return PIECE_TYPES[kind](col, row, owner)

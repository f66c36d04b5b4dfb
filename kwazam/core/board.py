from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .pieces import Piece

COLUMNS = 5
ROWS = 8

Position = Tuple[int, int]  # (col, row)


def is_valid_coordinate(col: int, row: int) -> bool:
    return 0 <= col < COLUMNS and 0 <= row < ROWS


@dataclass(eq=False)
class Tile:
    col: int
    row: int
    piece: Optional["Piece"] = None

    @property
    def position(self) -> Position:
        return (self.col, self.row)

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None


class Board:
    """Fixed 5x8 grid of tiles indexed ``[col, row]``."""

    def __init__(self) -> None:
        self._tiles: NDArray[np.object_] = np.empty((COLUMNS, ROWS), dtype=object)
        for col in range(COLUMNS):
            for row in range(ROWS):
                self._tiles[col, row] = Tile(col, row)

    def tile(self, col: int, row: int) -> Tile:
        self._check(col, row)
        return self._tiles[col, row]

    def get_piece(self, col: int, row: int) -> Optional["Piece"]:
        return self.tile(col, row).piece

    def set_piece(self, col: int, row: int, piece: Optional["Piece"]) -> None:
        self.tile(col, row).piece = piece

    def is_occupied(self, col: int, row: int) -> bool:
        return self.tile(col, row).is_occupied

    def clear(self) -> None:
        for tile in self.tiles():
            tile.piece = None

    def tiles(self) -> Iterator[Tile]:
        for tile in self._tiles.flat:
            yield tile

    def occupancy(self) -> NDArray[np.int8]:
        """Row-major owner grid: 0 empty, 1 for P1, 2 for P2."""
        grid = np.zeros((ROWS, COLUMNS), dtype=np.int8)
        for tile in self.tiles():
            if tile.piece is not None:
                grid[tile.row, tile.col] = tile.piece.owner.index + 1
        return grid

    def kinds(self) -> NDArray[np.str_]:
        grid = np.full((ROWS, COLUMNS), "", dtype="<U3")
        for tile in self.tiles():
            if tile.piece is not None:
                grid[tile.row, tile.col] = tile.piece.name
        return grid

    @staticmethod
    def _check(col: int, row: int) -> None:
        if not is_valid_coordinate(col, row):
            raise IndexError(f"Coordinate ({col}, {row}) is outside the {COLUMNS}x{ROWS} board.")

    def __repr__(self) -> str:
        return f"Board(pieces={int(np.count_nonzero(self.occupancy()))})"

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .core import COLUMNS, GameState, Position
from .core.rules import column_letter

SYMBOLS = {"Ram": "R", "Biz": "B", "Sau": "S", "Tor": "T", "Xor": "X"}


def render_board(state: GameState, *, highlight: Optional[Iterable[Position]] = None, flip: bool = False) -> str:
    """ASCII board: upper case for P1, lower case for P2, ``*`` on highlighted cells.

    With ``flip`` the board is drawn from P2's side, as the window view does on P2's turn.
    """
    owners = state.board.occupancy()
    kinds = state.board.kinds()
    marks = np.zeros_like(owners, dtype=bool)
    for col, row in highlight or ():
        marks[row, col] = True

    row_order = range(owners.shape[0] - 1, -1, -1) if flip else range(owners.shape[0])
    col_order = list(range(COLUMNS - 1, -1, -1) if flip else range(COLUMNS))

    lines = ["   " + " ".join(column_letter(col) for col in col_order)]
    for row in row_order:
        cells = []
        for col in col_order:
            owner = int(owners[row, col])
            if owner == 0:
                cells.append("*" if marks[row, col] else ".")
                continue
            symbol = SYMBOLS[str(kinds[row, col])]
            cells.append(symbol if owner == 1 else symbol.lower())
        lines.append(f"{row + 1:>2} " + " ".join(cells))
    return "\n".join(lines)


def render_status(state: GameState, history_length: int = 10) -> str:
    if state.game_ended:
        header = f"Game over: {state.winner} wins."
    else:
        header = f"Turn {state.turn_count}: {state.current_player.name} to move."
    recent = state.moves_history[-history_length:] if history_length > 0 else []
    if not recent:
        return header
    return header + "\nHistory: " + ", ".join(recent)

"""Text save-file format.

::

    Current Board Pieces
    ---------------------
    Ram P1 A 7
    ...

    Turn Count: 1
    Current Turn: 0

    Move History
    ------------
    Ram A6

The format is lossy for Rams: their direction is not written, so a loaded Ram
always heads the way its owner starts. A Ram that turned around at the far
edge faces forward again after a save and load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from ..core.board import is_valid_coordinate
from ..core.pieces import Piece, PieceKind, Player, create_piece
from ..core.rules import column_letter
from .errors import SaveDataError

PIECES_HEADER = "Current Board Pieces"
PIECES_RULE = "---------------------"
TURN_COUNT_PREFIX = "Turn Count:"
CURRENT_TURN_PREFIX = "Current Turn:"
HISTORY_HEADER = "Move History"
HISTORY_RULE = "------------"
PIECE_FIELDS = 4


@dataclass
class LoadedGame:
    pieces: List[Piece] = field(default_factory=list)
    turn_count: int = 1
    current_turn: int = 0
    history: List[str] = field(default_factory=list)


def serialize(pieces: Iterable[Piece], turn_count: int, current_turn: int, history: Iterable[str]) -> str:
    lines = [PIECES_HEADER, PIECES_RULE]
    for piece in pieces:
        lines.append(f"{piece.name} {piece.owner.name} {column_letter(piece.col)} {piece.row + 1}")
    lines.append("")
    lines.append(f"{TURN_COUNT_PREFIX} {turn_count}")
    lines.append(f"{CURRENT_TURN_PREFIX} {current_turn}")
    lines.append("")
    lines.append(HISTORY_HEADER)
    lines.append(HISTORY_RULE)
    lines.extend(history)
    return "\n".join(lines) + "\n"


def deserialize(text: str, players: Sequence[Player]) -> LoadedGame:
    lines = text.splitlines()
    loaded = LoadedGame()
    index = 0

    # Piece section runs until the turn counter line.
    while index < len(lines) and not lines[index].startswith(TURN_COUNT_PREFIX):
        line = lines[index]
        index += 1
        if line in (PIECES_HEADER, PIECES_RULE) or not line.strip():
            continue
        piece = _parse_piece_line(line, players)
        if piece is not None:
            loaded.pieces.append(piece)

    if index >= len(lines):
        raise SaveDataError("Save data has no 'Turn Count:' line.")
    loaded.turn_count = _parse_counter(lines[index], TURN_COUNT_PREFIX)
    index += 1
    if index >= len(lines):
        raise SaveDataError("Save data has no 'Current Turn:' line.")
    loaded.current_turn = _parse_counter(lines[index], CURRENT_TURN_PREFIX)
    if loaded.current_turn not in range(len(players)):
        raise SaveDataError(f"Current turn {loaded.current_turn} does not name a player.")
    index += 1

    while index < len(lines) and lines[index] != HISTORY_RULE:
        index += 1
    loaded.history = [line for line in lines[index + 1 :] if line.strip()]
    return loaded


def _parse_piece_line(line: str, players: Sequence[Player]) -> Optional[Piece]:
    parts = line.split()
    if len(parts) != PIECE_FIELDS:
        logger.debug("Skipping malformed piece line: {!r}", line)
        return None
    name, owner_name, col_text, row_text = parts
    try:
        kind = PieceKind.from_name(name)
    except ValueError:
        logger.debug("Skipping unknown piece kind: {!r}", line)
        return None
    owner = next((player for player in players if player.name == owner_name), None)
    if owner is None:
        logger.debug("Skipping piece with unknown owner: {!r}", line)
        return None
    if len(col_text) != 1 or not row_text.lstrip("-").isdigit():
        logger.debug("Skipping piece with bad square: {!r}", line)
        return None
    col = ord(col_text) - ord("A")
    row = int(row_text) - 1
    if not is_valid_coordinate(col, row):
        logger.debug("Skipping off-board piece: {!r}", line)
        return None
    return create_piece(kind, col, row, owner)


def _parse_counter(line: str, prefix: str) -> int:
    if not line.startswith(prefix):
        raise SaveDataError(f"Expected {prefix!r}, found {line!r}.")
    value = line[len(prefix) :].strip()
    try:
        return int(value)
    except ValueError as exc:
        raise SaveDataError(f"Bad value in {line!r}.") from exc

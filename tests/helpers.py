from kwazam.core import GameState, MoveResult, Piece, PieceKind, Position, create_piece


def fresh_state() -> GameState:
    state = GameState()
    state.pieces.clear()
    state.board.clear()
    return state


def place(state: GameState, kind: PieceKind, col: int, row: int, owner: int) -> Piece:
    piece = create_piece(kind, col, row, state.players[owner])
    state.pieces.append(piece)
    state.board.set_piece(col, row, piece)
    return piece


def play(state: GameState, source: Position, target: Position) -> MoveResult:
    piece = state.get_piece(*source)
    if state.is_occupied(*target):
        return state.capture_piece(piece, target)
    return state.move_piece(piece, target)

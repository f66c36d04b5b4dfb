from kwazam import GameState, render_board, render_status


def test_render_start_position() -> None:
    lines = render_board(GameState()).splitlines()

    assert lines[0] == "   A B C D E"
    assert lines[1] == " 1 t b s b x"
    assert lines[2] == " 2 r r r r r"
    assert lines[3] == " 3 . . . . ."
    assert lines[7] == " 7 R R R R R"
    assert lines[8] == " 8 X B S B T"


def test_render_highlight_and_flip() -> None:
    state = GameState()
    lines = render_board(state, highlight=[(0, 5)]).splitlines()
    assert lines[6] == " 6 * . . . ."

    flipped = render_board(state, flip=True).splitlines()
    assert flipped[0] == "   E D C B A"
    assert flipped[1] == " 8 T B S B X"
    assert flipped[8] == " 1 x b s b t"


def test_render_status() -> None:
    state = GameState()
    assert render_status(state) == "Turn 1: P1 to move."

    state.move_piece(state.get_piece(0, 6), (0, 5))
    assert render_status(state) == "Turn 1: P2 to move.\nHistory: Ram A6"

    state.game_ended = True
    state.winner = "P1"
    assert render_status(state, history_length=0) == "Game over: P1 wins."

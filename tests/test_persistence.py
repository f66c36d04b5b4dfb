import pytest

from kwazam.core import GameEvent, GameState, PieceKind
from kwazam.persistence import SaveDataError, SaveFileError, deserialize, read_save_file, serialize, write_save_file

from tests.helpers import fresh_state, place, play

SAMPLE = """\
Current Board Pieces
---------------------
Sau P1 C 8
Ram P2 A 3
Tor P1 E 8

Turn Count: 4
Current Turn: 1

Move History
------------
Ram A6
Ram A3
"""


def test_serialize_format() -> None:
    state = GameState()
    state.move_piece(state.get_piece(0, 6), (0, 5))

    text = serialize(state.pieces, state.turn_count, state.current_turn, state.moves_history)
    lines = text.splitlines()

    assert lines[0] == "Current Board Pieces"
    assert lines[1] == "---------------------"
    assert lines[2] == "Ram P1 A 6"
    assert lines[3] == "Ram P1 B 7"
    assert lines[22] == ""
    assert lines[23] == "Turn Count: 1"
    assert lines[24] == "Current Turn: 1"
    assert lines[26:] == ["Move History", "------------", "Ram A6"]


def test_deserialize_sample() -> None:
    state = GameState()
    loaded = deserialize(SAMPLE, state.players)

    assert [(p.name, p.owner.name, p.col, p.row) for p in loaded.pieces] == [
        ("Sau", "P1", 2, 7),
        ("Ram", "P2", 0, 2),
        ("Tor", "P1", 4, 7),
    ]
    assert loaded.pieces[0].owner is state.players[0]
    assert loaded.turn_count == 4
    assert loaded.current_turn == 1
    assert loaded.history == ["Ram A6", "Ram A3"]


def test_three_field_piece_line_is_skipped() -> None:
    text = SAMPLE.replace("Ram P2 A 3", "Ram P2 A3")
    loaded = deserialize(text, GameState().players)
    assert [p.name for p in loaded.pieces] == ["Sau", "Tor"]


def test_unknown_kind_and_owner_are_skipped() -> None:
    text = SAMPLE.replace("Ram P2 A 3", "Dragon P2 A 3\nRam P3 B 2\nRam P2 Z 2")
    loaded = deserialize(text, GameState().players)
    assert [p.name for p in loaded.pieces] == ["Sau", "Tor"]


def test_missing_counters_is_an_error() -> None:
    with pytest.raises(SaveDataError):
        deserialize("Current Board Pieces\n---------------------\nSau P1 C 8\n", GameState().players)
    with pytest.raises(SaveDataError):
        deserialize(SAMPLE.replace("Current Turn: 1", "Current Turn: 7"), GameState().players)


def test_save_load_round_trip(tmp_path) -> None:
    state = GameState()
    play(state, (0, 6), (0, 5))
    play(state, (1, 1), (1, 2))
    play(state, (1, 7), (2, 5))

    path = state.save(tmp_path / "game.txt")
    restored = GameState()
    restored.load(path)

    assert restored.snapshot() == state.snapshot()
    for piece in restored.pieces:
        assert restored.get_piece(piece.col, piece.row) is piece


def test_round_trip_after_transformation(tmp_path) -> None:
    state = GameState()
    for source, target in [((0, 6), (0, 5)), ((0, 1), (0, 2)), ((1, 6), (1, 5)), ((1, 1), (1, 2))]:
        play(state, source, target)
    state.save(tmp_path / "transformed.txt")

    restored = GameState()
    restored.load(tmp_path / "transformed.txt")

    assert restored.get_piece(0, 7).kind is PieceKind.TOR
    assert restored.snapshot() == state.snapshot()


def test_save_creates_missing_directories(tmp_path) -> None:
    target = tmp_path / "nested" / "saves" / "slot.txt"
    write_save_file(target, "hello\n")
    assert read_save_file(target) == "hello\n"
    assert [p.name for p in target.parent.iterdir()] == ["slot.txt"]


def test_save_to_unwritable_location_raises(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(SaveFileError):
        GameState().save(blocker / "slot.txt")


def test_failed_load_leaves_state_unchanged(tmp_path) -> None:
    state = GameState()
    play(state, (0, 6), (0, 5))
    before = state.snapshot()

    with pytest.raises(SaveFileError):
        state.load(tmp_path / "missing.txt")
    broken = tmp_path / "broken.txt"
    broken.write_text("Current Board Pieces\n---------------------\nRam P1 A 1\n")
    with pytest.raises(SaveFileError):
        state.load(broken)

    assert state.snapshot() == before


def test_bad_counter_value_is_a_value_error() -> None:
    text = SAMPLE.replace("Turn Count: 4", "Turn Count: four")
    with pytest.raises(ValueError):
        deserialize(text, GameState().players)


def test_missing_file_is_not_a_data_error(tmp_path) -> None:
    with pytest.raises(SaveFileError) as excinfo:
        read_save_file(tmp_path / "missing.txt")
    assert not isinstance(excinfo.value, SaveDataError)


def test_load_notifies_listeners(tmp_path) -> None:
    path = GameState().save(tmp_path / "start.txt")
    state = GameState()
    events = []
    state.add_listener(lambda event, _: events.append(event))

    state.load(path)

    assert events == [GameEvent.LOAD]


def test_duplicate_square_keeps_first_piece(tmp_path) -> None:
    text = GameState().save(tmp_path / "start.txt").read_text()
    assert "Ram P1 B 7\n" in text
    path = tmp_path / "duplicate.txt"
    path.write_text(text.replace("Ram P1 B 7\n", "Ram P1 B 7\nTor P2 B 7\n"))

    state = GameState()
    state.load(path)

    piece = state.get_piece(1, 6)
    assert piece.kind is PieceKind.RAM
    assert piece.owner.name == "P1"
    assert len(state.pieces) == 20


def test_load_clears_finished_game(tmp_path) -> None:
    path = GameState().save(tmp_path / "start.txt")
    state = fresh_state()
    tor = place(state, PieceKind.TOR, 2, 4, 0)
    place(state, PieceKind.SAU, 2, 2, 1)
    state.capture_piece(tor, (2, 2))
    assert state.game_ended and state.winner == "P1"

    state.load(path)

    assert not state.game_ended
    assert state.winner is None
    play(state, (0, 6), (0, 5))
    assert state.moves_history == ["Ram A6"]


def test_turned_ram_faces_forward_after_load(tmp_path) -> None:
    state = fresh_state()
    ram = place(state, PieceKind.RAM, 3, 0, 0)
    ram.compute_moves(state.board)
    state.board.set_piece(3, 0, None)
    ram.row = 1
    state.board.set_piece(3, 1, ram)
    assert ram.compute_moves(state.board) == [(3, 2)]

    path = state.save(tmp_path / "turned.txt")
    restored = GameState()
    restored.load(path)

    loaded = restored.get_piece(3, 1)
    assert loaded.promotion_multiplier == 1
    assert restored.valid_moves_for(loaded) == [(3, 0)]

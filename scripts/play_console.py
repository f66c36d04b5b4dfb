#!/usr/bin/env python3
"""Play Kwazam hot-seat in the console, with save/load/restart commands."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional

from kwazam import GameController, Interaction, KwazamConfig, load_config, render_board, render_status
from kwazam.core import format_square, parse_square
from kwazam.log import configure_logging

COMMANDS = """\
Commands:
  <from> <to>     move or capture, e.g. "A7 A6"
  moves <square>  list the destinations of the piece on <square>
  save <name>     save the game
  load <path>     load a saved game
  restart         start a new game
  history         show the full move history
  help            show the rules
  quit            leave the game
"""


def format_state(controller: GameController, history_length: int) -> str:
    state = controller.state
    board = render_board(state, highlight=controller.selected_moves())
    return board + "\n" + render_status(state, history_length)


def play_move(controller: GameController, source: str, target: str) -> str:
    try:
        from_col, from_row = parse_square(source)
        to_col, to_row = parse_square(target)
    except ValueError as exc:
        return str(exc)

    controller.deselect()
    if controller.interact(from_col, from_row) is not Interaction.SELECTED:
        return f"No {controller.state.current_player.name} piece on {source.upper()}."
    outcome = controller.interact(to_col, to_row)
    if outcome is Interaction.MOVED:
        return "Moved."
    if outcome is Interaction.CAPTURED:
        if controller.state.game_ended:
            return f"Captured the Sau! {controller.state.winner} wins."
        return "Captured piece."
    if outcome is Interaction.INVALID_CAPTURE:
        return "Invalid capture attempt."
    if outcome is Interaction.SELECTED:
        controller.deselect()
        return "Both squares hold your pieces."
    controller.deselect()
    return "Invalid move."


def list_moves(controller: GameController, square: str) -> str:
    try:
        col, row = parse_square(square)
    except ValueError as exc:
        return str(exc)
    piece = controller.state.get_piece(col, row)
    if piece is None:
        return f"{square.upper()} is empty."
    moves = controller.state.valid_moves_for(piece)
    squares = " ".join(format_square(c, r) for c, r in moves) or "none"
    return f"{piece.name} ({piece.owner.name}) on {square.upper()}: {squares}"


def handle_command(controller: GameController, line: str) -> Optional[str]:
    """Run one command line. Returns the reply, or ``None`` to quit."""
    parts = line.split()
    if not parts:
        return ""
    command = parts[0].lower()
    if command in {"q", "quit", "exit"}:
        return None
    if command == "help":
        return controller.help_text() + "\n" + COMMANDS
    if command == "history":
        return "\n".join(controller.state.moves_history) or "No moves yet."
    if command == "restart":
        controller.restart()
        return "Restarted."
    if command == "save" and len(parts) == 2:
        if controller.save(parts[1]):
            return f"Saved to {controller.config.resolve_save_path(parts[1])}."
        return "Save failed."
    if command == "load" and len(parts) == 2:
        return "Loaded." if controller.load(parts[1]) else "Load failed."
    if command == "moves" and len(parts) == 2:
        return list_moves(controller, parts[1])
    if len(parts) == 2:
        if controller.state.game_ended:
            return f"The game is over; {controller.state.winner} won. Restart or load to play again."
        return play_move(controller, parts[0], parts[1])
    return "Unknown command. Type 'help'."


def run_commands(controller: GameController, lines: Iterable[str]) -> List[str]:
    replies: List[str] = []
    for line in lines:
        reply = handle_command(controller, line)
        if reply is None:
            break
        replies.append(reply)
    return replies


def play_interactive(controller: GameController, history_length: int) -> None:
    print(COMMANDS)
    while True:
        print()
        print(format_state(controller, history_length))
        try:
            line = input("> ")
        except EOFError:
            break
        reply = handle_command(controller, line)
        if reply is None:
            print("Thank you for playing!")
            break
        if reply:
            print(reply)


def build_config(args: argparse.Namespace) -> KwazamConfig:
    config = load_config(args.config)
    if args.save_dir is not None:
        config.save_dir = args.save_dir
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Kwazam in the console.")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--load", type=str, default=None, help="Saved game to resume")
    parser.add_argument("--save-dir", type=str, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args(argv)

    config = build_config(args)
    configure_logging(config.log_level, config.log_file)

    controller = GameController(config=config)
    if args.load and not controller.load(args.load):
        sys.exit(1)
    play_interactive(controller, config.show_history)


if __name__ == "__main__":
    main()

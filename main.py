"""Command-line utilities for the Mini Rooks engine."""

from __future__ import annotations

import argparse
import logging

from minirooks.constants import START_POSITION
from minirooks.game import Game
from minirooks.move import MoveOutcome, TargetKind
from minirooks.perft import perft, perft_divide

PLAY_HELP = "moves: 'a1 a2' or 'a1a2' | targets a1 | reset | quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mini Rooks utilities")
    parser.add_argument("--position", default=START_POSITION, help="Position notation")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    perft_parser = subparsers.add_parser("perft", help="Run perft")
    perft_parser.add_argument("depth", type=int, help="Perft depth")
    perft_parser.add_argument("--divide", action="store_true", help="Show per-move split")

    subparsers.add_parser("play", help="Play a hot-seat game in the terminal")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    return parser


def _parse_move(text: str) -> tuple[str, str] | None:
    parts = text.split()
    if len(parts) == 1 and len(parts[0]) == 4:
        return parts[0][:2], parts[0][2:]
    if len(parts) == 2:
        return parts[0], parts[1]
    return None


def play(game: Game, read=input, write=print) -> None:
    write(PLAY_HELP)
    while True:
        write(str(game))
        try:
            line = read("> ").strip().lower()
        except EOFError:
            return

        if line in ("quit", "exit"):
            return
        if line == "reset":
            game.reset()
            continue
        if line.startswith("targets "):
            try:
                targets = game.select_square(line.split(maxsplit=1)[1])
            except ValueError as exc:
                write(str(exc))
                continue
            write(" ".join(f"{sq}{'x' if kind is TargetKind.CAPTURE else ''}" for sq, kind in sorted(targets.items())) or "-")
            continue

        squares = _parse_move(line)
        if squares is None:
            write(PLAY_HELP)
            continue
        try:
            outcome = game.attempt_move(*squares)
        except ValueError as exc:
            write(str(exc))
            continue
        if outcome is MoveOutcome.REJECTED_ILLEGAL:
            write(f"Illegal move: {line}")
        elif outcome is MoveOutcome.APPLIED_WINNING:
            write(str(game))
            return


def run() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level)

    game = Game(args.position)

    if args.command == "perft":
        if args.divide:
            for move, count in perft_divide(game, args.depth).items():
                print(f"{move}: {count}")
        else:
            print(perft(game, args.depth))
        return

    if args.command == "play":
        play(game)
        return

    if args.command == "serve":
        import uvicorn

        uvicorn.run("api.server:app", host=args.host, port=args.port)
        return

    print(game)


if __name__ == "__main__":
    run()

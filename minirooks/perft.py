"""Perft utilities for move generation correctness checks."""

from __future__ import annotations

from .game import Game


def perft(game: Game, depth: int) -> int:
    if depth < 0:
        raise ValueError("Depth must be >= 0")
    if depth == 0:
        return 1

    moves = game.legal_moves()
    if depth == 1:
        return len(moves)

    nodes = 0
    for move in moves:
        child = game.copy()
        child.make_move(move)
        nodes += perft(child, depth - 1)
    return nodes


def perft_divide(game: Game, depth: int) -> dict[str, int]:
    if depth < 1:
        raise ValueError("Depth must be >= 1 for perft divide")

    result: dict[str, int] = {}
    for move in game.legal_moves():
        child = game.copy()
        child.make_move(move)
        result[move.notation()] = perft(child, depth - 1)
    return dict(sorted(result.items()))

"""Legal target computation and move generation."""

from __future__ import annotations

from typing import Callable

from .board import Board
from .constants import PieceKind, Side
from .move import Move, Square, SquareLike, TargetKind
from .piece import Piece

KNIGHT_DELTAS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
ROOK_DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))

LegalTargets = dict[Square, TargetKind]


def _rook_targets(board: Board, square: Square, piece: Piece) -> LegalTargets:
    targets: LegalTargets = {}
    for drow, dcol in ROOK_DIRS:
        target = square.offset(drow, dcol)
        while target is not None:
            occupant = board.piece_at(target)
            if occupant is None:
                targets[target] = TargetKind.MOVE
            else:
                if occupant.side is not piece.side:
                    targets[target] = TargetKind.CAPTURE
                break
            target = target.offset(drow, dcol)
    return targets


def _knight_targets(board: Board, square: Square, piece: Piece) -> LegalTargets:
    targets: LegalTargets = {}
    for drow, dcol in KNIGHT_DELTAS:
        target = square.offset(drow, dcol)
        if target is None:
            continue
        occupant = board.piece_at(target)
        if occupant is None:
            targets[target] = TargetKind.MOVE
        elif occupant.side is not piece.side:
            targets[target] = TargetKind.CAPTURE
    return targets


def _pawn_targets(board: Board, square: Square, piece: Piece) -> LegalTargets:
    targets: LegalTargets = {}
    forward = piece.side.forward

    ahead = square.offset(forward, 0)
    if ahead is not None and board.piece_at(ahead) is None:
        targets[ahead] = TargetKind.MOVE

    for dcol in (-1, 1):
        diagonal = square.offset(forward, dcol)
        if diagonal is None:
            continue
        occupant = board.piece_at(diagonal)
        if occupant is not None and occupant.side is not piece.side:
            targets[diagonal] = TargetKind.CAPTURE
    return targets


TARGET_FUNCTIONS: dict[PieceKind, Callable[[Board, Square, Piece], LegalTargets]] = {
    PieceKind.ROOK: _rook_targets,
    PieceKind.KNIGHT: _knight_targets,
    PieceKind.PAWN: _pawn_targets,
}


def compute_legal_targets(board: Board, square: SquareLike) -> LegalTargets:
    """Destinations reachable by the piece on ``square``, tagged move or capture.

    Works for a piece of either side; callers gate on the side to move.
    An empty square yields an empty mapping.
    """
    sq = Square.parse(square)
    piece = board.piece_at(sq)
    if piece is None:
        return {}
    return TARGET_FUNCTIONS[piece.kind](board, sq, piece)


def promotion_for(piece: Piece, to_square: Square) -> Piece | None:
    if piece.kind is PieceKind.PAWN and to_square.row == piece.side.far_row:
        return Piece(PieceKind.KNIGHT, piece.side)
    return None


def generate_moves(board: Board, side: Side) -> list[Move]:
    moves: list[Move] = []
    for from_sq, piece in board.pieces(side):
        for to_sq in sorted(compute_legal_targets(board, from_sq)):
            captured = board.piece_at(to_sq)
            promotion = None
            if captured is None or not captured.royal:
                promotion = promotion_for(piece, to_sq)
            moves.append(
                Move(
                    from_square=from_sq,
                    to_square=to_sq,
                    piece=piece,
                    captured=captured,
                    promotion=promotion,
                )
            )
    return moves

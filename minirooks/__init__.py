"""6x6 Mini Rooks hot-seat game engine."""

from .board import Board
from .constants import PieceKind, Side
from .game import Game
from .move import Move, MoveOutcome, Square, TargetKind
from .piece import Piece

__all__ = ["Board", "Game", "Move", "MoveOutcome", "Piece", "PieceKind", "Side", "Square", "TargetKind"]

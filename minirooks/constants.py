"""Engine-wide constants and square helpers."""

from __future__ import annotations

from enum import Enum

SIZE = 6


class Side(Enum):
    FIRST = "w"
    SECOND = "b"

    @property
    def display_name(self) -> str:
        return "White" if self is Side.FIRST else "Black"

    @property
    def forward(self) -> int:
        return -1 if self is Side.FIRST else 1

    @property
    def far_row(self) -> int:
        return 0 if self is Side.FIRST else SIZE - 1


class PieceKind(Enum):
    ROOK = "R"
    KNIGHT = "N"
    PAWN = "P"


ROYAL_SYMBOL = "K"

START_POSITION = "k1rn1r/p3p1/6/6/1P3P/R1NR1K w"

FILES = "abcdef"
RANKS = "123456"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def square_name(row: int, col: int) -> str:
    if not in_bounds(row, col):
        raise ValueError(f"Square out of range: ({row}, {col})")
    return f"{FILES[col]}{SIZE - row}"


def square_coords(name: str) -> tuple[int, int]:
    name = name.strip().lower()
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square: {name}")
    return SIZE - int(name[1]), FILES.index(name[0])


def opposite(side: Side) -> Side:
    return Side.SECOND if side is Side.FIRST else Side.FIRST

"""Square, target and move models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .constants import in_bounds, square_coords, square_name
from .piece import Piece


@dataclass(frozen=True, slots=True, order=True)
class Square:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not in_bounds(self.row, self.col):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @classmethod
    def parse(cls, value: SquareLike) -> Square:
        if isinstance(value, Square):
            return value
        if isinstance(value, str):
            return cls(*square_coords(value))
        try:
            row, col = value
            row, col = int(row), int(col)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid square: {value!r}") from exc
        return cls(row, col)

    @property
    def name(self) -> str:
        return square_name(self.row, self.col)

    def offset(self, drow: int, dcol: int) -> Square | None:
        row, col = self.row + drow, self.col + dcol
        if not in_bounds(row, col):
            return None
        return Square(row, col)

    def __str__(self) -> str:
        return self.name


SquareLike = Union[Square, str, tuple[int, int]]


class TargetKind(Enum):
    MOVE = "move"
    CAPTURE = "capture"


class MoveOutcome(Enum):
    APPLIED_NORMAL = "applied_normal"
    APPLIED_WINNING = "applied_winning"
    REJECTED_ILLEGAL = "rejected_illegal"

    @property
    def applied(self) -> bool:
        return self is not MoveOutcome.REJECTED_ILLEGAL


@dataclass(frozen=True, slots=True)
class Move:
    from_square: Square
    to_square: Square
    piece: Piece
    captured: Piece | None = None
    promotion: Piece | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_winning(self) -> bool:
        return self.captured is not None and self.captured.royal

    def notation(self) -> str:
        return f"{self.from_square.name}{self.to_square.name}"

    def __str__(self) -> str:
        return self.notation()

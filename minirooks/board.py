"""6x6 board grid with position notation parsing and formatting."""

from __future__ import annotations

from .constants import SIZE, START_POSITION, Side
from .move import Square, SquareLike
from .piece import Piece

BoardSnapshot = tuple[tuple[Piece | None, ...], ...]


class Board:
    __slots__ = ("grid", "side_to_move")

    def __init__(self, position: str = START_POSITION):
        self.grid: list[list[Piece | None]] = []
        self.side_to_move = Side.FIRST
        self.set_position(position)

    def set_position(self, position: str) -> None:
        fields = position.split()
        if len(fields) != 2:
            raise ValueError(f"Invalid position: {position}")

        placement, side = fields
        ranks = placement.split("/")
        if len(ranks) != SIZE:
            raise ValueError(f"Invalid board placement: {placement}")
        if side not in ("w", "b"):
            raise ValueError(f"Invalid side to move in position: {side}")

        grid: list[list[Piece | None]] = []
        for rank in ranks:
            row: list[Piece | None] = []
            for ch in rank:
                if ch.isdigit():
                    row.extend([None] * int(ch))
                    continue
                row.append(Piece.from_symbol(ch))
            if len(row) != SIZE:
                raise ValueError(f"Invalid rank in position: {rank}")
            grid.append(row)

        royals = {s: 0 for s in Side}
        for row in grid:
            for piece in row:
                if piece is not None and piece.royal:
                    royals[piece.side] += 1
        for s, count in royals.items():
            if count > 1:
                raise ValueError(f"More than one royal rook for {s.display_name}")
        if not any(royals.values()):
            raise ValueError(f"Position has no royal rook: {position}")

        self.grid = grid
        self.side_to_move = Side(side)

    def to_position(self) -> str:
        ranks = []
        for row in self.grid:
            out = []
            empty = 0
            for piece in row:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    out.append(str(empty))
                    empty = 0
                out.append(piece.symbol)
            if empty:
                out.append(str(empty))
            ranks.append("".join(out))
        return f"{'/'.join(ranks)} {self.side_to_move.value}"

    def piece_at(self, square: SquareLike) -> Piece | None:
        sq = Square.parse(square)
        return self.grid[sq.row][sq.col]

    def place(self, square: SquareLike, piece: Piece | None) -> None:
        sq = Square.parse(square)
        self.grid[sq.row][sq.col] = piece

    def remove(self, square: SquareLike) -> Piece | None:
        sq = Square.parse(square)
        piece = self.grid[sq.row][sq.col]
        self.grid[sq.row][sq.col] = None
        return piece

    def royal_square(self, side: Side) -> Square | None:
        for r, row in enumerate(self.grid):
            for c, piece in enumerate(row):
                if piece is not None and piece.royal and piece.side is side:
                    return Square(r, c)
        return None

    def pieces(self, side: Side | None = None):
        for r, row in enumerate(self.grid):
            for c, piece in enumerate(row):
                if piece is None:
                    continue
                if side is None or piece.side is side:
                    yield Square(r, c), piece

    def snapshot(self) -> BoardSnapshot:
        return tuple(tuple(row) for row in self.grid)

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone.grid = [list(row) for row in self.grid]
        clone.side_to_move = self.side_to_move
        return clone

    def __str__(self) -> str:
        rows = []
        for r, row in enumerate(self.grid):
            cells = ["." if piece is None else piece.symbol for piece in row]
            rows.append(f"{SIZE - r} " + " ".join(cells))
        rows.append("  " + " ".join("abcdef"))
        return "\n".join(rows) + f"\nside={self.side_to_move.value}"

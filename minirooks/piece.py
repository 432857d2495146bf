"""Piece value type."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ROYAL_SYMBOL, PieceKind, Side


@dataclass(frozen=True, slots=True)
class Piece:
    kind: PieceKind
    side: Side
    royal: bool = False

    def __post_init__(self) -> None:
        if self.royal and self.kind is not PieceKind.ROOK:
            raise ValueError(f"Only rooks can be royal, got {self.kind.name.lower()}")

    @property
    def symbol(self) -> str:
        letter = ROYAL_SYMBOL if self.royal else self.kind.value
        return letter if self.side is Side.FIRST else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        side = Side.FIRST if symbol.isupper() else Side.SECOND
        letter = symbol.upper()
        if letter == ROYAL_SYMBOL:
            return cls(PieceKind.ROOK, side, royal=True)
        try:
            kind = PieceKind(letter)
        except ValueError as exc:
            raise ValueError(f"Invalid piece symbol: {symbol}") from exc
        return cls(kind, side)

    def __str__(self) -> str:
        return self.symbol

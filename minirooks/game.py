"""Hot-seat game engine: turn state machine, selection and move application.

A ``Game`` owns its board, side to move, selection and result. Illegal
selections and moves are an expected part of play (misclicks), so they are
reported through return values and never raised.
"""

from __future__ import annotations

import logging

from .board import Board, BoardSnapshot
from .constants import START_POSITION, Side, opposite
from .move import Move, MoveOutcome, Square, SquareLike
from .movegen import LegalTargets, compute_legal_targets, generate_moves, promotion_for

logger = logging.getLogger(__name__)


class Game:
    __slots__ = ("_board", "_winner", "_selected", "_legal_targets")

    def __init__(self, position: str = START_POSITION):
        self._board = Board(position)
        self._winner: Side | None = None
        self._selected: Square | None = None
        self._legal_targets: LegalTargets = {}
        self._sync_result()

    def reset(self) -> None:
        self.load(START_POSITION)

    def load(self, position: str) -> None:
        self._board = Board(position)
        self._clear_selection()
        self._winner = None
        self._sync_result()

    def _sync_result(self) -> None:
        # A position missing one royal rook is a finished game.
        for side in Side:
            if self._board.royal_square(side) is None:
                self._winner = opposite(side)

    @property
    def board(self) -> BoardSnapshot:
        return self._board.snapshot()

    @property
    def turn(self) -> Side:
        return self._board.side_to_move

    @property
    def game_over(self) -> bool:
        return self._winner is not None

    @property
    def winner(self) -> Side | None:
        return self._winner

    @property
    def result_message(self) -> str | None:
        if self._winner is None:
            return None
        return f"{self._winner.display_name} wins! Captured the Royal Rook"

    @property
    def status_message(self) -> str:
        if self._winner is not None:
            return self.result_message
        return f"{self.turn.display_name} to move"

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def legal_targets(self) -> LegalTargets:
        return dict(self._legal_targets)

    def position(self) -> str:
        return self._board.to_position()

    def legal_targets_for(self, square: SquareLike) -> LegalTargets:
        return compute_legal_targets(self._board, square)

    def legal_moves(self) -> list[Move]:
        if self.game_over:
            return []
        return generate_moves(self._board, self.turn)

    def select_square(self, square: SquareLike) -> LegalTargets:
        sq = Square.parse(square)
        if self.game_over:
            self._clear_selection()
            return {}

        piece = self._board.piece_at(sq)
        if piece is None:
            self._clear_selection()
            return {}
        if piece.side is not self.turn:
            logger.debug("ignoring selection of %s: not %s's piece", sq, self.turn.display_name)
            return {}

        self._selected = sq
        self._legal_targets = compute_legal_targets(self._board, sq)
        return dict(self._legal_targets)

    def click(self, square: SquareLike) -> MoveOutcome | None:
        """Single-click input: move to a highlighted target, otherwise (re)select."""
        if self.game_over:
            return None
        sq = Square.parse(square)
        if self._selected is not None and sq in self._legal_targets:
            return self.attempt_move(self._selected, sq)
        self.select_square(sq)
        return None

    def attempt_move(self, from_square: SquareLike, to_square: SquareLike) -> MoveOutcome:
        from_sq = Square.parse(from_square)
        to_sq = Square.parse(to_square)

        if self.game_over:
            logger.debug("rejected %s%s: game is over", from_sq, to_sq)
            return MoveOutcome.REJECTED_ILLEGAL

        moving = self._board.piece_at(from_sq)
        if moving is None or moving.side is not self.turn:
            logger.debug("rejected %s%s: no %s piece on %s", from_sq, to_sq, self.turn.display_name, from_sq)
            return MoveOutcome.REJECTED_ILLEGAL
        if to_sq not in compute_legal_targets(self._board, from_sq):
            logger.debug("rejected %s%s: target not legal", from_sq, to_sq)
            return MoveOutcome.REJECTED_ILLEGAL

        captured = self._board.piece_at(to_sq)
        self._board.remove(from_sq)
        self._board.place(to_sq, moving)
        self._clear_selection()

        if captured is not None and captured.royal:
            self._winner = self.turn
            logger.info("%s%s captured the royal rook: %s", from_sq, to_sq, self.result_message)
            return MoveOutcome.APPLIED_WINNING

        promotion = promotion_for(moving, to_sq)
        if promotion is not None:
            self._board.place(to_sq, promotion)

        logger.debug("%s played %s%s", self.turn.display_name, from_sq, to_sq)
        self._board.side_to_move = opposite(self.turn)
        return MoveOutcome.APPLIED_NORMAL

    def make_move(self, move: Move) -> MoveOutcome:
        return self.attempt_move(move.from_square, move.to_square)

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal_targets = {}

    def copy(self) -> Game:
        clone = Game.__new__(Game)
        clone._board = self._board.copy()
        clone._winner = self._winner
        clone._selected = self._selected
        clone._legal_targets = dict(self._legal_targets)
        return clone

    def __str__(self) -> str:
        return f"{self._board}\n{self.status_message}"

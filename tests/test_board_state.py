import pytest

from minirooks.board import Board
from minirooks.constants import START_POSITION, PieceKind, Side
from minirooks.move import Square
from minirooks.piece import Piece


def test_start_position_layout() -> None:
    board = Board()

    expected = {
        (5, 5): Piece(PieceKind.ROOK, Side.FIRST, royal=True),
        (5, 0): Piece(PieceKind.ROOK, Side.FIRST),
        (5, 2): Piece(PieceKind.KNIGHT, Side.FIRST),
        (5, 3): Piece(PieceKind.ROOK, Side.FIRST),
        (4, 1): Piece(PieceKind.PAWN, Side.FIRST),
        (4, 5): Piece(PieceKind.PAWN, Side.FIRST),
        (0, 0): Piece(PieceKind.ROOK, Side.SECOND, royal=True),
        (0, 2): Piece(PieceKind.ROOK, Side.SECOND),
        (0, 3): Piece(PieceKind.KNIGHT, Side.SECOND),
        (0, 5): Piece(PieceKind.ROOK, Side.SECOND),
        (1, 0): Piece(PieceKind.PAWN, Side.SECOND),
        (1, 4): Piece(PieceKind.PAWN, Side.SECOND),
    }

    snapshot = board.snapshot()
    assert len(snapshot) == 6
    assert all(len(row) == 6 for row in snapshot)
    for r in range(6):
        for c in range(6):
            assert snapshot[r][c] == expected.get((r, c))
    assert board.side_to_move is Side.FIRST


def test_position_roundtrip() -> None:
    assert Board().to_position() == START_POSITION

    position = "k5/2P3/6/1n4/6/R4K b"
    assert Board(position).to_position() == position


def test_square_names() -> None:
    assert Square(5, 0).name == "a1"
    assert Square(0, 5).name == "f6"
    assert Square.parse("c2") == Square(4, 2)
    assert Square.parse((3, 4)) == Square(3, 4)


@pytest.mark.parametrize("coords", [(-1, 0), (0, 6), (6, 6)])
def test_square_out_of_range_rejected(coords: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        Square(*coords)


@pytest.mark.parametrize("name", ["g1", "a7", "a0", "", "a10"])
def test_invalid_square_name_rejected(name: str) -> None:
    with pytest.raises(ValueError):
        Square.parse(name)


@pytest.mark.parametrize(
    "position",
    [
        "k5/6/6/6/6 w",
        "k5/6/6/6/6/5K",
        "k5/6/6/6/6/5K x",
        "k5/6/6/6/6/4K w",
        "k5/6/6/6/6/5Q w",
        "k4k/6/6/6/6/5K w",
        "r5/6/6/6/6/5R w",
    ],
)
def test_malformed_positions_rejected(position: str) -> None:
    with pytest.raises(ValueError):
        Board(position)


def test_failed_parse_leaves_board_untouched() -> None:
    board = Board()
    with pytest.raises(ValueError):
        board.set_position("k4k/6/6/6/6/5K w")
    assert board.to_position() == START_POSITION


def test_only_rooks_can_be_royal() -> None:
    with pytest.raises(ValueError):
        Piece(PieceKind.KNIGHT, Side.FIRST, royal=True)


def test_copy_is_independent() -> None:
    board = Board()
    clone = board.copy()
    clone.remove("a1")

    assert board.piece_at("a1") == Piece(PieceKind.ROOK, Side.FIRST)
    assert clone.piece_at("a1") is None


@pytest.mark.parametrize("value", [None, 5, (1,), (1, 2, 3), ("x", 1)])
def test_non_square_values_rejected(value: object) -> None:
    with pytest.raises(ValueError):
        Square.parse(value)

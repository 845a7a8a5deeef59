import random

import pytest

from chesslab.board import ChessBoard
from chesslab.pieces import (
    Bishop,
    King,
    Knight,
    Move,
    Pawn,
    PieceType,
    Queen,
    Rook,
    make_piece,
    piece_from_char,
    random_element,
    random_int,
)

EMPTY_ROW = "........"


def _text(*rows):
    return "\n".join(list(rows) + [EMPTY_ROW] * (8 - len(rows)))


def test_board_a_queen():
    board = ChessBoard.from_text(_text("Q..n...r", EMPTY_ROW, "n.r....."))
    queen = board.get_piece(0, 0)
    assert queen.valid_move(2, 2) == 2
    assert queen.valid_move(1, 1) == 1
    assert queen.valid_move(7, 0) == 0
    assert queen.capturing_move(2, 2) is True
    assert queen.capturing_move(1, 1) is False
    assert queen.capturing_move(7, 0) is False
    assert len(board.capturing_moves(True)) == 3
    assert len(board.capturing_moves(False)) == 0


def test_board_b_king():
    board = ChessBoard.from_text(_text("Kb......", "nn......"))
    king = board.get_piece(0, 0)
    assert king.valid_move(1, 1) == 2
    assert king.valid_move(2, 1) == 0
    assert king.capturing_move(1, 1) is True
    assert king.capturing_move(2, 1) is False
    assert len(board.capturing_moves(True)) == 3
    assert len(board.capturing_moves(False)) == 0


def test_board_c_rook():
    board = ChessBoard.from_text(_text("R..n....", "bn......"))
    rook = board.get_piece(0, 0)
    assert rook.valid_move(0, 1) == 2
    assert rook.valid_move(1, 0) == 1
    assert rook.valid_move(4, 0) == 0
    assert rook.capturing_move(0, 1) is True
    assert rook.capturing_move(1, 0) is False
    assert rook.capturing_move(4, 0) is False
    assert len(board.capturing_moves(True)) == 2
    assert len(board.capturing_moves(False)) == 0


@pytest.mark.parametrize(
    "rows, white, black",
    [
        (["B..n....", "bn......"], 1, 0),
        (["N..n....", "bnp.....", ".p......"], 2, 0),
        (
            [".....Q..", "...q....", "......Q.", "q.......",
             ".......Q", ".q......", "....Q...", "..q....."],
            0,
            0,
        ),
        (
            ["rnbqkbnr", "pppppppp", EMPTY_ROW, EMPTY_ROW,
             EMPTY_ROW, EMPTY_ROW, "PPPPPPPP", "RNBQKBNR"],
            0,
            0,
        ),
        (
            ["rnbqkbnr", "pppppppp", EMPTY_ROW, EMPTY_ROW,
             ".....P..", EMPTY_ROW, "PPPPP.PP", "RNBQKBNR"],
            0,
            0,
        ),
        (
            ["rnbqkbnr", "p.pppppp", EMPTY_ROW, ".p......",
             "....P...", EMPTY_ROW, "PPPP.PPP", "RNBQKBNR"],
            1,
            0,
        ),
    ],
)
def test_capturing_move_counts(rows, white, black):
    board = ChessBoard.from_text(_text(*rows))
    assert len(board.capturing_moves(True)) == white
    assert len(board.capturing_moves(False)) == black


@pytest.mark.parametrize(
    "char, cls, is_white",
    [
        ("K", King, True), ("k", King, False),
        ("Q", Queen, True), ("q", Queen, False),
        ("B", Bishop, True), ("b", Bishop, False),
        ("N", Knight, True), ("n", Knight, False),
        ("R", Rook, True), ("r", Rook, False),
        ("P", Pawn, True), ("p", Pawn, False),
    ],
)
def test_piece_from_char(char, cls, is_white):
    board = ChessBoard.from_text(_text())
    piece = piece_from_char(char, 2, 5, board)
    assert type(piece) is cls
    assert piece.is_white is is_white
    assert (piece.x, piece.y) == (2, 5)
    assert piece.letter() == char


@pytest.mark.parametrize("char", [".", " ", "x", "1"])
def test_piece_from_char_rejects_other_characters(char):
    assert piece_from_char(char, 0, 0, ChessBoard.from_text(_text())) is None


def test_symbols():
    board = ChessBoard.from_text(_text())
    assert King(0, 0, True, board).symbol() == "♔"
    assert King(0, 0, False, board).symbol() == "♚"
    assert Queen(0, 0, True, board).symbol() == "♕"
    assert Pawn(0, 0, False, board).symbol() == "♟"


@pytest.mark.parametrize("kind", list(PieceType))
def test_make_piece_kind(kind):
    piece = make_piece(kind, 1, 2, False, ChessBoard.from_text(_text()))
    assert piece.kind == kind
    assert piece.is_white is False
    assert (piece.x, piece.y) == (1, 2)


def test_make_piece_unknown_kind():
    with pytest.raises(ValueError):
        make_piece(9, 0, 0, True, ChessBoard.from_text(_text()))


def test_moves_carry_origin_and_piece():
    board = ChessBoard.from_text(_text("Q..n...r", EMPTY_ROW, "n.r....."))
    queen = board.get_piece(0, 0)
    moves = queen.possible_moves()
    assert moves == queen.non_capturing_moves() + queen.capturing_moves()
    assert all(m.piece is queen and (m.x_from, m.y_from) == (0, 0) for m in moves)
    targets = {(m.x_to, m.y_to) for m in queen.capturing_moves()}
    assert targets == {(3, 0), (0, 2), (2, 2)}
    assert Move(0, 0, 3, 0, queen) in queen.capturing_moves()


def test_capturing_and_non_capturing_partition_valid_moves():
    board = ChessBoard.from_text(_text(
        "rnbqkbnr", "p.pppppp", EMPTY_ROW, ".p......",
        "....P...", EMPTY_ROW, "PPPP.PPP", "RNBQKBNR",
    ))
    pieces = [
        board.get_piece(x, y)
        for x in range(8)
        for y in range(8)
        if board.get_piece(x, y) is not None
    ]
    assert len(pieces) == 32
    for piece in pieces:
        captures = {(m.x_to, m.y_to) for m in piece.capturing_moves()}
        quiet = {(m.x_to, m.y_to) for m in piece.non_capturing_moves()}
        valid = {
            (x, y) for x in range(8) for y in range(8) if piece.valid_move(x, y)
        }
        assert captures.isdisjoint(quiet)
        assert captures | quiet == valid


def test_white_pawn_steps():
    board = ChessBoard.from_text(_text(EMPTY_ROW, "P......."))
    pawn = board.get_piece(0, 1)
    assert pawn.valid_move(0, 2) == 1
    assert pawn.valid_move(0, 3) == 1
    assert pawn.valid_move(0, 4) == 0
    assert pawn.valid_move(0, 0) == 0
    assert pawn.valid_move(1, 2) == 0


def test_white_pawn_double_step_blocked():
    board = ChessBoard.from_text(_text(EMPTY_ROW, "P.......", "n......."))
    pawn = board.get_piece(0, 1)
    assert pawn.valid_move(0, 2) == 0
    assert pawn.valid_move(0, 3) == 0


def test_black_pawn_moves_towards_row_zero():
    board = ChessBoard.from_text(
        _text(EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, "..N.....", ".p......")
    )
    pawn = board.get_piece(1, 4)
    assert pawn.valid_move(1, 3) == 1
    assert pawn.valid_move(1, 5) == 0
    assert pawn.valid_move(2, 3) == 2
    assert pawn.capturing_move(2, 3) is True


def test_knight_from_corner():
    board = ChessBoard.from_text(_text())
    knight = Knight(0, 0, True, board)
    assert {(m.x_to, m.y_to) for m in knight.non_capturing_moves()} == {(1, 2), (2, 1)}


def test_queen_reaches_what_bishop_or_rook_reaches():
    board = ChessBoard.from_text(
        _text(EMPTY_ROW, ".n...P..", EMPTY_ROW, "...Q..r.", EMPTY_ROW, ".P...b..")
    )
    queen = board.get_piece(3, 3)
    bishop = Bishop(3, 3, True, board)
    rook = Rook(3, 3, True, board)
    for x in range(8):
        for y in range(8):
            assert queen.valid_move(x, y) == max(
                bishop.valid_move(x, y), rook.valid_move(x, y)
            )


def test_random_int_bounds_and_seed():
    rng = random.Random(7)
    draws = [random_int(0, 4, rng) for _ in range(200)]
    assert set(draws) <= set(range(5))
    assert random_int(3, 3) == 3
    first = [random_int(0, 100, random.Random(5)) for _ in range(3)]
    second = [random_int(0, 100, random.Random(5)) for _ in range(3)]
    assert first == second


def test_random_element():
    items = ["a", "b", "c"]
    rng = random.Random(1)
    picks = {random_element(items, rng) for _ in range(100)}
    assert picks <= set(items)
    assert random_element(["only"]) == "only"


def test_random_element_empty():
    with pytest.raises(IndexError):
        random_element([], random.Random(0))
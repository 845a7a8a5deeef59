"""Chess pieces, the moves they may make, and small random helpers."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Protocol, TypeVar

BOARD_SIZE = 8

# Results of Piece.valid_move.
_UNREACHABLE = 0
_EMPTY = 1
_CAPTURE = 2

_T = TypeVar("_T")


class PieceType(IntEnum):
    KING = 0
    QUEEN = 1
    BISHOP = 2
    KNIGHT = 3
    ROOK = 4
    PAWN = 5


class _BoardLike(Protocol):
    def get_piece(self, x: int, y: int) -> Piece | None: ...


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another."""

    x_from: int
    y_from: int
    x_to: int
    y_to: int
    piece: Piece


class Piece(ABC):
    """A piece standing on a board at (x, y)."""

    kind: PieceType
    _symbols: tuple[str, str]
    _letter: str

    def __init__(self, x: int, y: int, is_white: bool, board: _BoardLike) -> None:
        self.x = x
        self.y = y
        self.is_white = is_white
        self.board = board

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, is_white={self.is_white})"

    def symbol(self) -> str:
        """The piece's chess glyph."""
        return self._symbols[0] if self.is_white else self._symbols[1]

    def letter(self) -> str:
        """The piece's letter: upper case for white, lower case for black."""
        return self._letter.upper() if self.is_white else self._letter.lower()

    @abstractmethod
    def valid_move(self, x_to: int, y_to: int) -> int:
        """0 if the square is unreachable, 1 if reachable and empty, 2 if it captures."""

    def capturing_move(self, x_to: int, y_to: int) -> bool:
        """Whether moving to (x_to, y_to) is valid and takes an opponent's piece."""
        if not self.valid_move(x_to, y_to):
            return False
        target = self.board.get_piece(x_to, y_to)
        return target is not None and target.is_white != self.is_white

    def non_capturing_move(self, x_to: int, y_to: int) -> bool:
        return not self.capturing_move(x_to, y_to)

    def _moves(self, capturing: bool) -> list[Move]:
        return [
            Move(self.x, self.y, x, y, self)
            for x in range(BOARD_SIZE)
            for y in range(BOARD_SIZE)
            if self.valid_move(x, y) and self.capturing_move(x, y) == capturing
        ]

    def capturing_moves(self) -> list[Move]:
        return self._moves(capturing=True)

    def non_capturing_moves(self) -> list[Move]:
        return self._moves(capturing=False)

    def possible_moves(self) -> list[Move]:
        return self.non_capturing_moves() + self.capturing_moves()


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _landing(piece: Piece, target: Piece | None) -> int:
    return _CAPTURE if target is not None else _EMPTY


def _diagonal_move(piece: Piece, x_to: int, y_to: int) -> int:
    dx = abs(piece.x - x_to)
    dy = abs(piece.y - y_to)
    if dx == 0 or dy == 0 or dx != dy:
        return _UNREACHABLE
    target = piece.board.get_piece(x_to, y_to)
    if target is not None and target.is_white == piece.is_white:
        return _UNREACHABLE
    step_x = _sign(x_to - piece.x)
    step_y = _sign(y_to - piece.y)
    if any(
        piece.board.get_piece(piece.x + i * step_x, piece.y + i * step_y) is not None
        for i in range(1, dx)
    ):
        return _UNREACHABLE
    return _landing(piece, target)


def _straight_move(piece: Piece, x_to: int, y_to: int) -> int:
    if piece.x != x_to and piece.y != y_to:
        return _UNREACHABLE
    if piece.x == x_to and piece.y == y_to:
        return _UNREACHABLE
    target = piece.board.get_piece(x_to, y_to)
    if target is not None and target.is_white == piece.is_white:
        return _UNREACHABLE
    if piece.x == x_to:
        step = _sign(y_to - piece.y)
        path = ((x_to, y) for y in range(piece.y + step, y_to, step))
    else:
        step = _sign(x_to - piece.x)
        path = ((x, y_to) for x in range(piece.x + step, x_to, step))
    if any(piece.board.get_piece(x, y) is not None for x, y in path):
        return _UNREACHABLE
    return _landing(piece, target)


class King(Piece):
    kind = PieceType.KING
    _symbols = ("♔", "♚")
    _letter = "K"

    def valid_move(self, x_to: int, y_to: int) -> int:
        dx = abs(self.x - x_to)
        dy = abs(self.y - y_to)
        if not (dx + dy == 1 or dx * dy == 1):
            return _UNREACHABLE
        target = self.board.get_piece(x_to, y_to)
        if target is not None and target.is_white == self.is_white:
            return _UNREACHABLE
        return _landing(self, target)


class Knight(Piece):
    kind = PieceType.KNIGHT
    _symbols = ("♘", "♞")
    _letter = "N"

    def valid_move(self, x_to: int, y_to: int) -> int:
        dx = abs(self.x - x_to)
        dy = abs(self.y - y_to)
        if dx < 3 and dy < 3 and dx + dy == 3:
            target = self.board.get_piece(x_to, y_to)
            if target is None:
                return _EMPTY
            if target.is_white != self.is_white:
                return _CAPTURE
        return _UNREACHABLE


class Pawn(Piece):
    """A pawn; white advances towards higher y, black towards lower y."""

    kind = PieceType.PAWN
    _symbols = ("♙", "♟")
    _letter = "P"

    def valid_move(self, x_to: int, y_to: int) -> int:
        target = self.board.get_piece(x_to, y_to)
        forward = 1 if self.is_white else -1
        dy = y_to - self.y
        if self.x == x_to:
            if target is not None:
                return _UNREACHABLE
            if dy * forward < 0:
                return _UNREACHABLE
            start_row = 1 if self.is_white else 6
            # The double step requires the square at y_to - 1 to be clear.
            if (
                self.y == start_row
                and dy == 2 * forward
                and self.board.get_piece(x_to, y_to - 1) is None
            ):
                return _EMPTY
            if dy == forward:
                return _EMPTY
        elif abs(self.x - x_to) == 1 and dy == forward:
            if target is not None and target.is_white != self.is_white:
                return _CAPTURE
        return _UNREACHABLE


class Bishop(Piece):
    kind = PieceType.BISHOP
    _symbols = ("♗", "♝")
    _letter = "B"

    def valid_move(self, x_to: int, y_to: int) -> int:
        return _diagonal_move(self, x_to, y_to)


class Rook(Piece):
    kind = PieceType.ROOK
    _symbols = ("♖", "♜")
    _letter = "R"

    def valid_move(self, x_to: int, y_to: int) -> int:
        return _straight_move(self, x_to, y_to)


class Queen(Piece):
    kind = PieceType.QUEEN
    _symbols = ("♕", "♛")
    _letter = "Q"

    def valid_move(self, x_to: int, y_to: int) -> int:
        return max(
            _diagonal_move(self, x_to, y_to), _straight_move(self, x_to, y_to)
        )


_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.KING: King,
    PieceType.QUEEN: Queen,
    PieceType.BISHOP: Bishop,
    PieceType.KNIGHT: Knight,
    PieceType.ROOK: Rook,
    PieceType.PAWN: Pawn,
}

_BY_LETTER: dict[str, type[Piece]] = {cls._letter: cls for cls in _CLASSES.values()}


def make_piece(
    kind: PieceType | int, x: int, y: int, is_white: bool, board: _BoardLike
) -> Piece:
    """Create a piece of the given kind; raises ValueError for an unknown kind."""
    return _CLASSES[PieceType(kind)](x, y, is_white, board)


def piece_from_char(char: str, x: int, y: int, board: _BoardLike) -> Piece | None:
    """Create the piece a board letter stands for, or None for anything else.

    Upper-case letters are white pieces, lower-case letters black ones.
    """
    if len(char) != 1 or not char.isalpha():
        return None
    cls = _BY_LETTER.get(char.upper())
    if cls is None:
        return None
    return cls(x, y, char.isupper(), board)


def _source(rng: random.Random | None) -> Any:
    return random if rng is None else rng


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """A uniformly chosen integer from low to high inclusive."""
    return _source(rng).randint(low, high)


def random_element(items: Sequence[_T], rng: random.Random | None = None) -> _T:
    """A uniformly chosen element of a non-empty sequence."""
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return _source(rng).choice(items)
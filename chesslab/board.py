"""An 8 x 8 chess board with move generation and two simple computer players."""

from __future__ import annotations

import random
from collections.abc import Iterator

from chesslab.matrix import Matrix
from chesslab.pieces import (
    BOARD_SIZE,
    Move,
    Piece,
    PieceType,
    Queen,
    make_piece,
    piece_from_char,
    random_element,
    random_int,
)

_SQUARES = BOARD_SIZE * BOARD_SIZE
_BORDER = "  " + "+---" * BOARD_SIZE + "+\n"


class BoardFormatError(ValueError):
    """Raised when a board description does not hold exactly 64 squares."""


class ChessBoard:
    """A board of pieces addressed by (x, y), with x the file and y the rank.

    A board is read from text one square per character, rank by rank;
    newlines are ignored. Upper-case letters are white pieces, lower-case
    letters black ones, and any other character is an empty square.
    """

    def __init__(self) -> None:
        self._squares = self._empty_squares()
        self._white_to_move = True

    @staticmethod
    def _empty_squares() -> Matrix:
        squares = Matrix(BOARD_SIZE, BOARD_SIZE)
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                squares[y, x] = None
        return squares

    @classmethod
    def from_text(cls, text: str) -> ChessBoard:
        board = cls()
        board.load(text)
        return board

    def load(self, text: str) -> None:
        """Replace the position with the one described by ``text``; white moves first."""
        cells = [char for char in text if char != "\n"]
        if len(cells) != _SQUARES:
            raise BoardFormatError("Illegal size of input stream!")
        squares = self._empty_squares()
        for index, char in enumerate(cells):
            x, y = index % BOARD_SIZE, index // BOARD_SIZE
            squares[y, x] = piece_from_char(char, x, y, self)
        self._squares = squares
        self._white_to_move = True

    def render(self) -> str:
        """The board drawn with chess glyphs, files numbered across the top."""
        parts = ["\n    ", "".join(f"{file}   " for file in range(BOARD_SIZE)), "\n"]
        for rank in range(BOARD_SIZE):
            parts.append(_BORDER)
            parts.append(f"{rank} ")
            for file in range(BOARD_SIZE):
                piece = self._squares[rank, file]
                parts.append(f"| {piece.symbol() if piece is not None else ' '} ")
            parts.append("|\n")
        parts.append(_BORDER + "\n")
        return "".join(parts)

    # turn handling

    def turn(self) -> bool:
        """True when it is white's turn to move."""
        return self._white_to_move

    def switch_turn(self) -> None:
        self._white_to_move = not self._white_to_move

    # squares and moves

    def get_piece(self, x: int, y: int) -> Piece | None:
        """The piece on (x, y), or None; raises IndexError off the board."""
        return self._squares[y, x]

    def move_piece(self, move: Move) -> None:
        piece = move.piece
        piece.x, piece.y = move.x_to, move.y_to
        self._squares[move.y_to, move.x_to] = piece
        self._squares[move.y_from, move.x_from] = None

    def rewind_move(self, move: Move, removed: Piece | None) -> None:
        """Undo ``move``, putting back the piece it removed (if any)."""
        piece = move.piece
        piece.x, piece.y = move.x_from, move.y_from
        self._squares[move.y_from, move.x_from] = piece
        self._squares[move.y_to, move.x_to] = removed

    def create_piece(
        self, x: int, y: int, is_white: bool, kind: PieceType | int
    ) -> Piece:
        """Create a promotion piece on this board.

        A king cannot be created: asking for one yields a queen. Pawns are
        not promotion pieces and raise ValueError.
        """
        kind = PieceType(kind)
        if kind is PieceType.PAWN:
            raise ValueError("a pawn cannot be created as a promotion piece")
        if kind is PieceType.KING:
            return Queen(x, y, is_white, self)
        return make_piece(kind, x, y, is_white, self)

    def _pieces(self, is_white: bool) -> Iterator[Piece]:
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                piece = self._squares[y, x]
                if piece is not None and piece.is_white == is_white:
                    yield piece

    def capturing_moves(self, is_white: bool) -> list[Move]:
        return [move for piece in self._pieces(is_white) for move in piece.capturing_moves()]

    def non_capturing_moves(self, is_white: bool) -> list[Move]:
        return [
            move for piece in self._pieces(is_white) for move in piece.non_capturing_moves()
        ]

    def possible_moves(self, is_white: bool) -> list[Move]:
        return self.non_capturing_moves(is_white) + self.capturing_moves(is_white)

    def find_king(self, is_white: bool) -> Piece | None:
        return next(
            (piece for piece in self._pieces(is_white) if piece.kind is PieceType.KING),
            None,
        )

    def king_in_check(self, is_white: bool) -> bool:
        king = self.find_king(is_white)
        if king is None:
            return False
        return any(
            piece.valid_move(king.x, king.y) for piece in self._pieces(not is_white)
        )

    def any_valid_move(self, is_white: bool) -> bool:
        return bool(self.possible_moves(is_white))

    # computer players

    @staticmethod
    def _is_promotion(move: Move) -> bool:
        piece = move.piece
        last_rank = BOARD_SIZE - 1 if piece.is_white else 0
        return piece.kind is PieceType.PAWN and move.y_to == last_rank

    def _promote(self, move: Move, kind: PieceType | int) -> None:
        self._squares[move.y_to, move.x_to] = self.create_piece(
            move.x_to, move.y_to, move.piece.is_white, kind
        )

    def ai1_make_move(self, is_white: bool, rng: random.Random | None = None) -> None:
        """Make a random move, capturing whenever a capture is possible."""
        non_capturing = self.non_capturing_moves(is_white)
        capturing = self.capturing_moves(is_white)
        move = random_element(capturing or non_capturing, rng)
        self.move_piece(move)
        if self._is_promotion(move):
            self._promote(move, random_int(0, 4, rng))
        self.switch_turn()

    def _forcing_move(self, moves: list[Move], is_white: bool) -> Move | None:
        """Play the first move that leaves the opponent a capture and return it."""
        for move in moves:
            removed = self.get_piece(move.x_to, move.y_to)
            self.move_piece(move)
            if self.capturing_moves(not is_white):
                return move
            self.rewind_move(move, removed)
        return None

    def ai2_make_move(self, is_white: bool, rng: random.Random | None = None) -> None:
        """Prefer a move, capturing if possible, that forces the opponent to capture."""
        non_capturing = self.non_capturing_moves(is_white)
        capturing = self.capturing_moves(is_white)
        candidates = capturing or non_capturing
        move = self._forcing_move(candidates, is_white)
        if move is None:
            move = random_element(candidates, rng)
            self.move_piece(move)
        if self._is_promotion(move):
            if self.capturing_moves(not is_white):
                self._promote(move, PieceType.KING)
            else:
                self._promote(move, random_int(0, 4, rng))
        self.switch_turn()
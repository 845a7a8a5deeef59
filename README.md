# chesslab

A small losing-chess toolkit:

- **Move generation** (`chesslab.pieces`, `chesslab.board`) for kings, queens,
  rooks, bishops, knights and pawns on an 8×8 board. Moves are split into
  capturing and non-capturing moves. The board can also test whether a king is
  in check.
- **Two simple computer players** (`ChessBoard.ai1_make_move` and
  `ChessBoard.ai2_make_move`). The first picks a random move, and it picks a
  random capture whenever a capture exists. The second plays the first move it
  finds that leaves the opponent a capture. It looks among captures if it has
  any, and otherwise among the other moves. If no such move exists, it falls
  back to a random one.
- **Games and experiments** between the computer players (`chesslab.game`).
- **A move-count checker** (`chesslab.verify`) that compares generated moves
  with expected counts.
- **A generic `Matrix`** (`chesslab.matrix`) with element access, arithmetic,
  transposition and row/column editing.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Boards as text

A board is read from exactly 64 characters, one per square. It is read row by
row from y = 0 to y = 7, with x running from 0 to 7 in each row, and newlines
are ignored. Upper-case letters are white pieces and lower-case letters are
black pieces: `K`, `Q`, `R`, `B`, `N`, `P`. Any other character is an empty
square. White pawns advance towards higher y, and black pawns towards lower y.

```python
from chesslab.board import ChessBoard

board = ChessBoard.from_text(
    "Q..n...r\n"
    "........\n"
    "n.r.....\n"
    "........\n"
    "........\n"
    "........\n"
    "........\n"
    "........\n"
)
print(len(board.capturing_moves(True)))   # 3
print(board.king_in_check(True))          # False (there is no white king)
print(board.get_piece(0, 0).valid_move(2, 2))  # 2: a capture
print(board.render())
```

If the text does not hold exactly 64 squares, `BoardFormatError` is raised. It
is a subclass of `ValueError`.

`Piece.valid_move(x, y)` returns one of three values:

- `0` if the square is unreachable
- `1` if the square is reachable and empty
- `2` if the move captures a piece

When a pawn reaches the last rank during a computer move, it is promoted by
`ChessBoard.create_piece`. Asking for a king there yields a queen.

## Playing computer games

```python
import random
from chesslab.game import Matchup, initial_board, play_ai_game, run_experiment

result = play_ai_game(initial_board(), Matchup.AI1_VS_AI2, verbose=False, rng=random.Random(1))
print(result)        # a GameResult
print(run_experiment(Matchup.AI2_VS_AI2, 50, random.Random(7)))
```

A game runs until one side has no moves left. The result is then
`GameResult.WHITE_WON` if white is to move and `GameResult.BLACK_WON` if black
is to move. After more than 300 turns the game is a `GameResult.DRAW`. With
`verbose=True`, each turn and the board are printed.

To play every matchup from the starting position and print a tally for each:

```
chesslab-experiment --games 100 --seed 1
```

`--games` defaults to 1000 and `--seed` is optional.

## Checking move counts

`chesslab-verify` reads cases from a file, or from standard input when no path
is given. Each case is eight board lines, of which only the first eight
characters are used. They are followed by four numbers, one per line:

1. white capturing moves
2. black capturing moves
3. white non-capturing moves
4. black non-capturing moves

When every case matches, it prints `All tests were successful`. On the first
mismatch or unreadable case it prints the error and exits with status 1.

```
chesslab-verify cases.txt
chesslab-verify --reveal < cases.txt
```

`--reveal` lists every move of both sides instead of checking the counts. The
same operations are available in code as `read_cases`, `check_case`,
`describe_case` and `check_stream`.

## Matrices

```python
from chesslab.matrix import Matrix, identity, parse_matrix

m = Matrix.from_values([1, 2, 3, 4])    # 2x2
m[0, 1] = 5
print(m * identity(2) == m)             # True
m.transpose()
m.insert_row(1)                         # now 3x2
print(m)
print(parse_matrix("1 2\n3 4").cols())  # 2
```

`parse_matrix` reads numbers until the first token that is not a number. The
count must be a non-zero perfect square, or `ValueError` is raised. The same
error is raised when the shapes passed to arithmetic do not match.
`Matrix.reset()` empties the matrix to 0 × 0.

## What it does not do

- There is no way for a person to play a game; only the computer players move
  pieces.
- Castling, en passant and the check rules of ordinary chess are not part of
  move generation.
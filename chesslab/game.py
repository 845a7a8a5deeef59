"""Games and experiments between the two computer players."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from enum import IntEnum

from chesslab.board import ChessBoard

MAX_TURNS = 300

_START_POSITION = "\n".join(
    [
        "RNBKQBNR",
        "PPPPPPPP",
        "........",
        "........",
        "........",
        "........",
        "pppppppp",
        "rnbqkbnr",
    ]
)

_COLOR = {True: "white", False: "black"}


class GameResult(IntEnum):
    BLACK_WON = 0
    WHITE_WON = 1
    DRAW = 2


class Matchup(IntEnum):
    """Which computer player plays each side."""

    AI1_VS_AI1 = 0
    AI1_VS_AI2 = 1
    AI2_VS_AI2 = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    def uses_ai2(self, white: bool) -> bool:
        """Whether the side to move is played by the second computer player."""
        if self is Matchup.AI2_VS_AI2:
            return True
        return self is Matchup.AI1_VS_AI2 and not white


_LABELS = {
    Matchup.AI1_VS_AI1: "AI-1 (white) vs AI-1 (black)",
    Matchup.AI1_VS_AI2: "AI-1 (white) vs AI-2 (black)",
    Matchup.AI2_VS_AI2: "AI-2 (white) vs AI-2 (black)",
}


def initial_board() -> ChessBoard:
    """The starting position, white on the first two ranks, white to move."""
    return ChessBoard.from_text(_START_POSITION)


def play_ai_game(
    board: ChessBoard,
    matchup: Matchup | int = Matchup.AI1_VS_AI1,
    verbose: bool = False,
    rng: random.Random | None = None,
) -> GameResult:
    """Play until one side has no moves; the side to move then wins.

    After more than ``MAX_TURNS`` moves the game is a draw.
    """
    matchup = Matchup(matchup)
    turns = 1
    while board.possible_moves(True) and board.possible_moves(False):
        white = board.turn()
        if verbose:
            print(f"Turn {turns} -- {_COLOR[white]}")
        if matchup.uses_ai2(white):
            board.ai2_make_move(white, rng)
        else:
            board.ai1_make_move(white, rng)
        if verbose:
            print(board.render(), end="")
        if turns > MAX_TURNS:
            if verbose:
                print("The game ended in a draw.")
            return GameResult.DRAW
        turns += 1

    if verbose:
        print(f"It is {_COLOR[board.turn()]} who won the game!")
    return GameResult(int(board.turn()))


def run_experiment(
    matchup: Matchup | int = Matchup.AI1_VS_AI1,
    count: int = 100,
    rng: random.Random | None = None,
) -> dict[GameResult, int]:
    """Play ``count`` games from the starting position and tally the results."""
    matchup = Matchup(matchup)
    tally = {result: 0 for result in GameResult}
    for _ in range(count):
        tally[play_ai_game(initial_board(), matchup, rng=rng)] += 1
    return tally


def _format_summary(matchup: Matchup, count: int, tally: dict[GameResult, int]) -> str:
    # A game that ends with black to move is credited to white, and vice versa.
    return (
        f"{matchup.label} / {count} games:\n"
        f"\tWhite won {tally[GameResult.BLACK_WON]} times\n"
        f"\tBlack won {tally[GameResult.WHITE_WON]} times\n"
        f"\tDraw {tally[GameResult.DRAW]} times"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play losing-chess games between computer players."
    )
    parser.add_argument(
        "--games", type=int, default=1000, help="games per matchup (default 1000)"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.games < 0:
        parser.error("--games must not be negative")

    rng = random.Random(args.seed) if args.seed is not None else None
    for matchup in Matchup:
        tally = run_experiment(matchup, args.games, rng)
        print(_format_summary(matchup, args.games, tally))
    return 0


if __name__ == "__main__":
    sys.exit(main())
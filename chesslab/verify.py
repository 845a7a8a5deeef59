"""Check move counts of boards against expected values read from a file.

Each case is eight board lines followed by four counts: white capturing,
black capturing, white non-capturing and black non-capturing moves.
"""

from __future__ import annotations

import argparse
import contextlib
import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice

from chesslab.board import BoardFormatError, ChessBoard
from chesslab.pieces import Move

_BOARD_LINES = 8
_NUMBER = re.compile(r"\s*(\d+)")


class CheckError(Exception):
    """Raised when a case cannot be read or its counts do not match."""


@dataclass(frozen=True)
class BoardCase:
    board_text: str
    white_capturing: int
    black_capturing: int
    white_non_capturing: int
    black_non_capturing: int


def _read_count(lines: Iterator[str], board_id: int) -> int:
    for line in lines:
        if not line.strip():
            continue
        match = _NUMBER.match(line)
        if match is None:
            break
        return int(match.group(1))
    raise CheckError(f"Could not read expected values for board #{board_id}.")


def read_cases(stream: Iterable[str]) -> Iterator[BoardCase]:
    """Yield the cases held in ``stream``, a source of text lines.

    Only the first eight characters of each board line are used, and
    trailing blank lines at the end of the input are ignored.
    """
    lines = [line.rstrip("\r\n") for line in stream]
    while lines and not lines[-1].strip():
        lines.pop()
    remaining = iter(lines)
    board_id = 1
    for first in remaining:
        rows = [first, *islice(remaining, _BOARD_LINES - 1)]
        if len(rows) < _BOARD_LINES:
            raise CheckError(f"Could not read board #{board_id}.")
        counts = [_read_count(remaining, board_id) for _ in range(4)]
        yield BoardCase("\n".join(row[:_BOARD_LINES] for row in rows), *counts)
        board_id += 1


def _load(case: BoardCase, board_id: int) -> ChessBoard:
    try:
        return ChessBoard.from_text(case.board_text)
    except BoardFormatError as err:
        raise CheckError(f"Board #{board_id}: {err}") from err


def check_case(case: BoardCase, board_id: int = 1) -> None:
    """Raise CheckError unless the board has exactly the expected move counts."""
    board = _load(case, board_id)
    checks = (
        (lambda: board.capturing_moves(True), case.white_capturing,
         "capturing moves for white"),
        (lambda: board.capturing_moves(False), case.black_capturing,
         "capturing moves for black"),
        (lambda: board.non_capturing_moves(True), case.white_non_capturing,
         "non-capturing moves for white"),
        (lambda: board.non_capturing_moves(False), case.black_non_capturing,
         "non-capturing moves for black"),
    )
    for moves, expected, what in checks:
        got = len(moves())
        if got != expected:
            raise CheckError(
                f"Error: For board #{board_id}, expected {expected} {what} "
                f"(got {got})."
            )


def _describe_moves(title: str, moves: list[Move], board_id: int) -> list[str]:
    lines = [f"{title} moves for board #{board_id}: {len(moves)}"]
    lines.extend(
        f"  From ({move.x_from}, {move.y_from}) to ({move.x_to}, {move.y_to})"
        for move in moves
    )
    return lines


def describe_case(case: BoardCase, board_id: int = 1) -> str:
    """List every capturing and non-capturing move of both sides."""
    board = _load(case, board_id)
    sections = (
        ("White capturing", board.capturing_moves(True)),
        ("Black capturing", board.capturing_moves(False)),
        ("White non-capturing", board.non_capturing_moves(True)),
        ("Black non-capturing", board.non_capturing_moves(False)),
    )
    return "\n".join(
        line
        for title, moves in sections
        for line in _describe_moves(title, moves, board_id)
    )


def check_stream(stream: Iterable[str]) -> int:
    """Check every case in ``stream`` and return how many were checked."""
    checked = 0
    for board_id, case in enumerate(read_cases(stream), start=1):
        check_case(case, board_id)
        checked = board_id
    return checked


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check board move counts against expected values."
    )
    parser.add_argument(
        "path", nargs="?", default="-", help="case file (default: standard input)"
    )
    parser.add_argument(
        "--reveal", action="store_true", help="list the moves instead of checking"
    )
    args = parser.parse_args(argv)

    source = (
        contextlib.nullcontext(sys.stdin)
        if args.path == "-"
        else open(args.path, encoding="utf-8")
    )
    try:
        with source as stream:
            if args.reveal:
                for board_id, case in enumerate(read_cases(stream), start=1):
                    print(describe_case(case, board_id))
            else:
                check_stream(stream)
    except CheckError as err:
        print(err, file=sys.stderr)
        return 1
    print("All tests were successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())
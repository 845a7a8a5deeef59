"""A dense, row-major matrix with element-wise and matrix arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

_DEFAULT = 0


class Matrix:
    """A rows x cols grid of values stored in row-major order.

    ``Matrix()`` is empty, ``Matrix(n)`` is an n x n matrix and
    ``Matrix(r, c)`` is an r x c matrix; all elements start at zero.
    """

    def __init__(self, rows: int = 0, cols: int | None = None) -> None:
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data: list[Any] = [_DEFAULT] * (rows * cols)

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Matrix:
        """Build a square matrix from a flat, row-major sequence of values."""
        items = list(values)
        root = math.isqrt(len(items))
        if root * root != len(items):
            raise ValueError("Number of elements is not a square number")
        matrix = cls(root, root)
        matrix._data = items
        return matrix

    @classmethod
    def _with_data(cls, rows: int, cols: int, data: list[Any]) -> Matrix:
        matrix = cls(0, 0)
        matrix._rows = rows
        matrix._cols = cols
        matrix._data = data
        return matrix

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    def copy(self) -> Matrix:
        return self._with_data(self._rows, self._cols, list(self._data))

    # element access

    def _offset(self, index: tuple[int, int]) -> int:
        try:
            row, col = index
        except (TypeError, ValueError):
            raise TypeError("Matrix indices must be a (row, col) pair") from None
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError("Matrix indices out of bounds")
        return row * self._cols + col

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._data[self._offset(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _row_lists(self) -> list[list[Any]]:
        return [
            self._data[start:start + self._cols]
            for start in range(0, self._rows * self._cols, self._cols)
        ] if self._cols else [[] for _ in range(self._rows)]

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    # arithmetic

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise ValueError(
                f"Incompatible matrix dimensions for {operation}"
            )

    def _product(self, other: Matrix) -> list[Any]:
        if self._cols != other._rows:
            raise ValueError("Incompatible matrix dimensions for multiplication")
        left = self._row_lists()
        right_cols = list(zip(*other._row_lists())) if other._rows else [
            () for _ in range(other._cols)
        ]
        result = []
        for row in left:
            for column in right_cols:
                total = _DEFAULT
                for a, b in zip(row, column):
                    total += a * b
                result.append(total)
        return result

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "addition")
            data = [a + b for a, b in zip(self._data, other._data)]
        else:
            data = [a + other for a in self._data]
        return self._with_data(self._rows, self._cols, data)

    def __radd__(self, other: Any) -> Matrix:
        return self._with_data(
            self._rows, self._cols, [other + a for a in self._data]
        )

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "subtraction")
            data = [a - b for a, b in zip(self._data, other._data)]
        else:
            data = [a - other for a in self._data]
        return self._with_data(self._rows, self._cols, data)

    def __rsub__(self, other: Any) -> Matrix:
        return self._with_data(
            self._rows, self._cols, [other - a for a in self._data]
        )

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self._with_data(self._rows, other._cols, self._product(other))
        return self._with_data(
            self._rows, self._cols, [a * other for a in self._data]
        )

    def __rmul__(self, other: Any) -> Matrix:
        return self._with_data(
            self._rows, self._cols, [other * a for a in self._data]
        )

    def __iadd__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "addition")
            self._data = [a + b for a, b in zip(self._data, other._data)]
        else:
            self._data = [a + other for a in self._data]
        return self

    def __isub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._check_same_shape(other, "subtraction")
            self._data = [a - b for a, b in zip(self._data, other._data)]
        else:
            self._data = [a - other for a in self._data]
        return self

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            self._data = self._product(other)
            self._cols = other._cols
        else:
            self._data = [a * other for a in self._data]
        return self

    # text

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(value) for value in row) for row in self._row_lists()
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._row_lists()!r})"

    # shape changes

    def reset(self) -> None:
        """Discard all elements, leaving an empty 0 x 0 matrix."""
        self._rows = 0
        self._cols = 0
        self._data = []

    def transpose(self) -> None:
        rows = self._row_lists()
        data = [rows[r][c] for c in range(self._cols) for r in range(self._rows)]
        self._rows, self._cols = self._cols, self._rows
        self._data = data

    def _set_rows(self, rows: list[list[Any]]) -> None:
        self._rows = len(rows)
        self._data = [value for row in rows for value in row]

    def insert_row(self, row: int) -> None:
        """Insert a zero row so that it ends up at index ``row``."""
        if not 0 <= row <= self._rows:
            raise IndexError("Row index out of range")
        rows = self._row_lists()
        rows.insert(row, [_DEFAULT] * self._cols)
        self._set_rows(rows)

    def append_row(self, row: int) -> None:
        """Insert a zero row directly after row ``row``."""
        if not 0 <= row < self._rows:
            raise IndexError("Row index out of range")
        rows = self._row_lists()
        rows.insert(row + 1, [_DEFAULT] * self._cols)
        self._set_rows(rows)

    def remove_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError("Row index out of range")
        rows = self._row_lists()
        del rows[row]
        self._set_rows(rows)

    def _set_columns(self, rows: list[list[Any]], cols: int) -> None:
        self._cols = cols
        self._data = [value for row in rows for value in row]

    def insert_column(self, col: int) -> None:
        """Insert a zero column so that it ends up at index ``col``."""
        if not 0 <= col <= self._cols:
            raise IndexError("Column index out of range")
        rows = self._row_lists()
        for values in rows:
            values.insert(col, _DEFAULT)
        self._set_columns(rows, self._cols + 1)

    def append_column(self, col: int) -> None:
        """Insert a zero column directly after column ``col``."""
        if not 0 <= col < self._cols:
            raise IndexError("Column index out of range")
        rows = self._row_lists()
        for values in rows:
            values.insert(col + 1, _DEFAULT)
        self._set_columns(rows, self._cols + 1)

    def remove_column(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise IndexError("Column index out of range")
        rows = self._row_lists()
        for values in rows:
            del values[col]
        self._set_columns(rows, self._cols - 1)


def identity(dim: int) -> Matrix:
    """Return the dim x dim identity matrix."""
    matrix = Matrix(dim)
    for i in range(dim):
        matrix[i, i] = 1
    return matrix


def _parse_number(token: str) -> int | float | None:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        return None


def parse_matrix(text: str) -> Matrix:
    """Read whitespace-separated numbers into a square matrix.

    Reading stops at the first token that is not a number. The number of
    values read must be a non-zero perfect square.
    """
    values = []
    for token in text.split():
        number = _parse_number(token)
        if number is None:
            break
        values.append(number)
    if not values:
        raise ValueError("No matrix elements found")
    root = math.isqrt(len(values))
    if root * root != len(values):
        raise ValueError("Number of elements is not a square number")
    return Matrix.from_values(values)
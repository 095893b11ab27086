"""Integer matrix multiplication and a small interactive front end."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

Matrix = list[list[int]]


class DimensionMismatch(ValueError):
    """Raised when two matrices cannot be multiplied."""


def _shape(matrix: Sequence[Sequence[int]], name: str) -> tuple[int, int]:
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise DimensionMismatch(f"matrix {name} has rows of different lengths")
    return rows, columns


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product ``a`` times ``b``.

    Raises DimensionMismatch when the column count of ``a`` differs from
    the row count of ``b``.
    """
    _, inner_a = _shape(a, "A")
    inner_b, columns = _shape(b, "B")
    if inner_a != inner_b:
        raise DimensionMismatch("matrix multiplication not possible")
    b_columns = list(zip(*b)) if b else [()] * columns
    return [
        [sum(x * y for x, y in zip(row, column)) for column in b_columns]
        for row in a
    ]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render each row as space-terminated numbers followed by a newline."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _read_matrix(tokens: Iterator[str], rows: int, columns: int) -> Matrix:
    return [[_read_int(tokens) for _ in range(columns)] for _ in range(rows)]


def main(argv: list[str] | None = None) -> int:
    """Read two matrices from standard input and print their product."""
    tokens = _tokens(sys.stdin)
    try:
        print("enter dimensions of matrix A: ", end="")
        m1, n1 = _read_int(tokens), _read_int(tokens)
        print("enter dimensions of matrix B: ", end="")
        m2, n2 = _read_int(tokens), _read_int(tokens)
        print()
        if min(m1, n1, m2, n2) < 0:
            raise ValueError("dimensions must not be negative")

        if n1 != m2:
            print("matrix multiplication not possible")
            return 0

        print("Enter the elements of A row-wise:\n")
        a = _read_matrix(tokens, m1, n1)
        print()
        print("Enter the elements of B row-wise:\n")
        b = _read_matrix(tokens, m2, n2)
    except ValueError as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1

    product = multiply(a, b) if m2 else [[0] * n2 for _ in range(m1)]
    print("\nResult matrix C:")
    print(format_matrix(product), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
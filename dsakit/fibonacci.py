"""Several ways of computing Fibonacci numbers, some modulo 10000."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from typing import Any

MODULUS = 10000

_Matrix = tuple[int, int, int, int]


def _check(n: int, smallest: int = 0) -> None:
    if n < smallest:
        raise ValueError(f"n must be at least {smallest}")


def fib_recursive(n: int) -> int:
    """Return F(n) mod 10000 by plain two-way recursion (exponential time)."""
    _check(n)

    def go(k: int) -> int:
        if k <= 1:
            return k
        return (go(k - 1) + go(k - 2)) % MODULUS

    return go(n)


def fib_pair(n: int) -> tuple[int, int]:
    """Return ``(F(n), F(n - 1))`` exactly, for ``n >= 1``."""
    _check(n, 1)
    current, previous = 1, 0
    for _ in range(n - 1):
        current, previous = current + previous, current
    return current, previous


def fib_iterative(n: int) -> int:
    """Return F(n) exactly, by iteration."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fib_iterative_mod(n: int) -> int:
    """Return F(n) mod 10000, by iteration."""
    _check(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, (a + b) % MODULUS
    return a


def _mul(x: _Matrix, y: _Matrix) -> _Matrix:
    a, b, c, d = x
    e, f, g, h = y
    return (
        (a * e + b * g) % MODULUS,
        (a * f + b * h) % MODULUS,
        (c * e + d * g) % MODULUS,
        (c * f + d * h) % MODULUS,
    )


def fib_matrix(n: int) -> int:
    """Return F(n) mod 10000 by raising [[1, 1], [1, 0]] to the power n - 1."""
    _check(n)
    if n <= 1:
        return n
    result: _Matrix = (1, 0, 0, 1)
    base: _Matrix = (1, 1, 1, 0)
    power = n - 1
    while power:
        if power & 1:
            result = _mul(result, base)
        base = _mul(base, base)
        power >>= 1
    return result[0]


def timed(func: Callable[[int], Any], n: int) -> tuple[Any, float]:
    """Call ``func(n)`` and return its result with the elapsed milliseconds."""
    start = time.perf_counter()
    result = func(n)
    elapsed = (time.perf_counter() - start) * 1000.0
    return result, elapsed


_ALGORITHMS: dict[str, Callable[[int], int]] = {
    "recursive": fib_recursive,
    "pair": lambda n: fib_pair(n)[0],
    "iterative": fib_iterative,
    "iterative-mod": fib_iterative_mod,
    "matrix": fib_matrix,
}


def main(argv: list[str] | None = None) -> int:
    """Compute F(n) with a chosen algorithm and report the time it took."""
    parser = argparse.ArgumentParser(
        prog="dsakit-fibonacci", description="Compute Fibonacci numbers."
    )
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(_ALGORITHMS), default="iterative"
    )
    parser.add_argument(
        "--plain", action="store_true", help="print only the number, without timing"
    )
    parser.add_argument("n", type=int, nargs="?")
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        words = sys.stdin.read().split()
        if not words:
            parser.error("n required")
        try:
            n = int(words[0])
        except ValueError:
            parser.error(f"invalid n: {words[0]!r}")

    func = _ALGORITHMS[args.algorithm]
    try:
        result, elapsed = timed(func, n)
    except ValueError as error:
        parser.error(str(error))

    if args.plain:
        print(result)
    else:
        print(f"r: {result}")
        print(f"elapsed time: {elapsed:f} milliseconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
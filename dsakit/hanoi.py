"""Move sequences for the Tower of Hanoi with three or four pegs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

Move = tuple[str, str]


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("number of disks must not be negative")


def _three(n: int, source: str, target: str, spare: str) -> Iterator[Move]:
    if n <= 0:
        return
    yield from _three(n - 1, source, spare, target)
    yield source, target
    yield from _three(n - 1, spare, target, source)


def three_tower_moves(
    n: int, source: str = "T1", target: str = "T3", spare: str = "T2"
) -> Iterator[Move]:
    """Yield ``(from, to)`` moves carrying ``n`` disks from ``source`` to ``target``."""
    _check(n)
    return _three(n, source, target, spare)


def _four(n: int, source: str, target: str, spare1: str, spare2: str) -> Iterator[Move]:
    if n == 0:
        return
    if n == 1:
        yield source, target
        return
    yield from _four(n - 2, source, spare2, spare1, target)
    yield source, spare1
    yield source, target
    yield spare1, target
    yield from _four(n - 2, spare2, target, source, spare1)


def four_tower_moves(
    n: int,
    source: str = "T1",
    target: str = "T4",
    spare1: str = "T2",
    spare2: str = "T3",
) -> Iterator[Move]:
    """Yield ``(from, to)`` moves for ``n`` disks using two spare pegs.

    The ``n - 2`` smaller disks are parked on ``spare2`` while the two
    largest go through ``spare1``.
    """
    _check(n)
    return _four(n, source, target, spare1, spare2)


def main(argv: list[str] | None = None) -> int:
    """Print the moves for a number of disks given as argument or on stdin."""
    parser = argparse.ArgumentParser(
        prog="dsakit-hanoi", description="Print Tower of Hanoi moves."
    )
    parser.add_argument("-t", "--towers", type=int, choices=(3, 4), default=3)
    parser.add_argument("disks", type=int, nargs="?")
    args = parser.parse_args(argv)

    disks = args.disks
    if disks is None:
        words = sys.stdin.read().split()
        if not words:
            parser.error("number of disks required")
        try:
            disks = int(words[0])
        except ValueError:
            parser.error(f"invalid number of disks: {words[0]!r}")
    if disks < 0:
        parser.error("number of disks must not be negative")

    moves = three_tower_moves(disks) if args.towers == 3 else four_tower_moves(disks)
    for source, target in moves:
        print(f"Moving from {source} to {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
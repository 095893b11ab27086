"""A growable array whose capacity doubles when full and halves when sparse."""

from __future__ import annotations

from collections.abc import Iterator


class DynamicArray:
    """Array with an explicit capacity that grows and shrinks geometrically.

    Appending to a full array doubles its capacity. Removing an element so
    that at most a quarter of the capacity is in use halves it.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = 1

    def append(self, value: int) -> None:
        """Add ``value`` at the end, doubling the capacity if it is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the last element.

        Raises IndexError when the array is empty.
        """
        if not self._items:
            raise IndexError("array is empty")
        value = self._items.pop()
        if len(self._items) <= self._capacity // 4:
            # Never shrink to zero, so that appending keeps working.
            self._capacity = max(1, self._capacity // 2)
        return value

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"


def _show(array: DynamicArray) -> None:
    print("Array: " + "".join(f"{value} " for value in array))


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration of appends and removals."""
    array = DynamicArray()
    for value in (1, 2, 3, 4, 5):
        array.append(value)
    _show(array)

    array.pop()
    _show(array)

    array.append(6)
    array.append(7)
    _show(array)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""A fixed-size array of integers."""

from __future__ import annotations

from collections.abc import Iterator


class IntArray:
    """An array of integers whose size is fixed at creation; elements start at 0."""

    __slots__ = ("_values",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._values: list[int] = [0] * size

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range for size {len(self._values)}")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._values[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._values[index] = int(value)

    def copy(self) -> IntArray:
        """Return an independent copy."""
        duplicate = IntArray(0)
        duplicate._values = list(self._values)
        return duplicate

    def move(self) -> IntArray:
        """Transfer the contents to a new array, leaving this one empty."""
        moved = IntArray(0)
        moved._values, self._values = self._values, []
        return moved

    def __repr__(self) -> str:
        return f"IntArray({self._values!r})"
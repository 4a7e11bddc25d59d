"""A last-in, first-out stack of items."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A stack whose most recently pushed item is on top."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> None:
        """Remove the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> T:
        """Return the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __copy__(self) -> Stack[T]:
        duplicate: Stack[T] = Stack()
        duplicate._items = list(self._items)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # mutable

    def __str__(self) -> str:
        """Each item from bottom to top, each followed by a space."""
        return "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
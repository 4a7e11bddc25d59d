"""A singly linked stack of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    next: _Node | None


class IntStack:
    """A stack of integers; iteration runs from the top down."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._head = _Node(value, self._head)

    def pop(self) -> None:
        """Remove the top value; raise IndexError if the stack is empty."""
        if self._head is None:
            raise IndexError("pop from empty stack")
        self._head = self._head.next

    def top(self) -> int:
        """Return the top value; raise IndexError if the stack is empty."""
        if self._head is None:
            raise IndexError("top of empty stack")
        return self._head.value

    def set_top(self, value: int) -> None:
        """Replace the top value; raise IndexError if the stack is empty."""
        if self._head is None:
            raise IndexError("top of empty stack")
        self._head.value = value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"IntStack(top-first={list(self)!r})"
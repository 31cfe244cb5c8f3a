"""Singly linked list with cursor-based insertion and removal."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from .defaults import default_equality
from .slist_node import Cursor, Node

Equality = Callable[[Any, Any], bool]


class SList:
    """Forward linked list keeping track of its front, back and size."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: Optional[Node] = None
        self._back: Optional[Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SList):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(default_equality(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"

    def __copy__(self) -> "SList":
        return SList(self)

    def copy(self) -> "SList":
        """Return a shallow copy holding the same values in the same order."""
        return SList(self)

    def is_empty(self) -> bool:
        """True if the list holds no values."""
        return self._size == 0

    def _require_items(self) -> None:
        if self._size == 0:
            raise RuntimeError("List is empty")

    def front(self) -> Any:
        """Return the first value. Raises RuntimeError if the list is empty."""
        self._require_items()
        assert self._front is not None
        return self._front.value

    def back(self) -> Any:
        """Return the last value. Raises RuntimeError if the list is empty."""
        self._require_items()
        assert self._back is not None
        return self._back.value

    def begin(self) -> Cursor:
        """Cursor at the first element (equal to end() when empty)."""
        return Cursor(self, self._front)

    def end(self) -> Cursor:
        """Cursor one past the last element."""
        return Cursor(self, None)

    def push_front(self, value: Any) -> Cursor:
        """Add a value at the front; returns a cursor to it."""
        self._front = Node(value, self._front)
        self._size += 1
        if self._size == 1:
            self._back = self._front
        return Cursor(self, self._front)

    def push_back(self, value: Any) -> Cursor:
        """Add a value at the back; returns a cursor to it."""
        node = Node(value)
        if self._back is not None:
            self._back.next = node
        self._back = node
        self._size += 1
        if self._size == 1:
            self._front = node
        return Cursor(self, node)

    def pop_front(self) -> None:
        """Remove the first value. Raises RuntimeError if the list is empty."""
        self._require_items()
        assert self._front is not None
        self._front = self._front.next
        self._size -= 1
        if self._size == 0:
            self._back = None

    def pop_back(self) -> None:
        """Remove the last value. Raises RuntimeError if the list is empty."""
        self._require_items()
        if self._size == 1:
            self._front = None
            self._back = None
        else:
            node = self._front
            assert node is not None
            while node.next is not self._back:
                node = node.next
                assert node is not None
            node.next = None
            self._back = node
        self._size -= 1

    def find(self, value: Any, equality: Optional[Equality] = None) -> Cursor:
        """Return a cursor to the first element equal to ``value``, or end()."""
        equal = equality or default_equality
        node = self._front
        while node is not None:
            if equal(node.value, value):
                return Cursor(self, node)
            node = node.next
        return self.end()

    def insert_after(self, cursor: Cursor, value: Any) -> None:
        """Insert ``value`` after the cursor's element; at end() it is appended.

        Raises RuntimeError if the cursor belongs to another container.
        """
        if cursor.container is not self:
            raise RuntimeError("Iterator is not associated with a container")
        node = cursor.node
        if node is None:
            self.push_back(value)
            return
        node.next = Node(value, node.next)
        if node is self._back:
            self._back = node.next
        self._size += 1

    def remove(self, value: Any, equality: Optional[Equality] = None) -> bool:
        """Remove the first element equal to ``value``; True if one was removed."""
        return self.remove_at(self.find(value, equality))

    def remove_at(self, cursor: Cursor) -> bool:
        """Remove the element at ``cursor``.

        Returns False if the cursor belongs to another container or is at the end.
        """
        if cursor.container is not self or cursor.node is None:
            return False
        node = cursor.node
        if node is self._back:
            self.pop_back()
            return True
        following = node.next
        assert following is not None
        node.value = following.value
        node.next = following.next
        if following is self._back:
            self._back = node
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every value."""
        self._front = None
        self._back = None
        self._size = 0
"""Nodes of a singly linked list and cursors that walk them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A link in a singly linked list."""

    value: Any
    next: Optional["Node"] = None


class Cursor:
    """Position in a linked list: a node of a given container, or past its end.

    A cursor with no node is the end position; a cursor with no container is
    unattached and cannot be advanced.
    """

    __slots__ = ("_container", "_node")

    def __init__(self, container: Any = None, node: Optional[Node] = None) -> None:
        self._container = container
        self._node = node

    @property
    def container(self) -> Any:
        """The container this cursor belongs to, or None."""
        return self._container

    @property
    def node(self) -> Optional[Node]:
        """The node this cursor points at, or None at the end."""
        return self._node

    def value(self) -> Any:
        """Return the value at this position.

        Raises RuntimeError if the cursor does not point at an element.
        """
        if self._node is None:
            raise RuntimeError("Iterator does not point to an element in the container")
        return self._node.value

    def advance(self) -> "Cursor":
        """Move to the next node; staying put at the end. Returns the cursor.

        Raises RuntimeError if the cursor is not associated with a container.
        """
        if self._container is None:
            raise RuntimeError("Iterator is not associated with a container")
        if self._node is not None:
            self._node = self._node.next
        return self

    def copy(self) -> "Cursor":
        """Return an independent cursor at the same position."""
        return Cursor(self._container, self._node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._container is other._container and self._node is other._node

    def __hash__(self) -> int:
        return hash((id(self._container), id(self._node)))

    def __repr__(self) -> str:
        where = "end" if self._node is None else repr(self._node.value)
        return f"Cursor({where})"
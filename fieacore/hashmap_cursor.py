"""Cursors that walk a hash map bucket by bucket and chain by chain."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from .hashmap import HashMap
from .slist_node import Cursor


class HashMapCursor:
    """Position in a hash map: an entry of one bucket's chain, or past the end.

    A cursor built with no map is unattached; it compares equal only to other
    unattached cursors and cannot be read or advanced.
    """

    __slots__ = ("_hashmap", "_bucket_index", "_chain")

    def __init__(
        self,
        hashmap: Optional[HashMap] = None,
        bucket_index: int = 0,
        chain: Optional[Cursor] = None,
    ) -> None:
        self._hashmap = hashmap
        self._bucket_index = bucket_index
        self._chain = chain if chain is not None else Cursor()

    @classmethod
    def begin(cls, hashmap: HashMap) -> "HashMapCursor":
        """Cursor at the first entry of ``hashmap`` (equal to end() when empty)."""
        first = hashmap.buckets[0]
        cursor = cls(hashmap, 0, first.begin())
        if first.is_empty():
            cursor.advance()
        return cursor

    @classmethod
    def end(cls, hashmap: HashMap) -> "HashMapCursor":
        """Cursor one past the last entry of ``hashmap``."""
        return cls(hashmap, hashmap.bucket_count(), Cursor())

    @property
    def hashmap(self) -> Optional[HashMap]:
        """The map this cursor belongs to, or None."""
        return self._hashmap

    def _at_end(self) -> bool:
        assert self._hashmap is not None
        return self._bucket_index >= self._hashmap.bucket_count()

    def value(self) -> Tuple[Any, Any]:
        """Return the ``(key, value)`` pair at this position.

        Raises RuntimeError if the cursor is unattached or not at an entry.
        """
        if self._hashmap is None:
            raise RuntimeError("Iterator is not associated with a container")
        if self._at_end() or self._chain.node is None:
            raise RuntimeError("Iterator does not point to an element in the container")
        return self._chain.value()

    def advance(self) -> "HashMapCursor":
        """Move to the next entry, staying put at the end. Returns the cursor.

        Raises RuntimeError if the cursor is unattached.
        """
        if self._hashmap is None:
            raise RuntimeError("Iterator is not associated with a container")
        if self._at_end():
            return self
        buckets = self._hashmap.buckets
        while True:
            if self._chain.node is not None:
                self._chain.advance()
            else:
                self._bucket_index += 1
                if self._bucket_index >= len(buckets):
                    self._chain = Cursor()
                    break
                self._chain = buckets[self._bucket_index].begin()
            if self._chain.node is not None:
                break
        return self

    def copy(self) -> "HashMapCursor":
        """Return an independent cursor at the same position."""
        return HashMapCursor(self._hashmap, self._bucket_index, self._chain.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMapCursor):
            return NotImplemented
        if self._hashmap is not other._hashmap:
            return False
        if self._hashmap is None:
            return True
        if self._at_end() and other._at_end():
            return True
        return self._bucket_index == other._bucket_index and self._chain == other._chain

    def __hash__(self) -> int:
        return hash((id(self._hashmap), self._bucket_index, id(self._chain.node)))

    def __repr__(self) -> str:
        if self._hashmap is None:
            return "HashMapCursor(unattached)"
        if self._at_end():
            return "HashMapCursor(end)"
        return f"HashMapCursor(bucket={self._bucket_index}, entry={self._chain.node and self._chain.node.value!r})"
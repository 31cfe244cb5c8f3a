"""Separately chained hash map built on singly linked lists."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .defaults import default_equality, default_hash
from .slist import SList
from .slist_node import Cursor

HashFunction = Callable[[Any], int]
KeyEquality = Callable[[Any, Any], bool]

_MISSING_KEY = "Key does not exist in the container"


class HashMap:
    """Unordered associative array with a fixed number of chained buckets.

    Entries are stored as ``(key, value)`` tuples.  Iteration walks the buckets
    in order and each chain from front to back.
    """

    DEFAULT_BUCKET_COUNT = 11

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        hash_fn: Optional[HashFunction] = None,
        key_equality: Optional[KeyEquality] = None,
    ) -> None:
        if bucket_count <= 0:
            raise ValueError("Bucket count must be greater than zero")
        self._hash: HashFunction = hash_fn or default_hash
        self._key_equality: KeyEquality = key_equality or default_equality
        self._buckets = [SList() for _ in range(bucket_count)]
        self._size = 0
        self._buckets_in_use = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Any]]) -> "HashMap":
        """Build a map with one bucket per given pair; later duplicates are ignored."""
        entries = list(pairs)
        hashmap = cls(len(entries))
        for key, value in entries:
            hashmap.insert(key, value)
        return hashmap

    @property
    def buckets(self) -> Tuple[SList, ...]:
        """The bucket chains, in bucket order."""
        return tuple(self._buckets)

    def _index_of(self, key: Any) -> int:
        return self._hash(key) % len(self._buckets)

    def _locate(self, key: Any) -> Tuple[SList, Cursor]:
        bucket = self._buckets[self._index_of(key)]
        cursor = bucket.find(
            (key, None), lambda lhs, rhs: self._key_equality(lhs[0], rhs[0])
        )
        return bucket, cursor

    def insert(self, key: Any, value: Any) -> Tuple[Any, bool]:
        """Add ``key`` with ``value`` unless the key is already present.

        Returns the value now stored under the key and whether it was inserted.
        """
        bucket, cursor = self._locate(key)
        if cursor.node is not None:
            return cursor.value()[1], False
        if bucket.is_empty():
            self._buckets_in_use += 1
        self._size += 1
        bucket.push_back((key, value))
        return value, True

    def setdefault(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, inserting ``default`` first if absent."""
        stored, _ = self.insert(key, default)
        return stored

    def find(self, key: Any) -> Optional[Tuple[Any, Any]]:
        """Return the stored ``(key, value)`` pair, or None if the key is absent."""
        _, cursor = self._locate(key)
        return None if cursor.node is None else cursor.value()

    def at(self, key: Any) -> Any:
        """Return the value for ``key``. Raises KeyError if it is absent."""
        entry = self.find(key)
        if entry is None:
            raise KeyError(_MISSING_KEY)
        return entry[1]

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        _, cursor = self._locate(key)
        node = cursor.node
        if node is None:
            self.insert(key, value)
        else:
            node.value = (node.value[0], value)

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Yield every ``(key, value)`` pair in bucket order."""
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"

    def remove(self, key: Any) -> bool:
        """Remove ``key`` and its value; True if the key was present."""
        bucket, cursor = self._locate(key)
        if not bucket.remove_at(cursor):
            return False
        if bucket.is_empty():
            self._buckets_in_use -= 1
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0
        self._buckets_in_use = 0

    def bucket_count(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def load_factor(self) -> float:
        """Fraction of buckets holding at least one entry, from 0 to 1."""
        return self._buckets_in_use / len(self._buckets)

    def resize(self, bucket_count: int) -> None:
        """Rehash every entry into ``bucket_count`` buckets.

        Raises ValueError if the new count is smaller than the current one.
        """
        if bucket_count < len(self._buckets):
            raise ValueError(
                "New bucket count must be greater than current bucket count"
            )
        new_buckets = [SList() for _ in range(bucket_count)]
        for entry in self.items():
            new_buckets[self._hash(entry[0]) % bucket_count].push_back(entry)
        self._buckets = new_buckets
        self._buckets_in_use = sum(1 for bucket in new_buckets if not bucket.is_empty())
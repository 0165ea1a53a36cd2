"""Open-addressing hash tables with caller-supplied hash and equality."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

MAX_FILL = 75

_PRIME_OFFSETS = (
    3, 3, 5, 3, 3, 7, 9, 7, 5, 3, 17, 27, 3, 3, 29, 3, 21, 7, 17,
    15, 9, 43, 35, 15, 29, 3, 11, 3, 11, 15, 17, 25, 53, 31, 9, 7, 23, 15,
)
_PRIMES = tuple((1 << k) + d for k, d in zip(range(3, 41), _PRIME_OFFSETS))


def prime_size(n: int) -> int:
    """Smallest tabulated prime not below ``n``; ``n + 1`` beyond the table."""
    if n > _PRIMES[-1]:
        return n + 1
    return _PRIMES[bisect_left(_PRIMES, n)]


class HashTable:
    """Closed hash table with linear probing.

    ``None`` marks an empty slot and therefore cannot be stored.
    """

    def __init__(
        self,
        n: int | None = None,
        hash_func: Callable[[Any], int] = hash,
        eq_func: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        self._hash = hash_func
        self._eq = eq_func
        self._table: list[Any] = []
        self._table_size = 0
        self._max_size = 0
        self._size = 0
        self._collisions = 0
        if n is not None:
            self.initialize(n)

    def table_size(self) -> int:
        return self._table_size

    def collisions(self) -> int:
        return self._collisions

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Empty the table and release its storage."""
        self._table = []
        self._table_size = 0
        self._max_size = 0
        self._size = 0
        self._collisions = 0

    def initialize(self, n: int) -> None:
        """Empty the table and size it for about ``n`` elements."""
        self._table_size = prime_size(n * 100 // MAX_FILL + 1)
        self._max_size = self._table_size * MAX_FILL // 100
        self._size = 0
        self._collisions = 0
        self._table = [None] * self._table_size

    def rehash(self, n: int = 1) -> None:
        """Rebuild the storage with room for at least ``n`` slots' worth."""
        entries = [e for e in self._table if e is not None]
        self.initialize(max(self._table_size, n))
        for entry in entries:
            HashTable.add(self, entry)

    def add(self, elem: Any) -> Any:
        """Insert ``elem`` unless an equal one is present; return the stored one."""
        if elem is None:
            raise ValueError("None cannot be stored in a hash table")
        if self._table_size == 0:
            self.rehash()
        while True:
            i = self._hash(elem) % self._table_size
            while self._table[i] is not None:
                if self._eq(self._table[i], elem):
                    return self._table[i]
                self._collisions += 1
                i += 1
                if i >= self._table_size:
                    i = 0
            if self._size < self._max_size:
                break
            self.rehash(self._size * 2)
        self._size += 1
        self._table[i] = elem
        return elem

    def get(self, elem: Any) -> Any:
        """Return the stored element equal to ``elem``, or ``None``."""
        if elem is None:
            raise ValueError("None cannot be looked up in a hash table")
        if self._table_size > 0:
            i = self._hash(elem) % self._table_size
            while self._table[i] is not None:
                if self._eq(self._table[i], elem):
                    return self._table[i]
                i += 1
                if i >= self._table_size:
                    i = 0
        return None

    def __iter__(self) -> Iterator[Any]:
        return (e for e in self._table if e is not None)


@dataclass
class _Entry:
    key: Any
    value: Any = None


class HashMap(HashTable):
    """Closed hash map; reading a missing key inserts a default value."""

    def __init__(
        self,
        n: int | None = None,
        hash_func: Callable[[Any], int] = hash,
        eq_func: Callable[[Any, Any], bool] = operator.eq,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        super().__init__(
            n,
            lambda e: hash_func(e.key),
            lambda a, b: eq_func(a.key, b.key),
        )
        self._default = default_factory

    def _entry(self, key: Any) -> _Entry:
        if key is None:
            raise ValueError("None cannot be used as a key")
        stored = self.get(_Entry(key))
        if stored is None:
            value = self._default() if self._default is not None else None
            stored = self.add(_Entry(key, value))
        return stored

    def __getitem__(self, key: Any) -> Any:
        return self._entry(key).value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._entry(key).value = value

    def get_value(self, key: Any) -> Any:
        """Return the value for ``key`` without inserting it, or ``None``."""
        if key is None:
            return None
        stored = self.get(_Entry(key))
        return None if stored is None else stored.value

    def __contains__(self, key: object) -> bool:
        return key is not None and self.get(_Entry(key)) is not None

    def items(self) -> Iterator[tuple[Any, Any]]:
        return ((e.key, e.value) for e in super().__iter__())

    def __iter__(self) -> Iterator[Any]:
        return (e.key for e in super().__iter__())
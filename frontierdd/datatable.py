"""A table of independently sized rows."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class DataTable:
    """Rows of values; each row grows on its own.

    New cells are filled with ``factory()``.
    """

    def __init__(self, n: int = 0, factory: Callable[[], Any] = int) -> None:
        self._factory = factory
        self._rows: list[list[Any]] = [[] for _ in range(n)]

    def init(self, n: int = 0) -> None:
        """Discard all content and create ``n`` empty rows."""
        self._rows = [[] for _ in range(n)]

    def set_num_rows(self, n: int) -> None:
        """Truncate or extend the table to ``n`` rows."""
        if n < len(self._rows):
            del self._rows[n:]
        else:
            self._rows.extend([] for _ in range(n - len(self._rows)))

    def init_row(self, i: int, size: int) -> None:
        """Replace row ``i`` with ``size`` fresh cells."""
        self._rows[i] = [self._factory() for _ in range(size)]

    def add_column(self, i: int) -> int:
        """Append a fresh cell to row ``i`` and return its index."""
        row = self._rows[i]
        row.append(self._factory())
        return len(row) - 1

    def num_rows(self) -> int:
        return len(self._rows)

    def total_size(self) -> int:
        return sum(len(row) for row in self._rows)

    def copy(self) -> "DataTable":
        other = DataTable(0, self._factory)
        other._rows = [list(row) for row in self._rows]
        return other

    def __getitem__(self, i: int) -> list[Any]:
        return self._rows[i]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._rows)

    def __str__(self) -> str:
        return "".join(
            f"{i}: {', '.join(str(v) for v in row)}\n" for i, row in enumerate(self._rows)
        )
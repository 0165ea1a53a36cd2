"""Subsets of the integers used to constrain counts."""

from __future__ import annotations

from abc import ABC, abstractmethod

INT_MAX = 2**31 - 1


class IntSubset(ABC):
    """A set of integers with known lower and upper bounds."""

    @abstractmethod
    def contains(self, x: int) -> bool:
        """Return True if ``x`` belongs to the subset."""

    def lower_bound(self) -> int:
        return 0

    def upper_bound(self) -> int:
        return INT_MAX

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and self.contains(x)


class IntRange(IntSubset):
    """Integers ``min_value, min_value + step, ...`` not above ``max_value``."""

    def __init__(self, min_value: int = 0, max_value: int = INT_MAX, step: int = 1) -> None:
        if step == 0:
            raise ValueError("step must not be zero")
        self._min = min_value
        self._max = max_value
        self._step = step

    def contains(self, x: int) -> bool:
        if x < self._min or self._max < x:
            return False
        return (x - self._min) % self._step == 0

    def lower_bound(self) -> int:
        return self._min

    def upper_bound(self) -> int:
        return self._max

    def __repr__(self) -> str:
        return f"IntRange({self._min}, {self._max}, {self._step})"
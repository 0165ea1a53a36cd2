"""Decision-diagram specification selecting subsets of a given size."""

from __future__ import annotations

from frontierdd.intsubset import IntSubset


class SizeConstraint:
    """Accepts the subsets of ``n`` items whose size lies in ``constraint``.

    The state is the number of items taken so far. Levels run from ``n``
    down to 1; a child level of ``-1`` means accept and ``0`` means reject.
    Without a constraint every subset is accepted.
    """

    ARITY = 2

    def __init__(self, n: int, constraint: IntSubset | None = None) -> None:
        if n < 1:
            raise ValueError("n must be at least 1")
        self.n = n
        self.constraint = constraint

    def get_root(self) -> tuple[int, int]:
        """Return ``(level, count)`` for the root."""
        count = 0
        if self.constraint is not None and self.n < self.constraint.lower_bound():
            return 0, count
        return self.n, count

    def get_child(self, count: int, level: int, value: int) -> tuple[int, int]:
        """Return ``(child_level, child_count)`` for branch ``value`` at ``level``."""
        constraint = self.constraint
        if constraint is None:
            level -= 1
            return (level if level >= 1 else -1), count

        if value:
            if count >= constraint.upper_bound():
                return 0, count
            count += 1
        elif count + level <= constraint.lower_bound():
            return 0, count

        level -= 1
        if level >= 1:
            return level, count
        return (-1 if constraint.contains(count) else 0), count
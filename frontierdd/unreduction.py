"""Specifications that expand a reduced diagram into one with every level present."""

from __future__ import annotations

from typing import Any


class BddUnreduction:
    """Wraps a spec so that every level from ``num_vars`` down to 1 is visited.

    A state is ``(inner_level, inner_state)``. Levels the inner spec skips
    pass through unchanged, as a BDD would read them.
    """

    _ZDD = False

    def __init__(self, spec: Any, num_vars: int) -> None:
        self.spec = spec
        self.num_vars = num_vars
        self.ARITY = getattr(spec, "ARITY", 2)

    def get_root(self) -> tuple[int, tuple[int, Any]]:
        """Return ``(level, state)`` for the root."""
        inner_level, inner_state = self.spec.get_root()
        state = (inner_level, inner_state)
        if inner_level == 0:
            return 0, state
        if inner_level >= self.num_vars:
            self.num_vars = inner_level
        return (self.num_vars if self.num_vars > 0 else -1), state

    def get_child(self, state: tuple[int, Any], level: int, value: int) -> tuple[int, tuple[int, Any]]:
        """Return ``(child_level, child_state)`` for branch ``value`` at ``level``."""
        inner_level, inner_state = state
        if inner_level == level:
            inner_level, inner_state = self.spec.get_child(inner_state, level, value)
            if inner_level == 0:
                return 0, (0, inner_state)
        elif self._ZDD and value:
            return 0, state
        level -= 1
        if inner_level > level:
            raise ValueError("inner spec jumped above the current level")
        child = (inner_level, inner_state)
        return (level if level > 0 else inner_level), child

    def merge_states(self, state1: tuple[int, Any], state2: tuple[int, Any]) -> int:
        """Delegate state merging to the inner spec; 0 when it has none."""
        merge = getattr(self.spec, "merge_states", None)
        if merge is None:
            return 0
        return merge(state1[1], state2[1])

    def print_state(self, state: tuple[int, Any], level: int) -> str:
        """Render a state as ``<inner_level,inner_state>``."""
        inner_level, inner_state = state
        printer = getattr(self.spec, "print_state", None)
        inner = printer(inner_state, level) if printer is not None else str(inner_state)
        return f"<{inner_level},{inner}>"


class ZddUnreduction(BddUnreduction):
    """Like :class:`BddUnreduction`, but a 1-branch at a skipped level is rejected."""

    _ZDD = True
"""Breadth-first, top-down construction of decision diagrams from specs.

A spec provides ``get_root() -> (level, state)`` and
``get_child(state, level, value) -> (child_level, child_state)``. Level 0
means the 0-terminal, a negative level means the 1-terminal, and a positive
level must be lower than the level it was reached from. States must be
hashable; equal states at one level share a node. A spec may also provide
``merge_states(s1, s2)``, returning 1 to drop the first state, 2 to drop the
second, or 0 to keep both, and an ``ARITY`` attribute (2 by default).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, order=True)
class NodeId:
    """Position of a node: ``row`` is its level, ``col`` its index on that level.

    Terminals live on row 0: column 0 is the 0-terminal, column 1 the 1-terminal.
    """

    row: int
    col: int

    @property
    def is_terminal(self) -> bool:
        return self.row == 0

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"


ZERO = NodeId(0, 0)
ONE = NodeId(0, 1)


@dataclass(frozen=True)
class Diagram:
    """A built diagram: ``rows[level][col]`` holds the children of a node."""

    rows: tuple[tuple[tuple[NodeId, ...], ...], ...]
    root: NodeId
    arity: int = 2

    def child(self, node: NodeId, branch: int) -> NodeId:
        """Return the ``branch`` child of a non-terminal ``node``."""
        if node.is_terminal:
            raise ValueError("terminal nodes have no children")
        if not 0 <= branch < self.arity:
            raise ValueError(f"branch must be in 0..{self.arity - 1}")
        return self.rows[node.row][node.col][branch]

    def node_count(self) -> int:
        """Number of non-terminal nodes stored."""
        return sum(len(row) for row in self.rows)

    def count(self) -> int:
        """Number of paths from the root to the 1-terminal."""
        memo: dict[NodeId, int] = {ZERO: 0, ONE: 1}
        stack = [self.root]
        while stack:
            node = stack[-1]
            if node in memo:
                stack.pop()
                continue
            children = self.rows[node.row][node.col]
            missing = [c for c in children if c not in memo]
            if missing:
                stack.extend(missing)
            else:
                memo[node] = sum(memo[c] for c in children)
                stack.pop()
        return memo[self.root]

    def sets(self) -> Iterator[frozenset[int]]:
        """Yield, for each accepting path, the levels left by a non-zero branch."""

        def walk(node: NodeId, taken: tuple[int, ...]) -> Iterator[frozenset[int]]:
            if node == ZERO:
                return
            if node == ONE:
                yield frozenset(taken)
                return
            for branch, child in enumerate(self.rows[node.row][node.col]):
                yield from walk(child, taken + (node.row,) if branch else taken)

        yield from walk(self.root, ())


class _Pending:
    __slots__ = ("state", "src", "node_id", "col")

    def __init__(self, state: Any, src: tuple[int, int, int] | None) -> None:
        self.state = state
        self.src = src
        self.node_id: NodeId | None = None
        self.col = -1


class DdBuilder:
    """Builds a diagram level by level from the top."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        self._arity = getattr(spec, "ARITY", 2)
        self._merge = getattr(spec, "merge_states", None)
        self._pending: list[list[_Pending]] = [[]]
        self._output: list[list[list[NodeId]]] = [[]]
        self._root = ZERO
        self._one_state: Any = None
        self._one_src: list[tuple[int, int, int]] = []

    def _merge_states(self, first: Any, second: Any) -> int:
        return self._merge(first, second) if self._merge is not None else 0

    def _point(self, src: tuple[int, int, int] | None, node_id: NodeId) -> None:
        if src is None:
            self._root = node_id
        else:
            row, col, branch = src
            self._output[row][col][branch] = node_id

    def initialize(self) -> int:
        """Start a build; return the root level, or 0 if the root is a terminal."""
        level, state = self.spec.get_root()
        self._one_state = None
        self._one_src = []
        if level <= 0:
            self._root = ONE if level else ZERO
            self._pending = [[]]
            self._output = [[]]
            return 0
        self._root = ZERO
        self._pending = [[] for _ in range(level + 1)]
        self._output = [[] for _ in range(level + 1)]
        self._pending[level].append(_Pending(state, None))
        return level

    def _reach_one(self, state: Any, src: tuple[int, int, int]) -> NodeId:
        if not self._one_src:
            self._one_state = state
            self._one_src.append(src)
            return ONE
        verdict = self._merge_states(self._one_state, state)
        if verdict == 1:
            for row, col, branch in self._one_src:
                self._output[row][col][branch] = ZERO
            self._one_src = [src]
            self._one_state = state
            return ONE
        if verdict == 2:
            return ZERO
        self._one_src.append(src)
        return ONE

    def construct(self, level: int) -> None:
        """Build the nodes of ``level`` and schedule their children."""
        if not 0 < level < len(self._pending):
            raise ValueError(f"level {level} is out of range")
        entries = self._pending[level]
        self._pending[level] = []
        row = self._output[level]
        next_col = len(row)
        uniq: dict[Any, _Pending] = {}
        live: list[_Pending] = []

        for entry in entries:
            first = uniq.get(entry.state)
            if first is not None:
                verdict = self._merge_states(first.state, entry.state)
                if verdict == 2:
                    self._point(entry.src, ZERO)
                    continue
                if verdict != 1:
                    self._point(entry.src, first.node_id)
                    continue
                first.node_id = ZERO  # forwarded to the 0-terminal
            entry.col = next_col
            entry.node_id = NodeId(level, next_col)
            next_col += 1
            self._point(entry.src, entry.node_id)
            uniq[entry.state] = entry
            live.append(entry)

        row.extend([ZERO] * self._arity for _ in live)

        for entry in live:
            if entry.node_id == ZERO:
                continue
            node = row[entry.col]
            for branch in range(self._arity):
                child_level, child_state = self.spec.get_child(entry.state, level, branch)
                src = (level, entry.col, branch)
                if child_level == 0:
                    node[branch] = ZERO
                elif child_level < 0:
                    node[branch] = self._reach_one(child_state, src)
                elif child_level >= level:
                    raise ValueError(
                        f"spec went from level {level} up to level {child_level}"
                    )
                else:
                    self._pending[child_level].append(_Pending(child_state, src))

    def result(self) -> Diagram:
        """Return the finished diagram."""
        if any(self._pending):
            raise RuntimeError("construction is incomplete")
        rows = tuple(tuple(tuple(node) for node in row) for row in self._output)
        return Diagram(rows, self._root, self._arity)


def build(spec: Any) -> Diagram:
    """Build the diagram that ``spec`` describes."""
    builder = DdBuilder(spec)
    top = builder.initialize()
    for level in range(top, 0, -1):
        builder.construct(level)
    return builder.result()
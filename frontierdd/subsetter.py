"""Breadth-first restriction of a ZDD to the sets that a spec accepts.

The input diagram is read with zero-suppressed semantics: a level that a
path skips is a level whose item is not taken. The spec follows the same
protocol as for :mod:`frontierdd.builder`: ``get_root() -> (level, state)``
and ``get_child(state, level, value) -> (child_level, child_state)``, with
hashable states and an optional ``merge_states(s1, s2)``.
"""

from __future__ import annotations

from typing import Any

from frontierdd.builder import ONE, ZERO, Diagram, NodeId


class _Pending:
    __slots__ = ("state", "src", "node_id", "col")

    def __init__(self, state: Any, src: tuple[int, int, int] | None) -> None:
        self.state = state
        self.src = src
        self.node_id: NodeId | None = None
        self.col = -1


class ZddSubsetter:
    """Builds the ZDD of the sets in ``diagram`` that ``spec`` also accepts."""

    def __init__(self, diagram: Diagram, spec: Any) -> None:
        arity = getattr(spec, "ARITY", 2)
        if arity != diagram.arity:
            raise ValueError(
                f"spec arity {arity} does not match diagram arity {diagram.arity}"
            )
        self.diagram = diagram
        self.spec = spec
        self._arity = arity
        self._merge = getattr(spec, "merge_states", None)
        self._work: list[dict[int, list[_Pending]]] = [{}]
        self._output: list[list[list[NodeId]]] = [[]]
        self._root = diagram.root
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

    def _down_table(self, node: NodeId, branch: int, zerosup_level: int) -> tuple[int, NodeId]:
        """Follow ``branch`` then 0-branches down to ``zerosup_level``."""
        zerosup_level = max(zerosup_level, 0)
        node = self.diagram.child(node, branch)
        while node.row > zerosup_level:
            node = self.diagram.child(node, 0)
        return (-1 if node == ONE else node.row), node

    def _spec_child(self, state: Any, level: int, value: int) -> tuple[int, Any]:
        child_level, child_state = self.spec.get_child(state, level, value)
        if child_level >= level:
            raise ValueError(f"spec went from level {level} up to level {child_level}")
        return child_level, child_state

    def _down_spec(self, state: Any, level: int, branch: int, zerosup_level: int) -> tuple[int, Any]:
        """Advance the spec along ``branch`` then 0-branches down to ``zerosup_level``."""
        zerosup_level = max(zerosup_level, 0)
        child_level, state = self._spec_child(state, level, branch)
        while child_level > zerosup_level:
            child_level, state = self._spec_child(state, child_level, 0)
        return child_level, state

    def _align(self, spec_level: int, state: Any, table_level: int, node: NodeId) -> tuple[int, Any, int, NodeId]:
        """Descend the deeper of the two walks until both stand on one level."""
        while spec_level != 0 and table_level != 0 and spec_level != table_level:
            if spec_level < table_level:
                table_level, node = self._down_table(node, 0, spec_level)
            else:
                spec_level, state = self._down_spec(state, spec_level, 0, table_level)
        return spec_level, state, table_level, node

    def initialize(self) -> int:
        """Start a run; return the top level, or 0 if the result is a terminal."""
        self._one_state = None
        self._one_src = []
        root = self.diagram.root
        spec_level, state = self.spec.get_root()
        table_level = -1 if root == ONE else root.row
        spec_level, state, table_level, root = self._align(spec_level, state, table_level, root)

        if spec_level <= 0 or table_level <= 0:
            self._root = ONE if spec_level != 0 and table_level != 0 else ZERO
            self._work = [{}]
            self._output = [[]]
            return 0

        self._root = ZERO
        self._work = [{} for _ in range(spec_level + 1)]
        self._output = [[] for _ in range(spec_level + 1)]
        self._work[spec_level][root.col] = [_Pending(state, None)]
        return spec_level

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

    def subset(self, level: int) -> None:
        """Build the nodes of ``level`` and schedule their children."""
        if not 0 < level < len(self._work):
            raise ValueError(f"level {level} is out of range")
        work = self._work[level]
        self._work[level] = {}
        row = self._output[level]
        live: list[tuple[int, _Pending]] = []

        for col in sorted(work):
            uniq: dict[Any, _Pending] = {}
            for entry in work[col]:
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
                entry.col = len(row) + len(live)
                entry.node_id = NodeId(level, entry.col)
                self._point(entry.src, entry.node_id)
                uniq[entry.state] = entry
                live.append((col, entry))

        row.extend([ZERO] * self._arity for _ in live)

        for table_col, entry in live:
            if entry.node_id == ZERO:
                continue
            node = row[entry.col]
            for branch in range(self._arity):
                src = (level, entry.col, branch)
                table_level, target = self._down_table(NodeId(level, table_col), branch, level - 1)
                spec_level, state = self._down_spec(entry.state, level, branch, table_level)
                spec_level, state, table_level, target = self._align(
                    spec_level, state, table_level, target
                )
                if spec_level <= 0 or table_level <= 0:
                    if spec_level == 0 or table_level == 0:
                        node[branch] = ZERO
                    else:
                        node[branch] = self._reach_one(state, src)
                else:
                    self._work[spec_level].setdefault(target.col, []).append(
                        _Pending(state, src)
                    )

    def result(self) -> Diagram:
        """Return the finished diagram."""
        if any(self._work):
            raise RuntimeError("subsetting is incomplete")
        rows = tuple(tuple(tuple(node) for node in row) for row in self._output)
        return Diagram(rows, self._root, self._arity)


def zdd_subset(diagram: Diagram, spec: Any) -> Diagram:
    """Return the ZDD of the sets in ``diagram`` that ``spec`` accepts."""
    subsetter = ZddSubsetter(diagram, spec)
    top = subsetter.initialize()
    for level in range(top, 0, -1):
        subsetter.subset(level)
    return subsetter.result()
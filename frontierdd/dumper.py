"""Rendering of a spec's decision diagram in Graphviz (dot) format.

The spec follows the protocol of :mod:`frontierdd.builder`:
``get_root() -> (level, state)`` and
``get_child(state, level, value) -> (child_level, child_state)`` with
hashable states. Optional members are ``ARITY`` (2 by default),
``merge_states(s1, s2)``, ``print_state(state, level)`` and
``print_level(level)``.
"""

from __future__ import annotations

from typing import Any

from frontierdd.builder import ONE, ZERO, NodeId

_BRANCH_COLORS = {1: "blue", 2: "red"}


class _Entry:
    __slots__ = ("state", "node_id")

    def __init__(self, state: Any, node_id: NodeId) -> None:
        self.state = state
        self.node_id = node_id


class DdDumper:
    """Walks a spec top-down and writes every node it reaches as dot text."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        self._arity = getattr(spec, "ARITY", 2)
        self._merge = getattr(spec, "merge_states", None)
        self._levels: list[list[_Entry]] = []
        self._uniq: list[dict[Any, _Entry]] = []
        self._one_state: Any = None
        self._one_code = 1

    def _merge_states(self, first: Any, second: Any) -> int:
        return self._merge(first, second) if self._merge is not None else 0

    def _state_label(self, state: Any, level: int) -> str:
        printer = getattr(self.spec, "print_state", None)
        return printer(state, level) if printer is not None else str(state)

    def _level_label(self, level: int) -> str:
        printer = getattr(self.spec, "print_level", None)
        return printer(level) if printer is not None else str(level)

    @property
    def _one_id(self) -> NodeId:
        return NodeId(0, self._one_code)

    def dump(self, title: str = "") -> str:
        """Return the whole diagram as a dot document titled ``title``."""
        level, state = self.spec.get_root()
        self._one_state = state
        self._one_code = 1
        out = [f'digraph "{title}" {{\n']

        if level == 0:
            if title:
                out.append('  labelloc="t";\n')
                out.append(f'  label="{title}";\n')
        elif level < 0:
            out.append(f'  "^" [shape=none,label="{title}"];\n')
            out.append(f'  "^" -> "{self._one_id}" [style=dashed];\n')
            out.append(f'  "{self._one_id}" [shape=square,margin=0.05,width=0,label="T"];\n')
        else:
            root = NodeId(level, 0)
            for i in range(level, 0, -1):
                out.append(f'  {i} [shape=none,label="{self._level_label(i)}"];\n')
            for i in range(level - 1, 0, -1):
                out.append(f"  {i + 1} -> {i} [style=invis];\n")
            out.append(f'  "^" [shape=none,label="{title}"];\n')
            out.append(f'  "^" -> "{root}" [style=dashed];\n')

            self._levels = [[] for _ in range(level + 1)]
            self._uniq = [{} for _ in range(level + 1)]
            root_entry = _Entry(state, root)
            self._levels[level].append(root_entry)
            self._uniq[level][state] = root_entry

            for i in range(level, 0, -1):
                self._dump_step(out, i)

            for code in range(2, self._one_code):
                out.append(f'  "{NodeId(0, code)}" [style=invis];\n')
            out.append(f'  "{self._one_id}" [shape=square,margin=0.05,width=0,label="T"];\n')

        out.append("}\n")
        return "".join(out)

    def _reach_one(self, state: Any) -> NodeId:
        if self._one_code == 1:
            self._one_code = 2
            self._one_state = state
            return self._one_id
        verdict = self._merge_states(self._one_state, state)
        if verdict == 1:
            self._one_code += 1
            self._one_state = state
            return self._one_id
        if verdict == 2:
            return ZERO
        return self._one_id

    def _reach_node(self, state: Any, level: int) -> NodeId:
        entries = self._levels[level]
        uniq = self._uniq[level]
        candidate = NodeId(level, len(entries))
        first = uniq.get(state)
        if first is not None:
            verdict = self._merge_states(first.state, state)
            if verdict == 2:
                return ZERO
            if verdict != 1:
                return first.node_id
            first.node_id = ZERO  # forwarded to the 0-terminal
        entry = _Entry(state, candidate)
        entries.append(entry)
        uniq[state] = entry
        return candidate

    def _dump_step(self, out: list[str], level: int) -> None:
        entries = self._levels[level]
        children = [[ZERO] * self._arity for _ in entries]

        for j in reversed(range(len(entries))):
            entry = entries[j]
            out.append(
                f'  "{NodeId(level, j)}" [label="{self._state_label(entry.state, level)}"];\n'
            )
            if entry.node_id == ZERO:
                continue
            for branch in range(self._arity):
                child_level, child_state = self.spec.get_child(entry.state, level, branch)
                if child_level == 0:
                    child = ZERO
                elif child_level < 0:
                    child = self._reach_one(child_state)
                elif child_level >= level:
                    raise ValueError(
                        f"spec went from level {level} up to level {child_level}"
                    )
                else:
                    child = self._reach_node(child_state, child_level)
                children[j][branch] = child

        for j, branches in enumerate(children):
            source = NodeId(level, j)
            for branch, child in enumerate(branches):
                if child == ZERO:
                    continue
                if child == ONE:
                    child = self._one_id
                if branch == 0:
                    style = "dashed"
                else:
                    style = "solid"
                    if self._arity > 2:
                        style += ",color=" + _BRANCH_COLORS.get(branch, "green")
                out.append(f'  "{source}" -> "{child}" [style={style}];\n')

        ranks = "".join(f'; "{NodeId(level, j)}"' for j in range(len(entries)))
        out.append(f"  {{rank=same; {level}{ranks}}}\n")
        self._uniq[level] = {}


def dump_dot(spec: Any, title: str = "") -> str:
    """Return the dot rendering of the diagram that ``spec`` describes."""
    return DdDumper(spec).dump(title)
"""Construction of right-linear vtrees over groups of balanced subtrees."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(eq=False)
class VtreeNode:
    """A vtree node; leaves carry a variable number, internal nodes have var 0."""

    left: Optional["VtreeNode"] = None
    right: Optional["VtreeNode"] = None
    position: int = 0
    var: int = 0

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def group_sizes(edge_count: int, group_size: int) -> list[int]:
    """Split ``edge_count`` variables into groups of ``group_size`` plus a remainder."""
    if group_size <= 0:
        raise ValueError("group size must be positive")
    if edge_count <= 0:
        raise ValueError("edge count must be positive")
    full, rest = divmod(edge_count, group_size)
    return [group_size] * full + ([rest] if rest else [])


def balanced_vtree(left: int, right: int) -> VtreeNode | None:
    """Balanced tree with one leaf for each index in ``left..right``."""
    if left > right:
        return None
    if left == right:
        return VtreeNode()
    middle = (left + right) // 2
    return VtreeNode(balanced_vtree(left, middle), balanced_vtree(middle + 1, right))


def right_linear_vtree(groups: list[int]) -> VtreeNode:
    """Right-linear spine whose left children are balanced trees, one per group."""
    if not groups:
        raise ValueError("at least one group is required")
    if any(g <= 0 for g in groups):
        raise ValueError("group sizes must be positive")
    last = groups[-1]
    tail = balanced_vtree(0, last - 1) if last > 1 else VtreeNode()
    for size in reversed(groups[:-1]):
        tail = VtreeNode(balanced_vtree(0, size - 1), tail)
    return tail


def number_vtree(root: VtreeNode) -> VtreeNode:
    """Assign in-order positions from 0 and leaf variables from 1."""
    stack: list[VtreeNode] = []
    node: VtreeNode | None = root
    position = 0
    var = 1
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if node.is_leaf:
            node.var = var
            var += 1
        node.position = position
        position += 1
        node = node.right
    return root


def build_vtree(edge_count: int, group_size: int) -> VtreeNode:
    """Build and number the vtree for ``edge_count`` variables."""
    return number_vtree(right_linear_vtree(group_sizes(edge_count, group_size)))


def format_vtree(root: VtreeNode) -> str:
    """Render the vtree in the ``vtree`` file format, children before parents."""
    order: list[VtreeNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if node.var == 0:
            stack.append(node.left)
            stack.append(node.right)
    lines = []
    for node in reversed(order):
        if node.var != 0:
            lines.append(f"L {node.position} {node.var}")
        else:
            lines.append(f"I {node.position} {node.left.position} {node.right.position}")
    return f"vtree {len(lines)}\n" + "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Write ``vtree/<graph_name>.vtree`` for the given edge count and group size."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 3:
        prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "vtree"
        print(f"Usage: {prog} <graph_name> <edge_count> <arg_m>", file=sys.stderr)
        return 1
    name, edge_text, group_text = argv
    try:
        edge_count = int(edge_text)
        group_size = int(group_text)
        if group_size <= 0:
            raise ValueError("group size must be positive")
        full, rest = divmod(edge_count, group_size)
        print(f"x1: {full} x2:{rest}")
        root = build_vtree(edge_count, group_size)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    path = Path("vtree") / f"{name}.vtree"
    try:
        path.write_text(format_vtree(root))
    except OSError as exc:
        print(f"Unable to write file: {path} ({exc})", file=sys.stderr)
        return 1
    return 0
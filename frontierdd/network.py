"""Undirected networks read from edge-list files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

Edge = tuple[int, int]


@dataclass
class Network:
    """A graph given by its vertex count and edge list (each edge ordered low, high)."""

    n: int = 0
    edges: list[Edge] = field(default_factory=list)

    @property
    def m(self) -> int:
        return len(self.edges)

    @classmethod
    def from_file(cls, path: str | Path) -> "Network":
        """Read whitespace-separated vertex pairs; vertex count is the largest label."""
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        if len(tokens) % 2:
            raise ValueError(f"odd number of vertex labels in {path}")
        try:
            numbers = [int(t) for t in tokens]
        except ValueError as exc:
            raise ValueError(f"invalid vertex label in {path}") from exc
        edges: list[Edge] = []
        n = 0
        for u, v in zip(numbers[::2], numbers[1::2]):
            if u > v:
                u, v = v, u
            edges.append((u, v))
            n = max(n, u, v)
        return cls(n, edges)

    def num_edges(self) -> int:
        return self.m

    def num_vertices(self) -> int:
        return self.n
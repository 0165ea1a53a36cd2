from itertools import chain, combinations

import pytest

from frontierdd.builder import ONE, ZERO, DdBuilder, Diagram, NodeId, build
from frontierdd.intsubset import IntRange
from frontierdd.size_constraint import SizeConstraint
from frontierdd.unreduction import ZddUnreduction


class _SizeSpec:
    """Adapts SizeConstraint to the (state, level, value) calling order."""

    ARITY = 2

    def __init__(self, inner):
        self.inner = inner

    def get_root(self):
        level, count = self.inner.get_root()
        return level, count

    def get_child(self, state, level, value):
        return self.inner.get_child(state, level, value)


def _subsets(n, sizes=None):
    items = range(1, n + 1)
    every = chain.from_iterable(combinations(items, k) for k in range(n + 1))
    return {frozenset(s) for s in every if sizes is None or len(s) in sizes}


def test_exact_size_sets():
    diagram = build(_SizeSpec(SizeConstraint(4, IntRange(2, 2))))
    assert set(diagram.sets()) == _subsets(4, {2})
    assert diagram.count() == len(_subsets(4, {2}))


def test_unconstrained_gives_power_set_with_one_node_per_level():
    diagram = build(_SizeSpec(SizeConstraint(3)))
    assert set(diagram.sets()) == _subsets(3)
    assert diagram.node_count() == 3
    assert diagram.root == NodeId(3, 0)


def test_impossible_constraint_gives_zero_root():
    diagram = build(_SizeSpec(SizeConstraint(2, IntRange(5, 9))))
    assert diagram.root == ZERO
    assert diagram.node_count() == 0
    assert diagram.count() == 0


class _AcceptAll:
    def get_root(self):
        return -1, None

    def get_child(self, state, level, value):
        raise AssertionError("not reached")


def test_terminal_root():
    builder = DdBuilder(_AcceptAll())
    assert builder.initialize() == 0
    diagram = builder.result()
    assert diagram.root == ONE
    assert list(diagram.sets()) == [frozenset()]


class _Upward:
    def get_root(self):
        return 2, 0

    def get_child(self, state, level, value):
        return 3, state


def test_child_level_above_parent_is_rejected():
    builder = DdBuilder(_Upward())
    assert builder.initialize() == 2
    with pytest.raises(ValueError):
        builder.construct(2)


def test_construct_out_of_range():
    builder = DdBuilder(_SizeSpec(SizeConstraint(2)))
    builder.initialize()
    with pytest.raises(ValueError):
        builder.construct(3)
    with pytest.raises(ValueError):
        builder.construct(0)


def test_result_before_finishing_raises():
    builder = DdBuilder(_SizeSpec(SizeConstraint(3)))
    builder.initialize()
    builder.construct(3)
    with pytest.raises(RuntimeError):
        builder.result()


def test_stepwise_matches_build():
    spec = SizeConstraint(3, IntRange(1, 2))
    builder = DdBuilder(_SizeSpec(spec))
    top = builder.initialize()
    assert top == 3
    for level in range(top, 0, -1):
        builder.construct(level)
    assert builder.result() == build(_SizeSpec(spec))


class _KeepLargest:
    """Counts taken items; among accepting states only the largest survives."""

    def get_root(self):
        return 2, 0

    def get_child(self, state, level, value):
        state += value
        return (level - 1 if level > 1 else -1), state

    def merge_states(self, first, second):
        if second > first:
            return 1
        if second < first:
            return 2
        return 0


def test_merge_states_at_terminal():
    diagram = build(_KeepLargest())
    assert set(diagram.sets()) == {frozenset({1, 2})}


def test_child_of_terminal_raises():
    diagram = build(_SizeSpec(SizeConstraint(2)))
    with pytest.raises(ValueError):
        diagram.child(ONE, 0)
    with pytest.raises(ValueError):
        diagram.child(diagram.root, 2)


def test_children_are_below_parent():
    diagram = build(_SizeSpec(SizeConstraint(4, IntRange(1, 3))))
    for level, row in enumerate(diagram.rows):
        for col in range(len(row)):
            for branch in range(diagram.arity):
                child = diagram.child(NodeId(level, col), branch)
                assert child.is_terminal or child.row < level


def test_with_zdd_unreduction():
    spec = ZddUnreduction(_SizeSpec(SizeConstraint(3, IntRange(1, 1))), 3)
    diagram = build(spec)
    assert set(diagram.sets()) == _subsets(3, {1})


def test_diagram_is_immutable():
    diagram = build(_SizeSpec(SizeConstraint(2)))
    assert isinstance(diagram, Diagram)
    with pytest.raises(AttributeError):
        diagram.root = ZERO
    assert diagram.root == NodeId(2, 0)
    assert set(diagram.sets()) == _subsets(2)
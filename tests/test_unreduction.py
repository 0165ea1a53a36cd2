from itertools import product

from frontierdd.intsubset import IntRange
from frontierdd.size_constraint import SizeConstraint
from frontierdd.unreduction import BddUnreduction, ZddUnreduction


def _accepts(spec, bits):
    """Walk ``spec`` along ``bits`` (index 0 is the top level)."""
    level, state = spec.get_root()
    n = len(bits)
    while level > 0:
        level, state = spec.get_child(state, level, bits[n - level])
    return level == -1


class _AcceptAll:
    ARITY = 2

    def get_root(self):
        return -1, None

    def get_child(self, state, level, value):
        raise AssertionError("never called")


class _Merging:
    ARITY = 2

    def get_root(self):
        return 1, "s"

    def get_child(self, state, level, value):
        return -1, state

    def merge_states(self, a, b):
        return 1 if a == b else 2

    def print_state(self, state, level):
        return f"{state}@{level}"


def test_bdd_same_size_matches_constraint():
    spec = BddUnreduction(SizeConstraint(3, IntRange(2, 2)), 3)
    for bits in product((0, 1), repeat=3):
        assert _accepts(spec, bits) == (sum(bits) == 2)


def test_bdd_extra_levels_are_dont_care():
    spec = BddUnreduction(SizeConstraint(2), 4)
    results = [_accepts(spec, bits) for bits in product((0, 1), repeat=4)]
    assert results == [True] * 16


def test_zdd_extra_levels_must_be_zero():
    spec = ZddUnreduction(SizeConstraint(2), 4)
    for bits in product((0, 1), repeat=4):
        assert _accepts(spec, bits) == (bits[0] == 0 and bits[1] == 0)


def test_every_level_visited():
    spec = BddUnreduction(SizeConstraint(2), 5)
    level, state = spec.get_root()
    seen = [level]
    while level > 0:
        level, state = spec.get_child(state, level, 0)
        seen.append(level)
    assert seen == [5, 4, 3, 2, 1, -1]


def test_root_raises_num_vars():
    spec = BddUnreduction(SizeConstraint(5), 2)
    level, _ = spec.get_root()
    assert level == 5
    assert spec.num_vars == 5


def test_root_rejected_when_inner_rejects():
    spec = BddUnreduction(SizeConstraint(2, IntRange(3, 4)), 4)
    level, _ = spec.get_root()
    assert level == 0


def test_terminal_inner_root():
    assert BddUnreduction(_AcceptAll(), 0).get_root()[0] == -1
    spec = BddUnreduction(_AcceptAll(), 2)
    assert all(_accepts(spec, bits) for bits in product((0, 1), repeat=2))
    zdd = ZddUnreduction(_AcceptAll(), 2)
    assert [_accepts(zdd, b) for b in product((0, 1), repeat=2)] == [True, False, False, False]


def test_merge_states_delegation():
    plain = BddUnreduction(SizeConstraint(3), 3)
    _, state = plain.get_root()
    assert plain.merge_states(state, state) == 0
    merging = BddUnreduction(_Merging(), 1)
    _, s = merging.get_root()
    assert merging.merge_states(s, s) == 1
    assert merging.merge_states(s, (1, "t")) == 2


def test_print_state():
    spec = BddUnreduction(SizeConstraint(3), 3)
    level, state = spec.get_root()
    assert spec.print_state(state, level) == "<3,0>"
    merging = BddUnreduction(_Merging(), 2)
    level, state = merging.get_root()
    assert merging.print_state(state, level) == "<1,s@2>"


def test_arity_follows_inner_spec():
    assert BddUnreduction(SizeConstraint(3), 3).ARITY == SizeConstraint.ARITY
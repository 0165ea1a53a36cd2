import re

import pytest

from frontierdd.dumper import DdDumper, dump_dot
from frontierdd.intsubset import IntRange
from frontierdd.size_constraint import SizeConstraint


class _AcceptRoot:
    def get_root(self):
        return -1, None

    def get_child(self, state, level, value):
        raise AssertionError("never called")


class _TwoOnes:
    """Both branches accept, with states that always displace each other."""

    def get_root(self):
        return 1, "a"

    def get_child(self, state, level, value):
        return -1, ("x", "y")[value]

    def merge_states(self, first, second):
        return 1


class _Ternary:
    ARITY = 3

    def get_root(self):
        return 1, 0

    def get_child(self, state, level, value):
        return -1, 0


class _GoesUp:
    def get_root(self):
        return 1, 0

    def get_child(self, state, level, value):
        return 2, 0


class _Named:
    def get_root(self):
        return 1, 0

    def get_child(self, state, level, value):
        return (-1 if value else 0), 0

    def print_level(self, level):
        return f"e{level}"

    def print_state(self, state, level):
        return f"s{state}@{level}"


def test_exactly_one_of_two_worked_example():
    text = dump_dot(SizeConstraint(2, IntRange(1, 1)), "t")
    expected = (
        'digraph "t" {\n'
        '  2 [shape=none,label="2"];\n'
        '  1 [shape=none,label="1"];\n'
        "  2 -> 1 [style=invis];\n"
        '  "^" [shape=none,label="t"];\n'
        '  "^" -> "2:0" [style=dashed];\n'
        '  "2:0" [label="0"];\n'
        '  "2:0" -> "1:0" [style=dashed];\n'
        '  "2:0" -> "1:1" [style=solid];\n'
        '  {rank=same; 2; "2:0"}\n'
        '  "1:1" [label="1"];\n'
        '  "1:0" [label="0"];\n'
        '  "1:0" -> "0:2" [style=solid];\n'
        '  "1:1" -> "0:2" [style=dashed];\n'
        '  {rank=same; 1; "1:0"; "1:1"}\n'
        '  "0:2" [shape=square,margin=0.05,width=0,label="T"];\n'
        "}\n"
    )
    assert text == expected


def test_rejecting_root_with_title():
    text = dump_dot(SizeConstraint(2, IntRange(5, 6)), "t")
    assert text == 'digraph "t" {\n  labelloc="t";\n  label="t";\n}\n'


def test_rejecting_root_without_title():
    assert dump_dot(SizeConstraint(2, IntRange(5, 6))) == 'digraph "" {\n}\n'


def test_accepting_root():
    lines = dump_dot(_AcceptRoot(), "t").splitlines()
    assert lines[1] == '  "^" [shape=none,label="t"];'
    assert lines[2] == '  "^" -> "0:1" [style=dashed];'
    assert lines[3] == '  "0:1" [shape=square,margin=0.05,width=0,label="T"];'
    assert lines[-1] == "}"


def test_displaced_one_terminal_becomes_invisible():
    text = DdDumper(_TwoOnes()).dump("m")
    assert '  "0:2" [style=invis];\n' in text
    assert '  "0:3" [shape=square,margin=0.05,width=0,label="T"];\n' in text
    assert '  "1:0" -> "0:2" [style=dashed];\n' in text
    assert '  "1:0" -> "0:3" [style=solid];\n' in text


def test_ternary_edges_are_coloured():
    text = dump_dot(_Ternary())
    assert '  "1:0" -> "0:2" [style=dashed];\n' in text
    assert '  "1:0" -> "0:2" [style=solid,color=blue];\n' in text
    assert '  "1:0" -> "0:2" [style=solid,color=red];\n' in text


def test_custom_level_and_state_labels():
    text = dump_dot(_Named())
    assert '  1 [shape=none,label="e1"];\n' in text
    assert '  "1:0" [label="s0@1"];\n' in text


def test_spec_going_up_is_rejected():
    with pytest.raises(ValueError):
        dump_dot(_GoesUp())


def test_every_edge_target_is_declared():
    text = dump_dot(SizeConstraint(4, IntRange(1, 3)), "g")
    declared = set(re.findall(r'^  "(\d+:\d+)" \[', text, re.MULTILINE))
    targets = re.findall(r'-> "(\d+:\d+)"', text)
    assert targets
    assert set(targets) <= declared | {"2:0"} | declared
    assert all(t in declared or t.startswith("4:") for t in targets)


def test_dump_is_repeatable():
    dumper = DdDumper(SizeConstraint(3, IntRange(1, 2)))
    first = dumper.dump("x")
    second = dumper.dump("x")
    assert first.startswith('digraph "x" {\n')
    assert first.endswith("}\n")
    assert '  "^" -> "3:0" [style=dashed];\n' in first
    assert second == first
    assert second.count("{rank=same;") == 3


def test_rank_lines_list_each_level_once():
    text = dump_dot(SizeConstraint(3, IntRange(0, 3)))
    ranks = re.findall(r"\{rank=same; (\d+)", text)
    assert ranks == ["3", "2", "1"]
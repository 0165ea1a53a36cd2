# frontierdd

Building decision diagrams top-down from a *spec* — a small object that
describes a family of sets level by level — together with two command-line
helpers used around decision-diagram experiments.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The spec protocol

A spec provides

- `get_root() -> (level, state)`
- `get_child(state, level, value) -> (child_level, child_state)`

Level `0` is the 0-terminal, a negative level is the 1-terminal, and a
positive child level must be lower than the level it came from. States must
be hashable; equal states on one level share a node. Optionally a spec has an
`ARITY` attribute (2 by default), `merge_states(s1, s2)` (return 1 to drop
the first state, 2 to drop the second, 0 to keep both), and, for dot output,
`print_state(state, level)` and `print_level(level)`.

## Modules

- `frontierdd.intsubset` — `IntSubset` (abstract; `contains`, `lower_bound`,
  `upper_bound`, and `in`) and `IntRange(min_value, max_value, step)`.
- `frontierdd.size_constraint` — `SizeConstraint(n, constraint)`, a spec
  accepting the subsets of `n` items whose size lies in `constraint`
  (every subset when `constraint` is `None`).
- `frontierdd.builder` — `build(spec)` returns a `Diagram`; `DdBuilder`
  exposes the steps (`initialize`, `construct(level)`, `result`).
  A `Diagram` holds `rows`, `root` and `arity`, and offers `child(node, branch)`,
  `node_count()`, `count()` (number of accepting paths) and `sets()` (yields,
  per accepting path, the levels left by a non-zero branch). Nodes are
  identified by `NodeId(row, col)`; `ZERO` and `ONE` are the terminals.
- `frontierdd.subsetter` — `zdd_subset(diagram, spec)` restricts a ZDD to the
  sets that the spec also accepts; `ZddSubsetter` exposes the steps
  (`initialize`, `subset(level)`, `result`).
- `frontierdd.unreduction` — `BddUnreduction(spec, num_vars)` and
  `ZddUnreduction(spec, num_vars)` wrap a spec so that every level from
  `num_vars` down to 1 is visited; the ZDD variant rejects a 1-branch at a
  level the inner spec skips.
- `frontierdd.dumper` — `dump_dot(spec, title)` returns the diagram of a spec
  as Graphviz dot text; `DdDumper(spec).dump(title)` does the same.
- `frontierdd.hashing` — `prime_size(n)`, `HashTable` (closed hashing with
  linear probing and caller-supplied hash and equality) and `HashMap`.
- `frontierdd.datatable` — `DataTable`, a table of rows of varying length.
- `frontierdd.network` — `Network.from_file(path)` reads an edge list of
  whitespace-separated vertex pairs; each edge is stored as `(low, high)` and
  the vertex count is the largest label. `num_edges()` and `num_vertices()`
  report the sizes.
- `frontierdd.vtree` — `group_sizes`, `balanced_vtree`, `right_linear_vtree`,
  `number_vtree`, `build_vtree`, `format_vtree` and the `VtreeNode` dataclass.

### Example

```python
from frontierdd.builder import build
from frontierdd.dumper import dump_dot
from frontierdd.intsubset import IntRange
from frontierdd.size_constraint import SizeConstraint

# All subsets of 5 items having 2 or 3 elements.
spec = SizeConstraint(5, IntRange(2, 3, 1))
diagram = build(spec)
print(diagram.count())        # 20
print(diagram.node_count())

print(dump_dot(spec, "size 2..3"))
```

## Command-line tools

### `frontierdd-vtree`

```
frontierdd-vtree <graph_name> <edge_count> <arg_m>
```

Prints `x1: <full groups> x2:<remainder>`, splits `edge_count` variables into
groups of `arg_m` (the last group holds any remainder), builds a right-linear
vtree whose left children are balanced subtrees, one per group, and writes it
to `vtree/<graph_name>.vtree` in the `vtree N` / `L pos var` /
`I pos left right` text format. The `vtree/` directory must already exist.
Exit status is 1 on wrong arguments or a write failure.

### `frontierdd-average`

```
frontierdd-average
```

Run in a directory holding `time.1.txt` … `time.20.txt` and
`size.1.txt` … `size.20.txt`, one integer per line (at most 32 lines each).
Writes:

- `res.time` — for each line position, the sum over the 20 files divided by
  20, with two decimals;
- `res.size` — for each line position, the mean over the files where the
  value was positive, rounded half away from zero (`nan` where no value was
  positive and the sum is zero).

A missing file or a line that does not start with an integer stops the run
with exit status 1.

## What this package does not do

It builds and subsets decision diagrams from specs and writes vtree files,
but it has no compiler for diagrams over a vtree: the files written by
`frontierdd-vtree` are meant for a separate tool. It also ships no spec for
connectivity of graph vertices; `Network` only reads edge lists. Diagrams are
built in a single thread.
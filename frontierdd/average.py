"""Average per-graph run times and sizes over repeated measurement files."""

from __future__ import annotations

import math
import re
import sys
from pathlib import Path

NUM_GRAPHS = 32
NUM_FILES = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_column(path: str | Path) -> list[int]:
    """Read the leading integer of every line of ``path``."""
    values = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            match = _LEADING_INT.match(line)
            if match is None:
                raise ValueError(f"Error reading value from file: {path}")
            values.append(int(match.group(1)))
    return values


def _column_sums(columns: list[list[int]]) -> tuple[list[int], list[int]]:
    sums = [0] * NUM_GRAPHS
    positives = [0] * NUM_GRAPHS
    for column in columns:
        if len(column) > NUM_GRAPHS:
            raise ValueError(f"more than {NUM_GRAPHS} values in one file")
        for j, value in enumerate(column):
            sums[j] += value
            if value > 0:
                positives[j] += 1
    return sums, positives


def average_times(columns: list[list[int]], num_files: int) -> list[float]:
    """Per-graph sum over all files divided by ``num_files``."""
    sums, _ = _column_sums(columns)
    return [s / num_files for s in sums]


def _divide(total: int, count: int) -> float:
    if count:
        return total / count
    if total == 0:
        return math.nan
    return math.copysign(math.inf, total)


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def average_sizes(columns: list[list[int]]) -> list[float]:
    """Per-graph mean over the positive values, rounded half away from zero."""
    sums, positives = _column_sums(columns)
    return [_round_half_away(_divide(s, c)) for s, c in zip(sums, positives)]


def format_times(values: list[float]) -> str:
    return "".join(f"{v:.2f}\n" for v in values)


def format_sizes(values: list[float]) -> str:
    return "".join(f"{v:g}\n" for v in values)


def main(argv: list[str] | None = None) -> int:
    """Read ``time.N.txt`` and ``size.N.txt`` and write ``res.time`` and ``res.size``."""
    prefix = Path(".")
    time_columns = []
    size_columns = []
    for i in range(1, NUM_FILES + 1):
        for name, target in ((f"time.{i}.txt", time_columns), (f"size.{i}.txt", size_columns)):
            path = prefix / name
            try:
                target.append(read_column(path))
            except OSError:
                print(f"Unable to open file: ./{name}", file=sys.stderr)
                return 1
            except ValueError:
                print(f"Error reading value from file: ./{name}", file=sys.stderr)
                return 1

    try:
        times = average_times(time_columns, NUM_FILES)
        sizes = average_sizes(size_columns)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    for filename, text in (("res.time", format_times(times)), ("res.size", format_sizes(sizes))):
        try:
            Path(filename).write_text(text)
        except OSError:
            print("无法打开文件")
        else:
            print(f"结果已写入到{filename}文件中")
    return 0
"""Problems on grids, matrices and points in the plane."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Sequence

_START, _END, _EMPTY, _OBSTACLE = 1, 2, 0, -1


def unique_paths_iii(grid: Sequence[Sequence[int]]) -> int:
    """Number of walks from the start (1) to the end (2) visiting every empty cell once.

    Cells holding -1 are obstacles; moves go up, down, left and right.
    """
    cells = {
        (i, j): value
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
    }
    starts = [cell for cell, value in cells.items() if value == _START]
    if not starts:
        raise ValueError("grid has no starting square")
    needed = sum(value == _EMPTY for value in cells.values()) + 2
    visited: set[tuple[int, int]] = set()

    def walk(cell: tuple[int, int], steps: int) -> int:
        value = cells.get(cell)
        if value is None or value == _OBSTACLE or cell in visited:
            return 0
        steps += 1
        if value == _END:
            return int(steps == needed)
        visited.add(cell)
        i, j = cell
        total = sum(
            walk(neighbour, steps)
            for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1))
        )
        visited.discard(cell)
        return total

    return walk(starts[-1], 0)


def diagonal_sort(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """A copy of ``mat`` with every top-left to bottom-right diagonal sorted ascending."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            diagonals[i - j].append(value)
    for values in diagonals.values():
        values.sort(reverse=True)
    return [
        [diagonals[i - j].pop() for j in range(len(row))]
        for i, row in enumerate(mat)
    ]


def count_points(
    points: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each circle ``(x, y, r)`` count the points on or inside it."""
    ordered = sorted((x, y) for x, y in points)
    xs = [x for x, _ in ordered]
    counts: list[int] = []
    for cx, cy, r in queries:
        low = bisect_left(xs, cx - r)
        high = bisect_right(xs, cx + r)
        counts.append(
            sum(
                1
                for x, y in ordered[low:high]
                if (x - cx) ** 2 + (y - cy) ** 2 <= r * r
            )
        )
    return counts
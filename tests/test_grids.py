import copy
from collections import Counter, defaultdict

import pytest

from algoset.grids import count_points, diagonal_sort, unique_paths_iii

EXAMPLE_GRID = [[1, 0, 0, 0], [0, 0, 0, 0], [0, 0, 2, -1]]
EXAMPLE_MATRIX = [[3, 3, 1, 1], [2, 2, 1, 2], [1, 1, 1, 2]]


def _diagonals(mat):
    groups = defaultdict(list)
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            groups[i - j].append(value)
    return groups


def test_unique_paths_example():
    assert unique_paths_iii(EXAMPLE_GRID) == 2


def test_unique_paths_leaves_grid_untouched():
    grid = copy.deepcopy(EXAMPLE_GRID)
    unique_paths_iii(grid)
    assert grid == EXAMPLE_GRID


def test_unique_paths_same_under_transpose():
    transposed = [list(column) for column in zip(*EXAMPLE_GRID)]
    assert unique_paths_iii(transposed) == unique_paths_iii(EXAMPLE_GRID)


def test_unique_paths_same_under_mirror():
    mirrored = [list(reversed(row)) for row in EXAMPLE_GRID]
    assert unique_paths_iii(mirrored) == unique_paths_iii(EXAMPLE_GRID)


def test_unique_paths_blocked_end():
    grid = [[1, -1, 2]]
    assert unique_paths_iii(grid) == 0


def test_unique_paths_no_end():
    assert unique_paths_iii([[1, 0, 0]]) == 0


def test_unique_paths_straight_line_has_one_walk():
    assert unique_paths_iii([[1, 0, 0, 2]]) == 1


def test_unique_paths_needs_start():
    with pytest.raises(ValueError):
        unique_paths_iii([[0, 0, 2]])


def test_diagonal_sort_example():
    assert diagonal_sort(EXAMPLE_MATRIX) == [[1, 1, 1, 1], [1, 2, 2, 2], [1, 2, 3, 3]]


def test_diagonal_sort_keeps_input():
    mat = copy.deepcopy(EXAMPLE_MATRIX)
    diagonal_sort(mat)
    assert mat == EXAMPLE_MATRIX


@pytest.mark.parametrize(
    "mat",
    [
        EXAMPLE_MATRIX,
        [[11, 25, 66, 1, 69, 7], [23, 55, 17, 45, 15, 52], [75, 31, 36, 44, 58, 8],
         [22, 27, 33, 25, 68, 4], [84, 28, 14, 11, 5, 50]],
        [[5]],
        [[3, 2, 1]],
        [[3], [2], [1]],
    ],
)
def test_diagonal_sort_invariants(mat):
    result = diagonal_sort(mat)
    assert [len(row) for row in result] == [len(row) for row in mat]
    before = _diagonals(mat)
    after = _diagonals(result)
    assert before.keys() == after.keys()
    for key, values in after.items():
        assert values == sorted(values)
        assert Counter(values) == Counter(before[key])
    assert diagonal_sort(result) == result


def test_diagonal_sort_empty():
    assert diagonal_sort([]) == []


POINTS = [[1, 3], [3, 3], [5, 3], [2, 2]]


def test_count_points_large_circle_holds_all():
    assert count_points(POINTS, [[3, 3, 100]]) == [len(POINTS)]


def test_count_points_boundary_is_inside():
    assert count_points([[3, 0], [0, 4]], [[0, 0, 3], [0, 0, 4]]) == [1, 2]


def test_count_points_zero_radius_counts_duplicates():
    points = [[2, 2], [2, 2], [2, 3]]
    assert count_points(points, [[2, 2, 0]]) == [2]


def test_count_points_grows_with_radius():
    points = [[x, y] for x in range(6) for y in range(6)]
    counts = count_points(points, [[2, 3, r] for r in range(8)])
    assert counts == sorted(counts)
    assert counts[-1] == len(points)


def test_count_points_one_answer_per_query():
    queries = [[2, 3, 1], [4, 3, 1], [1, 1, 2]]
    result = count_points(POINTS, queries)
    assert len(result) == len(queries)
    assert all(0 <= count <= len(POINTS) for count in result)


def test_count_points_no_points():
    assert count_points([], [[0, 0, 5]]) == [0]
"""Array problems on grouping, counting and ordering."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, pairwise


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """The distinct values found in both inputs, in ascending order."""
    return sorted(set(nums1) & set(nums2))


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people ``0..n-1`` into groups whose size each person asked for.

    People asking for the same size fill groups in index order; sizes are
    handled in order of first appearance.
    """
    members: dict[int, list[int]] = {}
    for person, size in enumerate(group_sizes):
        members.setdefault(size, []).append(person)
    groups: list[list[int]] = []
    for size, people in members.items():
        if size <= 0 or len(people) % size:
            raise ValueError(f"{len(people)} people cannot form groups of {size}")
        groups.extend(people[start:start + size] for start in range(0, len(people), size))
    return groups


def sum_odd_length_subarrays(arr: Sequence[int]) -> int:
    """Sum of the elements of every contiguous subarray of odd length."""
    prefix = [0, *accumulate(arr)]
    count = len(arr)
    return sum(
        prefix[start + length] - prefix[start]
        for length in range(1, count + 1, 2)
        for start in range(count - length + 1)
    )


def check_arithmetic_subarrays(
    nums: Sequence[int], l: Sequence[int], r: Sequence[int]
) -> list[bool]:
    """For each range ``nums[l[i]..r[i]]`` whether it can be rearranged into an arithmetic sequence."""
    answers: list[bool] = []
    for low, high in zip(l, r, strict=True):
        window = sorted(nums[low:high + 1])
        steps = {b - a for a, b in pairwise(window)}
        answers.append(len(steps) <= 1)
    return answers


def min_operations(boxes: str) -> list[int]:
    """For each box, the moves needed to bring every ball into it.

    ``boxes`` holds ``"1"`` for a box with a ball and ``"0"`` for an empty one;
    one move shifts one ball to a neighbouring box.
    """
    if set(boxes) - {"0", "1"}:
        raise ValueError(f"boxes must hold only '0' and '1': {boxes!r}")
    balls = [int(ch) for ch in boxes]
    if not balls:
        return []
    total = sum(balls)
    result = [sum(index * ball for index, ball in enumerate(balls))]
    on_left = balls[0]
    for ball in balls[1:]:
        result.append(result[-1] + on_left - (total - on_left))
        on_left += ball
    return result


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Number of index pairs ``i < j`` with equal values and ``i * j`` divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(nums):
        positions[value].append(index)
    return sum(
        1
        for indices in positions.values()
        for i, j in combinations(indices, 2)
        if i * j % k == 0
    )


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Names ordered from the tallest person to the shortest."""
    pairs = sorted(zip(heights, names, strict=True), key=lambda pair: -pair[0])
    return [name for _, name in pairs]


def find_the_prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, how many values appear in both prefixes of two permutations."""
    seen_a: set[int] = set()
    seen_b: set[int] = set()
    common = 0
    result: list[int] = []
    for x, y in zip(a, b, strict=True):
        seen_a.add(x)
        if x in seen_b:
            common += 1
        seen_b.add(y)
        if y in seen_a:
            common += 1
        result.append(common)
    return result
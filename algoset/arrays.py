"""Array searching and combination problems."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two different elements adding up to ``target``.

    The first index is the earliest that has a partner; the partner is the
    last position holding the needed value.  An empty list means no pair.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [index, partner]
    return []


def max_area(height: Sequence[int]) -> int:
    """Most water held between two of the vertical lines in ``height``."""
    if len(height) < 2:
        raise ValueError("at least two lines are needed")
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        left_height, right_height = height[left], height[right]
        best = max(best, (right - left) * min(left_height, right_height))
        if left_height < right_height:
            left += 1
        elif left_height > right_height:
            right -= 1
        elif height[left + 1] < height[right - 1]:
            left += 1
        else:
            right -= 1
    return best


def three_sum_binary_search(nums: Iterable[int]) -> list[list[int]]:
    """Distinct triples summing to zero, each in ascending order.

    The largest member is fixed and the smallest found by binary search.
    """
    values = sorted(nums)
    triples: list[list[int]] = []
    for i in range(bisect_left(values, 0), len(values)):
        if i + 1 < len(values) and values[i] == values[i + 1]:
            continue
        for j in range(1, i):
            if j + 1 < i and values[j] == values[j + 1]:
                continue
            needed = -values[i] - values[j]
            low = bisect_left(values, needed, 0, j)
            if low < j and values[low] == needed:
                triples.append([needed, values[j], values[i]])
    return triples


def three_sum_two_pointers(nums: Iterable[int]) -> list[list[int]]:
    """Distinct triples summing to zero, each in ascending order.

    The largest member is fixed and the other two found with two pointers.
    """
    values = sorted(nums)
    triples: list[list[int]] = []
    for i in range(bisect_left(values, 0), len(values)):
        if i + 1 < len(values) and values[i] == values[i + 1]:
            continue
        largest = values[i]
        needed = -largest
        left, right = 0, i - 1
        while True:
            if left < right and values[left] == values[left + 1]:
                if 2 * values[left] == needed:
                    triples.append([values[left], values[left], largest])
                while left < right and values[left] == values[left + 1]:
                    left += 1
            if left < right and values[right] == values[right - 1]:
                if 2 * values[right] == needed:
                    triples.append([values[right], values[right], largest])
                while left < right and values[right] == values[right - 1]:
                    right -= 1
            if left >= right:
                break
            total = values[left] + values[right]
            if total > needed:
                right -= 1
            elif total < needed:
                left += 1
            else:
                triples.append([values[left], values[right], largest])
                left += 1
    return triples


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values.

    Returns -1 when ``target`` is absent.
    """
    if not nums:
        return -1
    left, right = 0, len(nums) - 1
    while left < right:
        if nums[left] < nums[right]:
            low = bisect_left(nums, target, left, right + 1)
            if low <= right and nums[low] == target:
                return low
            return -1
        mid = (left + right) // 2
        if target >= nums[left]:
            if nums[mid] < nums[left]:
                right = mid - 1
                continue
        elif nums[mid] > nums[right]:
            left = mid + 1
            continue
        if target <= nums[mid]:
            right = mid
        else:
            left = mid + 1
    return right if nums[right] == target else -1


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``; subsets without an element come before those with it."""
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result += [[value, *subset] for subset in result]
    return result
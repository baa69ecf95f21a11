"""Binary searches and an in-place quick sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _require_items(arr: Sequence[int]) -> None:
    if not arr:
        raise ValueError("sequence is empty")


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Index of the first element not less than ``target``.

    When every element is less than ``target`` the last index is returned.
    """
    _require_items(arr)
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if target <= arr[mid]:
            right = mid
        else:
            left = mid + 1
    return right


def upper_bound(arr: Sequence[int], target: int) -> int:
    """Index of the first element greater than ``target``.

    When no element is greater than ``target`` the last index is returned.
    """
    _require_items(arr)
    left, right = 0, len(arr) - 1
    while left < right:
        mid = (left + right) // 2
        if target < arr[mid]:
            right = mid
        else:
            left = mid + 1
    return right


def quick_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place in ascending order."""
    ranges = [(0, len(arr) - 1)]
    while ranges:
        start, stop = ranges.pop()
        if start >= stop:
            continue
        pivot = arr[start]
        left, right = start, stop
        while True:
            while left < right and pivot < arr[right]:
                right -= 1
            if left == right:
                break
            arr[left], arr[right] = arr[right], arr[left]
            while left < right and pivot >= arr[left]:
                left += 1
            if left == right:
                break
            arr[left], arr[right] = arr[right], arr[left]
        ranges.append((start, left - 1))
        ranges.append((left + 1, stop))
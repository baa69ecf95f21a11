"""Sliding-window problems and runs of consecutive values."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def _check_window(nums: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size must be between 1 and {len(nums)}, got {k}")


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run of ``nums`` summing to at least ``target``.

    The values are expected to be positive.  Returns 0 when no run reaches
    ``target``.
    """
    if target <= 0:
        raise ValueError(f"target must be positive, got {target}")
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return best or 0


def _latest_argmax(nums: Sequence[int], start: int, stop: int) -> int:
    return max(range(start, stop), key=lambda index: (nums[index], index))


def max_sliding_window_rescan(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` values, rescanning when the maximum leaves."""
    _check_window(nums, k)
    best = _latest_argmax(nums, 0, k)
    result = [nums[best]]
    for right in range(k, len(nums)):
        left = right - k + 1
        if best < left:
            best = _latest_argmax(nums, left, right + 1)
        elif nums[right] >= nums[best]:
            best = right
        result.append(nums[best])
    return result


def max_sliding_window_heap(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` values, kept in a heap."""
    _check_window(nums, k)
    heap = [(-nums[index], index) for index in range(k - 1)]
    heapq.heapify(heap)
    result: list[int] = []
    for index in range(k - 1, len(nums)):
        while heap and heap[0][1] < index - k + 1:
            heapq.heappop(heap)
        heapq.heappush(heap, (-nums[index], index))
        result.append(-heap[0][0])
    return result


def max_sliding_window_deque(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` values, kept in a monotonic deque."""
    _check_window(nums, k)
    window: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] == index - k:
            window.popleft()
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers found among ``nums``."""
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        best = max(best, end - value + 1)
    return best
"""Stack-based structures and problems."""

from __future__ import annotations

from collections.abc import Sequence


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove the top element and return it."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """The element on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """The smallest element in the stack."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram ``heights``."""
    best = 0
    stack: list[tuple[int, int]] = []
    for index, height in enumerate([*heights, 0]):
        start = index
        while stack and stack[-1][1] > height:
            start, taller = stack.pop()
            best = max(best, taller * (index - start))
        stack.append((start, height))
    return best


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Number of car fleets that arrive at ``target``.

    A car catching up with a slower one ahead joins it and moves on at its pace.
    """
    cars = sorted(
        ((start, (target - start) / pace) for start, pace in zip(position, speed, strict=True)),
        reverse=True,
    )
    fleets = 0
    slowest = float("-inf")
    for _, arrival in cars:
        if arrival > slowest:
            slowest = arrival
            fleets += 1
    return fleets
import pytest

from algoset.stacks import MinStack, car_fleet, largest_rectangle_area


def test_min_stack_example():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


def test_min_stack_tracks_minimum_through_pops():
    values = [5, 7, 3, 3, 8, 1, 9]
    stack = MinStack()
    for value in values:
        stack.push(value)
    for count in range(len(values), 0, -1):
        assert len(stack) == count
        assert stack.get_min() == min(values[:count])
        assert stack.top() == values[count - 1]
        assert stack.pop() == values[count - 1]
    assert len(stack) == 0


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(MinStack(), method)()


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize(
    "heights", [[2, 1, 5, 6, 2, 3], [2, 4], [6, 2, 5, 4, 5, 1, 6], [1], [0, 0, 3]]
)
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)
    assert area == largest_rectangle_area(heights[::-1])


@pytest.mark.parametrize("height, count", [(3, 4), (1, 1), (7, 5)])
def test_largest_rectangle_uniform(height, count):
    assert largest_rectangle_area([height] * count) == height * count


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


def test_car_fleet_example():
    assert car_fleet(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]) == 3


def test_car_fleet_single_car():
    assert car_fleet(10, [3], [3]) == 1


def test_car_fleet_same_speed_never_merge():
    positions = [0, 2, 4, 6]
    assert car_fleet(100, positions, [1] * len(positions)) == len(positions)


def test_car_fleet_all_catch_up_with_the_leader():
    assert car_fleet(100, [90, 0, 50], [1, 100, 100]) == 1


@pytest.mark.parametrize(
    "target, position, speed",
    [(12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3]), (20, [6, 2, 17], [3, 9, 2]), (10, [0, 4, 2], [2, 1, 3])],
)
def test_car_fleet_bounds_and_order(target, position, speed):
    fleets = car_fleet(target, position, speed)
    assert 1 <= fleets <= len(position)
    assert car_fleet(target, position[::-1], speed[::-1]) == fleets


def test_car_fleet_mismatched_lengths():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])
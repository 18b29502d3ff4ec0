import pytest

from algokit.stack_sort import sort_stack, sorted_insert


def test_source_example():
    stack = [30, -5, 18, 14, -3]
    sort_stack(stack)
    assert stack == sorted([30, -5, 18, 14, -3])
    assert stack[-1] == 30


@pytest.mark.parametrize("values", [[], [1], [3, 3, 1, 2], [5, 4, 3, 2, 1], [0, -1, 7]])
def test_sort_matches_sorted(values):
    stack = list(values)
    sort_stack(stack)
    assert stack == sorted(values)


def test_sorted_insert_into_empty():
    stack = []
    sorted_insert(stack, 4)
    assert stack == [4]


@pytest.mark.parametrize("value", [-10, 2, 5, 100])
def test_sorted_insert_keeps_order(value):
    stack = [1, 3, 5, 9]
    sorted_insert(stack, value)
    assert stack == sorted([1, 3, 5, 9, value])
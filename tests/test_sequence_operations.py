from __future__ import annotations

import operator

import pytest

from collections_showcase.errors import EmptyInputError, InvalidArgumentError
from collections_showcase.sequences import operations as ops


def test_map_then_filter_preserves_order():
    result = ops.map_then_filter([5, 1, 4, 2, 3], lambda n: n * 3, lambda v: v % 2 == 0)
    assert result == [12, 6]


def test_filter_then_map_order_differs_from_map_then_filter():
    numbers = [1, 2, 3, 4]
    assert ops.filter_then_map(numbers, lambda n: n > 2, lambda n: n * 10) == [30, 40]
    assert ops.map_then_filter(numbers, lambda n: n * 10, lambda n: n > 2) == [10, 20, 30, 40]


@pytest.mark.parametrize("op", [operator.add, operator.mul, max, lambda a, b: b])
def test_reduce_empty_raises_for_every_operator(op):
    with pytest.raises(EmptyInputError):
        ops.reduce_items([], op)


def test_empty_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        ops.reduce_items(iter(()), operator.add)


def test_reduce_is_left_to_right():
    assert ops.reduce_items([1, 2, 3], lambda acc, n: f"({acc}+{n})") == "((1+2)+3)"
    assert ops.reduce_items([7], operator.add) == 7


@pytest.mark.parametrize("seed", [0, 1, "", None, (1, 2)])
def test_fold_empty_returns_seed(seed):
    assert ops.fold_items([], seed, lambda acc, n: n) == seed


def test_fold_with_seed():
    assert ops.fold_items([1, 2, 3], 10, operator.sub) == 4


def test_group_by_is_an_exact_partition():
    items = [5, 3, 8, 1, 6, 9, 2]
    groups = ops.group_by(items, lambda n: n % 3)
    assert list(groups) == [2, 0, 1]
    assert groups == {2: [5, 8, 2], 0: [3, 6, 9], 1: [1]}
    concatenated = [item for members in groups.values() for item in members]
    assert sorted(concatenated) == sorted(items)
    assert len(concatenated) == len(items)


def test_partition_keeps_order():
    assert ops.partition([1, 2, 3, 4, 5], lambda n: n % 2) == ([1, 3, 5], [2, 4])


@pytest.mark.parametrize(
    "a,b",
    [([], []), ([1, 2, 3], ["x"]), ([1], ["x", "y", "z"]), ([1, 2], ["x", "y"])],
)
def test_zip_with_length_is_min(a, b):
    result = ops.zip_with(a, b, lambda x, y: (x, y))
    assert len(result) == min(len(a), len(b))
    assert result == list(zip(a, b))


def test_flatten_round_trips_a_partition():
    parts = [[1], [2, 3], [4, 5, 6]]
    assert ops.flatten(parts) == [1, 2, 3, 4, 5, 6]
    assert ops.flatten([]) == []


def test_flat_map_tokens_collapses_whitespace():
    lines = ["  leading", "a\tb\n c", "", "   "]
    assert ops.flat_map_tokens(lines) == ["leading", "a", "b", "c"]


def test_distinct_keeps_first_seen_order():
    assert ops.distinct(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert ops.distinct_sorted(["b", "a", "b", "c", "a"]) == ["a", "b", "c"]


@pytest.mark.parametrize(
    "n,taken,dropped",
    [
        (0, [], [1, 2, 3]),
        (2, [1, 2], [3]),
        (3, [1, 2, 3], []),
        (10, [1, 2, 3], []),
    ],
)
def test_take_drop_boundaries(n, taken, dropped):
    assert ops.take([1, 2, 3], n) == taken
    assert ops.drop([1, 2, 3], n) == dropped


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7, 8, 100])
def test_chunk_then_flatten_reconstructs(size):
    items = list(range(7))
    chunks = ops.chunk(items, size)
    assert ops.flatten(chunks) == items
    assert all(len(c) == size for c in chunks[:-1])
    assert 1 <= len(chunks[-1]) <= size


def test_chunk_empty_input():
    assert ops.chunk([], 3) == []


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_rejects_small_size(size):
    with pytest.raises(InvalidArgumentError):
        ops.chunk([1, 2], size)


def test_window_drops_partial_windows():
    assert ops.window([1, 2, 3, 4, 5, 6, 7], 3, step=2) == [[1, 2, 3], [3, 4, 5], [5, 6, 7]]
    assert ops.window([1, 2, 3, 4, 5, 6], 3, step=2) == [[1, 2, 3], [3, 4, 5]]


def test_window_allow_partial_clips_trailing_windows():
    assert ops.window([1, 2, 3, 4, 5, 6], 3, step=2, allow_partial=True) == [
        [1, 2, 3],
        [3, 4, 5],
        [5, 6],
    ]


def test_window_default_step_and_short_input():
    assert ops.window([1, 2, 3], 2) == [[1, 2], [2, 3]]
    assert ops.window([1, 2], 3) == []
    assert ops.window(iter([1, 2, 3, 4]), 2, step=2) == [[1, 2], [3, 4]]


@pytest.mark.parametrize("size,step", [(0, 1), (3, 0), (-2, 1)])
def test_window_rejects_bad_parameters(size, step):
    with pytest.raises(InvalidArgumentError):
        ops.window([1, 2, 3], size, step=step)


def test_copy_insert_helpers_do_not_mutate():
    original = [1, 2, 3]
    assert ops.copy_insert_into_sequence(original, 9) == [1, 2, 3, 9]
    assert original == [1, 2, 3]

    mapping = {"one": 1, "two": 2}
    updated = ops.copy_insert_into_mapping(mapping, "one", 100)
    assert updated == {"one": 100, "two": 2}
    assert list(updated) == ["one", "two"]
    assert mapping == {"one": 1, "two": 2}


def test_positional_accessors():
    assert ops.second([1, 2, 3, 4]) == 2
    assert ops.penultimate([1, 2, 3, 4]) == 3
    with pytest.raises(InvalidArgumentError):
        ops.second([1])
    with pytest.raises(InvalidArgumentError):
        ops.penultimate([])

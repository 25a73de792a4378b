from collections import deque

import pytest

from sysext.collection import (
    add_all,
    add_range,
    add_split,
    concat,
    for_each,
    for_each_item,
    for_each_key,
    for_each_value,
    get_first,
    get_last,
    increment,
    is_null_or_empty,
    join,
    peek,
    remove_first,
    remove_last,
    remove_where,
    true_for_all,
    try_add,
    try_dequeue,
    try_get_value,
    try_peek,
    try_peek_stack,
    try_pop,
    update,
    update_range,
)


def test_increment_adds_absent_key() -> None:
    counts: dict[str, int] = {}

    assert increment(counts, "a", 5) == 5
    assert counts == {"a": 5}


def test_increment_existing_key() -> None:
    counts = {"a": 5}

    assert increment(counts, "a", 3) == 8
    assert increment(counts, "a") == 9
    assert counts == {"a": 9}


def test_increment_floats() -> None:
    totals = {"x": 0.5}

    assert increment(totals, "x", 0.25) == 0.75
    assert increment(totals, "y", 1.5) == 1.5


def test_is_null_or_empty() -> None:
    assert is_null_or_empty(None)
    assert is_null_or_empty([])
    assert is_null_or_empty({})
    assert not is_null_or_empty({"a"})


def test_try_add_and_add_range_keep_existing_keys() -> None:
    mapping = {"a": 1}

    assert not try_add(mapping, "a", 2)
    assert try_add(mapping, "b", 2)
    add_range(mapping, [("a", 10), ("c", 3)])
    add_range(mapping, {"d": 4})

    assert mapping == {"a": 1, "b": 2, "c": 3, "d": 4}


def test_update_and_update_range_replace() -> None:
    mapping = {"a": 1}

    update(mapping, "a", 2)
    update(mapping, "b", 3)
    update_range(mapping, {"a": 5, "c": 6})

    assert mapping == {"a": 5, "b": 3, "c": 6}


def test_remove_where_returns_count() -> None:
    mapping = {"a": 1, "b": 2, "c": 3, "d": 4}

    assert remove_where(mapping, lambda value: value % 2 == 0) == 2
    assert mapping == {"a": 1, "c": 3}
    assert remove_where(mapping, lambda value: False) == 0


def test_concat_and_join() -> None:
    assert concat(["a", 1, None, "b"]) == "a1b"
    assert join([1, 2, 3], ", ") == "1, 2, 3"
    assert join([], ",") == ""


def test_for_each_variants() -> None:
    seen: list = []
    mapping = {"a": 1, "b": 2}

    for_each([1, 2], seen.append)
    for_each_key(mapping, seen.append)
    for_each_value(mapping, seen.append)
    for_each_item(mapping, lambda key, value: seen.append((key, value)))

    assert seen == [1, 2, "a", "b", 1, 2, ("a", 1), ("b", 2)]


def test_peek() -> None:
    assert peek([3, 4]) == 3
    assert peek(iter("xy")) == "x"
    assert peek([]) is None


def test_true_for_all() -> None:
    assert true_for_all([True, True])
    assert true_for_all([])
    assert not true_for_all([True, False])


def test_add_all() -> None:
    items = {"a"}
    values = ["a"]

    add_all(items, ["a", "b"])
    add_all(values, ["a", "b"])
    add_all(values, None)

    assert items == {"a", "b"}
    assert values == ["a", "a", "b"]


def test_add_split_populates_set_and_list() -> None:
    items: set[str] = set()
    values: list[str] = []

    add_split(items, "a,b,,a", ",")
    add_split(values, "x;y,z", ";", ",")
    add_split(values, None, ",")

    assert items == {"a", "b"}
    assert values == ["x", "y", "z"]


def test_list_accessors() -> None:
    values = [1, 2, 3]

    assert get_first(values) == 1
    assert get_last(values) == 3
    remove_first(values)
    remove_last(values)
    assert values == [2]


def test_list_accessors_on_empty_list() -> None:
    values: list[int] = []

    assert get_first(values) is None
    assert get_last(values) is None
    remove_first(values)
    remove_last(values)
    assert values == []


@pytest.mark.parametrize(
    ("index", "expected"),
    [(0, (True, "a")), (1, (True, "b")), (2, (False, None)), (-1, (False, None))],
)
def test_try_get_value(index: int, expected) -> None:
    assert try_get_value(["a", "b"], index) == expected


def test_queue_helpers() -> None:
    queue = deque([1, 2])

    assert try_peek(queue) == 1
    assert try_dequeue(queue) == 1
    assert try_dequeue(queue) == 2
    assert try_dequeue(queue) is None
    assert try_peek(queue) is None


def test_stack_helpers() -> None:
    stack = [1, 2]

    assert try_peek_stack(stack) == 2
    assert try_pop(stack) == 2
    assert try_pop(stack) == 1
    assert try_pop(stack) is None
    assert try_peek_stack(stack) is None

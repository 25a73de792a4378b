# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.collection

Collection helpers.

Accessors are safe: an empty collection gives None
(or a no-op) instead of an error.

Queues are deques with the front on the left,
stacks are lists with the top at the end.

"""

from collections import deque
from collections.abc import (
    Callable,
    Collection,
    Iterable,
    Mapping,
    MutableMapping,
    MutableSequence,
)
from typing import Any, TypeVar
from .strings import try_split

K = TypeVar('K')
V = TypeVar('V')
T = TypeVar('T')
Number = int | float


def is_null_or_empty(collection: Collection | None) -> bool:
    return collection is None or len(collection) == 0


# Mappings

def _pairs(values: Mapping[K, V] | Iterable[tuple[K, V]]
           ) -> Iterable[tuple[K, V]]:
    if isinstance(values, Mapping):
        return values.items()
    return values


def try_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """Add key if absent, return whether it was added."""
    if key in mapping:
        return False
    mapping[key] = value
    return True


def add_range(mapping: MutableMapping[K, V],
              values: Mapping[K, V] | Iterable[tuple[K, V]]):
    """Add the pairs whose keys are absent, existing keys are kept."""
    for key, value in _pairs(values):
        try_add(mapping, key, value)


def update(mapping: MutableMapping[K, V], key: K, value: V):
    """Add or replace."""
    mapping[key] = value


def update_range(mapping: MutableMapping[K, V],
                 values: Mapping[K, V] | Iterable[tuple[K, V]]):
    """Add or replace every pair."""
    for key, value in _pairs(values):
        update(mapping, key, value)


def remove_where(mapping: MutableMapping[K, V],
                 predicate: Callable[[V], bool]) -> int:
    """Remove the entries whose value matches predicate.

    Returns the number of entries removed.

    """
    keys = [key for key, value in mapping.items() if predicate(value)]
    for key in keys:
        del mapping[key]
    return len(keys)


def increment(mapping: MutableMapping[K, Number], key: K,
              amount: Number = 1) -> Number:
    """Add amount to the value of key, an absent key starts at amount.

    Returns the new value.

    >>> counts = {}
    >>> increment(counts, 'a', 5), increment(counts, 'a', 3)
    (5, 8)

    """
    if key not in mapping:
        mapping[key] = amount
        return amount
    mapping[key] = value = mapping[key] + amount
    return value


# Iterables

def concat(items: Iterable[Any]) -> str:
    """Concatenate the items as text, None is empty."""
    return ''.join('' if item is None else str(item) for item in items)


def join(items: Iterable[Any], separator: str) -> str:
    """Join the items as text with separator, None is empty."""
    return separator.join('' if item is None else str(item) for item in items)


def for_each(items: Iterable[T], action: Callable[[T], Any]):
    for item in items:
        action(item)


def for_each_key(mapping: Mapping[K, V], action: Callable[[K], Any]):
    for key in mapping:
        action(key)


def for_each_value(mapping: Mapping[K, V], action: Callable[[V], Any]):
    for value in mapping.values():
        action(value)


def for_each_item(mapping: Mapping[K, V], action: Callable[[K, V], Any]):
    for key, value in mapping.items():
        action(key, value)


def peek(items: Iterable[T]) -> T | None:
    """First item, None if there is none."""
    return next(iter(items), None)


def true_for_all(items: Iterable[bool]) -> bool:
    return all(items)


# Sets and lists

def add_all(target: set[T] | list[T], items: Iterable[T] | None):
    """Add items to a set or a list, None is a no-op."""
    if items is None:
        return
    if isinstance(target, set):
        target.update(items)
    else:
        target.extend(items)


def add_split(target: set[str] | list[str], text: str | None,
              *separators: str):
    """Split text and add the non-empty parts to target."""
    add_all(target, try_split(text, *separators))


def get_first(items: MutableSequence[T]) -> T | None:
    return items[0] if items else None


def get_last(items: MutableSequence[T]) -> T | None:
    return items[-1] if items else None


def remove_first(items: MutableSequence[T]):
    if items:
        del items[0]


def remove_last(items: MutableSequence[T]):
    if items:
        del items[-1]


def try_get_value(items: MutableSequence[T], index: int
                  ) -> tuple[bool, T | None]:
    """(True, item) if index is in range, else (False, None).

    Negative indices are out of range.

    """
    if 0 <= index < len(items):
        return True, items[index]
    return False, None


# Queues

def try_peek(queue: deque[T]) -> T | None:
    """Front of the queue."""
    return queue[0] if queue else None


def try_dequeue(queue: deque[T]) -> T | None:
    """Remove and return the front of the queue."""
    return queue.popleft() if queue else None


# Stacks

def try_peek_stack(stack: list[T]) -> T | None:
    """Top of the stack."""
    return stack[-1] if stack else None


def try_pop(stack: list[T]) -> T | None:
    """Remove and return the top of the stack."""
    return stack.pop() if stack else None

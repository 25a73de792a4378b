# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
sysext.delegate

Multi-target callbacks.

A Delegate holds an ordered invocation list of callbacks. combine() and
remove() treat the list as a set keyed by (target, function): a bound
method is keyed by its instance and function, anything else by itself.

Example

>>> handler = combine(None, print)
>>> handler = combine(handler, print)
>>> len(invocation_list(handler))
1

"""

from collections.abc import Callable, Iterator
from inspect import ismethod
from types import BuiltinMethodType
from typing import Any, Self

Callback = Callable[..., Any]


def handle_key(callback: Callback) -> tuple[object, object]:
    """Return (target, function) of callback."""
    if ismethod(callback):
        return callback.__self__, callback.__func__
    if isinstance(callback, BuiltinMethodType):
        # A new object is created on every attribute access
        return callback.__self__, callback.__name__
    return None, callback


def same_handle(first: Callback, second: Callback) -> bool:
    """Whether both callbacks have the same target and function."""
    first_target, first_func = handle_key(first)
    second_target, second_func = handle_key(second)
    return first_target is second_target and first_func == second_func


class Delegate:

    """Ordered, immutable invocation list.

    Calling a Delegate calls every entry in order with the same
    arguments and returns the result of the last one.

    """

    __slots__ = ('_entries',)

    def __init__(self, *callbacks: Callback | None):
        entries = []
        for callback in callbacks:
            if callback is None:
                continue
            if isinstance(callback, Delegate):
                entries.extend(callback._entries)
            elif callable(callback):
                entries.append(callback)
            else:
                raise TypeError(f"{type(callback).__name__!r} object "
                                "is not callable")
        self._entries = tuple(entries)

    @property
    def entries(self) -> tuple[Callback, ...]:
        """Return the invocation list."""
        return self._entries

    def __call__(self, *args, **kwargs) -> Any:
        result = None
        for callback in self._entries:
            result = callback(*args, **kwargs)
        return result

    def __iter__(self) -> Iterator[Callback]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, callback: Callback) -> bool:
        return any(same_handle(entry, callback) for entry in self._entries)

    def __add__(self, other: Callback | None) -> Self:
        return combine(self, other)

    def __radd__(self, other: Callback | None) -> Self:
        return combine(other, self)

    def __sub__(self, other: Callback | None) -> Self | None:
        return remove(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delegate):
            return NotImplemented
        return (len(self) == len(other)
                and all(map(same_handle, self._entries, other._entries)))

    def __hash__(self) -> int:
        return hash(tuple(
            (id(target), func) for target, func in map(handle_key,
                                                       self._entries)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._entries!r}"


def invocation_list(func: Callback | None) -> tuple[Callback, ...]:
    """Return the invocation list of func."""
    if func is None:
        return ()
    if isinstance(func, Delegate):
        return func.entries
    return (func,)


def combine(first: Callback | None, second: Callback | None
            ) -> Callback | None:
    """Append the entries of second which first does not hold yet.

    If every entry is already held, first is returned unchanged.

    """
    if first is None:
        return second
    if second is None:
        return first
    entries = list(invocation_list(first))
    added = False
    for callback in invocation_list(second):
        if not any(same_handle(entry, callback) for entry in entries):
            entries.append(callback)
            added = True
    if not added:
        return first
    return Delegate(*entries)


def remove(source: Callback | None, to_remove: Callback | None
           ) -> Callback | None:
    """Remove the first entry matching each entry of to_remove.

    Returns None when nothing is left.

    """
    if source is None or to_remove is None:
        return source
    entries = list(invocation_list(source))
    removed = False
    for callback in invocation_list(to_remove):
        for index, entry in enumerate(entries):
            if same_handle(entry, callback):
                del entries[index]
                removed = True
                break
    if not removed:
        return source
    if not entries:
        return None
    return Delegate(*entries)


def register(source: Callback | None, callback: Callback | None,
             enable: bool) -> Callback | None:
    """Combine callback when enabled, remove it otherwise."""
    if enable:
        return combine(source, callback)
    return remove(source, callback)


def try_invoke(func: Callback | None, *args, **kwargs) -> Any:
    """Call func, None is a no-op returning None."""
    if func is None:
        return None
    return func(*args, **kwargs)


def get_results(func: Callback | None, results: list | None,
                *args, **kwargs):
    """Call every entry of func and append each result to results."""
    if func is None or results is None:
        return
    for callback in invocation_list(func):
        results.append(try_invoke(callback, *args, **kwargs))

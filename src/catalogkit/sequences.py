"""Mutation helpers for ordered, list-like sequences."""

from __future__ import annotations
from collections.abc import Callable, MutableSequence
from typing import TypeVar
from catalogkit.errors import IndexOutOfRangeError


T = TypeVar("T")


def append(seq: MutableSequence[T], value: T) -> None:
    """Add ``value`` to the end of ``seq``."""
    seq.append(value)


def remove_by_value(seq: MutableSequence[T], value: T) -> bool:
    """Remove the first occurrence of ``value``.

    Returns ``True`` when an element was removed. A missing value leaves the
    sequence untouched.
    """
    try:
        seq.remove(value)
    except ValueError:
        return False
    return True


def remove_by_index(seq: MutableSequence[T], index: int) -> T:
    """Remove and return the element at ``index``.

    Only indices in ``[0, len(seq))`` are accepted; negative indices are
    rejected rather than counted from the end.

    Raises:
        IndexOutOfRangeError: If ``index`` falls outside the sequence.
    """
    length = len(seq)
    if not 0 <= index < length:
        raise IndexOutOfRangeError(index, length)
    return seq.pop(index)


def remove_where(seq: MutableSequence[T], predicate: Callable[[T], bool]) -> int:
    """Remove every element matching ``predicate`` in place.

    Indices are visited from the end so that deletions never shift an
    element that has not been inspected yet. Returns the number removed.
    """
    removed = 0
    for index in range(len(seq) - 1, -1, -1):
        if predicate(seq[index]):
            del seq[index]
            removed += 1
    return removed


def for_each(seq: MutableSequence[T], action: Callable[[T], object]) -> None:
    """Apply ``action`` to each element of ``seq`` in order."""
    for item in seq:
        action(item)


__all__ = [
    "append",
    "for_each",
    "remove_by_index",
    "remove_by_value",
    "remove_where",
]

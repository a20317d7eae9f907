"""Bounded lazy integer sequences."""

from __future__ import annotations
from collections.abc import Callable, Iterator


def is_even(number: int) -> bool:
    """Return whether ``number`` is even."""
    return number % 2 == 0


def is_odd(number: int) -> bool:
    """Return whether ``number`` is odd."""
    return number % 2 != 0


def even_sequence(first: int, last: int) -> Iterator[int]:
    """Yield the even numbers in ``[first, last]`` in ascending order."""
    for number in range(first, last + 1):
        if is_even(number):
            yield number


class BoundedSequence:
    """Restartable iterable over the integers in ``[first, last]``.

    Only ``first``, ``last`` and ``predicate`` are captured. Each call to
    ``iter()`` starts an independent generator, so two consumers never share
    a position.
    """

    __slots__ = ("first", "last", "predicate")

    def __init__(
        self,
        first: int,
        last: int,
        predicate: Callable[[int], bool] = is_even,
    ) -> None:
        """Store the inclusive bounds and the filter predicate."""
        self.first = first
        self.last = last
        self.predicate = predicate

    def __iter__(self) -> Iterator[int]:
        for number in range(self.first, self.last + 1):
            if self.predicate(number):
                yield number

    def __repr__(self) -> str:
        return f"BoundedSequence(first={self.first}, last={self.last})"


def bounded_sequence(
    first: int,
    last: int,
    predicate: Callable[[int], bool] = is_even,
) -> BoundedSequence:
    """Return a lazy view of the integers in ``[first, last]`` passing ``predicate``."""
    return BoundedSequence(first, last, predicate)


__all__ = [
    "BoundedSequence",
    "bounded_sequence",
    "even_sequence",
    "is_even",
    "is_odd",
]

"""In-memory element catalog with keyed lookup and ordered queries."""

from __future__ import annotations
import logging
from collections.abc import Callable, Iterable, Iterator, ValuesView
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from catalogkit.config import DUPLICATE_POLICIES, DuplicatePolicy, get_settings
from catalogkit.errors import CatalogKeyMismatchError, DuplicateCodeError
from catalogkit.models import Element


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Catalog:
    """Mapping of element symbols to immutable element records."""

    def __init__(self, *, policy: DuplicatePolicy = "reject") -> None:
        """Create an empty catalog using the given duplicate policy."""
        if policy not in DUPLICATE_POLICIES:
            msg = (
                f"Unknown duplicate policy {policy!r}; expected one of "
                f"{sorted(DUPLICATE_POLICIES)}."
            )
            raise ValueError(msg)
        self._entries: dict[str, Element] = {}
        self.policy: DuplicatePolicy = policy

    def register(self, element: Element) -> None:
        """Add ``element`` under its own symbol."""
        self._store(element.symbol, element)

    def _store(self, code: str, element: Element) -> None:
        if code != element.symbol:
            raise CatalogKeyMismatchError(code, element.symbol)
        if code in self._entries:
            if self.policy == "reject":
                raise DuplicateCodeError(code)
            logger.warning("Replacing catalog entry for code %s", code)
        self._entries[code] = element

    def lookup(self, code: str) -> Element | None:
        """Return the element registered under ``code`` or ``None``."""
        return self._entries.get(code)

    def items(self) -> Iterator[tuple[str, Element]]:
        """Yield ``(code, element)`` pairs in insertion order."""
        yield from self._entries.items()

    def records(self) -> list[Element]:
        """Return the catalog's elements as an ordered list."""
        return list(self._entries.values())

    def values(self) -> ValuesView[Element]:
        """Return a live view over the catalog's elements."""
        return self._entries.values()

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def build_catalog(
    entries: Iterable[tuple[str, Element]],
    *,
    policy: DuplicatePolicy | None = None,
) -> Catalog:
    """Construct a catalog from literal ``(code, element)`` pairs.

    When ``policy`` is omitted the configured duplicate policy applies. Under
    ``"reject"`` a repeated code raises :class:`DuplicateCodeError`; under
    ``"last_write_wins"`` the later entry replaces the earlier one.
    """
    resolved = policy or get_settings().duplicate_policy
    catalog = Catalog(policy=resolved)
    for code, element in entries:
        catalog._store(code, element)
    logger.debug("Built catalog with %d entries (policy=%s)", len(catalog), resolved)
    return catalog


def lookup(catalog: Catalog, code: str) -> Element | None:
    """Return the element for ``code``; ``None`` means it is not in the catalog."""
    return catalog.lookup(code)


@dataclass(slots=True, frozen=True)
class LookupResult:
    """Outcome of looking up a single code."""

    code: str
    element: Element | None

    @property
    def found(self) -> bool:
        """Return whether the code resolved to an element."""
        return self.element is not None


def lookup_many(catalog: Catalog, codes: Iterable[str]) -> list[LookupResult]:
    """Look up each code in request order, reporting misses explicitly."""
    return [LookupResult(code=code, element=catalog.lookup(code)) for code in codes]


class SortedQuery(Generic[T]):
    """Lazy, restartable filter-and-sort view over a record source.

    Nothing is evaluated until iteration starts. Every call to ``iter()``
    re-reads the source, so repeated iteration over unchanged input produces
    the same output. Ordering is stable for records with equal keys.
    """

    def __init__(
        self,
        records: Iterable[T],
        predicate: Callable[[T], bool],
        key: Callable[[T], Any],
    ) -> None:
        """Capture the source, filter and sort key without evaluating them."""
        self._records = records
        self._predicate = predicate
        self._key = key

    def __iter__(self) -> Iterator[T]:
        selected = [record for record in self._records if self._predicate(record)]
        yield from sorted(selected, key=self._key)

    def to_list(self) -> list[T]:
        """Materialize the query into a list."""
        return list(self)


def filter_sorted(
    records: Iterable[T],
    predicate: Callable[[T], bool],
    key: Callable[[T], Any],
) -> SortedQuery[T]:
    """Return records matching ``predicate`` ordered ascending by ``key``.

    Raises:
        TypeError: If ``records`` is a one-shot iterator, which could not be
            replayed on a second pass over the query.
    """
    if isinstance(records, Iterator):
        msg = "filter_sorted requires a re-iterable collection, not an iterator."
        raise TypeError(msg)
    return SortedQuery(records, predicate, key)


def query_by_max_rank(catalog: Catalog, max_rank: int) -> SortedQuery[Element]:
    """Return elements with an atomic number below ``max_rank`` ordered by name."""
    return filter_sorted(
        catalog.values(),
        lambda element: element.atomic_number < max_rank,
        lambda element: element.name,
    )


__all__ = [
    "Catalog",
    "LookupResult",
    "SortedQuery",
    "build_catalog",
    "filter_sorted",
    "lookup",
    "lookup_many",
    "query_by_max_rank",
]

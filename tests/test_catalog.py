"""Tests for the element catalog and its queries."""

from __future__ import annotations
import logging
import pytest
from catalogkit.catalog import (
    Catalog,
    LookupResult,
    build_catalog,
    filter_sorted,
    lookup,
    lookup_many,
    query_by_max_rank,
)
from catalogkit.config import get_settings
from catalogkit.errors import CatalogKeyMismatchError, DuplicateCodeError
from catalogkit.models import Element
from catalogkit.samples import LOOKUP_SYMBOLS, build_default_catalog


POTASSIUM = Element(symbol="K", name="Potassium", atomic_number=19)
CALCIUM = Element(symbol="Ca", name="Calcium", atomic_number=20)


def test_lookup_returns_registered_element() -> None:
    catalog = build_catalog([("K", POTASSIUM), ("Ca", CALCIUM)])

    assert lookup(catalog, "K") is POTASSIUM
    assert catalog.lookup("Ca") is CALCIUM


def test_lookup_missing_code_returns_none() -> None:
    catalog = build_catalog([("K", POTASSIUM)])

    assert lookup(catalog, "Na") is None
    assert lookup(catalog, "k") is None


def test_build_rejects_duplicates_by_default() -> None:
    replacement = Element(symbol="K", name="Kalium", atomic_number=19)

    with pytest.raises(DuplicateCodeError) as excinfo:
        build_catalog([("K", POTASSIUM), ("K", replacement)])

    assert excinfo.value.code == "K"
    assert isinstance(excinfo.value, ValueError)


def test_build_last_write_wins_keeps_later_entry(
    caplog: pytest.LogCaptureFixture,
) -> None:
    replacement = Element(symbol="K", name="Kalium", atomic_number=19)

    with caplog.at_level(logging.WARNING, logger="catalogkit.catalog"):
        catalog = build_catalog(
            [("K", POTASSIUM), ("K", replacement)], policy="last_write_wins"
        )

    assert len(catalog) == 1
    assert lookup(catalog, "K") is replacement
    assert "Replacing catalog entry for code K" in caplog.text


def test_build_uses_configured_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOGKIT_DUPLICATE_POLICY", "last_write_wins")
    get_settings(refresh=True)
    replacement = Element(symbol="Ca", name="Calx", atomic_number=20)

    catalog = build_catalog([("Ca", CALCIUM), ("Ca", replacement)])

    assert catalog.policy == "last_write_wins"
    assert lookup(catalog, "Ca") is replacement


def test_build_rejects_mismatched_key() -> None:
    with pytest.raises(CatalogKeyMismatchError):
        build_catalog([("Na", POTASSIUM)])


def test_register_uses_element_symbol() -> None:
    catalog = Catalog()
    catalog.register(CALCIUM)

    assert "Ca" in catalog
    assert list(catalog) == ["Ca"]
    with pytest.raises(DuplicateCodeError):
        catalog.register(CALCIUM)


def test_catalog_preserves_insertion_order() -> None:
    catalog = build_default_catalog()

    assert [code for code, _ in catalog.items()] == ["K", "Ca", "Sc", "Ti"]
    assert [element.symbol for element in catalog.records()] == [
        "K",
        "Ca",
        "Sc",
        "Ti",
    ]


def test_lookup_many_reports_missing_symbols() -> None:
    catalog = build_default_catalog()

    results = lookup_many(catalog, LOOKUP_SYMBOLS)

    assert [result.code for result in results] == list(LOOKUP_SYMBOLS)
    missing = [result.code for result in results if not result.found]
    assert missing == ["Na", "Cl"]
    found = [result.element.name for result in results if result.element]
    assert found == ["Potassium", "Calcium", "Scandium", "Titanium"]


def test_lookup_result_found_flag() -> None:
    assert LookupResult(code="K", element=POTASSIUM).found
    assert not LookupResult(code="Na", element=None).found


def test_query_by_max_rank_orders_by_name() -> None:
    catalog = build_default_catalog()

    result = [
        (element.name, element.atomic_number)
        for element in query_by_max_rank(catalog, 22)
    ]

    assert result == [("Calcium", 20), ("Potassium", 19), ("Scandium", 21)]


def test_filter_sorted_is_stable_for_equal_keys() -> None:
    records = [("b", 1), ("a", 2), ("b", 0), ("a", 1), ("c", 5)]

    query = filter_sorted(records, lambda item: item[1] < 5, lambda item: item[0])

    assert list(query) == [("a", 2), ("a", 1), ("b", 1), ("b", 0)]


def test_filter_sorted_is_lazy_and_restartable() -> None:
    calls: list[int] = []
    numbers = [3, 1, 2]

    def predicate(value: int) -> bool:
        calls.append(value)
        return value > 1

    query = filter_sorted(numbers, predicate, lambda value: value)
    assert calls == []

    first = list(query)
    second = query.to_list()

    assert first == second == [2, 3]
    assert len(calls) == 6


def test_filter_sorted_sees_source_changes() -> None:
    catalog = build_catalog([("K", POTASSIUM)])
    query = query_by_max_rank(catalog, 22)

    catalog.register(CALCIUM)

    assert [element.name for element in query] == ["Calcium", "Potassium"]


def test_filter_sorted_output_is_subset_matching_predicate() -> None:
    catalog = build_default_catalog()
    records = catalog.records()

    result = list(
        filter_sorted(records, lambda e: e.atomic_number % 2 == 0, lambda e: e.name)
    )

    assert all(element in records for element in result)
    assert all(element.atomic_number % 2 == 0 for element in result)
    assert [element.name for element in result] == sorted(e.name for e in result)


@pytest.mark.parametrize("policy", ["bogus", "REJECT", "last-write-wins"])
def test_build_rejects_unknown_policy(policy: str) -> None:
    replacement = Element(symbol="K", name="Kalium", atomic_number=19)

    with pytest.raises(ValueError, match="Unknown duplicate policy"):
        build_catalog(
            [("K", POTASSIUM), ("K", replacement)],
            policy=policy,  # type: ignore[arg-type]
        )


def test_catalog_constructor_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError, match="Unknown duplicate policy"):
        Catalog(policy="first_wins")  # type: ignore[arg-type]


def test_filter_sorted_rejects_one_shot_iterator() -> None:
    source = iter([POTASSIUM, CALCIUM])

    with pytest.raises(TypeError, match="re-iterable"):
        filter_sorted(source, lambda element: True, lambda element: element.name)


def test_filter_sorted_accepts_range_source() -> None:
    query = filter_sorted(range(6), lambda value: value % 2 == 0, lambda v: -v)

    assert list(query) == [4, 2, 0]
    assert list(query) == [4, 2, 0]

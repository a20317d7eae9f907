"""Sample data sets used by the command line interface and tests."""

from __future__ import annotations
from catalogkit.catalog import Catalog, build_catalog
from catalogkit.config import DuplicatePolicy
from catalogkit.models import Element, Galaxy


LOOKUP_SYMBOLS: tuple[str, ...] = ("K", "Na", "Ca", "Cl", "Sc", "Ti")
"""Symbols queried by the lookup report; ``Na`` and ``Cl`` are absent."""


def default_elements() -> list[Element]:
    """Return the fourth-period elements stored in the sample catalog."""
    return [
        Element(symbol="K", name="Potassium", atomic_number=19),
        Element(symbol="Ca", name="Calcium", atomic_number=20),
        Element(symbol="Sc", name="Scandium", atomic_number=21),
        Element(symbol="Ti", name="Titanium", atomic_number=22),
    ]


def build_default_catalog(*, policy: DuplicatePolicy | None = None) -> Catalog:
    """Return the sample element catalog keyed by symbol."""
    return build_catalog(
        ((element.symbol, element) for element in default_elements()),
        policy=policy,
    )


def default_galaxies() -> list[Galaxy]:
    """Return galaxies in their declaration order."""
    return [
        Galaxy(name="Tadpole", mega_light_years=400),
        Galaxy(name="Pinwheel", mega_light_years=25),
        Galaxy(name="Milky Way", mega_light_years=0),
        Galaxy(name="Andromeda", mega_light_years=3),
    ]


def default_salmon() -> list[str]:
    """Return the salmon species list."""
    return ["chinook", "coho", "pink", "sockeye"]


def default_numbers() -> list[int]:
    """Return the integers 0 through 9."""
    return list(range(10))


__all__ = [
    "LOOKUP_SYMBOLS",
    "build_default_catalog",
    "default_elements",
    "default_galaxies",
    "default_numbers",
    "default_salmon",
]

"""Record types stored in catalogs and ordered sequences."""

from __future__ import annotations
from pydantic import Field, field_validator
from catalogkit.models.base import CatalogBaseModel, FrozenCatalogModel


class Element(FrozenCatalogModel):
    """Chemical element keyed by its symbol.

    Attributes:
        symbol: Short code identifying the element within a catalog
        name: Human-readable element name
        atomic_number: Rank used for ordering and range queries
    """

    symbol: str = Field(min_length=1)
    """Unique code of the element within its catalog."""
    name: str = Field(min_length=1)
    """Display name of the element."""
    atomic_number: int = Field(ge=0)
    """Atomic number, used as the element's rank."""

    @field_validator("symbol", "name", mode="before")
    @classmethod
    def _reject_blank(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            msg = "Element symbol and name must not be blank."
            raise ValueError(msg)
        return value

    @property
    def code(self) -> str:
        """Return the catalog key for this element."""
        return self.symbol

    @property
    def rank(self) -> int:
        """Return the ordering rank for this element."""
        return self.atomic_number


class Galaxy(CatalogBaseModel):
    """Mutable galaxy record used for ordered display."""

    name: str = Field(min_length=1)
    mega_light_years: int = Field(default=0, ge=0)

    @property
    def distance(self) -> int:
        """Return the distance in millions of light years."""
        return self.mega_light_years


__all__ = ["Element", "Galaxy"]

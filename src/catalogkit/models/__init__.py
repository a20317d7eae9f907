"""Domain models for catalog records."""

from catalogkit.models.base import CatalogBaseModel, FrozenCatalogModel
from catalogkit.models.records import Element, Galaxy


__all__ = [
    "CatalogBaseModel",
    "Element",
    "FrozenCatalogModel",
    "Galaxy",
]

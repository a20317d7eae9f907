"""Shared pydantic base classes for catalog records."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class CatalogBaseModel(BaseModel):
    """Base model applying the common validation settings."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class FrozenCatalogModel(CatalogBaseModel):
    """Base model for immutable, hashable records."""

    model_config = ConfigDict(frozen=True)


__all__ = ["CatalogBaseModel", "FrozenCatalogModel"]

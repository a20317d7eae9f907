"""Error types raised by catalogkit."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base error type for catalog operations."""


class DuplicateCodeError(CatalogError, ValueError):
    """Raised when a code is registered twice under the reject policy."""

    def __init__(self, code: str) -> None:
        """Record the offending code."""
        super().__init__(f"Record already registered for code '{code}'")
        self.code = code


class CatalogKeyMismatchError(CatalogError, ValueError):
    """Raised when an entry key does not match the record's own code."""

    def __init__(self, key: str, code: str) -> None:
        """Record both the supplied key and the record code."""
        msg = f"Entry key '{key}' does not match record code '{code}'"
        super().__init__(msg)
        self.key = key
        self.code = code


class IndexOutOfRangeError(CatalogError, IndexError):
    """Raised when a positional removal targets an index outside the sequence."""

    def __init__(self, index: int, length: int) -> None:
        """Record the rejected index and the sequence length."""
        msg = f"Index {index} is out of range for sequence of length {length}"
        super().__init__(msg)
        self.index = index
        self.length = length


__all__ = [
    "CatalogError",
    "CatalogKeyMismatchError",
    "DuplicateCodeError",
    "IndexOutOfRangeError",
]

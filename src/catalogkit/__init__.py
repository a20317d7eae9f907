"""In-memory catalogs, ordered queries and sequence helpers."""

from catalogkit.catalog import (
    Catalog,
    LookupResult,
    SortedQuery,
    build_catalog,
    filter_sorted,
    lookup,
    lookup_many,
    query_by_max_rank,
)
from catalogkit.errors import (
    CatalogError,
    CatalogKeyMismatchError,
    DuplicateCodeError,
    IndexOutOfRangeError,
)
from catalogkit.generators import (
    BoundedSequence,
    bounded_sequence,
    even_sequence,
    is_even,
    is_odd,
)
from catalogkit.models import Element, Galaxy
from catalogkit.sequences import (
    append,
    for_each,
    remove_by_index,
    remove_by_value,
    remove_where,
)


__all__ = [
    "BoundedSequence",
    "Catalog",
    "CatalogError",
    "CatalogKeyMismatchError",
    "DuplicateCodeError",
    "Element",
    "Galaxy",
    "IndexOutOfRangeError",
    "LookupResult",
    "SortedQuery",
    "append",
    "bounded_sequence",
    "build_catalog",
    "even_sequence",
    "filter_sorted",
    "for_each",
    "is_even",
    "is_odd",
    "lookup",
    "lookup_many",
    "query_by_max_rank",
    "remove_by_index",
    "remove_by_value",
    "remove_where",
]

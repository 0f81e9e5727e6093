"""
Seqkit: ordered-sequence algorithms.

Provides multiset algebra, order-preserving insertion and removal, binary
and ternary search, and bounded-concurrency async iteration over plain
Python lists.

Usage:
    from seqkit import intersection, insert, binary_search, map_async, AsyncOptions

    # Multiset intersection of unsorted inputs
    common = intersection([3, 1, 1], [1, 3, 3])   # [1, 3]

    # Keep a list sorted while inserting
    index = insert(scores, 42)

    # Leftmost / rightmost position of a value
    lo = binary_search(scores, 42)
    hi = binary_search(scores, 42, "upper")

    # At most four callbacks in flight, results in input order
    pages = await map_async(urls, fetch, AsyncOptions(max_concurrency=4))
"""

from .compare import (
    Comparator,
    Selector,
    default_compare,
    compare_by_keys,
    sort_key,
    is_ascending,
    is_descending,
    is_ascending_by_key,
    is_descending_by_key,
    sort_by_key,
)
from .errors import (
    SeqkitError,
    EmptyInputError,
    SubsetViolationError,
    UnsupportedElementTypeError,
)
from .setops import intersection, union, complement, difference, intersects, range
from .mutation import insert, insert_at, remove, remove_at, remove_by
from .search import (
    Bound,
    binary_search,
    binary_search_by_key,
    ternary_search,
    ternary_search_by_key,
)
from .aggregate import (
    to_number,
    last,
    minimum,
    maximum,
    minimum_by_key,
    maximum_by_key,
    sum,
    product,
    group_by,
    repeat,
)
from .aio import (
    AsyncOptions,
    for_each_async,
    map_async,
    sum_async,
    product_async,
    wait_until,
)

__version__ = "0.1.0"
__all__ = [
    # Comparators
    "Comparator",
    "Selector",
    "default_compare",
    "compare_by_keys",
    "sort_key",
    "is_ascending",
    "is_descending",
    "is_ascending_by_key",
    "is_descending_by_key",
    "sort_by_key",
    # Errors
    "SeqkitError",
    "EmptyInputError",
    "SubsetViolationError",
    "UnsupportedElementTypeError",
    # Multiset algebra
    "intersection",
    "union",
    "complement",
    "difference",
    "intersects",
    "range",
    # In-place mutation
    "insert",
    "insert_at",
    "remove",
    "remove_at",
    "remove_by",
    # Search
    "Bound",
    "binary_search",
    "binary_search_by_key",
    "ternary_search",
    "ternary_search_by_key",
    # Folds
    "to_number",
    "last",
    "minimum",
    "maximum",
    "minimum_by_key",
    "maximum_by_key",
    "sum",
    "product",
    "group_by",
    "repeat",
    # Async iteration
    "AsyncOptions",
    "for_each_async",
    "map_async",
    "sum_async",
    "product_async",
    "wait_until",
]

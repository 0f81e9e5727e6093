"""Folds and small accessors over sequences."""

from __future__ import annotations
from typing import Any, Callable, Hashable, Sequence, TypeVar

from .compare import Comparator, Selector, compare_by_keys, default_compare
from .errors import UnsupportedElementTypeError

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def to_number(value: Any) -> float:
    """
    Default numeric conversion used by ``sum`` and ``product``.

    Booleans count as 0/1, strings are parsed as floats.

    Raises:
        UnsupportedElementTypeError: for any other type or an unparsable string.
    """
    if isinstance(value, (bool, int, float)):
        return int(value) if isinstance(value, bool) else value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as e:
            raise UnsupportedElementTypeError(f"{value!r} cannot be converted to number") from e
    raise UnsupportedElementTypeError(f"{type(value).__name__} cannot be converted to number")


def last(seq: Sequence[T], index: int = 0, default: T | None = None) -> T | None:
    """Index ``seq`` from the end; ``default`` when out of range."""
    if index < 0 or index >= len(seq):
        return default
    return seq[len(seq) - index - 1]


def _extremum(seq: Sequence[T], compare: Comparator[T], sign: int) -> T | None:
    if not seq:
        return None
    result = seq[0]
    for item in seq[1:]:
        if compare(item, result) * sign > 0:
            result = item
    return result


def minimum(seq: Sequence[T], compare: Comparator[T] | None = None) -> T | None:
    return _extremum(seq, compare or default_compare, -1)


def maximum(seq: Sequence[T], compare: Comparator[T] | None = None) -> T | None:
    return _extremum(seq, compare or default_compare, 1)


def minimum_by_key(seq: Sequence[T], *selectors: Selector[T]) -> T | None:
    return minimum(seq, compare_by_keys(*selectors))


def maximum_by_key(seq: Sequence[T], *selectors: Selector[T]) -> T | None:
    return maximum(seq, compare_by_keys(*selectors))


def sum(seq: Sequence[T], selector: Callable[[T], float] | None = None) -> float:
    selector = selector or to_number
    result = 0
    for item in seq:
        result += selector(item)
    return result


def product(seq: Sequence[T], selector: Callable[[T], float] | None = None) -> float:
    selector = selector or to_number
    result = 1
    for item in seq:
        result *= selector(item)
    return result


def group_by(seq: Sequence[T], selector: Callable[[T], K]) -> dict[K, list[T]]:
    """Group elements by key, keys in first-seen order."""
    groups: dict[K, list[T]] = {}
    for item in seq:
        groups.setdefault(selector(item), []).append(item)
    return groups


def repeat(seq: Sequence[T], count: int = 1) -> list[T]:
    """New list holding ``count`` back-to-back copies of ``seq``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return list(seq) * count

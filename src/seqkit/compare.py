"""
Comparators and ordering helpers shared by every other module.

A comparator returns a negative number if ``a < b``, positive if ``a > b``
and zero if they rank equally. A selector chain builds a lexicographic
comparator: compare by the first key, break ties with the second, and so on.

Example:
    people.sort(key=sort_key(compare_by_keys(lambda p: p.age, lambda p: p.name)))
"""

from __future__ import annotations
from typing import Any, Callable, Sequence, TypeVar
from functools import cmp_to_key

T = TypeVar("T")

Comparator = Callable[[T, T], int]
Selector = Callable[[T], Any]


def default_compare(a: Any, b: Any) -> int:
    """Natural ordering: -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_by_keys(*selectors: Selector[T]) -> Comparator[T]:
    """
    Build a comparator from a chain of key selectors.

    Keys are compared in order and the first non-equal pair decides.
    With no selectors the natural ordering is used.
    """
    if not selectors:
        return default_compare

    def compare(a: T, b: T) -> int:
        for selector in selectors:
            key_a = selector(a)
            key_b = selector(b)
            if key_a < key_b:
                return -1
            if key_a > key_b:
                return 1
        return 0

    return compare


def sort_key(compare: Comparator[T] | None = None) -> Callable[[T], Any]:
    """Adapt a comparator for ``sorted``/``list.sort``."""
    return cmp_to_key(compare or default_compare)


def is_ascending(seq: Sequence[T], compare: Comparator[T] | None = None) -> bool:
    compare = compare or default_compare
    return all(compare(seq[i - 1], seq[i]) <= 0 for i in range(1, len(seq)))


def is_descending(seq: Sequence[T], compare: Comparator[T] | None = None) -> bool:
    compare = compare or default_compare
    return all(compare(seq[i - 1], seq[i]) >= 0 for i in range(1, len(seq)))


def is_ascending_by_key(seq: Sequence[T], *selectors: Selector[T]) -> bool:
    return is_ascending(seq, compare_by_keys(*selectors))


def is_descending_by_key(seq: Sequence[T], *selectors: Selector[T]) -> bool:
    return is_descending(seq, compare_by_keys(*selectors))


def sort_by_key(seq: list[T], *selectors: Selector[T]) -> list[T]:
    """Sort ``seq`` in place by the selector chain and return it."""
    if len(seq) < 2:
        return seq
    seq.sort(key=sort_key(compare_by_keys(*selectors)))
    return seq

"""
Index searches over ordered and unimodal sequences.

``bound`` picks which of several equally ranked positions is returned:
``"lower"`` the leftmost, ``"upper"`` the rightmost.
"""

from __future__ import annotations
from typing import Literal, Sequence, TypeVar

from .compare import Comparator, Selector, compare_by_keys, default_compare

T = TypeVar("T")

Bound = Literal["lower", "upper"]


def _check_bound(bound: str) -> None:
    if bound not in ("lower", "upper"):
        raise ValueError(f"bound must be 'lower' or 'upper', got {bound!r}")


def binary_search(
    seq: Sequence[T],
    value: T,
    bound: Bound = "lower",
    compare: Comparator[T] | None = None,
) -> int:
    """
    Find the position of ``value`` in an ordered sequence.

    The direction is detected by comparing the first and last elements.

    Returns:
        For an ascending sequence, the index of the first element not less
        than ``value`` (``bound="lower"``) or of the first element greater
        than ``value`` (``bound="upper"``). Mirrored for descending sequences.
        ``0`` if ``value`` precedes every element or the sequence is empty,
        ``len(seq)`` if it follows every element.
    """
    _check_bound(bound)
    if not seq:
        return 0
    compare = compare or default_compare
    descending = compare(seq[0], seq[-1]) > 0
    left, right = 0, len(seq) - 1
    while left <= right:
        mid = (left + right) >> 1
        cmp = compare(seq[mid], value)
        if descending:
            cmp = -cmp
        if cmp < 0:
            left = mid + 1
        elif cmp > 0:
            right = mid - 1
        elif bound == "lower":
            right = mid - 1
        else:
            left = mid + 1
    return left


def binary_search_by_key(
    seq: Sequence[T],
    value: T,
    *selectors: Selector[T],
    bound: Bound = "lower",
) -> int:
    return binary_search(seq, value, bound, compare_by_keys(*selectors))


def ternary_search(
    seq: Sequence[T],
    bound: Bound = "lower",
    compare: Comparator[T] | None = None,
) -> int:
    """
    Find the extremum of a unimodal sequence.

    A peak is searched for unless either end ranks above the middle element,
    in which case the sequence is treated as a valley.

    Returns:
        Index of the first extremum (``bound="lower"``) or the last one
        (``bound="upper"``). ``len(seq) - 1`` for sequences shorter than two.
    """
    _check_bound(bound)
    if len(seq) <= 1:
        return len(seq) - 1
    compare = compare or default_compare
    middle = seq[(len(seq) - 1) >> 1]
    valley = compare(seq[0], middle) > 0 or compare(seq[-1], middle) > 0
    left, right = 0, len(seq) - 1
    while right - left > 1:
        third = (right - left) // 3
        mid1 = left + third
        mid2 = right - third
        cmp = compare(seq[mid1], seq[mid2])
        if valley:
            cmp = -cmp
        if cmp > 0:
            right = mid2 - 1
        elif cmp < 0:
            left = mid1 + 1
        elif bound == "lower":
            right = mid2 - 1
        else:
            left = mid1 + 1
    if left == right:
        return left
    cmp = compare(seq[left], seq[right])
    if valley:
        cmp = -cmp
    if cmp > 0:
        return left
    if cmp < 0:
        return right
    return left if bound == "lower" else right


def ternary_search_by_key(
    seq: Sequence[T],
    *selectors: Selector[T],
    bound: Bound = "lower",
) -> int:
    return ternary_search(seq, bound, compare_by_keys(*selectors))

"""
Multiset algebra over unsorted sequences.

Every operation copies and sorts its inputs with the effective comparator
and then walks them with two pointers. Inputs are never mutated. Element
multiplicities are preserved: intersection keeps the smaller count of each
value, union the larger.
"""

from __future__ import annotations
from typing import Callable, Sequence, TypeVar
import logging

from .compare import Comparator, default_compare, sort_key
from .errors import EmptyInputError, SubsetViolationError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _sorted_copy(seq: Sequence[T], compare: Comparator[T]) -> list[T]:
    return sorted(seq, key=sort_key(compare))


def _merge_intersection(a: list[T], b: list[T], compare: Comparator[T]) -> list[T]:
    result: list[T] = []
    i = j = 0
    while i < len(a) and j < len(b):
        cmp = compare(a[i], b[j])
        if cmp == 0:
            result.append(a[i])
            i += 1
            j += 1
        elif cmp < 0:
            i += 1
        else:
            j += 1
    return result


def _merge_union(a: list[T], b: list[T], compare: Comparator[T]) -> list[T]:
    result: list[T] = []
    i = j = 0
    while i < len(a) and j < len(b):
        cmp = compare(a[i], b[j])
        if cmp == 0:
            result.append(a[i])
            i += 1
            j += 1
        elif cmp < 0:
            result.append(a[i])
            i += 1
        else:
            result.append(b[j])
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def intersection(*seqs: Sequence[T], compare: Comparator[T] | None = None) -> list[T]:
    """
    Multiset intersection of one or more sequences.

    A single sequence is returned as is. The result is sorted.

    Raises:
        EmptyInputError: if no sequence is given.
    """
    if not seqs:
        raise EmptyInputError("intersection requires at least one sequence")
    if len(seqs) == 1:
        return seqs[0]
    compare = compare or default_compare
    result = _sorted_copy(seqs[0], compare)
    for seq in seqs[1:]:
        result = _merge_intersection(result, _sorted_copy(seq, compare), compare)
        if not result:
            break
    return result


def union(*seqs: Sequence[T], compare: Comparator[T] | None = None) -> list[T]:
    """
    Multiset union of one or more sequences.

    A single sequence is returned as is. The result is sorted.

    Raises:
        EmptyInputError: if no sequence is given.
    """
    if not seqs:
        raise EmptyInputError("union requires at least one sequence")
    if len(seqs) == 1:
        return seqs[0]
    compare = compare or default_compare
    result = _sorted_copy(seqs[0], compare)
    for seq in seqs[1:]:
        result = _merge_union(result, _sorted_copy(seq, compare), compare)
    return result


def complement(
    source: Sequence[T],
    universal: Sequence[T],
    compare: Comparator[T] | None = None,
) -> list[T]:
    """
    Elements of ``universal`` left after taking out ``source``.

    Raises:
        SubsetViolationError: if ``source`` is not a sub-multiset of ``universal``.
    """
    if not source:
        return list(universal)
    if len(source) > len(universal):
        logger.debug(
            "complement source has %d elements, universal only %d",
            len(source), len(universal),
        )
        raise SubsetViolationError(
            f"source ({len(source)} elements) is larger than universal ({len(universal)} elements)"
        )
    compare = compare or default_compare
    src = _sorted_copy(source, compare)
    dst = _sorted_copy(universal, compare)
    result: list[T] = []
    i = 0
    for item in dst:
        if i < len(src) and compare(src[i], item) == 0:
            i += 1
        else:
            result.append(item)
    if i != len(src):
        logger.debug("complement matched %d of %d source elements", i, len(src))
        raise SubsetViolationError("source is not a subset of universal")
    return result


def difference(
    source: Sequence[T],
    target: Sequence[T],
    compare: Comparator[T] | None = None,
) -> list[T]:
    """Multiset ``source - target``. Never raises."""
    if not source:
        return []
    if not target:
        return list(source)
    compare = compare or default_compare
    src = _sorted_copy(source, compare)
    dst = _sorted_copy(target, compare)
    result: list[T] = []
    j = 0
    for item in src:
        while j < len(dst) and compare(dst[j], item) < 0:
            j += 1
        if j < len(dst) and compare(item, dst[j]) == 0:
            j += 1
        else:
            result.append(item)
    return result


def intersects(
    first: Sequence[T],
    second: Sequence[T],
    compare: Comparator[T] | None = None,
) -> bool:
    """Whether the two sequences share at least one element."""
    compare = compare or default_compare
    a = _sorted_copy(first, compare)
    b = _sorted_copy(second, compare)
    i = j = 0
    while i < len(a) and j < len(b):
        cmp = compare(a[i], b[j])
        if cmp == 0:
            return True
        if cmp < 0:
            i += 1
        else:
            j += 1
    return False


def range(
    begin: float,
    end: float,
    step: float = 1,
    predicate: Callable[[float], bool] | None = None,
) -> list[float]:
    """
    Numbers from ``begin`` up to and including ``end`` in increments of ``step``.

    ``end`` is included only when reachable by the step. When ``predicate``
    is given only the numbers it accepts are kept.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    result = []
    value = begin
    while value <= end:
        if predicate is None or predicate(value):
            result.append(value)
        value += step
    return result


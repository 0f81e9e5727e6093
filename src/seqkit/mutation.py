"""
In-place mutation of caller-owned lists.

Removals run as a single compaction pass: survivors are shifted left over
the removed slots and the tail is truncated once.
"""

from __future__ import annotations
from typing import Any, Callable, TypeVar

from .compare import Comparator
from .search import binary_search

T = TypeVar("T")


def _valid_index(index: Any, length: int) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < length


def _compact(seq: list[T], drop: list[int]) -> None:
    """Remove the positions in ``drop`` (sorted, unique) from ``seq``."""
    if not drop:
        return
    offset = 0
    for i in range(drop[0], len(seq)):
        if offset < len(drop) and i == drop[offset]:
            offset += 1
        else:
            seq[i - offset] = seq[i]
    del seq[len(seq) - offset:]


def insert(seq: list[T], value: T, compare: Comparator[T] | None = None) -> int:
    """
    Insert ``value`` into an ordered list, keeping it ordered.

    The value goes before any element that ranks equal to it.

    Returns:
        The index ``value`` was inserted at.
    """
    index = binary_search(seq, value, "lower", compare)
    seq.insert(index, value)
    return index


def insert_at(seq: list[T], value: T, index: int) -> bool:
    """Insert ``value`` at ``index``. Returns False, leaving ``seq`` untouched, if out of range."""
    if not _valid_index(index, len(seq)):
        return False
    seq.insert(index, value)
    return True


def remove(seq: list[T], *values: T) -> int:
    """Remove every element equal to any of ``values``. Returns the number removed."""
    # tuple membership matches by identity first, so NaN removes itself
    drop = [i for i, item in enumerate(seq) if item in values]
    _compact(seq, drop)
    return len(drop)


def remove_at(seq: list[T], *indices: int) -> bool:
    """
    Remove the elements at ``indices``, given in any order.

    Returns False without mutating ``seq`` if any index is out of range.
    """
    if not all(_valid_index(index, len(seq)) for index in indices):
        return False
    _compact(seq, sorted(set(indices)))
    return True


def remove_by(seq: list[T], predicate: Callable[[T, int, list[T]], bool]) -> int:
    """Remove elements for which ``predicate(value, index, seq)`` is true. Returns the number removed."""
    drop = [i for i, item in enumerate(seq) if predicate(item, i, seq)]
    _compact(seq, drop)
    return len(drop)

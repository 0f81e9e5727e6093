"""Exceptions raised by seqkit operations."""


class SeqkitError(Exception):
    """Base class for seqkit errors."""


class EmptyInputError(SeqkitError, ValueError):
    """No sequence was passed to an operation that needs at least one."""


class SubsetViolationError(SeqkitError, ValueError):
    """The source of a complement is not a sub-multiset of the universal sequence."""


class UnsupportedElementTypeError(SeqkitError, TypeError):
    """An element cannot be converted to a number by the default conversion."""

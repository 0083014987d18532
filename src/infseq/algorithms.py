"""Generic algorithms over ``[first, last)`` iterator ranges.

The functions in this module do not know anything about sparse vectors.  They
accept *any* iterator type implementing the small forward-iterator protocol
below, which is exactly what :class:`infseq.SparseVectorIterator` and
:class:`infseq.primes.PrimeIterator` provide.

The algorithms only ever *copy* the iterators they are given, so the caller's
cursors are left where they were.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Protocol, runtime_checkable

__all__ = [
    "ForwardIterator",
    "iterate",
    "equal",
    "count_if",
    "distance",
]


@runtime_checkable
class ForwardIterator(Protocol):
    """Minimal forward-iterator capability set."""

    def copy(self) -> "ForwardIterator": ...

    def increment(self) -> "ForwardIterator": ...

    def deref(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


def iterate(first: ForwardIterator, last: ForwardIterator) -> Iterator[Any]:
    """Yield the dereferenced values of ``[first, last)``."""
    it = first.copy()
    while it != last:
        yield it.deref()
        it.increment()


def equal(first1: ForwardIterator, last1: ForwardIterator, first2: ForwardIterator) -> bool:
    """True iff ``[first1, last1)`` matches the range starting at *first2* element-wise.

    The second range must hold at least as many elements as the first one;
    callers compare sizes beforehand.
    """
    it1, it2 = first1.copy(), first2.copy()
    while it1 != last1:
        if not it1.deref() == it2.deref():
            return False
        it1.increment()
        it2.increment()
    return True


def count_if(first: ForwardIterator, last: ForwardIterator, pred: Callable[[Any], bool]) -> int:
    """Number of elements in ``[first, last)`` satisfying *pred*."""
    return sum(1 for item in iterate(first, last) if pred(item))


def distance(first: ForwardIterator, last: ForwardIterator) -> int:
    """Number of increments needed to get from *first* to *last*."""
    n = 0
    it = first.copy()
    while it != last:
        it.increment()
        n += 1
    return n

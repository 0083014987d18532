"""Backing stores for :class:`infseq.SparseVector`.

A backing store is the associative container that physically holds the
non-zero entries of a sparse vector.  The vector never exposes the store
directly; it only relies on the small capability set captured by
:class:`BackingStore`:

* ``len(store)``, ``find(key)``, ``insert_or_assign(key, value)``,
  ``erase(key)``, ``clear()``, ``copy()`` and ``items()``;
* an integer *cursor* API used by :class:`infseq.SparseVectorIterator`.
  A cursor is a position in ``range(len(store))``.  ``entry_at(pos)``
  returns the ``(key, value)`` pair stored there, ``next_pos`` / ``prev_pos``
  step through the store's *native* order.  ``next_pos`` of the last entry
  yields ``len(store)``, which the iterator turns into its own end marker;
  stores never hand out a position for end.

Two stores ship with the package:

``OrderedStore``
    Sorted-array stand-in for a tree map.  Keys are kept sorted (optionally
    by an ``order`` callable such as :func:`infseq.bijection.pair_nr`) in a
    list.  Lookups are ``O(log N)`` via :mod:`bisect`, inserting or erasing a
    *new* key shifts the list and costs ``O(N)``.  Cursors are bidirectional.

``HashStore``
    Hash-map analogue built on ``dict``.  The native order is insertion
    order and cursors are forward-only; ``prev_pos`` raises ``TypeError``.

Inserting a *new* key or erasing one invalidates outstanding cursors, just
like the native iterators of the containers these stores model (end
iterators are unaffected since they carry no position).
Overwriting the value of an existing key does not.
"""

from __future__ import annotations

import bisect
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Protocol, Tuple, runtime_checkable

__all__ = [
    "BackingStore",
    "OrderedStore",
    "HashStore",
    "make_store",
]

_MISSING = object()


@runtime_checkable
class BackingStore(Protocol):
    """Capability set a sparse vector needs from its storage."""

    kind: str
    bidirectional: bool

    def __len__(self) -> int: ...

    def find(self, key: Hashable, default: Any = None) -> Any: ...

    def __contains__(self, key: object) -> bool: ...

    def insert_or_assign(self, key: Hashable, value: Any) -> None: ...

    def erase(self, key: Hashable) -> bool: ...

    def clear(self) -> None: ...

    def copy(self) -> "BackingStore": ...

    def items(self) -> Iterator[Tuple[Any, Any]]: ...

    def entry_at(self, pos: int) -> Tuple[Any, Any]: ...

    def next_pos(self, pos: int) -> int: ...

    def prev_pos(self, pos: int) -> int: ...


def _pairs(entries) -> Iterable[Tuple[Any, Any]]:
    """Accept a mapping, a backing store or an iterable of pairs."""
    items = getattr(entries, "items", None)
    return items() if callable(items) else entries


# -----------------------------------------------------------------------------
# Ordered store
# -----------------------------------------------------------------------------

class OrderedStore:
    """Sorted key → value store with bidirectional cursors.

    Parameters
    ----------
    entries:
        Optional initial content (mapping, store or iterable of pairs).
    order:
        Optional callable mapping a key to its *rank*.  Entries are sorted by
        rank and two keys with the same rank are the same entry, mirroring a
        tree map with a custom comparator.  ``None`` sorts by the keys
        themselves, so tuple keys are ordered lexicographically.
    """

    kind = "ordered"
    bidirectional = True

    __slots__ = ("_order", "_ranks", "_entries")

    def __init__(self, entries=(), order: Optional[Callable[[Any], Any]] = None):
        self._order = order
        self._ranks: List[Any] = []
        self._entries: Dict[Any, Tuple[Any, Any]] = {}
        for key, value in _pairs(entries):
            self.insert_or_assign(key, value)

    @property
    def order(self) -> Optional[Callable[[Any], Any]]:
        return self._order

    def _rank(self, key):
        return key if self._order is None else self._order(key)

    # -- mapping ---------------------------------------------------------
    def __len__(self) -> int:
        return len(self._ranks)

    def __contains__(self, key: object) -> bool:
        return self._rank(key) in self._entries

    def find(self, key, default=None):
        entry = self._entries.get(self._rank(key), _MISSING)
        return default if entry is _MISSING else entry[1]

    def insert_or_assign(self, key, value) -> None:
        rank = self._rank(key)
        entry = self._entries.get(rank)
        if entry is None:
            bisect.insort(self._ranks, rank)
            self._entries[rank] = (key, value)
        else:
            # keep the key that was stored first, like a tree map does
            self._entries[rank] = (entry[0], value)

    def erase(self, key) -> bool:
        rank = self._rank(key)
        if self._entries.pop(rank, None) is None:
            return False
        del self._ranks[bisect.bisect_left(self._ranks, rank)]
        return True

    def clear(self) -> None:
        self._ranks.clear()
        self._entries.clear()

    def copy(self) -> "OrderedStore":
        other = OrderedStore(order=self._order)
        other._ranks = list(self._ranks)
        other._entries = dict(self._entries)
        return other

    def items(self) -> Iterator[Tuple[Any, Any]]:
        for rank in self._ranks:
            yield self._entries[rank]

    # -- cursors ---------------------------------------------------------
    def entry_at(self, pos: int) -> Tuple[Any, Any]:
        return self._entries[self._ranks[pos]]

    def next_pos(self, pos: int) -> int:
        return pos + 1

    def prev_pos(self, pos: int) -> int:
        return pos - 1

    def __repr__(self) -> str:
        return f"OrderedStore({dict(self.items())!r})"


# -----------------------------------------------------------------------------
# Hash store
# -----------------------------------------------------------------------------

class HashStore:
    """``dict``-backed store with forward-only cursors.

    The cursor API walks a snapshot of the key list which is rebuilt lazily
    after a key has been inserted or erased.
    """

    kind = "hash"
    bidirectional = False

    __slots__ = ("_data", "_snapshot")

    def __init__(self, entries=()):
        self._data: Dict[Any, Any] = dict(_pairs(entries))
        self._snapshot: Optional[List[Any]] = None

    def _keys(self) -> List[Any]:
        if self._snapshot is None:
            self._snapshot = list(self._data)
        return self._snapshot

    # -- mapping ---------------------------------------------------------
    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def find(self, key, default=None):
        return self._data.get(key, default)

    def insert_or_assign(self, key, value) -> None:
        if key not in self._data:
            self._snapshot = None
        self._data[key] = value

    def erase(self, key) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        self._snapshot = None
        return True

    def clear(self) -> None:
        self._data.clear()
        self._snapshot = None

    def copy(self) -> "HashStore":
        return HashStore(self._data)

    def items(self) -> Iterator[Tuple[Any, Any]]:
        return iter(self._data.items())

    # -- cursors ---------------------------------------------------------
    def entry_at(self, pos: int) -> Tuple[Any, Any]:
        key = self._keys()[pos]
        return key, self._data[key]

    def next_pos(self, pos: int) -> int:
        return pos + 1

    def prev_pos(self, pos: int) -> int:
        raise TypeError("HashStore cursors are forward-only; decrement needs an OrderedStore")

    def __repr__(self) -> str:
        return f"HashStore({self._data!r})"


def make_store(kind: str = "ordered", entries=(), **kwargs) -> BackingStore:
    """Build a store by name (``"ordered"`` or ``"hash"``)."""
    if kind == "ordered":
        return OrderedStore(entries, **kwargs)
    if kind == "hash":
        if kwargs:
            raise TypeError(f"HashStore takes no options, got {sorted(kwargs)}")
        return HashStore(entries)
    raise ValueError(f"Unknown store kind {kind!r}; expected 'ordered' or 'hash'")

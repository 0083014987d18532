"""Sparse vectors: infinite sequences with finite support.

A :class:`SparseVector` represents a function ``I → C`` that is zero except at
finitely many indices.  Only explicitly set entries are stored, in a backing
store owned by the vector (see :mod:`infseq.stores`).

Design notes
------------
* The store is held by *composition*.  The vector forwards a curated set of
  operations (``get``/``set``/``size``/``begin``/``end``) and never exposes an
  indexing operation that inserts on read.  ``v[i]`` is a plain :meth:`get`.
* Setting a zero is stored literally.  Equality is *structural*: two vectors
  are equal iff they hold the same entries in the same native order, so
  ``{1: 0.0}`` and ``{}`` differ.
* Equality walks both vectors with :func:`infseq.algorithms.equal`.  When the
  two vectors have different native orders (ordered vs hash store, two
  different ``order`` callables, or different key transforms) the result
  depends on those orders.  Making them coincide is the caller's
  responsibility; a :class:`StoreOrderWarning` is emitted as a reminder.
* An optional :class:`infseq.keys.KeyTransform` turns tuple indices into
  scalar store keys.  Iterators decode them back, so clients only ever see
  tuples.

Example
-------
>>> v = SparseVector()
>>> v.set(1, 2.5)
>>> v.get(1), v.get(2), v.size()
(2.5, 0.0, 1)
"""

from __future__ import annotations

import warnings
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from . import config
from .algorithms import count_if, equal, iterate
from .iterator import _END, Entry, SparseVectorIterator
from .keys import KeyTransform
from .stores import BackingStore, HashStore, OrderedStore, make_store

__all__ = ["SparseVector", "StoreOrderWarning"]

_MISSING = object()


class StoreOrderWarning(UserWarning):
    """Two vectors with different native traversal orders were compared."""


def _order_signature(vector: "SparseVector") -> Tuple[str, Any, Optional[KeyTransform]]:
    # a key transform changes the traversal order of the decoded indices
    store = vector._store
    return store.kind, getattr(store, "order", None), vector._key


class SparseVector:
    """Finitely supported sequence over an index set.

    Parameters
    ----------
    store:
        ``None`` for an empty vector backed by an :class:`OrderedStore`, a
        backing store instance, or a plain mapping.  The entries are *copied
        verbatim* (zeros included) and the keys are taken as store keys, i.e.
        already encoded when a *key* transform is used.  A store keeps its
        kind, a mapping ends up in an :class:`OrderedStore`.
    zero:
        Value returned for indices that are not stored.  Defaults to
        :data:`infseq.config.DEFAULT_ZERO`.
    key:
        Optional :class:`KeyTransform` applied to indices before they reach
        the store.
    """

    __slots__ = ("_store", "_zero", "_key")

    def __init__(
        self,
        store: Union[BackingStore, Mapping[Any, Any], None] = None,
        *,
        zero: Any = None,
        key: Optional[KeyTransform] = None,
    ):
        if store is None:
            self._store: BackingStore = OrderedStore()
        elif isinstance(store, BackingStore):
            self._store = store.copy()
        elif isinstance(store, Mapping):
            self._store = OrderedStore(store)
        else:
            raise TypeError(f"Expected a backing store or a mapping, got {type(store).__name__}")
        self._zero = zero
        self._key = key

    # ------------------------------------------------------------------
    # Smart constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_items(
        cls,
        items: Iterable[Tuple[Any, Any]],
        *,
        kind: str = "ordered",
        zero: Any = None,
        key: Optional[KeyTransform] = None,
        **store_options: Any,
    ) -> "SparseVector":
        """Build a vector by :meth:`set`-ing ``(index, value)`` pairs in order."""
        vec = cls(make_store(kind, **store_options), zero=zero, key=key)
        for index, value in items:
            vec.set(index, value)
        return vec

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[Any, Any],
        *,
        kind: str = "ordered",
        zero: Any = None,
        key: Optional[KeyTransform] = None,
        **store_options: Any,
    ) -> "SparseVector":
        """Like :meth:`from_items` for a ``{index: value}`` mapping."""
        return cls.from_items(mapping.items(), kind=kind, zero=zero, key=key, **store_options)

    @classmethod
    def hashed(cls, *, zero: Any = None, key: Optional[KeyTransform] = None) -> "SparseVector":
        """Empty vector backed by a :class:`HashStore`."""
        return cls(HashStore(), zero=zero, key=key)

    # ------------------------------------------------------------------
    # Key handling
    # ------------------------------------------------------------------

    def _encode(self, index):
        return index if self._key is None else self._key.encode(index)

    def _decode(self, key):
        return key if self._key is None else self._key.decode(key)

    @property
    def zero(self) -> Any:
        return config.DEFAULT_ZERO if self._zero is None else self._zero

    @property
    def key(self) -> Optional[KeyTransform]:
        return self._key

    @property
    def store_kind(self) -> str:
        return self._store.kind

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get(self, index) -> Any:
        """Stored coefficient at *index*, or :attr:`zero`.  Never inserts."""
        value = self._store.find(self._encode(index), _MISSING)
        return self.zero if value is _MISSING else value

    __getitem__ = get

    def set(self, index, value) -> None:
        """Insert or overwrite the entry at *index*.  Zeros are stored as given."""
        self._store.insert_or_assign(self._encode(index), value)

    def discard(self, index) -> bool:
        """Remove the entry at *index*; returns whether one was stored."""
        return self._store.erase(self._encode(index))

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, index) -> bool:
        return self._encode(index) in self._store

    def size(self) -> int:
        """Number of stored entries."""
        return len(self._store)

    __len__ = size

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def begin(self) -> SparseVectorIterator:
        return SparseVectorIterator(self, 0)

    def end(self) -> SparseVectorIterator:
        return SparseVectorIterator(self, _END)

    def __iter__(self) -> Iterator[Entry]:
        return iterate(self.begin(), self.end())

    def items(self) -> Iterator[Entry]:
        return iter(self)

    def indices(self) -> Iterator[Any]:
        return (entry.index for entry in self)

    def values(self) -> Iterator[Any]:
        return (entry.value for entry in self)

    def count(self, value) -> int:
        """How many stored entries hold *value*."""
        return count_if(self.begin(), self.end(), lambda entry: entry.value == value)

    # ------------------------------------------------------------------
    # Comparison & copying
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        if _order_signature(self) != _order_signature(other):
            warnings.warn(
                f"Comparing sparse vectors with different native orders "
                f"({self._store.kind} vs {other._store.kind}); equality is order-sensitive.",
                StoreOrderWarning,
                stacklevel=2,
            )
        return self.size() == other.size() and equal(self.begin(), self.end(), other.begin())

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "SparseVector":
        return SparseVector(self._store, zero=self._zero, key=self._key)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """One ``index: value`` line per stored entry, ``0`` for an empty vector."""
        if self.begin() == self.end():
            return "0"
        lines = []
        it = self.begin()
        while it != self.end():
            value = it.value()
            shown = f"{value:g}" if isinstance(value, float) else str(value)
            lines.append(f"{it.index()}: {shown}")
            it.increment()
        return "\n".join(lines)

    def __repr__(self) -> str:
        entries = ", ".join(f"{index!r}: {value!r}" for index, value in self)
        key = "" if self._key is None else f", key={self._key.name}"
        return f"SparseVector({{{entries}}}, store={self._store.kind}{key})"

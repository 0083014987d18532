"""Cursor over the stored entries of a :class:`infseq.SparseVector`.

:class:`SparseVectorIterator` wraps an integer cursor into the vector's
backing store together with a read-only reference to the vector itself.  It
is a *forward* iterator for every store and a *bidirectional* one when the
store supports it (:class:`infseq.stores.OrderedStore`).

Two logical states exist:

* **valid** – positioned on a stored entry, dereferenceable;
* **end** – one past the last entry, comparable but not dereferenceable.

The end state is a fixed marker rather than the position ``len(store)``, so an
``end()`` iterator stays equal to ``end()`` when keys are inserted or erased.
Other iterators are invalidated by such mutations, as with a tree map.

Dereferencing yields an :class:`Entry`, a named ``(index, value)`` tuple.
Because it *is* a tuple, an entry compares equal to any plain
``(index, value)`` pair with the same content, so generic comparison code
(:func:`infseq.algorithms.equal`, ``==`` on lists, ``collections.Counter``)
sees values and never proxy objects.

Incrementing past ``end()``, decrementing ``begin()``, dereferencing ``end()``
and comparing iterators of different vectors are precondition violations.
They are only detected while :data:`infseq.config.DEBUG_CHECKS` is enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from . import config

if TYPE_CHECKING:  # pragma: no cover
    from .vector import SparseVector

__all__ = ["Entry", "SparseVectorIterator"]

_END = None  # position of the end iterator, independent of the store size


class Entry(NamedTuple):
    """A stored ``(index, value)`` pair."""

    index: Any
    value: Any


class SparseVectorIterator:
    """Forward (or bidirectional) iterator over a sparse vector's entries."""

    __slots__ = ("_vector", "_store", "_pos")

    def __init__(self, vector: "SparseVector", pos: Optional[int]):
        self._vector = vector
        self._store = vector._store
        self._pos = _END if pos is _END or pos >= len(self._store) else pos

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def vector(self) -> "SparseVector":
        return self._vector

    @property
    def position(self) -> Optional[int]:
        """Store position, ``None`` for the end iterator."""
        return self._pos

    @property
    def bidirectional(self) -> bool:
        return self._store.bidirectional

    def at_end(self) -> bool:
        return self._pos is _END

    def _advance(self) -> None:
        nxt = self._store.next_pos(self._pos)
        self._pos = _END if nxt >= len(self._store) else nxt

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def copy(self) -> "SparseVectorIterator":
        other = SparseVectorIterator.__new__(SparseVectorIterator)
        other._vector, other._store, other._pos = self._vector, self._store, self._pos
        return other

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVectorIterator):
            return NotImplemented
        if config.DEBUG_CHECKS and other._store is not self._store:
            raise ValueError("Comparing iterators of different sparse vectors")
        return self._store is other._store and self._pos == other._pos

    # cursors move in place
    __hash__ = None  # type: ignore[assignment]

    def increment(self) -> "SparseVectorIterator":
        """Pre-increment: advance and return ``self``."""
        if config.DEBUG_CHECKS and self.at_end():
            raise IndexError("Cannot increment past end()")
        self._advance()
        return self

    def post_increment(self) -> "SparseVectorIterator":
        """Post-increment: advance and return a copy of the old position."""
        old = self.copy()
        self.increment()
        return old

    def decrement(self) -> "SparseVectorIterator":
        """Pre-decrement; raises ``TypeError`` on forward-only stores."""
        pos = len(self._store) if self._pos is _END else self._pos
        if config.DEBUG_CHECKS and pos <= 0 and self._store.bidirectional:
            raise IndexError("Cannot decrement begin()")
        self._pos = self._store.prev_pos(pos)
        return self

    def post_decrement(self) -> "SparseVectorIterator":
        old = self.copy()
        self.decrement()
        return old

    def deref(self) -> Entry:
        """The ``(index, value)`` entry at the current position."""
        pos = len(self._store) if self._pos is _END else self._pos
        if config.DEBUG_CHECKS and not 0 <= pos < len(self._store):
            raise IndexError("Cannot dereference end() or an out-of-range cursor")
        key, value = self._store.entry_at(pos)
        return Entry(self._vector._decode(key), value)

    def index(self) -> Any:
        return self.deref().index

    def value(self) -> Any:
        return self.deref().value

    # ------------------------------------------------------------------
    # Python iteration from the current position
    # ------------------------------------------------------------------

    def __iter__(self) -> "SparseVectorIterator":
        return self

    def __next__(self) -> Entry:
        if self.at_end():
            raise StopIteration
        entry = self.deref()
        self._advance()
        return entry

    def __repr__(self) -> str:
        state = "end" if self.at_end() else f"pos={self._pos}"
        return f"<SparseVectorIterator {state} of {len(self._store)}>"

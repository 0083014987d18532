"""Key transforms for tuple-indexed sparse vectors.

A :class:`KeyTransform` plugs an index bijection into a
:class:`infseq.SparseVector`: tuple indices are *encoded* to a single integer
before they reach the backing store and *decoded* again whenever an entry is
read back through an iterator.  Client code keeps working with ``(j, k)`` or
``(j, k, l)`` tuples while the store only ever sees plain integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from . import config
from .bijection import pair_nr, pair_unnr, triple_nr, triple_unnr

__all__ = [
    "KeyTransform",
    "PAIR_KEYS",
    "TRIPLE_KEYS",
    "key_transform",
]


def _encode_pair(index: Tuple[int, int]) -> int:
    j, k = index
    return pair_nr(j, k)


def _encode_triple(index: Tuple[int, int, int]) -> int:
    j, k, l = index
    return triple_nr(j, k, l)


@dataclass(frozen=True, slots=True)
class KeyTransform:
    """Bijective map between tuple indices and scalar store keys."""

    name: str
    arity: int
    _encode: Callable[[tuple], int]
    _decode: Callable[[int], tuple]

    def encode(self, index: tuple) -> int:
        if config.DEBUG_CHECKS and len(index) != self.arity:
            raise ValueError(f"{self.name} keys need {self.arity} components, got {index!r}")
        return self._encode(index)

    def decode(self, key: int) -> tuple:
        return self._decode(key)

    def __repr__(self) -> str:
        return f"KeyTransform({self.name!r})"


PAIR_KEYS = KeyTransform("pair", 2, _encode_pair, pair_unnr)
TRIPLE_KEYS = KeyTransform("triple", 3, _encode_triple, triple_unnr)


def key_transform(arity: Optional[int]) -> Optional[KeyTransform]:
    """Return the transform for tuples of *arity* components (``None`` → no transform)."""
    if arity is None:
        return None
    if arity == 2:
        return PAIR_KEYS
    if arity == 3:
        return TRIPLE_KEYS
    raise ValueError(f"No index bijection for tuples of arity {arity}; supported: 2, 3")

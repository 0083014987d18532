"""Index bijections ℕ² → ℕ and ℕ³ → ℕ.

Composite keys such as ``(j, k)`` are more expensive to order and hash than a
plain integer.  The functions below enumerate integer tuples so that a tuple
can be replaced by a *single* non-negative integer before it reaches a
backing store.

Pairs are enumerated along anti-diagonals (Cantor's diagonal argument).  All
tuples with ``j + k < d`` number ``d(d+1)/2``, and inside diagonal ``d`` the
tuples are ordered by increasing ``j``::

    (0,0) → 0, (0,1) → 1, (1,0) → 2, (0,2) → 3, ...

Triples are enumerated shell by shell.  The shell ``j + k + l = s`` holds
``(s+1)(s+2)/2`` tuples and all smaller shells together hold the tetrahedral
number ``(s³ + 3s² + 2s)/6``.  Inside a shell the pair encoding of ``(j, k)``
picks the position (``l`` is implied by ``s``)::

    (0,0,0) → 0, (0,0,1) → 1, (0,1,0) → 2, (1,0,0) → 3, (0,0,2) → 4, ...

Everything is computed with exact integer arithmetic.  Python integers never
overflow; the tensor variants are exact as long as the result fits in
``int64``.

Negative components are outside the domain.  They are only rejected when
:data:`infseq.config.DEBUG_CHECKS` is enabled.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import torch
from torch import Tensor

from . import config

__all__ = [
    "pair_nr",
    "pair_unnr",
    "triple_nr",
    "triple_unnr",
    "tetrahedral",
    "diagonal_order",
    "pair_nr_tensor",
    "triple_nr_tensor",
]


def _check_domain(*components: int) -> None:
    if config.DEBUG_CHECKS and any(c < 0 for c in components):
        raise ValueError(f"Index bijection is defined for non-negative components only, got {components}")


# -----------------------------------------------------------------------------
# Scalar encodings
# -----------------------------------------------------------------------------

def tetrahedral(s: int) -> int:
    """Number of triples whose coordinate sum is smaller than *s*."""
    return (s * s * s + 3 * s * s + 2 * s) // 6


def pair_nr(j: int, k: int) -> int:
    """Diagonal enumeration ``(j+k)(j+k+1)/2 + j`` of the pair ``(j, k)``."""
    _check_domain(j, k)
    d = j + k
    return d * (d + 1) // 2 + j


def triple_nr(j: int, k: int, l: int) -> int:
    """Shell enumeration of the triple ``(j, k, l)``."""
    _check_domain(j, k, l)
    return tetrahedral(j + k + l) + pair_nr(j, k)


def pair_unnr(n: int) -> Tuple[int, int]:
    """Inverse of :func:`pair_nr`."""
    _check_domain(n)
    d = (math.isqrt(8 * n + 1) - 1) // 2
    j = n - d * (d + 1) // 2
    return j, d - j


def _icbrt(n: int) -> int:
    """Floor of the real cube root of a non-negative integer."""
    if n < 2:
        return n
    x = 1 << -(-n.bit_length() // 3)  # ≥ cbrt(n)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def triple_unnr(n: int) -> Tuple[int, int, int]:
    """Inverse of :func:`triple_nr`."""
    _check_domain(n)
    # tetrahedral(s) ≈ s³/6 so the shell index is close to cbrt(6n)
    s = _icbrt(6 * n)
    while tetrahedral(s) > n:
        s -= 1
    while tetrahedral(s + 1) <= n:
        s += 1
    j, k = pair_unnr(n - tetrahedral(s))
    return j, k, s - j - k


def diagonal_order(n: int) -> List[Tuple[int, int]]:
    """All pairs of ``[0, n)²`` sorted by :func:`pair_nr`."""
    return sorted(((j, k) for j in range(n) for k in range(n)), key=lambda p: pair_nr(*p))


# -----------------------------------------------------------------------------
# Vectorised encodings
# -----------------------------------------------------------------------------

def _as_index_tensor(x) -> Tensor:
    t = torch.as_tensor(x)
    if t.dtype != torch.int64:
        t = t.to(torch.int64)
    return t


def pair_nr_tensor(j, k) -> Tensor:
    """Element-wise :func:`pair_nr` on broadcastable ``int64`` tensors."""
    j, k = _as_index_tensor(j), _as_index_tensor(k)
    if config.DEBUG_CHECKS and (bool(torch.any(j < 0)) or bool(torch.any(k < 0))):
        raise ValueError("Index bijection is defined for non-negative components only")
    d = j + k
    return d * (d + 1) // 2 + j


def triple_nr_tensor(j, k, l) -> Tensor:
    """Element-wise :func:`triple_nr` on broadcastable ``int64`` tensors."""
    j, k, l = _as_index_tensor(j), _as_index_tensor(k), _as_index_tensor(l)
    if config.DEBUG_CHECKS and any(bool(torch.any(c < 0)) for c in (j, k, l)):
        raise ValueError("Index bijection is defined for non-negative components only")
    s = j + k + l
    # s(s+1)(s+2) is always divisible by 6
    return s * (s + 1) * (s + 2) // 6 + pair_nr_tensor(j, k)

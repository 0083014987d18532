"""COO interchange between :class:`infseq.SparseVector` and PyTorch tensors.

A sparse vector is exported as the classic coordinate pair

* ``indices`` – ``int64`` tensor of shape ``(nnz,)`` for scalar indices or
  ``(arity, nnz)`` for tuple indices (one row per component, like
  ``torch.sparse_coo_tensor`` expects);
* ``values``  – tensor of shape ``(nnz,)`` holding the stored coefficients.

Entries appear in the vector's native order and explicitly stored zeros are
kept, so ``from_coo(*to_coo(v))`` reproduces ``v`` structurally.

:func:`flat_indices` applies the index bijection to a tuple-indexed vector in
one vectorised pass, which is the tensor counterpart of a
:class:`infseq.keys.KeyTransform`.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import torch
from torch import Tensor

from .bijection import pair_nr_tensor, triple_nr_tensor
from .keys import KeyTransform
from .vector import SparseVector

__all__ = ["to_coo", "from_coo", "flat_indices"]


def _arity(vector: SparseVector) -> Optional[int]:
    """Number of index components, ``None`` for scalar indices."""
    if vector.key is not None:
        return vector.key.arity
    for index in vector.indices():
        return len(index) if isinstance(index, tuple) else None
    return None


def to_coo(vector: SparseVector, *, dtype: Optional[torch.dtype] = None) -> Tuple[Tensor, Tensor]:
    """Export *vector* as ``(indices, values)`` tensors."""
    dtype = dtype if dtype is not None else torch.get_default_dtype()
    arity = _arity(vector)
    entries = list(vector)

    if arity is None:
        indices = torch.tensor([int(e.index) for e in entries], dtype=torch.int64)
    elif entries:
        indices = torch.tensor([list(e.index) for e in entries], dtype=torch.int64).t().contiguous()
    else:
        indices = torch.empty((arity, 0), dtype=torch.int64)

    values = torch.tensor([float(e.value) for e in entries], dtype=dtype)
    return indices, values


def from_coo(
    indices: Tensor,
    values: Tensor,
    *,
    kind: str = "ordered",
    zero: Any = None,
    key: Optional[KeyTransform] = None,
) -> SparseVector:
    """Rebuild a vector from COO tensors (see :func:`to_coo` for the layout)."""
    indices = torch.as_tensor(indices)
    values = torch.as_tensor(values)
    if indices.ndim == 1:
        idx = [int(i) for i in indices.tolist()]
    elif indices.ndim == 2:
        idx = [tuple(col) for col in indices.t().tolist()]
    else:
        raise ValueError("COO indices must be 1- or 2-dimensional")
    if len(idx) != values.numel():
        raise ValueError("Number of indices must match number of values")
    return SparseVector.from_items(zip(idx, values.tolist()), kind=kind, zero=zero, key=key)


def flat_indices(vector: SparseVector) -> Tensor:
    """Bijection-encoded scalar indices of *vector*, in native order."""
    indices, _ = to_coo(vector)
    if indices.ndim == 1:
        return indices
    if indices.shape[0] == 2:
        return pair_nr_tensor(indices[0], indices[1])
    if indices.shape[0] == 3:
        return triple_nr_tensor(indices[0], indices[1], indices[2])
    raise ValueError(f"No index bijection for tuples of arity {indices.shape[0]}; supported: 2, 3")

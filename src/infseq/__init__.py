# SPDX-License-Identifier: MIT
"""infseq – infinite sequences with finite support.

This package provides a sparse vector (`SparseVector`) that maps an index set
(integers or integer tuples) to coefficients and is zero everywhere else.  The
entries live in a pluggable backing store (`OrderedStore` or `HashStore`), are
traversed through `SparseVectorIterator`, and tuple indices can be flattened to
scalar keys with the pair/triple index bijections.
"""

from __future__ import annotations

from .bijection import pair_nr, pair_unnr, triple_nr, triple_unnr
from .iterator import Entry, SparseVectorIterator
from .keys import PAIR_KEYS, TRIPLE_KEYS, KeyTransform, key_transform
from .stores import BackingStore, HashStore, OrderedStore, make_store
from .vector import SparseVector, StoreOrderWarning

# ---------------------------------------------------------------------------
# Test-suite helpers – register a Hypothesis profile without per-example
# deadlines so property-based tests do not fail spuriously on slower CI
# machines.  The import is optional so library users are not forced to pull
# in the dependency.
# ---------------------------------------------------------------------------

try:  # pragma: no cover – optional dependency
    from hypothesis import settings

    settings.register_profile("infseq_no_deadline", deadline=None)
    settings.load_profile("infseq_no_deadline")
except ModuleNotFoundError:  # pragma: no cover – Hypothesis not installed
    pass

__all__ = [
    "SparseVector",
    "SparseVectorIterator",
    "Entry",
    "StoreOrderWarning",
    # backing stores
    "BackingStore",
    "OrderedStore",
    "HashStore",
    "make_store",
    # index bijections
    "pair_nr",
    "pair_unnr",
    "triple_nr",
    "triple_unnr",
    "KeyTransform",
    "PAIR_KEYS",
    "TRIPLE_KEYS",
    "key_transform",
]

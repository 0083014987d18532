from __future__ import annotations

"""Micro-benchmarks for sparse vector access with scalar and tuple keys.

These tests rely on the ``pytest-benchmark`` plugin and are **extremely** light –
inputs are tiny so they do not slow down the regular CI pipeline.  Run with

```
pytest tests/test_benchmark_micro.py --benchmark-only
```

which prints a summarised table.  The numbers are **not** asserted; they are
purely informative.
"""

import pytest
pytest.importorskip("pytest_benchmark")

from infseq import PAIR_KEYS, TRIPLE_KEYS, SparseVector

N = 40  # N² entries, keep very small for CI


def _filled(**kwargs) -> SparseVector:
    v = SparseVector(**kwargs)
    for j in range(N):
        for k in range(N):
            v.set((j, k), 1.0)
    return v


def test_read_tuple_keys(benchmark):
    """Reads through lexicographically ordered tuple keys."""
    v = _filled()
    benchmark(lambda: [v.get((j, k)) for j in range(N) for k in range(N)])


def test_read_pair_encoded_keys(benchmark):
    """Reads through scalar keys produced by the pair bijection."""
    v = _filled(key=PAIR_KEYS)
    benchmark(lambda: [v.get((j, k)) for j in range(N) for k in range(N)])


def test_equality_walk(benchmark):
    a, b = _filled(), _filled()
    assert benchmark(lambda: a == b)


def test_read_triple_encoded_keys(benchmark):
    """Reads through scalar keys produced by the triple bijection."""
    m = 12
    v = SparseVector(key=TRIPLE_KEYS)
    cells = [(j, k, l) for j in range(m) for k in range(m) for l in range(m)]
    for cell in cells:
        v.set(cell, 1.0)
    assert sum(benchmark(lambda: [v.get(cell) for cell in cells])) == m ** 3

"""Tests for the pair/triple index bijections."""

from __future__ import annotations

import numpy as np
import pytest
import torch
from hypothesis import given, strategies as st
from hypothesis.extra.numpy import arrays

from infseq.bijection import (
    diagonal_order,
    pair_nr,
    pair_nr_tensor,
    pair_unnr,
    tetrahedral,
    triple_nr,
    triple_nr_tensor,
    triple_unnr,
)

N = 50

# -----------------------------------------------------------------------------
# Pair encoding
# -----------------------------------------------------------------------------

def test_pair_nr_first_values():
    assert [pair_nr(0, 0), pair_nr(0, 1), pair_nr(1, 0), pair_nr(0, 2)] == [0, 1, 2, 3]


def test_pair_nr_injective_on_square():
    codes = {pair_nr(j, k) for j in range(N) for k in range(N)}
    assert len(codes) == N * N


def test_pair_nr_fills_triangle_without_gaps():
    codes = sorted(pair_nr(j, d - j) for d in range(N) for j in range(d + 1))
    assert codes == list(range(N * (N + 1) // 2))


def test_pair_nr_strictly_increasing_along_diagonal():
    for d in range(N):
        codes = [pair_nr(j, d - j) for j in range(d + 1)]
        assert codes[0] == d * (d + 1) // 2 == pair_nr(0, d)
        assert codes == list(range(codes[0], codes[0] + d + 1))


def test_diagonal_order_reproduces_enumeration():
    expected = [(j, d - j) for d in range(2 * N - 1) for j in range(d + 1) if j < N and d - j < N]
    assert diagonal_order(N) == expected


@given(st.integers(min_value=0, max_value=10**30), st.integers(min_value=0, max_value=10**30))
def test_pair_unnr_inverts_pair_nr(j: int, k: int):
    assert pair_unnr(pair_nr(j, k)) == (j, k)


@given(st.integers(min_value=0, max_value=10**40))
def test_pair_nr_inverts_pair_unnr(n: int):
    assert pair_nr(*pair_unnr(n)) == n


# -----------------------------------------------------------------------------
# Triple encoding
# -----------------------------------------------------------------------------

def test_triple_nr_first_values():
    firsts = [(0, 0, 0), (0, 0, 1), (0, 1, 0), (1, 0, 0), (0, 0, 2)]
    assert [triple_nr(*t) for t in firsts] == [0, 1, 2, 3, 4]


def test_triple_nr_injective_on_cube():
    codes = {triple_nr(j, k, l) for j in range(N) for k in range(N) for l in range(N)}
    assert len(codes) == N ** 3


def test_triple_nr_fills_shells_without_gaps():
    S = 20
    codes = sorted(
        triple_nr(j, k, s - j - k) for s in range(S) for j in range(s + 1) for k in range(s + 1 - j)
    )
    assert codes == list(range(tetrahedral(S)))


def test_tetrahedral_counts_smaller_shells():
    for s in range(30):
        assert tetrahedral(s) == sum((t + 1) * (t + 2) // 2 for t in range(s))


@given(
    st.integers(min_value=0, max_value=10**20),
    st.integers(min_value=0, max_value=10**20),
    st.integers(min_value=0, max_value=10**20),
)
def test_triple_unnr_inverts_triple_nr(j: int, k: int, l: int):
    assert triple_unnr(triple_nr(j, k, l)) == (j, k, l)


@given(st.integers(min_value=0, max_value=10**40))
def test_triple_nr_inverts_triple_unnr(n: int):
    assert triple_nr(*triple_unnr(n)) == n


# -----------------------------------------------------------------------------
# Vectorised variants
# -----------------------------------------------------------------------------

index_arrays = arrays(dtype=np.int64, shape=16, elements=st.integers(min_value=0, max_value=10_000))


@given(index_arrays, index_arrays)
def test_pair_nr_tensor_matches_scalar(j: np.ndarray, k: np.ndarray):
    out = pair_nr_tensor(torch.from_numpy(j), torch.from_numpy(k))
    assert out.dtype == torch.int64
    assert out.tolist() == [pair_nr(int(a), int(b)) for a, b in zip(j, k)]


@given(index_arrays, index_arrays, index_arrays)
def test_triple_nr_tensor_matches_scalar(j: np.ndarray, k: np.ndarray, l: np.ndarray):
    out = triple_nr_tensor(torch.from_numpy(j), torch.from_numpy(k), torch.from_numpy(l))
    assert out.tolist() == [triple_nr(int(a), int(b), int(c)) for a, b, c in zip(j, k, l)]


def test_tensor_encodings_accept_python_lists():
    assert pair_nr_tensor([0, 0, 1], [0, 1, 0]).tolist() == [0, 1, 2]
    assert triple_nr_tensor([0, 0, 0, 1], [0, 0, 1, 0], [0, 1, 0, 0]).tolist() == [0, 1, 2, 3]


# -----------------------------------------------------------------------------
# Domain checks
# -----------------------------------------------------------------------------

def test_negative_components_rejected_in_debug_mode(debug_checks):
    with pytest.raises(ValueError):
        pair_nr(-1, 0)
    with pytest.raises(ValueError):
        triple_nr(0, -2, 0)
    with pytest.raises(ValueError):
        pair_nr_tensor(torch.tensor([0, -1]), torch.tensor([0, 0]))


def test_small_values_unaffected_by_debug_mode(debug_checks):
    assert pair_nr(0, 0) == 0
    assert triple_nr(0, 0, 0) == 0
    assert pair_unnr(4) == (1, 1)

import pytest
import torch
from hypothesis import given, strategies as st

from infseq import PAIR_KEYS, TRIPLE_KEYS, SparseVector, pair_nr, triple_nr
from infseq.torch_coo import flat_indices, from_coo, to_coo


def test_scalar_indices_export():
    v = SparseVector({42: 23.0, 7: 0.0, 123: 23.0})
    indices, values = to_coo(v, dtype=torch.float64)
    assert indices.dtype == torch.int64
    assert indices.tolist() == [7, 42, 123]
    assert torch.equal(values, torch.tensor([0.0, 23.0, 23.0], dtype=torch.float64))


def test_empty_vector_export_shapes():
    indices, values = to_coo(SparseVector())
    assert indices.shape == (0,)
    assert values.shape == (0,)
    indices, _ = to_coo(SparseVector(key=PAIR_KEYS))
    assert indices.shape == (2, 0)


def test_pair_keys_export_one_row_per_component():
    v = SparseVector.from_items([((0, 2), 1.0), ((1, 0), 2.0)], key=PAIR_KEYS)
    indices, values = to_coo(v)
    assert indices.tolist() == [[1, 0], [0, 2]]
    assert values.tolist() == [2.0, 1.0]


@given(st.dictionaries(st.integers(min_value=-(2**40), max_value=2**40), st.integers(-1000, 1000).map(float), max_size=30))
def test_scalar_round_trip(entries: dict):
    v = SparseVector.from_mapping(entries)
    assert from_coo(*to_coo(v, dtype=torch.float64)) == v


@given(
    st.dictionaries(
        st.tuples(st.integers(0, 200), st.integers(0, 200)),
        st.integers(-1000, 1000).map(float),
        max_size=30,
    )
)
def test_pair_keyed_round_trip(entries: dict):
    v = SparseVector.from_mapping(entries, key=PAIR_KEYS)
    assert from_coo(*to_coo(v, dtype=torch.float64), key=PAIR_KEYS) == v


def test_raw_tuple_indices_round_trip_without_transform():
    v = SparseVector.from_items([((1, 2, 3), 1.0), ((0, 0, 1), 2.0)])
    indices, values = to_coo(v)
    assert indices.shape == (3, 2)
    assert from_coo(indices, values) == v


def test_flat_indices_apply_bijection():
    pairs = SparseVector.from_items([((j, k), 1.0) for j in range(5) for k in range(5)])
    assert flat_indices(pairs).tolist() == [pair_nr(*p) for p in pairs.indices()]

    triples = SparseVector.from_items([((2, 1, 0), 1.0), ((0, 0, 3), 1.0)], key=TRIPLE_KEYS)
    assert flat_indices(triples).tolist() == [triple_nr(*t) for t in triples.indices()]

    scalars = SparseVector({5: 1.0})
    assert flat_indices(scalars).tolist() == [5]


def test_flat_indices_rejects_unsupported_arity():
    v = SparseVector({(1, 2, 3, 4): 1.0})
    with pytest.raises(ValueError):
        flat_indices(v)


def test_from_coo_validates_shapes():
    with pytest.raises(ValueError):
        from_coo(torch.tensor([1, 2]), torch.tensor([1.0]))
    with pytest.raises(ValueError):
        from_coo(torch.zeros((1, 1, 1), dtype=torch.int64), torch.tensor([1.0]))


def test_from_coo_into_hash_store():
    v = from_coo(torch.tensor([3, 1]), torch.tensor([1.0, 2.0]), kind="hash")
    assert v.store_kind == "hash"
    assert list(v.indices()) == [3, 1]

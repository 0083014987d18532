"""Walkthrough of the sparse vector API.

Builds a zero vector and a vector from a plain mapping, compares vectors with
the generic :func:`infseq.algorithms.equal`, counts entries with ``count_if``
and shows tuple indices flattened by the pair bijection.
"""

from __future__ import annotations

from infseq import PAIR_KEYS, SparseVector
from infseq.algorithms import count_if
from infseq.primes import PrimeContainer
from infseq.torch_coo import flat_indices, to_coo


def yes_no(flag: bool) -> str:
    return "  ... yes!" if flag else "  ... no!"


def main() -> None:
    v = SparseVector()
    print("- a zero vector v:")
    print(v)

    wmap = {42: 23.0, 123: 23.0}
    w = SparseVector(wmap)
    print("- a vector w created via a mapping:")
    print(w)

    a, b = SparseVector(), SparseVector()
    a.set(1, 2.5)
    b.set(2, 2.5)
    print("- are the vectors a and b equal?")
    print(yes_no(a == b))

    print("- are the vectors v and w equal?")
    print(yes_no(v == w))

    number = 23.0
    print(f"- w contains {count_if(w.begin(), w.end(), lambda e: e.value == number)} times the number {number:g}")

    grid = SparseVector(key=PAIR_KEYS)
    for j in range(3):
        for k in range(3):
            grid.set((j, k), float(10 * j + k))
    indices, values = to_coo(grid)
    print("- a 3x3 grid in diagonal order:")
    print(grid)
    print(f"  encoded keys: {flat_indices(grid).tolist()}")
    print(f"  COO indices:  {indices.tolist()}")
    print(f"  COO values:   {values.tolist()}")

    p, q = PrimeContainer(23), PrimeContainer(22)
    print(f"- the primes from 2 to 23: {p}  ({p.size()} primes)")
    print(f"- the primes from 2 to 22: {q}  ({q.size()} primes)")
    print("- are these two sets of primes equal?")
    print(yes_no(p.size() == q.size() and list(p) == list(q)))


if __name__ == "__main__":
    main()

"""A second, unrelated container used to exercise the iterator protocol.

:class:`PrimeContainer` sieves the primes in ``1..n`` and exposes them through
``begin()``/``end()`` and a forward :class:`PrimeIterator`, so the generic
algorithms in :mod:`infseq.algorithms` can be checked against something that
is not a sparse vector.
"""

from __future__ import annotations

from typing import Iterator, List

from . import config
from .algorithms import iterate

__all__ = ["PrimeContainer", "PrimeIterator"]


class PrimeContainer:
    """Primes up to and including *n* (sieve of Eratosthenes)."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("PrimeContainer needs n >= 1")
        self.n = n
        sieve: List[bool] = [True] * (n + 1)
        sieve[0] = False
        sieve[1] = False
        k = 2
        while k * k <= n:
            if sieve[k]:
                for multiple in range(k * k, n + 1, k):
                    sieve[multiple] = False
            k += 1
        self._sieve = sieve
        self._primes = [k for k in range(2, n + 1) if sieve[k]]
        self.max_prime = self._primes[-1] if self._primes else None

    def is_prime(self, k: int) -> bool:
        return 1 <= k <= self.n and self._sieve[k]

    def begin(self) -> "PrimeIterator":
        return PrimeIterator(self, self._primes[0] if self._primes else self.n + 1)

    def end(self) -> "PrimeIterator":
        return PrimeIterator(self, self.n + 1)

    def size(self) -> int:
        return len(self._primes)

    __len__ = size

    def __iter__(self) -> Iterator[int]:
        return iterate(self.begin(), self.end())

    def __str__(self) -> str:
        return " ".join(str(p) for p in self)


class PrimeIterator:
    """Forward iterator whose state is the current prime."""

    __slots__ = ("_container", "_k")

    def __init__(self, container: PrimeContainer, k: int):
        self._container = container
        self._k = k

    def copy(self) -> "PrimeIterator":
        return PrimeIterator(self._container, self._k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeIterator):
            return NotImplemented
        return self._k == other._k

    __hash__ = None  # type: ignore[assignment]

    def increment(self) -> "PrimeIterator":
        c = self._container
        if config.DEBUG_CHECKS and self._k > c.n:
            raise IndexError("Cannot increment past end()")
        if self._k == c.max_prime:
            self._k = c.n + 1
        else:
            self._k += 1
            while not c.is_prime(self._k):
                self._k += 1
        return self

    def deref(self) -> int:
        return self._k

# primality.py
# Miller-Rabin probabilistic primality test.
# - deterministic answers for n < 2, 2, 3 and even n
# - small-prime trial division before MR
# - `rounds` random bases from a RandomSource; a composite survives all
#   rounds with probability <= 4**-rounds

from typing import Optional

from rsabench.config import MR_ROUNDS
from rsabench.rsa.modmath import mod_pow
from rsabench.rsa.randomness import RandomSource, default_source

# Small primes for quick sieving before MR
_SMALL_PRIMES = [
    3,5,7,11,13,17,19,23,29,31,37,41,43,47,
    53,59,61,67,71,73,79,83,89,97,101,103,107,109,113
]


def _trial_division(n: int) -> bool:
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    return True


def _is_witness(a: int, d: int, s: int, n: int) -> bool:
    """True when base a proves n composite (n-1 = d * 2**s, d odd)."""
    x = mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return False
    return True


def is_prime(n: int, rounds: int = MR_ROUNDS, rng: Optional[RandomSource] = None) -> bool:
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    if not _trial_division(n):
        return False

    rng = rng or default_source()

    # write n-1 = d*2^s with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = rng.randrange(2, n - 1)  # in [2, n-2]
        if _is_witness(a, d, s, n):
            return False
    return True

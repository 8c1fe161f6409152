# keygen.py
# RSA key generation from random primes.
# - random candidates with exact bit length (top bit forced)
# - prime search bounded by an attempt cap
# - public exponent from the conventional list, else an upward scan
# - private exponent via the extended-Euclid inverse
# Generation is sequential; the RandomSource is passed in (or the
# process-wide default is used) so seeded runs are reproducible.

from typing import NamedTuple, Optional

from rsabench.config import MAX_PRIME_ATTEMPTS, MR_ROUNDS
from rsabench.rsa.engine import KeyPair, PrivateKey, PublicKey
from rsabench.rsa.errors import (
    ExponentNotFound,
    InvalidKeyParameters,
    PrimeGenerationExhausted,
    RsaLabError,
)
from rsabench.rsa.modmath import gcd, mod_inverse
from rsabench.rsa.primality import is_prime
from rsabench.rsa.randomness import RandomSource, default_source

COMMON_EXPONENTS = (65537, 257, 17, 3)
MIN_MODULUS_BITS = 8


def generate_random_bits(bit_count: int, rng: Optional[RandomSource] = None) -> int:
    """Uniform random bits with the top bit set; parity is left to the caller."""
    if bit_count < 1:
        raise ValueError("bit_count must be >= 1")
    rng = rng or default_source()
    n = rng.getrandbits(bit_count)
    n |= (1 << (bit_count - 1))   # set top bit -> exact bit length
    return n


def generate_prime(
    bit_count: int,
    rng: Optional[RandomSource] = None,
    rounds: int = MR_ROUNDS,
    max_attempts: int = MAX_PRIME_ATTEMPTS,
) -> int:
    if bit_count < 2:
        raise ValueError("bit_count must be >= 2")
    rng = rng or default_source()

    attempts = 0
    while attempts < max_attempts:
        attempts += 1
        cand = generate_random_bits(bit_count, rng) | 1
        if is_prime(cand, rounds, rng):
            return cand
    raise PrimeGenerationExhausted(
        f"no {bit_count}-bit prime found after {max_attempts} attempts"
    )


def generate_exponent(phi: int, rng: Optional[RandomSource] = None) -> int:
    """Pick a public exponent e < phi with gcd(e, phi) == 1."""
    for e in COMMON_EXPONENTS:
        if e < phi and gcd(e, phi) == 1:
            return e

    e = COMMON_EXPONENTS[0]
    while e < phi:
        if is_prime(e, rng=rng) and gcd(e, phi) == 1:
            return e
        e += 2
    raise ExponentNotFound(f"no usable public exponent below phi={phi}")


def generate_key_pair(p: int, q: int, e: int) -> KeyPair:
    """
    Build a key pair from chosen primes and public exponent.

    Raises:
      InvalidKeyParameters: gcd(e, p-1) != 1 or gcd(e, q-1) != 1.
    """
    if gcd(e, p - 1) != 1 or gcd(e, q - 1) != 1:
        raise InvalidKeyParameters(
            f"e={e} must be coprime to p-1 and q-1"
        )
    n = p * q
    phi = (p - 1) * (q - 1)
    d = mod_inverse(e, phi)
    return KeyPair(PublicKey(e=e, n=n), PrivateKey(d=d, n=n))


def generate_key_pair_of_size(
    modulus_bits: int,
    rng: Optional[RandomSource] = None,
    rounds: int = MR_ROUNDS,
    max_attempts: int = MAX_PRIME_ATTEMPTS,
) -> KeyPair:
    """
    Generate a key pair whose modulus has exactly `modulus_bits` bits.

    p and q get half of the bits each; pairs with p == q or a short
    modulus are redrawn, at most `max_attempts` times.
    """
    if modulus_bits < MIN_MODULUS_BITS:
        raise ValueError(f"modulus_bits must be >= {MIN_MODULUS_BITS}")
    rng = rng or default_source()
    p_bits = modulus_bits // 2
    q_bits = modulus_bits - p_bits

    for _ in range(max_attempts):
        p = generate_prime(p_bits, rng, rounds, max_attempts)
        q = generate_prime(q_bits, rng, rounds, max_attempts)
        if p == q or (p * q).bit_length() != modulus_bits:
            continue
        e = generate_exponent((p - 1) * (q - 1), rng)
        return generate_key_pair(p, q, e)

    raise PrimeGenerationExhausted(
        f"no distinct primes for a {modulus_bits}-bit modulus after {max_attempts} attempts"
    )


class KeyGenResult(NamedTuple):
    key_pair: Optional[KeyPair]
    error: Optional[RsaLabError]

    @property
    def ok(self) -> bool:
        return self.error is None


def try_generate_key_pair(
    modulus_bits: Optional[int] = None,
    p: Optional[int] = None,
    q: Optional[int] = None,
    e: Optional[int] = None,
    rng: Optional[RandomSource] = None,
    rounds: int = MR_ROUNDS,
) -> KeyGenResult:
    """
    Explicit-result wrapper: either `modulus_bits` or all of (p, q, e).

    Key-generation failures come back in `error` instead of being raised;
    argument mistakes still raise ValueError.
    """
    if modulus_bits is None and None in (p, q, e):
        raise ValueError("pass modulus_bits or all of p, q, e")
    if modulus_bits is not None and (p, q, e) != (None, None, None):
        raise ValueError("pass modulus_bits or p, q, e, not both")
    try:
        if modulus_bits is not None:
            pair = generate_key_pair_of_size(modulus_bits, rng, rounds)
        else:
            pair = generate_key_pair(p, q, e)
    except RsaLabError as exc:
        return KeyGenResult(None, exc)
    return KeyGenResult(pair, None)

# modmath.py
# Modular arithmetic on Python ints:
# - iterative Euclid / extended Euclid (no recursion, safe for huge operands)
# - modular inverse built on the extended Euclid coefficients
# - square-and-multiply modular exponentiation (the hot path of every
#   encode/decode)

from typing import Tuple

from rsabench.rsa.errors import NoInverseError


def gcd(a: int, b: int) -> int:
    while b != 0:
        a, b = b, a % b
    return a


def extended_euclid(a: int, b: int) -> Tuple[int, int]:
    """
    Return (x, y) with a*x + b*y == gcd(a, b).

    Keeps the coefficients of the original a and b for the current pair
    (a, b) and steps (a, b) -> (b, a mod b) until the remainder is 0; b is
    then the gcd and its coefficients are the answer.
    """
    if b == 0:
        return 1, 0
    # (a11, a21): coefficients of current a, (a12, a22): of current b
    a11, a12, a21, a22 = 1, 0, 0, 1
    while True:
        r = a % b
        if r == 0:
            return a12, a22
        q = a // b
        a11, a12 = a12, a11 - a12 * q
        a21, a22 = a22, a21 - a22 * q
        a, b = b, r


def mod_inverse(x: int, m: int) -> int:
    """Return y in [0, m) with (x * y) % m == 1."""
    if m <= 1:
        raise ValueError("modulus must be > 1")
    x %= m
    if gcd(x, m) != 1:
        raise NoInverseError(f"{x} has no inverse modulo {m}")
    _, y = extended_euclid(m, x)
    while y < 0:
        y += m
    return y


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base**exponent % modulus by square-and-multiply."""
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    if modulus <= 1:
        raise ValueError("modulus must be > 1")

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result

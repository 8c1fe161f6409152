# engine.py
# Textbook (unpadded) RSA: key containers plus encode/decode.
# Encode/decode are pure functions; the caller keeps messages below n.

from dataclasses import dataclass, field
from typing import NamedTuple

from rsabench.rsa.modmath import mod_pow


@dataclass(frozen=True)
class PublicKey:
    e: int
    n: int

    @property
    def modulus_bits(self) -> int:
        return self.n.bit_length()


@dataclass(frozen=True)
class PrivateKey:
    d: int = field(repr=False)
    n: int

    @property
    def modulus_bits(self) -> int:
        return self.n.bit_length()


class KeyPair(NamedTuple):
    """Both halves of one key; always built together by the key generator."""
    public: PublicKey
    private: PrivateKey

    @property
    def modulus_bits(self) -> int:
        return self.public.n.bit_length()


def encode(message: int, public: PublicKey) -> int:
    return mod_pow(message, public.e, public.n)


def decode(cipher: int, private: PrivateKey) -> int:
    return mod_pow(cipher, private.d, private.n)

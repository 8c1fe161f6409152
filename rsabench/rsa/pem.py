# pem.py
# Render a public key as SubjectPublicKeyInfo PEM for display.
# Nothing here is written to disk; keys live for one run only.

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa as rsa_mod

from rsabench.rsa.engine import PublicKey


def build_public_pem(public: PublicKey) -> bytes:
    pubnums = rsa_mod.RSAPublicNumbers(public.e, public.n)
    pubkey = pubnums.public_key()
    return pubkey.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )

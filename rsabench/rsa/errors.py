# errors.py
# Error taxonomy for key generation, arithmetic and message loading.


class RsaLabError(Exception):
    """Base class for every error raised by rsabench."""


class InvalidKeyParameters(RsaLabError, ValueError):
    """e is not coprime to p-1 or q-1."""


class PrimeGenerationExhausted(RsaLabError, RuntimeError):
    """No prime found within the attempt cap (bad RNG or bit length)."""


class ExponentNotFound(RsaLabError, RuntimeError):
    """No usable public exponent below phi."""


class NoInverseError(RsaLabError, ValueError):
    """Modular inverse requested for non-coprime operands."""


class SourceUnavailable(RsaLabError, OSError):
    """A message source could not be read or parsed."""

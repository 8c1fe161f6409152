# randomness.py
# Owned random source shared by prime generation and Miller-Rabin.
# - seeded: deterministic random.Random (reproducible tests)
# - unseeded: OS CSPRNG via random.SystemRandom (same entropy as secrets)
# - every draw is taken under a lock, so one source may serve many threads

import random
import threading
from typing import Optional


class RandomSource:
    def __init__(self, seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._rng = self._make_rng(seed)
        self.seed = seed

    @staticmethod
    def _make_rng(seed):
        if seed is None:
            return random.SystemRandom()
        return random.Random(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Restart the sequence (None switches back to OS entropy)."""
        with self._lock:
            self._rng = self._make_rng(seed)
            self.seed = seed

    def getrandbits(self, k: int) -> int:
        with self._lock:
            return self._rng.getrandbits(k)

    def randrange(self, start: int, stop: int) -> int:
        with self._lock:
            return self._rng.randrange(start, stop)

    def __repr__(self):
        mode = "system" if self.seed is None else f"seed={self.seed}"
        return f"RandomSource({mode})"


# process-wide fallback used when callers do not pass their own source
_default_source = RandomSource()


def default_source() -> RandomSource:
    return _default_source


def seed_default(seed: Optional[int] = None) -> None:
    """Re-seed the process-wide source."""
    _default_source.reseed(seed)

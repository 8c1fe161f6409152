# messages.py
# Message sources for the batch runs.
# Text format: first token is the message count, followed by that many
# integer literals (any whitespace between them). Every value is reduced
# modulo n before use and a zero result becomes 1, since 0 is a fixed
# point of RSA and would pass the round-trip check trivially.

import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from rsabench.rsa.errors import SourceUnavailable
from rsabench.rsa.randomness import RandomSource, default_source

_CHUNKS = 10
_CHUNK_BITS = 30


def normalize_message(m: int, n: int) -> int:
    m %= n
    return m if m != 0 else 1


def generate_messages(count: int, n: int, rng: Optional[RandomSource] = None) -> List[int]:
    """Synthetic messages: ten 30-bit chunks glued together, then reduced mod n."""
    if count < 0:
        raise ValueError("count must be >= 0")
    rng = rng or default_source()
    messages = []
    for _ in range(count):
        msg = 0
        for _ in range(_CHUNKS):
            msg = (msg << _CHUNK_BITS) + rng.getrandbits(_CHUNK_BITS)
        messages.append(normalize_message(msg, n))
    return messages


def parse_messages(text: str, n: int) -> List[int]:
    tokens = text.split()
    if not tokens:
        raise SourceUnavailable("message source is empty")
    try:
        count = int(tokens[0])
    except ValueError:
        raise SourceUnavailable(f"bad message count {tokens[0]!r}") from None
    if count < 0:
        raise SourceUnavailable(f"negative message count {count}")
    if len(tokens) - 1 < count:
        raise SourceUnavailable(
            f"expected {count} messages, found {len(tokens) - 1}"
        )

    messages = []
    for tok in tokens[1:count + 1]:
        try:
            value = int(tok)
        except ValueError:
            raise SourceUnavailable(f"bad message literal {tok!r}") from None
        messages.append(normalize_message(value, n))
    return messages


def read_message_file(path, n: int) -> List[int]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"cannot read {path}: {exc}") from exc
    return parse_messages(text, n)


def load_messages(path, n: int) -> List[int]:
    """Like read_message_file, but a failed load is reported and gives []."""
    try:
        return read_message_file(path, n)
    except SourceUnavailable as exc:
        print(f"[!] could not load messages: {exc}", file=sys.stderr)
        return []


def load_batches(paths: Iterable, n: int) -> Iterator[Tuple[str, List[int]]]:
    """Yield (path, messages) for every loadable file; failures are skipped."""
    for path in paths:
        try:
            messages = read_message_file(path, n)
        except SourceUnavailable as exc:
            print(f"[!] skipping {path}: {exc}", file=sys.stderr)
            continue
        yield str(path), messages

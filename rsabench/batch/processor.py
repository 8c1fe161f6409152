# processor.py
# Encode/decode round trips over a message batch, sequential or pooled.
# Each worker counts its own successes; the partial counts are summed once
# every worker has finished, so the total never depends on arrival order.

import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import List, Sequence

from rsabench.batch.results import BatchResult, BenchmarkReport, build_report
from rsabench.rsa.engine import KeyPair, decode, encode

EXECUTORS = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}


def round_trip(message: int, key_pair: KeyPair) -> bool:
    cipher = encode(message, key_pair.public)
    return decode(cipher, key_pair.private) == message


def _count_round_trips(chunk: Sequence[int], key_pair: KeyPair) -> int:
    return sum(1 for m in chunk if round_trip(m, key_pair))


def partition(messages: Sequence[int], workers: int) -> List[Sequence[int]]:
    """Split into at most `workers` contiguous chunks of near-equal size."""
    if workers < 1:
        raise ValueError("workers must be >= 1")
    total = len(messages)
    parts = min(workers, total)
    chunks = []
    start = 0
    for i in range(parts):
        size = total // parts + (1 if i < total % parts else 0)
        chunks.append(messages[start:start + size])
        start += size
    return chunks


def run_sequential(messages: Sequence[int], key_pair: KeyPair) -> BatchResult:
    t0 = time.perf_counter()
    correct = _count_round_trips(messages, key_pair)
    dt = time.perf_counter() - t0
    return BatchResult(correct_count=correct, elapsed_millis=dt * 1000.0,
                       total=len(messages))


def run_parallel(messages: Sequence[int], key_pair: KeyPair, workers: int,
                 executor: str = "thread") -> BatchResult:
    """
    Round-trip `messages` on a fixed pool of `workers`.

    Args:
      executor: "thread" (default) or "process"; processes sidestep the
        interpreter lock for this CPU-bound work.

    Elapsed time runs from dispatch until the last worker completes.
    """
    if workers < 1:
        raise ValueError("workers must be >= 1")
    try:
        pool_cls = EXECUTORS[executor]
    except KeyError:
        raise ValueError(f"unknown executor {executor!r}") from None

    chunks = partition(messages, workers)
    t0 = time.perf_counter()
    with pool_cls(max_workers=workers) as pool:
        futures = [pool.submit(_count_round_trips, chunk, key_pair) for chunk in chunks]
        partials = [f.result() for f in futures]
        dt = time.perf_counter() - t0
    return BatchResult(correct_count=sum(partials), elapsed_millis=dt * 1000.0,
                       total=len(messages))


def compare(messages: Sequence[int], key_pair: KeyPair, workers: int,
            executor: str = "thread") -> BenchmarkReport:
    sequential = run_sequential(messages, key_pair)
    parallel = run_parallel(messages, key_pair, workers, executor)
    return build_report(workers, sequential, parallel, len(messages))

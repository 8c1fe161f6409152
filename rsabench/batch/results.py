# results.py
# Immutable run results and the derived benchmark report.

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BatchResult:
    correct_count: int
    elapsed_millis: float
    total: int = 0

    @property
    def all_correct(self) -> bool:
        return self.correct_count == self.total


@dataclass(frozen=True)
class BenchmarkReport:
    workers: int
    message_count: int
    sequential: BatchResult
    parallel: BatchResult
    speedup: float
    all_correct: bool

    def to_dict(self) -> dict:
        return asdict(self)


def speedup_ratio(sequential_millis: float, parallel_millis: float) -> float:
    if parallel_millis == 0:
        return 0.0
    return sequential_millis / parallel_millis


def build_report(workers: int, sequential: BatchResult, parallel: BatchResult,
                 message_count: int) -> BenchmarkReport:
    all_correct = (sequential.correct_count == message_count
                   and parallel.correct_count == message_count)
    return BenchmarkReport(
        workers=workers,
        message_count=message_count,
        sequential=sequential,
        parallel=parallel,
        speedup=speedup_ratio(sequential.elapsed_millis, parallel.elapsed_millis),
        all_correct=all_correct,
    )

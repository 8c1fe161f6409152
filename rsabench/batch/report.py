# report.py
# Plain-text rendering of key material, the demo table and benchmark
# reports. Callers decide where the text goes.

from typing import Iterable, Tuple

from rsabench.batch.results import BatchResult, BenchmarkReport
from rsabench.rsa.engine import KeyPair


def format_key_material(key_pair: KeyPair, include_private: bool = False) -> str:
    pub, priv = key_pair
    lines = [f"Public key (e, n): {pub.e}, {pub.n}"]
    if include_private:
        lines.append(f"Private key (d, n): {priv.d}, {priv.n}")
    lines.append(f"# n bit-length = {key_pair.modulus_bits}")
    return "\n".join(lines)


def format_demo_table(rows: Iterable[Tuple[int, int, int, bool]]) -> str:
    """rows: (source, encrypted, decrypted, ok)"""
    lines = [
        "Source\t\tEncrypted\tDecrypted\tOK?",
        "=" * 58,
    ]
    for source, encrypted, decrypted, ok in rows:
        lines.append(f"{source}\t\t{encrypted}\t\t{decrypted}\t\t{'YES' if ok else 'NO'}")
    return "\n".join(lines)


def _format_run(label: str, result: BatchResult) -> str:
    return (f"{label}: {result.correct_count}/{result.total} correct "
            f"in {result.elapsed_millis:.3f} ms")


def format_report(report: BenchmarkReport) -> str:
    verdict = "all messages round-tripped" if report.all_correct else "ROUND-TRIP FAILURES"
    return "\n".join([
        f"Messages: {report.message_count}",
        f"Workers: {report.workers}",
        _format_run("Sequential", report.sequential),
        _format_run("Parallel", report.parallel),
        f"Speed-up: {report.speedup:.2f}x",
        f"Verdict: {verdict}",
    ])

#!/usr/bin/env python3
# run_benchmark.py
"""
Textbook RSA round-trip benchmark: sequential pass vs. worker pool.

Subcommands:
 - demo : fixed key (p=29, q=19, e=47) and message list, printed as a table
 - bench: random key of --bits, synthetic or file-loaded messages,
          sequential and pooled runs for each --workers value

Exit status: 0 ok, 1 key generation / arithmetic error, 2 round-trip failures.
"""

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor

from rsabench.batch.messages import generate_messages, load_batches, normalize_message
from rsabench.batch.processor import EXECUTORS, compare
from rsabench.batch.report import format_demo_table, format_key_material, format_report
from rsabench.config import (
    DEFAULT_EXECUTOR,
    DEFAULT_MESSAGE_COUNT,
    DEFAULT_MODULUS_BITS,
    DEFAULT_WORKERS,
    MR_ROUNDS,
)
from rsabench.rsa.engine import decode, encode
from rsabench.rsa.keygen import try_generate_key_pair
from rsabench.rsa.pem import build_public_pem
from rsabench.rsa.randomness import RandomSource

DEMO_P, DEMO_Q, DEMO_E = 29, 19, 47
DEMO_MESSAGES = [19, 13, 30, 350, 500, 19, 13, 30, 350, 500]


def demo_rows(messages, key_pair, workers=DEFAULT_WORKERS):
    """(source, encrypted, decrypted, ok) per message, in input order."""
    n = key_pair.public.n

    def one(m):
        source = normalize_message(m, n)
        encrypted = encode(source, key_pair.public)
        decrypted = decode(encrypted, key_pair.private)
        return source, encrypted, decrypted, decrypted == source

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(one, messages))


def cmd_demo(args) -> int:
    print("=== RSA round-trip demo ===\n")
    res = try_generate_key_pair(p=DEMO_P, q=DEMO_Q, e=DEMO_E)
    if not res.ok:
        print(f"[!] error: {res.error}", file=sys.stderr)
        return 1

    print(format_key_material(res.key_pair, include_private=True))
    print()
    rows = demo_rows(DEMO_MESSAGES, res.key_pair)
    print(format_demo_table(rows))
    if not all(ok for *_, ok in rows):
        print("\n[!] demo finished with round-trip failures", file=sys.stderr)
        return 2
    print("\nDemo finished successfully!")
    return 0


def cmd_bench(args) -> int:
    rng = RandomSource(args.seed)
    print(f"[+] generating {args.bits}-bit key ({rng!r}, {args.rounds} MR rounds)")
    res = try_generate_key_pair(modulus_bits=args.bits, rng=rng, rounds=args.rounds)
    if not res.ok:
        print(f"[!] error: {res.error}", file=sys.stderr)
        return 1
    key_pair = res.key_pair

    print(format_key_material(key_pair, include_private=args.print_private))
    if args.print_pem:
        print(build_public_pem(key_pair.public).decode().strip())

    n = key_pair.public.n
    if args.messages:
        batches = load_batches(args.messages, n)
    else:
        batches = [("synthetic", generate_messages(args.count, n, rng))]

    status = 0
    for name, messages in batches:
        print(f"\n[+] batch {name}: {len(messages)} messages")
        if not messages:
            print("# nothing to process")
            continue
        for workers in args.workers:
            report = compare(messages, key_pair, workers, args.executor)
            print(format_report(report))
            if not report.all_correct:
                status = 2
    return status


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Textbook RSA encode/decode benchmark (sequential vs. parallel).")
    sub = ap.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Fixed small key and message list (p=29, q=19, e=47).")
    demo.set_defaults(func=cmd_demo)

    bench = sub.add_parser("bench", help="Random key, batch of messages, speed-up report.")
    bench.add_argument("--bits", type=int, default=DEFAULT_MODULUS_BITS, help="Bit length of the modulus n.")
    bench.add_argument("--count", type=int, default=DEFAULT_MESSAGE_COUNT, help="Number of synthetic messages (ignored with --messages).")
    bench.add_argument("--messages", nargs="+", metavar="FILE", help="Message files: count followed by that many integers.")
    bench.add_argument("--workers", type=int, nargs="+", default=[DEFAULT_WORKERS], help="Worker pool size(s) to compare against the sequential run.")
    bench.add_argument("--executor", choices=sorted(EXECUTORS), default=DEFAULT_EXECUTOR, help="Pool type for the parallel run.")
    bench.add_argument("--seed", type=int, default=None, help="Seed for reproducible keys and messages.")
    bench.add_argument("--rounds", type=int, default=MR_ROUNDS, help="Miller-Rabin rounds per primality test.")
    bench.add_argument("--print-pem", action="store_true", help="Also print the public key as PEM.")
    bench.add_argument("--print-private", action="store_true", help="Also print the private exponent -- toy keys only.")
    bench.set_defaults(func=cmd_bench)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "bench" and any(w < 1 for w in args.workers):
        print("[!] error: --workers values must be >= 1", file=sys.stderr)
        return 1
    try:
        return args.func(args)
    except ValueError as exc:
        print(f"[!] error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

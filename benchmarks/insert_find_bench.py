"""Microbenchmark: insert/find throughput vs bucket size and probe strategy."""

import argparse
import json
import time
from pathlib import Path

from bucketprobe import HashTable, seed_everything
from bucketprobe.experiments.common import make_rng, random_keys
from bucketprobe.hashing import HASH_FUNCTIONS
from bucketprobe.probing import PROBE_STRATEGIES
from bucketprobe.utils import get_logger

logger = get_logger("insert_find_bench")


def benchmark_insert_find(size, bucket_sizes, probes, load=0.8, hash_name="mix",
                          overflow=False, num_trials=3, seed=42):
    """Benchmark insert and find timings."""
    results = []
    hash_fn = HASH_FUNCTIONS[hash_name]
    keys = random_keys(make_rng(seed), int(size * load))

    for bucket_size in bucket_sizes:
        for probe in probes:
            logger.info(f"Benchmarking bucket_size={bucket_size}, probe={probe}")
            rehash = PROBE_STRATEGIES[probe]

            insert_times = []
            find_times = []
            for _ in range(num_trials):
                table = HashTable(size, bucket_size, hash_fn, rehash,
                                  overflow_next_bucket=overflow)
                start = time.perf_counter()
                accepted = [k for k in keys if table.insert(k)]
                insert_times.append(time.perf_counter() - start)

                start = time.perf_counter()
                for k in accepted:
                    table.find(k)
                find_times.append(time.perf_counter() - start)

            avg_insert = sum(insert_times) / len(insert_times)
            avg_find = sum(find_times) / len(find_times)
            results.append({
                "bucket_size": bucket_size,
                "probe": probe,
                "inserts": len(keys),
                "accepted": len(accepted),
                "insert_time_ms": avg_insert * 1000,
                "find_time_ms": avg_find * 1000,
                "inserts_per_sec": len(keys) / avg_insert if avg_insert > 0 else 0.0,
            })

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Insert/find microbenchmark")
    parser.add_argument("--out", type=Path, default=Path("results/benchmarks/insert_find.json"))
    parser.add_argument("--size", type=int, default=100003)
    parser.add_argument("--bucket_sizes", type=int, nargs="+", default=[8, 16, 64, 256])
    parser.add_argument("--probes", nargs="+", default=["linear", "quadratic"],
                        choices=list(PROBE_STRATEGIES.keys()))
    parser.add_argument("--load", type=float, default=0.8)
    parser.add_argument("--hash", default="mix", choices=list(HASH_FUNCTIONS.keys()))
    parser.add_argument("--overflow", action="store_true")
    parser.add_argument("--trials", type=int, default=3)

    args = parser.parse_args()
    seed_everything(42)

    results = benchmark_insert_find(
        size=args.size,
        bucket_sizes=args.bucket_sizes,
        probes=args.probes,
        load=args.load,
        hash_name=args.hash,
        overflow=args.overflow,
        num_trials=args.trials,
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump(results, f, indent=2)

    print(f"Results saved to {args.out}")

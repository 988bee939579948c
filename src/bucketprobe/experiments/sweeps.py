"""Load-factor and bucket-size sweeps over the bucketed hash table.

Each sweep point builds a fresh table, inserts ``int(size * load) + 1``
random 64-bit keys, counts rejected inserts, and records the table's Stats.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from bucketprobe.experiments.common import make_rng, random_keys, seed_loop
from bucketprobe.hashing import HASH_FUNCTIONS
from bucketprobe.metrics.stats import summarize_groups
from bucketprobe.primes import find_prime
from bucketprobe.probing import PROBE_STRATEGIES
from bucketprobe.table import HashTable, Stats
from bucketprobe.utils import Timer

logger = logging.getLogger(__name__)

METRIC_KEYS = [
    "occupied",
    "load_pct",
    "avg_chain_length",
    "max_chain_length",
    "failures",
    "overflows",
]


@dataclass(frozen=True)
class Params:
    """One sweep point."""

    size: int
    bucket_size: int
    load: float

    @property
    def inserts(self) -> int:
        return int(self.size * self.load) + 1


@dataclass(frozen=True)
class Sweep:
    """A named sweep: the varied quantity and the points it produces.

    Attributes:
        name: Human-readable experiment name
        var_name: Heading of the varied quantity in reports
        points: Builds (label, Params) pairs from the parsed arguments
    """

    name: str
    var_name: str
    points: Callable[[argparse.Namespace], List[Tuple[Any, Params]]]


def _load_points(args: argparse.Namespace) -> List[Tuple[Any, Params]]:
    bucket_size = args.bucket_sizes[0] if args.bucket_sizes else find_prime(128)
    loads = args.loads or [i / 20 for i in range(1, 20)]
    return [(load, Params(args.size, bucket_size, load)) for load in loads]


def _bucket_pow2_points(args: argparse.Namespace) -> List[Tuple[Any, Params]]:
    sizes = args.bucket_sizes or [1 << i for i in range(4, 11)]
    return [(b, Params(args.size, b, args.load)) for b in sizes]


def _bucket_small_points(args: argparse.Namespace) -> List[Tuple[Any, Params]]:
    sizes = args.bucket_sizes or list(range(6, 21))
    return [(b, Params(args.size, b, args.load)) for b in sizes]


def _low_load_points(args: argparse.Namespace) -> List[Tuple[Any, Params]]:
    bucket_size = args.bucket_sizes[0] if args.bucket_sizes else 10
    loads = args.loads or [i / 100 for i in range(6, 21)]
    return [(load, Params(args.size, bucket_size, load)) for load in loads]


SWEEPS: Dict[str, Sweep] = {
    "load": Sweep("Load factor sweep", "Load", _load_points),
    "bucket_pow2": Sweep("Power-of-two bucket sizes", "Bucket Size", _bucket_pow2_points),
    "bucket_small": Sweep("Small bucket sizes", "Bucket Size", _bucket_small_points),
    "low_load": Sweep("Low load factor sweep", "Load", _low_load_points),
}


def unique_points(points: List[Tuple[Any, Params]]) -> List[Tuple[Any, Params]]:
    """Drop repeated labels, keeping the first occurrence and sweep order."""
    seen = set()
    unique = []
    for label, params in points:
        if label in seen:
            continue
        seen.add(label)
        unique.append((label, params))
    return unique


def run_trial(
    params: Params,
    keys: Sequence[int],
    hash_fn: Callable[[int], int],
    rehash: Callable[[int, int, int], int],
    hash_within_bucket: bool = False,
    overflow_next_bucket: bool = False,
) -> Stats:
    """Fill a fresh table with ``keys`` and return its Stats with failures.

    Args:
        params: Table size and bucket size (load is implied by len(keys))
        keys: Keys to insert
        hash_fn: Hash strategy
        rehash: Probe strategy
        hash_within_bucket: Hash-derived in-bucket start slot
        overflow_next_bucket: Overflow into following buckets

    Returns:
        Stats snapshot with the number of rejected inserts attached
    """
    table = HashTable(
        params.size,
        params.bucket_size,
        hash_fn,
        rehash,
        hash_within_bucket=hash_within_bucket,
        overflow_next_bucket=overflow_next_bucket,
    )
    failures = 0
    for key in keys:
        if not table.insert(key):
            failures += 1
    return table.get_stats().with_failures(failures)


def run_sweep(sweep: Sweep, args: argparse.Namespace) -> Dict[str, Any]:
    """Run every point of ``sweep`` once per seed.

    Args:
        sweep: Sweep definition
        args: Parsed arguments (size, load, seeds, hash, probe, overflow,
            hash_within_bucket, bucket_sizes, loads)

    Returns:
        Dictionary with the raw per-trial rows, the per-point summary
        (mean/CI over seeds) in sweep order, and the seeds used
    """
    hash_fn = HASH_FUNCTIONS[args.hash]
    rehash = PROBE_STRATEGIES[args.probe]
    seeds = seed_loop(args.seeds)
    points = unique_points(sweep.points(args))

    raw_trials: List[Dict[str, Any]] = []
    for label, params in points:
        logger.info(
            f"{sweep.var_name}={label}: size={params.size}, "
            f"bucket_size={params.bucket_size}, inserts={params.inserts}"
        )
        for seed in seeds:
            keys = random_keys(make_rng(seed), params.inserts)
            with Timer(f"{sweep.var_name}={label} seed={seed}", logger=logger) as t:
                stats = run_trial(
                    params,
                    keys,
                    hash_fn,
                    rehash,
                    hash_within_bucket=args.hash_within_bucket,
                    overflow_next_bucket=args.overflow,
                )
            row = {
                "label": label,
                "seed": seed,
                "size": params.size,
                "bucket_size": params.bucket_size,
                "load": params.load,
                "load_pct": 100.0 * stats.occupied / params.size,
                "seconds": t.elapsed,
            }
            row.update(stats.to_dict())
            raw_trials.append(row)

    grouped = summarize_groups(raw_trials, ["label"], METRIC_KEYS)
    summary = [
        {"label": label, **grouped[(label,)]}
        for label, _ in points
    ]
    return {"seeds": seeds, "raw_trials": raw_trials, "summary": summary}


def summary_rows(var_name: str, summary: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Format per-point means as text cells for ``render_table``."""
    rows = []
    for point in summary:
        mean = {key: point[key]["mean"] for key in METRIC_KEYS}
        rows.append({
            var_name: str(point["label"]),
            "Entries": "%5d" % round(mean["occupied"]),
            "Load %": "%6.1f" % mean["load_pct"],
            "Av Length": "%.2f" % mean["avg_chain_length"],
            "Max Length": "%4d" % round(mean["max_chain_length"]),
            "Failures": "%4d" % round(mean["failures"]),
            "Overflows": "%4d" % round(mean["overflows"]),
        })
    return rows


def report_columns(var_name: str) -> List[str]:
    return [var_name, "Entries", "Load %", "Av Length", "Max Length", "Failures", "Overflows"]


def default_size(size: Optional[int]) -> int:
    """Table size: the given value, else the largest prime <= 1,000,000."""
    return size if size is not None else find_prime(1_000_000)

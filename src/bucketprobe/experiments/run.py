"""Canonical experiment runner with --exp flag CLI.

Example:
    python -m bucketprobe.experiments.run --exp bucket_small --load 0.8
"""

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from bucketprobe.config import load_config
from bucketprobe.experiments.common import make_output_paths, write_metrics_json
from bucketprobe.experiments.report import render_table
from bucketprobe.experiments.sweeps import (
    SWEEPS,
    default_size,
    report_columns,
    run_sweep,
    summary_rows,
)
from bucketprobe.hashing import HASH_FUNCTIONS
from bucketprobe.probing import PROBE_STRATEGIES
from bucketprobe.utils import get_logger, seed_everything

CONFIG_KEYS = {
    "size",
    "load",
    "seeds",
    "bucket_sizes",
    "loads",
    "hash",
    "probe",
    "overflow",
    "hash_within_bucket",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sweep load factor and bucket size over the bucketed hash table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--exp", choices=list(SWEEPS.keys()), required=True,
        help="Sweep to run",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML file whose keys override the defaults below",
    )
    parser.add_argument(
        "--size", type=int, default=None,
        help="Total table capacity (default: largest prime <= 1,000,000)",
    )
    parser.add_argument(
        "--load", type=float, default=0.8,
        help="Load factor for bucket-size sweeps",
    )
    parser.add_argument(
        "--bucket_sizes", type=int, nargs="+", default=None,
        help="Bucket sizes to sweep (first one is used by load sweeps)",
    )
    parser.add_argument(
        "--loads", type=float, nargs="+", default=None,
        help="Load factors to sweep",
    )
    parser.add_argument(
        "--seeds", type=int, default=1,
        help="Number of random seeds per sweep point",
    )
    parser.add_argument(
        "--hash", choices=list(HASH_FUNCTIONS.keys()), default="crc",
        help="Hash strategy",
    )
    parser.add_argument(
        "--probe", choices=list(PROBE_STRATEGIES.keys()), default="linear",
        help="Probe strategy inside a bucket",
    )
    parser.add_argument(
        "--overflow", action=argparse.BooleanOptionalAction, default=False,
        help="Overflow full buckets into the next bucket",
    )
    parser.add_argument(
        "--hash-within-bucket", dest="hash_within_bucket",
        action=argparse.BooleanOptionalAction, default=False,
        help="Start in-bucket probing at hash %% bucket size instead of slot 0",
    )
    parser.add_argument(
        "--out_dir", type=Path, default=None,
        help="Directory for metrics JSON, log and figures",
    )
    parser.add_argument(
        "--plot", action="store_true",
        help="Also write a PDF figure (requires --out_dir)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse arguments, layering CLI flags over an optional YAML config."""
    parser = build_parser()
    pre_args, _ = parser.parse_known_args(argv)
    if pre_args.config is not None:
        config = load_config(pre_args.config)
        unknown = set(config) - CONFIG_KEYS
        if unknown:
            parser.error(f"Unrecognized config keys: {sorted(unknown)}")
        parser.set_defaults(**config)
    args = parser.parse_args(argv)
    if args.plot and args.out_dir is None:
        parser.error("--plot requires --out_dir")
    # Config values arrive as defaults, which argparse does not check against choices.
    if args.hash not in HASH_FUNCTIONS:
        parser.error(f"Unknown hash {args.hash!r}, expected one of {sorted(HASH_FUNCTIONS)}")
    if args.probe not in PROBE_STRATEGIES:
        parser.error(f"Unknown probe {args.probe!r}, expected one of {sorted(PROBE_STRATEGIES)}")
    if args.seeds < 1:
        parser.error(f"--seeds must be >= 1, got {args.seeds}")
    args.size = default_size(args.size)
    if args.size < 1:
        parser.error(f"--size must be >= 1, got {args.size}")
    for _, params in SWEEPS[args.exp].points(args):
        if not 0 < params.bucket_size <= args.size:
            parser.error(
                f"Bucket size {params.bucket_size} must be in [1, {args.size}] "
                f"for table size {args.size}"
            )
    return args


def plot_summary(var_name: str, summary: List[Dict[str, Any]], exp_id: str, figure_path: Path) -> None:
    import matplotlib.pyplot as plt

    from bucketprobe.experiments.plotting import add_footer, plot_line_with_ci, save_pdf

    x = [point["label"] for point in summary]

    def series(key: str):
        return (
            [point[key]["mean"] for point in summary],
            [point[key]["ci95_low"] for point in summary],
            [point[key]["ci95_high"] for point in summary],
        )

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))

    plot_line_with_ci(ax1, x, *series("avg_chain_length"), label="Average", color="blue")
    plot_line_with_ci(ax1, x, *series("max_chain_length"), label="Maximum",
                      linestyle="--", color="red")
    ax1.set_xlabel(var_name)
    ax1.set_ylabel("Chain Length")
    ax1.set_title("Probe Chain Length")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    plot_line_with_ci(ax2, x, *series("failures"), label="Failures", color="red")
    plot_line_with_ci(ax2, x, *series("overflows"), label="Overflows",
                      linestyle="--", color="green")
    ax2.set_xlabel(var_name)
    ax2.set_ylabel("Count")
    ax2.set_title("Rejected and Overflowing Inserts")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    add_footer(fig, exp_id)
    save_pdf(fig, figure_path)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Run the selected sweep and report it.

    Args:
        args: Parsed command-line arguments

    Returns:
        Dictionary with the rendered table and, when written, metrics_path
        and figure_path
    """
    sweep = SWEEPS[args.exp]
    log_file = args.out_dir / "log.txt" if args.out_dir is not None else None
    logger = get_logger("bucketprobe.experiments", log_file=log_file)

    seed_everything(0)
    logger.info(
        f"Running {sweep.name} ({args.exp}): size={args.size}, hash={args.hash}, "
        f"probe={args.probe}, overflow={args.overflow}, "
        f"hash_within_bucket={args.hash_within_bucket}"
    )
    result = run_sweep(sweep, args)
    table = render_table(summary_rows(sweep.var_name, result["summary"]),
                         report_columns(sweep.var_name))
    output: Dict[str, Any] = {"table": table}

    if args.out_dir is not None:
        metrics_path, figure_path = make_output_paths(args.out_dir, args.exp)
        config = {key: getattr(args, key) for key in sorted(CONFIG_KEYS)}
        write_metrics_json(
            metrics_path,
            args.exp,
            sweep.name,
            config,
            result["seeds"],
            result["raw_trials"],
            result["summary"],
        )
        output["metrics_path"] = str(metrics_path)
        logger.info(f"Metrics saved to {metrics_path}")
        if args.plot:
            plot_summary(sweep.var_name, result["summary"], args.exp, figure_path)
            output["figure_path"] = str(figure_path)
            logger.info(f"Figure saved to {figure_path}")

    return output


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entrypoint."""
    output = run(parse_args(argv))
    print(output["table"])


if __name__ == "__main__":
    main()

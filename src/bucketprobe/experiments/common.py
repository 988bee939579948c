"""Common utilities for experiments."""

import json
import platform
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np


def make_output_paths(out_dir: Path, exp_id: str) -> tuple[Path, Path]:
    """Create standardized output paths.

    Args:
        out_dir: Base output directory
        exp_id: Experiment ID (e.g., "load")

    Returns:
        (metrics_path, figure_path)
        - metrics_path: out_dir/metrics/<exp_id>.json
        - figure_path: out_dir/figures/<exp_id>.pdf
    """
    metrics_dir = out_dir / "metrics"
    figures_dir = out_dir / "figures"
    metrics_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    return metrics_dir / f"{exp_id}.json", figures_dir / f"{exp_id}.pdf"


def seed_loop(num_seeds: int) -> List[int]:
    """Generate list of seeds [0, 1, ..., num_seeds-1] for deterministic trials."""
    return list(range(num_seeds))


def make_rng(seed: int) -> np.random.Generator:
    """Create a local NumPy random number generator with given seed.

    Experiments draw keys from a local generator instead of global
    np.random state, so trials are reproducible independently of each other.

    Args:
        seed: Random seed

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def random_keys(rng: np.random.Generator, n: int) -> List[int]:
    """Draw ``n`` uniform unsigned 64-bit keys as Python ints."""
    keys = rng.integers(
        0, np.iinfo(np.uint64).max, size=n, dtype=np.uint64, endpoint=True
    )
    return keys.tolist()


def get_git_commit() -> Optional[str]:
    """Get current git commit hash by walking up to find .git directory.

    Returns:
        Git commit hash string, or None if not found
    """
    current = Path(__file__).resolve()
    for _ in range(8):  # Max 8 levels up
        if (current / ".git").exists():
            try:
                result = subprocess.run(
                    ["git", "rev-parse", "HEAD"],
                    capture_output=True,
                    text=True,
                    check=True,
                    cwd=current,
                )
                return result.stdout.strip()
            except (subprocess.CalledProcessError, FileNotFoundError):
                return None
        parent = current.parent
        if parent == current:  # Reached root
            break
        current = parent
    return None


def get_platform_info() -> Dict[str, str]:
    """Get interpreter and library version information."""
    return {
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
        "machine": platform.machine(),
    }


def write_metrics_json(
    path: Path,
    experiment_id: str,
    experiment_name: str,
    config: Dict[str, Any],
    seeds: List[int],
    raw_trials: List[Dict[str, Any]],
    summary: Any,
) -> None:
    """Write standardized metrics JSON.

    Args:
        path: Output JSON path
        experiment_id: Experiment identifier (e.g., "load")
        experiment_name: Human-readable experiment name
        config: Experiment configuration
        seeds: List of seeds used
        raw_trials: List of per-trial results
        summary: Summary statistics with CI
    """
    metrics = {
        "experiment_id": experiment_id,
        "experiment_name": experiment_name,
        "timestamp": datetime.now().isoformat(),
        "git_commit": get_git_commit(),
        "platform": get_platform_info(),
        "config": config,
        "seeds": seeds,
        "raw_trials": raw_trials,
        "summary": summary,
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)

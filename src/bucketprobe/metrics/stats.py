"""Statistical utilities for experiments."""

from collections import defaultdict
from typing import Any, Dict, Sequence, Tuple

import numpy as np


def mean_ci95(values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Compute mean and 95% confidence interval using normal approximation.

    Uses z=1.96 for all sample sizes.

    Args:
        values: Array of float values

    Returns:
        (mean, ci_low, ci_high, std)
    """
    if len(values) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    arr = np.asarray(values, dtype=float)
    n = len(arr)
    mean = float(np.mean(arr))

    if n == 1:
        return (mean, mean, mean, 0.0)

    std = float(np.std(arr, ddof=1))  # Sample standard deviation
    margin = 1.96 * std / np.sqrt(n)

    return (mean, float(mean - margin), float(mean + margin), std)


def summarize_groups(
    raw_rows: list[Dict[str, Any]],
    groupby_keys: list[str],
    metric_keys: list[str],
) -> Dict[Tuple, Dict[str, Dict[str, float]]]:
    """Summarize metrics grouped by specified keys.

    Groups raw trial rows by ``groupby_keys`` and computes mean/CI/std for
    each metric within each group. Group order follows first appearance.

    Args:
        raw_rows: List of trial dictionaries
        groupby_keys: Keys to group by (e.g., ["bucket_size", "load"])
        metric_keys: Metric keys to summarize (e.g., ["avg_chain_length"])

    Returns:
        Dictionary keyed by group tuple with nested dict:
        {metric_name: {mean, ci95_low, ci95_high, std}}
    """
    groups = defaultdict(list)
    for row in raw_rows:
        group_key = tuple(row[k] for k in groupby_keys)
        groups[group_key].append(row)

    result = {}
    for group_key, group_rows in groups.items():
        summaries = {}
        for metric_key in metric_keys:
            values = [row[metric_key] for row in group_rows if metric_key in row]
            if values:
                mean, ci_low, ci_high, std = mean_ci95(values)
                summaries[metric_key] = {
                    "mean": mean,
                    "ci95_low": ci_low,
                    "ci95_high": ci_high,
                    "std": std,
                }
        result[group_key] = summaries

    return result

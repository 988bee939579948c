"""Metrics module for bucketprobe."""

from bucketprobe.metrics.stats import mean_ci95, summarize_groups

__all__ = [
    "mean_ci95",
    "summarize_groups",
]

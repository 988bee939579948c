"""Shared plotting utilities for experiments."""

from pathlib import Path
from typing import Optional

import matplotlib

# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from bucketprobe.experiments.common import get_git_commit, get_platform_info


def save_pdf(fig, path: Path) -> None:
    """Save figure as PDF with tight layout.

    Args:
        fig: Matplotlib figure
        path: Output PDF path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def add_footer(fig, experiment_id: str, extra: Optional[dict] = None) -> None:
    """Add version footer to figure.

    Args:
        fig: Matplotlib figure
        experiment_id: Experiment identifier
        extra: Optional dictionary of additional info to include
    """
    info = get_platform_info()
    git_commit = get_git_commit()

    footer_parts = [experiment_id, f"Python {info['python_version']}"]
    if git_commit:
        footer_parts.append(f"Git: {git_commit[:8]}")
    if extra:
        for k, v in extra.items():
            footer_parts.append(f"{k}: {v}")

    fig.text(0.5, 0.01, " | ".join(footer_parts), ha="center", va="bottom",
             fontsize=8, alpha=0.7)


def plot_line_with_ci(
    ax, x, mean, ci_low, ci_high, label: str,
    linestyle: str = "-", color: Optional[str] = None
) -> None:
    """Plot line with confidence interval band.

    Args:
        ax: Matplotlib axes
        x: X values
        mean: Mean Y values
        ci_low: Lower CI bounds
        ci_high: Upper CI bounds
        label: Line label
        linestyle: Line style
        color: Optional color (if None, matplotlib chooses)
    """
    ax.plot(x, mean, label=label, color=color, linestyle=linestyle, linewidth=2)
    ax.fill_between(x, ci_low, ci_high, alpha=0.2, color=color)

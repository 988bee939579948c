"""Utilities module for bucketprobe."""

from bucketprobe.utils.log import get_logger
from bucketprobe.utils.seeds import seed_everything
from bucketprobe.utils.timing import Timer

__all__ = [
    "get_logger",
    "seed_everything",
    "Timer",
]

"""Probe strategies for in-bucket open addressing."""

from .base import ProbeStrategy
from .strategies import linear_rehash, quadratic_rehash

PROBE_STRATEGIES = {
    "linear": linear_rehash,
    "quadratic": quadratic_rehash,
}

__all__ = [
    "ProbeStrategy",
    "PROBE_STRATEGIES",
    "linear_rehash",
    "quadratic_rehash",
]

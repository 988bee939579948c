"""Statistics snapshot for the bucketed hash table."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Iterable


@dataclass(frozen=True)
class Stats:
    """Chain-length and occupancy snapshot.

    Attributes:
        occupied: Number of occupied slots
        avg_chain_length: Mean of the positive chain lengths (0.0 if none)
        max_chain_length: Longest chain length over all starting slots
        overflows: Bucket boundaries crossed by overflowing inserts
        failures: Rejected inserts, as counted by whoever drove the table
    """

    occupied: int
    avg_chain_length: float
    max_chain_length: int
    overflows: int
    failures: int = 0

    def with_failures(self, failures: int) -> "Stats":
        """Return a copy carrying the caller's insertion failure count."""
        return replace(self, failures=failures)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def positive_mean(values: Iterable[float]) -> float:
    """Mean of the strictly positive values, or 0.0 if there are none."""
    positive = [v for v in values if v > 0]
    if not positive:
        return 0.0
    return sum(positive) / len(positive)

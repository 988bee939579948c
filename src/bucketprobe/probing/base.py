"""Base probe strategy interface."""

from typing import Protocol


class ProbeStrategy(Protocol):
    """
    Protocol for probe (rehash) strategies.

    A probe strategy picks the next slot to try inside a bucket after the
    current one turned out to be occupied. Buckets call it with the slot just
    visited, the number of advances made so far in this probe sequence
    (starting at 0), and the bucket capacity.

    Strategies must be deterministic and return an index in
    ``[0, capacity)``. Buckets only bound the number of attempts, so a
    strategy that revisits a short cycle of slots will report a bucket as
    full before every slot has been tried.
    """

    def __call__(self, slot: int, attempt: int, capacity: int) -> int:
        """
        Compute the next slot index.

        Args:
            slot: Slot index just visited
            attempt: Number of advances already made (0 for the first)
            capacity: Number of slots in the bucket

        Returns:
            Next slot index in [0, capacity)
        """
        ...

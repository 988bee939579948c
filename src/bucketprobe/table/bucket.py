"""Fixed-capacity open-addressing bucket.

A bucket holds ``capacity`` slots and places entries routed to it by the
table. Probing starts at ``hash % capacity`` (or slot 0 when in-bucket
hashing is disabled) and follows the table's probe strategy for at most
``capacity`` advances.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, NamedTuple, Optional, TypeVar

from bucketprobe.probing.base import ProbeStrategy
from bucketprobe.table.stats import Stats, positive_mean

T = TypeVar("T")


@dataclass(frozen=True)
class Entry(Generic[T]):
    """A stored value tagged with the hash used to place it."""

    hash: int
    value: T


class BucketLookup(NamedTuple):
    """Result of a bucket lookup.

    Attributes:
        value: Stored value, or None on a miss
        found: True if an entry with the requested hash was found
        truncated: True if the probe bound was reached without a match or
            an empty slot, so the entry may have overflowed elsewhere
    """

    value: Any
    found: bool
    truncated: bool


MISS = BucketLookup(None, False, False)
TRUNCATED = BucketLookup(None, False, True)


class Bucket(Generic[T]):
    """Open-addressing slot array with a bounded probe sequence."""

    def __init__(
        self,
        capacity: int,
        rehash: ProbeStrategy,
        hash_within_bucket: bool = True,
    ) -> None:
        """Initialize an empty bucket.

        Args:
            capacity: Number of slots
            rehash: Probe strategy giving the next slot to try
            hash_within_bucket: Start at ``hash % capacity`` instead of slot 0
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.rehash = rehash
        self.hash_within_bucket = hash_within_bucket
        self.slots: List[Optional[Entry[T]]] = [None] * capacity
        self.occupied = 0

    def start_slot(self, hash: int) -> int:
        """Slot where the probe sequence for ``hash`` begins."""
        return hash % self.capacity if self.hash_within_bucket else 0

    def is_full(self) -> bool:
        return self.occupied >= self.capacity

    def insert(self, hash: int, value: T) -> bool:
        """Store ``value`` in the first empty slot along the probe sequence.

        Duplicate hashes are not detected; a second entry with the same hash
        is stored further along and is shadowed by the first on lookup.

        Args:
            hash: Unsigned 64-bit hash of the value
            value: Value to store

        Returns:
            True if stored, False if the probe bound was hit (bucket unchanged)
        """
        if self.is_full():
            return False

        slot = self.start_slot(hash)
        attempt = 0
        while self.slots[slot] is not None:
            if attempt >= self.capacity:
                return False
            slot = self.rehash(slot, attempt, self.capacity)
            attempt += 1

        self.slots[slot] = Entry(hash, value)
        self.occupied += 1
        return True

    def find(self, hash: int) -> BucketLookup:
        """Look up the entry stored under ``hash``.

        Follows the same start slot and probe sequence as insert.

        Args:
            hash: Unsigned 64-bit hash to look for

        Returns:
            BucketLookup; ``truncated`` is set only when the probe bound was
            reached before a match or an empty slot
        """
        slot = self.start_slot(hash)
        attempt = 0
        while True:
            entry = self.slots[slot]
            if entry is None:
                return MISS
            if entry.hash == hash:
                return BucketLookup(entry.value, True, False)
            if attempt >= self.capacity:
                return TRUNCATED
            slot = self.rehash(slot, attempt, self.capacity)
            attempt += 1

    def chain_length(self, slot: int) -> int:
        """Length of the occupied run reachable from ``slot``.

        Replays the probe sequence from ``slot`` itself, not from the natural
        start of any stored hash, counting occupied slots until the first
        empty one. The attempt number passed to the probe strategy is the run
        length so far. Capped at the bucket capacity.

        Args:
            slot: Starting slot index

        Returns:
            Chain length in [0, capacity]
        """
        length = 0
        for _ in range(self.capacity + 1):
            if self.slots[slot] is None:
                return length
            slot = self.rehash(slot, length, self.capacity)
            length += 1
        return min(self.capacity, length)

    def chain_lengths(self) -> List[int]:
        return [self.chain_length(slot) for slot in range(self.capacity)]

    def get_stats(self) -> Stats:
        """Compute occupancy and chain-length statistics for this bucket.

        Returns:
            Stats with ``overflows`` always 0; overflow is a table-level count
        """
        lengths = self.chain_lengths()
        return Stats(
            occupied=self.occupied,
            avg_chain_length=positive_mean(lengths),
            max_chain_length=max(lengths),
            overflows=0,
        )

    def __len__(self) -> int:
        return self.occupied

    def __repr__(self) -> str:
        return f"Bucket(capacity={self.capacity}, occupied={self.occupied})"

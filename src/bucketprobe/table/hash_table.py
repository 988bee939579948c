"""Fixed-capacity hash table built from open-addressing buckets.

The table picks a bucket with ``hash % bucket_count`` and lets that bucket
probe for a slot. With ``overflow_next_bucket`` enabled, an insert that finds
its bucket full walks cyclically through the following buckets until one
accepts the entry or the walk returns to the starting bucket.

The table is not synchronized. Overflow can touch any bucket from any
starting point, so callers sharing a table between threads must guard the
whole table with a single lock.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from bucketprobe.config import TableConfig
from bucketprobe.hashing.hash_mix import u64
from bucketprobe.probing.base import ProbeStrategy
from bucketprobe.table.bucket import MISS, Bucket, BucketLookup
from bucketprobe.table.stats import Stats, positive_mean

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HashTable(Generic[T]):
    """Bucketed open-addressing hash table with optional overflow."""

    def __init__(
        self,
        total_capacity: int,
        bucket_capacity: int,
        hash_fn: Callable[[T], int],
        rehash: ProbeStrategy,
        hash_within_bucket: bool = True,
        overflow_next_bucket: bool = False,
    ) -> None:
        """Initialize an empty table.

        Args:
            total_capacity: Total number of slots requested
            bucket_capacity: Slots per bucket; the bucket count is
                ``total_capacity // bucket_capacity``
            hash_fn: Maps a value to its 64-bit hash
            rehash: Probe strategy used inside every bucket
            hash_within_bucket: Start in-bucket probing at ``hash % bucket_capacity``
                instead of slot 0
            overflow_next_bucket: Retry full buckets in the next bucket

        Raises:
            ValueError: If the capacities are not positive or the bucket
                capacity exceeds the total capacity
        """
        self.config = TableConfig(
            total_capacity=total_capacity,
            bucket_capacity=bucket_capacity,
            hash_within_bucket=hash_within_bucket,
            overflow_next_bucket=overflow_next_bucket,
        )
        self.hash_fn = hash_fn
        self.rehash = rehash
        self.bucket_count = self.config.bucket_count
        self.overflows = 0
        self.buckets: List[Bucket[T]] = [
            Bucket(bucket_capacity, rehash, hash_within_bucket)
            for _ in range(self.bucket_count)
        ]
        logger.debug(
            f"Created table: {self.bucket_count} buckets x {bucket_capacity} slots "
            f"({total_capacity - self.slot_count} unused), "
            f"overflow={'on' if overflow_next_bucket else 'off'}"
        )

    @classmethod
    def from_config(
        cls,
        config: TableConfig,
        hash_fn: Callable[[T], int],
        rehash: ProbeStrategy,
    ) -> "HashTable[T]":
        return cls(
            config.total_capacity,
            config.bucket_capacity,
            hash_fn,
            rehash,
            hash_within_bucket=config.hash_within_bucket,
            overflow_next_bucket=config.overflow_next_bucket,
        )

    @property
    def bucket_capacity(self) -> int:
        return self.config.bucket_capacity

    @property
    def overflow_next_bucket(self) -> bool:
        return self.config.overflow_next_bucket

    @property
    def slot_count(self) -> int:
        """Addressable slots: bucket_count * bucket_capacity."""
        return self.bucket_count * self.config.bucket_capacity

    @property
    def load_factor(self) -> float:
        """Fraction of addressable slots that are occupied."""
        return len(self) / self.slot_count

    def hash_of(self, value: T) -> int:
        return u64(self.hash_fn(value))

    def bucket_index(self, hash: int) -> int:
        return hash % self.bucket_count

    def next_bucket(self, b: int) -> int:
        b += 1
        return 0 if b >= self.bucket_count else b

    def insert(self, value: T) -> bool:
        """Insert a value.

        Without overflow only the bucket selected by the hash is tried. With
        overflow, each move to a following bucket increments ``overflows``,
        and the insert fails once the walk comes back to the starting bucket.

        Args:
            value: Value to store

        Returns:
            True if stored, False if rejected
        """
        hash = self.hash_of(value)
        start = self.bucket_index(hash)
        b = start
        while True:
            if self.buckets[b].insert(hash, value):
                return True
            if not self.config.overflow_next_bucket:
                return False
            b = self.next_bucket(b)
            if b == start:
                return False
            self.overflows += 1

    def _lookup(self, hash: int) -> BucketLookup:
        start = self.bucket_index(hash)
        b = start
        while True:
            result = self.buckets[b].find(hash)
            if result.found or not (result.truncated and self.config.overflow_next_bucket):
                return result
            b = self.next_bucket(b)
            if b == start:
                return MISS

    def find(self, value: T) -> Optional[T]:
        """Find the stored value with the same hash as ``value``.

        Moves to the following bucket only when overflow is enabled and the
        current bucket's lookup was truncated. Stops at a match, at a clean
        miss, or when the walk returns to the starting bucket.

        Args:
            value: Value to look up

        Returns:
            Stored value, or None if absent
        """
        return self._lookup(self.hash_of(value)).value

    def __contains__(self, value: T) -> bool:
        return self._lookup(self.hash_of(value)).found

    def get_stats(self) -> Stats:
        """Aggregate statistics over all buckets.

        ``avg_chain_length`` is the mean of the per-bucket averages, skipping
        empty buckets. Failures are left at 0; attach them with
        ``Stats.with_failures``.

        Returns:
            Fresh Stats snapshot
        """
        bucket_stats = [bucket.get_stats() for bucket in self.buckets]
        return Stats(
            occupied=sum(s.occupied for s in bucket_stats),
            avg_chain_length=positive_mean(s.avg_chain_length for s in bucket_stats),
            max_chain_length=max(s.max_chain_length for s in bucket_stats),
            overflows=self.overflows,
        )

    def __len__(self) -> int:
        return sum(bucket.occupied for bucket in self.buckets)

    def __repr__(self) -> str:
        return (
            f"HashTable(bucket_count={self.bucket_count}, "
            f"bucket_capacity={self.config.bucket_capacity}, "
            f"occupied={len(self)}, overflows={self.overflows})"
        )

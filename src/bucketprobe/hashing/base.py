"""Base hash function interface."""

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)


class HashFunction(Protocol[T_contra]):
    """
    Protocol for hash functions used by the hash table.

    A hash function maps a stored value to a 64-bit hash. It must be
    deterministic: the same value always yields the same hash, since lookups
    recompute it to find where the value was placed.
    """

    def __call__(self, value: T_contra) -> int:
        """
        Compute the hash of a value.

        Args:
            value: Value to hash

        Returns:
            Hash as a Python int; the table masks it to unsigned 64 bits
        """
        ...

"""Concrete probe strategies."""


def quadratic_rehash(slot: int, attempt: int, capacity: int) -> int:
    """Step forward by ``attempt + 1`` slots.

    Successive offsets from the starting slot are the triangular numbers
    1, 3, 6, 10, ... which visit every slot when capacity is a power of two.

    Args:
        slot: Slot index just visited
        attempt: Number of advances already made
        capacity: Number of slots in the bucket

    Returns:
        Next slot index
    """
    return (slot + 1 + attempt) % capacity


def linear_rehash(slot: int, attempt: int, capacity: int) -> int:
    """Step forward by one slot, wrapping at the end of the bucket."""
    return quadratic_rehash(slot, 0, capacity)

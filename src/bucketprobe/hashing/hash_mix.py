"""Hash mixing functions.

This module provides deterministic 64-bit hash mixing functions based on
SplitMix64 algorithm. All functions operate on Python ints and are
platform-independent, ensuring deterministic behavior across runs.
"""

MASK64 = 0xFFFFFFFFFFFFFFFF


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 64-bit integer (value modulo 2^64)
    """
    return x & MASK64


def mix64(x: int) -> int:
    """64-bit mixing function based on SplitMix64.

    Applies three rounds of XOR-shift and multiplication to thoroughly
    mix the bits of a 64-bit value.

    Args:
        x: Input value (will be masked to 64 bits)

    Returns:
        Mixed 64-bit unsigned integer
    """
    z = u64(x)
    z = u64((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9)
    z = u64((z ^ (z >> 27)) * 0x94D049BB133111EB)
    return u64(z ^ (z >> 31))


def mix_hash(value: int) -> int:
    """Hash an integer key with mix64.

    Bijective on the 64-bit domain, so distinct keys below 2^64 never
    share a hash value.

    Args:
        value: Integer key

    Returns:
        Unsigned 64-bit hash
    """
    return mix64(value)

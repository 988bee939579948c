"""CRC-32 based hash for integer keys."""

import zlib

from bucketprobe.hashing.hash_mix import u64


def crc_hash(value: int) -> int:
    """Hash an integer key by running CRC-32 over its 8 little-endian bytes.

    Negative keys are taken in two's complement, so -1 and 2^64 - 1 hash
    alike. The result fits in 32 bits, which leaves the upper half of the
    64-bit hash space unused.

    Args:
        value: Integer key

    Returns:
        CRC-32 checksum as a non-negative int
    """
    return zlib.crc32(u64(value).to_bytes(8, "little"))

"""Hash strategies for the bucketed hash table."""

from .base import HashFunction
from .crc import crc_hash
from .hash_mix import MASK64, mix64, mix_hash, u64

HASH_FUNCTIONS = {
    "crc": crc_hash,
    "mix": mix_hash,
}

__all__ = [
    "HashFunction",
    "HASH_FUNCTIONS",
    "crc_hash",
    "mix_hash",
    "mix64",
    "u64",
    "MASK64",
]

"""bucketprobe: fixed-capacity hash table of open-addressing buckets."""

from .config import TableConfig, load_config
from .hashing import HashFunction, crc_hash, mix64, mix_hash, u64
from .primes import find_prime, is_probable_prime
from .probing import ProbeStrategy, linear_rehash, quadratic_rehash
from .table import Bucket, BucketLookup, Entry, HashTable, Stats
from .utils import Timer, get_logger, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Core table
    "HashTable",
    "Bucket",
    "BucketLookup",
    "Entry",
    "Stats",
    "TableConfig",
    # Strategies
    "HashFunction",
    "ProbeStrategy",
    "crc_hash",
    "mix_hash",
    "mix64",
    "u64",
    "linear_rehash",
    "quadratic_rehash",
    # Sizing
    "find_prime",
    "is_probable_prime",
    # Utils
    "load_config",
    "get_logger",
    "seed_everything",
    "Timer",
]

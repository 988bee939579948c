"""Bucketed open-addressing hash table."""

from .bucket import Bucket, BucketLookup, Entry
from .hash_table import HashTable
from .stats import Stats

__all__ = [
    "Bucket",
    "BucketLookup",
    "Entry",
    "HashTable",
    "Stats",
]

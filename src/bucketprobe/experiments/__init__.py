"""Benchmark sweeps for the bucketed hash table."""

"""Quick start guide for bucketprobe.

Demonstrates:
1. Filling a bucket and watching the next insert fail
2. The same workload with overflow into the next bucket
3. Chain-length statistics under different probe strategies
"""

from bucketprobe import HashTable, find_prime, linear_rehash, mix_hash, quadratic_rehash


def identity(value: int) -> int:
    return value


def example_1_full_bucket():
    """Example 1: ten keys routed to bucket 0 fill it."""
    print("=" * 60)
    print("Example 1: Full Bucket Without Overflow")
    print("=" * 60)

    table = HashTable(100, 10, identity, linear_rehash)
    for key in range(0, 100, 10):
        table.insert(key)
    print(f"Bucket 0 occupancy: {table.buckets[0].occupied}/{table.bucket_capacity}")
    print(f"Insert 100: {table.insert(100)}")
    print(f"Find 50: {table.find(50)}")
    print()


def example_2_overflow():
    """Example 2: the eleventh key overflows into bucket 1."""
    print("=" * 60)
    print("Example 2: Overflow Into the Next Bucket")
    print("=" * 60)

    table = HashTable(100, 10, identity, linear_rehash, overflow_next_bucket=True)
    for key in range(0, 110, 10):
        table.insert(key)
    print(f"Bucket 1 occupancy: {table.buckets[1].occupied}")
    print(f"Overflows: {table.overflows}")
    print(f"Find 100: {table.find(100)}")
    print()


def example_3_chain_lengths():
    """Example 3: compare probe strategies at 90% load."""
    print("=" * 60)
    print("Example 3: Chain Lengths by Probe Strategy")
    print("=" * 60)

    size = find_prime(10_000)
    for name, rehash in (("linear", linear_rehash), ("quadratic", quadratic_rehash)):
        table = HashTable(size, 16, mix_hash, rehash)
        failures = sum(not table.insert(key) for key in range(int(size * 0.9)))
        stats = table.get_stats().with_failures(failures)
        print(
            f"{name:>9}: occupied={stats.occupied}, avg={stats.avg_chain_length:.2f}, "
            f"max={stats.max_chain_length}, failures={stats.failures}"
        )
    print()


if __name__ == "__main__":
    example_1_full_bucket()
    example_2_overflow()
    example_3_chain_lengths()

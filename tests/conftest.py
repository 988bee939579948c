"""Pytest configuration and fixtures."""

import pytest

from bucketprobe import mix_hash, seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


def identity_hash(value: int) -> int:
    """Hash that places value v in bucket v % bucket_count."""
    return value


@pytest.fixture
def identity():
    return identity_hash


@pytest.fixture
def mixed():
    return mix_hash

"""Configuration loading utilities."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class TableConfig:
    """Construction parameters for a bucketed hash table.

    Attributes:
        total_capacity: Total number of slots requested
        bucket_capacity: Slots per bucket; total_capacity is floor-divided by it
        hash_within_bucket: Start probing at ``hash % bucket_capacity`` (else slot 0)
        overflow_next_bucket: Retry in the next bucket when one is full
    """

    total_capacity: int
    bucket_capacity: int
    hash_within_bucket: bool = True
    overflow_next_bucket: bool = False

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.total_capacity <= 0:
            raise ValueError(
                f"total_capacity must be positive, got {self.total_capacity}"
            )
        if self.bucket_capacity <= 0:
            raise ValueError(
                f"bucket_capacity must be positive, got {self.bucket_capacity}"
            )
        if self.bucket_capacity > self.total_capacity:
            raise ValueError(
                f"bucket_capacity ({self.bucket_capacity}) must be <= "
                f"total_capacity ({self.total_capacity})"
            )

    @property
    def bucket_count(self) -> int:
        """Number of buckets; any remainder capacity is left unused."""
        return self.total_capacity // self.bucket_capacity

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "TableConfig":
        """Build a TableConfig from a mapping such as a loaded YAML file.

        Unknown keys are ignored so the same file can carry experiment settings.
        """
        return cls(
            total_capacity=int(config["total_capacity"]),
            bucket_capacity=int(config["bucket_capacity"]),
            hash_within_bucket=bool(config.get("hash_within_bucket", True)),
            overflow_next_bucket=bool(config.get("overflow_next_bucket", False)),
        )

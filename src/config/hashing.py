"""Deterministic config hashing using SHA-256 over sorted JSON.

The full hash identifies a run. The graph hash covers only the fields
that change the generated matrix, so runs that search the same graph for
different targets (or carry different labels) share it.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from src.config.run import RunConfig

# Top-level RunConfig fields with no effect on the generated matrix.
NON_GRAPH_FIELDS = ("search", "max_node_count", "description", "tags")


def _digest(d: dict[str, Any]) -> str:
    serialized = json.dumps(d, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def config_hash(config: Any, exclude: tuple[str, ...] = ()) -> str:
    """First 16 hex characters of the SHA-256 of a dataclass config.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude: Top-level field names left out of the hash.
    """
    d = asdict(config)
    for name in exclude:
        d.pop(name, None)
    return _digest(d)


def graph_config_hash(config: RunConfig) -> str:
    """Hash of the fields that determine the generated graph."""
    return config_hash(config, exclude=NON_GRAPH_FIELDS)


def full_config_hash(config: RunConfig) -> str:
    """Hash for full run identity, descriptive fields included."""
    return config_hash(config)

"""Run configuration system with frozen, hashable, serializable dataclasses."""

from src.config.run import (
    MAX_NODE_COUNT,
    GraphConfig,
    RunConfig,
    SearchConfig,
)
from src.config.defaults import ANCHOR_CONFIG
from src.config.hashing import config_hash, graph_config_hash, full_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MAX_NODE_COUNT",
    "GraphConfig",
    "RunConfig",
    "SearchConfig",
    "ANCHOR_CONFIG",
    "config_hash",
    "graph_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]

"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.run import RunConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: RunConfig) -> str:
    """Serialize a RunConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RunConfig:
    """Deserialize a JSON string to a RunConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift)
    and cast=[tuple] to convert JSON arrays back to tuples for tags.
    Missing keys fall back to dataclass defaults, so partial files such as
    ``{"graph": {"node_count": 50}}`` are accepted.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: RunConfig) -> dict[str, Any]:
    """Convert a RunConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> RunConfig:
    """Reconstruct a RunConfig from a plain dictionary."""
    return from_dict(data_class=RunConfig, data=d, config=_DACITE_CONFIG)

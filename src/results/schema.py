"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required fields
and the shape of the search outcome before writing result.json files.
"""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.config.run import RunConfig
from src.config.hashing import full_config_hash, graph_config_hash
from src.graph.types import AdjacencyMatrix
from src.reproducibility.git_hash import get_git_hash
from src.results.run_id import generate_run_id
from src.search.types import CycleSearchResult, Found

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_SCALARS = {"found", "elapsed_ms", "multiplications"}


def outcome_to_metrics(outcome: CycleSearchResult) -> dict[str, Any]:
    """Flatten a search outcome into the metrics block of result.json."""
    scalars: dict[str, Any] = {
        "found": isinstance(outcome, Found),
        "elapsed_ms": outcome.elapsed_ms,
        "multiplications": outcome.multiplications,
    }
    if isinstance(outcome, Found):
        scalars["step"] = outcome.step
        scalars["matched_count"] = outcome.matched_count
    else:
        scalars["steps_exhausted"] = outcome.steps_exhausted
    return {"scalars": scalars}


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.

    Checks:
    - All required top-level fields are present
    - schema_version is a string, tags a list, config a dict
    - timestamp parses as ISO 8601
    - metrics.scalars carries found/elapsed_ms/multiplications, plus
      step and matched_count when found, steps_exhausted otherwise
    - graph summary, when present, has consistent edge counts
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    if "metrics" in result:
        metrics = result["metrics"]
        if not isinstance(metrics, dict):
            errors.append("metrics must be a dict")
        elif not isinstance(metrics.get("scalars"), dict):
            errors.append("metrics.scalars is required")
        else:
            errors.extend(_validate_scalars(metrics["scalars"]))

    graph = result.get("graph")
    if graph is not None:
        if not isinstance(graph, dict):
            errors.append("graph must be a dict")
        else:
            edges = graph.get("edges", [])
            if len(edges) != graph.get("edge_count", len(edges)):
                errors.append(
                    f"graph.edges length {len(edges)} != "
                    f"graph.edge_count {graph.get('edge_count')}"
                )

    return errors


def _validate_scalars(scalars: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    missing = REQUIRED_SCALARS - set(scalars.keys())
    if missing:
        errors.append(f"metrics.scalars missing fields: {sorted(missing)}")
        return errors

    if scalars["found"]:
        for field in ("step", "matched_count"):
            if field not in scalars:
                errors.append(f"metrics.scalars.{field} is required when found")
        step = scalars.get("step")
        if isinstance(step, int) and scalars["multiplications"] != step - 1:
            errors.append(
                f"metrics.scalars.multiplications ({scalars['multiplications']}) "
                f"must equal step - 1 ({step - 1})"
            )
    elif "steps_exhausted" not in scalars:
        errors.append("metrics.scalars.steps_exhausted is required when not found")

    return errors


def _graph_summary(graph: AdjacencyMatrix) -> dict[str, Any]:
    edges = graph.edges()
    return {
        "n": graph.n,
        "cycle_count": graph.cycle_count,
        "rule": graph.rule.value,
        "edge_count": len(edges),
        "self_loops": graph.self_loops(),
        "edges": [list(e) for e in edges],
    }


def write_result(
    config: RunConfig,
    outcome: CycleSearchResult,
    graph: AdjacencyMatrix | None = None,
    metadata: dict[str, Any] | None = None,
    results_dir: str | Path = "results",
    run_id: str | None = None,
) -> Path:
    """Write result.json for a finished cycle search.

    Creates a directory at results/{run_id}/ containing result.json.

    Args:
        config: The run configuration.
        outcome: Found or NotFound from the search.
        graph: Optional generated graph; its edge list is stored so a
            renderer can redraw the run without regenerating.
        metadata: Optional additional metadata merged into the metadata block.
        results_dir: Base directory for result output.
        run_id: Directory name under results_dir; generated from the
            config when omitted.

    Returns:
        Path to the written result.json.

    Raises:
        ValueError: If the assembled result fails validation.
        FileExistsError: If results_dir/run_id/result.json already exists.
    """
    if run_id is None:
        run_id = generate_run_id(config)

    result: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": outcome_to_metrics(outcome),
        "metadata": {
            "code_hash": get_git_hash(),
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            **(metadata or {}),
        },
    }
    if graph is not None:
        result["graph"] = _graph_summary(graph)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    out_dir = Path(results_dir) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    result_path = out_dir / "result.json"
    # "x" never replaces an earlier run's result
    with open(result_path, "x") as f:
        json.dump(result, f, indent=2)

    return result_path


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Load and validate a result.json file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return result

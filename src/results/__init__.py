"""Result schema validation, writing, and run ID generation."""

from src.results.schema import (
    load_result,
    outcome_to_metrics,
    validate_result,
    write_result,
)
from src.results.run_id import generate_run_id

__all__ = [
    "validate_result",
    "write_result",
    "load_result",
    "outcome_to_metrics",
    "generate_run_id",
]

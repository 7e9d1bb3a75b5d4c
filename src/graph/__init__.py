"""Deterministic graph generation for cycle-count experiments."""

from src.graph.generator import (
    InvalidSpecError,
    generate,
    generate_from_config,
    select_rule,
)
from src.graph.types import AdjacencyMatrix, GenerationRule

__all__ = [
    "AdjacencyMatrix",
    "GenerationRule",
    "InvalidSpecError",
    "generate",
    "generate_from_config",
    "select_rule",
]

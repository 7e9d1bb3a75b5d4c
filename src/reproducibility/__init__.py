"""Code provenance tracking for run results."""

from src.reproducibility.git_hash import get_git_hash

__all__ = [
    "get_git_hash",
]

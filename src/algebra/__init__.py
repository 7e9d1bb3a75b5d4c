"""Dense square-matrix algebra used by the cycle search."""

from src.algebra.matrix import (
    INT64_CEILING,
    DimensionMismatchError,
    is_square,
    multiply,
    trace,
)

__all__ = [
    "INT64_CEILING",
    "DimensionMismatchError",
    "is_square",
    "multiply",
    "trace",
]

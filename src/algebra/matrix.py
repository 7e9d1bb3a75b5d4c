"""Square-matrix multiplication over dense row-major integer arrays.

Products are computed in int64 while the worst-case entry bound
max|m1| * max|m2| * size stays under INT64_CEILING. Past that the product
is computed with Python integers (dtype=object), which is exact but much
slower. For 0/1 adjacency powers the bound on A^k is size**(k-1), so at
10,000 nodes the int64 path covers A^1 .. A^5 for a dense graph; graphs
with out-degree <= 1 (everything the generator builds) never leave it.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)

INT64_CEILING = int(np.iinfo(np.int64).max)


class DimensionMismatchError(ValueError):
    """Raised when matrix operands are not square or differ in size."""


def is_square(m: np.ndarray) -> bool:
    """True if m is a 2-D array with equal row and column counts."""
    return m.ndim == 2 and m.shape[0] == m.shape[1]


def _max_abs(m: np.ndarray) -> int:
    # np.abs(-2**63) wraps in int64, so take the extremes as Python ints
    if m.size == 0:
        return 0
    return max(abs(int(m.min())), abs(int(m.max())))


def _as_operand(m: np.ndarray) -> np.ndarray:
    """View m as a contiguous int64 (or exact object) array without mutating it."""
    if m.dtype == object:
        return m
    return np.ascontiguousarray(m, dtype=np.int64)


def multiply(m1: np.ndarray, m2: np.ndarray) -> np.ndarray:
    """Multiply two square matrices of the same size.

    result[i, j] = sum_k m1[i, k] * m2[k, j]. Neither operand is modified;
    the result is a freshly allocated array.

    Args:
        m1: Left operand, shape (size, size).
        m2: Right operand, shape (size, size).

    Returns:
        int64 array of shape (size, size), or an object array of Python
        ints when the int64 range could be exceeded.

    Raises:
        DimensionMismatchError: If either operand is not square or the
            sizes differ.
        ValueError: If an operand has a non-integer dtype (float, complex, ...).
    """
    m1 = np.asarray(m1)
    m2 = np.asarray(m2)

    if not (is_square(m1) and is_square(m2)):
        raise DimensionMismatchError(
            f"Matrices must be square, got shapes {m1.shape} and {m2.shape}"
        )
    if m1.shape != m2.shape:
        raise DimensionMismatchError(
            f"Matrices must be of the same size, got {m1.shape[0]} "
            f"and {m2.shape[0]}"
        )
    for m in (m1, m2):
        if m.dtype != object and m.dtype.kind not in "biu":
            raise ValueError(f"Matrices must hold integers, got dtype {m.dtype}")

    size = m1.shape[0]
    bound = _max_abs(m1) * _max_abs(m2) * size

    if bound > INT64_CEILING:
        log.warning(
            "Entry bound %d exceeds int64 range at size %d; "
            "multiplying with exact Python integers",
            bound,
            size,
        )
        return np.asarray(m1, dtype=object) @ np.asarray(m2, dtype=object)

    return _as_operand(m1) @ _as_operand(m2)


def trace(m: np.ndarray) -> int:
    """Sum of the diagonal entries of a square matrix, as a Python int.

    Raises:
        DimensionMismatchError: If m is not square.
    """
    m = np.asarray(m)
    if not is_square(m):
        raise DimensionMismatchError(f"trace needs a square matrix, got {m.shape}")
    return int(sum(m.diagonal().tolist()))

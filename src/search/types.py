"""Cycle search outcome types."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Found:
    """A power of the adjacency matrix whose trace matched the target."""

    step: int  # k such that trace(A^k) == target
    matched_count: int  # trace(A^k)
    elapsed: float  # seconds
    multiplications: int  # matrix products computed, step - 1

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass(frozen=True, slots=True)
class NotFound:
    """No power up to the step bound had the requested trace."""

    steps_exhausted: int
    elapsed: float  # seconds
    multiplications: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


CycleSearchResult = Found | NotFound

"""Run configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field

MAX_NODE_COUNT = 10_000


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Graph construction parameters."""

    node_count: int = 10
    cycle_count: int = 3  # 0 = acyclic, 1 = single cycle, >1 = ring of that length


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Matrix-power cycle search parameters."""

    target_cycle_count: int = 3  # trace(A^k) value to look for


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Top-level run configuration composing graph and search sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations before any matrix
    is allocated.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    max_node_count: int = MAX_NODE_COUNT
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if self.max_node_count < 1:
            raise ValueError(
                f"max_node_count must be >= 1, got {self.max_node_count}"
            )
        if not 1 <= self.graph.node_count <= self.max_node_count:
            raise ValueError(
                f"node_count ({self.graph.node_count}) must be in "
                f"[1, {self.max_node_count}]"
            )
        if not 0 <= self.graph.cycle_count <= self.graph.node_count:
            raise ValueError(
                f"cycle_count ({self.graph.cycle_count}) must be in "
                f"[0, node_count={self.graph.node_count}]"
            )
        if self.search.target_cycle_count < 0:
            raise ValueError(
                f"target_cycle_count must be >= 0, "
                f"got {self.search.target_cycle_count}"
            )

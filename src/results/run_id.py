"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from src.config.run import RunConfig


def generate_run_id(config: RunConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: n{node_count}_c{cycle_count}_t{target}_{YYYYMMDD}_{HHMMSS}_{micros}
    Example: n10_c3_t3_20261018_143012_048213
    """
    ts = datetime.now(timezone.utc)
    return (
        f"n{config.graph.node_count}"
        f"_c{config.graph.cycle_count}"
        f"_t{config.search.target_cycle_count}"
        f"_{ts.strftime('%Y%m%d_%H%M%S_%f')}"
    )

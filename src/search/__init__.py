"""Matrix-power cycle search."""

from src.search.cycles import iter_power_traces, search, search_from_config
from src.search.types import CycleSearchResult, Found, NotFound

__all__ = [
    "CycleSearchResult",
    "Found",
    "NotFound",
    "iter_power_traces",
    "search",
    "search_from_config",
]

"""wayfind-search - Grid traversal strategies and path reconstruction."""
from __future__ import annotations

from wayfind_search.frontier import (
    FifoFrontier,
    Frontier,
    LifoFrontier,
    PriorityFrontier,
    Strategy,
    make_frontier,
    manhattan,
)
from wayfind_search.search import SearchResult, search
from wayfind_search.path import reconstruct

__all__ = [
    "FifoFrontier",
    "Frontier",
    "LifoFrontier",
    "PriorityFrontier",
    "Strategy",
    "make_frontier",
    "manhattan",
    "SearchResult",
    "search",
    "reconstruct",
]

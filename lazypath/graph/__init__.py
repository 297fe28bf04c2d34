"""
Graph search module.

Provides the lazily-expanding search engine and in-memory graph sources:
- PathFinder: A* / Dijkstra over caller-supplied expansion
- Link, PathResult: Edge and result types
- StaticGraphExpander: Expander over an in-memory or msgpack link graph
"""

from lazypath.graph.expanders import StaticGraphExpander
from lazypath.graph.pathfinder import PathFinder, SearchState
from lazypath.graph.types import (
    HeuristicEstimator,
    Link,
    Node,
    NodeExpander,
    PathResult,
)

__all__ = [
    "PathFinder",
    "SearchState",
    "Link",
    "Node",
    "PathResult",
    "NodeExpander",
    "HeuristicEstimator",
    "StaticGraphExpander",
]

"""
Lazy path finding.

A best-first (A* / Dijkstra) search engine that discovers the graph
on demand through caller-supplied expansion logic, so graphs too large
to load (or living behind a remote API) can still be searched.
"""

from lazypath.errors import CollaboratorError, InvalidLinkError, SearchError
from lazypath.graph import Link, PathFinder, PathResult

__version__ = "0.1.0"

__all__ = [
    "PathFinder",
    "Link",
    "PathResult",
    "SearchError",
    "CollaboratorError",
    "InvalidLinkError",
]

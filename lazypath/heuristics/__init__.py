"""
Heuristics module.

Provides heuristic estimators for guiding the search:
- zero_heuristic: Constant zero (plain Dijkstra)
- WeightedHeuristic: Weighted A* wrapper around another estimator
- EmbeddingHeuristic: Cosine distance between node and goal embeddings
"""

from lazypath.heuristics.basic import WeightedHeuristic, zero_heuristic
from lazypath.heuristics.embedding import EmbeddingHeuristic

__all__ = [
    "zero_heuristic",
    "WeightedHeuristic",
    "EmbeddingHeuristic",
]

"""
Simple heuristic estimators.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Hashable

from lazypath.config import ASTAR_EPSILON


def zero_heuristic(start: Hashable, node: Hashable) -> int:
    """Estimate nothing: turns A* into uniform-cost (Dijkstra) search."""
    return 0


class WeightedHeuristic:
    """
    Weighted A*: scales another estimator by a constant factor.

    f(n) = g(n) + weight * h(n). A weight above 1 trades optimality for
    fewer expansions; below 1 tempers an estimator that overshoots.
    Works with both sync and async base estimators.
    """

    def __init__(
        self,
        base: Callable[[Hashable, Hashable], Any],
        weight: float = ASTAR_EPSILON,
    ) -> None:
        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")
        self._base = base
        self._weight = weight

    @property
    def weight(self) -> float:
        return self._weight

    def __call__(self, start: Hashable, node: Hashable) -> Any:
        estimate = self._base(start, node)
        if inspect.isawaitable(estimate):
            return self._scale_async(estimate)
        return self._weight * estimate

    async def _scale_async(self, estimate: Awaitable[float]) -> float:
        return self._weight * await estimate

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self._base!r}, weight={self._weight})"

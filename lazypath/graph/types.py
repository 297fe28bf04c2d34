"""
Data types shared by the search engine and its collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Iterable, Union

# Nodes are opaque: anything hashable and comparable for equality
Node = Hashable

Cost = Union[int, float]


@dataclass(frozen=True)
class Link:
    """
    A direct, weighted edge from one node to another.

    The link must be singular: it cannot pass through other nodes on the way.

    Attributes:
        from_node: Node the link starts at
        to_node: Node the link ends at
        cost: Cost of traversing the link (expected to be non-negative)
    """

    from_node: Node
    to_node: Node
    cost: Cost

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_node, "to": self.to_node, "cost": self.cost}


@dataclass
class PathResult:
    """
    Outcome of a single search.

    Attributes:
        found: Whether the goal was reached
        iterations: Number of loop iterations the search consumed
        cost: Total link cost of the path (None unless found)
        path: Links from start to goal, empty when start == goal (None unless found)
    """

    found: bool
    iterations: int
    cost: Cost | None = None
    path: list[Link] | None = None

    def nodes(self, start: Node) -> list[Node]:
        """
        Sequence of nodes visited along the path, including start and goal.

        Returns an empty list when no path was found.
        """
        if not self.found or self.path is None:
            return []
        return [start] + [link.to_node for link in self.path]

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; cost and path are only present when found."""
        result: dict[str, Any] = {"found": self.found, "iterations": self.iterations}
        if self.found:
            result["cost"] = self.cost
            result["path"] = [link.to_dict() for link in self.path or []]
        return result


# Collaborator signatures. Either may be a plain function or a coroutine function.
NodeExpander = Callable[[Node], Union[Iterable[Link], Awaitable[Iterable[Link]]]]
HeuristicEstimator = Callable[[Node, Node], Union[Cost, Awaitable[Cost]]]

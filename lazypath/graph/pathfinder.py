"""
Lazily-expanding best-first search (A*, or Dijkstra without a heuristic).

The graph is never loaded up front. Each time a node is taken off the
frontier the engine asks the expander for its outgoing links, so the
search only ever touches the part of the graph it needs.

Usage:
    from lazypath.graph import Link, PathFinder

    def expand(node):
        return [Link(node, other, 1) for other in neighbours_of(node)]

    finder = PathFinder(expand)
    result = finder.find_path("a", "d")
    if result.found:
        print(result.cost, result.path)
"""

from __future__ import annotations

import asyncio
import heapq
import inspect
import logging
import math
import numbers
from dataclasses import dataclass, field
from itertools import count
from typing import Any

from lazypath.errors import CollaboratorError, InvalidLinkError
from lazypath.graph.types import (
    Cost,
    HeuristicEstimator,
    Link,
    Node,
    NodeExpander,
    PathResult,
)
from lazypath.heuristics.basic import zero_heuristic

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    """Real, non-NaN number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


async def _resolve(value: Any) -> Any:
    """Await collaborator results that are awaitable, pass others through."""
    if inspect.isawaitable(value):
        return await value
    return value


@dataclass
class SearchState:
    """
    Bookkeeping for one search, created fresh per call and then discarded.

    The frontier is a binary heap of (total_cost, sequence, node) entries.
    A node's sequence number is fixed when it first joins the frontier, so
    among equal total costs the earliest-discovered node is expanded first.
    Improving a node's cost pushes a new entry; the outdated one is skipped
    when it surfaces.

    Attributes:
        open: Frontier nodes reached but not yet finalized
        closed: Finalized nodes, never reconsidered
        link_cost: Best known cumulative link cost from start (no heuristic)
        total_cost: link_cost plus heuristic, used only for ordering
        predecessor: Link that produced the stored link_cost (None for start)
    """

    start: Node
    open: set[Node] = field(default_factory=set)
    closed: set[Node] = field(default_factory=set)
    link_cost: dict[Node, Cost] = field(default_factory=dict)
    total_cost: dict[Node, Cost] = field(default_factory=dict)
    predecessor: dict[Node, Link | None] = field(default_factory=dict)
    _heap: list[tuple[Cost, int, Node]] = field(default_factory=list, init=False, repr=False)
    _sequence: dict[Node, int] = field(default_factory=dict, init=False, repr=False)
    _counter: count = field(default_factory=count, init=False, repr=False)

    def __post_init__(self) -> None:
        # There is no cost to start
        self.link_cost[self.start] = 0
        self.total_cost[self.start] = 0
        self.predecessor[self.start] = None
        self.add_open(self.start)

    def add_open(self, node: Node) -> None:
        """Add a node to the frontier (no-op if already there)."""
        if node in self.open:
            return
        self.open.add(node)
        self._sequence[node] = next(self._counter)
        self._push(node)

    def _push(self, node: Node) -> None:
        heapq.heappush(
            self._heap, (self.total_cost[node], self._sequence[node], node)
        )

    def best(self) -> Node | None:
        """Frontier node with the lowest total cost, or None if the frontier is empty."""
        while self._heap:
            total, _seq, node = self._heap[0]
            if node in self.open and total == self.total_cost[node]:
                return node
            heapq.heappop(self._heap)
        return None

    def relax(self, link: Link, estimate: Cost) -> None:
        """Record a cheaper route to link.to_node through link."""
        node = link.to_node
        self.link_cost[node] = self.link_cost[link.from_node] + link.cost
        self.total_cost[node] = self.link_cost[node] + estimate
        self.predecessor[node] = link
        if node in self.open:
            self._push(node)

    def close(self, node: Node) -> None:
        """Finalize a node."""
        self.open.discard(node)
        self.closed.add(node)

    def trace_path(self, goal: Node) -> list[Link]:
        """Walk predecessors back from goal to start."""
        path: list[Link] = []
        link = self.predecessor[goal]
        while link is not None:
            path.append(link)
            link = self.predecessor[link.from_node]
        path.reverse()
        return path


class PathFinder:
    """
    Best-first search engine over a graph discovered on demand.

    Holds only the two collaborators; all search state lives in a
    SearchState created per call, so one instance can serve any number of
    sequential or concurrent searches.

    Correctness assumes non-negative link costs (enforced) and, when a
    heuristic is given, a consistent heuristic (not enforced). With the
    default zero heuristic the search is plain Dijkstra.
    """

    def __init__(
        self,
        expander: NodeExpander,
        heuristic: HeuristicEstimator | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            expander: Returns the outgoing links of a node (sync or async)
            heuristic: Estimates remaining cost, called as heuristic(start, node)
                (sync or async). Defaults to a constant zero.
        """
        self.expander = expander
        self.heuristic = heuristic if heuristic is not None else zero_heuristic

    def find_path(self, start: Node, goal: Node) -> PathResult:
        """
        Find the cheapest path from start to goal.

        Runs the search on a fresh event loop. Use find_path_async from
        code that is already running inside an event loop.

        Raises:
            CollaboratorError: If the expander or heuristic fails
        """
        return asyncio.run(self.find_path_async(start, goal))

    async def find_path_async(self, start: Node, goal: Node) -> PathResult:
        """
        Find the cheapest path from start to goal.

        Collaborator calls are awaited one at a time; nothing is expanded
        concurrently.

        Args:
            start: The node to start the search from
            goal: The node to find a path to

        Returns:
            PathResult with cost and path when found

        Raises:
            CollaboratorError: If the expander or heuristic fails
            InvalidLinkError: If the expander returns an unusable link
        """
        state = SearchState(start)
        iterations = 1

        while True:
            best = state.best()
            if best is None:
                logger.info(
                    f"No path from {start!r} to {goal!r} ({iterations} iterations)"
                )
                return PathResult(found=False, iterations=iterations)

            if best == goal:
                break

            for link in await self._expand(best):
                if link.to_node in state.closed:
                    continue
                candidate = state.link_cost[best] + link.cost
                known = state.link_cost.get(link.to_node)
                if known is None or candidate < known:
                    estimate = await self._estimate(start, link.to_node)
                    state.relax(link, estimate)
                state.add_open(link.to_node)

            state.close(best)
            iterations += 1

        path = state.trace_path(best)
        cost = state.link_cost[best]
        logger.info(
            f"Found path {start!r} -> {goal!r}: cost {cost}, "
            f"{len(path)} links, {iterations} iterations"
        )
        return PathResult(found=True, iterations=iterations, cost=cost, path=path)

    async def _expand(self, node: Node) -> list[Link]:
        """Fetch and validate the outgoing links of node."""
        try:
            links = list(await _resolve(self.expander(node)))
        except Exception as e:
            raise CollaboratorError(
                f"Expander failed on {node!r}: {e}", node=node
            ) from e

        logger.debug(f"Expanded {node!r}: {len(links)} links")

        for link in links:
            if not isinstance(link, Link):
                raise InvalidLinkError(
                    f"Expander returned {type(link).__name__} for {node!r}, expected Link",
                    node=node,
                )
            if link.from_node != node:
                raise InvalidLinkError(
                    f"Link {link.from_node!r} -> {link.to_node!r} does not start at {node!r}",
                    node=node,
                )
            if not _is_number(link.cost):
                raise InvalidLinkError(
                    f"Cost {link.cost!r} on link {node!r} -> {link.to_node!r} is not a number",
                    node=node,
                )
            if link.cost < 0:
                raise InvalidLinkError(
                    f"Negative cost {link.cost} on link {node!r} -> {link.to_node!r}",
                    node=node,
                )
        return links

    async def _estimate(self, start: Node, node: Node) -> Cost:
        try:
            estimate = await _resolve(self.heuristic(start, node))
        except Exception as e:
            raise CollaboratorError(
                f"Heuristic failed on {node!r}: {e}", node=node
            ) from e
        if not _is_number(estimate):
            raise CollaboratorError(
                f"Heuristic returned {estimate!r} for {node!r}, expected a number",
                node=node,
            )
        return estimate

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(expander={self.expander!r}, heuristic={self.heuristic!r})"

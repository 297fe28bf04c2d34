"""
In-memory graph sources usable as node expanders.

Usage:
    from lazypath.graph import PathFinder, StaticGraphExpander

    graph = StaticGraphExpander([("a", "b", 3), ("a", "c", 1), ("c", "d", 2)])
    PathFinder(graph).find_path("a", "d")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Hashable, Iterable, Mapping, Union

import msgpack

from lazypath.config import DEFAULT_LINK_COST
from lazypath.graph.types import Cost, Link

logger = logging.getLogger(__name__)

LinkLike = Union[Link, tuple]


class StaticGraphExpander:
    """
    Expander backed by a fully known link list.

    Outgoing links are returned in the order they were given. Nodes with
    no outgoing links are dead ends (empty list).
    """

    def __init__(self, links: Iterable[LinkLike] = ()) -> None:
        self._adjacency: dict[Hashable, list[Link]] = {}
        for link in links:
            self.add(link)

    def add(self, link: LinkLike) -> None:
        """Add a Link or a (from_node, to_node, cost) triple."""
        if not isinstance(link, Link):
            from_node, to_node, cost = link
            link = Link(from_node, to_node, cost)
        self._adjacency.setdefault(link.from_node, []).append(link)

    @classmethod
    def from_adjacency(
        cls, adjacency: Mapping[Hashable, Mapping[Hashable, Cost]]
    ) -> StaticGraphExpander:
        """Build from {from_node: {to_node: cost}}."""
        return cls(
            Link(source, target, cost)
            for source, targets in adjacency.items()
            for target, cost in targets.items()
        )

    @classmethod
    def from_msgpack(
        cls, path: Path | str, cost: Cost = DEFAULT_LINK_COST
    ) -> StaticGraphExpander:
        """
        Load a msgpack link graph of the form {source: [target, ...]}.

        Every link gets the same cost.
        """
        logger.info(f"Loading link graph from {path}...")
        with open(path, "rb") as f:
            raw: dict[Hashable, list[Hashable]] = msgpack.load(f, strict_map_key=False)
        graph = cls(
            Link(source, target, cost)
            for source, targets in raw.items()
            for target in targets
        )
        logger.info(f"Loaded {len(graph):,} nodes with outgoing links")
        return graph

    def nodes(self) -> list[Hashable]:
        """Nodes that have at least one outgoing link."""
        return list(self._adjacency)

    def __call__(self, node: Hashable) -> list[Link]:
        return list(self._adjacency.get(node, ()))

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self)})"

"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import asyncio
import string
from pathlib import Path

import pytest

from lazypath.graph import Link, PathFinder, StaticGraphExpander


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def diamond_links() -> list[Link]:
    """Two routes a->d: via b (cost 6) and via c (cost 3)."""
    return [
        Link("a", "b", 3),
        Link("a", "c", 1),
        Link("b", "d", 3),
        Link("c", "d", 2),
    ]


@pytest.fixture
def detour_links() -> list[Link]:
    """A cheap dead-end branch z->y->x->w next to the expensive real route a->b->c."""
    return [
        Link("a", "z", 1),
        Link("a", "b", 10),
        Link("z", "y", 1),
        Link("y", "x", 1),
        Link("x", "w", 1),
        Link("b", "c", 5),
    ]


def alphabet_distance(start: str, node: str) -> int:
    """Distance between two letters in the alphabet."""
    letters = string.ascii_lowercase
    return abs(letters.index(start) - letters.index(node))


@pytest.fixture
def letter_heuristic():
    """Heuristic used with the detour graph."""
    return alphabet_distance


@pytest.fixture(params=["sync", "async"])
def search(request):
    """
    Run a search with sync or async collaborators.

    Returns a function (links, start, goal, heuristic=None) -> PathResult.
    """
    mode = request.param

    def run(links, start, goal, heuristic=None):
        graph = StaticGraphExpander(links)
        if mode == "sync":
            return PathFinder(graph, heuristic).find_path(start, goal)

        async def expand(node):
            return graph(node)

        async_heuristic = None
        if heuristic is not None:

            async def async_heuristic(a, b):
                return heuristic(a, b)

        finder = PathFinder(expand, async_heuristic)
        return asyncio.run(finder.find_path_async(start, goal))

    return run

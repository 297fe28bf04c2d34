#!/usr/bin/env python3
"""
lazypath CLI - find the cheapest path between two nodes.

Usage:
    python scripts/find_path.py --start "Potato" --goal "Barack Obama"
    python scripts/find_path.py --start "Cat" --goal "Dog" --heuristic embedding --weight 2
    python scripts/find_path.py --source graph --graph data/link_graph.msgpack --start 12 --goal 40

Sources:
    wikipedia - Live Wikipedia, one HTTP request per expanded article (default)
    graph     - Pre-computed msgpack link graph {source_id: [target_id, ...]}

Heuristics:
    none      - Dijkstra (optimal, expands the most nodes)
    embedding - Cosine distance of sentence-transformer embeddings to the goal
                (needs the "embeddings" extra; not admissible)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from lazypath.config import (  # noqa: E402
    LINK_GRAPH_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    link_graph_available,
)
from lazypath.errors import CollaboratorError  # noqa: E402
from lazypath.graph import PathFinder, StaticGraphExpander  # noqa: E402
from lazypath.heuristics import EmbeddingHeuristic, WeightedHeuristic  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the cheapest path between two nodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start node (article title, or integer id with --source graph)",
    )
    parser.add_argument(
        "--goal",
        type=str,
        required=True,
        help="Goal node (article title, or integer id with --source graph)",
    )
    parser.add_argument(
        "--source",
        type=str,
        default="wikipedia",
        choices=["wikipedia", "graph"],
        help="Where links come from (default: wikipedia)",
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=LINK_GRAPH_PATH,
        help=f"msgpack link graph for --source graph (default: {LINK_GRAPH_PATH})",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default="none",
        choices=["none", "embedding"],
        help="Heuristic to guide the search (default: none)",
    )
    parser.add_argument(
        "--weight",
        type=float,
        default=None,
        help="Weighted A* factor applied to the heuristic; needs --heuristic "
        "(default: unweighted)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_finder(args: argparse.Namespace, start, goal) -> PathFinder:
    """Wire the expander and heuristic selected on the command line."""
    if args.source == "graph":
        expander = StaticGraphExpander.from_msgpack(args.graph)
    else:
        from lazypath.wikipedia import WikiLinkExpander

        expander = WikiLinkExpander()

    heuristic = None
    if args.heuristic == "embedding":
        heuristic = EmbeddingHeuristic.from_sentence_transformer(goal)
        if args.weight is not None:
            heuristic = WeightedHeuristic(heuristic, weight=args.weight)

    return PathFinder(expander, heuristic)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.weight is not None and args.heuristic == "none":
        print("Error: --weight needs a heuristic (--heuristic embedding)", file=sys.stderr)
        return 2
    if args.weight is not None and args.weight < 0:
        print("Error: --weight must be non-negative", file=sys.stderr)
        return 2

    start, goal = args.start, args.goal
    if args.source == "graph":
        if not link_graph_available(args.graph):
            print(f"Error: link graph not found: {args.graph}", file=sys.stderr)
            return 2
        try:
            start, goal = int(start), int(goal)
        except ValueError:
            print("Error: --source graph needs integer node ids", file=sys.stderr)
            return 2

    finder = build_finder(args, start, goal)

    try:
        result = finder.find_path(start, goal)
    except CollaboratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
        return 0 if result.found else 1

    print("\n" + "=" * 60)
    if result.found:
        print(f"Found path from '{start}' to '{goal}' (cost {result.cost})")
    else:
        print(f"No path from '{start}' to '{goal}'")
    print("=" * 60)

    for i, node in enumerate(result.nodes(start)):
        print(f"  {i}. {node}")

    print(f"\nIterations: {result.iterations}")

    expander = finder.expander
    if hasattr(expander, "scraper"):
        print(f"Pages fetched: {expander.scraper.requests_made}")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
hoproute CLI - Build a small graph and trace a shortest-path search.

Usage:
    python scripts/trace_route.py --edge A B --edge B C --edge A D --edge D C --source A --target C
    python scripts/trace_route.py --edge A B --node Z --source A --target Z
    python scripts/trace_route.py --edge A B --edge A C --source A --target C --order sorted

Nodes named in --edge are created automatically; use --node for
isolated nodes. Exits 0 when a path is found and 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hoproute import BFSRouter, Graph  # noqa: E402
from hoproute.config import (  # noqa: E402
    LOG_LEVEL,
    NEIGHBOR_ORDER,
    NEIGHBOR_ORDERS,
    validate_neighbor_order,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Trace a breadth-first shortest-path search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--node",
        action="append",
        default=[],
        help="Add a node (repeatable)",
    )
    parser.add_argument(
        "--edge",
        action="append",
        nargs=2,
        metavar=("FROM", "TO"),
        default=[],
        help="Add an undirected edge (repeatable)",
    )
    parser.add_argument(
        "--source",
        type=str,
        required=True,
        help="Node to start from",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Node to reach",
    )
    parser.add_argument(
        "--order",
        type=str,
        default=NEIGHBOR_ORDER,
        choices=NEIGHBOR_ORDERS,
        help=f"Neighbor iteration order (default: {NEIGHBOR_ORDER})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    # argparse does not check a default against choices
    try:
        validate_neighbor_order(args.order)
    except ValueError as e:
        parser.error(str(e))

    return args


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    graph = Graph(neighbor_order=args.order)
    for node in args.node:
        graph.add_node(node)
    for a, b in args.edge:
        graph.add_node(a)
        graph.add_node(b)
        result = graph.add_edge(a, b)
        if not result:
            print(f"Skipped edge {a}-{b}: {result.value}", file=sys.stderr)

    print("=" * 60)
    print(f"Graph ({graph.node_count} nodes, {graph.edge_count} edges)")
    print("=" * 60)
    print(graph)
    print()

    router = BFSRouter(graph)
    path = router.find_path(args.source, args.target)

    print("Trace:")
    for line in router.get_log():
        print(f"  {line}")

    print(f"\nVisit order: {', '.join(router.get_visit_order()) or '(none)'}")

    if path is None:
        print(f"\nNo path from '{args.source}' to '{args.target}'")
        return 1

    print(f"\nPath ({len(path) - 1} hops):")
    for i, node in enumerate(path):
        marker = " (SOURCE)" if i == 0 else " (TARGET)" if i == len(path) - 1 else ""
        print(f"  {i}. {node}{marker}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

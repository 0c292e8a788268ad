"""Command-line interface for flightpath."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from flightpath.algorithms.spf import ShortestPathSearch
from flightpath.config import SearchConfig
from flightpath.dsl.loader import load_routes_file
from flightpath.logging import (
    LOG_LEVEL_ENV_VAR,
    get_logger,
    parse_log_level,
    set_global_log_level,
)
from flightpath.types.base import TieBreak

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _find_route(
    path: Path,
    source: str,
    target: str,
    as_json: bool,
    tie_break: Optional[str] = None,
) -> None:
    """Load a route graph, search from ``source`` and print the route to ``target``.

    Exits with status 1 when the file cannot be loaded, a node is unknown, or
    no route exists.
    """
    logger.info(f"Loading route graph from: {path}")
    _start_time = perf_counter()

    try:
        document = load_routes_file(path)
        config = document.search
        if tie_break is not None:
            config = SearchConfig(
                tie_break=TieBreak.from_string(tie_break),
                source_path_single_node=config.source_path_single_node,
            )
        graph = document.graph
        src = graph.get_node(source)
        dst = graph.get_node(target)

        search = ShortestPathSearch(graph, config)
        search.execute(src)
        route = search.get_route(dst)
    except FileNotFoundError:
        logger.error(f"Route file not found: {path}")
        print(f"ERROR: Route file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to compute route: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to compute route: {type(e).__name__}: {e}")
        sys.exit(1)

    logger.info(f"Route search completed in {_format_duration(perf_counter() - _start_time)}")

    if route is None:
        if as_json:
            print(json.dumps({"source": src.id, "target": dst.id, "path": None}))
        else:
            print(f"No path from {src} to {dst}")
        sys.exit(1)

    if as_json:
        print(json.dumps(route.to_dict(), indent=2))
        return

    rows = []
    running = 0
    for hop, node in enumerate(route.nodes):
        edge = route.edges[hop - 1] if hop > 0 else None
        if edge is not None:
            running += edge.weight
        rows.append(
            [
                hop,
                node.id,
                node.name,
                edge.id if edge is not None else "-",
                edge.weight if edge is not None else "-",
                running,
            ]
        )
    print(f"Route {src} -> {dst}")
    print(_format_table(["Hop", "Node", "Name", "Edge", "Weight", "Total"], rows))
    print(f"Total cost: {route.cost}")


def _inspect_graph(path: Path) -> None:
    """Load a route graph and print its nodes and edges."""
    logger.info(f"Inspecting route graph from: {path}")

    try:
        document = load_routes_file(path)
    except FileNotFoundError:
        print(f"ERROR: Route file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect route graph: {e}")
        print("ERROR: Failed to inspect route graph")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    graph = document.graph
    print(f"Nodes: {len(graph.nodes)}")
    print(_format_table(["Id", "Name"], [[n.id, n.name] for n in graph.nodes]))
    print(f"Edges: {len(graph.edges)}")
    print(
        _format_table(
            ["Id", "Source", "Target", "Weight"],
            [
                [e.id, e.source.id, e.destination.id, e.weight]
                for e in graph.edges
            ],
        )
    )
    print(f"Tie break: {document.search.tie_break.name}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flightpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flightpath",
        description="Find shortest flight routes in a route graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,inspect}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Find the shortest route")
    route_parser.add_argument("graph", type=Path, help="Path to route graph YAML")
    route_parser.add_argument("--source", "-s", required=True, help="Source node id")
    route_parser.add_argument("--target", "-t", required=True, help="Target node id")
    route_parser.add_argument(
        "--json", action="store_true", help="Print the route as JSON"
    )
    route_parser.add_argument(
        "--tie-break",
        choices=[e.name.lower() for e in TieBreak],
        default=None,
        help="Override the tie-break among equal-distance nodes",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a route graph and list its contents"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to route graph YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet or (args.command == "route" and args.json):
        # Logs share stdout with the JSON document
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(
            parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR) or logging.INFO)
        )

    if args.command == "route":
        _find_route(
            path=args.graph,
            source=args.source,
            target=args.target,
            as_json=args.json,
            tie_break=args.tie_break,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()

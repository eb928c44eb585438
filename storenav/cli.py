"""Command-line interface for storenav."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import jsonschema
import yaml

from storenav.exceptions import StoreNavError
from storenav.logging import get_logger, level_for_flags, set_global_log_level
from storenav.venue import Venue

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
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
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in all_data[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Examples:
        5.0 -> "5"; 2.5 -> "2.5"; 1234.5678 -> "1,234.568".
    """
    s = f"{float(value):,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _load_venue(path: Path) -> Venue:
    logger.info(f"Loading layout from: {path}")
    venue = Venue.from_file(path)
    for diag in venue.graph.diagnostics:
        logger.warning(f"Layout issue: {diag}")
    return venue


def _inspect_layout(path: Path, detail: bool = False) -> None:
    """Validate a layout file and print its sections and walkways."""
    venue = _load_venue(path)
    summary = venue.summary()
    logger.info("✓ Layout validated and loaded successfully")

    print("\n" + "=" * 60)
    print("STORENAV LAYOUT INSPECTION")
    print("=" * 60)
    if summary["name"]:
        print(f"Venue: {summary['name']}")
    print(f"Sections: {summary['sections']}")
    print(f"Walkways: {summary['edges']}")
    print(f"Isolated sections: {summary['isolated']}")
    print(f"Unresolved connections: {summary['unresolved_connections']}")

    if detail:
        graph = venue.graph
        rows = [
            [s.name, s.color, "" if s.count is None else s.count, len(graph[s.key])]
            for s in venue.registry
        ]
        print("\nSections:")
        print(_format_table(["Name", "Color", "Count", "Degree"], rows))

        edge_rows = [
            [graph.section(a).name, graph.section(b).name, _format_cost(w)]
            for a, b, w in graph.edges()
        ]
        if edge_rows:
            print("\nWalkways:")
            print(_format_table(["From", "To", "Weight"], edge_rows))


def _print_route(route: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(route.to_dict(), indent=2))
        return
    print(" -> ".join(route.names))
    if route.cost is not None:
        print(f"Total weight: {_format_cost(route.cost)}")


def _route(path: Path, start: str, end: str, as_json: bool) -> None:
    venue = _load_venue(path)
    route = venue.shortest_path(start, end)
    _print_route(route, as_json)


def _stops(path: Path, items: List[str], as_json: bool) -> None:
    venue = _load_venue(path)
    route = venue.compose(items)
    _print_route(route, as_json)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``storenav`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Raises:
        SystemExit: With code 1 when a layout cannot be loaded or a query
            cannot be answered.
    """
    parser = argparse.ArgumentParser(
        prog="storenav",
        description="Find routes through a venue layout.",
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
        metavar="{inspect,route,stops}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate a layout and summarize it"
    )
    inspect_parser.add_argument("layout", type=Path, help="Path to layout YAML/JSON")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show section and walkway tables",
    )

    route_parser = subparsers.add_parser(
        "route", help="Find the shortest route between two sections"
    )
    route_parser.add_argument("layout", type=Path, help="Path to layout YAML/JSON")
    route_parser.add_argument("start", help="Start section name")
    route_parser.add_argument("end", help="End section name")

    stops_parser = subparsers.add_parser(
        "stops", help="Resolve a list of stops in the given order"
    )
    stops_parser.add_argument("layout", type=Path, help="Path to layout YAML/JSON")
    stops_parser.add_argument("items", nargs="+", help="Stop names in visiting order")

    for p in (route_parser, stops_parser):
        p.add_argument("--json", action="store_true", help="Print the route as JSON")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        if args.command == "inspect":
            _inspect_layout(args.layout, args.detail)
        elif args.command == "route":
            _route(args.layout, args.start, args.end, args.json)
        elif args.command == "stops":
            _stops(args.layout, args.items, args.json)
    except FileNotFoundError as exc:
        print(f"❌ ERROR: Layout file not found: {exc.filename}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (
        StoreNavError,
        ValueError,
        jsonschema.ValidationError,
        yaml.YAMLError,
    ) as exc:
        logger.error(f"Failed to {args.command}: {exc}")
        print(f"❌ ERROR: {type(exc).__name__}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()

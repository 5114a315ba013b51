from __future__ import annotations

import argparse
import logging
from pathlib import Path

from analysis.neighborhood import UnknownNodeError
from cli.commands import neighbors_command, summary_command
from core.config import LOG_FORMAT, DuplicatePolicy, LoaderConfig, NodeKind
from depgraph.errors import GraphLoadError

logger = logging.getLogger("depvis")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _add_graph_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("graph_path", help="Path to the generator's graph JSON")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in NodeKind],
        default=NodeKind.CLASS.value,
        help="Which graph to load (default: class)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Android dependency graph inspector")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )
    parser.add_argument(
        "--keep-first-duplicates",
        action="store_true",
        help="Keep the first node when an id reappears with different metadata",
    )
    subparsers = parser.add_subparsers(dest="command")

    summary_parser = subparsers.add_parser("summary", help="Print graph statistics")
    _add_graph_arguments(summary_parser)
    summary_parser.add_argument(
        "--top", type=_non_negative_int, default=5, help="Nodes listed per ranking"
    )

    neighbors_parser = subparsers.add_parser(
        "neighbors", help="Show the sub-graph around one or more nodes"
    )
    _add_graph_arguments(neighbors_parser)
    neighbors_parser.add_argument(
        "--node", action="append", required=True, dest="nodes", help="Node id (repeatable)"
    )
    for direction in ("inbound", "outbound"):
        neighbors_parser.add_argument(
            f"--{direction}",
            type=_non_negative_int,
            default=1,
            help=f"{direction.capitalize()} depth",
        )
    neighbors_parser.add_argument("-o", "--output", help="Write the sub-graph JSON here")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    config = LoaderConfig(
        duplicate_policy=(
            DuplicatePolicy.KEEP_FIRST if args.keep_first_duplicates else DuplicatePolicy.REJECT
        )
    )

    try:
        if args.command == "summary":
            return summary_command(
                Path(args.graph_path), NodeKind(args.kind), config, top=args.top
            )
        if args.command == "neighbors":
            return neighbors_command(
                Path(args.graph_path),
                NodeKind(args.kind),
                config,
                args.nodes,
                inbound_depth=args.inbound,
                outbound_depth=args.outbound,
                output_path=Path(args.output) if args.output else None,
            )
    except (GraphLoadError, UnknownNodeError, OSError) as exc:
        logger.error("%s", exc)
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

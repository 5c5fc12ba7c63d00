"""CLI entry point for tsalign.

Enables ``python -m tsalign <command>`` usage.

Subcommands:
    align    - Align series from a JSON request (file or stdin), print the table.
    inspect  - Report on the series of a JSON request without aligning.
    describe - Machine-readable API schema (JSON to stdout).
    version  - Print tsalign version.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from tsalign.contracts.request import AlignRequest
from tsalign.core.config import ExtrapolationStrategy, InterpolationStrategy
from tsalign.core.errors import TSAlignError

logger = logging.getLogger("tsalign")


def _read_request(path: str) -> AlignRequest:
    """Load a request from ``path`` ('-' for stdin).

    A bare JSON list is taken as the list of series with default options.
    """
    if path == "-":
        payload: Any = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    if isinstance(payload, list):
        payload = {"series": payload}
    return AlignRequest.model_validate(payload)


def _cmd_align(args: argparse.Namespace) -> int:
    """Align the request's series and write the table to stdout."""
    from tsalign.series.alignment import align_series, table_to_frame

    request = _read_request(args.input)
    overrides = {
        key: value
        for key, value in {
            "interpolation": args.interpolation,
            "extrapolation_before": args.extrapolation_before,
            "extrapolation_after": args.extrapolation_after,
            "sort_input_series": args.sort,
        }.items()
        if value is not None
    }
    config = request.options.to_config()
    if overrides:
        config = config.replace(**overrides)

    table = align_series(request.series, config)
    logger.info("Aligned %d series into %d rows", len(request.series), len(table))

    if args.format == "csv":
        names = request.names or [f"series_{idx}" for idx in range(len(request.series))]
        table_to_frame(table, names).to_csv(sys.stdout, index=False)
    else:
        json.dump(table, sys.stdout)
        print()
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Print a diagnostics report for the request's series."""
    from tsalign.inspect import inspect_series

    request = _read_request(args.input)
    report = inspect_series(request.series)
    if args.json:
        json.dump(report.to_dict(), sys.stdout, indent=2)
        print()
    else:
        print(report)
    return 0


def _cmd_describe() -> int:
    """Print machine-readable API schema as JSON."""
    from tsalign.discovery import describe

    info = describe()
    json.dump(info, sys.stdout, indent=2, default=str)
    print()  # trailing newline
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import tsalign

    print(tsalign.__version__)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsalign",
        description="tsalign - Multi-series time alignment with per-series gap filling",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    align = subparsers.add_parser("align", help="Align series from a JSON request")
    align.add_argument("input", nargs="?", default="-", help="Request file ('-' for stdin)")
    align.add_argument(
        "--interpolation",
        choices=[s.value for s in InterpolationStrategy],
        help="Override the request's interpolation strategy",
    )
    align.add_argument(
        "--extrapolation-before",
        choices=[s.value for s in ExtrapolationStrategy],
        help="Override the request's extrapolation before the first known value",
    )
    align.add_argument(
        "--extrapolation-after",
        choices=[s.value for s in ExtrapolationStrategy],
        help="Override the request's extrapolation after the last known value",
    )
    sort_group = align.add_mutually_exclusive_group()
    sort_group.add_argument("--sort", dest="sort", action="store_true", default=None)
    sort_group.add_argument("--no-sort", dest="sort", action="store_false")
    align.add_argument("--format", choices=["json", "csv"], default="json")

    inspect = subparsers.add_parser("inspect", help="Diagnose the series of a JSON request")
    inspect.add_argument("input", nargs="?", default="-", help="Request file ('-' for stdin)")
    inspect.add_argument("--json", action="store_true", help="Emit the report as JSON")

    subparsers.add_parser("describe", help="Machine-readable API schema (JSON)")
    subparsers.add_parser("version", help="Print version")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "align":
            return _cmd_align(args)
        elif args.command == "inspect":
            return _cmd_inspect(args)
        elif args.command == "describe":
            return _cmd_describe()
        elif args.command == "version":
            return _cmd_version()
        else:
            parser.print_help()
            return 0
    except (TSAlignError, ValidationError, json.JSONDecodeError, OSError) as exc:
        print(f"tsalign: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

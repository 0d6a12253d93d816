"""Command-line entry point.

Usage
-----
    pyclimate data_tn.tdv data_wa.tdv
    pyclimate --json --time-zone America/Chicago data_tn.tdv
    cat data_tn.tdv | pyclimate -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pyclimate import __version__
from pyclimate.config import ClimateConfig
from pyclimate.exceptions import ClimateConfigError, DecodeError, SourceUnavailableError
from pyclimate.ingestion.driver import ingest_files
from pyclimate.report import render_report, report_as_dict

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyclimate",
        description="Summarize tab-delimited NOAA climate observations per state.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="TDV file(s) to analyze ('-' for stdin)")
    parser.add_argument("--strict", action="store_true", default=None, help="Fail on the first malformed line")
    parser.add_argument("--json", action="store_true", help="Emit the summary as JSON")
    parser.add_argument("--time-zone", default=None, help="IANA time zone for report timestamps (default: local)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    overrides: dict[str, object] = {}
    if args.strict is not None:
        overrides["strict"] = args.strict
    if args.time_zone is not None:
        overrides["time_zone"] = args.time_zone
    try:
        config = ClimateConfig.from_env(**overrides)
    except ClimateConfigError as exc:
        parser.error(str(exc))

    # JSON output owns stdout; progress lines move to stderr.
    progress = sys.stderr if args.json else sys.stdout

    def _on_open(name: str) -> None:
        print(f"Opening file: {name}", file=progress)

    def _on_missing(exc: SourceUnavailableError) -> None:
        print(f"ERROR: {exc}", file=progress)

    try:
        summary = ingest_files(args.files, config=config, on_open=_on_open, on_missing=_on_missing)
    except DecodeError as exc:
        _logger.error("Aborting on malformed input: %s", exc)
        return 1

    if summary.lines_skipped:
        _logger.warning("Skipped %d malformed line(s)", summary.lines_skipped)

    store = summary.store
    if store.is_empty:
        return 0

    if args.json:
        print(json.dumps(report_as_dict(store), indent=2))
    else:
        sys.stdout.write(render_report(store, time_zone=config.zone))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

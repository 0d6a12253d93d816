"""Ingestion driver.

Reads raw lines, decodes each one and folds the result into an
:class:`~pyclimate.state.store.AggregateStore`. Decoding always completes
before the store is touched, so a bad line never leaves an entry
half-updated.

Driving several files against one store is equivalent to concatenating
their lines: file boundaries carry no meaning for the aggregates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pyclimate.config import ClimateConfig
from pyclimate.exceptions import DecodeError, SourceUnavailableError
from pyclimate.ingestion.decode import decode_line
from pyclimate.ingestion.sources import open_lines
from pyclimate.state.store import AggregateStore

_logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "<stream>"


@dataclass
class IngestStats:
    """Line accounting for one ingested source."""

    source: str = DEFAULT_SOURCE
    lines_read: int = 0
    records_applied: int = 0
    lines_skipped: int = 0
    errors: list[str] = field(default_factory=list)
    read_error: str | None = None


@dataclass
class IngestSummary:
    """Result of ingesting several sources into one store."""

    store: AggregateStore
    files: list[IngestStats] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def records_applied(self) -> int:
        return sum(stats.records_applied for stats in self.files)

    @property
    def lines_skipped(self) -> int:
        return sum(stats.lines_skipped for stats in self.files)


def _fold_lines(
    lines: Iterable[str],
    store: AggregateStore,
    stats: IngestStats,
    *,
    strict: bool,
    max_reported_errors: int,
) -> None:
    for line_number, line in enumerate(lines, start=1):
        stats.lines_read += 1
        try:
            observation = decode_line(line, line_number=line_number, source=stats.source)
        except DecodeError as exc:
            if strict:
                raise
            stats.lines_skipped += 1
            if len(stats.errors) < max_reported_errors:
                stats.errors.append(str(exc))
            _logger.warning("Skipping line: %s (%r)", exc, exc.line)
            continue

        store.apply(observation)
        stats.records_applied += 1


def ingest(
    lines: Iterable[str],
    store: AggregateStore,
    *,
    source: str = DEFAULT_SOURCE,
    strict: bool = False,
    max_reported_errors: int = 20,
) -> IngestStats:
    """Decode *lines* in order and fold every valid record into *store*.

    Lines that fail to decode are logged and skipped unless *strict* is set,
    in which case the first :class:`DecodeError` propagates. Records applied
    before the failure stay applied.
    """
    stats = IngestStats(source=source)
    _fold_lines(lines, store, stats, strict=strict, max_reported_errors=max_reported_errors)

    _logger.debug(
        "Ingested %s: %d lines, %d records, %d skipped",
        source,
        stats.lines_read,
        stats.records_applied,
        stats.lines_skipped,
    )
    return stats


def ingest_files(
    paths: Iterable[str | Path],
    store: AggregateStore | None = None,
    *,
    config: ClimateConfig | None = None,
    on_open: Callable[[str], None] | None = None,
    on_missing: Callable[[SourceUnavailableError], None] | None = None,
) -> IngestSummary:
    """Ingest each path in order into a single shared store.

    Parameters
    ----------
    store
        Store to fold records into. A fresh one is created when omitted.
    on_open
        Called with the path name once a source has been opened.
    on_missing
        Called with the error for a source that cannot be opened, or that
        fails while being read. Processing continues with the next path.
        Only sources that could not be opened are listed in
        ``IngestSummary.missing``; a source that fails mid-read keeps its
        partial stats in ``IngestSummary.files`` with ``read_error`` set.
    """
    config = config or ClimateConfig()
    summary = IngestSummary(store=store if store is not None else AggregateStore())

    for path in paths:
        name = str(path)
        try:
            lines = open_lines(name, encoding=config.encoding)
        except SourceUnavailableError as exc:
            _logger.debug("Line source unavailable: %s", exc)
            summary.missing.append(name)
            if on_missing is not None:
                on_missing(exc)
            continue

        if on_open is not None:
            on_open(name)
        stats = IngestStats(source=name)
        summary.files.append(stats)
        try:
            _fold_lines(
                lines,
                summary.store,
                stats,
                strict=config.strict,
                max_reported_errors=config.max_reported_errors,
            )
        except SourceUnavailableError as exc:
            _logger.warning("Stopped reading %s after %d lines: %s", name, stats.lines_read, exc)
            stats.read_error = str(exc)
            if on_missing is not None:
                on_missing(exc)

    return summary

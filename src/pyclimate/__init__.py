"""pyclimate - streaming per-state summaries of NOAA climate observations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyclimate")
except PackageNotFoundError:
    __version__ = "0+local"
from pyclimate.config import ClimateConfig
from pyclimate.exceptions import (
    ClimateConfigError,
    ClimateError,
    DecodeError,
    MalformedLineError,
    NumericParseError,
    SourceUnavailableError,
)
from pyclimate.ingestion.decode import decode_line
from pyclimate.ingestion.driver import IngestStats, IngestSummary, ingest, ingest_files
from pyclimate.ingestion.normalize import kelvin_to_fahrenheit
from pyclimate.ingestion.sources import open_lines
from pyclimate.models import Observation
from pyclimate.report import render_report
from pyclimate.state.entry import AggregateEntry, RunningSum
from pyclimate.state.store import AggregateStore

__all__ = [
    "__version__",
    "AggregateEntry",
    "AggregateStore",
    "ClimateConfig",
    "ClimateConfigError",
    "ClimateError",
    "DecodeError",
    "IngestStats",
    "IngestSummary",
    "MalformedLineError",
    "NumericParseError",
    "Observation",
    "RunningSum",
    "SourceUnavailableError",
    "decode_line",
    "ingest",
    "ingest_files",
    "kelvin_to_fahrenheit",
    "open_lines",
    "render_report",
]

"""Record decoder for the tab-delimited observation format.

Each line carries nine tab-separated fields::

    state_code  timestamp_ms  geohash  humidity  snow  cloud_cover  lightning  pressure_pa  surface_temp_k

The geohash is discarded, the timestamp is truncated to whole seconds and
the Kelvin surface temperature is converted to Fahrenheit. Fields past the
ninth are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from pyclimate.exceptions import MalformedLineError, NumericParseError
from pyclimate.ingestion.normalize import (
    kelvin_to_fahrenheit,
    ms_to_seconds,
    parse_float,
    parse_int,
    truncate_for_log,
)
from pyclimate.models.observation import Observation

FIELD_COUNT = 9
FIELD_SEPARATOR = "\t"

# Bytes the source could not decode, kept as lone surrogates.
_UNDECODABLE_RE = re.compile("[\udc80-\udcff]")

# (field index, observation attribute, parser). Index 0 (code) and
# index 2 (geohash) carry no number and are handled separately.
_NUMERIC_FIELDS: tuple[tuple[int, str, Callable[[str], Any]], ...] = (
    (1, "timestamp", parse_int),
    (3, "humidity", parse_float),
    (4, "snow", parse_int),
    (5, "cloud_cover", parse_float),
    (6, "lightning", parse_int),
    (7, "pressure", parse_float),
    (8, "temperature", parse_float),
)


def split_fields(line: str) -> list[str]:
    """Split a raw line into its fields, dropping the line terminator."""
    return line.rstrip("\r\n").split(FIELD_SEPARATOR)


def decode_line(
    line: str,
    *,
    line_number: int | None = None,
    source: str | None = None,
) -> Observation:
    """Decode one raw line into an :class:`Observation`.

    Raises
    ------
    MalformedLineError
        Fewer than nine fields, or an empty state code, or
        bytes that could not be decoded.
    NumericParseError
        A numeric field is unparseable or non-finite.
    """
    fields = split_fields(line)
    context: dict[str, Any] = {
        "line_number": line_number,
        "source": source,
        "line": truncate_for_log(line),
    }

    if len(fields) < FIELD_COUNT:
        raise MalformedLineError(f"expected {FIELD_COUNT} fields, got {len(fields)}", **context)

    if _UNDECODABLE_RE.search(line) is not None:
        raise MalformedLineError("undecodable bytes in line", **context)

    code = fields[0]
    if not code.strip():
        raise MalformedLineError("empty state code", **context)

    values: dict[str, Any] = {"code": code}
    for index, name, parser in _NUMERIC_FIELDS:
        raw = fields[index]
        try:
            values[name] = parser(raw)
        except ValueError as exc:
            raise NumericParseError(f"invalid {name} {raw!r}: {exc}", field=name, **context) from exc

    values["timestamp"] = ms_to_seconds(values["timestamp"])
    values["temperature"] = kelvin_to_fahrenheit(values["temperature"])

    return Observation(**values)

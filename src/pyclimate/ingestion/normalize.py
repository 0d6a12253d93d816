"""Normalization helpers.

Centralizes strict numeric parsing and unit conversion for the
tab-delimited observation format. Every parser raises :class:`ValueError`
on bad input; the decoder turns that into a field-tagged decode error.
"""

from __future__ import annotations

import math
import re

# Kelvin -> Fahrenheit: F = K * 1.8 - 459.67
_KELVIN_SCALE = 1.8
_KELVIN_OFFSET_F = 459.67

_MS_PER_SECOND = 1000

# Plain ASCII decimal notation only: no underscores, no non-ASCII digits,
# no "nan"/"inf" spellings.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _numeric_text(text: str) -> str:
    value = text.strip()
    if not value:
        raise ValueError("empty numeric field")
    if _NUMBER_RE.fullmatch(value) is None:
        raise ValueError(f"not a number {value!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a finite float from *text*.

    NaN and infinities are rejected.
    """
    value = _numeric_text(text)
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value {value!r}")
    return result


def parse_int(text: str) -> int:
    """Parse an integer from *text*, truncating decimal notation toward zero.

    Flag columns in the NOAA extracts are written as ``0.0``/``1.0``, so
    ``"1.0"`` parses as ``1`` and ``"1.9"`` as ``1``. Anything that is not a
    plain integer goes through :func:`parse_float`, so exponents are bounded
    by the float range.
    """
    value = _numeric_text(text)
    if _INTEGER_RE.fullmatch(value) is not None:
        return int(value)
    return int(parse_float(value))


def ms_to_seconds(milliseconds: int) -> int:
    """Drop sub-second precision from an epoch-millisecond timestamp.

    Truncates toward zero rather than rounding.
    """
    if milliseconds < 0:
        return -(-milliseconds // _MS_PER_SECOND)
    return milliseconds // _MS_PER_SECOND


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return kelvin * _KELVIN_SCALE - _KELVIN_OFFSET_F


def truncate_for_log(text: str, *, max_length: int = 120) -> str:
    """Return *text* without its line terminator, shortened for log output."""
    stripped = text.rstrip("\r\n")
    if len(stripped) > max_length:
        return f"{stripped[:max_length]}…<truncated>"
    return stripped

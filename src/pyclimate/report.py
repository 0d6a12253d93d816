"""Report rendering.

Reads a finished :class:`~pyclimate.state.store.AggregateStore` and never
mutates it. The text layout matches the legacy ``climate`` tool so existing
consumers of its output keep working.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Any

from pyclimate.state.entry import AggregateEntry
from pyclimate.state.store import AggregateStore


def format_timestamp(timestamp: int, time_zone: tzinfo | None = None) -> str:
    """Render epoch seconds ``ctime``-style, e.g. ``Mon Aug  3 11:00:00 2015``.

    ``None`` renders in the local time zone.
    """
    try:
        moment = datetime.fromtimestamp(timestamp, tz=time_zone)
    except (OverflowError, OSError, ValueError):
        return f"<invalid timestamp {timestamp}>"
    return moment.ctime()


def _iso_utc(timestamp: int) -> str | None:
    try:
        return datetime.fromtimestamp(timestamp, tz=UTC).isoformat()
    except (OverflowError, OSError, ValueError):
        return None


def render_entry(entry: AggregateEntry, time_zone: tzinfo | None = None) -> list[str]:
    return [
        f"-- State: {entry.code} --",
        f"Number of Records: {entry.record_count}",
        f"Average Humidity: {entry.average_humidity:.1f}%",
        f"Average Temperature: {entry.average_temperature:.1f}F",
        f"Max Temperature: {entry.max_temperature:.1f}F",
        f"Max Temperature on: {format_timestamp(entry.max_temperature_time, time_zone)}",
        f"Min Temperature: {entry.min_temperature:.1f}F",
        f"Min Temperature on: {format_timestamp(entry.min_temperature_time, time_zone)}",
        f"Lightning Strikes: {entry.lightning_count}",
        f"Records with Snow Cover: {entry.snow_count}",
        f"Average Cloud Cover: {entry.average_cloud_cover:.1f}%",
    ]


def render_report(store: AggregateStore, *, time_zone: tzinfo | None = None) -> str:
    """Render the per-state text report, or ``""`` for an empty store."""
    if store.is_empty:
        return ""

    # Trailing space after the last code is part of the legacy format.
    lines = ["States found: " + "".join(f"{code} " for code in store)]
    for entry in store.entries():
        lines.extend(render_entry(entry, time_zone))
    return "\n".join(lines) + "\n"


def report_as_dict(store: AggregateStore) -> dict[str, Any]:
    """JSON-serializable summary of every state, in discovery order."""
    states: dict[str, Any] = {}
    for entry in store.entries():
        states[entry.code] = {
            "record_count": entry.record_count,
            "temperature_sum": entry.temperature_sum,
            "humidity_sum": entry.humidity_sum,
            "cloud_cover_sum": entry.cloud_cover_sum,
            "average_humidity": entry.average_humidity,
            "average_temperature": entry.average_temperature,
            "average_cloud_cover": entry.average_cloud_cover,
            "max_temperature": entry.max_temperature,
            "max_temperature_time": entry.max_temperature_time,
            "max_temperature_at": _iso_utc(entry.max_temperature_time),
            "min_temperature": entry.min_temperature,
            "min_temperature_time": entry.min_temperature_time,
            "min_temperature_at": _iso_utc(entry.min_temperature_time),
            "lightning_strikes": entry.lightning_count,
            "snow_records": entry.snow_count,
        }
    return {"states_found": store.codes(), "states": states}

"""Run configuration for pyclimate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pyclimate.exceptions import ClimateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def resolve_time_zone(name: str | None) -> ZoneInfo | None:
    """Return the :class:`ZoneInfo` for *name*, or ``None`` for local time.

    Raises :class:`ClimateConfigError` for unknown zone names.
    """
    if name is None or not name.strip():
        return None
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ClimateConfigError(f"unknown time zone: {name!r}") from exc


@dataclasses.dataclass(frozen=True)
class ClimateConfig:
    """Ingestion and reporting configuration.

    Parameters
    ----------
    strict : bool
        Raise on the first line that fails to decode instead of skipping it.
    time_zone : str or None
        IANA time zone used to render extreme-temperature timestamps in the
        report. ``None`` renders local time, like ``ctime(3)``.
    encoding : str
        Text encoding of the input files.
    max_reported_errors : int
        How many decode error messages are kept per file in the ingestion
        stats. Skipped lines are always counted; this only bounds the
        retained messages.
    """

    strict: bool = False
    time_zone: str | None = None
    encoding: str = "utf-8"
    max_reported_errors: int = 20

    def __post_init__(self) -> None:
        if self.max_reported_errors < 0:
            raise ClimateConfigError(f"max_reported_errors must be >= 0, got {self.max_reported_errors}")
        resolve_time_zone(self.time_zone)

    @property
    def zone(self) -> ZoneInfo | None:
        return resolve_time_zone(self.time_zone)

    @classmethod
    def from_env(cls, **overrides: Any) -> ClimateConfig:
        """Create configuration from ``CLIMATE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ClimateConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "strict" not in overrides:
            config_kwargs["strict"] = _env_bool(env.get("CLIMATE_STRICT"), False)

        tz_env = env.get("CLIMATE_TIME_ZONE")
        if tz_env is not None:
            config_kwargs["time_zone"] = tz_env or None

        encoding_env = env.get("CLIMATE_ENCODING")
        if encoding_env:
            config_kwargs["encoding"] = encoding_env

        errors_env = env.get("CLIMATE_MAX_REPORTED_ERRORS")
        if errors_env is not None and "max_reported_errors" not in overrides:
            try:
                config_kwargs["max_reported_errors"] = int(errors_env)
            except ValueError as exc:
                raise ClimateConfigError(f"CLIMATE_MAX_REPORTED_ERRORS must be an integer, got {errors_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

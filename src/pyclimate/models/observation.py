"""Decoded observation model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Observation(BaseModel):
    """One decoded climate observation.

    Produced by :func:`pyclimate.ingestion.decode.decode_line` and consumed
    immediately by the aggregate store; observations are never buffered.

    Parameters
    ----------
    code : str
        State code, copied verbatim from the record (e.g. ``"TN"``).
    timestamp : int
        Observation time in epoch seconds.
    humidity : float
        Relative humidity, nominally 0-100 %.
    snow : int
        Snow cover flag. Summed as-is by the store, so a value of ``2``
        counts twice.
    cloud_cover : float
        Cloud cover, nominally 0-100 %.
    lightning : int
        Lightning strike flag, summed like ``snow``.
    pressure : float
        Surface pressure in Pa. Not aggregated.
    temperature : float
        Surface temperature in °F.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    code: str = Field(..., description="State code")
    timestamp: int = Field(..., description="Epoch seconds")
    humidity: float
    snow: int = 0
    cloud_cover: float
    lightning: int = 0
    pressure: float = 0.0
    temperature: float = Field(..., description="Surface temperature (°F)")

    @field_validator("code")
    @classmethod
    def _require_code(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("code must be non-empty")
        return value

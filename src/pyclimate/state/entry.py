"""Per-state running statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyclimate.models.observation import Observation


class RunningSum(BaseModel):
    """Compensated (Neumaier) floating-point accumulator.

    Keeps the rounding error of a long sequence of additions in a separate
    term, so averages over tens of thousands of records do not drift.
    """

    model_config = ConfigDict(extra="forbid")

    total: float = 0.0
    compensation: float = 0.0

    @classmethod
    def of(cls, value: float) -> RunningSum:
        return cls(total=value)

    def add(self, value: float) -> None:
        running = self.total + value
        if abs(self.total) >= abs(value):
            self.compensation += (self.total - running) + value
        else:
            self.compensation += (value - running) + self.total
        self.total = running

    @property
    def value(self) -> float:
        return self.total + self.compensation


class AggregateEntry(BaseModel):
    """Running statistics for one state code.

    ``max_temperature_time`` is always the timestamp of the observation that
    holds ``max_temperature`` (likewise for the minimum). Extremes only move
    on a strictly greater (or lesser) temperature, so on ties the earliest
    observation keeps the title.
    """

    model_config = ConfigDict(extra="forbid")

    code: str
    record_count: int = Field(1, ge=1)
    temperature_total: RunningSum
    humidity_total: RunningSum
    cloud_cover_total: RunningSum
    snow_count: int = 0
    lightning_count: int = 0
    max_temperature: float
    min_temperature: float
    max_temperature_time: int
    min_temperature_time: int

    @classmethod
    def from_observation(cls, observation: Observation) -> AggregateEntry:
        """Seed a new entry entirely from its first observation."""
        return cls(
            code=observation.code,
            record_count=1,
            temperature_total=RunningSum.of(observation.temperature),
            humidity_total=RunningSum.of(observation.humidity),
            cloud_cover_total=RunningSum.of(observation.cloud_cover),
            snow_count=observation.snow,
            lightning_count=observation.lightning,
            max_temperature=observation.temperature,
            min_temperature=observation.temperature,
            max_temperature_time=observation.timestamp,
            min_temperature_time=observation.timestamp,
        )

    def update(self, observation: Observation) -> None:
        """Fold one more observation into the running statistics."""
        self.record_count += 1
        self.humidity_total.add(observation.humidity)
        self.cloud_cover_total.add(observation.cloud_cover)
        self.temperature_total.add(observation.temperature)
        self.snow_count += observation.snow
        self.lightning_count += observation.lightning

        if observation.temperature > self.max_temperature:
            self.max_temperature = observation.temperature
            self.max_temperature_time = observation.timestamp
        if observation.temperature < self.min_temperature:
            self.min_temperature = observation.temperature
            self.min_temperature_time = observation.timestamp

    @property
    def temperature_sum(self) -> float:
        return self.temperature_total.value

    @property
    def humidity_sum(self) -> float:
        return self.humidity_total.value

    @property
    def cloud_cover_sum(self) -> float:
        return self.cloud_cover_total.value

    @property
    def average_temperature(self) -> float:
        return self.temperature_sum / self.record_count

    @property
    def average_humidity(self) -> float:
        return self.humidity_sum / self.record_count

    @property
    def average_cloud_cover(self) -> float:
        return self.cloud_cover_sum / self.record_count

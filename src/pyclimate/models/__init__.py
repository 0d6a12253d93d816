"""Data models for decoded observations."""

from pyclimate.models.observation import Observation

__all__ = [
    "Observation",
]

"""In-memory aggregate store.

This is the only component allowed to create or mutate aggregate entries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pyclimate.models.observation import Observation
from pyclimate.state.entry import AggregateEntry

_logger = logging.getLogger(__name__)


class AggregateStore:
    """Ordered mapping from state code to :class:`AggregateEntry`.

    Iteration yields codes in first-seen order across everything applied
    to the store, including across files. Entries are never removed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, AggregateEntry] = {}

    def apply(self, observation: Observation) -> AggregateEntry:
        """Fold one observation into the store and return its entry.

        Creates the entry on first sight of the code, updates it otherwise.
        Every call counts as one record, so applying the same observation
        twice counts it twice.
        """
        entry = self._entries.get(observation.code)
        if entry is None:
            entry = AggregateEntry.from_observation(observation)
            self._entries[observation.code] = entry
            _logger.debug("Discovered state code %s", observation.code)
            return entry

        entry.update(observation)
        return entry

    def get(self, code: str) -> AggregateEntry | None:
        return self._entries.get(code)

    def __getitem__(self, code: str) -> AggregateEntry:
        return self._entries[code]

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def codes(self) -> list[str]:
        """State codes in discovery order."""
        return list(self._entries)

    def entries(self) -> list[AggregateEntry]:
        """Entries in discovery order."""
        return list(self._entries.values())

    @property
    def record_count(self) -> int:
        return sum(entry.record_count for entry in self._entries.values())

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Plain-dict copy of every entry, keyed by code in discovery order."""
        return {code: entry.model_dump() for code, entry in self._entries.items()}

"""Ingestion layer.

This package turns raw tab-delimited lines into decoded observations and
folds them into the aggregate store.
"""

__all__: list[str] = []

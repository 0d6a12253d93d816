"""State/store layer.

This package owns the per-state running statistics that every ingested
observation is folded into.
"""

"""Saved filter sets."""

from .store import FilterStore, StoredFilterSets

__all__ = ["FilterStore", "StoredFilterSets"]

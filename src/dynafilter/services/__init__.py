"""Application services."""

from .filter_builder import FilterBuilder
from .filter_service import FilterResult, FilterService

__all__ = ["FilterBuilder", "FilterResult", "FilterService"]

"""Composition root: the single place where services are assembled.

Call ``build_filter_service()`` or ``build_filter_builder()`` to get a
fully-constructed object. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

import logging
from typing import Any

from .config.runtime import FilterSettings, get_settings
from .datasets.employees import EMPLOYEE_FIELDS, load_records, sample_employees
from .modules.persistence.store import FilterStore
from .services.filter_builder import FilterBuilder
from .services.filter_service import FilterService

_LOGGER = logging.getLogger("dynafilter.services")


def build_filter_store(settings: FilterSettings | None = None) -> FilterStore:
    settings = settings or get_settings()
    return FilterStore(settings.filters_path)


def build_filter_service(settings: FilterSettings | None = None) -> FilterService:
    """Construct a FilterService over the employee schema with the configured store."""
    settings = settings or get_settings()
    return FilterService(
        schema=EMPLOYEE_FIELDS,
        store=build_filter_store(settings),
        logger=_LOGGER,
    )


def build_filter_builder(settings: FilterSettings | None = None) -> FilterBuilder:
    """Construct a builder session seeded with the default saved filter set."""
    store = build_filter_store(settings)
    return FilterBuilder(schema=EMPLOYEE_FIELDS, conditions=store.load(), logger=_LOGGER)


def load_dataset(settings: FilterSettings | None = None, path: str | None = None) -> list[dict[str, Any]]:
    """Records from ``path``, else the configured dataset, else the bundled sample."""
    settings = settings or get_settings()
    source = path or settings.dataset_path
    if source:
        return load_records(source)
    return sample_employees()

"""Pydantic-based runtime settings.

Loads from environment variables prefixed ``DYNAFILTER_`` (with optional .env file).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class FilterSettings(BaseSettings):
    """All configuration for the CLI and MCP surfaces, validated at startup."""

    model_config = {
        "env_prefix": "DYNAFILTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Storage ---
    filters_path: str = Field(
        default="data/filters.json",
        description="JSON file holding saved filter sets",
    )
    dataset_path: str | None = Field(
        default=None,
        description="JSON array of records to filter; the bundled employee sample when unset",
    )

    # --- Presentation ---
    default_sort_field: str = Field(default="name", description="Sort column when none is given")
    default_sort_order: Literal["asc", "desc"] = Field(default="asc", description="Default sort direction")

    # --- Runtime ---
    log_level: str = Field(default="INFO", description="stdlib logging level name")
    server_name: str = Field(default="dynafilter", description="MCP server name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> FilterSettings:
    """Return the singleton FilterSettings (cached after first call)."""
    return FilterSettings()

"""JSON-file store for saved filter condition sets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ...domain.filters import FilterCondition

_LOGGER = logging.getLogger(__name__)

STORE_VERSION = 1
DEFAULT_SET_NAME = "default"


class StoredFilterSets(BaseModel):
    """On-disk document: named, ordered condition lists."""

    version: int = Field(default=STORE_VERSION)
    filter_sets: dict[str, list[FilterCondition]] = Field(default_factory=dict)


class FilterStore:
    """Saves and restores condition sets by name.

    Loading never raises: a missing file is empty, and an unreadable or
    invalid file is logged and treated as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_parent_dir(self) -> None:
        if self._path.parent.exists():
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> StoredFilterSets:
        if not self._path.exists():
            return StoredFilterSets()
        try:
            return StoredFilterSets.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as error:
            _LOGGER.error(
                "filter_store_load_failed",
                extra={"path": str(self._path), "error": str(error)},
            )
            return StoredFilterSets()

    def _write(self, document: StoredFilterSets) -> None:
        self._ensure_parent_dir()
        self._path.write_text(document.model_dump_json(indent=2), encoding="utf-8")

    def save(self, conditions: Sequence[FilterCondition], name: str = DEFAULT_SET_NAME) -> None:
        document = self._read()
        document.filter_sets[name] = [c.model_copy(deep=True) for c in conditions]
        self._write(document)

    def load(self, name: str = DEFAULT_SET_NAME) -> list[FilterCondition]:
        return list(self._read().filter_sets.get(name, []))

    def clear(self, name: str = DEFAULT_SET_NAME) -> bool:
        """Remove a saved set; returns False if there was nothing to remove."""
        document = self._read()
        if name not in document.filter_sets:
            return False
        del document.filter_sets[name]
        self._write(document)
        return True

    def names(self) -> list[str]:
        return sorted(self._read().filter_sets)

"""FilterService: validate, filter and sort a dataset in one call."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from ..domain.fields import FieldDefinition, field_index
from ..domain.filter_engine import apply_filters
from ..domain.filters import FilterCondition
from ..domain.sorting import SortSpec, sort_records
from ..domain.validator import FilterValidationError, ValidationResult, validate_conditions
from ..modules.persistence.store import FilterStore


class FilterResult(BaseModel):
    """Outcome of FilterService.apply."""

    applied: bool = Field(..., description="False when validation refused the run")
    records: list[Any] = Field(default_factory=list, description="Matching records, sorted if requested")
    total_count: int = Field(default=0, description="Size of the input dataset")
    matched_count: int = Field(default=0, description="Number of matching records")
    errors: list[FilterValidationError] = Field(default_factory=list)


class FilterService:
    """Orchestrates validate -> filter -> sort for one dataset schema."""

    def __init__(
        self,
        schema: Sequence[FieldDefinition],
        store: FilterStore | None = None,
        logger: Any = None,
    ) -> None:
        self._schema = tuple(schema)
        self._fields = field_index(self._schema)
        self._store = store
        self._logger = logger

    @property
    def schema(self) -> tuple[FieldDefinition, ...]:
        return self._schema

    def validate(self, conditions: Sequence[FilterCondition]) -> ValidationResult:
        return validate_conditions(conditions, self._fields)

    def apply(
        self,
        records: Sequence[Any],
        conditions: Sequence[FilterCondition],
        sort: SortSpec | None = None,
    ) -> FilterResult:
        """Filter ``records``; refused (nothing returned) while any condition is invalid."""
        validation = self.validate(conditions)
        if not validation.is_valid:
            if self._logger:
                self._logger.info(
                    "filter_refused",
                    extra={"error_count": len(validation.errors)},
                )
            return FilterResult(
                applied=False,
                total_count=len(records),
                errors=validation.errors,
            )

        matched = apply_filters(records, conditions)
        if sort is not None:
            matched = sort_records(matched, sort.field, sort.order)

        if self._logger:
            self._logger.info(
                "filter_applied",
                extra={
                    "condition_count": len(conditions),
                    "total_count": len(records),
                    "matched_count": len(matched),
                },
            )
        return FilterResult(
            applied=True,
            records=matched,
            total_count=len(records),
            matched_count=len(matched),
        )

    # ------------------------------------------------------------------
    # Saved filter sets
    # ------------------------------------------------------------------

    def save(self, conditions: Sequence[FilterCondition], name: str = "default") -> None:
        self._require_store().save(conditions, name)

    def load(self, name: str = "default") -> list[FilterCondition]:
        return self._require_store().load(name)

    def clear(self, name: str = "default") -> bool:
        return self._require_store().clear(name)

    def saved_names(self) -> list[str]:
        return self._require_store().names()

    def _require_store(self) -> FilterStore:
        if self._store is None:
            raise RuntimeError("FilterService was built without a FilterStore")
        return self._store

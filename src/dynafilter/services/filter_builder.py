"""FilterBuilder: session-scoped state for a user editing filter rows.

Holds the draft conditions being edited, the last validation errors, and the
conditions most recently applied. One instance per session; nothing here is
shared between sessions.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..domain.fields import FieldDefinition, field_index
from ..domain.filters import FilterCondition, FilterValue, default_value
from ..domain.operators import default_operator
from ..domain.validator import ValidationResult, validate_conditions
from ..ports.id_gen import ConditionIdProvider, TimestampConditionIdProvider


class FilterBuilder:
    """Add, edit, remove, validate and apply filter conditions."""

    def __init__(
        self,
        schema: Sequence[FieldDefinition],
        conditions: Iterable[FilterCondition] = (),
        id_provider: ConditionIdProvider | None = None,
        logger: Any = None,
    ) -> None:
        if not schema:
            raise ValueError("FilterBuilder requires at least one field definition")
        self._schema = tuple(schema)
        self._fields = field_index(self._schema)
        self._ids = id_provider or TimestampConditionIdProvider()
        self._logger = logger
        self._conditions: list[FilterCondition] = [c.model_copy(deep=True) for c in conditions]
        self._applied: list[FilterCondition] = [c.model_copy(deep=True) for c in self._conditions]
        self._validation = ValidationResult()

    @property
    def schema(self) -> tuple[FieldDefinition, ...]:
        return self._schema

    @property
    def conditions(self) -> list[FilterCondition]:
        """Draft conditions, in row order."""
        return list(self._conditions)

    @property
    def applied_conditions(self) -> list[FilterCondition]:
        """Conditions from the last successful apply()."""
        return [c.model_copy(deep=True) for c in self._applied]

    @property
    def errors(self) -> ValidationResult:
        return self._validation

    def error_for(self, condition_id: str) -> str | None:
        return self._validation.error_for(condition_id)

    def field(self, key: str) -> FieldDefinition:
        try:
            return self._fields[key]
        except KeyError:
            raise KeyError(f"unknown field: {key!r}") from None

    def add_condition(self) -> FilterCondition:
        """Append a row on the first field with its first operator and default value."""
        first = self._schema[0]
        operator = default_operator(first.type)
        condition = FilterCondition(
            id=self._ids.new_condition_id(),
            field=first.key,
            operator=operator,
            value=default_value(first.type, operator),
        )
        self._conditions.append(condition)
        return condition

    def change_field(self, condition_id: str, field_key: str) -> FilterCondition:
        """Point a row at another field; operator and value reset for its type."""
        field = self.field(field_key)
        operator = default_operator(field.type)
        return self._replace(
            condition_id,
            field=field.key,
            operator=operator,
            value=default_value(field.type, operator),
        )

    def change_operator(self, condition_id: str, operator: str) -> FilterCondition:
        """Change a row's operator; the value resets to the operator's default."""
        condition = self._find(condition_id)
        field = self._fields.get(condition.field)
        value = default_value(field.type, operator) if field else None
        return self._replace(condition_id, operator=operator, value=value)

    def change_value(self, condition_id: str, value: FilterValue) -> FilterCondition:
        return self._replace(condition_id, value=value)

    def remove_condition(self, condition_id: str) -> None:
        del self._conditions[self._index(condition_id)]
        self._validation = ValidationResult(
            [e for e in self._validation.errors if e.filter_id != condition_id]
        )

    def clear(self) -> None:
        """Remove every row and error; the applied set becomes empty too."""
        self._conditions = []
        self._applied = []
        self._validation = ValidationResult()

    def validate(self) -> ValidationResult:
        self._validation = validate_conditions(self._conditions, self._fields)
        return self._validation

    def apply(self) -> bool:
        """Validate the drafts and, only if all pass, make them the applied set."""
        result = self.validate()
        if not result.is_valid:
            if self._logger:
                self._logger.info(
                    "apply_refused",
                    extra={"error_count": len(result.errors), "errors": result.by_id()},
                )
            return False
        self._applied = [c.model_copy(deep=True) for c in self._conditions]
        if self._logger:
            self._logger.info("apply_accepted", extra={"condition_count": len(self._applied)})
        return True

    def _index(self, condition_id: str) -> int:
        for index, condition in enumerate(self._conditions):
            if condition.id == condition_id:
                return index
        raise KeyError(f"unknown condition id: {condition_id!r}")

    def _find(self, condition_id: str) -> FilterCondition:
        return self._conditions[self._index(condition_id)]

    def _replace(self, condition_id: str, **changes: Any) -> FilterCondition:
        index = self._index(condition_id)
        current = self._conditions[index]
        updated = FilterCondition.model_validate({**current.model_dump(), **changes})
        self._conditions[index] = updated
        return updated

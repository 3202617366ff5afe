"""Field schema: the static description of each filterable field."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldType(str, Enum):
    """Semantic field types."""

    text = "text"
    number = "number"
    date = "date"
    amount = "amount"               # evaluated exactly like number
    single_select = "single-select"
    multi_select = "multi-select"
    boolean = "boolean"


SELECT_TYPES = frozenset({FieldType.single_select, FieldType.multi_select})
NUMERIC_TYPES = frozenset({FieldType.number, FieldType.amount})


class FieldDefinition(BaseModel):
    """One typed, dot-path addressable column of a dataset schema."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Dot-path to the field (e.g. 'address.city')")
    type: FieldType = Field(..., description="Semantic field type")
    label: str = Field(default="", description="Display label; defaults to the key")
    options: tuple[str, ...] | None = Field(
        default=None,
        description="Allowed options, required for select types only",
    )

    @model_validator(mode="after")
    def _check_options(self) -> FieldDefinition:
        if self.type in SELECT_TYPES and not self.options:
            raise ValueError(f"field {self.key!r} of type {self.type.value!r} requires options")
        if self.type not in SELECT_TYPES and self.options is not None:
            raise ValueError(f"field {self.key!r} of type {self.type.value!r} must not define options")
        return self

    @property
    def display_label(self) -> str:
        return self.label or self.key


def field_index(schema: list[FieldDefinition] | tuple[FieldDefinition, ...]) -> dict[str, FieldDefinition]:
    """Map field keys to definitions. Raises ValueError on duplicate keys."""
    index: dict[str, FieldDefinition] = {}
    for definition in schema:
        if definition.key in index:
            raise ValueError(f"duplicate field key in schema: {definition.key!r}")
        index[definition.key] = definition
    return index

"""CSV and JSON export of filtered records and condition sets."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...domain.fields import FieldDefinition
from ...domain.filters import FilterCondition
from ...domain.paths import resolve


class ExportError(ValueError):
    """Raised when there is nothing to export."""


class ExportColumn(BaseModel):
    """One CSV column: header text and the dot-path it reads."""

    model_config = ConfigDict(frozen=True)

    header: str = Field(..., description="CSV header")
    path: str = Field(..., description="Dot-path into each record")


def columns_for_schema(schema: Sequence[FieldDefinition]) -> list[ExportColumn]:
    return [ExportColumn(header=f.display_label, path=f.key) for f in schema]


def format_cell(value: Any) -> str:
    """Render one cell: Yes/No for booleans, '; '-joined sequences, '' for absent."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return "; ".join(format_cell(item) for item in value)
    return str(value)


def _plain(record: Any) -> Any:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json", by_alias=True)
    return record


def records_to_csv(records: Sequence[Any], columns: Sequence[ExportColumn]) -> str:
    if not records:
        raise ExportError("No data to export")
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([column.header for column in columns])
    for record in records:
        writer.writerow([format_cell(resolve(record, column.path)) for column in columns])
    return buffer.getvalue().rstrip("\n")


def records_to_json(records: Sequence[Any]) -> str:
    if not records:
        raise ExportError("No data to export")
    return json.dumps([_plain(record) for record in records], indent=2)


def filters_to_json(conditions: Sequence[FilterCondition]) -> str:
    if not conditions:
        raise ExportError("No filters to export")
    return json.dumps([c.model_dump(mode="json") for c in conditions], indent=2)


def write_export(content: str, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target

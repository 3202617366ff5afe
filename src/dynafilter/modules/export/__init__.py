"""Export of filtered views."""

from .exporters import (
    ExportColumn,
    ExportError,
    columns_for_schema,
    filters_to_json,
    format_cell,
    records_to_csv,
    records_to_json,
    write_export,
)

__all__ = [
    "ExportColumn",
    "ExportError",
    "columns_for_schema",
    "filters_to_json",
    "format_cell",
    "records_to_csv",
    "records_to_json",
    "write_export",
]

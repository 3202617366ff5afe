"""Bundled sample datasets."""

from .employees import (
    EMPLOYEE_EXPORT_COLUMNS,
    EMPLOYEE_FIELDS,
    Employee,
    load_records,
    sample_employees,
)

__all__ = [
    "EMPLOYEE_EXPORT_COLUMNS",
    "EMPLOYEE_FIELDS",
    "Employee",
    "load_records",
    "sample_employees",
]

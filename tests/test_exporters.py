"""CSV/JSON export of records and condition sets."""

import json

import pytest

from dynafilter.datasets.employees import EMPLOYEE_EXPORT_COLUMNS, EMPLOYEE_FIELDS, sample_employees
from dynafilter.domain.filters import FilterCondition
from dynafilter.modules.export.exporters import (
    ExportColumn,
    ExportError,
    columns_for_schema,
    filters_to_json,
    format_cell,
    records_to_csv,
    records_to_json,
    write_export,
)

COLUMNS = [
    ExportColumn(header="Name", path="name"),
    ExportColumn(header="Active", path="isActive"),
    ExportColumn(header="Skills", path="skills"),
    ExportColumn(header="City", path="address.city"),
]


class TestFormatCell:
    def test_values(self):
        assert format_cell(True) == "Yes"
        assert format_cell(False) == "No"
        assert format_cell(["React", "Go"]) == "React; Go"
        assert format_cell(None) == ""
        assert format_cell(95000) == "95000"


class TestCsv:
    def test_rows(self):
        records = [
            {"name": "Sarah", "isActive": True, "skills": ["React", "Go"], "address": {"city": "Austin"}},
            {"name": "Lee, John", "isActive": False, "skills": [], "address": {}},
        ]
        assert records_to_csv(records, COLUMNS).split("\n") == [
            "Name,Active,Skills,City",
            "Sarah,Yes,React; Go,Austin",
            '"Lee, John",No,,',
        ]

    def test_embedded_quotes(self):
        records = [{"name": 'Sam "The Man"', "isActive": True, "skills": [], "address": {}}]
        assert records_to_csv(records, COLUMNS).split("\n")[1] == '"Sam ""The Man""",Yes,,'

    def test_employee_columns(self):
        text = records_to_csv(sample_employees()[:1], EMPLOYEE_EXPORT_COLUMNS)
        header, row = text.split("\n")
        assert header.startswith("ID,Name,Email,Department")
        assert row.startswith("1,Sarah Johnson,sarah.johnson@example.com,Engineering")
        assert '"React; TypeScript"' not in row
        assert "React; TypeScript" in row

    def test_empty(self):
        with pytest.raises(ExportError, match="No data to export"):
            records_to_csv([], COLUMNS)


class TestJson:
    def test_records(self):
        records = sample_employees()[:2]
        assert json.loads(records_to_json(records)) == records

    def test_empty_records(self):
        with pytest.raises(ExportError, match="No data to export"):
            records_to_json([])

    def test_filters(self):
        conditions = [FilterCondition(id="f1", field="isActive", operator="is", value=True)]
        assert json.loads(filters_to_json(conditions)) == [
            {"id": "f1", "field": "isActive", "operator": "is", "value": True}
        ]

    def test_no_filters(self):
        with pytest.raises(ExportError, match="No filters to export"):
            filters_to_json([])


class TestHelpers:
    def test_columns_for_schema(self):
        columns = columns_for_schema(EMPLOYEE_FIELDS)
        assert columns[0] == ExportColumn(header="Name", path="name")
        assert len(columns) == len(EMPLOYEE_FIELDS)

    def test_write_export(self, tmp_path):
        target = write_export("a,b", tmp_path / "out" / "export.csv")
        assert target.read_text(encoding="utf-8") == "a,b"

    def test_export_error_is_value_error(self):
        assert issubclass(ExportError, ValueError)

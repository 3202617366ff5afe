"""Dot-path resolution over dicts, pydantic models and lists."""

from dynafilter.datasets.employees import Employee, sample_employees
from dynafilter.domain.paths import resolve


class TestResolveDicts:
    def test_top_level_key(self):
        assert resolve({"name": "Sarah"}, "name") == "Sarah"

    def test_nested_key(self):
        record = {"address": {"city": "Austin", "state": "TX"}}
        assert resolve(record, "address.city") == "Austin"

    def test_missing_leaf_is_none(self):
        assert resolve({"address": {}}, "address.city") is None

    def test_missing_intermediate_is_none(self):
        assert resolve({"name": "x"}, "address.city") is None

    def test_scalar_intermediate_is_none(self):
        assert resolve({"address": "Austin"}, "address.city") is None

    def test_falsy_values_are_returned(self):
        record = {"isActive": False, "projects": 0, "role": ""}
        assert resolve(record, "isActive") is False
        assert resolve(record, "projects") == 0
        assert resolve(record, "role") == ""


class TestResolveListsAndModels:
    def test_list_index_segment(self):
        record = {"skills": ["React", "Go"]}
        assert resolve(record, "skills.1") == "Go"

    def test_list_index_out_of_range(self):
        assert resolve({"skills": ["React"]}, "skills.5") is None

    def test_list_non_numeric_segment(self):
        assert resolve({"skills": ["React"]}, "skills.name") is None

    def test_model_by_alias_and_field_name(self):
        employee = Employee.model_validate(sample_employees()[0])
        assert resolve(employee, "joinDate") == "2019-03-15"
        assert resolve(employee, "join_date") == "2019-03-15"
        assert resolve(employee, "address.city") == "Austin"

    def test_model_unknown_attribute_is_none(self):
        assert resolve(Employee.model_validate(sample_employees()[0]), "salaryBand") is None

    def test_sample_record_dicts(self):
        first = sample_employees()[0]
        assert resolve(first, "address.country") == "USA"

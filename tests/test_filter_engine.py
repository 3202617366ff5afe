"""Filter engine: AND semantics, ordering and the algebraic properties."""

import pytest

from dynafilter.datasets.employees import sample_employees
from dynafilter.domain.filter_engine import apply_filters, matches_all
from dynafilter.domain.filters import FilterCondition, NumberRange


def _make_condition(condition_id: str, field: str, operator: str, value) -> FilterCondition:
    return FilterCondition(id=condition_id, field=field, operator=operator, value=value)


RECORDS = [
    {"name": "Sarah", "department": "Engineering", "salary": 95000, "isActive": True},
    {"name": "John", "department": "Sales", "salary": 60000, "isActive": True},
]


class TestApplyFilters:
    def test_no_conditions_returns_everything(self):
        result = apply_filters(RECORDS, [])
        assert result == RECORDS
        assert result is not RECORDS

    def test_end_to_end_and(self):
        conditions = [
            _make_condition("f1", "department", "equals", "engineering"),
            _make_condition("f2", "salary", "greaterThan", 80000),
        ]
        assert apply_filters(RECORDS, conditions) == [RECORDS[0]]

    def test_preserves_input_order(self):
        records = sample_employees()
        result = apply_filters(records, [_make_condition("f1", "isActive", "is", True)])
        ids = [r["id"] for r in result]
        assert ids == sorted(ids)

    def test_inputs_not_mutated(self):
        records = sample_employees()
        before = [dict(r) for r in records]
        conditions = [_make_condition("f1", "salary", "between", NumberRange(min=1, max=2))]
        apply_filters(records, conditions)
        assert records == before
        assert conditions[0].value == NumberRange(min=1, max=2)

    def test_idempotent(self):
        conditions = [_make_condition("f1", "address.country", "is", "USA")]
        once = apply_filters(sample_employees(), conditions)
        assert apply_filters(once, conditions) == once

    def test_adding_a_condition_never_grows_the_result(self):
        base = [_make_condition("f1", "isActive", "is", True)]
        narrower = base + [_make_condition("f2", "skills", "in", ["Excel"])]
        wide = apply_filters(sample_employees(), base)
        narrow = apply_filters(sample_employees(), narrower)
        assert len(narrow) <= len(wide)
        assert all(r in wide for r in narrow)

    def test_sample_dataset_scenario(self):
        conditions = [
            _make_condition("f1", "department", "equals", "engineering"),
            _make_condition("f2", "isActive", "is", True),
            _make_condition("f3", "salary", "greaterThanOrEqual", 95000),
        ]
        names = [r["name"] for r in apply_filters(sample_employees(), conditions)]
        assert names == ["Sarah Johnson", "Amy Chen"]


class TestMatchesAll:
    def test_short_circuits(self):
        seen = []

        class Spy(dict):
            def get(self, key, default=None):
                seen.append(key)
                return super().get(key, default)

        record = Spy(name="Sarah", salary=1)
        conditions = [
            _make_condition("f1", "name", "equals", "john"),
            _make_condition("f2", "salary", "equals", 1),
        ]
        assert matches_all(record, conditions) is False
        assert seen == ["name"]

    def test_empty_is_true(self):
        assert matches_all({}, []) is True


class TestScenario:
    DATASET = [
        {"name": "Sarah Johnson", "salary": 95000},
        {"name": "John Lee", "salary": 60000},
        {"name": "Amy Chen", "salary": 110000},
    ]

    def test_name_and_salary_range(self):
        conditions = [
            _make_condition("f1", "name", "contains", "jo"),
            _make_condition("f2", "salary", "between", NumberRange(min=50000, max=100000)),
        ]
        assert [r["name"] for r in apply_filters(self.DATASET, conditions)] == ["Sarah Johnson", "John Lee"]

    def test_single_point_range(self):
        conditions = [_make_condition("f1", "salary", "between", NumberRange(min=80000, max=80000))]
        assert apply_filters([{"salary": 80000}], conditions) == [{"salary": 80000}]

    @pytest.mark.parametrize(
        "operator",
        ["equals", "contains", "notContains", "regex", "greaterThan", "between", "is", "isNot", "in", "notIn"],
    )
    def test_absent_field_excluded_for_every_operator(self, operator):
        conditions = [_make_condition("f1", "department", operator, None)]
        assert apply_filters(self.DATASET, conditions) == []

"""Condition evaluation: runtime-type dispatch over record values."""

import logging

import pytest

from dynafilter.domain.evaluator import evaluate
from dynafilter.domain.filters import DateRange, FilterCondition, NumberRange


def _make_record(**overrides) -> dict:
    record = {
        "name": "Sarah Johnson",
        "email": "sarah.johnson@example.com",
        "department": "Engineering",
        "salary": 95000,
        "joinDate": "2019-03-15",
        "lastReview": "2024-06-01",
        "hireDay": "2019-03-15",
        "isActive": True,
        "skills": ["React", "TypeScript"],
        "address": {"city": "Austin", "state": "TX", "country": "USA"},
        "performanceRating": 4.6,
    }
    record.update(overrides)
    return record


def _check(field: str, operator: str, value=None, **overrides) -> bool:
    condition = FilterCondition(id="f1", field=field, operator=operator, value=value)
    return evaluate(_make_record(**overrides), condition)


class TestAbsentValues:
    def test_missing_field_is_false(self):
        assert _check("nickname", "equals", "x") is False

    def test_missing_nested_field_is_false(self):
        assert _check("address.zip", "isNot", "78701") is False

    def test_null_field_is_false(self):
        assert _check("name", "notContains", "zzz", name=None) is False


class TestText:
    def test_equals_case_insensitive(self):
        assert _check("name", "equals", "sarah johnson")
        assert not _check("name", "equals", "sarah")

    def test_contains(self):
        assert _check("name", "contains", "JOHN")
        assert not _check("name", "contains", "lee")

    def test_starts_and_ends_with(self):
        assert _check("name", "startsWith", "sar")
        assert _check("name", "endsWith", "SON")
        assert not _check("name", "startsWith", "john")

    def test_not_contains(self):
        assert _check("name", "notContains", "lee")
        assert not _check("name", "notContains", "sarah")

    def test_nested_path(self):
        assert _check("address.city", "equals", "austin")

    def test_non_string_value_compared_as_empty(self):
        assert _check("name", "contains", 5)
        assert not _check("name", "equals", 5)


class TestRegex:
    def test_search_anywhere(self):
        assert _check("email", "regex", r"@example\.com$")
        assert _check("name", "regex", "john")

    def test_case_insensitive(self):
        assert _check("name", "regex", "^SARAH")

    def test_no_match(self):
        assert not _check("name", "regex", "^john")

    def test_invalid_pattern_is_false_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="dynafilter.domain.evaluator"):
            assert _check("name", "regex", "[") is False
        assert any(r.getMessage() == "invalid_regex_pattern" for r in caplog.records)


class TestDates:
    def test_date_named_key_inside_range(self):
        assert _check("joinDate", "between", DateRange(start="2019-01-01", end="2019-12-31"))

    def test_range_bounds_inclusive(self):
        assert _check("joinDate", "between", DateRange(start="2019-03-15", end="2019-03-15"))

    def test_outside_range(self):
        assert not _check("joinDate", "between", DateRange(start="2020-01-01", end="2020-12-31"))

    def test_review_key(self):
        assert _check("lastReview", "between", DateRange(start="2024-01-01", end="2024-12-31"))

    def test_incomplete_range_is_false(self):
        assert not _check("joinDate", "between", DateRange(start="2019-01-01", end=""))

    def test_date_field_named_otherwise_is_not_date_compared(self):
        # "hireDay" does not carry a date marker; between has no text rule and passes
        assert _check("hireDay", "between", DateRange(start="2030-01-01", end="2030-12-31"))


class TestNumbers:
    @pytest.mark.parametrize(
        "operator,value,expected",
        [
            ("equals", 95000, True),
            ("equals", 95001, False),
            ("greaterThan", 80000, True),
            ("greaterThan", 95000, False),
            ("lessThan", 100000, True),
            ("greaterThanOrEqual", 95000, True),
            ("lessThanOrEqual", 94999, False),
        ],
    )
    def test_comparisons(self, operator, value, expected):
        assert _check("salary", operator, value) is expected

    def test_numeric_string_value(self):
        assert _check("salary", "greaterThan", "80000")

    def test_non_numeric_value_is_false(self):
        assert _check("salary", "greaterThan", "lots") is False

    def test_between_inclusive(self):
        assert _check("salary", "between", NumberRange(min=95000, max=95000))
        assert _check("salary", "between", NumberRange(min=90000, max=100000))
        assert not _check("salary", "between", NumberRange(min=100000, max=200000))

    def test_between_incomplete_range_is_false(self):
        assert not _check("salary", "between", NumberRange(min=1))

    def test_float_field(self):
        assert _check("performanceRating", "greaterThanOrEqual", 4.5)


class TestBooleans:
    def test_is_true(self):
        assert _check("isActive", "is", True)
        assert not _check("isActive", "is", False)

    def test_false_field(self):
        assert _check("isActive", "is", False, isActive=False)

    def test_operator_ignored(self):
        assert _check("isActive", "isNot", True)

    def test_non_bool_value_is_false(self):
        assert not _check("isActive", "is", 1)


class TestSequences:
    def test_in_intersects(self):
        assert _check("skills", "in", ["React", "Go"])
        assert not _check("skills", "in", ["Go", "Rust"])

    def test_not_in(self):
        assert _check("skills", "notIn", ["Go", "Rust"])
        assert not _check("skills", "notIn", ["React"])

    def test_empty_filter_matches_all(self):
        assert _check("skills", "in", [])
        assert _check("skills", "notIn", [])

    def test_empty_field_list(self):
        assert not _check("skills", "in", ["React"], skills=[])
        assert _check("skills", "notIn", ["React"], skills=[])


class TestUnknownOperatorsPass:
    """Typed branches answer True for operators outside their rule set."""

    def test_is_on_string_does_not_narrow(self):
        assert _check("department", "is", "Sales")
        assert _check("department", "isNot", "Engineering")

    def test_is_on_number(self):
        assert _check("salary", "is", 6)
        assert _check("salary", "isNot", 95000)

    def test_is_on_list(self):
        assert _check("skills", "is", ["Rust"])

    def test_unrecognised_operators(self):
        assert _check("name", "soundsLike", "sara")
        assert _check("salary", "approximately", 1)
        assert _check("skills", "overlaps", ["Rust"])

    def test_absent_still_false(self):
        assert not _check("nickname", "soundsLike", "sara")


class TestStrictEqualityFallback:
    """``is`` / ``isNot`` compare raw values of any other runtime type."""

    def test_is_on_mapping(self):
        assert not _check("address", "is", "Austin")

    def test_is_not_on_mapping(self):
        assert _check("address", "isNot", "Austin")

    def test_other_operator_on_mapping(self):
        assert _check("address", "contains", "Austin")

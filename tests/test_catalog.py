"""Field schema, operator catalog and default values."""

import pytest
from pydantic import ValidationError

from dynafilter.domain.fields import FieldDefinition, FieldType, field_index
from dynafilter.domain.filters import DateRange, FilterCondition, NumberRange, default_value
from dynafilter.domain.operators import (
    OperatorType,
    default_operator,
    is_operator_allowed,
    operators_for,
)


class TestFieldDefinition:
    def test_select_requires_options(self):
        with pytest.raises(ValidationError):
            FieldDefinition(key="department", type=FieldType.single_select)

    def test_non_select_rejects_options(self):
        with pytest.raises(ValidationError):
            FieldDefinition(key="name", type=FieldType.text, options=("a",))

    def test_type_accepts_wire_value(self):
        field = FieldDefinition(key="skills", type="multi-select", options=("Go",))
        assert field.type is FieldType.multi_select

    def test_display_label_defaults_to_key(self):
        assert FieldDefinition(key="salary", type=FieldType.amount).display_label == "salary"
        assert FieldDefinition(key="salary", type=FieldType.amount, label="Salary").display_label == "Salary"

    def test_field_index_rejects_duplicates(self):
        field = FieldDefinition(key="name", type=FieldType.text)
        with pytest.raises(ValueError, match="duplicate"):
            field_index([field, field])


class TestOperatorCatalog:
    @pytest.mark.parametrize("field_type", list(FieldType))
    def test_every_type_has_operators(self, field_type):
        assert len(operators_for(field_type)) >= 1

    def test_text_operators_in_order(self):
        values = [op.value.value for op in operators_for(FieldType.text)]
        assert values == ["equals", "contains", "startsWith", "endsWith", "notContains", "regex"]

    def test_amount_matches_number(self):
        assert operators_for(FieldType.amount) == operators_for(FieldType.number)

    def test_date_is_between_only(self):
        assert [op.value for op in operators_for(FieldType.date)] == [OperatorType.between]

    def test_boolean_is_only(self):
        assert [op.value for op in operators_for("boolean")] == [OperatorType.is_]

    def test_labels(self):
        labels = {op.value: op.label for op in operators_for(FieldType.text)}
        assert labels[OperatorType.not_contains] == "Does Not Contain"
        assert labels[OperatorType.regex] == "Regex Match (Advanced)"

    def test_default_operator_is_first(self):
        assert default_operator(FieldType.multi_select) == OperatorType.in_
        assert default_operator(FieldType.single_select) == OperatorType.is_

    def test_is_operator_allowed_with_plain_string(self):
        assert is_operator_allowed(FieldType.number, "greaterThan")
        assert not is_operator_allowed(FieldType.number, "contains")

    def test_unknown_field_type_raises(self):
        with pytest.raises(ValueError):
            operators_for("currency")


class TestDefaultValue:
    def test_between_date_is_empty_range(self):
        assert default_value(FieldType.date, OperatorType.between) == DateRange(start="", end="")

    def test_between_number_is_zero_range(self):
        assert default_value(FieldType.amount, "between") == NumberRange(min=0, max=0)

    def test_scalars(self):
        assert default_value(FieldType.boolean) is False
        assert default_value(FieldType.multi_select, OperatorType.in_) == []
        assert default_value(FieldType.number, OperatorType.greater_than) == 0
        assert default_value(FieldType.text, OperatorType.contains) == ""
        assert default_value(FieldType.single_select, OperatorType.is_) == ""


class TestFilterConditionModel:
    def test_operator_enum_stored_as_string(self):
        condition = FilterCondition(id="f1", field="name", operator=OperatorType.contains, value="a")
        assert condition.operator == "contains"
        assert type(condition.operator) is str

    def test_value_shapes_from_json(self):
        number = FilterCondition.model_validate(
            {"id": "f1", "field": "salary", "operator": "between", "value": {"min": 1, "max": 2}}
        )
        dates = FilterCondition.model_validate(
            {"id": "f2", "field": "joinDate", "operator": "between",
             "value": {"start": "2020-01-01", "end": "2021-01-01"}}
        )
        flag = FilterCondition.model_validate(
            {"id": "f3", "field": "isActive", "operator": "is", "value": True}
        )
        assert isinstance(number.value, NumberRange)
        assert isinstance(dates.value, DateRange)
        assert flag.value is True

    def test_value_defaults_to_absent(self):
        assert FilterCondition(id="f1", field="name", operator="equals").value is None

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            FilterCondition(id="", field="name", operator="equals")

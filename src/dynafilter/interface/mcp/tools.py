"""Tool registry for the MCP server.

Every tool takes plain JSON-compatible arguments, validates them through the
pydantic models, and returns a JSON string.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .observability import tool_timer

from dynafilter.datasets.employees import EMPLOYEE_EXPORT_COLUMNS
from dynafilter.domain.fields import FieldType
from dynafilter.domain.filters import FilterCondition
from dynafilter.domain.operators import operators_for
from dynafilter.domain.sorting import SortSpec
from dynafilter.modules.export.exporters import ExportError, records_to_csv, records_to_json
from dynafilter.services.filter_builder import FilterBuilder
from dynafilter.services.filter_service import FilterService

_CONDITIONS = TypeAdapter(list[FilterCondition])

ALLOWED_TOOLS = frozenset({
    "filters_fields",
    "filters_operators",
    "filters_template",
    "filters_validate",
    "filters_apply",
    "filters_save",
    "filters_load",
    "filters_clear",
    "filters_export",
})

MAX_RESULT_LIMIT = 1000


def _get_filter_service() -> FilterService:
    from ...wiring import build_filter_service
    return build_filter_service()


def _get_filter_builder() -> FilterBuilder:
    from ...wiring import build_filter_builder
    return build_filter_builder()


def _get_records() -> list[dict[str, Any]]:
    from ...wiring import load_dataset
    return load_dataset()


def _parse_conditions(raw: list[dict[str, Any]] | None) -> list[FilterCondition]:
    return _CONDITIONS.validate_python(raw or [])


def _dump_conditions(conditions: list[FilterCondition]) -> list[dict[str, Any]]:
    return [c.model_dump(mode="json") for c in conditions]


# ---------------------------------------------------------------------------
# Tool bodies (plain functions so they can be exercised without a server)
# ---------------------------------------------------------------------------


def describe_fields(service: FilterService) -> dict[str, Any]:
    return {
        "fields": [
            {
                "key": f.key,
                "label": f.display_label,
                "type": f.type.value,
                "options": list(f.options) if f.options else None,
                "operators": [op.value.value for op in operators_for(f.type)],
            }
            for f in service.schema
        ]
    }


def describe_operators(field_type: str) -> dict[str, Any]:
    try:
        kind = FieldType(field_type)
    except ValueError:
        return {
            "error": f"unknown field type {field_type!r}",
            "field_types": [t.value for t in FieldType],
        }
    return {
        "field_type": kind.value,
        "operators": [{"value": op.value.value, "label": op.label} for op in operators_for(kind)],
    }


def condition_template(builder: FilterBuilder, field: str, operator: str | None = None) -> dict[str, Any]:
    """A fresh condition row for ``field`` (and ``operator``) with its default value."""
    condition = builder.add_condition()
    try:
        condition = builder.change_field(condition.id, field)
    except KeyError as e:
        return {"error": str(e.args[0])}
    if operator:
        condition = builder.change_operator(condition.id, operator)
    return {"condition": condition.model_dump(mode="json")}


def validate_payload(service: FilterService, conditions: list[dict[str, Any]] | None) -> dict[str, Any]:
    try:
        parsed = _parse_conditions(conditions)
    except ValidationError as e:
        return {"valid": False, "error": "malformed conditions", "details": e.errors(include_url=False)}
    return service.validate(parsed).to_dict()


def apply_payload(
    service: FilterService,
    records: list[Any],
    conditions: list[dict[str, Any]] | None = None,
    saved: str | None = None,
    sort_by: str | None = None,
    order: str = "asc",
    limit: int = 100,
) -> dict[str, Any]:
    if not 1 <= limit <= MAX_RESULT_LIMIT:
        return {"applied": False, "error": f"limit must be between 1 and {MAX_RESULT_LIMIT}, got {limit}"}
    try:
        parsed = service.load(saved) if saved else _parse_conditions(conditions)
        sort = SortSpec(field=sort_by, order=order) if sort_by else None
    except ValidationError as e:
        return {"applied": False, "error": "malformed request", "details": e.errors(include_url=False)}
    result = service.apply(records, parsed, sort=sort)
    payload = result.model_dump(mode="json")
    payload["records"] = payload["records"][:limit]
    return payload


def save_payload(service: FilterService, conditions: list[dict[str, Any]] | None, name: str) -> dict[str, Any]:
    """Validate and store a condition set; nothing is stored while any condition is invalid."""
    try:
        parsed = _parse_conditions(conditions)
    except ValidationError as e:
        return {"error": "malformed conditions", "details": e.errors(include_url=False)}
    result = service.validate(parsed)
    if not result.is_valid:
        return {"error": "invalid conditions", "errors": [error.model_dump() for error in result.errors]}
    service.save(parsed, name)
    return {"saved": name, "count": len(parsed)}


def export_payload(
    service: FilterService,
    records: list[Any],
    conditions: list[dict[str, Any]] | None = None,
    fmt: str = "csv",
) -> dict[str, Any]:
    if fmt not in ("csv", "json"):
        return {"error": f"unsupported format {fmt!r}; expected 'csv' or 'json'"}
    try:
        parsed = _parse_conditions(conditions)
    except ValidationError as e:
        return {"error": "malformed conditions", "details": e.errors(include_url=False)}
    result = service.apply(records, parsed)
    if not result.applied:
        return {"error": "invalid conditions", "errors": [e.model_dump() for e in result.errors]}
    try:
        if fmt == "csv":
            content = records_to_csv(result.records, EMPLOYEE_EXPORT_COLUMNS)
        else:
            content = records_to_json(result.records)
    except ExportError as e:
        return {"error": str(e)}
    return {"format": fmt, "count": result.matched_count, "content": content}


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_filter_tools(mcp):
    """Register the filter tools on a FastMCP server."""

    @mcp.tool()
    def filters_fields() -> str:
        """List filterable fields with their type, options and legal operators."""
        with tool_timer("filters_fields") as report:
            payload = describe_fields(_get_filter_service())
            report["field_count"] = len(payload["fields"])
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_operators(field_type: str) -> str:
        """List operators (value and label) for a field type.

        Args:
            field_type: One of text, number, date, amount, single-select, multi-select, boolean
        """
        with tool_timer("filters_operators") as report:
            payload = describe_operators(field_type)
            report["error"] = payload.get("error")
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_template(field: str, operator: str | None = None) -> str:
        """Return a new condition for a field with the default value for its type/operator.

        Args:
            field: Field key (dot-path), e.g. 'salary' or 'address.city'
            operator: Optional operator; defaults to the first legal operator for the field
        """
        with tool_timer("filters_template") as report:
            payload = condition_template(_get_filter_builder(), field, operator)
            report["error"] = payload.get("error")
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_validate(conditions: list[dict[str, Any]]) -> str:
        """Validate conditions; returns per-condition error messages keyed by id.

        Args:
            conditions: List of {id, field, operator, value}
        """
        with tool_timer("filters_validate") as report:
            payload = validate_payload(_get_filter_service(), conditions)
            report["valid"] = payload.get("valid")
            report["error"] = payload.get("error")
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_apply(
        conditions: list[dict[str, Any]] | None = None,
        saved: str | None = None,
        sort_by: str | None = None,
        order: str = "asc",
        limit: int = 100,
    ) -> str:
        """Filter the dataset (AND of all conditions). Refused while any condition is invalid.

        Args:
            conditions: List of {id, field, operator, value}; ignored when ``saved`` is set
            saved: Name of a saved filter set to apply instead
            sort_by: Optional field key to sort results by
            order: 'asc' or 'desc'
            limit: Maximum records returned, 1 to 1000 (default 100); anything else is an error
        """
        with tool_timer("filters_apply") as report:
            payload = apply_payload(
                _get_filter_service(), _get_records(), conditions, saved, sort_by, order, limit
            )
            report["error"] = payload.get("error")
            report["matched_count"] = payload.get("matched_count")
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_save(conditions: list[dict[str, Any]], name: str = "default") -> str:
        """Validate and save a condition set under a name (overwrites). Refused while any condition is invalid.

        Args:
            conditions: List of {id, field, operator, value}
            name: Saved set name
        """
        with tool_timer("filters_save") as report:
            payload = save_payload(_get_filter_service(), conditions, name)
            report["error"] = payload.get("error")
            report["count"] = payload.get("count")
        return json.dumps(payload, indent=2)

    @mcp.tool()
    def filters_load(name: str = "default") -> str:
        """Return a saved condition set (empty list when none is saved).

        Args:
            name: Saved set name
        """
        with tool_timer("filters_load") as report:
            conditions = _get_filter_service().load(name)
            report["count"] = len(conditions)
        return json.dumps({"name": name, "conditions": _dump_conditions(conditions)}, indent=2)

    @mcp.tool()
    def filters_clear(name: str = "default") -> str:
        """Delete a saved condition set.

        Args:
            name: Saved set name
        """
        with tool_timer("filters_clear") as report:
            removed = _get_filter_service().clear(name)
            report["removed"] = removed
        return json.dumps({"name": name, "removed": removed})

    @mcp.tool()
    def filters_export(conditions: list[dict[str, Any]] | None = None, format: str = "csv") -> str:
        """Filter the dataset and return it as CSV or JSON text.

        Args:
            conditions: List of {id, field, operator, value}
            format: 'csv' or 'json'
        """
        with tool_timer("filters_export") as report:
            payload = export_payload(_get_filter_service(), _get_records(), conditions, format)
            report["error"] = payload.get("error")
        return json.dumps(payload, indent=2)

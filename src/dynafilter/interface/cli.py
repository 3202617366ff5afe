"""Command line interface: inspect the schema, validate, apply and save filters."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..config.runtime import FilterSettings, get_settings
from ..datasets.employees import EMPLOYEE_EXPORT_COLUMNS
from ..domain.fields import FieldType
from ..domain.filters import FilterCondition
from ..domain.operators import operators_for
from ..domain.paths import resolve
from ..domain.sorting import SortSpec
from ..modules.export.exporters import (
    ExportColumn,
    ExportError,
    format_cell,
    records_to_csv,
    records_to_json,
    write_export,
)
from ..wiring import build_filter_builder, build_filter_service, load_dataset

_CONDITIONS = TypeAdapter(list[FilterCondition])

_TABLE_COLUMNS = tuple(
    c for c in EMPLOYEE_EXPORT_COLUMNS
    if c.path in {"name", "department", "role", "salary", "joinDate", "address.city", "isActive"}
)


def load_conditions_from_file(path: Path) -> list[FilterCondition]:
    """Load conditions from a JSON list (or {"conditions": [...]}). Exits on error."""
    if not path.exists():
        print(f"Error: filters file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)
    if isinstance(raw, dict):
        raw = raw.get("conditions")
    if not isinstance(raw, list):
        print("Error: filters file must contain a list of condition objects.", file=sys.stderr)
        sys.exit(1)
    try:
        return _CONDITIONS.validate_python(raw)
    except ValidationError as e:
        print(f"Error: invalid conditions in {path}: {e}", file=sys.stderr)
        sys.exit(1)


def format_table(records: Sequence[Any], columns: Sequence[ExportColumn]) -> str:
    rows = [[c.header for c in columns]]
    rows.extend([format_cell(resolve(record, c.path)) for c in columns] for record in records)
    widths = [max(len(row[i]) for row in rows) for i in range(len(columns))]
    lines = ["  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip() for row in rows]
    lines.insert(1, "  ".join("-" * w for w in widths))
    return "\n".join(lines)


def _print_errors(errors) -> None:
    for error in errors:
        print(f"{error.filter_id}: {error.message}", file=sys.stderr)


def _cmd_fields(args: argparse.Namespace, settings: FilterSettings) -> int:
    service = build_filter_service(settings)
    for field in service.schema:
        ops = ", ".join(op.value.value for op in operators_for(field.type))
        options = f"  options: {', '.join(field.options)}" if field.options else ""
        print(f"{field.key:<20} {field.type.value:<14} [{ops}]{options}")
    return 0


def _cmd_operators(args: argparse.Namespace, settings: FilterSettings) -> int:
    for op in operators_for(FieldType(args.field_type)):
        print(f"{op.value.value:<20} {op.label}")
    return 0


def _cmd_template(args: argparse.Namespace, settings: FilterSettings) -> int:
    builder = build_filter_builder(settings)
    condition = builder.add_condition()
    try:
        condition = builder.change_field(condition.id, args.field)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    if args.operator:
        condition = builder.change_operator(condition.id, args.operator)
    print(condition.model_dump_json(indent=2))
    return 0


def _cmd_validate(args: argparse.Namespace, settings: FilterSettings) -> int:
    conditions = load_conditions_from_file(args.filters)
    result = build_filter_service(settings).validate(conditions)
    if not result.is_valid:
        _print_errors(result.errors)
        return 1
    print(f"{len(conditions)} condition(s) valid.")
    return 0


def _cmd_apply(args: argparse.Namespace, settings: FilterSettings) -> int:
    service = build_filter_service(settings)
    if args.filters:
        conditions = load_conditions_from_file(args.filters)
    else:
        conditions = service.load(args.saved)
    try:
        records = load_dataset(settings, args.data)
    except (OSError, ValueError) as e:
        print(f"Error: could not load records: {e}", file=sys.stderr)
        return 1
    sort_field = args.sort_by or settings.default_sort_field
    sort_order = args.order or settings.default_sort_order
    result = service.apply(records, conditions, sort=SortSpec(field=sort_field, order=sort_order))
    if not result.applied:
        _print_errors(result.errors)
        return 1

    try:
        if args.format == "csv":
            output = records_to_csv(result.records, EMPLOYEE_EXPORT_COLUMNS)
        elif args.format == "json":
            output = records_to_json(result.records)
        else:
            output = format_table(result.records, _TABLE_COLUMNS)
            output += f"\n\n{result.matched_count} of {result.total_count} records"
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        target = write_export(output, args.output)
        print(f"Wrote {result.matched_count} records to {target}")
    else:
        print(output)
    return 0


def _cmd_save(args: argparse.Namespace, settings: FilterSettings) -> int:
    conditions = load_conditions_from_file(args.filters)
    service = build_filter_service(settings)
    result = service.validate(conditions)
    if not result.is_valid:
        _print_errors(result.errors)
        return 1
    service.save(conditions, args.name)
    print(f"Saved {len(conditions)} condition(s) as {args.name!r}.")
    return 0


def _cmd_show(args: argparse.Namespace, settings: FilterSettings) -> int:
    conditions = build_filter_service(settings).load(args.name)
    print(json.dumps([c.model_dump(mode="json") for c in conditions], indent=2))
    return 0


def _cmd_clear(args: argparse.Namespace, settings: FilterSettings) -> int:
    if build_filter_service(settings).clear(args.name):
        print(f"Cleared {args.name!r}.")
    else:
        print(f"No saved filters named {args.name!r}.")
    return 0


_COMMANDS = {
    "fields": _cmd_fields,
    "operators": _cmd_operators,
    "template": _cmd_template,
    "validate": _cmd_validate,
    "apply": _cmd_apply,
    "save": _cmd_save,
    "show": _cmd_show,
    "clear": _cmd_clear,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dynafilter", description="Build and apply record filters")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("fields", help="List filterable fields and their operators")

    operators_parser = subparsers.add_parser("operators", help="List operators for a field type")
    operators_parser.add_argument("field_type", choices=[t.value for t in FieldType])

    template_parser = subparsers.add_parser("template", help="Print a new condition with default value")
    template_parser.add_argument("field", help="Field key, e.g. salary or address.city")
    template_parser.add_argument("--operator", default=None, help="Operator (default: first for the field)")

    validate_parser = subparsers.add_parser("validate", help="Validate a filters JSON file")
    validate_parser.add_argument("--filters", type=Path, required=True, help="Path to filters JSON")

    apply_parser = subparsers.add_parser("apply", help="Filter and sort the dataset")
    source = apply_parser.add_mutually_exclusive_group()
    source.add_argument("--filters", type=Path, default=None, help="Path to filters JSON")
    source.add_argument("--saved", default="default", help="Saved filter set name (default: default)")
    apply_parser.add_argument("--data", default=None, help="JSON array of records (default: configured/sample)")
    apply_parser.add_argument("--sort-by", default=None, help="Field key to sort by")
    apply_parser.add_argument("--order", choices=["asc", "desc"], default=None, help="Sort direction")
    apply_parser.add_argument("--format", choices=["table", "json", "csv"], default="table")
    apply_parser.add_argument("--output", type=Path, default=None, help="Write output to this file")

    save_parser = subparsers.add_parser("save", help="Validate and save a filters JSON file")
    save_parser.add_argument("--filters", type=Path, required=True, help="Path to filters JSON")
    save_parser.add_argument("--name", default="default", help="Saved set name")

    show_parser = subparsers.add_parser("show", help="Print a saved filter set")
    show_parser.add_argument("--name", default="default", help="Saved set name")

    clear_parser = subparsers.add_parser("clear", help="Delete a saved filter set")
    clear_parser.add_argument("--name", default="default", help="Saved set name")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())

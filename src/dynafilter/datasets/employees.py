"""Employee sample dataset: record model, field schema and demo records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.fields import FieldDefinition, FieldType
from ..modules.export.exporters import ExportColumn

DEPARTMENTS = ("Engineering", "Marketing", "Sales", "Finance", "HR", "Design")
SKILLS = (
    "React",
    "TypeScript",
    "Python",
    "Go",
    "Rust",
    "SQL",
    "AWS",
    "Figma",
    "Excel",
    "Negotiation",
)
COUNTRIES = ("USA", "Canada", "UK")


class Address(BaseModel):
    city: str
    state: str
    country: str


class Employee(BaseModel):
    """One employee row. Serialised with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    department: str
    role: str
    salary: int | float
    join_date: str = Field(..., alias="joinDate", description="ISO date")
    is_active: bool = Field(..., alias="isActive")
    skills: list[str] = Field(default_factory=list)
    address: Address
    projects: int = 0
    last_review: str = Field(..., alias="lastReview", description="ISO date")
    performance_rating: float = Field(..., alias="performanceRating")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


EMPLOYEE_FIELDS: tuple[FieldDefinition, ...] = (
    FieldDefinition(key="name", label="Name", type=FieldType.text),
    FieldDefinition(key="email", label="Email", type=FieldType.text),
    FieldDefinition(
        key="department", label="Department", type=FieldType.single_select, options=DEPARTMENTS
    ),
    FieldDefinition(key="role", label="Role", type=FieldType.text),
    FieldDefinition(key="salary", label="Salary", type=FieldType.amount),
    FieldDefinition(key="joinDate", label="Join Date", type=FieldType.date),
    FieldDefinition(key="isActive", label="Active", type=FieldType.boolean),
    FieldDefinition(key="skills", label="Skills", type=FieldType.multi_select, options=SKILLS),
    FieldDefinition(key="address.city", label="City", type=FieldType.text),
    FieldDefinition(key="address.state", label="State", type=FieldType.text),
    FieldDefinition(
        key="address.country", label="Country", type=FieldType.single_select, options=COUNTRIES
    ),
    FieldDefinition(key="projects", label="Projects", type=FieldType.number),
    FieldDefinition(key="lastReview", label="Last Review", type=FieldType.date),
    FieldDefinition(key="performanceRating", label="Performance Rating", type=FieldType.number),
)

EMPLOYEE_EXPORT_COLUMNS: tuple[ExportColumn, ...] = (
    ExportColumn(header="ID", path="id"),
    ExportColumn(header="Name", path="name"),
    ExportColumn(header="Email", path="email"),
    ExportColumn(header="Department", path="department"),
    ExportColumn(header="Role", path="role"),
    ExportColumn(header="Salary", path="salary"),
    ExportColumn(header="Join Date", path="joinDate"),
    ExportColumn(header="Active", path="isActive"),
    ExportColumn(header="Skills", path="skills"),
    ExportColumn(header="City", path="address.city"),
    ExportColumn(header="State", path="address.state"),
    ExportColumn(header="Country", path="address.country"),
    ExportColumn(header="Projects", path="projects"),
    ExportColumn(header="Last Review", path="lastReview"),
    ExportColumn(header="Performance Rating", path="performanceRating"),
)


def _employee(
    employee_id: int,
    name: str,
    department: str,
    role: str,
    salary: int,
    join_date: str,
    is_active: bool,
    skills: list[str],
    city: str,
    state: str,
    country: str,
    projects: int,
    last_review: str,
    rating: float,
) -> Employee:
    email = name.lower().replace(" ", ".") + "@example.com"
    return Employee(
        id=employee_id,
        name=name,
        email=email,
        department=department,
        role=role,
        salary=salary,
        join_date=join_date,
        is_active=is_active,
        skills=skills,
        address=Address(city=city, state=state, country=country),
        projects=projects,
        last_review=last_review,
        performance_rating=rating,
    )


_SAMPLE = (
    _employee(1, "Sarah Johnson", "Engineering", "Senior Engineer", 95000, "2019-03-15", True,
              ["React", "TypeScript"], "Austin", "TX", "USA", 12, "2024-06-01", 4.6),
    _employee(2, "John Lee", "Sales", "Account Executive", 60000, "2021-07-01", True,
              ["Negotiation", "Excel"], "Seattle", "WA", "USA", 5, "2024-02-15", 3.9),
    _employee(3, "Amy Chen", "Engineering", "Staff Engineer", 110000, "2016-11-20", True,
              ["Go", "Rust", "AWS"], "San Francisco", "CA", "USA", 21, "2024-05-10", 4.8),
    _employee(4, "Marcus Brown", "Marketing", "Marketing Manager", 82000, "2020-01-06", False,
              ["Excel", "SQL"], "Toronto", "ON", "Canada", 8, "2023-12-01", 3.5),
    _employee(5, "Priya Patel", "Finance", "Financial Analyst", 74000, "2022-04-18", True,
              ["Excel", "SQL", "Python"], "London", "England", "UK", 4, "2024-03-20", 4.1),
    _employee(6, "Diego Alvarez", "Design", "Product Designer", 88000, "2018-09-09", True,
              ["Figma", "React"], "Austin", "TX", "USA", 15, "2024-01-30", 4.3),
    _employee(7, "Hannah Kim", "HR", "HR Partner", 67000, "2023-02-13", True,
              ["Excel"], "Vancouver", "BC", "Canada", 2, "2024-04-05", 3.8),
    _employee(8, "Tom Wright", "Engineering", "Engineer", 78000, "2021-10-25", False,
              ["Python", "SQL", "AWS"], "Denver", "CO", "USA", 7, "2023-11-12", 3.6),
)


def sample_employees() -> list[dict[str, Any]]:
    """Demo records as plain dicts (fresh copies on each call)."""
    return [employee.to_record() for employee in _SAMPLE]


def load_records(path: str | Path) -> list[dict[str, Any]]:
    """Load a JSON array of record objects. Raises ValueError on any other shape."""
    source = Path(path)
    with open(source, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{source}: JSON file must contain a list of record objects")
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"{source}: record at index {i} is not an object")
    return raw

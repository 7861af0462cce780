from __future__ import annotations

import pytest

from app.models.employee import CreateEmployeeInput
from app.services.employee_validation import Violation, validate_create_input


def _input(**overrides) -> CreateEmployeeInput:
    fields = {"name": "Alice", "salary": 100, "age": 30, "title": "Engineer"}
    fields.update(overrides)
    return CreateEmployeeInput(**fields)


def test_valid_input_has_no_violations():
    assert validate_create_input(_input()) == []


@pytest.mark.parametrize("age", [16, 75])
def test_age_bounds_are_inclusive(age):
    assert validate_create_input(_input(age=age)) == []


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"name": None}, "name must not be blank"),
        ({"name": "   "}, "name must not be blank"),
        ({"name": "A"}, "name Name must be at least 2 characters"),
        ({"salary": None}, "salary must not be null"),
        ({"salary": 0}, "salary must be greater than or equal to 1"),
        ({"age": None}, "age must not be null"),
        ({"age": 15}, "age must be greater than or equal to 16"),
        ({"age": 76}, "age must be less than or equal to 75"),
        ({"title": "   "}, "title must not be blank"),
        ({"title": "X"}, "title Title must be at least 2 characters"),
    ],
)
def test_single_violation_message(overrides, expected):
    violations = validate_create_input(_input(**overrides))
    assert [str(v) for v in violations] == [expected]


def test_blank_short_name_reports_both_rules_in_order():
    violations = validate_create_input(_input(name=" "))
    assert violations == [
        Violation("name", "must not be blank"),
        Violation("name", "Name must be at least 2 characters"),
    ]


def test_all_fields_are_checked_and_sorted_by_field():
    violations = validate_create_input(CreateEmployeeInput())

    assert [v.field for v in violations] == ["age", "name", "salary", "title"]
    assert str(violations[0]) == "age must not be null"


def test_empty_title_breaks_blank_and_length_rules():
    violations = validate_create_input(_input(title=""))
    assert [str(v) for v in violations] == [
        "title must not be blank",
        "title Title must be at least 2 characters",
    ]

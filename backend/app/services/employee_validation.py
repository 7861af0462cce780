from __future__ import annotations

from typing import NamedTuple

from app.models.employee import CreateEmployeeInput

MIN_TEXT_LENGTH = 2
MIN_SALARY = 1
MIN_AGE = 16
MAX_AGE = 75


class Violation(NamedTuple):
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field} {self.message}"


def _check_text(field: str, value: str | None, label: str) -> list[Violation]:
    violations: list[Violation] = []
    if value is None or not value.strip():
        violations.append(Violation(field, "must not be blank"))
    if value is not None and len(value) < MIN_TEXT_LENGTH:
        violations.append(Violation(field, f"{label} must be at least {MIN_TEXT_LENGTH} characters"))
    return violations


def _check_range(field: str, value: int | None, minimum: int, maximum: int | None = None) -> list[Violation]:
    if value is None:
        return [Violation(field, "must not be null")]
    violations: list[Violation] = []
    if value < minimum:
        violations.append(Violation(field, f"must be greater than or equal to {minimum}"))
    if maximum is not None and value > maximum:
        violations.append(Violation(field, f"must be less than or equal to {maximum}"))
    return violations


def validate_create_input(payload: CreateEmployeeInput) -> list[Violation]:
    """Check every field of ``payload`` and return all violations.

    Violations are ordered by field path; within one field they keep the
    order the rules are applied in, so ``violations[0]`` is deterministic.
    """
    violations = [
        *_check_text("name", payload.name, "Name"),
        *_check_range("salary", payload.salary, MIN_SALARY),
        *_check_range("age", payload.age, MIN_AGE, MAX_AGE),
        *_check_text("title", payload.title, "Title"),
    ]
    return sorted(violations, key=lambda v: v.field)

import logging
from collections.abc import Callable
from typing import Any

import httpx
from positions.classifier import classify_response
from positions.outcome import ValidationResult
from utils.constants import (
    EXECUTIVE_TEXT_FIELDS,
    EXPECTED_EXECUTIVE_NAME,
    EXPECTED_POSTAL_CODE,
    EXPECTED_WORK_LOCATION,
)

logger = logging.getLogger(__name__)

Validator = Callable[[Any], ValidationResult]

_MISSING = object()


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def get_field(obj: Any, field: str) -> Any:
    if not isinstance(obj, dict):
        return _MISSING
    return obj.get(field, _MISSING)


def get_object(doc: Any, field: str, label: str, violations: list[str]) -> dict | None:
    value = get_field(doc, field)
    if value is _MISSING:
        violations.append(f"{label} must have '{field}' object")
        return None
    if not isinstance(value, dict):
        violations.append(f"'{field}' must be an object, got {type(value).__name__}")
        return None
    return value


def check_description(doc: Any, violations: list[str]) -> None:
    description = get_field(doc, "description")
    if description is _MISSING:
        violations.append("Job position must have 'description' field")
    elif not is_non_empty_string(description):
        violations.append("Job description must not be empty")


def check_suitable_for_students(doc: Any, violations: list[str]) -> None:
    suitable = get_field(doc, "suitableForStudents")
    if suitable is _MISSING:
        violations.append("Job position must have 'suitableForStudents' field")
    elif not isinstance(suitable, bool):
        violations.append(f"'suitableForStudents' must be a boolean, got {type(suitable).__name__}")
    elif suitable is not True:
        violations.append("Job position must be marked as suitable for students")


def finish(name: str, violations: list[str], doc: Any) -> ValidationResult:
    if violations:
        logger.warning("%s validation failed: %s", name, "; ".join(violations))
        return ValidationResult.failed(violations, doc)
    logger.info("%s validation passed", name)
    return ValidationResult.passed(doc)


def validate_job_description(doc: Any) -> ValidationResult:
    violations: list[str] = []
    check_description(doc, violations)
    check_suitable_for_students(doc, violations)
    return finish("Job description", violations, doc)


def validate_work_location(doc: Any) -> ValidationResult:
    violations: list[str] = []
    location = get_object(doc, "workLocation", "Job", violations)
    if location is not None:
        for field, expected in EXPECTED_WORK_LOCATION.items():
            actual = location.get(field, _MISSING)
            if actual is _MISSING:
                violations.append(f"Work location must have '{field}' field")
            elif actual != expected:
                violations.append(f"Work location '{field}' must be '{expected}', got {actual!r}")

        postal_code = location.get("postalCode", _MISSING)
        if postal_code is _MISSING:
            violations.append("Work location must have 'postalCode' field")
        elif isinstance(postal_code, bool) or not isinstance(postal_code, int):
            violations.append(f"Postal code must be an integer, got {postal_code!r}")
        elif postal_code != EXPECTED_POSTAL_CODE:
            violations.append(f"Postal code must be {EXPECTED_POSTAL_CODE}, got {postal_code}")

    return finish("Work location", violations, doc)


def validate_executive_user(doc: Any) -> ValidationResult:
    violations: list[str] = []
    executive = get_object(doc, "executiveUser", "Job", violations)
    if executive is not None:
        name = executive.get("name", _MISSING)
        if name is _MISSING:
            violations.append("Executive must have 'name' field")
        elif name != EXPECTED_EXECUTIVE_NAME:
            violations.append(f"Executive name must be '{EXPECTED_EXECUTIVE_NAME}', got {name!r}")

        for field in EXECUTIVE_TEXT_FIELDS:
            value = executive.get(field, _MISSING)
            if value is _MISSING:
                violations.append(f"Executive must have '{field}' field")
            elif not is_non_empty_string(value):
                violations.append(f"Executive {field} must not be empty")

    return finish("Executive user", violations, doc)


def validate_complete_posting(doc: Any) -> ValidationResult:
    violations: list[str] = []
    check_description(doc, violations)
    check_suitable_for_students(doc, violations)
    get_object(doc, "workLocation", "Job", violations)
    get_object(doc, "executiveUser", "Job", violations)
    return finish("Complete job posting", violations, doc)


def evaluate_response(response: httpx.Response | None, validator: Validator) -> ValidationResult:
    classification = classify_response(response)
    if not classification.is_pass:
        return classification
    return validator(classification.document)

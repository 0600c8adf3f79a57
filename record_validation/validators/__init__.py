"""Validation layer for Employee and Staff records."""

from record_validation.validators.field_validators import FieldValidators
from record_validation.validators.validation_report import (
    ValidationReport,
    Violation,
    ViolationKind,
)
from record_validation.validators.validator import (
    EmployeeValidator,
    RecordValidator,
    StaffValidator,
    get_validator,
)

__all__ = [
    "EmployeeValidator",
    "StaffValidator",
    "RecordValidator",
    "get_validator",
    "ValidationReport",
    "Violation",
    "ViolationKind",
    "FieldValidators",
]

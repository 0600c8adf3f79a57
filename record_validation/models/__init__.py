"""Data models for the record validation service.

This package contains Pydantic models for the records accepted by the API:
- BaseDataModel: Base class with the shared JSON conventions
- Employee: Employee record with date of birth and age-tiered salary
- Staff: Staff record with a flat salary range
"""

from record_validation.models.base import BaseDataModel
from record_validation.models.employee import Employee
from record_validation.models.staff import Staff

__all__ = [
    "BaseDataModel",
    "Employee",
    "Staff",
]

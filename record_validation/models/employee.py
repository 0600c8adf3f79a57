"""Employee record model."""

import datetime as dt
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from record_validation.models.base import (
    BaseDataModel,
    require_iso_date,
    require_json_number,
)


class Employee(BaseDataModel):
    """An employee record submitted for validation.

    Every field is optional at the type level: a missing required value is
    reported by ``EmployeeValidator`` as a ``MissingField`` violation
    instead of failing while the request body is parsed.

    Attributes:
        name: Full name, 10 to 250 characters
        date_of_birth: Birth date; the employee may be at most 65 years old
        email: Optional email address
        phone: Optional phone number of exactly 10 digits
        hourly_salary: Hourly salary, 50 to 400 and at least 200 for
            employees aged 30 or more

    Example:
        >>> employee = Employee.model_validate({
        ...     "name": "John Smithson",
        ...     "dateOfBirth": "1990-01-01",
        ...     "hourlySalary": 60,
        ... })
        >>> employee.date_of_birth
        datetime.date(1990, 1, 1)
    """

    name: Optional[str] = Field(default=None, description="Full name")
    date_of_birth: Optional[dt.date] = Field(default=None, description="Birth date")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="10-digit phone number")
    hourly_salary: Optional[Union[int, float]] = Field(
        default=None, description="Hourly salary"
    )

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_format(cls, v: Any) -> Any:
        """Only accept ISO calendar dates for the birth date.

        Args:
            v: The raw value from the request body

        Returns:
            The value, unchanged, for pydantic to parse

        Raises:
            ValueError: If the value is a number or a non-ISO string
        """
        return require_iso_date(v)

    @field_validator("hourly_salary", mode="before")
    @classmethod
    def validate_salary_type(cls, v: Any) -> Any:
        """Reject salaries that are not JSON numbers."""
        return require_json_number(v)

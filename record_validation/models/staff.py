"""Staff record model."""

from typing import Any, Optional, Union

from pydantic import Field, field_validator

from record_validation.models.base import BaseDataModel, require_json_number


class Staff(BaseDataModel):
    """A staff record submitted for validation.

    Attributes:
        name: Full name, 10 to 250 characters
        email: Optional email address
        phone: Optional phone number of exactly 10 digits
        hourly_salary: Optional hourly salary, 30 to 400 when present
    """

    name: Optional[str] = Field(default=None, description="Full name")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="10-digit phone number")
    hourly_salary: Optional[Union[int, float]] = Field(
        default=None, description="Hourly salary"
    )

    @field_validator("hourly_salary", mode="before")
    @classmethod
    def validate_salary_type(cls, v: Any) -> Any:
        """Reject salaries that are not JSON numbers."""
        return require_json_number(v)

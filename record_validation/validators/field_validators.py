"""Field-level validators for record data.

This module provides the primitive checks every record rule is built from:
required values, string length, email and phone formats, numeric ranges,
and the date arithmetic used for age computations. Each check returns a
``Violation`` or ``None`` and never raises for bad input.
"""

import datetime as dt
import math
import re
from decimal import Decimal
from typing import Any, Optional, Union

from email_validator import EmailNotValidError, validate_email

from record_validation.validators.validation_report import Violation, ViolationKind

Number = Union[int, float, Decimal]

# Exactly ten ASCII digits, no separators or country code
PHONE_PATTERN = re.compile(r"\d{10}", re.ASCII)


def is_missing(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def years_before(reference: dt.date, years: int) -> dt.date:
    """Return the date ``years`` calendar years before ``reference``.

    Month and day are kept. 29 February maps to 28 February when the target
    year is not a leap year.

    Args:
        reference: The date to count back from
        years: Number of whole years

    Returns:
        The shifted date
    """
    target_year = reference.year - years
    try:
        return reference.replace(year=target_year)
    except ValueError:
        return reference.replace(year=target_year, day=28)


class FieldValidators:
    """Collection of field-level checks.

    Optional fields are expressed by skipping the call for a missing value;
    every check other than ``check_required`` treats a missing value as
    passing so that absence is reported once, as ``MissingField``.
    """

    @staticmethod
    def check_required(
        value: Any,
        field_name: str,
        message: Optional[str] = None,
    ) -> Optional[Violation]:
        """Check that a mandatory value is present and not blank.

        Args:
            value: The value to check
            field_name: Wire name of the field
            message: Optional message override

        Returns:
            A ``MissingField`` violation, or None
        """
        if is_missing(value):
            return Violation(
                field_name,
                ViolationKind.MISSING_FIELD,
                message or f"{field_name} is required",
                value,
            )
        return None

    @staticmethod
    def check_length(
        value: Optional[str],
        field_name: str,
        min_length: int,
        max_length: int,
    ) -> Optional[Violation]:
        """Check that a string length lies within [min_length, max_length].

        Args:
            value: The string to check
            field_name: Wire name of the field
            min_length: Minimum length (inclusive)
            max_length: Maximum length (inclusive)

        Returns:
            A ``LengthOutOfRange`` or ``InvalidFormat`` violation, or None
        """
        if is_missing(value):
            return None

        if not isinstance(value, str):
            return Violation(
                field_name,
                ViolationKind.INVALID_FORMAT,
                f"Expected string, got {type(value).__name__}",
                value,
            )

        if not min_length <= len(value) <= max_length:
            return Violation(
                field_name,
                ViolationKind.LENGTH_OUT_OF_RANGE,
                f"Length must be between {min_length} and {max_length} "
                f"characters (got {len(value)})",
                value,
            )
        return None

    @staticmethod
    def check_email(value: Optional[str], field_name: str) -> Optional[Violation]:
        """Check email-address syntax.

        Only syntax is checked. The domain is not resolved and need not be a
        public one (``user@domain`` passes), but special-use names such as
        ``localhost`` are still rejected.

        Args:
            value: The address to check
            field_name: Wire name of the field

        Returns:
            An ``InvalidFormat`` violation, or None
        """
        if is_missing(value):
            return None

        if not isinstance(value, str):
            return Violation(
                field_name,
                ViolationKind.INVALID_FORMAT,
                f"Expected string, got {type(value).__name__}",
                value,
            )

        try:
            validate_email(
                value, check_deliverability=False, globally_deliverable=False
            )
        except EmailNotValidError as e:
            return Violation(
                field_name,
                ViolationKind.INVALID_FORMAT,
                f"Email address is not valid: {e}",
                value,
            )
        return None

    @staticmethod
    def check_phone(value: Optional[str], field_name: str) -> Optional[Violation]:
        """Check that a phone number is exactly 10 decimal digits.

        Args:
            value: The phone number to check
            field_name: Wire name of the field

        Returns:
            An ``InvalidFormat`` violation, or None
        """
        if is_missing(value):
            return None

        if not isinstance(value, str) or not PHONE_PATTERN.fullmatch(value):
            return Violation(
                field_name,
                ViolationKind.INVALID_FORMAT,
                "Phone must be exactly 10 digits",
                value,
            )
        return None

    @staticmethod
    def check_range(
        value: Optional[Number],
        field_name: str,
        min_val: Number,
        max_val: Number,
    ) -> Optional[Violation]:
        """Check that a number lies within [min_val, max_val].

        Args:
            value: The number to check
            field_name: Wire name of the field
            min_val: Minimum allowed value (inclusive)
            max_val: Maximum allowed value (inclusive)

        Returns:
            An ``OutOfRange`` or ``InvalidFormat`` violation, or None
        """
        if value is None:
            return None

        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            return Violation(
                field_name,
                ViolationKind.INVALID_FORMAT,
                f"Expected number, got {type(value).__name__}",
                value,
            )

        # NaN compares false against both bounds
        if isinstance(value, float) and math.isnan(value):
            in_range = False
        else:
            in_range = min_val <= value <= max_val

        if not in_range:
            return Violation(
                field_name,
                ViolationKind.OUT_OF_RANGE,
                f"Value must be between {min_val} and {max_val}",
                value,
            )
        return None

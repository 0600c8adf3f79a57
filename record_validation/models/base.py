"""Base model for all record models.

This module provides a base Pydantic model with the JSON conventions shared
by every record: camelCase keys on the wire, snake_case attributes in
Python, unknown keys ignored, and immutability after parsing.
"""

import datetime as dt
import re
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def require_json_number(value: Any) -> Any:
    """Reject values pydantic would otherwise coerce into a number.

    Numeric strings and booleans are not numbers on the wire, so they must
    fail parsing instead of being converted.

    Raises:
        ValueError: If the value is neither None nor an int or float
    """
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a number, got {type(value).__name__}")
    return value


def require_iso_date(value: Any) -> Any:
    """Only let ``YYYY-MM-DD`` strings and date objects through.

    Integers and timestamp strings are rejected rather than read as Unix
    timestamps.

    Raises:
        ValueError: If the value is not None, a date or an ISO date string
    """
    if value is None or isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError("Expected a date in YYYY-MM-DD format")
    return value


class BaseDataModel(BaseModel):
    """Base class for all record models.

    The models only coerce JSON types. Business constraints are applied by
    the validators in ``record_validation.validators`` so that each rule
    exists exactly once.

    Example:
        >>> class Person(BaseDataModel):
        ...     full_name: str
        >>> person = Person.model_validate({"fullName": "Alice"})
        >>> person.full_name
        'Alice'
        >>> person.to_payload()
        {'fullName': 'Alice'}
    """

    model_config = ConfigDict(
        # Wire format uses camelCase keys
        alias_generator=to_camel,
        # Python callers may still use attribute names
        populate_by_name=True,
        # Unknown keys in the request body are dropped
        extra="ignore",
        # Records are never mutated once received
        frozen=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the record back to the JSON shape it arrived in.

        Fields the client did not send are left out, so a valid record is
        echoed with exactly the keys it was submitted with (minus unknown
        keys, which were never parsed).

        Returns:
            Dictionary keyed by wire names, with dates as ISO strings
        """
        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)

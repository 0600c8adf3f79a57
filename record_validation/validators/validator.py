"""Validator orchestrators for Employee and Staff records.

This module provides the validator classes that run a record type's full
rule set and collect the results into a single ``ValidationReport``.
"""

import datetime as dt
from typing import Callable, Dict, Optional, Sequence, Type

from record_validation.config.logging_config import get_logger
from record_validation.models import BaseDataModel, Employee, Staff
from record_validation.validators.business_validators import (
    EMPLOYEE_RULES,
    STAFF_RULES,
    Rule,
)
from record_validation.validators.validation_report import ValidationReport

logger = get_logger(__name__)

TodayProvider = Callable[[], dt.date]


class RecordValidator:
    """Runs a fixed sequence of rules against a record.

    Every rule runs on every call; a failing rule never prevents the
    following ones from being evaluated. The record is only read.

    Attributes:
        record_type: Name used in log messages
        rules: The rules applied, in reporting order
    """

    record_type = "record"
    model: Type[BaseDataModel] = BaseDataModel
    default_rules: Sequence[Rule] = ()

    def __init__(
        self,
        today: Optional[TodayProvider] = None,
        rules: Optional[Sequence[Rule]] = None,
    ) -> None:
        """Initialize the validator.

        Args:
            today: Callable returning the reference date for age rules
                (default: ``datetime.date.today``)
            rules: Rules to apply instead of the record type's defaults
        """
        self._today = today or dt.date.today
        self.rules = tuple(rules) if rules is not None else tuple(self.default_rules)

    def validate(self, record: BaseDataModel) -> ValidationReport:
        """Validate a single record.

        Args:
            record: The record to validate

        Returns:
            ValidationReport holding every violation found

        Example:
            >>> report = StaffValidator().validate(Staff(name="Short"))
            >>> [str(kind) for kind in report.kinds("name")]
            ['LengthOutOfRange']
        """
        today = self._today()
        report = ValidationReport()

        for rule in self.rules:
            report.add(rule(record, today))

        logger.debug(
            "Validated %s record: %s",
            self.record_type,
            report.summary(),
            extra={"violation_count": report.violation_count},
        )
        return report


class EmployeeValidator(RecordValidator):
    """Validator for employee records, including the age-based rules."""

    record_type = "employee"
    model = Employee
    default_rules = EMPLOYEE_RULES


class StaffValidator(RecordValidator):
    """Validator for staff records."""

    record_type = "staff"
    model = Staff
    default_rules = STAFF_RULES


VALIDATORS: Dict[str, Type[RecordValidator]] = {
    EmployeeValidator.record_type: EmployeeValidator,
    StaffValidator.record_type: StaffValidator,
}


def get_validator(
    record_type: str, today: Optional[TodayProvider] = None
) -> RecordValidator:
    """Create the validator registered for a record type.

    Args:
        record_type: ``employee`` or ``staff``
        today: Optional reference-date provider

    Returns:
        A validator instance

    Raises:
        ValueError: If the record type is unknown
    """
    try:
        validator_cls = VALIDATORS[record_type.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown record type: {record_type}. "
            f"Must be one of {', '.join(sorted(VALIDATORS))}"
        ) from None
    return validator_cls(today=today)

"""Business rules for Employee and Staff records.

Every rule is a named function ``rule(record, today) -> Optional[Violation]``
where ``today`` is the reference date for age computations. Rules are
independent of each other; the orchestrators in ``validator.py`` run a fixed
tuple of them per record type and collect every violation.
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Callable, Optional, Tuple

from record_validation.validators.field_validators import FieldValidators, years_before
from record_validation.validators.validation_report import Violation, ViolationKind

Rule = Callable[[Any, dt.date], Optional[Violation]]

# Wire names of the validated fields
NAME = "name"
DATE_OF_BIRTH = "dateOfBirth"
EMAIL = "email"
PHONE = "phone"
HOURLY_SALARY = "hourlySalary"

NAME_MIN_LENGTH = 10
NAME_MAX_LENGTH = 250

EMPLOYEE_MIN_SALARY = 50
EMPLOYEE_MAX_SALARY = 400
STAFF_MIN_SALARY = 30
STAFF_MAX_SALARY = 400

# Employees aged SENIOR_AGE or more must earn at least SENIOR_MIN_SALARY.
SENIOR_AGE = 30
SENIOR_MIN_SALARY = 200
JUNIOR_MIN_SALARY = 50

MAX_EMPLOYEE_AGE = 65


def _birth_date(record: Any) -> Optional[dt.date]:
    value = getattr(record, "date_of_birth", None)
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return None


def _salary(record: Any) -> Optional[float]:
    value = getattr(record, "hourly_salary", None)
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    return value


def is_senior(date_of_birth: dt.date, today: dt.date) -> bool:
    """Return True if the person is SENIOR_AGE years old or more on ``today``.

    A person whose birthday falls exactly on the boundary date is senior.
    """
    return date_of_birth <= years_before(today, SENIOR_AGE)


def minimum_salary_for(date_of_birth: dt.date, today: dt.date) -> int:
    """Return the age-tiered minimum hourly salary for an employee."""
    return SENIOR_MIN_SALARY if is_senior(date_of_birth, today) else JUNIOR_MIN_SALARY


# Rules shared by both record types


def name_required(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_required(record.name, NAME, "Name is required")


def name_length(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_length(
        record.name, NAME, NAME_MIN_LENGTH, NAME_MAX_LENGTH
    )


def email_format(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_email(record.email, EMAIL)


def phone_format(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_phone(record.phone, PHONE)


# Employee rules


def date_of_birth_required(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_required(
        record.date_of_birth, DATE_OF_BIRTH, "Date of birth is required"
    )


def age_limit(record: Any, today: dt.date) -> Optional[Violation]:
    """Reject employees older than MAX_EMPLOYEE_AGE.

    Born exactly MAX_EMPLOYEE_AGE years before ``today`` still passes.
    """
    date_of_birth = _birth_date(record)
    if date_of_birth is None:
        return None

    earliest_allowed = years_before(today, MAX_EMPLOYEE_AGE)
    if date_of_birth < earliest_allowed:
        return Violation(
            DATE_OF_BIRTH,
            ViolationKind.AGE_LIMIT_EXCEEDED,
            f"Employee must be at most {MAX_EMPLOYEE_AGE} years old "
            f"(born on or after {earliest_allowed.isoformat()})",
            record.date_of_birth,
        )
    return None


def employee_salary_required(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_required(
        record.hourly_salary, HOURLY_SALARY, "Hourly salary is required"
    )


def employee_salary_range(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_range(
        record.hourly_salary, HOURLY_SALARY, EMPLOYEE_MIN_SALARY, EMPLOYEE_MAX_SALARY
    )


def salary_tier(record: Any, today: dt.date) -> Optional[Violation]:
    """Enforce the age-tiered salary floor.

    Runs in addition to ``employee_salary_range``; a salary can violate both.
    Skipped when either the birth date or the salary is unusable, since
    those fields report their own violations.
    """
    date_of_birth = _birth_date(record)
    salary = _salary(record)
    if date_of_birth is None or salary is None:
        return None

    floor = minimum_salary_for(date_of_birth, today)
    if not salary >= floor:
        tier = "senior" if floor == SENIOR_MIN_SALARY else "junior"
        return Violation(
            HOURLY_SALARY,
            ViolationKind.SALARY_TIER_VIOLATION,
            f"Minimum hourly salary for a {tier} employee is {floor}",
            record.hourly_salary,
        )
    return None


# Staff rules


def staff_salary_range(record: Any, today: dt.date) -> Optional[Violation]:
    return FieldValidators.check_range(
        record.hourly_salary, HOURLY_SALARY, STAFF_MIN_SALARY, STAFF_MAX_SALARY
    )


EMPLOYEE_RULES: Tuple[Rule, ...] = (
    name_required,
    name_length,
    date_of_birth_required,
    age_limit,
    email_format,
    phone_format,
    employee_salary_required,
    employee_salary_range,
    salary_tier,
)

STAFF_RULES: Tuple[Rule, ...] = (
    name_required,
    name_length,
    email_format,
    phone_format,
    staff_salary_range,
)

"""Validation report for collecting and formatting rule violations."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class ViolationKind(str, Enum):
    """Kinds of rule violations a record can produce.

    All kinds describe client input errors.
    """

    MISSING_FIELD = "MissingField"
    LENGTH_OUT_OF_RANGE = "LengthOutOfRange"
    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    SALARY_TIER_VIOLATION = "SalaryTierViolation"
    AGE_LIMIT_EXCEEDED = "AgeLimitExceeded"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Violation:
    """A single rule-check failure.

    Attributes:
        field: Wire name of the offending field (e.g. ``hourlySalary``)
        kind: The kind of violation
        message: Human-readable description of the failure
        value: The value that failed the check
    """

    field: str
    kind: ViolationKind
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"[{self.kind}] {self.field}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        """Convert to the ``(field, kind, message)`` shape used in responses.

        The offending value is left out so that personal data is not echoed
        into error payloads or logs.
        """
        return {"field": self.field, "kind": self.kind.value, "message": self.message}


class ValidationReport:
    """Collects the violations found for one record.

    Example:
        >>> report = ValidationReport()
        >>> report.add(Violation("phone", ViolationKind.INVALID_FORMAT, "Phone is not valid."))
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 violation(s): InvalidFormat=1'
    """

    def __init__(self) -> None:
        self.violations: List[Violation] = []

    @classmethod
    def from_parse_errors(cls, errors: Sequence[Dict[str, Any]]) -> "ValidationReport":
        """Build a report from pydantic parsing errors.

        A missing value is a ``MissingField``; every other parsing error
        (wrong JSON type, unparseable date) is an ``InvalidFormat`` on the
        offending field. A leading ``body`` location segment, as added by
        FastAPI, is dropped.

        Args:
            errors: The output of ``ValidationError.errors()``

        Returns:
            A report with one violation per error
        """
        report = cls()
        for error in errors:
            parts = [str(part) for part in error.get("loc", ()) if part != "body"]
            kind = (
                ViolationKind.MISSING_FIELD
                if error.get("type") == "missing"
                else ViolationKind.INVALID_FORMAT
            )
            report.add_violation(
                ".".join(parts) or "body",
                kind,
                str(error.get("msg", "Invalid value")),
                error.get("input"),
            )
        return report

    @property
    def violation_count(self) -> int:
        """Number of violations in the report."""
        return len(self.violations)

    def is_valid(self) -> bool:
        """Return True when no rule was violated."""
        return not self.violations

    def add(self, violation: Optional[Violation]) -> None:
        """Add a rule outcome to the report.

        Args:
            violation: Result of a rule; ``None`` means the rule passed
        """
        if violation is not None:
            self.violations.append(violation)

    def add_violation(
        self,
        field: str,
        kind: ViolationKind,
        message: str,
        value: Any = None,
    ) -> None:
        """Build and add a violation.

        Args:
            field: Wire name of the offending field
            kind: Kind of violation
            message: Human-readable description
            value: The value that failed the check
        """
        self.violations.append(Violation(field, kind, message, value))

    def for_field(self, field: str) -> List[Violation]:
        """Get all violations reported on one field."""
        return [v for v in self.violations if v.field == field]

    def kinds(self, field: Optional[str] = None) -> List[ViolationKind]:
        """Get the violation kinds, optionally restricted to one field."""
        violations = self.for_field(field) if field else self.violations
        return [v.kind for v in violations]

    def to_list(self) -> List[Dict[str, str]]:
        """Serialize all violations for a response body."""
        return [v.to_dict() for v in self.violations]

    def summary(self) -> str:
        """Get a one-line summary with counts per violation kind.

        Returns:
            Summary string, or "No violations found" for a valid record
        """
        if not self.violations:
            return "No violations found"

        counts = Counter(v.kind.value for v in self.violations)
        per_kind = ", ".join(f"{kind}={count}" for kind, count in sorted(counts.items()))
        return f"{self.violation_count} violation(s): {per_kind}"

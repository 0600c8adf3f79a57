"""Glue between the routers and the validators."""

import datetime as dt
from typing import Any, Dict

from record_validation.api.errors import RecordValidationError
from record_validation.config.logging_config import get_logger
from record_validation.models import BaseDataModel
from record_validation.utils.logging_utils import (
    LogContext,
    generate_correlation_id,
    sanitize_sensitive_data,
)
from record_validation.validators.validator import get_validator

logger = get_logger(__name__)


def validate_record(
    record_type: str, record: BaseDataModel, today: dt.date
) -> Dict[str, Any]:
    """Validate a parsed record and return it for echoing.

    Args:
        record_type: ``employee`` or ``staff``
        record: The parsed request body
        today: Reference date for age rules

    Returns:
        The record in its wire shape, unchanged

    Raises:
        RecordValidationError: If any rule is violated
    """
    with LogContext(correlation_id=generate_correlation_id(), record_type=record_type):
        validator = get_validator(record_type, today=lambda: today)
        report = validator.validate(record)
        payload = record.to_payload()

        if not report.is_valid():
            logger.info(
                "Rejected %s record: %s",
                record_type,
                report.summary(),
                extra={
                    "record": sanitize_sensitive_data(payload),
                    "violations": report.to_list(),
                },
            )
            raise RecordValidationError(record_type, report)

        logger.info("Accepted %s record", record_type)
        return payload

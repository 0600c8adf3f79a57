"""Error types and exception handlers for the HTTP interface."""

from typing import Any, Dict, List

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from record_validation.config.logging_config import get_logger
from record_validation.validators.validation_report import (
    ValidationReport,
    ViolationKind,
)

logger = get_logger(__name__)

BAD_REQUEST = 400
UNPROCESSABLE_ENTITY = 422
VALIDATION_FAILED = "Record validation failed"


class RecordValidationError(Exception):
    """Raised when a submitted record violates one or more rules.

    Attributes:
        record_type: ``employee`` or ``staff``
        report: The report holding every violation
    """

    def __init__(self, record_type: str, report: ValidationReport):
        self.record_type = record_type
        self.report = report
        super().__init__(f"Invalid {record_type} record: {report.summary()}")


def error_body(violations: List[Dict[str, str]]) -> Dict[str, Any]:
    """Build the error envelope shared by all 422 responses."""
    return {"detail": VALIDATION_FAILED, "violations": violations}


async def record_validation_error_handler(
    request: Request, exc: RecordValidationError
) -> JSONResponse:
    """Render a failed validation report as a 422 response."""
    return JSONResponse(
        status_code=UNPROCESSABLE_ENTITY,
        content=error_body(exc.report.to_list()),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a body that could not be parsed into a record as a 422 response."""
    report = ValidationReport.from_parse_errors(exc.errors())
    logger.info(
        "Rejected unparseable request to %s: %s",
        request.url.path,
        report.summary(),
    )
    return JSONResponse(
        status_code=UNPROCESSABLE_ENTITY,
        content=error_body(report.to_list()),
    )


async def body_decode_error_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Render a body that could not be decoded as a 422 response.

    FastAPI answers a body it cannot read at all (e.g. bytes that are not
    UTF-8) with a bare 400. That case gets the same envelope as any other
    unparseable body; every other HTTP error keeps the default rendering.
    """
    if exc.status_code != BAD_REQUEST:
        return await http_exception_handler(request, exc)

    report = ValidationReport()
    report.add_violation("body", ViolationKind.INVALID_FORMAT, str(exc.detail))
    logger.info(
        "Rejected undecodable request to %s: %s",
        request.url.path,
        report.summary(),
    )
    return JSONResponse(
        status_code=UNPROCESSABLE_ENTITY,
        content=error_body(report.to_list()),
    )

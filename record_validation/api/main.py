"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from record_validation import __version__
from record_validation.api.dependencies import get_settings
from record_validation.api.errors import (
    RecordValidationError,
    body_decode_error_handler,
    record_validation_error_handler,
    request_validation_error_handler,
)
from record_validation.api.routers import employees, staff, system
from record_validation.config.logging_config import get_logger
from record_validation.config.settings import RecordValidationConfig, get_config

logger = get_logger(__name__)

tags_metadata = [
    {"name": "System", "description": "Service health and metadata."},
    {"name": "Employees", "description": "Employee record validation."},
    {"name": "Staff", "description": "Staff record validation."},
]


def create_app(settings: Optional[RecordValidationConfig] = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Configuration to use (default: the global configuration)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_config()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Validates Employee and Staff records against business rules.",
        openapi_tags=tags_metadata,
        debug=settings.debug,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_exception_handler(RecordValidationError, record_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, body_decode_error_handler)

    app.include_router(system.router, prefix=settings.api_prefix)
    app.include_router(employees.router, prefix=settings.api_prefix)
    app.include_router(staff.router, prefix=settings.api_prefix)

    logger.debug(
        "Created application with prefix %r (%s)",
        settings.api_prefix,
        settings.environment,
    )
    return app

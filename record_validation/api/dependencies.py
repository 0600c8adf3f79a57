"""FastAPI dependencies shared by the routers."""

import datetime as dt

from record_validation.config.settings import RecordValidationConfig, get_config


def get_settings() -> RecordValidationConfig:
    """Return the application configuration."""
    return get_config()


def get_reference_date() -> dt.date:
    """Return the date age rules are evaluated against.

    Overridden in tests through ``app.dependency_overrides``.
    """
    return dt.date.today()

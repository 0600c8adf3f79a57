"""Tests for logging utilities."""

import json
import logging

import pytest

from record_validation.config.logging_config import (
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from record_validation.utils.logging_utils import (
    REDACTED,
    LogContext,
    generate_correlation_id,
    sanitize_sensitive_data,
)


@pytest.fixture
def json_log_file(tmp_path):
    """Route JSON logs to a temporary file and return a reader for it."""
    log_file = tmp_path / "records.log"
    configure_logging(
        LoggingConfig(
            log_level="INFO",
            log_format="json",
            enable_console=False,
            enable_file=True,
            log_file=str(log_file),
        )
    )

    def read_entries():
        for handler in logging.getLogger().handlers:
            handler.flush()
        return [json.loads(line) for line in log_file.read_text().splitlines()]

    yield read_entries
    reset_logging()


class TestCorrelationId:
    """Test correlation ID functions."""

    def test_generate_correlation_id_format(self):
        """Test correlation ID is a valid UUID."""
        correlation_id = generate_correlation_id()

        assert isinstance(correlation_id, str)
        assert len(correlation_id) == 36  # UUID format
        assert correlation_id.count("-") == 4

    def test_generate_unique_correlation_ids(self):
        """Test each correlation ID is unique."""
        ids = {generate_correlation_id() for _ in range(100)}

        assert len(ids) == 100


class TestLogContext:
    """Test LogContext context manager."""

    def test_context_fields_in_logs(self, json_log_file):
        """Test context fields appear in log output."""
        logger = get_logger("test_module")

        with LogContext(correlation_id="abc-123", record_type="employee"):
            logger.info("Validating record")

        entry = json_log_file()[0]
        assert entry["correlation_id"] == "abc-123"
        assert entry["record_type"] == "employee"

    def test_nested_context(self, json_log_file):
        """Test nested contexts merge and then restore the outer fields."""
        logger = get_logger("test_module")

        with LogContext(correlation_id="outer", record_type="employee"):
            with LogContext(record_type="staff"):
                logger.info("Inner message")
            logger.info("Outer message")

        inner, outer = json_log_file()
        assert inner["correlation_id"] == "outer"
        assert inner["record_type"] == "staff"
        assert outer["record_type"] == "employee"

    def test_context_cleanup(self, json_log_file):
        """Test context fields are removed after the block exits."""
        logger = get_logger("test_module")

        with LogContext(record_type="staff"):
            logger.info("Inside")
        logger.info("Outside")

        inside, outside = json_log_file()
        assert inside["record_type"] == "staff"
        assert "record_type" not in outside

    def test_context_cleared_on_exception(self, json_log_file):
        """Test context is restored when the block raises."""
        with pytest.raises(RuntimeError):
            with LogContext(correlation_id="failing"):
                raise RuntimeError("boom")
        get_logger("test_module").info("After failure")

        entry = json_log_file()[0]
        assert "correlation_id" not in entry


class TestSanitizeSensitiveData:
    """Test sanitize_sensitive_data function."""

    def test_personal_fields_redacted(self):
        """Test contact details, birth date and salary are redacted."""
        data = {
            "name": "John Smithson",
            "dateOfBirth": "2000-03-10",
            "email": "john@x.com",
            "phone": "1234567890",
            "hourlySalary": 60,
        }

        sanitized = sanitize_sensitive_data(data)

        assert sanitized == {
            "name": "John Smithson",
            "dateOfBirth": REDACTED,
            "email": REDACTED,
            "phone": REDACTED,
            "hourlySalary": REDACTED,
        }

    def test_snake_case_keys_redacted(self):
        """Test snake_case spellings are matched too."""
        sanitized = sanitize_sensitive_data(
            {"date_of_birth": "2000-03-10", "hourly_salary": 60}
        )

        assert sanitized == {"date_of_birth": REDACTED, "hourly_salary": REDACTED}

    def test_secrets_redacted(self):
        """Test credentials are redacted."""
        sanitized = sanitize_sensitive_data(
            {"password": "hunter2", "api_token": "t", "Authorization": "Bearer x"}
        )

        assert set(sanitized.values()) == {REDACTED}

    def test_missing_values_kept(self):
        """Test None stays None so absent fields remain visible."""
        sanitized = sanitize_sensitive_data({"email": None, "name": None})

        assert sanitized == {"email": None, "name": None}

    def test_nested_dict(self):
        """Test nested dictionaries are sanitized recursively."""
        data = {"record": {"name": "Jane Staffordson", "phone": "0987654321"}}

        sanitized = sanitize_sensitive_data(data)

        assert sanitized == {"record": {"name": "Jane Staffordson", "phone": REDACTED}}

    def test_original_not_modified(self):
        """Test the input dictionary is left untouched."""
        data = {"email": "john@x.com"}

        sanitize_sensitive_data(data)

        assert data == {"email": "john@x.com"}

    def test_non_dict_returned_unchanged(self):
        """Test non-dict input is passed through."""
        assert sanitize_sensitive_data("plain") == "plain"

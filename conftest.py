"""
Global pytest configuration and fixtures.
"""
import datetime as dt
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from record_validation.api.dependencies import get_reference_date
from record_validation.api.main import create_app
from record_validation.config import RecordValidationConfig, reload_config

# Fixed reference date so age-based rules do not drift with the calendar
REFERENCE_DATE = dt.date(2024, 6, 15)


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'APP_NAME': 'Record Validation API (test)',
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'API_PREFIX': '',
        'HOST': '127.0.0.1',
        'PORT': '8001',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import record_validation.config.settings
    record_validation.config.settings._config = None

    yield test_env_vars

    record_validation.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> RecordValidationConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def today() -> dt.date:
    """Reference date used by age rules in tests."""
    return REFERENCE_DATE


@pytest.fixture
def client(test_config, today):
    """HTTP client for an application pinned to the reference date."""
    app = create_app(test_config)
    app.dependency_overrides[get_reference_date] = lambda: today
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def employee_payload() -> Dict[str, Any]:
    """A valid junior employee as of REFERENCE_DATE."""
    return {
        'name': 'John Smithson',
        'dateOfBirth': '2000-03-10',
        'email': 'john@x.com',
        'phone': '1234567890',
        'hourlySalary': 60,
    }


@pytest.fixture
def staff_payload() -> Dict[str, Any]:
    """A valid staff record."""
    return {
        'name': 'Jane Staffordson',
        'email': 'jane.staffordson@company.com',
        'phone': '0987654321',
        'hourlySalary': 35.5,
    }

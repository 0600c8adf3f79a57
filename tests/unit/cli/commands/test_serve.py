"""Unit tests for the serve command."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from record_validation.cli.commands.serve import serve


class TestServeCommand:
    """Test suite for the serve command."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_serve_uses_configured_address(self, runner, mock_env):
        """Test host and port default to the configuration."""
        with patch("record_validation.cli.commands.serve.uvicorn.run") as mock_run, patch(
            "record_validation.cli.commands.serve.configure_logging"
        ):
            result = runner.invoke(serve, [])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert mock_run.call_args.args[0] == "record_validation.api.main:create_app"
        assert kwargs["factory"] is True
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8001
        assert kwargs["log_config"] is None

    def test_serve_options_override_configuration(self, runner, mock_env):
        """Test --host and --port take precedence."""
        with patch("record_validation.cli.commands.serve.uvicorn.run") as mock_run, patch(
            "record_validation.cli.commands.serve.configure_logging"
        ):
            result = runner.invoke(serve, ["--host", "0.0.0.0", "--port", "9000"])

        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 9000
        assert "http://0.0.0.0:9000" in result.output

    def test_invalid_configuration(self, runner, mock_env, monkeypatch):
        """Test an invalid setting exits with the configuration error code."""
        monkeypatch.setenv("PORT", "99999")

        with patch("record_validation.cli.commands.serve.uvicorn.run") as mock_run:
            result = runner.invoke(serve, [])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output
        mock_run.assert_not_called()

    def test_invalid_log_format(self, runner, mock_env, monkeypatch):
        """Test an invalid LOG_FORMAT exits with the configuration error code."""
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with patch("record_validation.cli.commands.serve.uvicorn.run") as mock_run:
            result = runner.invoke(serve, [])

        assert result.exit_code == 1
        assert "LOG_" in result.output
        mock_run.assert_not_called()

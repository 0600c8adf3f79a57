"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click

from record_validation.cli.utils.formatters import format_error, format_warning

EXIT_CONFIGURATION_ERROR = 1
EXIT_INPUT_ERROR = 2
EXIT_INVALID_RECORD = 3
EXIT_ABORTED = 130  # Standard exit code for SIGINT
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    exit_code = EXIT_UNEXPECTED
    label = "Error"

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    exit_code = EXIT_CONFIGURATION_ERROR
    label = "Configuration Error"


class InputError(CLIError):
    """The record could not be read or is not a JSON object."""

    exit_code = EXIT_INPUT_ERROR
    label = "Input Error"


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report a CLI error on stderr.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code for the error type
    """
    if isinstance(error, CLIError):
        click.echo(format_error(f"{error.label}: {error.message}"), err=True)
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)
        return error.exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return EXIT_ABORTED

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
    click.echo(str(error), err=True)

    if debug:
        click.echo("\nFull stack trace:", err=True)
        click.echo(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            err=True,
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"), err=True)

    return EXIT_UNEXPECTED


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is None:
                return False
            # Deliberate exits carry their own code
            if isinstance(exc_val, (SystemExit, click.exceptions.Exit)):
                return False
            sys.exit(handle_cli_error(exc_val, self.show_debug))

    return ErrorHandler(debug)

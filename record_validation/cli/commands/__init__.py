"""CLI commands."""

from record_validation.cli.commands.serve import serve
from record_validation.cli.commands.validate import validate_record

__all__ = ["serve", "validate_record"]

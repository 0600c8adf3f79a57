"""Validate record command."""

import json
from datetime import datetime
from typing import IO, Any, Dict, List, Optional

import click
from pydantic import ValidationError

from record_validation.cli.error_handlers import (
    EXIT_INVALID_RECORD,
    InputError,
    with_error_handling,
)
from record_validation.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_table,
)
from record_validation.validators.validation_report import ValidationReport
from record_validation.validators.validator import VALIDATORS, get_validator


def _read_record(source: IO[str]) -> Dict[str, Any]:
    try:
        payload = json.load(source)
    except json.JSONDecodeError as e:
        raise InputError(
            f"{source.name} is not valid JSON: {e}",
            recovery_hint="The file must contain a single JSON object",
        ) from e

    if not isinstance(payload, dict):
        raise InputError(
            f"Expected a JSON object, got {type(payload).__name__}",
            recovery_hint="Batches are not supported; validate one record per call",
        )
    return payload


def _check(
    record_type: str, payload: Dict[str, Any], today: Optional[datetime]
) -> List[Dict[str, str]]:
    """Parse and validate a payload, returning every violation found."""
    reference = today.date() if today else None
    validator = get_validator(record_type, today=(lambda: reference) if reference else None)

    try:
        record = validator.model.model_validate(payload)
    except ValidationError as e:
        return ValidationReport.from_parse_errors(e.errors()).to_list()

    return validator.validate(record).to_list()


@click.command(name="validate")
@click.argument(
    "record_type",
    type=click.Choice(sorted(VALIDATORS), case_sensitive=False),
)
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference date for age rules (YYYY-MM-DD, default: today)",
)
@click.option(
    "--output",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
@click.pass_context
def validate_record(
    ctx: click.Context,
    record_type: str,
    source: IO[str],
    today: Optional[datetime],
    output: str,
    debug: bool,
):
    """Validate one Employee or Staff record read from a JSON file.

    SOURCE defaults to standard input. Exits with code 3 if the record
    violates any rule.

    Example:
        records-cli validate employee employee.json
        records-cli validate staff - --output json < staff.json
        records-cli validate employee employee.json --today 2024-01-01
    """
    with with_error_handling(debug):
        record_type = record_type.lower()
        payload = _read_record(source)
        violations = _check(record_type, payload, today)

        if output.lower() == "json":
            click.echo(
                json.dumps(
                    {
                        "recordType": record_type,
                        "valid": not violations,
                        "violations": violations,
                    },
                    indent=2,
                )
            )
        elif violations:
            click.echo(format_info(f"Validating {record_type} record from {source.name}"))
            click.echo()
            click.echo(
                format_table(
                    ["Field", "Kind", "Message"],
                    [[v["field"], v["kind"], v["message"]] for v in violations],
                )
            )
            click.echo()
            click.echo(
                format_error(
                    f"Validation failed with {len(violations)} violation(s)"
                )
            )
        else:
            click.echo(format_success(f"Valid {record_type} record"))

        if violations:
            ctx.exit(EXIT_INVALID_RECORD)

"""Record Validation CLI.

This module provides a command-line interface for the record validation
service. It can validate a single record file and run the HTTP API.
"""

import click

from record_validation import __version__
from record_validation.cli.commands.serve import serve
from record_validation.cli.commands.validate import validate_record


@click.group(help="Record Validation CLI - Validate Employee and Staff records")
@click.version_option(version=__version__)
def cli():
    """Record Validation CLI main entry point."""
    pass


cli.add_command(validate_record)
cli.add_command(serve)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

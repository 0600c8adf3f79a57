"""Serve command: run the HTTP application."""

from typing import Optional

import click
import uvicorn
from pydantic import ValidationError

from record_validation.cli.error_handlers import ConfigurationError, with_error_handling
from record_validation.cli.utils.formatters import format_info
from record_validation.config.logging_config import LoggingConfig, configure_logging
from record_validation.config.settings import get_config, reload_config


@click.command(name="serve")
@click.option("--host", type=str, default=None, help="Bind address (default: HOST)")
@click.option("--port", type=int, default=None, help="Bind port (default: PORT)")
@click.option("--reload", is_flag=True, help="Restart on code changes (development)")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Load configuration from this .env file",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def serve(
    host: Optional[str],
    port: Optional[int],
    reload: bool,
    env_file: Optional[str],
    debug: bool,
):
    """Run the record validation API.

    Example:
        records-cli serve
        records-cli serve --host 0.0.0.0 --port 8080
    """
    with with_error_handling(debug):
        try:
            settings = reload_config(env_file) if env_file else get_config()
        except ValidationError as e:
            raise ConfigurationError(
                str(e),
                recovery_hint="Check the variables in your environment or .env file",
            ) from e

        try:
            logging_config = LoggingConfig.from_env(default_level=settings.log_level)
        except ValueError as e:
            raise ConfigurationError(
                str(e), recovery_hint="Check the LOG_* environment variables"
            ) from e
        configure_logging(logging_config)

        bind_host = host or settings.host
        bind_port = port or settings.port
        click.echo(
            format_info(
                f"Serving {settings.app_name} on "
                f"http://{bind_host}:{bind_port}{settings.api_prefix}"
            )
        )

        uvicorn.run(
            "record_validation.api.main:create_app",
            factory=True,
            host=bind_host,
            port=bind_port,
            reload=reload,
            # Keep the handlers installed by configure_logging
            log_config=None,
        )

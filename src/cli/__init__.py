"""Clockify Reports CLI.

This module provides a command-line interface for the reporting system.
It includes commands for generating the monthly reports and listing users.
"""

import click
from dotenv import load_dotenv

from src.cli.commands.generate import generate_report
from src.cli.commands.list import list_users
from src.config.logging_config import LoggingConfig, configure_logging

__version__ = "1.0.0"


@click.group(
    help="Clockify Reports CLI - Summarize tracked hours per user and per project"
)
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this run.",
)
def cli(log_level):
    """Clockify Reports CLI main entry point."""
    load_dotenv()
    config = LoggingConfig.from_env(default_level="WARNING")
    if log_level:
        config.log_level = log_level.upper()
    configure_logging(config)


# Register commands
cli.add_command(generate_report)
cli.add_command(list_users)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

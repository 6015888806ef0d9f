"""Error handling for CLI commands."""

import traceback

import click

from src.cli.utils.formatters import format_error, format_warning
from src.exceptions import (
    ConfigurationMissingError,
    SinkError,
    UpstreamFetchError,
)

EXIT_CONFIGURATION = 1
EXIT_UPSTREAM = 2
EXIT_SINK = 3
EXIT_CANCELLED = 130
EXIT_UNEXPECTED = 255


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Print a user-friendly message for ``error`` and return the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace for unexpected errors

    Returns:
        Exit code for the error kind
    """
    if isinstance(error, ConfigurationMissingError):
        click.echo(format_error(f"Configuration Error: {error}"))
        click.echo(
            format_warning("Hint: Set the missing variables in your .env file")
        )
        return EXIT_CONFIGURATION

    if isinstance(error, UpstreamFetchError):
        click.echo(format_error(f"Clockify Error: {error}"))
        click.echo(
            format_warning(
                "Hint: Check CLOCKIFY_API_KEY and CLOCKIFY_WORKSPACE_ID, "
                "or retry in a few minutes"
            )
        )
        return EXIT_UPSTREAM

    if isinstance(error, SinkError):
        click.echo(format_error(f"Output Error: {error}"))
        click.echo(
            format_warning(
                "Hint: Check the reports directory permissions and "
                "the Google Drive folder sharing settings"
            )
        )
        return EXIT_SINK

    if isinstance(error, (click.Abort, KeyboardInterrupt)):
        click.echo(format_warning("\nOperation cancelled by user"))
        return EXIT_CANCELLED

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))
    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))
    return EXIT_UNEXPECTED


class ErrorHandler:
    """Context manager that converts exceptions into a CLI exit code.

    Example:
        with ErrorHandler(debug):
            pipeline.generate(period)
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None or isinstance(exc_val, click.exceptions.Exit):
            return False
        ctx = click.get_current_context()
        ctx.exit(handle_cli_error(exc_val, self.debug))

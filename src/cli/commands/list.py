"""List workspace users command."""

import click

from src.cli.error_handlers import ErrorHandler
from src.cli.utils.formatters import format_info, format_table
from src.config.settings import get_config
from src.services.clockify_service import ClockifyService


@click.command(name="list-users")
@click.option("--debug", is_flag=True, default=False, help="Show full stack traces.")
def list_users(debug: bool):
    """List the members of the configured Clockify workspace.

    Example:
        clockify-reports list-users
    """
    with ErrorHandler(debug):
        settings = get_config()
        api_key, workspace_id = settings.require_clockify_credentials()

        with ClockifyService(
            api_key,
            base_url=settings.clockify_base_url,
            page_size=settings.clockify_page_size,
            timeout=settings.clockify_timeout,
        ) as service:
            users = service.list_users(workspace_id)

    if not users:
        click.echo(format_info("No users found in workspace"))
        return

    click.echo(
        format_table(
            ["ID", "Name", "Email"], [[u.id, u.name, u.email] for u in users]
        )
    )
    click.echo()
    click.echo(f"Total: {len(users)} users")

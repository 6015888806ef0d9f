"""CLI commands."""

from src.cli.commands.generate import generate_report
from src.cli.commands.list import list_users

__all__ = ["generate_report", "list_users"]

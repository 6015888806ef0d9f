"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message in green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: Sequence[str], rows: Sequence[Sequence[str]], max_width: int = 50
) -> str:
    """Format rows as a plain-text table with a header separator.

    Args:
        headers: Column headers
        rows: Data rows (each a sequence of cell values)
        max_width: Maximum width of any column; longer cells are cut

    Returns:
        The table as a single string, or "" without headers

    Example:
        >>> print(format_table(["Name", "Email"], [["Ann", "ann@example.com"]]))
        Name | Email
        -----+----------------
        Ann  | ann@example.com
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def _line(cells: Sequence[str]) -> str:
        padded = [
            str(cell)[: widths[i]].ljust(widths[i])
            for i, cell in enumerate(cells[: len(widths)])
        ]
        return " | ".join(padded).rstrip()

    lines: List[str] = [_line(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)

"""Cell model and CSV serializer for the tabular reports.

Report builders decide, cell by cell, whether a value is a display string
(always quoted) or a plain literal such as a formatted number, a column
header, or empty padding (never quoted). The serializer only applies that
decision, which keeps the output byte-for-byte stable.
"""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Cell:
    """One report cell.

    Attributes:
        value: Text of the cell
        quoted: Whether the value is a display string to be quoted
    """

    value: str
    quoted: bool = True

    def render(self) -> str:
        """Render the cell as CSV text.

        Example:
            >>> Cell('say "hi" now').render()
            '"say ""hi"" now"'
            >>> Cell("1.50", quoted=False).render()
            '1.50'
        """
        if not self.quoted:
            return self.value
        return '"' + self.value.replace('"', '""') + '"'


Row = List[Cell]
Report = List[Row]

EMPTY = Cell("", quoted=False)


def text(value: str) -> Cell:
    """Build a quoted display-string cell."""
    return Cell(value, quoted=True)


def plain(value: str) -> Cell:
    """Build an unquoted literal cell."""
    return Cell(value, quoted=False)


def hours_cell(value: float) -> Cell:
    """Build a numeric cell formatted with exactly two decimals.

    Example:
        >>> hours_cell(2.5).value
        '2.50'
    """
    return Cell(f"{value:.2f}", quoted=False)


def empty_cells(count: int) -> Row:
    return [EMPTY] * count


def pad_row(cells: Sequence[Cell], width: int) -> Row:
    """Right-pad ``cells`` with empty cells up to ``width`` columns.

    Raises:
        ValueError: If the row is already wider than ``width``
    """
    if len(cells) > width:
        raise ValueError(f"Row has {len(cells)} cells, report width is {width}")
    return list(cells) + empty_cells(width - len(cells))


def serialize_report(report: Report) -> str:
    """Render a report as CSV text: cells joined by commas, rows by newlines.

    A trailing newline ends the last row.
    """
    return "".join(
        ",".join(cell.render() for cell in row) + "\n" for row in report
    )


def parse_report(content: str) -> List[List[str]]:
    """Split serialized text back into cell values.

    Rows are split on newline characters only, so carriage returns and other
    line-break characters inside a cell are kept. Each cell has one
    surrounding quote pair stripped and doubled quotes collapsed.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    rows = []
    for line in lines:
        values = []
        for raw in line.split(","):
            if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
                raw = raw[1:-1].replace('""', '"')
            values.append(raw)
        rows.append(values)
    return rows

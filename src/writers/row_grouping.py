"""Row grouping with identity-cell suppression.

Both reports print a block of rows per group (a user, or a user within a
project) where only the first row names the group and the following rows
leave those cells blank, which reads as a merged cell in a spreadsheet.
"""

from typing import List, Sequence

from src.writers.csv_serializer import Cell, Row, empty_cells


def group_rows(
    identity: Sequence[Cell],
    details: Sequence[Sequence[Cell]],
    detail_width: int,
) -> List[Row]:
    """Emit one block of rows for a group.

    Args:
        identity: Cells naming the group, printed on the first row only
        details: Detail cells for each row of the group
        detail_width: Number of detail columns, used to pad an empty group

    Returns:
        One row per detail, or a single identity row with blank detail cells
        when ``details`` is empty

    Example:
        >>> rows = group_rows([Cell("Ann")], [[Cell("Design")], [Cell("QA")]], 1)
        >>> [[c.value for c in row] for row in rows]
        [['Ann', 'Design'], ['', 'QA']]
    """
    if not details:
        return [list(identity) + empty_cells(detail_width)]

    blank_identity = empty_cells(len(identity))
    rows = []
    for index, detail in enumerate(details):
        if len(detail) != detail_width:
            raise ValueError(
                f"Detail row has {len(detail)} cells, expected {detail_width}"
            )
        lead = list(identity) if index == 0 else blank_identity
        rows.append(lead + list(detail))
    return rows

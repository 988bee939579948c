"""Plain-text table rendering for sweep results."""

from typing import Dict, List, Sequence


def render_table(
    rows: Sequence[Dict[str, str]],
    columns: Sequence[str],
    spacing: int = 2,
    underline: str = "-",
) -> str:
    """Render rows of pre-formatted cells as an aligned text table.

    Cells are right-justified to the widest of the heading and the column's
    cells. Missing cells render blank.

    Args:
        rows: One mapping of column name -> cell text per row
        columns: Column names, in display order; also used as headings
        spacing: Spaces between columns
        underline: Character used to underline headings ("" for none)

    Returns:
        Rendered table without a trailing newline
    """
    widths = [
        max([len(col)] + [len(row.get(col, "")) for row in rows])
        for col in columns
    ]
    sep = " " * spacing

    lines: List[str] = [sep.join(col.rjust(w) for col, w in zip(columns, widths))]
    if underline:
        lines.append(sep.join(underline * w for w in widths))
    for row in rows:
        lines.append(sep.join(row.get(col, "").rjust(w) for col, w in zip(columns, widths)))
    return "\n".join(lines)

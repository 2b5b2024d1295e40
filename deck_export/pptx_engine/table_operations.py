"""Native PowerPoint tables built from extracted table rows."""

import logging

from pptx.util import Inches, Pt

from deck_export.pptx_engine.shape_operations import hex_to_rgb

logger = logging.getLogger(__name__)


def pad_rows(rows: list[list[str]]) -> list[list[str]]:
    """Square off ragged rows with empty cells so they fit a grid."""
    width = max((len(row) for row in rows), default=0)
    return [row + [""] * (width - len(row)) for row in rows]


def add_table(
    slide,
    rows: list[list[str]],
    left: float,
    top: float,
    width: float,
    row_height: float = 0.4,
    font_name: str = "Arial",
    font_size: int = 11,
    font_color: str = "#1A1A1A",
    fill_color: str = "#FFFFFF",
    header_fill: str | None = "#F8F9FA",
    header_bold: bool = True,
) -> object | None:
    """Add a table whose first row is styled as the header.

    Args:
        slide: Target slide.
        rows: Cell text by row; ragged rows are padded with empty cells.
        left, top, width: Position and width in inches.
        row_height: Height of each row in inches.
        header_fill: Fill for the first row (None to use fill_color).

    Returns:
        The graphic frame holding the table, or None for an empty table.
    """
    grid = pad_rows(rows)
    if not grid or not grid[0]:
        return None

    n_rows, n_cols = len(grid), len(grid[0])
    frame = slide.shapes.add_table(
        n_rows, n_cols,
        Inches(left), Inches(top), Inches(width), Inches(row_height * n_rows),
    )
    table = frame.table
    table.first_row = header_fill is not None

    col_width = Inches(width / n_cols)
    for column in table.columns:
        column.width = col_width

    for r, row in enumerate(grid):
        is_header = r == 0
        for c, text in enumerate(row):
            cell = table.cell(r, c)
            cell.text = text
            cell.fill.solid()
            cell.fill.fore_color.rgb = hex_to_rgb(
                header_fill if is_header and header_fill else fill_color
            )
            for paragraph in cell.text_frame.paragraphs:
                for run in paragraph.runs:
                    run.font.name = font_name
                    run.font.size = Pt(font_size)
                    run.font.bold = header_bold and is_header
                    run.font.color.rgb = hex_to_rgb(font_color)

    logger.debug(f"Added {n_rows}x{n_cols} table")
    return frame

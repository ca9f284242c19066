"""Google Sheets export logic via gspread.

Handles client authorization, output worksheet lookup, and the two kinds of
write, each of which replaces the whole worksheet: a single message cell, or
the roster grid (growing the tab first when the grid does not fit). Grid
writes use ``value_input_option="RAW"`` so student names are
stored verbatim (a name like ``"=Bo"`` is never evaluated as a formula).
"""

import logging
from collections.abc import Sequence

import gspread
from google.auth.credentials import Credentials
from gspread.utils import ValueInputOption, rowcol_to_a1

logger = logging.getLogger(__name__)


def get_sheets_client(credentials: Credentials) -> gspread.Client:
    """Authorize a gspread client with existing Google credentials.

    Args:
        credentials: Google credentials carrying the Sheets scope.

    Returns:
        An authorized ``gspread.Client``.
    """
    return gspread.authorize(credentials)


def open_output_worksheet(
    client: gspread.Client,
    spreadsheet_id: str,
    worksheet_name: str = "",
) -> gspread.Worksheet:
    """Open the worksheet the roster grid is written to.

    Args:
        client: An authorized gspread client.
        spreadsheet_id: The spreadsheet key from its URL.
        worksheet_name: Tab title (case-sensitive). Empty selects the first
            tab.

    Returns:
        The target ``gspread.Worksheet``.

    Raises:
        gspread.exceptions.SpreadsheetNotFound: If the spreadsheet ID is
            invalid or not shared with the service account.
        gspread.exceptions.WorksheetNotFound: If the named tab does not
            exist. Tabs are never created.
    """
    spreadsheet = client.open_by_key(spreadsheet_id)
    if worksheet_name:
        worksheet = spreadsheet.worksheet(worksheet_name)
    else:
        worksheet = spreadsheet.sheet1
    logger.info(
        "Writing to worksheet '%s' of spreadsheet '%s'",
        worksheet.title, spreadsheet.title,
    )
    return worksheet


def write_message(worksheet: gspread.Worksheet, message: str) -> None:
    """Replace the worksheet contents with a single message in cell A1.

    The worksheet is cleared first so no roster from an earlier run is left
    beside the message.
    """
    worksheet.clear()
    worksheet.update_cell(1, 1, message)
    logger.info("Wrote message to A1: %s", message)


def ensure_size(worksheet: gspread.Worksheet, rows: int, cols: int) -> None:
    """Grow *worksheet* so it holds at least *rows* x *cols* cells.

    Sheets rejects writes outside the tab's grid, and a new tab is only
    1000 x 26. The worksheet is never shrunk.
    """
    if worksheet.row_count >= rows and worksheet.col_count >= cols:
        return
    new_rows = max(worksheet.row_count, rows)
    new_cols = max(worksheet.col_count, cols)
    logger.info(
        "Resizing worksheet '%s' from %dx%d to %dx%d",
        worksheet.title, worksheet.row_count, worksheet.col_count,
        new_rows, new_cols,
    )
    worksheet.resize(rows=new_rows, cols=new_cols)


def write_grid(
    worksheet: gspread.Worksheet,
    grid: Sequence[Sequence[str]],
) -> None:
    """Replace the worksheet contents with *grid*.

    Grows the worksheet if *grid* does not fit, clears it, then writes
    *grid* starting at A1 and spanning exactly its row and column count.
    Each step completes before the next is issued.

    Args:
        worksheet: The output worksheet.
        grid: Rectangular row-major values.

    Raises:
        ValueError: If *grid* is empty or its rows differ in length.
    """
    if not grid or not grid[0]:
        raise ValueError("Cannot write an empty grid")
    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(
                f"Grid is not rectangular: expected {width} cells in row "
                f"{index}, got {len(row)}"
            )

    range_name = f"A1:{rowcol_to_a1(len(grid), width)}"
    ensure_size(worksheet, len(grid), width)
    worksheet.clear()
    worksheet.update(
        values=[list(row) for row in grid],
        range_name=range_name,
        value_input_option=ValueInputOption.raw,
    )
    logger.info("Wrote %d rows x %d columns to %s", len(grid), width, range_name)

"""Entry point and pipeline orchestration for the Classroom roster export.

Executes the full run sequence:
1. Startup — validate configuration, load service-account credentials.
2. Connect — build the Classroom service and open the output worksheet.
3. Fetch — collect every active course roster in memory (no Sheets writes).
4. Export — write one column per course, or a single message cell when
   there is nothing to export.

All errors are fatal. On failure, the full traceback is logged and the
process exits with a non-zero code.
"""

import logging
from typing import Optional

import gspread
from google.oauth2 import service_account
from googleapiclient.discovery import Resource

from config import (
    DELEGATED_USER,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    MSG_NO_ACTIVE_COURSES,
    MSG_NO_COURSES,
    SCOPES,
    SERVICE_ACCOUNT_KEY_PATH,
    SPREADSHEET_ID,
    WORKSHEET_NAME,
)
from exceptions import ConfigError
from export import get_sheets_client, open_output_worksheet, write_grid, write_message
from roster import fetch_rosters, get_classroom_service
from table import build_columns, transpose

logger = logging.getLogger(__name__)


def load_credentials() -> service_account.Credentials:
    """Load service-account credentials for both APIs.

    Applies ``SCOPES`` and, when ``DELEGATED_USER`` is set, impersonates
    that user via domain-wide delegation.

    Raises:
        ConfigError: If ``SPREADSHEET_ID`` is empty or the key file does
            not exist.
    """
    if not SPREADSHEET_ID:
        raise ConfigError(
            "SPREADSHEET_ID", "set ROSTER_SPREADSHEET_ID to the output spreadsheet key"
        )
    if not SERVICE_ACCOUNT_KEY_PATH.is_file():
        raise ConfigError(
            "SERVICE_ACCOUNT_KEY_PATH",
            f"key file not found: {SERVICE_ACCOUNT_KEY_PATH}",
        )

    credentials = service_account.Credentials.from_service_account_file(
        str(SERVICE_ACCOUNT_KEY_PATH), scopes=SCOPES
    )
    if DELEGATED_USER:
        logger.debug("Delegating credentials to %s", DELEGATED_USER)
        credentials = credentials.with_subject(DELEGATED_USER)
    return credentials


def configure_logging() -> None:
    """Configure the root logger from ``LOG_LEVEL``.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is not a standard level name.
    """
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        raise ConfigError(
            "LOG_LEVEL", f"unknown level '{LOG_LEVEL}' in ROSTER_LOG_LEVEL"
        )
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def run_export(
    service: Resource,
    worksheet: gspread.Worksheet,
) -> Optional[list[list[str]]]:
    """Fetch rosters and write them to *worksheet*.

    Nothing is written until every roster has been fetched, so an API error
    leaves the worksheet untouched.

    Args:
        service: A Classroom API resource.
        worksheet: The output worksheet.

    Returns:
        The grid that was written, or ``None`` when a message cell was
        written instead (no courses, or no active courses).

    Raises:
        googleapiclient.errors.HttpError: On any Classroom API error.
        gspread.exceptions.APIError: On any Sheets API error.
    """
    snapshot = fetch_rosters(service)

    if snapshot.total_courses == 0:
        write_message(worksheet, MSG_NO_COURSES)
        return None
    if not snapshot.rosters:
        write_message(worksheet, MSG_NO_ACTIVE_COURSES)
        return None

    grid = transpose(build_columns(snapshot.rosters))
    write_grid(worksheet, grid)
    return grid


def main() -> None:
    """Run the full fetch-and-export pipeline.

    Raises:
        SystemExit: On any fatal error, after logging the full traceback.
    """
    try:
        configure_logging()
        credentials = load_credentials()
        service = get_classroom_service(credentials)
        worksheet = open_output_worksheet(
            get_sheets_client(credentials), SPREADSHEET_ID, WORKSHEET_NAME
        )
        grid = run_export(service, worksheet)
    except Exception:
        logger.exception("Roster export failed")
        raise SystemExit(1)

    if grid is not None:
        logger.info("Roster export complete: %d courses", len(grid[0]))


if __name__ == "__main__":
    main()

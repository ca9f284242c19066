"""Central configuration for the Classroom roster export.

This module is the single source of truth for all magic values — IDs, scopes,
page sizes, course states and output messages. Never hardcode these values
elsewhere.

Deployment-specific values (key path, spreadsheet ID, tab name) are read from
the environment. A ``.env`` file in the project root is loaded first if
present.
"""

import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Project paths
# ---------------------------------------------------------------------------

PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent

load_dotenv(PROJECT_ROOT / ".env")

# ---------------------------------------------------------------------------
# Google credentials
# ---------------------------------------------------------------------------

# Path to the service account JSON key file. Never commit this file.
SERVICE_ACCOUNT_KEY_PATH: Final[Path] = Path(
    os.getenv("ROSTER_SERVICE_ACCOUNT_KEY", str(PROJECT_ROOT / "service_account.json"))
)

# Workspace user to impersonate via domain-wide delegation. Classroom only
# returns courses visible to this user. Empty disables delegation.
DELEGATED_USER: Final[str] = os.getenv("ROSTER_DELEGATED_USER", "")

SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/classroom.courses.readonly",
    "https://www.googleapis.com/auth/classroom.rosters.readonly",
    "https://www.googleapis.com/auth/spreadsheets",
]

# ---------------------------------------------------------------------------
# Google Sheets — output spreadsheet
# ---------------------------------------------------------------------------

# The Google Spreadsheet ID (from the URL).
SPREADSHEET_ID: Final[str] = os.getenv("ROSTER_SPREADSHEET_ID", "")

# Target tab. Empty means the first tab in the spreadsheet.
WORKSHEET_NAME: Final[str] = os.getenv("ROSTER_WORKSHEET_NAME", "")

# ---------------------------------------------------------------------------
# Google Classroom
# ---------------------------------------------------------------------------

CLASSROOM_API_NAME: Final[str] = "classroom"
CLASSROOM_API_VERSION: Final[str] = "v1"

# Students requested per page (API maximum is 100 for this endpoint).
STUDENT_PAGE_SIZE: Final[int] = 100

ACTIVE_COURSE_STATE: Final[str] = "ACTIVE"

# ---------------------------------------------------------------------------
# Output values
# ---------------------------------------------------------------------------

MISSING_NAME_VALUE: Final[str] = ""

MSG_NO_COURSES: Final[str] = "No courses found"
MSG_NO_ACTIVE_COURSES: Final[str] = "No active courses found"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: Final[str] = os.getenv("ROSTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

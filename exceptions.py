"""Custom exception classes for the Classroom roster export.

Errors from Google Classroom and Google Sheets are not wrapped — they
propagate unmodified. The classes here cover problems detected locally,
before any network call is made.
"""


class ConfigError(Exception):
    """Raised when a required configuration value is missing or unusable.

    Checked at startup so a misconfigured run fails before touching either
    API.

    Args:
        setting: The name of the offending setting (e.g. "SPREADSHEET_ID").
        reason: Human-readable explanation of what is wrong.
    """

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid configuration for '{setting}': {reason}")

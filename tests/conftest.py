"""Shared test configuration and fixtures.

Provides a mock gspread worksheet sized like a freshly created tab
(1000 rows x 26 columns) so tests never touch the network.
"""

from unittest.mock import MagicMock

import gspread
import pytest


@pytest.fixture
def worksheet() -> MagicMock:
    """A mock gspread Worksheet with the default new-tab dimensions."""
    mock = MagicMock(spec=gspread.Worksheet)
    mock.row_count = 1000
    mock.col_count = 26
    return mock

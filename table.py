"""Reshaping of fetched rosters into a spreadsheet grid.

Builds one column per course (name header, then student given names) and
transposes the ragged columns into rectangular rows. Pure functions only —
no API or export logic belongs here.
"""

from collections.abc import Sequence
from itertools import zip_longest

from config import MISSING_NAME_VALUE
from roster import CourseRoster


def build_column(roster: CourseRoster) -> list[str]:
    """Build the column for a single course.

    Args:
        roster: A course and its students.

    Returns:
        ``[course name, given name, ...]`` with one entry per student in API
        order. Students without a given name contribute
        ``MISSING_NAME_VALUE`` so the column length always equals
        ``1 + len(roster.students)``.
    """
    column = [roster.course.name]
    for student in roster.students:
        if student.given_name is None:
            column.append(MISSING_NAME_VALUE)
        else:
            column.append(student.given_name)
    return column


def build_columns(rosters: Sequence[CourseRoster]) -> list[list[str]]:
    """Build one column per roster, preserving course order."""
    return [build_column(roster) for roster in rosters]


def transpose(columns: Sequence[Sequence[str]]) -> list[list[str]]:
    """Transpose ragged columns into a rectangular row-major grid.

    Short columns are padded with ``MISSING_NAME_VALUE``. The grid has
    ``max(len(c) for c in columns)`` rows and ``len(columns)`` cells per row.

    Args:
        columns: Column-major data; columns may differ in length, including
            zero length.

    Returns:
        The row-major grid. Empty when *columns* is empty or every column
        is empty.
    """
    return [
        list(row)
        for row in zip_longest(*columns, fillvalue=MISSING_NAME_VALUE)
    ]

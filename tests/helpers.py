"""Builders for raw Classroom API responses and a mock Classroom resource."""

from typing import Any, Optional
from unittest.mock import MagicMock


def course(
    course_id: str,
    name: str,
    state: Optional[str] = "ACTIVE",
) -> dict[str, Any]:
    """Return a raw Classroom Course resource."""
    raw: dict[str, Any] = {"id": course_id, "name": name}
    if state is not None:
        raw["courseState"] = state
    return raw


def student(given_name: Optional[str]) -> dict[str, Any]:
    """Return a raw Classroom Student resource."""
    name = {"fullName": given_name or ""}
    if given_name is not None:
        name["givenName"] = given_name
    return {"userId": f"u-{given_name}", "profile": {"name": name}}


def make_service(
    course_pages: list[dict[str, Any]],
    student_pages: Optional[list[dict[str, Any]]] = None,
) -> MagicMock:
    """Build a mock Classroom resource returning the given responses in order.

    Args:
        course_pages: Successive ``courses().list().execute()`` responses.
        student_pages: Successive ``courses().students().list().execute()``
            responses, across all courses, in the order they are requested.
    """
    service = MagicMock()
    courses_api = service.courses.return_value
    courses_api.list.return_value.execute.side_effect = list(course_pages)
    courses_api.students.return_value.list.return_value.execute.side_effect = (
        list(student_pages or [])
    )
    return service

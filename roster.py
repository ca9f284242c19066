"""Google Classroom roster fetching.

Uses ``google-api-python-client`` to list courses and their students. All
Classroom API calls go through this module — no other module should issue
Classroom requests directly.

Every call is read-only. API errors (``HttpError``, transport failures) are
not caught here: they propagate to the caller and abort the run.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from google.auth.credentials import Credentials
from googleapiclient.discovery import Resource, build

from config import (
    ACTIVE_COURSE_STATE,
    CLASSROOM_API_NAME,
    CLASSROOM_API_VERSION,
    STUDENT_PAGE_SIZE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Course:
    """A Classroom course, reduced to the fields the export consumes."""

    id: str
    name: str
    course_state: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Course":
        return cls(
            id=raw["id"],
            name=raw.get("name", ""),
            course_state=raw.get("courseState"),
        )


@dataclass(frozen=True)
class Student:
    """A course member; only the given name is kept.

    ``given_name`` is ``None`` when the profile omits any part of the
    ``profile.name.givenName`` path.
    """

    given_name: Optional[str] = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> "Student":
        name = (raw.get("profile") or {}).get("name") or {}
        return cls(given_name=name.get("givenName"))


@dataclass
class CourseRoster:
    course: Course
    students: list[Student] = field(default_factory=list)


@dataclass
class RosterSnapshot:
    """Result of one fetch: active rosters plus the unfiltered course count.

    Attributes:
        total_courses: Number of courses returned by the API in any state.
        rosters: Active courses with their students, in API order.
    """

    total_courses: int
    rosters: list[CourseRoster] = field(default_factory=list)


def get_classroom_service(credentials: Credentials) -> Resource:
    """Build a Classroom v1 API resource.

    Args:
        credentials: Authorized Google credentials carrying the Classroom
            read-only scopes.

    Returns:
        A ``googleapiclient`` resource for the Classroom API.
    """
    return build(
        CLASSROOM_API_NAME,
        CLASSROOM_API_VERSION,
        credentials=credentials,
        cache_discovery=False,
    )


def iter_pages(
    list_method: Callable[..., Any],
    items_key: str,
    **params: Any,
) -> Iterator[list[dict[str, Any]]]:
    """Yield each page of a paginated Classroom ``list`` call.

    Calls ``list_method(pageToken=..., **params).execute()`` repeatedly,
    following ``nextPageToken`` until the response carries none. The
    generator is single-use; a fresh one must be created to list again.

    Args:
        list_method: A bound API method such as ``service.courses().list``.
        items_key: Response key holding the page items (e.g. ``"courses"``).
        **params: Extra request parameters passed on every call.

    Yields:
        The list of raw resource dicts for each page. A page without
        *items_key* yields an empty list.

    Raises:
        googleapiclient.errors.HttpError: On any API error.
    """
    page_token: Optional[str] = None
    page_number = 0
    while True:
        response = list_method(pageToken=page_token, **params).execute()
        items = response.get(items_key, [])
        page_number += 1
        logger.debug(
            "Fetched %s page %d (%d items)", items_key, page_number, len(items)
        )
        yield items
        page_token = response.get("nextPageToken")
        if not page_token:
            return


def list_courses(service: Resource) -> list[Course]:
    """Return every course visible to the caller, in API order.

    Raises:
        googleapiclient.errors.HttpError: On any API error.
    """
    courses = [
        Course.from_api(raw)
        for page in iter_pages(service.courses().list, "courses")
        for raw in page
    ]
    logger.info("Found %d courses", len(courses))
    return courses


def list_students(service: Resource, course_id: str) -> list[Student]:
    """Return every student enrolled in *course_id*, in API order.

    Requests pages of ``STUDENT_PAGE_SIZE`` students.

    Raises:
        googleapiclient.errors.HttpError: On any API error.
    """
    students = [
        Student.from_api(raw)
        for page in iter_pages(
            service.courses().students().list,
            "students",
            courseId=course_id,
            pageSize=STUDENT_PAGE_SIZE,
        )
        for raw in page
    ]
    logger.debug("Fetched %d students for course_id=%s", len(students), course_id)
    return students


def is_active(course: Course) -> bool:
    """Return True only for courses whose state is exactly ``ACTIVE``."""
    return course.course_state == ACTIVE_COURSE_STATE


def fetch_rosters(service: Resource) -> RosterSnapshot:
    """Fetch all active courses and their full student lists.

    Students are only requested for active courses. Course order is the
    order returned by the API.

    Args:
        service: A Classroom API resource from ``get_classroom_service()``.

    Returns:
        A ``RosterSnapshot`` with the total course count (any state) and the
        active course rosters.

    Raises:
        googleapiclient.errors.HttpError: On any API error. No partial
            snapshot is returned.
    """
    courses = list_courses(service)
    active = [course for course in courses if is_active(course)]
    logger.info("%d of %d courses are active", len(active), len(courses))

    rosters = []
    for course in active:
        students = list_students(service, course.id)
        logger.info("Course '%s': %d students", course.name, len(students))
        rosters.append(CourseRoster(course=course, students=students))

    return RosterSnapshot(total_courses=len(courses), rosters=rosters)

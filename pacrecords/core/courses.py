from __future__ import annotations

from typing import Mapping

from pacrecords.core.errors import ErrorKind
from pacrecords.core.schema import CourseError

# Checked in this order; the first one present in the query wins.
COURSES: tuple[str, ...] = ("SCY", "SCM", "LCM")


def select_course(params: Mapping[str, str]) -> str | None:
    """Return the course code named by the query parameters, if any.

    Only the presence of the parameter counts, its value is ignored.
    """

    for course in COURSES:
        if course in params:
            return course
    return None


def invalid_course_payload() -> list[dict[str, str]]:
    record = CourseError(status=str(int(ErrorKind.INVALID_COURSE)), error="Invalid COURSE")
    return [record.model_dump()]

"""
Enrollment service: the catalog and full-list replacement of a student's courses.
"""

import logging
from typing import Any, Dict, List, Sequence

from ..core.catalog import catalog_as_dicts
from ..core.entities import Student
from ..core.interfaces import StudentStore
from ..core.exceptions import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


def summarize(courses: Sequence[Any]) -> Dict[str, int]:
    """Count and credit total of an enrollment list.

    Entries are caller-supplied, so a missing or non-numeric credit value
    counts as zero.
    """
    total = 0
    for course in courses:
        credits = course.get("credits") if isinstance(course, dict) else None
        if isinstance(credits, (int, float)) and not isinstance(credits, bool):
            total += credits
    return {"count": len(courses), "totalCredits": total}


class EnrollmentService:
    """Service exposing the catalog and each student's enrollment list.

    Writes replace the stored list wholesale. There is no merge, no dedup
    and no per-student lock, so two concurrent replacements for the same
    student race and the later write wins entirely.
    """

    def __init__(self, repository: StudentStore):
        self._repository = repository

    def get_catalog(self) -> List[Dict[str, Any]]:
        return catalog_as_dicts()

    def _get_student(self, student_id: str) -> Student:
        student = self._repository.find_by_id(student_id)
        if student is None:
            raise NotFoundError("Student not found.")
        return student

    def get_enrollment(self, student_id: str) -> List[Any]:
        return self._get_student(student_id).courses

    def replace_enrollment(self, student_id: str, courses: Any) -> List[Any]:
        """Overwrite a student's enrollment list and return the persisted value."""
        if not isinstance(courses, list):
            raise ValidationError("Courses must be an array.")

        student = self._get_student(student_id)
        student.replace_courses(courses)
        self._repository.save(student)

        logger.info("Student %s enrollment replaced with %d course(s)", student.id, len(courses))
        return student.courses

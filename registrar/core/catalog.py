"""
The fixed catalog of sample courses served by the backend.
"""

from typing import Any, Dict, List

from .entities import Course


SAMPLE_COURSES = (
    Course("CS101", "Introduction to Programming", 3),
    Course("MATH201", "Calculus II", 4),
    Course("ENG110", "Academic Writing", 2),
    Course("HIST150", "World History", 3),
    Course("PHY120", "Physics Fundamentals", 3),
)


def catalog_as_dicts() -> List[Dict[str, Any]]:
    """Fresh dict copies of the catalog, in catalog order."""
    return [course.to_dict() for course in SAMPLE_COURSES]

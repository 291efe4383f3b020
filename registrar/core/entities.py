"""
Core entities for the Registrar application.
"""

import uuid
from abc import ABC
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, lifecycle, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or uuid.uuid4().hex
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Mark the entity as modified."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def _restore_lifecycle(self, data: Dict[str, Any]) -> None:
        self._created_at = datetime.fromisoformat(data["created_at"])
        self._updated_at = datetime.fromisoformat(data["updated_at"])
        self._version = data.get("version", 1)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


@dataclass(frozen=True)
class Course:
    """A catalog course. Enrollment lists embed copies of these as plain dicts."""
    code: str
    name: str
    credits: int

    def __post_init__(self):
        if not self.code:
            raise ValidationError("Course code is required")
        if self.credits < 0:
            raise ValidationError("Course credits cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Student(AbstractEntity):
    """A registered student and their current enrollment list."""

    def __init__(self, full_name: str, email: str, student_id: str, password_hash: str,
                 courses: Optional[List[Any]] = None, **kwargs):
        super().__init__(**kwargs)
        self._full_name = full_name
        self._email = email.lower()
        self._student_id = student_id
        self._password_hash = password_hash
        self._courses: List[Any] = list(courses or [])

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def courses(self) -> List[Any]:
        """A copy of the enrollment list; use replace_courses to change it."""
        return list(self._courses)

    def replace_courses(self, courses: List[Any]) -> None:
        """Overwrite the whole enrollment list. No merge or dedup happens here."""
        self._courses = list(courses)
        self.touch()

    def to_public_dict(self) -> Dict[str, Any]:
        """Account fields safe to return over the wire."""
        return {
            'id': self._id,
            'fullName': self._full_name,
            'email': self._email,
            'studentId': self._student_id,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'full_name': self._full_name,
            'email': self._email,
            'student_id': self._student_id,
            'password_hash': self._password_hash,
            'courses': self._courses,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        student = cls(
            full_name=data["full_name"],
            email=data["email"],
            student_id=data["student_id"],
            password_hash=data["password_hash"],
            courses=data.get("courses", []),
            entity_id=data["id"],
        )
        student._restore_lifecycle(data)
        return student

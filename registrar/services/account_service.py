"""
Account service: registration and password login.
"""

import logging
from typing import Any, Dict, Optional

from ..core.entities import Student
from ..core.interfaces import PasswordHasher, StudentStore
from ..core.credentials import PBKDF2PasswordHasher
from ..core.exceptions import ValidationError, ConflictError, AuthError, DuplicateEntityError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."
DUPLICATE_EMAIL = "An account with this email already exists."


class AccountService:
    """Service for creating student accounts and authenticating them."""

    def __init__(self, repository: StudentStore, hasher: Optional[PasswordHasher] = None):
        self._repository = repository
        self._hasher = hasher or PBKDF2PasswordHasher()

    def register(self, full_name: str, email: str, student_id: str, password: str) -> Dict[str, Any]:
        """Create a new student with an empty course list."""
        if not full_name or not email or not student_id or not password:
            raise ValidationError("Missing required fields.")

        email = email.lower()
        if self._repository.find_by_email(email) is not None:
            raise ConflictError(DUPLICATE_EMAIL)

        student = Student(
            full_name=full_name,
            email=email,
            student_id=student_id,
            password_hash=self._hasher.hash(password),
            courses=[],
        )
        try:
            self._repository.create(student)
        except DuplicateEntityError:
            # Lost a concurrent registration for the same email to the unique index.
            raise ConflictError(DUPLICATE_EMAIL)

        logger.info("Registered student %s (%s)", student.id, student.student_id)
        return student.to_public_dict()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Authenticate by email and password.

        Unknown email and wrong password raise the same AuthError so the
        response does not reveal which accounts exist.
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        student = self._repository.find_by_email(email.lower())
        if student is None or not self._hasher.verify(password, student.password_hash):
            logger.warning("Rejected login attempt")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info("Student %s logged in", student.id)
        profile = student.to_public_dict()
        profile["courses"] = student.courses
        return profile

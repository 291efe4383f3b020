"""
Core interfaces and abstract base classes for the Registrar application.
"""

from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic


T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Narrow document-store interface the services depend on."""

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find entity by ID."""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity."""
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        """Overwrite an existing entity with its current state."""
        pass


class StudentStore(Repository[T]):
    """Repository of students, addressable by their (lower-cased) email."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[T]:
        """Find a student by email."""
        pass


class PasswordHasher(ABC):
    """Strategy interface for deriving and checking password hashes."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Derive a salted hash for storage."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a submitted password against a stored hash."""
        pass

"""
Repository pattern implementations for data access.
"""

import json
from abc import abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic

from ..core.entities import Student, AbstractEntity
from ..core.interfaces import Repository, StudentStore
from ..core.exceptions import PersistenceError, NotFoundError
from .database import DatabaseManager

T = TypeVar('T', bound=AbstractEntity)


class BaseRepository(Repository[T], Generic[T]):
    """Base repository storing each entity as one JSON document."""

    def __init__(self, database: DatabaseManager, entity_type: str):
        self._database = database
        self._entity_type = entity_type

    def create(self, entity: T) -> T:
        """Insert a new entity."""
        query = """
            INSERT INTO entities (id, type, data, created_at, updated_at, version)
            VALUES (?, ?, ?, ?, ?, ?)
        """
        params = (
            entity.id,
            self._entity_type,
            json.dumps(entity.to_dict()),
            entity.created_at.isoformat(),
            entity.updated_at.isoformat(),
            entity.version,
        )
        try:
            self._database.execute_update(query, params)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to create {self._entity_type}: {str(e)}")
        return entity

    def save(self, entity: T) -> T:
        """Overwrite the stored document. No version check: the last write wins."""
        query = """
            UPDATE entities
            SET data = ?, updated_at = ?, version = ?
            WHERE id = ? AND type = ?
        """
        params = (
            json.dumps(entity.to_dict()),
            entity.updated_at.isoformat(),
            entity.version,
            entity.id,
            self._entity_type,
        )
        try:
            affected_rows = self._database.execute_update(query, params)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(f"Failed to save {self._entity_type}: {str(e)}")

        if affected_rows == 0:
            raise NotFoundError(f"{self._entity_type.capitalize()} not found.")
        return entity

    def find_by_id(self, entity_id: str) -> Optional[T]:
        """Find entity by ID."""
        query = "SELECT data FROM entities WHERE id = ? AND type = ?"
        results = self._database.execute_query(query, (entity_id, self._entity_type))
        if results:
            return self._entity_from_dict(json.loads(results[0]["data"]))
        return None

    @abstractmethod
    def _entity_from_dict(self, data: Dict[str, Any]) -> T:
        """Convert dictionary to entity instance."""
        pass


class StudentRepository(BaseRepository[Student], StudentStore[Student]):
    """Repository for Student entities."""

    def __init__(self, database: DatabaseManager):
        super().__init__(database, "student")

    def find_by_email(self, email: str) -> Optional[Student]:
        """Find a student by email, compared lower-cased."""
        query = "SELECT data FROM entities WHERE type = ? AND json_extract(data, '$.email') = ?"
        results = self._database.execute_query(query, (self._entity_type, email.lower()))
        if results:
            return self._entity_from_dict(json.loads(results[0]["data"]))
        return None

    def _entity_from_dict(self, data: Dict[str, Any]) -> Student:
        """Convert dictionary to Student instance."""
        return Student.from_dict(data)

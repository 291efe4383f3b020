"""
Core module containing entities, interfaces, exceptions and catalog data.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .catalog import SAMPLE_COURSES, catalog_as_dicts
from .credentials import PBKDF2PasswordHasher

__all__ = [
    # Entities
    "AbstractEntity",
    "Course",
    "Student",

    # Interfaces
    "Repository",
    "StudentStore",
    "PasswordHasher",
    "PBKDF2PasswordHasher",

    # Catalog
    "SAMPLE_COURSES",
    "catalog_as_dicts",

    # Exceptions
    "RegistrarException",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
    "PersistenceError",
    "DuplicateEntityError",
    "ConfigurationError",
]

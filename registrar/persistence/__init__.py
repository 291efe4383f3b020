"""
Persistence module for document storage.
"""

from .database import DatabaseManager, SQLiteDatabase, DatabaseFactory
from .repositories import BaseRepository, StudentRepository

__all__ = [
    "DatabaseManager",
    "SQLiteDatabase",
    "DatabaseFactory",
    "BaseRepository",
    "StudentRepository",
]

"""
Client session store: the logged-in student kept in durable key-value storage.
"""

import json
import os
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

CURRENT_STUDENT_ID_KEY = "cc_current_student_id"
CURRENT_STUDENT_INFO_KEY = "cc_current_student_info"


class SessionStorage(ABC):
    """String key-value storage with ``localStorage`` semantics."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass


class MemorySessionStorage(SessionStorage):
    """Process-local storage, lost on exit."""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)

    def remove_item(self, key):
        self._items.pop(key, None)


class FileSessionStorage(SessionStorage):
    """Storage persisted as a JSON object in a file, surviving restarts."""

    def __init__(self, path: str):
        self._path = path
        self._lock = threading.RLock()

    def _read(self) -> Dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except ValueError:
            # A corrupt file reads as empty storage, i.e. logged out.
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, items: Dict[str, str]) -> None:
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self._path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(items, f)
        os.replace(tmp_path, self._path)

    def get_item(self, key):
        with self._lock:
            return self._read().get(key)

    def set_item(self, key, value):
        with self._lock:
            items = self._read()
            items[key] = str(value)
            self._write(items)

    def remove_item(self, key):
        with self._lock:
            items = self._read()
            if key in items:
                del items[key]
                self._write(items)


def default_session_path() -> str:
    return os.environ.get("REGISTRAR_SESSION_FILE") or os.path.join(
        os.path.expanduser("~"), ".registrar", "session.json"
    )


class SessionContext:
    """The current student, as last returned by a successful login.

    Not authoritative: the server is the source of truth for enrollment,
    this only remembers who is logged in and their cached profile.
    """

    def __init__(self, storage: Optional[SessionStorage] = None):
        self._storage = storage if storage is not None else MemorySessionStorage()

    @property
    def student_id(self) -> Optional[str]:
        return self._storage.get_item(CURRENT_STUDENT_ID_KEY) or None

    @property
    def student_info(self) -> Optional[Dict[str, Any]]:
        raw = self._storage.get_item(CURRENT_STUDENT_INFO_KEY)
        if not raw:
            return None
        try:
            info = json.loads(raw)
        except ValueError:
            return None
        return info if isinstance(info, dict) else None

    @property
    def is_authenticated(self) -> bool:
        return self.student_id is not None and self.student_info is not None

    def start(self, profile: Dict[str, Any]) -> None:
        """Remember a freshly logged-in student."""
        self._storage.set_item(CURRENT_STUDENT_ID_KEY, str(profile["id"]))
        self._storage.set_item(CURRENT_STUDENT_INFO_KEY, json.dumps(profile))

    def clear(self) -> None:
        self._storage.remove_item(CURRENT_STUDENT_ID_KEY)
        self._storage.remove_item(CURRENT_STUDENT_INFO_KEY)

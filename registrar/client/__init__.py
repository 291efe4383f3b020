"""
Client module: API client, session store and view controllers.
"""

from .api_client import RegistrarClient, ClientError
from .session import SessionContext, SessionStorage, MemorySessionStorage, FileSessionStorage
from .enrollment_view import EnrollmentViewController, CoursesView, ViewState, compute_available
from .navigation import NavigationController, View

__all__ = [
    "RegistrarClient",
    "ClientError",
    "SessionContext",
    "SessionStorage",
    "MemorySessionStorage",
    "FileSessionStorage",
    "EnrollmentViewController",
    "CoursesView",
    "ViewState",
    "compute_available",
    "NavigationController",
    "View",
]

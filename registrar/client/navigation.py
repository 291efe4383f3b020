"""
Session / navigation controller: which view is visible and the account forms.
"""

from enum import Enum
from typing import Optional

from .api_client import ClientError, RegistrarClient
from .enrollment_view import EnrollmentViewController, MessageType, StatusMessage
from .session import SessionContext


class View(Enum):
    REGISTER = "register"
    LOGIN = "login"
    COURSES = "courses"


class NavigationController:
    """Tracks the visible view and gates the courses view behind a session."""

    def __init__(self, api: RegistrarClient, session: SessionContext,
                 enrollment_view: Optional[EnrollmentViewController] = None):
        self._api = api
        self._session = session
        self.enrollment_view = enrollment_view or EnrollmentViewController(api, session)
        self._current_view = View.REGISTER
        self.register_message = StatusMessage("")
        self.login_message = StatusMessage("")
        self.alert: Optional[str] = None

    @property
    def current_view(self) -> View:
        return self._current_view

    @property
    def welcome_text(self) -> str:
        if not self._session.is_authenticated:
            return ""
        user = self._session.student_info
        return f"Hi, {user.get('fullName')} ({user.get('studentId')})"

    @property
    def courses_nav_enabled(self) -> bool:
        return self._session.is_authenticated

    def start(self) -> View:
        """Initial view: courses when a session survives, registration otherwise."""
        if self._session.is_authenticated:
            self._current_view = View.COURSES
            self.enrollment_view.activate()
        else:
            self._current_view = View.REGISTER
        return self._current_view

    def show(self, view: View) -> bool:
        """Switch views. Returns False when the courses view is refused."""
        self.alert = None
        if view is View.COURSES and not self._session.is_authenticated:
            self.alert = "Please login first to view your courses."
            return False
        self._current_view = view
        if view is View.COURSES:
            self.enrollment_view.activate()
        return True

    def register(self, full_name: str, email: str, student_id: str, password: str,
                 confirm_password: str) -> bool:
        full_name, email, student_id = full_name.strip(), email.strip(), student_id.strip()

        if not full_name or not email or not student_id or not password:
            self.register_message = StatusMessage("Please fill in all fields.", MessageType.ERROR)
            return False
        if password != confirm_password:
            self.register_message = StatusMessage("Passwords do not match.", MessageType.ERROR)
            return False

        try:
            self._api.register(full_name, email, student_id, password)
        except ClientError as e:
            self.register_message = StatusMessage(e.message or "Registration failed.", MessageType.ERROR)
            return False

        self.register_message = StatusMessage("Registration successful! You can now login.", MessageType.SUCCESS)
        self._current_view = View.LOGIN
        return True

    def login(self, email: str, password: str) -> bool:
        try:
            user = self._api.login(email.strip(), password)
        except ClientError as e:
            self.login_message = StatusMessage(e.message or "Login failed.", MessageType.ERROR)
            return False

        self._session.start(user)
        self.login_message = StatusMessage("Login successful!", MessageType.SUCCESS)
        self._current_view = View.COURSES
        self.enrollment_view.activate()
        return True

    def logout(self) -> None:
        """Forget the session locally; the server keeps no login state."""
        self._session.clear()
        self.enrollment_view.reset()
        self._current_view = View.LOGIN

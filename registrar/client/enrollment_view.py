"""
Enrollment view controller: keeps the "available" and "enrolled" lists
consistent with the server after every mutation.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..services.enrollment_service import summarize
from .api_client import ClientError, RegistrarClient
from .session import SessionContext

logger = logging.getLogger(__name__)


class ViewState(Enum):
    """Lifecycle of the enrollment view."""
    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    RENDERED = "rendered"
    MUTATING = "mutating"
    ERROR = "error"


class MessageType(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class StatusMessage:
    text: str
    type: Optional[MessageType] = None


@dataclass
class CoursesView:
    """What the enrollment screen shows right now."""
    available: List[Dict[str, Any]] = field(default_factory=list)
    enrolled: List[Dict[str, Any]] = field(default_factory=list)
    message: StatusMessage = field(default_factory=lambda: StatusMessage(""))

    @property
    def total_credits(self) -> int:
        return summarize(self.enrolled)["totalCredits"]


def compute_available(catalog: List[Dict[str, Any]], enrolled: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Catalog entries whose code is not already enrolled, in catalog order."""
    enrolled_codes = {course.get("code") for course in enrolled if isinstance(course, dict)}
    return [course for course in catalog if course.get("code") not in enrolled_codes]


def summary_text(enrolled: List[Dict[str, Any]]) -> str:
    summary = summarize(enrolled)
    return f"You are enrolled in {summary['count']} course(s), total {summary['totalCredits']} credits."


class EnrollmentViewController:
    """Drives the enrollment screen against the REST API.

    Every add/remove sends the complete new list and then re-fetches both
    lists, so what is shown is always what the server returned. Mutations
    are not serialized: two adds issued before either resolves build their
    lists from the same rendered state, and the later PUT wins.
    """

    def __init__(self, api: RegistrarClient, session: SessionContext):
        self._api = api
        self._session = session
        self._state = ViewState.UNAUTHENTICATED
        self._view = CoursesView()
        # Student whose lists are held in _view; None until a load succeeds.
        self._owner_id: Optional[str] = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def view(self) -> CoursesView:
        return self._view

    def _set_message(self, text: str, message_type: Optional[MessageType]) -> None:
        self._view.message = StatusMessage(text, message_type)

    def _fail(self, message: str) -> CoursesView:
        self._state = ViewState.ERROR
        self._set_message(message, MessageType.ERROR)
        return self._view

    def reset(self) -> None:
        """Drop everything rendered for the previous student."""
        self._state = ViewState.UNAUTHENTICATED
        self._view = CoursesView()
        self._owner_id = None

    def activate(self) -> CoursesView:
        """Load catalog and enrollment together and render both lists."""
        if not self._session.is_authenticated:
            self.reset()
            self._set_message("Please login to manage your courses.", MessageType.ERROR)
            return self._view

        student_id = self._session.student_id
        if self._owner_id != student_id:
            self._view = CoursesView()
            self._owner_id = None

        self._state = ViewState.LOADING
        self._set_message("Loading courses...", None)

        with ThreadPoolExecutor(max_workers=2) as executor:
            catalog_future = executor.submit(self._api.get_all_courses)
            enrolled_future = executor.submit(self._api.get_student_courses, student_id)
            try:
                catalog = catalog_future.result()
                enrolled = enrolled_future.result()
            except ClientError as e:
                logger.debug("Loading courses failed: %s", e.message)
                return self._fail(e.message or "Failed to load courses.")

        self._view = CoursesView(
            available=compute_available(catalog, enrolled),
            enrolled=list(enrolled),
        )
        self._owner_id = student_id
        self._state = ViewState.RENDERED
        self._set_message(summary_text(enrolled), MessageType.SUCCESS)
        return self._view

    def _has_loaded_lists(self) -> bool:
        """True when the held lists were loaded for the current session's student."""
        return (self._session.is_authenticated
                and self._owner_id is not None
                and self._owner_id == self._session.student_id)

    def _refuse_mutation(self) -> CoursesView:
        if not self._session.is_authenticated:
            return self.activate()
        return self._fail("Your courses are not loaded yet. Reload and try again.")

    def _replace_and_reload(self, new_courses: List[Dict[str, Any]], done_message: str,
                            fallback: str) -> CoursesView:
        self._state = ViewState.MUTATING
        try:
            self._api.update_student_courses(self._owner_id, new_courses)
        except ClientError as e:
            return self._fail(e.message or fallback)

        self.activate()
        if self._state is ViewState.RENDERED:
            self._set_message(done_message, MessageType.SUCCESS)
        return self._view

    def add_course(self, course: Dict[str, Any]) -> CoursesView:
        """Enroll in ``course`` by sending the current list plus it."""
        if not self._has_loaded_lists():
            return self._refuse_mutation()
        new_courses = list(self._view.enrolled) + [course]
        return self._replace_and_reload(
            new_courses, f"Added {course.get('code')} to your courses.", "Failed to add course."
        )

    def remove_course(self, code: str) -> CoursesView:
        """Drop every enrolled entry with this code."""
        if not self._has_loaded_lists():
            return self._refuse_mutation()
        new_courses = [c for c in self._view.enrolled if c.get("code") != code]
        return self._replace_and_reload(
            new_courses, f"Removed {code} from your courses.", "Failed to remove course."
        )

    def find_available(self, code: str) -> Optional[Dict[str, Any]]:
        """The available course with this code, if it is currently offered."""
        for course in self._view.available:
            if course.get("code") == code:
                return course
        return None

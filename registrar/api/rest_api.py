"""
REST API implementation for the Registrar application using FastAPI.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from pydantic import BaseModel

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.exceptions import RegistrarException, InternalError
from ..services import AccountService, EnrollmentService

logger = logging.getLogger(__name__)


# Pydantic models for API. Fields are optional so that missing values reach
# the services and come back as 400 {message} rather than a schema error.
class RegisterRequest(BaseModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    studentId: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class CourseUpdateRequest(BaseModel):
    # Left untyped: a non-array value is a 400 from the enrollment service.
    courses: Any = None


class CourseModel(BaseModel):
    code: str
    name: str
    credits: int


class AccountResponse(BaseModel):
    id: str
    fullName: str
    email: str
    studentId: str


class LoginResponse(AccountResponse):
    courses: List[Any] = []


class MessageResponse(BaseModel):
    message: str


def error_response(exc: RegistrarException) -> JSONResponse:
    """Render a domain error as ``{message}`` with the error's status code."""
    if exc.status_code >= 500:
        # Server-side failures (e.g. PersistenceError) never echo their details.
        logger.error("Request failed: %s", exc.message)
        exc = InternalError()
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


class RegistrarRestAPI:
    """REST API implementation for the Registrar application."""

    def __init__(self, account_service: AccountService, enrollment_service: EnrollmentService):
        self._account_service = account_service
        self._enrollment_service = enrollment_service

        # Create FastAPI app
        self.app = FastAPI(
            title="Registrar API",
            description="Student registration and course enrollment",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        # Add CORS middleware
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_exception_handlers()
        self._setup_routes()

    def _setup_exception_handlers(self):
        """Map request parsing failures onto the {message} error body."""

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                                content={"message": "Invalid request body."})

    def _internal_error(self, context: str) -> JSONResponse:
        logger.exception("%s error", context)
        return error_response(InternalError())

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/health", response_model=Dict[str, str])
        def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        @self.app.post("/api/register", response_model=AccountResponse, status_code=status.HTTP_201_CREATED,
                       responses={400: {"model": MessageResponse}, 409: {"model": MessageResponse}})
        def register(data: RegisterRequest):
            """Register a new student account."""
            try:
                return self._account_service.register(
                    data.fullName, data.email, data.studentId, data.password
                )
            except RegistrarException as e:
                return error_response(e)
            except Exception:
                return self._internal_error("Register")

        @self.app.post("/api/login", response_model=LoginResponse,
                       responses={400: {"model": MessageResponse}, 401: {"model": MessageResponse}})
        def login(data: LoginRequest):
            """Authenticate a student and return their profile and courses."""
            try:
                return self._account_service.login(data.email, data.password)
            except RegistrarException as e:
                return error_response(e)
            except Exception:
                return self._internal_error("Login")

        @self.app.get("/api/courses", response_model=List[CourseModel])
        def list_courses():
            """List the course catalog."""
            return self._enrollment_service.get_catalog()

        @self.app.get("/api/students/{student_id}/courses", response_model=List[Any],
                      responses={404: {"model": MessageResponse}})
        def get_student_courses(student_id: str):
            """Get a student's enrollment list."""
            try:
                return self._enrollment_service.get_enrollment(student_id)
            except RegistrarException as e:
                return error_response(e)
            except Exception:
                return self._internal_error("Get student courses")

        @self.app.put("/api/students/{student_id}/courses", response_model=List[Any],
                      responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}})
        def update_student_courses(student_id: str, data: CourseUpdateRequest):
            """Replace a student's enrollment list."""
            try:
                return self._enrollment_service.replace_enrollment(student_id, data.courses)
            except RegistrarException as e:
                return error_response(e)
            except Exception:
                return self._internal_error("Update student courses")

import pytest
from fastapi.testclient import TestClient

from registrar.client import (
    EnrollmentViewController, MemorySessionStorage, NavigationController,
    RegistrarClient, SessionContext,
)
from registrar.main import RegistrarPlatform
from registrar.persistence import SQLiteDatabase, StudentRepository
from registrar.services import AccountService, EnrollmentService
from registrar.core.credentials import PBKDF2PasswordHasher


@pytest.fixture
def database(tmp_path):
    return SQLiteDatabase(str(tmp_path / "registrar.db"))


@pytest.fixture
def repository(database):
    return StudentRepository(database)


@pytest.fixture
def hasher():
    # Few iterations keep the suite fast; the format is unchanged.
    return PBKDF2PasswordHasher(iterations=1000)


@pytest.fixture
def account_service(repository, hasher):
    return AccountService(repository, hasher)


@pytest.fixture
def enrollment_service(repository):
    return EnrollmentService(repository)


@pytest.fixture
def alice(account_service):
    return account_service.register("Alice", "a@x.com", "S1", "pw")


@pytest.fixture
def platform(tmp_path):
    return RegistrarPlatform({
        'database_config': {'database_path': str(tmp_path / "api.db")},
        'password_hash_iterations': 1000,
    })


@pytest.fixture
def http(platform):
    with TestClient(platform.app) as client:
        yield client


@pytest.fixture
def api(http):
    return RegistrarClient(base_url="", http=http)


@pytest.fixture
def session():
    return SessionContext(MemorySessionStorage())


@pytest.fixture
def controller(api, session):
    return EnrollmentViewController(api, session)


@pytest.fixture
def navigation(api, session, controller):
    return NavigationController(api, session, controller)

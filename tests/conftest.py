"""
Test configuration and fixtures
"""
import os
import tempfile
from typing import Callable, Generator

import pytest

# Set testing environment before the app reads its config
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(tempfile.gettempdir(), 'schooladmin_test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-key-for-testing"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("DEFAULT_ADMIN_EMAIL", None)
os.environ.pop("DEFAULT_ADMIN_PASSWORD", None)

from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from schooladmin.database import Base, SessionLocal, engine
from schooladmin.main import app
from schooladmin.models import User
from schooladmin.utils.auth import register_principal
from schooladmin.utils.tokens import issue_token

fake = Faker()


@pytest.fixture(autouse=True)
def fresh_schema() -> Generator[None, None, None]:
    """Every test starts from empty tables"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    # no context manager: tables come from fresh_schema, not the lifespan hook
    yield TestClient(app)


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., User]:
    def _make(role: str, password: str = "secret-pass-123") -> User:
        return register_principal(db_session, fake.unique.email(), password, role, name=fake.name())
    return _make


def _headers(user: User) -> dict:
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def admin_headers(make_user) -> dict:
    return _headers(make_user("admin"))


@pytest.fixture
def teacher_headers(make_user) -> dict:
    return _headers(make_user("teacher"))


@pytest.fixture
def student_headers(make_user) -> dict:
    return _headers(make_user("student"))


@pytest.fixture
def class_payload() -> dict:
    return {"name": "1A", "year": 2024, "studentFees": 1000}


@pytest.fixture
def teacher_payload() -> dict:
    return {
        "name": fake.name(),
        "gender": "Female",
        "dob": "1985-03-14",
        "contactDetails": fake.phone_number(),
        "salary": 3000,
    }


@pytest.fixture
def student_payload() -> dict:
    return {
        "name": fake.name(),
        "gender": "Male",
        "dob": "2012-09-01",
        "contactDetails": fake.phone_number(),
        "feesPaid": 500,
    }

"""
Pytest configuration and fixtures for all tests.

The app runs against an in-memory SQLite database shared through a
StaticPool; ``get_db`` is overridden so requests and fixtures see the same
data.
"""

import os
from datetime import date

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "disabled")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from workshophub.core.database import get_db
from workshophub.core.roles import Role
from workshophub.core.security import create_access_token, get_password_hash
from workshophub.main import app
from workshophub.models.registry import Base, User, Workshop

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="session")
def engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(scope="session")
def TestingSession(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(autouse=True)
def schema(engine):
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db(TestingSession):
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(TestingSession):
    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def password_hash():
    # Hash once; bcrypt is deliberately slow
    return get_password_hash(TEST_PASSWORD)


@pytest.fixture
def make_user(db, password_hash):
    counter = {"n": 0}

    def _make_user(role: Role = Role.PARTICIPANT, name: str | None = None) -> User:
        counter["n"] += 1
        name = name or f"{role.value}-{counter['n']}"
        user = User(
            name=name,
            email=f"{name.lower().replace(' ', '.')}@example.com",
            password_hash=password_hash,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_workshop(db):
    def _make_workshop(seats: int = 10, instructor: User | None = None, title: str = "Intro to Pottery") -> Workshop:
        workshop = Workshop(
            title=title,
            description="Hands-on session",
            date=date(2026, 11, 5),
            time="10:00",
            venue="Room 4",
            seats=seats,
            instructor_id=instructor.id if instructor else None,
        )
        db.add(workshop)
        db.commit()
        db.refresh(workshop)
        return workshop

    return _make_workshop


@pytest.fixture
def auth_headers():
    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _auth_headers


@pytest.fixture
def admin(make_user):
    return make_user(Role.ADMIN, name="Admin")


@pytest.fixture
def instructor(make_user):
    return make_user(Role.INSTRUCTOR, name="Ada Instructor")


@pytest.fixture
def participant(make_user):
    return make_user(Role.PARTICIPANT, name="Pat Participant")

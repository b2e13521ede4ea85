"""
Pytest configuration and fixtures.

API and service tests run against an in-memory SQLite database that is
created fresh for every test.
"""

import itertools
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production-0123456789")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.security import create_access_token, get_password_hash
from app.db.session import get_db
from app.main import app
from app.models.user import User

TEST_PASSWORD = "correct-horse-battery"
_TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory creating committed users: ``make_user("head_coach")``."""
    counter = itertools.count(1)

    def _make(role: str = "player", full_name: str | None = None) -> User:
        n = next(counter)
        user = User(
            email=f"{role}.{n}@northharbour.co.nz",
            hashed_password=_TEST_PASSWORD_HASH,
            full_name=full_name or f"{role.replace('_', ' ').title()} {n}",
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token({"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers():
    return auth_headers


@pytest.fixture
def password():
    return TEST_PASSWORD

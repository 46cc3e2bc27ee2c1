"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Registered users with auth headers
"""

import os

# Must be set before the app is imported: settings are read at import time
os.environ.setdefault("JWT_SECRET", "test-signing-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JSON_LOGS", "false")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobtracker.core.database import Base, get_db
from jobtracker.core.security import PasswordHasher, TokenService
from jobtracker.models import job, user  # noqa: F401
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def token_service() -> TokenService:
    """Token service sharing the app's signing secret."""
    return app.state.token_service


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def register_user(client):
    """
    Factory that registers a user and returns (response_json, auth_headers).
    """
    def _register(name: str = "Test User", email: str = None, password: str = "secret123"):
        email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
        response = client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data, {"Authorization": f"Bearer {data['token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Auth headers for a freshly registered user"""
    _, headers = register_user()
    return headers


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "company": "Acme",
        "position": "Backend Engineer",
    }

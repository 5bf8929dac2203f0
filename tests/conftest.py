import os

# Settings are read at import time; point them at the test database first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["OPENAI_API_KEY"] = ""

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from app.database import get_db
from app.models import Base
from app.config import settings
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(
    user_id: str = "test-user-123",
    email: str | None = "test@example.com",
    name: str | None = "Test User",
    expired: bool = False,
) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        email: Optional 'email' claim
        name: Optional 'name' claim
        expired: If True, create expired token

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "exp": exp, "iat": datetime.now(UTC)}
    if email is not None:
        payload["email"] = email
    if name is not None:
        payload["name"] = name

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def headers_for(user_id: str, email: str | None = None, name: str | None = None) -> dict:
    token = create_test_token(user_id=user_id, email=email or f"{user_id}@example.com", name=name)
    return {"Authorization": f"Bearer {token}"}


def complete_signup(client, headers: dict) -> dict:
    """Run tenant bootstrap for the caller and return the result body"""
    response = client.post("/api/auth/complete-signup", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def mock_jwt_token():
    """Generate valid JWT token"""
    return create_test_token()


@pytest.fixture
def auth_headers(mock_jwt_token):
    """Authorization headers for a user who has not completed signup"""
    return {"Authorization": f"Bearer {mock_jwt_token}"}


@pytest.fixture
def signed_up_headers(client, auth_headers):
    """Authorization headers for a user whose company has been seeded"""
    complete_signup(client, auth_headers)
    return auth_headers


@pytest.fixture
def user_a_headers(client):
    """Authorization headers for signed-up user A"""
    headers = headers_for("user-a", name="Alice")
    complete_signup(client, headers)
    return headers


@pytest.fixture
def user_b_headers(client):
    """Authorization headers for signed-up user B"""
    headers = headers_for("user-b", name="Bob")
    complete_signup(client, headers)
    return headers


@pytest.fixture
def admin_headers(client, monkeypatch):
    """Authorization headers for an administrator"""
    monkeypatch.setattr(settings, "ADMIN_EMAILS", ADMIN_EMAIL)
    return headers_for("admin-user", email=ADMIN_EMAIL, name="Admin")


def find_account(client, headers: dict, name: str) -> dict:
    accounts = client.get("/api/accounts", headers=headers).json()["accounts"]
    return next(account for account in accounts if account["name"] == name)

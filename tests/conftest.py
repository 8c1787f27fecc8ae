"""Pytest configuration and fixtures."""

import os

# Point the application at a test database before anything from src is imported
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    base_url, db_name = os.environ["DATABASE_URL"].rsplit("/", 1)
    os.environ["DATABASE_URL"] = f"{base_url}/{db_name}_test"
else:
    # Running locally - use SQLite
    os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.database import Base, SessionLocal, engine, get_db  # noqa: E402
from src.main import app  # noqa: E402

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


def create_user_headers(client: TestClient, email: str, password: str = TEST_PASSWORD):
    """Sign up and sign in a user, returning bearer auth headers."""
    response = client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/auth/signin", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["access_token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if engine.url.get_backend_name() == "postgresql":
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(engine.url):
            create_database(engine.url)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return create_user_headers(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return create_user_headers(client, "other@example.com")

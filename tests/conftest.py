"""Pytest configuration and fixtures."""

import os

# Point the application at the test database before settings are cached.
# TEST_DATABASE_URL selects PostgreSQL in Docker, SQLite locally.
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["ENVIRONMENT"] = "development"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.database import Base, Database, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.models.user import User  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

test_database = Database(SQLALCHEMY_DATABASE_URL)


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-in user."""

    def __init__(self, *args, user_id: int | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database.init()
    yield
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session()

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


def sign_up_and_in(client, db, username: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user, sign in, and return bearer auth headers."""
    response = client.post("/api/v1/signup", json={"username": username, "password": password})
    assert response.status_code == 200

    response = client.post("/api/v1/signin", json={"username": username, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    user = db.query(User).filter(User.username == username).one()
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user.id, username=username)


@pytest.fixture
def auth_headers(client, db):
    """Create a user and return auth headers with user info."""
    return sign_up_and_in(client, db, "testuser")


@pytest.fixture
def other_auth_headers(client, db):
    """A second, unrelated user."""
    return sign_up_and_in(client, db, "otheruser", "otherpass123")

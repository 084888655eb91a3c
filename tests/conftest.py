"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from recipebox.config import Settings
from recipebox.database import Base, Database, get_db
from recipebox.main import create_app

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/recipebox", "/recipebox_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

test_settings = Settings(
    _env_file=None,
    database_url=SQLALCHEMY_DATABASE_URL,
    environment="test",
    jwt_secret="test-secret",
    log_level="WARNING",
)

app = create_app(test_settings, Database(SQLALCHEMY_DATABASE_URL))

TEST_PASSWORD = "testpass123"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from recipebox import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

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
def make_user_client(client):
    """Factory for clients that each hold their own user's credential cookie."""
    opened = []

    def _make(username: str, email: str | None = None) -> TestClient:
        user_client = TestClient(app)
        user_client.__enter__()
        opened.append(user_client)

        response = user_client.post(
            "/signup",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": TEST_PASSWORD,
            },
        )
        assert response.status_code == 201
        user_client.user_id = response.json()["user"]["id"]
        return user_client

    yield _make

    for user_client in opened:
        user_client.__exit__(None, None, None)


@pytest.fixture
def auth_client(make_user_client):
    """A client logged in as a freshly registered user."""
    return make_user_client("testuser", "test@example.com")


@pytest.fixture
def recipe_data():
    """Valid payload for creating a recipe."""
    return {
        "name": "Pasta Carbonara",
        "cuisine": "Italian",
        "ingredients": "spaghetti, eggs, pecorino, guanciale, black pepper",
        "instructions": "Boil pasta. Fry guanciale. Toss with eggs and cheese off the heat.",
        "recipe_picture_url": "https://example.com/carbonara.jpg",
        "total_prep_time": 25,
        "difficulty_level": "medium",
        "notes": "Do not scramble the eggs.",
    }


@pytest.fixture
def recipe(auth_client, recipe_data):
    """A recipe owned by ``auth_client``'s user."""
    response = auth_client.post("/recipe", json=recipe_data)
    assert response.status_code == 201
    return response.json()

"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from simple_twitter.api.dependencies import get_image_uploader
from simple_twitter.database import Base, get_db
from simple_twitter.main import app
from simple_twitter.models import Followship, Role, User
from simple_twitter.services.auth import get_password_hash
from simple_twitter.services.image_upload import ImageFile

TEST_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


class FakeUploader:
    """Image uploader that records uploads instead of calling Imgur."""

    def __init__(self):
        self.uploaded: list[ImageFile] = []

    async def upload(self, image: ImageFile) -> str:
        self.uploaded.append(image)
        return f"https://i.imgur.com/{image.filename}"


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/simple_twitter", "/simple_twitter_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


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
def uploader(client):
    """Replace the Imgur client with a recording fake."""
    fake = FakeUploader()
    app.dependency_overrides[get_image_uploader] = lambda: fake
    return fake


@pytest.fixture
def make_user(db):
    """Factory that inserts a user directly into the database."""

    def _make_user(account: str, role: Role = Role.USER, **fields) -> User:
        user = User(
            account=account,
            name=fields.pop("name", account.title()),
            email=fields.pop("email", f"{account}@example.com"),
            password=get_password_hash(fields.pop("password", TEST_PASSWORD)),
            role=role,
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def follow(db):
    """Factory that records follower -> following edges."""

    def _follow(follower: User, following: User) -> None:
        db.add(Followship(follower_id=follower.id, following_id=following.id))
        db.commit()

    return _follow


@pytest.fixture
def login(client):
    """Log a user in through the API and return auth headers."""

    def _login(user: User, password: str = TEST_PASSWORD) -> AuthHeaders:
        response = client.post(
            "/api/v1/auth/login", json={"email": user.email, "password": password}
        )
        assert response.status_code == 200
        token = response.json()["data"]["token"]
        return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user.id)

    return _login


@pytest.fixture
def auth_headers(client, make_user, login):
    """Create a user and return auth headers with user info."""
    return login(make_user("tester", name="Test User"))

"""Pytest configuration and fixtures."""

import os
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bloglist.database import Base, get_db, make_engine
from bloglist.main import app
from bloglist.models import Blog, User
from bloglist.repositories.base import attach_owners
from bloglist.services.auth import get_password_hash

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/bloglist", "/bloglist_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = make_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

ROOT_PASSWORD = "sekret"

INITIAL_BLOGS = [
    {
        "title": "HTML is easy",
        "author": "Edsger W. Dijkstra",
        "url": "https://example.com/html-is-easy",
        "likes": 5,
    },
    {
        "title": "Browser can execute only JavaScript",
        "author": "Michael Chan",
        "url": "https://example.com/browser-javascript",
        "likes": 7,
    },
]


class AuthHeaders(dict):
    """Dict subclass that also stores the logged-in user's id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


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
def root_user(db):
    """The root user, owning the initial blogs."""
    user = User(username="root", name="Root User", password_hash=get_password_hash(ROOT_PASSWORD))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def initial_blogs(db, root_user):
    """Seed the initial blogs owned by root."""
    blogs = [Blog(**data) for data in INITIAL_BLOGS]
    root_user.blogs.extend(blogs)
    db.commit()
    return blogs


@pytest.fixture
def auth_headers(client, root_user, initial_blogs):
    """Log in as root and return bearer auth headers."""
    response = client.post("/api/login", json={"username": "root", "password": ROOT_PASSWORD})
    assert response.status_code == 200
    token = response.json()["token"]
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=root_user.id)


@pytest.fixture
def other_auth_headers(client):
    """Register a second user and return their auth headers."""
    response = client.post(
        "/api/users",
        json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]
    response = client.post("/api/login", json={"username": "mluukkai", "password": "salainen"})
    token = response.json()["token"]
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id)


@pytest.fixture
def blogs_in_db(db):
    """Callable returning all blog rows, read fresh from the database."""

    def fetch() -> list[Blog]:
        db.expire_all()
        return db.query(Blog).order_by(Blog.id).all()

    return fetch


@pytest.fixture
def non_existing_id(db, root_user) -> int:
    """An id that was valid for a blog which no longer exists."""
    blog = Blog(title="willremovethissoon", url="https://example.com/will-remove", likes=0)
    root_user.blogs.append(blog)
    db.commit()
    blog_id = blog.id
    db.delete(blog)
    db.commit()
    return blog_id


class InMemoryUserRepository:
    """User repository over a dict, for service tests."""

    def __init__(self):
        self.rows: dict[int, User] = {}
        self._ids = count(1)

    def list_all(self):
        return list(self.rows.values())

    def get(self, user_id):
        return self.rows.get(user_id)

    def get_by_username(self, username):
        return next((u for u in self.rows.values() if u.username == username), None)

    def add(self, user):
        user.id = next(self._ids)
        self.rows[user.id] = user
        return user


class InMemoryBlogRepository:
    """Blog repository over a dict, sharing the user store for owner lookups."""

    def __init__(self, users: InMemoryUserRepository):
        self.users = users
        self.rows: dict[int, Blog] = {}
        self._ids = count(1)
        self.fail_next_add = False

    def list_all(self):
        return list(self.rows.values())

    def get(self, blog_id):
        return self.rows.get(blog_id)

    def add(self, blog, owner):
        if self.fail_next_add:
            self.fail_next_add = False
            raise RuntimeError("storage unavailable")
        blog.id = next(self._ids)
        blog.user_id = owner.id
        owner.blogs.append(blog)
        self.rows[blog.id] = blog
        return blog

    def update(self, blog, changes):
        for field, value in changes.items():
            setattr(blog, field, value)
        return blog

    def delete(self, blog):
        owner = self.users.get(blog.user_id)
        if owner is not None and blog in owner.blogs:
            owner.blogs.remove(blog)
        del self.rows[blog.id]

    def populate(self, blogs):
        return attach_owners(blogs, self.users.rows)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def blog_repo(user_repo):
    return InMemoryBlogRepository(user_repo)

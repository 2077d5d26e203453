import os
import tempfile
from dataclasses import dataclass, field

# Settings are read at import time; these must be set before the app is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "placement_portal_test_uploads"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import placement_portal.models  # noqa: F401  (registers every table on Base.metadata)
from placement_portal.core.rate_limiter import auth_rate_limiter
from placement_portal.database import Base, get_db
from placement_portal.dependencies import get_current_user
from placement_portal.main import app
from placement_portal.models.enums import Role

API = "/api"


@dataclass
class StubUser:
    id: str = "student-1"
    name: str = "Alice"
    email: str = "alice@example.com"
    role: Role = Role.STUDENT
    college_id: str | None = "college-1"
    company: str | None = None
    password_hash: str = "hashed-password"
    branch: str | None = None
    cgpa: float | None = None
    skills: list = field(default_factory=list)
    resume: str | None = None
    college: object | None = None
    projects: list = field(default_factory=list)
    saved_jobs: list = field(default_factory=list)


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    auth_rate_limiter.reset()
    yield
    auth_rate_limiter.reset()


@pytest.fixture
def student_user() -> StubUser:
    return StubUser()


@pytest.fixture
def college_user() -> StubUser:
    return StubUser(id="college-user-1", name="City College", email="tpo@city.edu", role=Role.COLLEGE)


@pytest.fixture
def recruiter_user() -> StubUser:
    return StubUser(
        id="recruiter-1",
        name="Bob",
        email="bob@acme.com",
        role=Role.RECRUITER,
        college_id=None,
        company="Acme",
    )


def _client_for(user):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    if user is not None:
        app.dependency_overrides[get_current_user] = lambda: user
    return TestClient(app)


@pytest.fixture
def client(student_user: StubUser):
    yield _client_for(student_user)
    app.dependency_overrides.clear()


@pytest.fixture
def college_client(college_user: StubUser):
    yield _client_for(college_user)
    app.dependency_overrides.clear()


@pytest.fixture
def recruiter_client(recruiter_user: StubUser):
    yield _client_for(recruiter_user)
    app.dependency_overrides.clear()


@pytest.fixture
def anon_client():
    yield _client_for(None)
    app.dependency_overrides.clear()


# --- Real database (in-memory SQLite shared through a single connection) ---


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_client(session_factory):
    """Full stack: real auth, real role gates, real SQL."""

    def _db_override():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()

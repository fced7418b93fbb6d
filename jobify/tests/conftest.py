"""
Pytest fixtures for Jobify API tests.
Uses in-memory SQLite and provides bearer tokens for two regular users and the demo user.
"""
import os
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"

from jobify.app.core.config import settings
from jobify.app.core.dependencies import get_db
from jobify.app.core.identity import Identity
from jobify.app.core.security import create_access_token
from jobify.app.db.base import Base
from jobify.app.models.job import Job
from jobify.main import app

USER_A = "user-a"
USER_B = "user-b"

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import jobify.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient with a clean DB."""
    return TestClient(app)


@pytest.fixture
def identity():
    return Identity.for_user(USER_A)


@pytest.fixture
def other_identity():
    return Identity.for_user(USER_B)


@pytest.fixture
def auth_headers():
    """Bearer token for user A."""
    return {"Authorization": f"Bearer {create_access_token(USER_A)}"}


@pytest.fixture
def other_auth_headers():
    """Bearer token for user B."""
    return {"Authorization": f"Bearer {create_access_token(USER_B)}"}


@pytest.fixture
def demo_auth_headers():
    """Bearer token for the read-only demo user."""
    return {"Authorization": f"Bearer {create_access_token(settings.demo_user_id)}"}


@pytest.fixture
def make_job(db_session):
    """Insert a job directly, bypassing the API. Returns the committed Job."""
    def _make_job(
        owner: str = USER_A,
        company: str = "Acme",
        position: str = "Engineer",
        status: str = "pending",
        job_type: str = "full-time",
        created_at: datetime | None = None,
    ) -> Job:
        job = Job(
            created_by=owner,
            company=company,
            position=position,
            status=status,
            job_type=job_type,
            job_location="Remote",
            created_at=created_at or datetime(2024, 1, 15),
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job

# tests/conftest.py
import os
import tempfile

# Keep the app's own engine and log files out of the working tree
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("STORAGE_PATH", tempfile.mkdtemp(prefix="research-assistant-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from research_assistant.main import app
from research_assistant.database import Base, enable_sqlite_foreign_keys, get_db
from research_assistant.config import settings
from research_assistant.models import (
    Project, ProjectStatus, Source, SourceType, Note, NoteType, Job, JobType, JobStatus
)

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

OWNER_ID = "user-owner"
OTHER_ID = "user-other"

@pytest.fixture(scope="session")
def engine():
    """Create test database engine"""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool  # Needed for SQLite in-memory database
    )
    enable_sqlite_foreign_keys(engine)
    return engine

@pytest.fixture
def db_session(engine):
    """Fresh tables and a session for each test"""
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()

    yield session

    session.close()
    Base.metadata.drop_all(engine)

@pytest.fixture
def client(db_session):
    """Test client using the test database"""
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
def owner_headers():
    return {settings.AUTH_USER_HEADER: OWNER_ID}

@pytest.fixture
def other_headers():
    return {settings.AUTH_USER_HEADER: OTHER_ID}

def _persist(db_session, record):
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record

@pytest.fixture
def sample_project(db_session):
    """Active project owned by OWNER_ID"""
    return _persist(db_session, Project(
        owner_id=OWNER_ID,
        title="Test Project",
        description="Test Description",
        topic="History",
        tags="ww2, essay"
    ))

@pytest.fixture
def second_project(db_session):
    """Another project of the same owner"""
    return _persist(db_session, Project(owner_id=OWNER_ID, title="Second Project"))

@pytest.fixture
def other_project(db_session):
    """Project owned by somebody else"""
    return _persist(db_session, Project(owner_id=OTHER_ID, title="Someone Else's Project"))

@pytest.fixture
def archived_project(db_session):
    return _persist(db_session, Project(
        owner_id=OWNER_ID,
        title="Old Project",
        status=ProjectStatus.ARCHIVED
    ))

@pytest.fixture
def sample_source(db_session, sample_project):
    return _persist(db_session, Source(
        project_id=sample_project.id,
        type=SourceType.BOOK,
        title="The Second World War",
        url="https://example.com/book",
        citation_text="Beevor, A. (2012).",
        snippet="It began in 1939.",
        meta={"pages": 880}
    ))

@pytest.fixture
def sample_note(db_session, sample_project, sample_source):
    return _persist(db_session, Note(
        project_id=sample_project.id,
        source_id=sample_source.id,
        type=NoteType.QUOTE,
        content="It began in 1939.",
        heading="Opening",
        location="p. 1"
    ))

@pytest.fixture
def sample_job(db_session, sample_project):
    return _persist(db_session, Job(
        project_id=sample_project.id,
        created_by=OWNER_ID,
        job_type=JobType.OUTLINE,
        input={"prompt": "Outline the essay"},
        status=JobStatus.PENDING
    ))

@pytest.fixture
def unscoped_job(db_session):
    """Job without a project, created by OWNER_ID"""
    return _persist(db_session, Job(
        created_by=OWNER_ID,
        job_type=JobType.CITATION,
        status=JobStatus.PENDING
    ))

"""Shared fixtures: in-memory database, API client, tokens and sample records."""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from jobly.auth import create_token
from jobly.config import Settings
from jobly.database import Base
from jobly.main import create_app
from jobly.models.company import Company
from jobly.models.job import Job

# ---------------------------------------------------------------------------
# In-memory SQLite test database (one per app, shared via StaticPool)
# ---------------------------------------------------------------------------
SQLALCHEMY_DATABASE_URL = "sqlite://"

TEST_SETTINGS = Settings(
    database_url=SQLALCHEMY_DATABASE_URL,
    secret_key="test-secret-key-for-jobly-test-suite",
    log_level="WARNING",
)


@pytest.fixture
def app():
    """Application built around the test settings, with its own database."""
    application = create_app(TEST_SETTINGS)
    engine = application.state.db_engine
    Base.metadata.create_all(bind=engine)
    yield application
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(app):
    """TestClient talking to the app's own database."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    """SQLAlchemy session on the app's database, for pre-populating test data."""
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin_headers():
    """Authorization header for an admin caller."""
    token = create_token("admin", is_admin=True, settings=TEST_SETTINGS)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    """Authorization header for a logged-in, non-admin caller."""
    token = create_token("u1", is_admin=False, settings=TEST_SETTINGS)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_companies(db):
    """Three companies of 1, 2 and 3 employees."""
    companies = [
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ]
    db.add_all(companies)
    db.commit()
    return companies


@pytest.fixture
def sample_jobs(db, sample_companies):
    """Jobs j1 (equity), j2 (no equity), j3 (no salary) and j4 (zero equity)."""
    jobs = [
        Job(title="j1", salary=1, equity=Decimal("0.01"), company_handle="c1"),
        Job(title="j2", salary=2, equity=None, company_handle="c2"),
        Job(title="j3", salary=None, equity=Decimal("0.001"), company_handle="c3"),
        Job(title="j4", salary=4, equity=Decimal("0"), company_handle="c1"),
    ]
    db.add_all(jobs)
    db.commit()
    for job in jobs:
        db.refresh(job)
    return jobs


@pytest.fixture
def test_settings():
    """Settings the test app and tokens share."""
    return TEST_SETTINGS


@pytest.fixture
def test_engine(app):
    """The in-memory engine behind the test app."""
    return app.state.db_engine

"""Shared test fixtures.

Runs the app against an in-memory SQLite database (one shared connection)
that is recreated for every test, with Celery pointed at in-memory
transports.
"""

import os
from collections.abc import Generator
from datetime import datetime, timezone

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.database import Base, SessionLocal, engine
from app.models import (
    Candidate,
    CandidateManagement,
    CandidateProcess,
    Company,
    Management,
    Process,
)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    """Fresh schema and a session on it."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_client(db_session: Session) -> Generator[TestClient, None, None]:
    """FastAPI TestClient; shutdown drops any pending disengagement jobs."""
    from app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture()
def seeded(db_session: Session) -> dict:
    """Two companies, one engagement each, a process and two candidates."""
    acme = Company(name="Acme")
    globex = Company(name="Globex")
    db_session.add_all([acme, globex])
    db_session.flush()

    acme_mgmt = Management(company_id=acme.id, name="Acme staffing")
    globex_mgmt = Management(company_id=globex.id, name="Globex staffing")
    process = Process(company_id=acme.id, job_offer="Backend Engineer")
    ana = Candidate(name="Ana", last_name="Rojas", email="ana@example.com")
    luis = Candidate(name="Luis", last_name="Soto", email="luis@example.com")
    db_session.add_all([acme_mgmt, globex_mgmt, process, ana, luis])
    db_session.commit()

    return {
        "acme": acme.id,
        "globex": globex.id,
        "acme_mgmt": acme_mgmt.id,
        "globex_mgmt": globex_mgmt.id,
        "process": process.id,
        "ana": ana.id,
        "luis": luis.id,
    }


@pytest.fixture()
def make_engagement(db_session: Session):
    """Insert a candidate_management row directly, bypassing the API."""

    def _make(candidate_id: int, management_id: int, **overrides) -> int:
        values = {
            "status": "active",
            "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "end_date": None,
            "position": "Engineer",
            "rate": 40.0,
        }
        values.update(overrides)
        record = CandidateManagement(
            candidate_id=candidate_id, management_id=management_id, **values
        )
        db_session.add(record)
        db_session.commit()
        return record.id

    return _make


@pytest.fixture()
def make_association(db_session: Session):
    """Insert a candidate_process row directly."""

    def _make(candidate_id: int, process_id: int, **fields) -> int:
        association = CandidateProcess(
            candidate_id=candidate_id, process_id=process_id, **fields
        )
        db_session.add(association)
        db_session.commit()
        return association.id

    return _make

import uuid
from datetime import datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

import jobboard.db.database as db_module
from jobboard.api.main import app
from jobboard.db import models


# Fresh schema per test on the in-memory SQLite engine (the module switches
# to it automatically under pytest).
@pytest.fixture(autouse=True)
def db_session():
    models.Base.metadata.drop_all(bind=db_module.engine)
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: repository tests use the shorter name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test's session."""
    def _override_get_db():
        yield db_session

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)


def _suffix() -> str:
    return uuid.uuid4().hex[:8]


def candidate_payload(**overrides):
    suffix = _suffix()
    data = {
        "name": f"Candidate {suffix}",
        "bio": "Backend developer",
        "email": f"candidate_{suffix}@example.com",
        "phone": "555-0100",
        "openToWork": True,
    }
    data.update(overrides)
    return data


def company_payload(**overrides):
    suffix = _suffix()
    data = {
        "name": f"Company {suffix}",
        "bio": "We build things",
        "email": f"jobs_{suffix}@company.com",
        "website": f"https://{suffix}.company.com",
    }
    data.update(overrides)
    return data


def job_payload(company_id: int, **overrides):
    data = {
        "title": f"Developer {_suffix()}",
        "description": "Build and maintain our APIs",
        "limitDate": "2030-01-31T00:00:00Z",
        "companyId": company_id,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_candidate(db_session):
    def _make(**overrides):
        data = candidate_payload(**overrides)
        candidate = models.Candidate(
            name=data["name"],
            bio=data["bio"],
            email=data["email"],
            phone=data["phone"],
            open_to_work=data["openToWork"],
        )
        db_session.add(candidate)
        db_session.commit()
        db_session.refresh(candidate)
        return candidate
    return _make


@pytest.fixture
def make_company(db_session):
    def _make(**overrides):
        company = models.Company(**company_payload(**overrides))
        db_session.add(company)
        db_session.commit()
        db_session.refresh(company)
        return company
    return _make


@pytest.fixture
def make_job(db_session, make_company):
    def _make(company=None, **overrides):
        company = company or make_company()
        data = job_payload(company.id, **overrides)
        job = models.Job(
            title=data["title"],
            description=data["description"],
            limit_date=datetime.fromisoformat(data["limitDate"]),
            company_id=company.id,
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job
    return _make


@pytest.fixture
def apply(db_session):
    """Register candidates on a job directly in the database."""
    def _apply(job, *candidates):
        for candidate in candidates:
            db_session.add(models.JobCandidate(job_id=job.id, candidate_id=candidate.id))
        db_session.commit()
    return _apply


@pytest.fixture
def payloads():
    """Request body builders with unique names/e-mails."""
    return SimpleNamespace(
        candidate=candidate_payload,
        company=company_payload,
        job=job_payload,
    )

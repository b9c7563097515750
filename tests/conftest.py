import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from staffdesk.db.base import Base
from staffdesk.db import models  # noqa: F401


@pytest.fixture()
def db_session():
    """In-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session: Session, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """TestClient with get_db overridden to use the in-memory session."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")

    from staffdesk.core.settings import get_settings
    from staffdesk.db.session import reset_engine

    get_settings.cache_clear()
    reset_engine()

    from staffdesk.api.deps import get_db
    from staffdesk.main import app

    def _override_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

    reset_engine()
    get_settings.cache_clear()
    os.environ.pop("DATABASE_URL", None)


@pytest.fixture
def make_staff_payload():
    """Factory for a valid staff record body; keyword overrides replace fields."""

    def _make(**overrides) -> dict:
        payload = {
            "appointment_number": "DFO/001",
            "full_name": "Sunil Perera",
            "gender": "Male",
            "date_of_birth": "1974-07-11",
            "nic_number": "741922757V",
            "marital_status": "Married",
            "address_line1": "12 Temple Road",
            "address_line2": "Kandy",
            "contact_number": "0771234567",
            "email": "Sunil.Perera@Example.lk",
            "designation": "District Forest Officer",
            "date_of_first_appointment": "2001-03-01",
            "increment_date": "1-3",
            "salary_code": "S1",
            "basic_salary": 185000.0,
            "increment_amount": 5200.0,
        }
        payload.update(overrides)
        return payload

    return _make

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from foyer.db.base import Base
from foyer.db.session import get_db
from foyer.main import app
from foyer.models import University
from foyer.services.university_service import UniversityService


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def service(db_session):
    return UniversityService(db_session)


@pytest.fixture
def make_university(db_session):
    def _make(name: str | None = None, address: str | None = None, is_deleted: bool = False) -> University:
        university = University(name=name, address=address, is_deleted=is_deleted)
        db_session.add(university)
        db_session.commit()
        db_session.refresh(university)
        return university

    return _make


@pytest.fixture
def client(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

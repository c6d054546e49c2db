"""
Shared test fixtures and utilities for VetClinic test suite.

This module contains the database session fixture, the API client fixture
and small factories for vets, reused across the test files.
"""

from typing import Generator, Iterable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db
from domain.models import Vet, Specialty, Day, init_database
from main import app
from scripts.init_db import seed


# Realistic vet names used across tests
REALISTIC_VETS = {
    "carter": ("James", "Carter"),
    "leary": ("Helen", "Leary"),
    "douglas": ("Linda", "Douglas"),
    "ortega": ("Rafael", "Ortega"),
}


# =============================================================================
# DATABASE SESSION FIXTURE
# =============================================================================


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Fresh in-memory SQLite database per test, with specialties and days seeded.

    StaticPool keeps a single connection so the schema survives across
    sessions and threads (FastAPI runs sync routes in a thread pool).

    Yields:
        Session: SQLAlchemy database session
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_database(bind=engine)
    TestingSession = sessionmaker(bind=engine, future=True)

    session = TestingSession()
    seed(session, with_vets=False)

    try:
        yield session
    finally:
        session.rollback()
        session.close()
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    TestClient whose routes use the test session.

    The client is not used as a context manager, so the lifespan handler
    (which would create tables on the configured database) does not run.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# =============================================================================
# FACTORIES
# =============================================================================


def make_vet(
    db: Session,
    first_name: str = "James",
    last_name: str = "Carter",
    specialties: Iterable[str] = (),
    days: Iterable[str] = (),
) -> Vet:
    """
    Persist a vet, optionally with specialties and available days by name.

    Example:
        >>> vet = make_vet(db, "Linda", "Douglas", specialties=["surgery"])
        >>> vet.nr_of_specialties
        1
    """
    vet = Vet(first_name=first_name, last_name=last_name)
    for name in specialties:
        vet.add_specialty(db.query(Specialty).filter(Specialty.name == name).one())
    for name in days:
        vet.add_day(db.query(Day).filter(Day.name == name).one())
    db.add(vet)
    db.commit()
    db.refresh(vet)
    return vet


def make_vets(db: Session, count: int) -> list:
    """Persist `count` vets named Vet1 Test .. VetN Test"""
    return [make_vet(db, f"Vet{i}", "Test") for i in range(1, count + 1)]


def specialty_named(db: Session, name: str) -> Specialty:
    return db.query(Specialty).filter(Specialty.name == name).one()


def day_named(db: Session, name: str) -> Day:
    return db.query(Day).filter(Day.name == name).one()

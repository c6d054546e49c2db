"""
Tests for the database seeding script.
"""

from sqlalchemy.orm import Session

from test_fixtures import db_session
from scripts.init_db import seed, SAMPLE_VETS
from repositories import VetRepository


def test_seed_is_idempotent(db_session: Session):
    # db_session is already seeded with reference data
    counts = seed(db_session, with_vets=False)
    assert counts == {"specialties": 0, "days": 0, "vets": 0}


def test_seed_sample_vets(db_session: Session):
    counts = seed(db_session)
    assert counts["vets"] == len(SAMPLE_VETS)

    vets = VetRepository(db_session).get_all()
    douglas = next(v for v in vets if v.last_name == "Douglas")
    assert [s.name for s in douglas.sorted_specialties] == ["dentistry", "surgery"]

    # Vets are only seeded into an empty table
    assert seed(db_session)["vets"] == 0

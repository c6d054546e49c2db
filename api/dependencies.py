"""
Request-scoped dependencies for the vet routes
"""

from typing import Generator
from sqlalchemy.orm import Session
from domain.models import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    One SQLAlchemy session per request, closed when the response is sent.

    Tests swap it out through ``app.dependency_overrides[get_db]``.

    Usage:
        @router.get("/vets/{vet_id}")
        def show_vet(vet_id: int, db: Session = Depends(get_db)):
            return VetService.get_vet(db, vet_id)
    """
    yield from get_db_session()

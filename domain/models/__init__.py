"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.vet import (
    Vet,
    Specialty,
    Day,
    vet_specialties,
    vet_available_days,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Vet models
    "Vet",
    "Specialty",
    "Day",
    "vet_specialties",
    "vet_available_days",
]

"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("vetclinic.database")

# Create SQLAlchemy Base
Base = declarative_base()

# SQLite connections are shared across FastAPI's worker threads
_connect_args = {"check_same_thread": False} if settings.is_sqlite() else {}

# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    connect_args=_connect_args,
    future=True,
)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database(bind=None):
    """Create all tables that do not exist yet"""
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

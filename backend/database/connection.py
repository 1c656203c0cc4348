"""
Database module for SQLAlchemy configuration and session management.
Provides the connection to the relational store backing the portal.
"""

from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from config import settings

# Create database engine with appropriate settings based on database type
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    echo=False,          # Set to True for SQL debugging
    connect_args=connect_args
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for declarative models
Base = declarative_base()


def utcnow() -> datetime:
    """Timezone-aware insert timestamp; keeps sub-second ordering on SQLite."""
    return datetime.now(timezone.utc)


def get_db():
    """
    Dependency function to get database session.
    Ensures proper session cleanup after request completion.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database tables.
    Creates all tables defined in the models.
    """
    from models import user, investigation, suspicious_vehicle  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)

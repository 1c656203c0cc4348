"""
Database package initialization.
Exports the engine, session factory and model base.
"""

from database.connection import get_db, init_db, utcnow, Base, engine, SessionLocal

__all__ = ["get_db", "init_db", "utcnow", "Base", "engine", "SessionLocal"]

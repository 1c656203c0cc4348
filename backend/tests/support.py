"""
Shared wiring for API tests: in-memory SQLite and in-memory storage.
"""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_db, init_db
from services.storage import InMemoryStorageClient, get_storage_client


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_client(session_factory, storage: InMemoryStorageClient) -> TestClient:
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_client] = lambda: storage
    return TestClient(app)


def clear_overrides():
    from main import app
    app.dependency_overrides.clear()

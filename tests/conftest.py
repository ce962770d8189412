import os

import pytest

# Use a throwaway in-memory database before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient

from scoretracker.core.database import Base, SessionLocal, engine
from scoretracker.main import app
import scoretracker.models  # noqa: F401  (registers tables on Base)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    # Not used as a context manager, so the startup hook (database wait, table creation) does not run
    return TestClient(app)

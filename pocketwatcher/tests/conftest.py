"""
Shared fixtures. Environment must be set before the application is imported.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="pocketwatcher-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from pocketwatcher.db.base import Base
from pocketwatcher.db.session import engine, SessionLocal
from pocketwatcher.main import app
import pocketwatcher.models  # noqa: F401


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register(client):
    """Register a user and return the auth headers for their token."""
    def _register(name="Asha", email="asha@example.com", password="s3cret-pass"):
        response = client.post(
            "/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return {"auth-token": response.json()["authToken"]}
    return _register

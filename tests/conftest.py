"""
Shared fixtures: in-memory database, API client and account helpers
"""
import os
from typing import Callable, Dict, Iterator

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import User, Profile  # noqa: E402,F401


@pytest.fixture
def session_factory() -> Iterator[sessionmaker]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    yield TestingSessionLocal

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def register(client) -> Callable[..., str]:
    """Register an account through the API and return its token"""

    def _register(
        name: str = "Jane Doe",
        email: str = "jane@example.com",
        password: str = "secret123"
    ) -> str:
        response = client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()["token"]

    return _register


@pytest.fixture
def auth_headers(register) -> Dict[str, str]:
    return {"x-auth-token": register()}


@pytest.fixture
def profile_payload() -> Dict[str, str]:
    return {
        "status": "Developer",
        "skills": "python, fastapi",
        "company": "Acme",
        "bio": "Builds things",
        "location": "Berlin",
        "githubusername": "janedoe",
        "twitter": "https://twitter.com/janedoe"
    }

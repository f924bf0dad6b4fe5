"""Shared fixtures: an app wired to an in-memory SQLite database and auth helpers."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from musica_api.core.config import Settings, get_settings
from musica_api.core.database import get_db
from musica_api.main import create_app
from musica_api.models import Base

TEST_SECRET = "test-secret"


def make_settings(**overrides: object) -> Settings:
    """Build Settings without reading .env, so tests do not depend on the host."""
    values: dict[str, object] = {
        "JWT_SECRET": TEST_SECRET,
        "DATABASE_URL": "sqlite://",
        "APP_ENV": "dev",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    """Fresh schema and TestClient per test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.settings = make_settings()

        app = create_app(self.settings)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.app = app
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def signup(self, username: str, password: str = "s3cret-pass", role: str = "Standard"):
        return self.client.post(
            "/signup", json={"username": username, "password": password, "role": role}
        )

    def login_token(self, username: str, password: str = "s3cret-pass") -> str:
        resp = self.client.post("/login", json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["token"]

    def admin_headers(self) -> dict[str, str]:
        self.signup("admin", role="Admin")
        return {"Authorization": self.login_token("admin")}

    def standard_headers(self) -> dict[str, str]:
        self.signup("listener", role="Standard")
        return {"Authorization": self.login_token("listener")}

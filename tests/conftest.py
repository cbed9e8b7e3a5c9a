"""Shared fixtures. The environment is prepared before ``filegate`` is imported."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

import pytest

TEST_ROOT = Path(tempfile.mkdtemp(prefix="filegate-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_ROOT / 'filegate.db'}"
os.environ["UPLOAD_DIR"] = str(TEST_ROOT / "uploads")
os.environ["SECRET_KEY"] = "test-secret"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["API_PREFIX"] = "/api"
os.environ.pop("ACCESS_TOKEN_EXPIRE_MINUTES", None)

from filegate.config import get_settings  # noqa: E402

get_settings.cache_clear()

from filegate.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from filegate.infrastructure.storage import LocalFileStorage, get_file_storage  # noqa: E402

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from a freshly bootstrapped database and empty storage."""

    Base.metadata.drop_all(bind=engine)
    storage_root = get_file_storage().root
    shutil.rmtree(storage_root, ignore_errors=True)
    storage_root.mkdir(parents=True, exist_ok=True)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def storage() -> LocalFileStorage:
    return get_file_storage()


@pytest.fixture()
def client():
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers(client) -> dict[str, str]:
    response = client.post("/api/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}

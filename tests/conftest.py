from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make users_api and the root scripts importable without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from users_api.app.core.config import settings  # noqa: E402
from users_api.app.core.storage import get_store  # noqa: E402
from users_api.app.main import app  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Point the store at an empty users.json inside tmp_path."""
    path = tmp_path / "users.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    get_store().reset()
    yield path


@pytest.fixture()
def client(data_file):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def new_user():
    return {"username": "testuser", "age": 30, "hobbies": ["reading", "gaming"]}

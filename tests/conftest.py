# =============================================================================
# File: tests/conftest.py
# Purpose: Temporary SQLite database per test + Flask app / client fixtures.
# =============================================================================
import pytest

from mrgcar import create_app, db


@pytest.fixture(autouse=True)
def _setup_tmp_db(tmp_path, monkeypatch):
    """Use a temporary SQLite file per test."""
    url = f"sqlite:///{tmp_path / 'test_db.sqlite'}"
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

    db.init_engine(url)
    db.init_db()
    yield
    db.engine.dispose()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()

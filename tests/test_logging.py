# =============================================================================
# tests/test_logging.py - Log File Tests
# =============================================================================
# When LOG_FILE is set, error envelopes are appended to that file.
# =============================================================================

import logging
import os

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.dependencies import get_supabase_client
from app.main import configure_logging, create_app
from tests.conftest import TEST_SECRET


def _file_handlers(path: str) -> list[logging.FileHandler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(path)
    ]


@pytest.fixture
def log_path(tmp_path):
    """Path of a log file; any root handler writing to it is removed afterwards."""
    path = str(tmp_path / "api.log")
    yield path
    for handler in _file_handlers(path):
        logging.getLogger().removeHandler(handler)
        handler.close()


@pytest.fixture
def file_logged_client(log_path, fake_db) -> TestClient:
    application = create_app(Settings(SECRET_KEY=TEST_SECRET, LOG_FILE=log_path))
    application.dependency_overrides[get_supabase_client] = lambda: fake_db
    return TestClient(application)


class TestLogFile:
    """Error envelopes are appended to LOG_FILE."""

    def test_error_envelope_is_written(self, file_logged_client, log_path):
        response = file_logged_client.get("/", params={"route": "orders"})

        assert response.status_code == 404
        with open(log_path, encoding="utf-8") as f:
            content = f.read()
        assert "API Response Error -> Status: Not Found" in content
        assert "WARNING" in content

    def test_existing_content_is_kept(self, log_path, fake_db):
        with open(log_path, "w", encoding="utf-8") as f:
            f.write("earlier line\n")

        application = create_app(Settings(SECRET_KEY=TEST_SECRET, LOG_FILE=log_path))
        application.dependency_overrides[get_supabase_client] = lambda: fake_db
        TestClient(application).get("/")

        with open(log_path, encoding="utf-8") as f:
            content = f.read()
        assert content.startswith("earlier line\n")
        assert "Status: Bad Request" in content

    def test_handler_added_once_per_path(self, log_path):
        settings = Settings(SECRET_KEY=TEST_SECRET, LOG_FILE=log_path)

        configure_logging(settings)
        configure_logging(settings)

        assert len(_file_handlers(log_path)) == 1

    def test_no_file_without_setting(self, tmp_path):
        configure_logging(Settings(SECRET_KEY=TEST_SECRET))
        assert not any(
            isinstance(h, logging.FileHandler) and h.baseFilename.startswith(str(tmp_path))
            for h in logging.getLogger().handlers
        )

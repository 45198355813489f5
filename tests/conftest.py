"""
Shared test fixtures.

Every file the service touches (store, logs, public directory) lives in a
per-test temporary directory.
"""

import sys
from pathlib import Path

# Add project root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import pytest
from typing import Generator

from config.settings import get_settings
from services.mapping_store import MappingStore
from services.data_service import DataService
from services.expiry_service import ExpiryService
from services.access_log_service import AccessLogService
from services.error_log_service import ErrorLogService


# ===================
# SERVICE FIXTURES
# ===================

@pytest.fixture
def store_path(tmp_path) -> Path:
    """Path of the store document (not created yet)."""
    return tmp_path / "dynamicConfig.json"


@pytest.fixture
def store(store_path) -> MappingStore:
    """MappingStore backed by a temporary file."""
    return MappingStore(store_path)


@pytest.fixture
def data_service(store) -> DataService:
    return DataService(store)


@pytest.fixture
def expiry_service(store) -> ExpiryService:
    return ExpiryService(store, retention_days=1)


@pytest.fixture
def access_log(tmp_path) -> AccessLogService:
    return AccessLogService(tmp_path / "logger.txt", tmp_path / "performance.txt")


@pytest.fixture
def error_log(tmp_path) -> ErrorLogService:
    return ErrorLogService(tmp_path / "errorLogger.txt")


# ===================
# APPLICATION FIXTURES
# ===================

@pytest.fixture
def app_env(tmp_path, monkeypatch) -> Generator[dict, None, None]:
    """
    Point the application settings at temporary files.

    Usage:
        def test_something(app_env):
            app_env["data_file"].write_text(...)

    Returns:
        Dict of the configured paths
    """
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "index.html").write_text("<html><body>JSON Vault</body></html>", encoding="utf-8")
    (public_dir / "app.js").write_text("console.log('vault');", encoding="utf-8")
    (public_dir / "logo.bin").write_bytes(b"\x00\x01\x02")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")

    paths = {
        "data_file": tmp_path / "dynamicConfig.json",
        "access_log_file": tmp_path / "logger.txt",
        "performance_log_file": tmp_path / "performance.txt",
        "error_log_file": tmp_path / "errorLogger.txt",
        "public_dir": public_dir,
    }
    for name, path in paths.items():
        monkeypatch.setenv(name.upper(), str(path))
    monkeypatch.setenv("ENVIRONMENT", "development")

    get_settings.cache_clear()
    yield paths
    get_settings.cache_clear()


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client(app_env):
    """
    Create FastAPI test client with the lifespan running.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

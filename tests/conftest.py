"""Shared fixtures for the pulse test suite."""

import pytest

CONTRACT_VARS = (
    "SERVER_PORT", "APP_ENV",
    "DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_SSL_MODE",
    "JWT_SECRET", "REFRESH_SECRET", "JWT_EXPIRATION",
)
RUNTIME_VARS = ("HOST", "LOG_LEVEL", "LOG_JSON", "SHUTDOWN_TIMEOUT_S")


@pytest.fixture
def minimal_env() -> dict[str, str]:
    """The five required variables and nothing else."""
    return {
        "DB_HOST": "db",
        "DB_USER": "u",
        "DB_NAME": "pulse",
        "JWT_SECRET": "a",
        "REFRESH_SECRET": "b",
    }


@pytest.fixture
def clean_environ(monkeypatch, tmp_path):
    """Strip every variable pulse reads and run from an empty directory (no .env)."""
    for name in CONTRACT_VARS + RUNTIME_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch

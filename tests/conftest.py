"""Pytest configuration and fixtures."""

import pytest

ABSENT_KEYS = ("INVALID", "MISSING")

TEST_ENVS = {
    "BOOL": "true",
    "COMPLEX": "10+10i",
    "DURATION": "10s",
    "FLOAT": "1.0",
    "INT": "1",
    "STRING": "string",
    "TIME": "Thu, 30 May 2024 20:06:14 GMT",
    "UINT": "1",
    "UNBOOL": "not a bool",
    "UNNUMBER": "not an int",
    "EMPTY": "",
}


@pytest.fixture
def test_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Populate the environment with the sample variables."""
    for key, value in TEST_ENVS.items():
        monkeypatch.setenv(key, value)
    for key in ABSENT_KEYS:
        monkeypatch.delenv(key, raising=False)
    return TEST_ENVS


@pytest.fixture
def clean_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove GENV_* variables and any .env file from the working directory."""
    monkeypatch.delenv("GENV_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GENV_LOG_JSON", raising=False)
    monkeypatch.chdir(tmp_path)

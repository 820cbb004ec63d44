"""Tests for environment settings."""

import pytest

from deploy_ssh.config import Settings
from deploy_ssh.utils.output import Verbosity


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import os

    for key in list(os.environ):
        if key.startswith("DEPLOY_SSH_"):
            monkeypatch.delenv(key)


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings.command_timeout == 300
    assert settings.multiplexing is True
    assert settings.verbosity is Verbosity.NORMAL
    assert settings.decorated is None
    assert settings.transport == "stdio"
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEPLOY_SSH_COMMAND_TIMEOUT", "45.5")
    monkeypatch.setenv("DEPLOY_SSH_MULTIPLEXING", "false")
    monkeypatch.setenv("DEPLOY_SSH_VERBOSITY", "debug")
    monkeypatch.setenv("DEPLOY_SSH_DECORATED", "yes")
    monkeypatch.setenv("DEPLOY_SSH_TRANSPORT", "HTTP")
    monkeypatch.setenv("DEPLOY_SSH_HTTP_PORT", "9001")

    settings = Settings.from_env()

    assert settings.command_timeout == 45.5
    assert settings.multiplexing is False
    assert settings.verbosity is Verbosity.DEBUG
    assert settings.decorated is True
    assert settings.transport == "http"
    assert settings.http_port == 9001


def test_decorated_auto_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEPLOY_SSH_DECORATED", "auto")
    assert Settings.from_env().decorated is None


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEPLOY_SSH_COMMAND_TIMEOUT", "soon")
    monkeypatch.setenv("DEPLOY_SSH_HTTP_PORT", "eighty")
    monkeypatch.setenv("DEPLOY_SSH_VERBOSITY", "loud")
    monkeypatch.setenv("DEPLOY_SSH_TRANSPORT", "carrier-pigeon")

    settings = Settings.from_env()

    assert settings.command_timeout == 300
    assert settings.http_port == 8000
    assert settings.verbosity is Verbosity.NORMAL
    assert settings.transport == "stdio"

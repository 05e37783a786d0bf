from __future__ import annotations

import pytest

from travis_client.config import ClientSettings, ConfigError
from travis_client.hosts import TravisHost


def test_from_env_reads_variables(monkeypatch) -> None:
    monkeypatch.setenv("TRAVIS_TOKEN", " env-token ")
    monkeypatch.setenv("TRAVIS_HOST", "COM")

    settings = ClientSettings.from_env()

    assert settings.token == "env-token"
    assert settings.host is TravisHost.COM
    assert "env-token" not in repr(settings)


def test_explicit_values_win(monkeypatch) -> None:
    monkeypatch.setenv("TRAVIS_TOKEN", "env-token")
    monkeypatch.setenv("TRAVIS_HOST", "com")

    settings = ClientSettings.from_env(token="explicit", host=TravisHost.ORG)

    assert settings.token == "explicit"
    assert settings.host is TravisHost.ORG


def test_missing_token_raises(monkeypatch) -> None:
    monkeypatch.delenv("TRAVIS_TOKEN", raising=False)

    with pytest.raises(ConfigError):
        ClientSettings.from_env()


def test_unknown_host_raises(monkeypatch) -> None:
    with pytest.raises(ConfigError, match="expected one of"):
        ClientSettings.from_env(token="t", host="enterprise")

from __future__ import annotations

import pytest

from media_backend.integrations.tmdb import settings as mod
from media_backend.integrations.tmdb.client import TmdbClient

_VARS = ("TMDB_API_KEY", "TMDB_BEARER", "TMDB_API_BASE_URL", "TMDB_LANGUAGE", "TMDB_TIMEOUT_SECONDS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mod, "load_env", lambda **kwargs: None)
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_requires_a_credential() -> None:
    with pytest.raises(mod.TmdbConfigError):
        mod.TmdbSettings.from_env()


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "  key123  ")

    settings = mod.TmdbSettings.from_env()

    assert settings.api_key == "key123"
    assert settings.bearer_token is None
    assert settings.base_url == "https://api.themoviedb.org/3"
    assert settings.language == "en-US"
    assert settings.timeout_seconds == 20.0


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_BEARER", "token")
    monkeypatch.setenv("TMDB_API_BASE_URL", "https://tmdb.example/3/")
    monkeypatch.setenv("TMDB_LANGUAGE", "")
    monkeypatch.setenv("TMDB_TIMEOUT_SECONDS", "7.5")

    settings = mod.TmdbSettings.from_env()

    assert settings.api_key is None
    assert settings.bearer_token == "token"
    assert settings.base_url == "https://tmdb.example/3"
    assert settings.language is None
    assert settings.timeout_seconds == 7.5


def test_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "k")
    monkeypatch.setenv("TMDB_TIMEOUT_SECONDS", "soon")

    with pytest.raises(ValueError, match="TMDB_TIMEOUT_SECONDS"):
        mod.TmdbSettings.from_env()


def test_client_from_env_wires_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "k")
    monkeypatch.setenv("TMDB_BEARER", "t")
    monkeypatch.setenv("TMDB_TIMEOUT_SECONDS", "3")

    client = TmdbClient.from_env()

    assert client.timeout_seconds == 3.0
    assert client.urls.api_key == "k"
    assert client.session.headers["Authorization"] == "Bearer t"

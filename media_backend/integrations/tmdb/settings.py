from __future__ import annotations

import os
from dataclasses import dataclass

from media_backend.utils.env import env_float, env_str, load_env

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIMEOUT_SECONDS = 20.0


class TmdbConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class TmdbSettings:
    """
    TMDb connection settings.

    Either a v3 `api_key` (sent as a query param) or a v4 `bearer_token`
    (sent as an Authorization header) is required; both may be set.
    """

    api_key: str | None = None
    bearer_token: str | None = None
    base_url: str = TMDB_API_BASE_URL
    language: str | None = DEFAULT_LANGUAGE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> TmdbSettings:
        load_env()
        api_key = env_str("TMDB_API_KEY")
        bearer_token = env_str("TMDB_BEARER")
        if not api_key and not bearer_token:
            raise TmdbConfigError("TMDB_API_KEY or TMDB_BEARER must be set.")

        # Set-but-blank TMDB_LANGUAGE drops the language param entirely.
        if os.getenv("TMDB_LANGUAGE") is None:
            language: str | None = DEFAULT_LANGUAGE
        else:
            language = env_str("TMDB_LANGUAGE")

        return cls(
            api_key=api_key,
            bearer_token=bearer_token,
            base_url=(env_str("TMDB_API_BASE_URL") or TMDB_API_BASE_URL).rstrip("/"),
            language=language,
            timeout_seconds=env_float("TMDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        )

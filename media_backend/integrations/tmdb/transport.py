from __future__ import annotations

from typing import Any

import requests

from media_backend.integrations.tmdb.settings import DEFAULT_TIMEOUT_SECONDS, TmdbSettings


class TmdbClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class TmdbMissingFieldError(TmdbClientError):
    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"TMDb response missing {field}.")
        self.field = field


def build_session(settings: TmdbSettings | None = None) -> requests.Session:
    """Create a requests session with TMDb headers (bearer auth when configured)."""
    session = requests.Session()
    session.headers.update({"accept": "application/json"})
    if settings is not None and settings.bearer_token:
        session.headers.update({"Authorization": f"Bearer {settings.bearer_token}"})
    return session


def request_json(
    session: requests.Session,
    url: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    GET `url` and return the decoded JSON object.

    A single attempt is made. Any failure (connection error, non-200 status,
    non-JSON body, JSON that is not an object) raises `TmdbClientError`.
    """

    try:
        resp = session.get(url, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TmdbClientError(f"TMDb request failed: {exc}") from exc

    if resp.status_code != 200:
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).")
    return payload

"""
TMDb integration client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from media_backend.integrations.tmdb.client import TmdbClient
    from media_backend.integrations.tmdb.models import (
        Genre,
        MediaItem,
        MediaList,
        MediaType,
        MovieListType,
        TimeWindow,
        TrendingMediaType,
        TvListType,
    )
    from media_backend.integrations.tmdb.settings import TmdbConfigError, TmdbSettings
    from media_backend.integrations.tmdb.transport import TmdbClientError, TmdbMissingFieldError
    from media_backend.integrations.tmdb.urls import TmdbUrls

_EXPORTS = {
    "TmdbClient": "client",
    "Genre": "models",
    "MediaItem": "models",
    "MediaList": "models",
    "MediaType": "models",
    "MovieListType": "models",
    "TimeWindow": "models",
    "TrendingMediaType": "models",
    "TvListType": "models",
    "TmdbConfigError": "settings",
    "TmdbSettings": "settings",
    "TmdbClientError": "transport",
    "TmdbMissingFieldError": "transport",
    "TmdbUrls": "urls",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str):
    if name in _EXPORTS:
        from importlib import import_module

        module = import_module(f"media_backend.integrations.tmdb.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

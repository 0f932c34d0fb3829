"""TMDb metadata client.

One method per query shape. Each method makes a single GET request and never
raises: failures are logged on the client's logger and turned into
`MediaList.empty()` (list queries) or `None` (everything else).
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable

import requests

from media_backend.integrations.tmdb.models import (
    Credit,
    Genre,
    MediaList,
    MediaType,
    MovieDetail,
    MovieListType,
    TimeWindow,
    TrendingMediaType,
    TvListType,
    TvShowDetail,
    Videos,
)
from media_backend.integrations.tmdb.normalize import media_list_from_payload, normalize_genres
from media_backend.integrations.tmdb.settings import DEFAULT_TIMEOUT_SECONDS, TmdbSettings
from media_backend.integrations.tmdb.transport import (
    TmdbMissingFieldError,
    build_session,
    request_json,
)
from media_backend.integrations.tmdb.urls import TmdbUrls

_API_KEY_PARAM_RE = re.compile(r"(api_key=)[^&]*")


def redact_url(url: str) -> str:
    return _API_KEY_PARAM_RE.sub(r"\1***", url)


class TmdbClient:
    def __init__(
        self,
        *,
        urls: TmdbUrls | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.urls = urls or TmdbUrls()
        self.session = session or build_session()
        self.logger = logger or logging.getLogger(__name__)
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(
        cls,
        settings: TmdbSettings,
        *,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> TmdbClient:
        return cls(
            urls=TmdbUrls.from_settings(settings),
            session=session or build_session(settings),
            logger=logger,
            timeout_seconds=settings.timeout_seconds,
        )

    @classmethod
    def from_env(cls, *, logger: logging.Logger | None = None) -> TmdbClient:
        return cls.from_settings(TmdbSettings.from_env(), logger=logger)

    def _fetch(self, url: str) -> dict[str, Any]:
        return request_json(self.session, url, timeout_seconds=self.timeout_seconds)

    def _log_failure(self, operation: str, exc: Exception, url: str | None = None) -> None:
        where = f" [{redact_url(url)}]" if url else ""
        self.logger.error(f"TMDb {operation} failed{where}: {exc}")

    def _get_record(self, operation: str, build_url: Callable[[], str]) -> dict[str, Any] | None:
        url = None
        try:
            url = build_url()
            return self._fetch(url)
        except Exception as exc:
            self._log_failure(operation, exc, url)
            return None

    def _get_list(self, operation: str, build_url: Callable[[], str], media_type: MediaType | None = None) -> MediaList:
        url = None
        try:
            url = build_url()
            return media_list_from_payload(self._fetch(url), media_type)
        except Exception as exc:
            self._log_failure(operation, exc, url)
            return MediaList.empty()

    # Trending

    def get_trending(
        self,
        media_type: TrendingMediaType | MediaType | str,
        time_window: TimeWindow | str,
        page: int | None = None,
    ) -> MediaList:
        return self._get_list(
            "get_trending",
            lambda: self.urls.trending_url(media_type, time_window, page),
        )

    # Movies

    def get_list_movies(self, list_type: MovieListType | str, page: int | None = None) -> MediaList:
        return self._get_list(
            "get_list_movies",
            lambda: self.urls.list_movies_url(list_type, page),
            MediaType.MOVIE,
        )

    def get_movie_detail(self, movie_id: int) -> MovieDetail | None:
        return self._get_record(f"get_movie_detail({movie_id})", lambda: self.urls.movie_detail_url(movie_id))

    # TV shows

    def get_list_tv_shows(self, list_type: TvListType | str, page: int | None = None) -> MediaList:
        return self._get_list(
            "get_list_tv_shows",
            lambda: self.urls.list_tv_shows_url(list_type, page),
            MediaType.TV,
        )

    def get_tv_show_detail(self, tv_id: int) -> TvShowDetail | None:
        return self._get_record(f"get_tv_show_detail({tv_id})", lambda: self.urls.tv_show_detail_url(tv_id))

    def get_tv_show_imdb_id(self, tv_id: int) -> str | None:
        """
        Return the IMDb id TMDb has on file for a TV show.

        A missing, null or otherwise falsy `imdb_id` counts as a failure.
        """
        url = None
        try:
            url = self.urls.tv_external_ids_url(tv_id)
            payload = self._fetch(url)
            imdb_id = payload.get("imdb_id")
            if not imdb_id:
                raise TmdbMissingFieldError("imdb_id", "This TV show does not have an IMDb id.")
            return imdb_id
        except Exception as exc:
            self._log_failure(f"get_tv_show_imdb_id({tv_id})", exc, url)
            return None

    # Shared by movies and TV

    def get_videos(self, media_type: MediaType | str, media_id: int) -> Videos | None:
        return self._get_record(
            f"get_videos({media_type}, {media_id})",
            lambda: self.urls.video_url(media_type, media_id),
        )

    def get_credits(self, media_type: MediaType | str, media_id: int) -> Credit | None:
        return self._get_record(
            f"get_credits({media_type}, {media_id})",
            lambda: self.urls.credit_url(media_type, media_id),
        )

    def get_similar(self, media_type: MediaType | str, media_id: int) -> MediaList:
        # Items keep the payload's own media_type; no hint is applied here.
        return self._get_list(
            "get_similar",
            lambda: self.urls.similar_url(media_type, media_id),
        )

    def get_list_genre(self, media_type: MediaType | str) -> list[Genre] | None:
        url = None
        try:
            url = self.urls.list_genre_url(media_type)
            return normalize_genres(self._fetch(url))
        except Exception as exc:
            self._log_failure(f"get_list_genre({media_type})", exc, url)
            return None

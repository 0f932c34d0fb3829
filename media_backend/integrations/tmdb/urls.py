from __future__ import annotations

from typing import Any

import requests

from media_backend.integrations.tmdb.models import (
    MediaType,
    MovieListType,
    TimeWindow,
    TrendingMediaType,
    TvListType,
)
from media_backend.integrations.tmdb.settings import DEFAULT_LANGUAGE, TMDB_API_BASE_URL, TmdbSettings


class TmdbUrls:
    """
    Builds fully qualified TMDb v3 request URLs.

    Every URL carries `api_key` and `language` when those are configured;
    list-style endpoints also carry `page` when one is given. Methods are pure
    and make no requests.
    """

    def __init__(
        self,
        *,
        base_url: str = TMDB_API_BASE_URL,
        api_key: str | None = None,
        language: str | None = DEFAULT_LANGUAGE,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.language = language

    @classmethod
    def from_settings(cls, settings: TmdbSettings) -> TmdbUrls:
        return cls(base_url=settings.base_url, api_key=settings.api_key, language=settings.language)

    def _url(self, path: str, *, page: int | None = None) -> str:
        params: dict[str, Any] = {}
        if self.api_key:
            params["api_key"] = self.api_key
        if self.language:
            params["language"] = self.language
        if page is not None:
            params["page"] = int(page)

        prepared = requests.PreparedRequest()
        prepared.prepare_url(f"{self.base_url}{path}", params)
        return prepared.url

    def trending_url(
        self,
        media_type: TrendingMediaType | MediaType | str,
        time_window: TimeWindow | str,
        page: int | None = None,
    ) -> str:
        media = TrendingMediaType(_value(media_type)).value
        window = TimeWindow(_value(time_window)).value
        return self._url(f"/trending/{media}/{window}", page=page)

    def list_movies_url(self, list_type: MovieListType | str, page: int | None = None) -> str:
        return self._url(f"/movie/{MovieListType(_value(list_type)).value}", page=page)

    def list_tv_shows_url(self, list_type: TvListType | str, page: int | None = None) -> str:
        return self._url(f"/tv/{TvListType(_value(list_type)).value}", page=page)

    def movie_detail_url(self, movie_id: int) -> str:
        return self._url(f"/movie/{int(movie_id)}")

    def tv_show_detail_url(self, tv_id: int) -> str:
        return self._url(f"/tv/{int(tv_id)}")

    def tv_external_ids_url(self, tv_id: int) -> str:
        return self._url(f"/tv/{int(tv_id)}/external_ids")

    def video_url(self, media_type: MediaType | str, media_id: int) -> str:
        return self._url(f"/{MediaType(_value(media_type)).value}/{int(media_id)}/videos")

    def credit_url(self, media_type: MediaType | str, media_id: int) -> str:
        return self._url(f"/{MediaType(_value(media_type)).value}/{int(media_id)}/credits")

    def similar_url(self, media_type: MediaType | str, media_id: int, page: int | None = None) -> str:
        return self._url(f"/{MediaType(_value(media_type)).value}/{int(media_id)}/similar", page=page)

    def list_genre_url(self, media_type: MediaType | str) -> str:
        return self._url(f"/genre/{MediaType(_value(media_type)).value}/list")


def _value(member: Any) -> Any:
    # Lets MediaType.MOVIE be passed where a TrendingMediaType is expected.
    return member.value if hasattr(member, "value") else member

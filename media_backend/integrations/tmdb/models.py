from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"


class TrendingMediaType(str, Enum):
    """Media types accepted by `/trending/{media_type}/{time_window}`."""

    ALL = "all"
    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"


class TimeWindow(str, Enum):
    DAY = "day"
    WEEK = "week"


class MovieListType(str, Enum):
    NOW_PLAYING = "now_playing"
    POPULAR = "popular"
    TOP_RATED = "top_rated"
    UPCOMING = "upcoming"


class TvListType(str, Enum):
    AIRING_TODAY = "airing_today"
    ON_THE_AIR = "on_the_air"
    POPULAR = "popular"
    TOP_RATED = "top_rated"


# Detail, credit and video payloads are returned exactly as TMDb sends them.
MovieDetail = dict[str, Any]
TvShowDetail = dict[str, Any]
Credit = dict[str, Any]
Videos = dict[str, Any]


@dataclass(frozen=True)
class MediaItem:
    """
    Summary of a movie or TV show as it appears in a paginated TMDb result.

    Movies and TV shows name some fields differently (`title`/`name`,
    `release_date`/`first_air_date`); both land on the same attribute here.
    `media_type` is whatever the caller supplied, falling back to the item's
    own `media_type` (present on trending results). It is never guessed.
    """

    id: int | None
    title: str | None = None
    original_title: str | None = None
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str | None = None
    genre_ids: tuple[int, ...] = ()
    original_language: str | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    media_type: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class MediaList:
    page: int
    total_pages: int
    items: tuple[MediaItem, ...] = ()

    @classmethod
    def empty(cls) -> MediaList:
        return cls(page=0, total_pages=0, items=())


@dataclass(frozen=True)
class Genre:
    id: int
    name: str

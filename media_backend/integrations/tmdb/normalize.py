from __future__ import annotations

from typing import Any, Mapping

from media_backend.integrations.tmdb.models import Genre, MediaItem, MediaList, MediaType
from media_backend.integrations.tmdb.transport import TmdbClientError


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _first_str(item: Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = _as_str(item.get(key))
        if value:
            return value
    return None


def normalize_media_item(item: Mapping[str, Any], media_type: MediaType | str | None = None) -> MediaItem:
    if media_type is not None:
        resolved_type: str | None = MediaType(getattr(media_type, "value", media_type)).value
    else:
        resolved_type = _as_str(item.get("media_type"))

    genre_ids = item.get("genre_ids")
    if not isinstance(genre_ids, list):
        genre_ids = []
    return MediaItem(
        id=_as_int(item.get("id")),
        title=_first_str(item, "title", "name"),
        original_title=_first_str(item, "original_title", "original_name"),
        overview=_as_str(item.get("overview")),
        poster_path=_as_str(item.get("poster_path")),
        backdrop_path=_as_str(item.get("backdrop_path")),
        release_date=_first_str(item, "release_date", "first_air_date"),
        genre_ids=tuple(g for g in genre_ids if isinstance(g, int) and not isinstance(g, bool)),
        original_language=_as_str(item.get("original_language")),
        popularity=_as_float(item.get("popularity")),
        vote_average=_as_float(item.get("vote_average")),
        vote_count=_as_int(item.get("vote_count")),
        media_type=resolved_type,
        raw=dict(item),
    )


def normalize_media_items(payload: Mapping[str, Any], media_type: MediaType | str | None = None) -> list[MediaItem]:
    """
    Map `payload["results"]` to `MediaItem`s in API order.

    When `media_type` is given it is stamped on every item; otherwise each
    item keeps its own `media_type` (if any). Non-object entries are skipped.
    """

    results = payload.get("results")
    if not isinstance(results, list):
        raise TmdbClientError("TMDb response missing results list.")
    return [normalize_media_item(r, media_type) for r in results if isinstance(r, Mapping)]


def media_list_from_payload(payload: Mapping[str, Any], media_type: MediaType | str | None = None) -> MediaList:
    page = _as_int(payload.get("page"))
    total_pages = _as_int(payload.get("total_pages"))
    return MediaList(
        page=page if page is not None else 0,
        total_pages=total_pages if total_pages is not None else 0,
        items=tuple(normalize_media_items(payload, media_type)),
    )


def normalize_genres(payload: Mapping[str, Any]) -> list[Genre]:
    """
    Map `payload["genres"]` to `Genre`s, skipping entries without an int id
    and a string name.
    """

    genres = payload.get("genres")
    if not isinstance(genres, list):
        raise TmdbClientError("TMDb response missing genres list.")

    parsed: list[Genre] = []
    for entry in genres:
        if not isinstance(entry, Mapping):
            continue
        genre_id = entry.get("id")
        name = entry.get("name")
        if isinstance(genre_id, bool) or not isinstance(genre_id, int) or not isinstance(name, str):
            continue
        parsed.append(Genre(id=genre_id, name=name))
    return parsed

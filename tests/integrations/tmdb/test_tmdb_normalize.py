from __future__ import annotations

import pytest

from media_backend.integrations.tmdb.models import Genre, MediaList, MediaType
from media_backend.integrations.tmdb.normalize import (
    media_list_from_payload,
    normalize_genres,
    normalize_media_item,
    normalize_media_items,
)
from media_backend.integrations.tmdb.transport import TmdbClientError


def test_normalize_media_item_prefers_hint_over_item_media_type() -> None:
    item = normalize_media_item({"id": 7, "name": "Show", "media_type": "movie"}, MediaType.TV)

    assert item.media_type == "tv"
    assert item.title == "Show"


def test_normalize_media_item_tolerates_odd_field_types() -> None:
    item = normalize_media_item(
        {
            "id": "42",
            "title": "",
            "name": "Fallback Name",
            "genre_ids": [1, "2", None, 3],
            "vote_average": True,
            "vote_count": "n/a",
        }
    )

    assert item.id == 42
    assert item.title == "Fallback Name"
    assert item.genre_ids == (1, 3)
    assert item.vote_average is None
    assert item.vote_count is None
    assert item.media_type is None


def test_normalize_media_items_requires_results_list() -> None:
    with pytest.raises(TmdbClientError):
        normalize_media_items({"page": 1})

    assert normalize_media_items({"results": []}, "movie") == []


def test_media_list_from_payload_defaults_missing_pagination_to_zero() -> None:
    result = media_list_from_payload({"results": [{"id": 1, "title": "A"}]}, "movie")

    assert result.page == 0
    assert result.total_pages == 0
    assert len(result.items) == 1
    assert result != MediaList.empty()


def test_normalize_genres_keeps_well_formed_entries_only() -> None:
    payload = {"genres": [{"id": 28, "name": "Action"}, {"id": True, "name": "Bool"}, {"id": "12", "name": "Str"}, None]}

    assert normalize_genres(payload) == [Genre(id=28, name="Action")]
    with pytest.raises(TmdbClientError):
        normalize_genres({"status_message": "?"})

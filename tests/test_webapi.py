"""Test cases for web API endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.ytdata.errors import PlaylistNotFoundError, UpstreamError
from src.ytdata.webapi import app

client = TestClient(app)


@pytest.fixture
def mock_youtube_api(mocker, api):
    """Serve requests from the mocked YouTube client."""
    mocker.patch("src.ytdata.webapi.get_youtube_client", return_value=api)
    return api


def test_search_endpoint(mock_youtube_api, youtube_client):
    response = client.get("/search/videos", params={"q": "cats", "max_results": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "video"
    assert body["count"] == 2
    assert [item["id"] for item in body["items"]] == ["vid1", "vid2"]


def test_search_unknown_kind(mock_youtube_api):
    response = client.get("/search/users", params={"q": "cats"})
    assert response.status_code == 404


def test_search_invalid_max_results(mock_youtube_api):
    response = client.get("/search/videos", params={"q": "cats", "max_results": 99})
    assert response.status_code == 400


def test_video_endpoint(mock_youtube_api):
    response = client.get("/videos/vid1")

    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Video 1"


def test_channel_endpoints(mock_youtube_api):
    response = client.get("/channels/UC123")
    assert response.status_code == 200
    assert response.json()["data"]["video_count"] == 10

    response = client.get("/channels/UC123/videos")
    assert response.status_code == 200
    assert response.json()["count"] == 2


def test_playlist_endpoint(mock_youtube_api):
    response = client.get("/playlists/PL123")

    assert response.status_code == 200
    assert response.json()["data"]["length"] == 2


def test_playlist_items_endpoint(mock_youtube_api, youtube_client, make_pages):
    youtube_client.playlistItems.return_value.list.return_value.execute.side_effect = make_pages(
        120
    )

    response = client.get("/playlists/PL123/items")

    assert response.status_code == 200
    assert response.json()["count"] == 120


def test_playlist_items_not_found(mock_youtube_api, mocker):
    mocker.patch.object(
        mock_youtube_api,
        "get_playlist_items",
        side_effect=PlaylistNotFoundError("Playlist PL123 not found"),
    )

    response = client.get("/playlists/PL123/items")

    assert response.status_code == 404
    assert response.json()["detail"] == "Playlist PL123 not found"


def test_upstream_failure(mock_youtube_api, mocker):
    mocker.patch.object(
        mock_youtube_api, "get_video", side_effect=UpstreamError("Connection reset")
    )

    response = client.get("/videos/vid1")

    assert response.status_code == 502


def test_missing_api_key(mocker):
    mocker.patch("src.ytdata.webapi.config.YOUTUBE_API_KEY", None)

    response = client.get("/videos/vid1")

    assert response.status_code == 500

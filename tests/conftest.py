"""Common test fixtures and utilities."""

from typing import Dict, List, Optional

import pytest
from unittest.mock import MagicMock

from src.ytdata.api import YouTube


def playlist_item(n: int) -> Dict:
    """Build a raw playlistItems resource pointing at video ``vid<n>``."""
    return {
        "kind": "youtube#playlistItem",
        "id": f"item{n}",
        "snippet": {
            "title": f"Video {n}",
            "description": f"Description {n}",
            "channelId": "UC123",
            "position": n,
            "resourceId": {"kind": "youtube#video", "videoId": f"vid{n}"},
        },
    }


def playlist_pages(
    total: int, page_size: int = 50, tokens: bool = True, reported_total: Optional[int] = None
) -> List[Dict]:
    """Split ``total`` playlist items into playlistItems list responses.

    Every page but the last carries a ``nextPageToken`` when ``tokens`` is set.
    """
    pages = []
    starts = list(range(0, total, page_size)) or [0]
    for index, start in enumerate(starts):
        page = {
            "kind": "youtube#playlistItemListResponse",
            "items": [playlist_item(n) for n in range(start, min(start + page_size, total))],
            "pageInfo": {
                "totalResults": total if reported_total is None else reported_total,
                "resultsPerPage": page_size,
            },
        }
        if tokens and index < len(starts) - 1:
            page["nextPageToken"] = f"token{index + 1}"
        pages.append(page)
    return pages


@pytest.fixture
def make_pages():
    """Factory for paged playlistItems responses, see playlist_pages."""
    return playlist_pages


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API service.

    Returns:
        MagicMock: Mock service with list responses for each resource
    """
    mock = MagicMock()

    mock.playlistItems.return_value.list.return_value.execute.return_value = playlist_pages(2)[0]

    mock.videos.return_value.list.return_value.execute.return_value = {
        "kind": "youtube#videoListResponse",
        "items": [
            {
                "kind": "youtube#video",
                "id": "vid1",
                "snippet": {
                    "title": "Video 1",
                    "description": "Description 1",
                    "channelId": "UC123",
                    "channelTitle": "Channel 1",
                    "publishedAt": "2020-01-01T00:00:00Z",
                    "tags": ["music", "live"],
                    "thumbnails": {"default": {"url": "https://i.ytimg.com/vi/vid1/default.jpg"}},
                },
                "contentDetails": {"duration": "PT4M13S"},
            }
        ],
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
    }

    mock.channels.return_value.list.return_value.execute.return_value = {
        "kind": "youtube#channelListResponse",
        "items": [
            {
                "kind": "youtube#channel",
                "id": "UC123",
                "snippet": {
                    "title": "Channel 1",
                    "description": "About channel 1",
                    "customUrl": "@channel1",
                    "country": "US",
                },
                "statistics": {
                    "viewCount": "1000",
                    "subscriberCount": "100",
                    "hiddenSubscriberCount": False,
                    "videoCount": "10",
                },
                "contentDetails": {"relatedPlaylists": {"uploads": "UU123"}},
            }
        ],
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
    }

    mock.playlists.return_value.list.return_value.execute.return_value = {
        "kind": "youtube#playlistListResponse",
        "items": [
            {
                "kind": "youtube#playlist",
                "id": "PL123",
                "snippet": {
                    "title": "Playlist 1",
                    "description": "Description 1",
                    "channelId": "UC123",
                },
                "contentDetails": {"itemCount": 2},
                "player": {"embedHtml": "<iframe></iframe>"},
            }
        ],
        "pageInfo": {"totalResults": 1, "resultsPerPage": 1},
    }

    mock.search.return_value.list.return_value.execute.return_value = {
        "kind": "youtube#searchListResponse",
        "items": [
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#video", "videoId": "vid1"},
                "snippet": {"title": "Video 1", "channelId": "UC123"},
            },
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#video", "videoId": "vid2"},
                "snippet": {"title": "Video 2", "channelId": "UC123"},
            },
        ],
        "pageInfo": {"totalResults": 2, "resultsPerPage": 2},
    }

    return mock


@pytest.fixture
def api(youtube_client) -> YouTube:
    """Create a YouTube client around the mock service."""
    return YouTube(youtube=youtube_client)

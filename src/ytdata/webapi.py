"""Read-only web API over the YouTube client."""

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import config
from .api import YouTube
from .errors import InvalidArgumentError, NotFoundError, UpstreamError, YouTubeError, log_error
from .logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(title="ytdata")


class EntityResponse(BaseModel):
    """Response model for a single video, channel or playlist."""

    kind: str
    data: Dict[str, Any]


class EntityListResponse(BaseModel):
    """Response model for lists of entities."""

    kind: str
    count: int
    items: List[Dict[str, Any]]


def get_youtube_client() -> YouTube:
    """Get a YouTube client for the configured API key.

    Returns:
        YouTube: Client bound to YOUTUBE_API_KEY

    Raises:
        HTTPException: If no key is configured or the service cannot be built
    """
    if not config.YOUTUBE_API_KEY:
        logger.error("YOUTUBE_API_KEY is not set")
        raise HTTPException(status_code=500, detail="YouTube API key not configured")
    try:
        return YouTube(config.YOUTUBE_API_KEY)
    except YouTubeError as e:
        log_error(e, "Failed to create YouTube client")
        raise HTTPException(status_code=500, detail="Failed to create YouTube client")


def to_http_error(error: YouTubeError) -> HTTPException:
    """Translate a client error into an HTTP error."""
    if isinstance(error, InvalidArgumentError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, UpstreamError):
        log_error(error, "YouTube API request failed")
        return HTTPException(status_code=502, detail="YouTube API request failed")
    return HTTPException(status_code=500, detail=str(error))


def _single(kind: str, entity) -> EntityResponse:
    return EntityResponse(kind=kind, data=entity.to_dict())


def _many(kind: str, entities) -> EntityListResponse:
    items = [entity.to_dict() for entity in entities]
    return EntityListResponse(kind=kind, count=len(items), items=items)


@app.get("/search/{kind}", response_model=EntityListResponse)
def search_endpoint(
    kind: str, q: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
) -> EntityListResponse:
    """Search videos, channels or playlists."""
    client = get_youtube_client()
    search = {
        "videos": client.search_videos,
        "channels": client.search_channels,
        "playlists": client.search_playlists,
    }.get(kind)
    if search is None:
        raise HTTPException(status_code=404, detail=f"Unknown search kind: {kind}")

    try:
        return _many(kind.rstrip("s"), search(q, max_results))
    except YouTubeError as e:
        raise to_http_error(e)


@app.get("/videos/{video_id}", response_model=EntityResponse)
def video_endpoint(video_id: str) -> EntityResponse:
    """Get a video."""
    client = get_youtube_client()
    try:
        return _single("video", client.get_video(video_id))
    except YouTubeError as e:
        raise to_http_error(e)


@app.get("/channels/{channel_id}", response_model=EntityResponse)
def channel_endpoint(channel_id: str) -> EntityResponse:
    """Get a channel."""
    client = get_youtube_client()
    try:
        return _single("channel", client.get_channel(channel_id))
    except YouTubeError as e:
        raise to_http_error(e)


@app.get("/channels/{channel_id}/videos", response_model=EntityListResponse)
def channel_videos_endpoint(channel_id: str) -> EntityListResponse:
    """Get the latest videos of a channel."""
    client = get_youtube_client()
    try:
        return _many("video", client.get_channel_videos(channel_id))
    except YouTubeError as e:
        raise to_http_error(e)


@app.get("/playlists/{playlist_id}", response_model=EntityResponse)
def playlist_endpoint(playlist_id: str) -> EntityResponse:
    """Get a playlist."""
    client = get_youtube_client()
    try:
        return _single("playlist", client.get_playlist(playlist_id))
    except YouTubeError as e:
        raise to_http_error(e)


@app.get("/playlists/{playlist_id}/items", response_model=EntityListResponse)
def playlist_items_endpoint(playlist_id: str, max_results: int = -1) -> EntityListResponse:
    """Get the videos of a playlist, all of them unless max_results is given."""
    client = get_youtube_client()
    try:
        return _many("video", client.get_playlist_items(playlist_id, max_results))
    except YouTubeError as e:
        raise to_http_error(e)

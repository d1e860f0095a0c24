"""Awaitable facade over the YouTube client.

The underlying HTTP transport is blocking, so each call runs in a worker
thread while the awaiting task is suspended. Each worker thread executes
requests on its own HTTP transport, see YouTubeBase._http. Pages of a
single playlist fetch are still requested one after another.
"""

import asyncio
from typing import List, Optional

from . import config
from .api import YouTube
from .entities import Channel, Playlist, Video


class AsyncYouTube:
    """Coroutine versions of every YouTube client operation."""

    def __init__(self, token: Optional[str] = None, client: Optional[YouTube] = None):
        """Initialize client.

        Args:
            token: YouTube Data API v3 key. Required unless a client is given.
            client: Existing synchronous client to wrap
        """
        self.client = client if client is not None else YouTube(token)

    async def search_videos(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Video]:
        return await asyncio.to_thread(self.client.search_videos, term, max_results)

    async def search_channels(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Channel]:
        return await asyncio.to_thread(self.client.search_channels, term, max_results)

    async def search_playlists(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Playlist]:
        return await asyncio.to_thread(self.client.search_playlists, term, max_results)

    async def get_video(self, video_id: str) -> Video:
        return await asyncio.to_thread(self.client.get_video, video_id)

    async def get_video_by_url(self, url: str) -> Video:
        return await asyncio.to_thread(self.client.get_video_by_url, url)

    async def get_channel(self, channel_id: str) -> Channel:
        return await asyncio.to_thread(self.client.get_channel, channel_id)

    async def get_channel_by_url(self, url: str) -> Channel:
        return await asyncio.to_thread(self.client.get_channel_by_url, url)

    async def get_channel_videos(self, channel_id: str) -> List[Video]:
        return await asyncio.to_thread(self.client.get_channel_videos, channel_id)

    async def get_playlist(self, playlist_id: str) -> Playlist:
        return await asyncio.to_thread(self.client.get_playlist, playlist_id)

    async def get_playlist_by_url(self, url: str) -> Playlist:
        return await asyncio.to_thread(self.client.get_playlist_by_url, url)

    async def get_playlist_items(self, playlist_id: str, max_results: int = -1) -> List[Video]:
        """Get the videos in a playlist. See YouTube.get_playlist_items."""
        return await asyncio.to_thread(self.client.get_playlist_items, playlist_id, max_results)

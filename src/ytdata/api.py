"""YouTube Data API client."""

from typing import List, Optional

from . import config
from .auth import get_youtube_service
from .core import YouTubeBase
from .entities import Channel, Playlist, Video
from .errors import (
    ChannelNotFoundError,
    InvalidUrlError,
    PlaylistNotFoundError,
    UpstreamError,
    VideoNotFoundError,
)
from .logging_config import get_logger
from .pagination import collect_pages
from .schemas import ListResponse
from .utils import check_max_results, parse_url, require_id


logger = get_logger(__name__)

VIDEO_PARTS = "snippet,contentDetails"
CHANNEL_PARTS = "snippet,statistics,status,contentDetails"
PLAYLIST_PARTS = "snippet,contentDetails,player"


class YouTube(YouTubeBase):
    """Client for searching and looking up videos, channels and playlists."""

    def __init__(self, token: Optional[str] = None, youtube=None):
        """Initialize client.

        Args:
            token: YouTube Data API v3 key. Required unless youtube is given.
            youtube: Prebuilt API service, used instead of building one
        """
        super().__init__(youtube if youtube is not None else get_youtube_service(token))

    # Search

    def _search(self, term: str, kind: str, max_results: int) -> ListResponse:
        check_max_results(max_results)
        logger.debug("Searching %ss for %r (max %d)", kind, term, max_results)
        request = self.youtube.search().list(
            q=term,
            maxResults=max_results,
            part="snippet",
            type=kind,
        )
        return self._execute(request, f"Failed to search {kind}s")

    def search_videos(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Video]:
        """Search videos on YouTube.

        Args:
            term: What to search for
            max_results: Number of results to return, 1 to 50

        Returns:
            Matching videos, in search ranking order

        Raises:
            InvalidArgumentError: If max_results is out of range
            UpstreamError: If the API request fails
        """
        response = self._search(term, "video", max_results)
        return [Video(self, item) for item in response.items]

    def search_channels(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Channel]:
        """Search channels on YouTube.

        Args:
            term: What to search for
            max_results: Number of results to return, 1 to 50

        Returns:
            Matching channels
        """
        response = self._search(term, "channel", max_results)
        return [Channel(self, item) for item in response.items]

    def search_playlists(
        self, term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS
    ) -> List[Playlist]:
        """Search playlists on YouTube.

        Args:
            term: What to search for
            max_results: Number of results to return, 1 to 50

        Returns:
            Matching playlists
        """
        response = self._search(term, "playlist", max_results)
        return [Playlist(self, item) for item in response.items]

    # Videos

    def get_video(self, video_id: str) -> Video:
        """Get a video from its ID.

        Args:
            video_id: ID of the video

        Returns:
            The full video

        Raises:
            VideoNotFoundError: If no video has this ID
            UpstreamError: If the API request fails
        """
        video_id = require_id(video_id, "video")
        request = self.youtube.videos().list(id=video_id, part=VIDEO_PARTS)
        response = self._execute(request, f"Failed to get video {video_id}")

        if not response.items:
            raise VideoNotFoundError(f"Video {video_id} not found")

        return Video(self, response.items[0])

    def get_video_by_url(self, url: str) -> Video:
        """Get a video from its URL.

        Raises:
            InvalidUrlError: If the URL does not point at a video
            VideoNotFoundError: If the video does not exist
        """
        video_id = parse_url(url).video
        if not video_id:
            raise InvalidUrlError(url, "video")
        return self.get_video(video_id)

    # Channels

    def get_channel(self, channel_id: str) -> Channel:
        """Get a channel from its ID.

        Args:
            channel_id: ID of the channel

        Returns:
            The full channel

        Raises:
            ChannelNotFoundError: If no channel has this ID
            UpstreamError: If the API request fails
        """
        channel_id = require_id(channel_id, "channel")
        request = self.youtube.channels().list(id=channel_id, part=CHANNEL_PARTS)
        response = self._execute(request, f"Failed to get channel {channel_id}")

        if not response.items:
            raise ChannelNotFoundError(f"Channel {channel_id} not found")

        return Channel(self, response.items[0])

    def get_channel_by_url(self, url: str) -> Channel:
        """Get a channel from its URL.

        Raises:
            InvalidUrlError: If the URL does not point at a channel
            ChannelNotFoundError: If the channel does not exist
        """
        channel_id = parse_url(url).channel
        if not channel_id:
            raise InvalidUrlError(url, "channel")
        return self.get_channel(channel_id)

    def get_channel_videos(self, channel_id: str) -> List[Video]:
        """Get the 50 latest videos of a channel.

        Args:
            channel_id: ID of the channel

        Returns:
            Videos, newest first

        Raises:
            ChannelNotFoundError: If the channel does not exist or has no videos
            UpstreamError: If the API request fails
        """
        channel_id = require_id(channel_id, "channel")
        request = self.youtube.search().list(
            channelId=channel_id,
            part="snippet",
            order="date",
            type="video",
            maxResults=config.MAX_PAGE_SIZE,
        )
        response = self._execute(request, f"Failed to get videos of channel {channel_id}")

        if not response.items:
            raise ChannelNotFoundError(f"Channel {channel_id} not found or has no videos")

        return [Video(self, item) for item in response.items]

    # Playlists

    def get_playlist(self, playlist_id: str) -> Playlist:
        """Get a playlist from its ID.

        Args:
            playlist_id: ID of the playlist

        Returns:
            The full playlist

        Raises:
            PlaylistNotFoundError: If no playlist has this ID
            UpstreamError: If the API request fails
        """
        playlist_id = require_id(playlist_id, "playlist")
        request = self.youtube.playlists().list(id=playlist_id, part=PLAYLIST_PARTS)
        response = self._execute(request, f"Failed to get playlist {playlist_id}")

        if not response.items:
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        return Playlist(self, response.items[0])

    def get_playlist_by_url(self, url: str) -> Playlist:
        """Get a playlist from its URL.

        Raises:
            InvalidUrlError: If the URL does not point at a playlist
            PlaylistNotFoundError: If the playlist does not exist
        """
        playlist_id = parse_url(url).playlist
        if not playlist_id:
            raise InvalidUrlError(url, "playlist")
        return self.get_playlist(playlist_id)

    def get_playlist_items(self, playlist_id: str, max_results: int = -1) -> List[Video]:
        """Get the videos in a playlist.

        Args:
            playlist_id: ID of the playlist
            max_results: Number of videos to get, 1 to 50. If <= 0, every
                video in the playlist is returned.

        Returns:
            Videos in playlist order

        Raises:
            InvalidArgumentError: If max_results is above 50
            PlaylistNotFoundError: If the playlist does not exist or is empty
            UpstreamError: If any page request fails
        """
        playlist_id = require_id(playlist_id, "playlist")

        def fetch_page(page_size: int, page_token: Optional[str]) -> ListResponse:
            request = self.youtube.playlistItems().list(
                playlistId=playlist_id,
                part="snippet",
                maxResults=page_size,
                pageToken=page_token,
            )
            try:
                return self._execute(request, f"Failed to get items of playlist {playlist_id}")
            except UpstreamError as e:
                if page_token is None and (e.status == 404 or "playlistNotFound" in str(e)):
                    raise PlaylistNotFoundError(f"Playlist {playlist_id} not found") from e
                raise

        videos = collect_pages(
            fetch_page,
            lambda item: Video(self, item),
            max_results,
            not_found=PlaylistNotFoundError(f"Playlist {playlist_id} not found"),
        )
        logger.debug("Fetched %d videos from playlist %s", len(videos), playlist_id)
        return videos


def _client(token: Optional[str]) -> YouTube:
    """Build a one-off client, defaulting to YOUTUBE_API_KEY."""
    return YouTube(token or config.YOUTUBE_API_KEY)


def search_videos(
    term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS, token: Optional[str] = None
) -> List[Video]:
    """Search videos with a one-off client. See YouTube.search_videos."""
    return _client(token).search_videos(term, max_results)


def search_channels(
    term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS, token: Optional[str] = None
) -> List[Channel]:
    """Search channels with a one-off client. See YouTube.search_channels."""
    return _client(token).search_channels(term, max_results)


def search_playlists(
    term: str, max_results: int = config.DEFAULT_SEARCH_RESULTS, token: Optional[str] = None
) -> List[Playlist]:
    """Search playlists with a one-off client. See YouTube.search_playlists."""
    return _client(token).search_playlists(term, max_results)


def get_video(video_id: str, token: Optional[str] = None) -> Video:
    """Get a video with a one-off client. See YouTube.get_video."""
    return _client(token).get_video(video_id)


def get_channel(channel_id: str, token: Optional[str] = None) -> Channel:
    """Get a channel with a one-off client. See YouTube.get_channel."""
    return _client(token).get_channel(channel_id)


def get_playlist(playlist_id: str, token: Optional[str] = None) -> Playlist:
    """Get a playlist with a one-off client. See YouTube.get_playlist."""
    return _client(token).get_playlist(playlist_id)


def get_playlist_items(
    playlist_id: str, max_results: int = -1, token: Optional[str] = None
) -> List[Video]:
    """Get all videos in a playlist with a one-off client.

    Args:
        playlist_id: ID of playlist to get videos from
        max_results: Number of videos to get, <= 0 for all of them
        token: API key, defaults to YOUTUBE_API_KEY

    Returns:
        Videos in playlist order

    Raises:
        PlaylistNotFoundError: If playlist is not found
        YouTubeError: If API request fails
    """
    return _client(token).get_playlist_items(playlist_id, max_results)

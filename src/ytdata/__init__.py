"""Typed client for the YouTube Data API v3."""

__version__ = "0.1.0"

# Import all public components
from .aio import AsyncYouTube
from .api import (
    YouTube,
    get_channel,
    get_playlist,
    get_playlist_items,
    get_video,
    search_channels,
    search_playlists,
    search_videos,
)
from .auth import get_youtube_service
from .entities import Channel, Playlist, Video
from .errors import (
    ChannelNotFoundError,
    InvalidArgumentError,
    InvalidUrlError,
    MalformedResponseError,
    NotFoundError,
    PlaylistNotFoundError,
    UpstreamError,
    VideoNotFoundError,
    YouTubeError,
)
from .logging_config import disable_debug, enable_debug, get_logger
from .utils import ParsedUrl, parse_playlist_url, parse_url

# Import config variables
from .config import MAX_PAGE_SIZE, YOUTUBE_API_KEY  # noqa: F401

# Get logger for this module
logger = get_logger(__name__)

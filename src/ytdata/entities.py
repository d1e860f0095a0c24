"""Domain objects mapped from YouTube API resources."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .schemas import Resource, ResourceId
from .utils import parse_duration


def _resource_id(resource: Resource, attribute: str) -> str:
    """Resolve the ID of a resource regardless of which endpoint produced it.

    Search results nest the ID in a ResourceId and playlist items point at
    their video through ``snippet.resourceId``.
    """
    if isinstance(resource.id, ResourceId):
        return getattr(resource.id, attribute) or ""
    if resource.kind == "youtube#playlistItem":
        if resource.snippet.resource_id and resource.snippet.resource_id.video_id:
            return resource.snippet.resource_id.video_id
        if resource.content_details and resource.content_details.video_id:
            return resource.content_details.video_id
    return resource.id


def _thumbnails(resource: Resource) -> Dict[str, str]:
    return {name: thumb.url for name, thumb in resource.snippet.thumbnails.items()}


class Entity(ABC):
    """Common state of videos, channels and playlists."""

    kind = ""

    def __init__(self, youtube, data: Resource):
        """Initialize entity.

        Args:
            youtube: The YouTube client that fetched the resource
            data: Validated API resource
        """
        self.youtube = youtube
        self.data = data
        self.full = data.kind == f"youtube#{self.kind}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict of the entity's fields."""


class Video(Entity):
    """A YouTube video.

    Videos built from search results or playlist items only carry the
    snippet; ``minutes`` and ``seconds`` are None until ``fetch`` is called.
    """

    kind = "video"

    def __init__(self, youtube, data: Resource):
        super().__init__(youtube, data)
        snippet = data.snippet

        self.id: str = _resource_id(data, "video_id")
        self.title: str = snippet.title
        self.description: str = snippet.description
        self.thumbnails = _thumbnails(data)
        self.tags: List[str] = list(snippet.tags)
        self.channel_id: Optional[str] = snippet.channel_id
        self.channel_title: Optional[str] = snippet.channel_title
        self.published_at: Optional[str] = snippet.published_at
        self.position: Optional[int] = snippet.position

        duration = data.content_details.duration if data.content_details else None
        self.minutes, self.seconds = parse_duration(duration)

    @property
    def url(self) -> str:
        return f"https://youtube.com/watch?v={self.id}"

    @property
    def short_url(self) -> str:
        return f"https://youtu.be/{self.id}"

    def fetch(self) -> "Video":
        """Fetch the full video resource.

        Returns:
            A full Video for the same ID
        """
        return self.youtube.get_video(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "channel_id": self.channel_id,
            "channel_title": self.channel_title,
            "published_at": self.published_at,
            "thumbnails": self.thumbnails,
            "tags": self.tags,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "position": self.position,
        }


class Channel(Entity):
    """A YouTube channel."""

    kind = "channel"

    def __init__(self, youtube, data: Resource):
        super().__init__(youtube, data)
        snippet = data.snippet
        statistics = data.statistics
        details = data.content_details

        self.id: str = _resource_id(data, "channel_id")
        self.name: str = snippet.title
        self.about: str = snippet.description
        self.profile_pictures = _thumbnails(data)
        self.published_at: Optional[str] = snippet.published_at
        self.country: Optional[str] = snippet.country
        self.custom_url: Optional[str] = snippet.custom_url

        self.view_count: Optional[int] = statistics.view_count if statistics else None
        self.video_count: Optional[int] = statistics.video_count if statistics else None
        self.subscriber_count: Optional[int] = None
        if statistics and not statistics.hidden_subscriber_count:
            self.subscriber_count = statistics.subscriber_count

        self.uploads_playlist_id: Optional[str] = None
        if details and details.related_playlists:
            self.uploads_playlist_id = details.related_playlists.uploads

    @property
    def url(self) -> str:
        return f"https://youtube.com/channel/{self.id}"

    def fetch(self) -> "Channel":
        """Fetch the full channel resource."""
        return self.youtube.get_channel(self.id)

    def fetch_videos(self) -> List[Video]:
        """Get the 50 latest videos of the channel."""
        return self.youtube.get_channel_videos(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "about": self.about,
            "url": self.url,
            "custom_url": self.custom_url,
            "country": self.country,
            "published_at": self.published_at,
            "profile_pictures": self.profile_pictures,
            "view_count": self.view_count,
            "subscriber_count": self.subscriber_count,
            "video_count": self.video_count,
            "uploads_playlist_id": self.uploads_playlist_id,
        }


class Playlist(Entity):
    """A YouTube playlist."""

    kind = "playlist"

    def __init__(self, youtube, data: Resource):
        super().__init__(youtube, data)
        snippet = data.snippet
        details = data.content_details

        self.id: str = _resource_id(data, "playlist_id")
        self.title: str = snippet.title
        self.description: str = snippet.description
        self.creator_id: Optional[str] = snippet.channel_id
        self.published_at: Optional[str] = snippet.published_at
        self.thumbnails = _thumbnails(data)
        self.length: Optional[int] = details.item_count if details else None
        self.embed_html: Optional[str] = data.player.embed_html if data.player else None
        self.videos: List[Video] = []

    @property
    def url(self) -> str:
        return f"https://youtube.com/playlist?list={self.id}"

    def fetch(self) -> "Playlist":
        """Fetch the full playlist resource."""
        return self.youtube.get_playlist(self.id)

    def fetch_videos(self, max_results: int = -1) -> List[Video]:
        """Fetch the videos of this playlist and store them on ``videos``.

        Args:
            max_results: Number of videos to get, <= 0 for all of them

        Returns:
            The fetched videos
        """
        self.videos = self.youtube.get_playlist_items(self.id, max_results)
        return self.videos

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "creator_id": self.creator_id,
            "published_at": self.published_at,
            "thumbnails": self.thumbnails,
            "length": self.length,
            "embed_html": self.embed_html,
        }

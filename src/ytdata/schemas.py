"""Pydantic models for raw YouTube Data API responses.

Only the fields the entities read are declared; anything else the API sends
is ignored. Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for API payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class Thumbnail(ApiModel):
    """One thumbnail size."""

    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class ResourceId(ApiModel):
    """Identifies the resource a search result or playlist item points at."""

    kind: str = ""
    video_id: Optional[str] = None
    channel_id: Optional[str] = None
    playlist_id: Optional[str] = None


class PageInfo(ApiModel):
    """Paging totals reported with every list response."""

    total_results: int = 0
    results_per_page: int = 0


class Snippet(ApiModel):
    """Basic details shared by videos, channels, playlists and items."""

    title: str = ""
    description: str = ""
    published_at: Optional[str] = None
    channel_id: Optional[str] = None
    channel_title: Optional[str] = None
    thumbnails: Dict[str, Thumbnail] = Field(default_factory=dict)
    tags: List[str] = Field(default_factory=list)
    resource_id: Optional[ResourceId] = None
    playlist_id: Optional[str] = None
    position: Optional[int] = None
    country: Optional[str] = None
    custom_url: Optional[str] = None


class RelatedPlaylists(ApiModel):
    uploads: Optional[str] = None
    likes: Optional[str] = None


class ContentDetails(ApiModel):
    """Union of the contentDetails parts of videos, channels and playlists."""

    duration: Optional[str] = None
    item_count: Optional[int] = None
    video_id: Optional[str] = None
    related_playlists: Optional[RelatedPlaylists] = None


class Statistics(ApiModel):
    """Channel statistics. Counts arrive as strings."""

    view_count: Optional[int] = None
    subscriber_count: Optional[int] = None
    hidden_subscriber_count: bool = False
    video_count: Optional[int] = None


class Player(ApiModel):
    embed_html: Optional[str] = None


class Resource(ApiModel):
    """One element of a list response's ``items``.

    ``id`` is a plain string for videos/channels/playlists/playlistItems and
    a ResourceId object for search results.
    """

    kind: str = ""
    id: Union[str, ResourceId]
    snippet: Snippet = Field(default_factory=Snippet)
    content_details: Optional[ContentDetails] = None
    statistics: Optional[Statistics] = None
    player: Optional[Player] = None


class ListResponse(ApiModel):
    """A single page of any list endpoint."""

    kind: str = ""
    items: List[Resource] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)
    next_page_token: Optional[str] = None
    prev_page_token: Optional[str] = None

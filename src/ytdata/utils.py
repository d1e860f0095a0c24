"""Utility functions for YouTube IDs, URLs and limits."""

import re
from typing import NamedTuple, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from . import config
from .errors import InvalidArgumentError
from .logging_config import get_logger

logger = get_logger(__name__)

YOUTUBE_HOSTS = {
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "youtube-nocookie.com",
    "www.youtube-nocookie.com",
}
SHORT_HOSTS = {"youtu.be", "www.youtu.be"}

ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
DURATION_PATTERN = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)


class ParsedUrl(NamedTuple):
    """IDs found in a YouTube URL. Missing kinds are None."""

    video: Optional[str] = None
    channel: Optional[str] = None
    playlist: Optional[str] = None


def _valid_id(value: Optional[str]) -> Optional[str]:
    if value and ID_PATTERN.match(value):
        return value
    return None


def parse_url(url: str) -> ParsedUrl:
    """Extract video, channel and playlist IDs from a YouTube URL.

    Args:
        url: A youtube.com or youtu.be URL, with or without scheme

    Returns:
        ParsedUrl with every ID the URL carries. All fields are None for
        URLs that do not point at YouTube.
    """
    if not url:
        return ParsedUrl()

    if "://" not in url:
        url = f"https://{url}"

    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()
    segments = [segment for segment in parsed.path.split("/") if segment]
    query = parse_qs(parsed.query)

    if host in SHORT_HOSTS:
        video = _valid_id(segments[0]) if segments else None
        playlist = _valid_id(query.get("list", [None])[0])
        return ParsedUrl(video=video, playlist=playlist)

    if host not in YOUTUBE_HOSTS:
        logger.debug("Not a YouTube host: %s", host)
        return ParsedUrl()

    video = None
    channel = None
    playlist = _valid_id(query.get("list", [None])[0])

    if segments[:1] == ["watch"]:
        video = _valid_id(query.get("v", [None])[0])
    elif len(segments) >= 2 and segments[0] in ("embed", "shorts", "v", "live"):
        video = _valid_id(segments[1])
    elif len(segments) >= 2 and segments[0] == "channel":
        channel = _valid_id(segments[1])

    return ParsedUrl(video=video, channel=channel, playlist=playlist)


def parse_playlist_url(playlist_str: str) -> str:
    """Extract playlist ID from a YouTube playlist URL or return the raw ID.

    Args:
        playlist_str: A YouTube playlist URL or ID

    Returns:
        The playlist ID

    Raises:
        ValueError if the input is not a valid playlist URL or ID
    """
    # Try to extract playlist ID from URL
    url_match = re.search(r"[?&]list=([^&]+)", playlist_str)
    if url_match:
        return url_match.group(1)

    # If not a URL, validate as a raw playlist ID
    if ID_PATTERN.match(playlist_str):
        return playlist_str

    raise ValueError(
        f"Invalid playlist format: {playlist_str}. " "Must be a YouTube playlist URL or ID"
    )


def parse_duration(duration: Optional[str]) -> Tuple[Optional[int], Optional[int]]:
    """Split an ISO 8601 video duration into minutes and seconds.

    Hours and days are folded into minutes, so ``PT1H2M3S`` is ``(62, 3)``.

    Args:
        duration: Duration string from a video's contentDetails

    Returns:
        Tuple of (minutes, seconds), or (None, None) if it cannot be parsed
    """
    if not duration:
        return None, None

    match = DURATION_PATTERN.match(duration)
    if not match:
        logger.debug("Unparseable duration: %s", duration)
        return None, None

    parts = {name: int(value or 0) for name, value in match.groupdict().items()}
    minutes = parts["days"] * 24 * 60 + parts["hours"] * 60 + parts["minutes"]
    return minutes, parts["seconds"]


def check_max_results(max_results: int, allow_all: bool = False) -> None:
    """Validate a requested result count against the API page size.

    Args:
        max_results: Requested number of results
        allow_all: Whether values <= 0 mean "everything" and are accepted

    Raises:
        InvalidArgumentError: If the value is outside the accepted range
    """
    if max_results > config.MAX_PAGE_SIZE:
        raise InvalidArgumentError(
            f"Max results must be {config.MAX_PAGE_SIZE} or below, got {max_results}"
        )
    if max_results < 1 and not allow_all:
        raise InvalidArgumentError(
            f"Max results must be greater than 0 and less or equal to "
            f"{config.MAX_PAGE_SIZE}, got {max_results}"
        )


def require_id(value: str, kind: str) -> str:
    """Return a stripped resource ID, rejecting blank input.

    Raises:
        InvalidArgumentError: If the ID is empty
    """
    if not value or not value.strip():
        raise InvalidArgumentError(f"A {kind} ID is required")
    return value.strip()

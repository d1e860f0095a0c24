"""Error types and error handling utilities."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class YouTubeError(Exception):
    """Base class for YouTube API errors."""

    pass


class InvalidArgumentError(YouTubeError, ValueError):
    """Error raised when a caller-supplied argument is out of range."""

    pass


class InvalidUrlError(InvalidArgumentError):
    """Error raised when a URL does not contain the requested ID."""

    def __init__(self, url: str, kind: str):
        """Initialize error.

        Args:
            url: The URL that was parsed
            kind: Kind of ID that was expected (video, channel or playlist)
        """
        self.url = url
        self.kind = kind
        super().__init__(f"Not a valid {kind} url: {url}")


class NotFoundError(YouTubeError):
    """Error raised when a lookup returns no items."""

    pass


class VideoNotFoundError(NotFoundError):
    """Error raised when a video is not found (private/deleted)."""

    pass


class ChannelNotFoundError(NotFoundError):
    """Error raised when a channel is not found or has no videos."""

    pass


class PlaylistNotFoundError(NotFoundError):
    """Error raised when a playlist is not found or is empty."""

    pass


class UpstreamError(YouTubeError):
    """Error raised when a request to the YouTube API fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        """Initialize error.

        Args:
            message: Description of the failure
            status: HTTP status returned by the API, if any
        """
        self.status = status
        super().__init__(message)


class MalformedResponseError(UpstreamError):
    """Error raised when an API response does not match the expected shape."""

    pass

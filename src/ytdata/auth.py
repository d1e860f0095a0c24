"""YouTube API service construction."""

from googleapiclient.discovery import build

from . import config
from .errors import InvalidArgumentError, UpstreamError
from .logging_config import get_logger

logger = get_logger(__name__)


def get_youtube_service(token: str):
    """Build a YouTube Data API service bound to an API key.

    Args:
        token: YouTube Data API v3 key

    Returns:
        A googleapiclient discovery resource for the YouTube API

    Raises:
        InvalidArgumentError: If no key is available
        UpstreamError: If the discovery document cannot be loaded
    """
    if not token:
        raise InvalidArgumentError("A YouTube Data API key is required")

    try:
        return build(
            config.API_SERVICE_NAME,
            config.API_VERSION,
            developerKey=token,
            cache_discovery=False,
        )
    except Exception as e:
        raise UpstreamError(f"Failed to build YouTube service: {str(e)}") from e

"""YouTube API base class."""

import threading

from googleapiclient.errors import HttpError
from googleapiclient.http import build_http
from pydantic import ValidationError

from .errors import MalformedResponseError, UpstreamError
from .logging_config import get_logger
from .schemas import ListResponse


logger = get_logger(__name__)


class YouTubeBase:
    """Base class for YouTube API operations."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API service (googleapiclient discovery resource)
        """
        self.youtube = youtube
        self._local = threading.local()

    def _http(self):
        """Return the HTTP transport owned by the calling thread.

        httplib2.Http is not thread-safe, so requests never run on the
        service's shared transport. The API key travels in the request URI.
        """
        http = getattr(self._local, "http", None)
        if http is None:
            http = self._local.http = build_http()
        return http

    def _execute(self, request, context: str) -> ListResponse:
        """Execute a list request and validate its payload.

        Args:
            request: An unexecuted googleapiclient HttpRequest
            context: Short description used in error messages

        Returns:
            The validated response page

        Raises:
            UpstreamError: If the request fails
            MalformedResponseError: If the payload is not a list response
        """
        try:
            payload = request.execute(http=self._http())
        except HttpError as e:
            status = getattr(e.resp, "status", None)
            raise UpstreamError(f"{context}: {str(e)}", status=status) from e
        except Exception as e:
            raise UpstreamError(f"{context}: {str(e)}") from e

        try:
            return ListResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"{context}: unexpected response shape") from e

"""Cursor-based paging over YouTube list endpoints."""

from typing import Callable, List, Optional, TypeVar

from . import config
from .errors import NotFoundError
from .logging_config import get_logger
from .schemas import ListResponse, Resource
from .utils import check_max_results

logger = get_logger(__name__)

T = TypeVar("T")

# fetch_page(page_size, page_token) -> one validated page
PageFetcher = Callable[[int, Optional[str]], ListResponse]


def collect_pages(
    fetch_page: PageFetcher,
    mapper: Callable[[Resource], T],
    max_results: int = -1,
    not_found: Optional[NotFoundError] = None,
) -> List[T]:
    """Fetch a collection page by page and map every item.

    With ``max_results <= 0`` the whole collection is fetched: one full page
    first, then ``totalResults // 50`` follow-up pages, each requested with
    the previous page's continuation token. Otherwise a single page of
    ``max_results`` items is requested.

    Args:
        fetch_page: Callable issuing one list request
        mapper: Converts one raw item into a domain entity
        max_results: Item cap, <= 0 to fetch everything
        not_found: Error raised when the first page is empty

    Returns:
        Mapped entities in the order the API returned them

    Raises:
        InvalidArgumentError: If max_results exceeds the page size
        NotFoundError: If the first page has no items
        UpstreamError: If any page request fails
    """
    check_max_results(max_results, allow_all=True)

    fetch_all = max_results <= 0
    page_size = config.MAX_PAGE_SIZE if fetch_all else max_results

    response = fetch_page(page_size, None)
    logger.debug("Fetched first page: %d items", len(response.items))

    if not response.items:
        raise not_found or NotFoundError("Collection not found or empty")

    results = [mapper(item) for item in response.items]

    if not fetch_all:
        return results[:max_results]

    pages = response.page_info.total_results // config.MAX_PAGE_SIZE

    for page in range(pages):
        token = response.next_page_token
        if not token:
            logger.debug("No continuation token after page %d, stopping", page + 1)
            break

        response = fetch_page(config.MAX_PAGE_SIZE, token)
        logger.debug("Fetched page %d (token %s): %d items", page + 2, token, len(response.items))
        results.extend(mapper(item) for item in response.items)

    return results

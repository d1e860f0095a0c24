"""Tests for cursor-based playlist paging."""

import pytest

from src.ytdata.errors import (
    InvalidArgumentError,
    NotFoundError,
    PlaylistNotFoundError,
    UpstreamError,
)
from src.ytdata.pagination import collect_pages
from src.ytdata.schemas import ListResponse


class FakePager:
    """Serves prepared pages and records every request."""

    def __init__(self, pages, fail_on=None):
        self.pages = [ListResponse.model_validate(page) for page in pages]
        self.fail_on = fail_on
        self.calls = []

    def __call__(self, page_size, page_token):
        self.calls.append((page_size, page_token))
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise UpstreamError("connection reset")
        return self.pages[len(self.calls) - 1]


def video_id(item):
    return item.snippet.resource_id.video_id


@pytest.mark.parametrize("cap", [1, 7, 30, 50])
def test_cap_returns_exactly_cap_items_in_one_request(make_pages, cap):
    """A positive cap is served by a single request of that size."""
    pager = FakePager(make_pages(200, page_size=cap))

    result = collect_pages(pager, video_id, cap)

    assert result == [f"vid{n}" for n in range(cap)]
    assert pager.calls == [(cap, None)]


def test_cap_is_a_hard_upper_bound(make_pages):
    """Extra items returned by the API are dropped."""
    pager = FakePager(make_pages(200, page_size=10))

    result = collect_pages(pager, video_id, 5)

    assert len(result) == 5


def test_cap_above_page_size_fails_without_requests():
    """Caps above 50 are rejected before anything is fetched."""
    pager = FakePager([])

    with pytest.raises(InvalidArgumentError):
        collect_pages(pager, video_id, 51)

    assert pager.calls == []


def test_empty_first_page_is_not_found(make_pages):
    """An empty collection raises the supplied not-found error."""
    pager = FakePager(make_pages(0))
    error = PlaylistNotFoundError("Playlist PL1 not found")

    with pytest.raises(PlaylistNotFoundError) as exc_info:
        collect_pages(pager, video_id, -1, not_found=error)

    assert exc_info.value is error
    assert len(pager.calls) == 1


def test_empty_first_page_default_error(make_pages):
    pager = FakePager(make_pages(0))

    with pytest.raises(NotFoundError):
        collect_pages(pager, video_id)


def test_fetch_all_walks_every_page(make_pages):
    """120 items take 1 + 120 // 50 = 3 requests."""
    pager = FakePager(make_pages(120))

    result = collect_pages(pager, video_id)

    assert result == [f"vid{n}" for n in range(120)]
    assert pager.calls == [(50, None), (50, "token1"), (50, "token2")]


def test_fetch_all_single_page(make_pages):
    """30 items fit the first page, no follow-up request."""
    pager = FakePager(make_pages(30))

    result = collect_pages(pager, video_id, 0)

    assert len(result) == 30
    assert pager.calls == [(50, None)]


def test_fetch_all_stops_without_continuation_token(make_pages):
    """100 items: the second page has no token, so no third request is made."""
    pager = FakePager(make_pages(100))

    result = collect_pages(pager, video_id)

    assert len(result) == 100
    assert len(pager.calls) == 2


def test_later_page_failure_discards_partial_results(make_pages):
    """A failing second page fails the whole fetch."""
    pager = FakePager(make_pages(120), fail_on=2)

    with pytest.raises(UpstreamError):
        collect_pages(pager, video_id)

    assert len(pager.calls) == 2


def test_fetch_is_repeatable(make_pages):
    """Two fetches of an unchanged collection give the same ordered result."""
    pages = make_pages(120)

    first = collect_pages(FakePager(pages), video_id)
    second = collect_pages(FakePager(pages), video_id)

    assert first == second

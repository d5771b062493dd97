"""Cursor-based pagination over the ÖBB timetable endpoints."""

import logging
import math
from typing import Any

from oebb_journeys.adapters.oebb_api.constants import PAGE_SIZE, PRICES_PATH
from oebb_journeys.adapters.oebb_api.journey_parser import JourneyParser
from oebb_journeys.adapters.oebb_api.timetable_requests import (
    TimetablePageRequest,
    build_initial_page_request,
    build_scroll_page_request,
)
from oebb_journeys.domain.models import Journey, SearchRequest
from oebb_journeys.domain.ports import SessionClient

logger = logging.getLogger(__name__)


def page_count(result_count: int | None) -> int:
    """Number of pages needed for ``result_count`` journeys; one page if unbounded."""
    if not result_count:
        return 1
    return math.ceil(result_count / PAGE_SIZE)


class JourneyPaginator:
    """Fetches timetable pages, prices them and normalizes them into journeys."""

    def __init__(self, client: SessionClient) -> None:
        self._client = client

    async def fetch(self, request: SearchRequest, travel_action_id: str) -> list[Journey]:
        """Collect journeys page by page.

        Stops after ``page_count(request.result_count)`` pages or at the first
        empty page. Each page is sorted by first-leg departure before it is
        appended; the last journey of a page is the cursor for the next one.
        Backend errors abort the whole fetch.
        """
        journeys: list[Journey] = []
        cursor: str | None = None

        for page in range(page_count(request.result_count)):
            if cursor is None:
                page_request = build_initial_page_request(request, travel_action_id)
            else:
                page_request = build_scroll_page_request(request, travel_action_id, cursor)

            raw_connections = await self._fetch_page(page_request)
            if not raw_connections:
                logger.debug(f"Timetable exhausted after {page} page(s)")
                break

            offers = await self._fetch_offers(request, raw_connections)
            page_journeys = sorted(
                (
                    JourneyParser.parse_journey(raw, offers.get(raw["id"]))
                    for raw in raw_connections
                ),
                key=lambda j: j.departure,
            )
            journeys.extend(page_journeys)
            cursor = page_journeys[-1].id

        logger.debug(f"Fetched {len(journeys)} journeys for {request.origin} -> {request.destination}")
        return journeys

    async def _fetch_page(self, page_request: TimetablePageRequest) -> list[dict[str, Any]]:
        data = await self._client.post(page_request.path, page_request.body)
        return data.get("connections") or []

    async def _fetch_offers(
        self, request: SearchRequest, raw_connections: list[dict[str, Any]]
    ) -> dict[str, dict[str, Any]]:
        """Return offers of one page keyed by connection id."""
        if not request.include_prices:
            return {}

        connection_ids = [raw["id"] for raw in raw_connections]
        data = await self._client.get(
            PRICES_PATH, {"connectionIds": connection_ids, "sortType": request.sort_type}
        )
        offers: dict[str, dict[str, Any]] = {}
        for offer in data.get("offers") or []:
            # first offer per connection wins
            offers.setdefault(offer.get("connectionId"), offer)
        return offers

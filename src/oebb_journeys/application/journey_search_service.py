"""Application service (use case) for journey searches."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from oebb_journeys.application.journey_options import JourneyOptions, validate_arguments
from oebb_journeys.application.post_processing import post_process
from oebb_journeys.application.search_request_builder import build_search_request
from oebb_journeys.domain.models import Journey

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from oebb_journeys.domain.ports import JourneyRepository


class JourneySearchService:
    """Service for searching journeys between two stations."""

    def __init__(self, journey_repository: "JourneyRepository") -> None:
        """Initialize with a journey repository."""
        self._journey_repository = journey_repository

    async def search(
        self,
        origin: Any,
        destination: Any,
        options: JourneyOptions | Mapping[str, Any] | None = None,
        now: datetime | None = None,
    ) -> list[Journey]:
        """Search journeys from ``origin`` to ``destination``.

        Arguments are validated before any request is made. Backend failures
        propagate; no partial results are returned.

        Raises:
            InvalidOptionsError: If the arguments are rejected.
        """
        origin_id, destination_id, parsed = validate_arguments(origin, destination, options)
        request = build_search_request(origin_id, destination_id, parsed, now or datetime.now(UTC))

        logger.debug(
            f"Searching journeys {origin_id} -> {destination_id} from "
            f"{request.departure_time.isoformat()} (results={request.result_count})"
        )
        journeys = await self._journey_repository.get_journeys(request)
        result = post_process(journeys, request)
        logger.debug(f"Returning {len(result)} of {len(journeys)} fetched journeys")
        return result

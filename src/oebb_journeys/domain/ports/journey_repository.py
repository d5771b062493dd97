"""Journey repository port."""

from typing import Protocol

from oebb_journeys.domain.models.journey import Journey
from oebb_journeys.domain.models.search_request import SearchRequest


class JourneyRepository(Protocol):
    """Port for retrieving journeys between two stations."""

    async def get_journeys(self, request: SearchRequest) -> list[Journey]:
        """Get journeys for a search, ordered by departure within each backend page."""
        ...

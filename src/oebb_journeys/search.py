"""Public entry point for journey searches."""

from collections.abc import Mapping
from typing import Any

import aiohttp

from oebb_journeys.adapters.config import AppConfig
from oebb_journeys.adapters.oebb_api import OebbJourneyRepository
from oebb_journeys.application import JOURNEY_FEATURES, JourneyOptions, JourneySearchService
from oebb_journeys.domain.models import Journey

__all__ = ["JOURNEY_FEATURES", "journeys"]


async def journeys(
    origin: Any,
    destination: Any,
    options: JourneyOptions | Mapping[str, Any] | None = None,
    *,
    session: aiohttp.ClientSession | None = None,
    config: AppConfig | None = None,
) -> list[Journey]:
    """Search journeys between two ÖBB stations.

    Args:
        origin: Station id (e.g. "8011160") or an object / mapping with an ``id``.
        destination: Station id or an object / mapping with an ``id``.
        options: Search options, see ``JOURNEY_FEATURES``.
        session: Optional aiohttp session; a temporary one is used if omitted.
        config: Optional application config; read from the environment if omitted.

    Returns:
        Journeys ordered by departure, empty if the backend has no timetable
        for the request.
    """
    config = config or AppConfig()
    if session is not None:
        service = JourneySearchService(OebbJourneyRepository(session, config))
        return await service.search(origin, destination, options)

    timeout = aiohttp.ClientTimeout(total=config.api_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as own_session:
        service = JourneySearchService(OebbJourneyRepository(own_session, config))
        return await service.search(origin, destination, options)

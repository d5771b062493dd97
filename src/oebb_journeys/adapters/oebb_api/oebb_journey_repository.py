"""ÖBB journey repository adapter."""

import logging
from typing import TYPE_CHECKING

from oebb_journeys.adapters.config import AppConfig
from oebb_journeys.adapters.oebb_api.authenticator import OebbAuthenticator
from oebb_journeys.adapters.oebb_api.http_client import OebbHttpClient
from oebb_journeys.adapters.oebb_api.journey_paginator import JourneyPaginator
from oebb_journeys.adapters.oebb_api.travel_action_resolver import TravelActionResolver
from oebb_journeys.domain.models import Journey, SearchRequest
from oebb_journeys.domain.ports import CredentialProvider, JourneyRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OebbJourneyRepository(JourneyRepository):
    """Adapter retrieving journeys from the ÖBB ticket shop.

    A new anonymous session is opened for every search.
    """

    def __init__(
        self,
        session: "ClientSession",
        config: AppConfig | None = None,
        credential_provider: CredentialProvider | None = None,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: Open aiohttp ClientSession used for all requests.
            config: Application config; loaded from the environment if omitted.
            credential_provider: Source of session credentials; defaults to
                an anonymous OebbAuthenticator.
        """
        self._session = session
        self._config = config or AppConfig()
        self._credential_provider = credential_provider or OebbAuthenticator(session, self._config)

    async def get_journeys(self, request: SearchRequest) -> list[Journey]:
        """Get journeys for a search.

        Returns an empty list when the backend has no timetable entrypoint for
        the requested stations and time.
        """
        credentials = await self._credential_provider.authenticate()
        client = OebbHttpClient(self._session, credentials, self._config)

        travel_action = await TravelActionResolver(client).resolve(
            request.origin, request.destination, request.departure_time
        )
        if travel_action is None:
            return []

        return await JourneyPaginator(client).fetch(request, travel_action.id)

"""ÖBB ticket shop adapters."""

from oebb_journeys.adapters.oebb_api.authenticator import OebbAuthenticator
from oebb_journeys.adapters.oebb_api.http_client import OebbHttpClient
from oebb_journeys.adapters.oebb_api.oebb_journey_repository import OebbJourneyRepository

__all__ = ["OebbAuthenticator", "OebbHttpClient", "OebbJourneyRepository"]

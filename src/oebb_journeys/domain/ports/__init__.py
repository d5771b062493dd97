"""Ports (interfaces) for the ports-and-adapters architecture."""

from oebb_journeys.domain.ports.credential_provider import CredentialProvider
from oebb_journeys.domain.ports.journey_repository import JourneyRepository
from oebb_journeys.domain.ports.session_client import SessionClient

__all__ = [
    "CredentialProvider",
    "JourneyRepository",
    "SessionClient",
]

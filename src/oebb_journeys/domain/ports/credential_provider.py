"""Credential provider port."""

from typing import Protocol

from oebb_journeys.domain.models.credentials import Credentials


class CredentialProvider(Protocol):
    """Port for obtaining session credentials."""

    async def authenticate(self) -> Credentials:
        """Acquire a fresh set of credentials."""
        ...

"""Anonymous session authentication against the ÖBB ticket shop."""

import logging
import uuid

import aiohttp

from oebb_journeys.adapters.api_request_logger import log_api_request
from oebb_journeys.adapters.config import AppConfig
from oebb_journeys.adapters.oebb_api.constants import DEFAULT_HEADERS, INIT_PATH
from oebb_journeys.domain.errors import OebbApiError
from oebb_journeys.domain.models import Credentials, ErrorDetails

logger = logging.getLogger(__name__)


class OebbAuthenticator:
    """Credential provider that opens an anonymous ticket shop session."""

    def __init__(self, session: aiohttp.ClientSession, config: AppConfig) -> None:
        self._session = session
        self._config = config

    async def authenticate(self) -> Credentials:
        """Request a fresh anonymous session.

        Returns:
            Credentials with access token, session id and support id.

        Raises:
            OebbApiError: If the backend rejects the request or returns no token.
        """
        url = f"{self._config.base_url}{INIT_PATH}"
        params = {"userId": f"anonym-{uuid.uuid4()}"}
        headers = {**DEFAULT_HEADERS, "Channel": self._config.channel}
        log_api_request("GET", url, query=params, headers=headers, enabled=self._config.log_requests)

        async with self._session.get(
            url,
            params=params,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self._config.api_timeout),
        ) as response:
            if response.status >= 400:
                body = await response.text()
                raise OebbApiError(
                    ErrorDetails(status_code=response.status, reason=body[:200] or "(empty)", url=url)
                )
            data = await response.json(content_type=None)

        access_token = data.get("accessToken") if isinstance(data, dict) else None
        session_id = data.get("sessionId") if isinstance(data, dict) else None
        if not access_token or not session_id:
            raise OebbApiError(ErrorDetails(reason="session init returned no credentials", url=url))

        logger.debug(f"Opened anonymous ÖBB session {session_id}")
        support_id = data.get("supportId")
        return Credentials(
            access_token=access_token,
            session_id=session_id,
            support_id=str(support_id) if support_id else None,
        )

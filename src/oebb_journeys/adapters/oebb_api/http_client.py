"""Authenticated HTTP client for the ÖBB ticket shop."""

import logging
from typing import Any

import aiohttp

from oebb_journeys.adapters.api_request_logger import log_api_request
from oebb_journeys.adapters.config import AppConfig
from oebb_journeys.adapters.oebb_api.constants import DEFAULT_HEADERS
from oebb_journeys.domain.errors import OebbApiError
from oebb_journeys.domain.models import Credentials, ErrorDetails

logger = logging.getLogger(__name__)


def encode_query(query: dict[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a query dict into key/value pairs, repeating keys for list values."""
    pairs: list[tuple[str, str]] = []
    for key, value in (query or {}).items():
        values = value if isinstance(value, list | tuple) else [value]
        pairs.extend((key, str(v)) for v in values)
    return pairs


class OebbHttpClient:
    """Session client issuing authenticated GET/POST calls against the ticket shop.

    Failures are never retried: a non-2xx status raises OebbApiError, and
    aiohttp errors propagate unchanged.
    """

    def __init__(
        self, session: aiohttp.ClientSession, credentials: Credentials, config: AppConfig
    ) -> None:
        """Initialize with an open aiohttp session and the credentials to send."""
        self._session = session
        self._credentials = credentials
        self._config = config

    def _headers(self) -> dict[str, str]:
        headers = {
            **DEFAULT_HEADERS,
            "Channel": self._config.channel,
            "Lang": self._config.language,
            "AccessToken": self._credentials.access_token,
            "SessionId": self._credentials.session_id,
        }
        if self._credentials.support_id:
            headers["x-ts-supportid"] = f"WEB_{self._credentials.support_id}"
        return headers

    def _timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self._config.api_timeout)

    def _url(self, path: str) -> str:
        return path if path.startswith("http") else f"{self._config.base_url}{path}"

    async def _decode(self, response: aiohttp.ClientResponse, url: str) -> Any:
        if response.status >= 400:
            body = await response.text()
            logger.error(f"ÖBB API returned status {response.status} for {url}: {body[:500]}")
            raise OebbApiError(
                ErrorDetails(status_code=response.status, reason=body[:200] or "(empty)", url=url)
            )
        return await response.json(content_type=None)

    async def get(self, url: str, query: dict[str, Any] | None = None) -> Any:
        """GET ``url`` (absolute or relative to base_url) and return decoded JSON."""
        url = self._url(url)
        params = encode_query(query)
        headers = self._headers()
        log_api_request("GET", url, query=params, headers=headers, enabled=self._config.log_requests)

        async with self._session.get(
            url, params=params, headers=headers, timeout=self._timeout()
        ) as response:
            return await self._decode(response, url)

    async def post(self, url: str, body: dict[str, Any]) -> Any:
        """POST a JSON body to ``url`` and return decoded JSON."""
        url = self._url(url)
        headers = self._headers()
        log_api_request(
            "POST", url, headers=headers, payload=body, enabled=self._config.log_requests
        )

        async with self._session.post(
            url, json=body, headers=headers, timeout=self._timeout()
        ) as response:
            return await self._decode(response, url)

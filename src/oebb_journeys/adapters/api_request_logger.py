"""Utility for logging ticket shop requests when request logging is enabled."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"accesstoken", "sessionid", "x-ts-supportid", "authorization"})


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Replace session credentials in headers with a placeholder."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _format_query(query: Any) -> str:
    if isinstance(query, dict):
        query = list(query.items())
    return "&".join(f"{k}={v}" for k, v in query)


def log_api_request(
    method: str,
    url: str,
    query: Any = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
    enabled: bool = False,
) -> None:
    """Log a request to the ticket shop.

    Args:
        method: HTTP method (GET or POST).
        url: Request URL without query string.
        query: Query parameters as a dict or a list of key/value pairs.
        headers: Request headers; session credentials are redacted.
        payload: JSON body of the request.
        enabled: The `log_requests` config switch.
    """
    if not enabled:
        return

    lines = [f"{method} {url}?{_format_query(query)}" if query else f"{method} {url}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")
    if payload is not None:
        lines.append(f"Payload: {json.dumps(payload, indent=2, default=str)}")

    logger.info("API Request:\n" + "\n".join(lines))

"""Session client port."""

from typing import Any, Protocol


class SessionClient(Protocol):
    """Port for authenticated calls against the ticket shop backend."""

    async def get(self, url: str, query: dict[str, Any] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body."""
        ...

    async def post(self, url: str, body: dict[str, Any]) -> Any:
        """Issue a POST request with a JSON body and return the decoded JSON body."""
        ...

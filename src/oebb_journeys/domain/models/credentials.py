"""Session credentials domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """Anonymous session credentials issued by the ticket shop."""

    access_token: str
    session_id: str
    support_id: str | None = None

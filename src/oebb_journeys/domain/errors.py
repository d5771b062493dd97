"""Errors raised by journey searches."""

from oebb_journeys.domain.models.error_details import ErrorDetails


class InvalidOptionsError(ValueError):
    """Raised when search arguments are rejected before any network call."""


class OebbApiError(RuntimeError):
    """Raised when the ticket shop backend answers with an error."""

    def __init__(self, details: ErrorDetails) -> None:
        self.details = details
        status = f"status {details.status_code}" if details.status_code is not None else "error"
        location = f" for {details.url}" if details.url else ""
        super().__init__(f"ÖBB API returned {status}{location}: {details.reason}")

"""Search request domain model (effective configuration of one search)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from oebb_journeys.domain.models.passenger_profile import PassengerProfile

DEFAULT_SORT_TYPE = "DEPARTURE"


@dataclass(frozen=True)
class JourneyFilters:
    """Backend search filters, forwarded verbatim."""

    regional_trains: bool = False
    direct: bool = False
    wheelchair: bool = False
    bikes: bool = False
    trains: bool = False
    motorail: bool = False
    connections: tuple[Any, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """Return the filter object in the backend's wire format."""
        return {
            "regionaltrains": self.regional_trains,
            "direct": self.direct,
            "wheelchair": self.wheelchair,
            "bikes": self.bikes,
            "trains": self.trains,
            "motorail": self.motorail,
            "connections": list(self.connections),
        }


@dataclass(frozen=True)
class SearchRequest:
    """Immutable, fully resolved parameters of a journey search.

    ``departure_time`` is timezone-aware. ``end_time`` is only set when an
    interval was requested.
    """

    origin: str
    destination: str
    departure_time: datetime
    end_time: datetime | None = None
    result_count: int | None = None
    max_transfers: int | None = None
    include_prices: bool = True
    passengers: tuple[PassengerProfile, ...] = ()
    filters: JourneyFilters = field(default_factory=JourneyFilters)
    sort_type: str = DEFAULT_SORT_TYPE

"""Journey domain model."""

from dataclasses import dataclass
from datetime import datetime

from oebb_journeys.domain.models.leg import Leg
from oebb_journeys.domain.models.price import Price


@dataclass(frozen=True)
class Journey:
    """A candidate trip between two stations, made of one or more legs."""

    id: str
    legs: tuple[Leg, ...]
    price: Price | None = None

    @property
    def departure(self) -> datetime:
        """Departure time of the first leg."""
        return datetime.fromisoformat(self.legs[0].departure)

    @property
    def transfers(self) -> int:
        """Number of changes between legs."""
        return len(self.legs) - 1

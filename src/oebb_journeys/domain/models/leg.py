"""Leg domain model."""

from dataclasses import dataclass

from oebb_journeys.domain.models.line import Line
from oebb_journeys.domain.models.operator import Operator
from oebb_journeys.domain.models.station import Station


@dataclass(frozen=True)
class Leg:
    """One directly operated segment of a journey.

    Departure and arrival are offset-qualified ISO-8601 strings in the
    carrier's civil timezone.
    """

    origin: Station
    destination: Station
    departure: str
    arrival: str
    departure_platform: str | None
    arrival_platform: str | None
    has_realtime_information: bool
    line: Line
    mode: str
    is_public_transport: bool
    operator: Operator

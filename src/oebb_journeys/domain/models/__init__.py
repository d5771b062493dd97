"""Domain models for ÖBB journeys."""

from oebb_journeys.domain.models.credentials import Credentials
from oebb_journeys.domain.models.error_details import ErrorDetails
from oebb_journeys.domain.models.journey import Journey
from oebb_journeys.domain.models.leg import Leg
from oebb_journeys.domain.models.line import Line, Product
from oebb_journeys.domain.models.operator import Operator
from oebb_journeys.domain.models.passenger_profile import AccessibilityFlags, PassengerProfile
from oebb_journeys.domain.models.price import Price
from oebb_journeys.domain.models.search_request import JourneyFilters, SearchRequest
from oebb_journeys.domain.models.station import Station
from oebb_journeys.domain.models.travel_action import TravelAction

__all__ = [
    "AccessibilityFlags",
    "Credentials",
    "ErrorDetails",
    "Journey",
    "JourneyFilters",
    "Leg",
    "Line",
    "Operator",
    "PassengerProfile",
    "Price",
    "Product",
    "SearchRequest",
    "Station",
    "TravelAction",
]

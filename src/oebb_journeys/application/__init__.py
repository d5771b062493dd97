"""Application layer - journey search use case."""

from oebb_journeys.application.journey_options import (
    JOURNEY_FEATURES,
    JourneyOptions,
    validate_arguments,
)
from oebb_journeys.application.journey_search_service import JourneySearchService

__all__ = [
    "JOURNEY_FEATURES",
    "JourneyOptions",
    "JourneySearchService",
    "validate_arguments",
]

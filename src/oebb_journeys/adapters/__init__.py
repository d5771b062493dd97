"""Adapters layer - external system integrations."""

from oebb_journeys.adapters.config import AppConfig
from oebb_journeys.adapters.oebb_api import OebbJourneyRepository

__all__ = [
    "AppConfig",
    "OebbJourneyRepository",
]

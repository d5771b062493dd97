"""ÖBB journey search with a carrier-agnostic journey schema."""

from oebb_journeys.search import JOURNEY_FEATURES, journeys

__all__ = ["JOURNEY_FEATURES", "journeys"]

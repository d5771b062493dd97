"""Builds the effective, immutable configuration of one journey search."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from oebb_journeys.application.journey_options import JourneyOptions
from oebb_journeys.application.passenger_builder import build_passenger_profiles
from oebb_journeys.domain.models import JourneyFilters, SearchRequest

# Naive datetimes from callers are read as Austrian wall-clock time
SEARCH_TIMEZONE = ZoneInfo("Europe/Vienna")


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=SEARCH_TIMEZONE)


def build_search_request(
    origin: str, destination: str, options: JourneyOptions, now: datetime
) -> SearchRequest:
    """Layer caller options over defaults.

    - ``when`` / ``departure_after``: departure anchor, ``when`` wins, ``now`` otherwise
    - ``interval``: sets ``end_time`` for the post-fetch window filter
    - ``results`` / ``transfers``: page count, truncation and transfer filter
    - ``prices``, ``filters``, ``sort_type``: forwarded to the repository
    - ``passengers``: turned into backend passenger profiles
    """
    departure_time = _aware(options.when or options.departure_after or now)
    end_time = (
        departure_time + timedelta(minutes=options.interval)
        if options.interval is not None
        else None
    )
    filters = options.filters

    return SearchRequest(
        origin=origin,
        destination=destination,
        departure_time=departure_time,
        end_time=end_time,
        result_count=options.results,
        max_transfers=options.transfers,
        include_prices=options.prices,
        passengers=build_passenger_profiles(options.passengers, now),
        filters=JourneyFilters(
            regional_trains=filters.regional_trains,
            direct=filters.direct,
            wheelchair=filters.wheelchair,
            bikes=filters.bikes,
            trains=filters.trains,
            motorail=filters.motorail,
            connections=tuple(filters.connections),
        ),
        sort_type=options.sort_type,
    )

"""Tests for journey post-processing."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from oebb_journeys.adapters.oebb_api.journey_parser import JourneyParser
from oebb_journeys.application.post_processing import deduplicate, post_process
from oebb_journeys.domain.models import Journey
from tests.test_journey_paginator import make_connection, make_request

VIENNA = ZoneInfo("Europe/Vienna")


def journey(connection_id: str, departure: str = "2026-10-28T06:00:00.000", legs: int = 1) -> Journey:
    """Build a parsed journey."""
    return JourneyParser.parse_journey(make_connection(connection_id, departure, legs), None)


def test_deduplicate_keeps_first_occurrence_in_order() -> None:
    """Given repeated ids, when deduplicating, then the first of each id remains in order."""
    first_b = journey("b", "2026-10-28T06:00:00.000")
    journeys = [journey("a"), first_b, journey("a"), journey("b", "2026-10-28T09:00:00.000")]

    result = deduplicate(journeys)

    assert [j.id for j in result] == ["a", "b"]
    assert result[1] is first_b


def test_without_bounds_everything_is_kept() -> None:
    """Given no interval, transfers or results, when post-processing, then only dedup applies."""
    journeys = [journey("a"), journey("b", legs=4), journey("a")]

    result = post_process(journeys, make_request())

    assert [j.id for j in result] == ["a", "b"]


def test_interval_drops_late_departures() -> None:
    """Given a 30 minute window, when post-processing, then later departures are dropped."""
    start = datetime(2026, 10, 28, 6, 0, tzinfo=VIENNA)
    request = make_request(departure_time=start, end_time=start + timedelta(minutes=30))
    journeys = [
        journey("on-time", "2026-10-28T06:00:00.000"),
        journey("edge", "2026-10-28T06:30:00.000"),
        journey("late", "2026-10-28T06:31:00.000"),
    ]

    result = post_process(journeys, request)

    assert [j.id for j in result] == ["on-time", "edge"]
    for j in result:
        assert start <= j.departure <= start + timedelta(minutes=30)


def test_transfers_bound_drops_long_journeys() -> None:
    """Given at most one transfer, when post-processing, then journeys have at most two legs."""
    journeys = [journey("direct"), journey("one", legs=2), journey("two", legs=3)]

    result = post_process(journeys, make_request(max_transfers=1))

    assert [j.id for j in result] == ["direct", "one"]
    assert all(len(j.legs) <= 2 for j in result)


def test_zero_transfers_keeps_direct_journeys_only() -> None:
    """Given zero transfers, when post-processing, then only single-leg journeys remain."""
    result = post_process([journey("direct"), journey("one", legs=2)], make_request(max_transfers=0))

    assert [j.id for j in result] == ["direct"]


def test_result_count_truncates_preserving_order() -> None:
    """Given a result count, when post-processing, then the first journeys are kept."""
    journeys = [journey(str(i), f"2026-10-28T{6 + i:02d}:00:00.000") for i in range(6)]

    result = post_process(journeys, make_request(result_count=3))

    assert [j.id for j in result] == ["0", "1", "2"]


def test_filters_apply_before_truncation() -> None:
    """Given transfers and results bounds, when post-processing, then truncation counts survivors."""
    journeys = [journey("long", legs=3), journey("a"), journey("b"), journey("c")]

    result = post_process(journeys, make_request(max_transfers=0, result_count=2))

    assert [j.id for j in result] == ["a", "b"]


def test_post_processing_does_not_resort() -> None:
    """Given journeys out of chronological order, when post-processing, then order is kept."""
    journeys = [journey("late", "2026-10-28T09:00:00.000"), journey("early", "2026-10-28T06:00:00.000")]

    result = post_process(journeys, make_request())

    assert [j.id for j in result] == ["late", "early"]

"""Tests for normalizing raw ÖBB records into journeys."""

import pytest

from oebb_journeys.adapters.oebb_api.constants import OEBB_OPERATOR
from oebb_journeys.adapters.oebb_api.journey_parser import JourneyParser
from tests.test_journey_paginator import make_connection, make_offer, make_section


class TestFormatTimestamp:
    """Tests for timestamp normalization."""

    def test_naive_winter_time_is_read_as_vienna_time(self) -> None:
        """Given a naive winter timestamp, when formatting, then the CET offset is added."""
        assert JourneyParser.format_timestamp("2026-10-28T05:42:00.000") == "2026-10-28T05:42:00+01:00"

    def test_naive_summer_time_is_read_as_vienna_time(self) -> None:
        """Given a naive summer timestamp, when formatting, then the CEST offset is added."""
        assert JourneyParser.format_timestamp("2026-07-01T10:15:30") == "2026-07-01T10:15:30+02:00"

    def test_sub_seconds_are_truncated(self) -> None:
        """Given milliseconds, when formatting, then they are dropped, not rounded."""
        assert JourneyParser.format_timestamp("2026-07-01T10:15:30.987") == "2026-07-01T10:15:30+02:00"

    def test_offset_timestamps_are_converted_to_vienna(self) -> None:
        """Given a UTC timestamp, when formatting, then it is shifted into Vienna time."""
        assert JourneyParser.format_timestamp("2026-07-01T08:15:30Z") == "2026-07-01T10:15:30+02:00"
        assert (
            JourneyParser.format_timestamp("2026-07-01T09:15:30+01:00")
            == "2026-07-01T10:15:30+02:00"
        )


class TestParseLine:
    """Tests for line mapping."""

    def test_name_joins_product_and_number(self) -> None:
        """Given product and number, when parsing, then the name joins both with a space."""
        line = JourneyParser.parse_line(
            {"name": "RJX", "number": "662", "shortName": "RJX", "longName": "Railjet Xpress", "train": True}
        )

        assert line.name == "RJX 662"
        assert line.id == "RJX 662"
        assert line.number == "662"
        assert line.product.long_name == "Railjet Xpress"
        assert line.mode == "train"
        assert line.is_public_transport is True
        assert line.operator == OEBB_OPERATOR

    def test_empty_parts_are_dropped(self) -> None:
        """Given only a product name, when parsing, then no trailing space is added."""
        assert JourneyParser.parse_line({"name": "Bus", "number": None}).name == "Bus"
        assert JourneyParser.parse_line({"name": "", "number": "12"}).name == "12"
        assert JourneyParser.parse_line({"name": None, "number": None}).name == ""

    def test_non_train_category_is_bus(self) -> None:
        """Given a category without the train flag, when parsing, then mode is bus."""
        assert JourneyParser.parse_line({"name": "Bus", "number": "401", "train": False}).mode == "bus"
        assert JourneyParser.parse_line({"name": "SEV"}).mode == "bus"


class TestParseLeg:
    """Tests for leg mapping."""

    def test_leg_fields(self) -> None:
        """Given a raw section, when parsing, then stations, times and platforms are mapped."""
        leg = JourneyParser.parse_leg(make_section())

        assert leg.origin.id == "8011160"
        assert leg.origin.name == "Station 8011160"
        assert leg.destination.id == "1190100"
        assert leg.departure == "2026-10-28T06:00:00+01:00"
        assert leg.arrival == "2026-10-28T08:00:00+01:00"
        assert leg.departure_platform == "7"
        assert leg.arrival_platform == "3"
        assert leg.has_realtime_information is True
        assert leg.mode == "train"
        assert leg.line.name == "RJX 662"
        assert leg.operator.id == "oebb"

    def test_missing_platforms_are_none(self) -> None:
        """Given a section without platforms, when parsing, then platforms are None."""
        section = make_section()
        del section["from"]["departurePlatform"]
        del section["to"]["arrivalPlatform"]

        leg = JourneyParser.parse_leg(section)

        assert leg.departure_platform is None
        assert leg.arrival_platform is None


class TestParsePrice:
    """Tests for offer validity."""

    def test_available_offer_yields_price(self) -> None:
        """Given a valid offer, when parsing, then a EUR price is returned."""
        price = JourneyParser.parse_price(make_offer("a", 39.9, firstClass=True))

        assert price is not None
        assert price.amount == 39.9
        assert price.currency == "EUR"
        assert price.is_first_class is True

    @pytest.mark.parametrize(
        "offer",
        [
            None,
            {},
            make_offer("a", None),
            make_offer("a", "39.90"),
            make_offer("a", True),
            make_offer("a", offerError=True),
            make_offer("a", offerError="SOLD_OUT"),
            make_offer("a", availabilityState="soldOut"),
        ],
    )
    def test_unusable_offer_yields_none(self, offer: dict | None) -> None:
        """Given a missing, non-numeric, failed or unavailable offer, when parsing, then None."""
        assert JourneyParser.parse_price(offer) is None


class TestParseJourney:
    """Tests for journey mapping."""

    def test_journey_keeps_leg_order(self) -> None:
        """Given a multi-section connection, when parsing, then legs keep backend order."""
        journey = JourneyParser.parse_journey(make_connection("c1", legs=3), make_offer("c1"))

        assert journey.id == "c1"
        assert len(journey.legs) == 3
        departures = [leg.departure for leg in journey.legs]
        assert departures == sorted(departures)
        assert journey.price is not None

    def test_parsing_twice_yields_identical_journeys(self) -> None:
        """Given the same raw record, when parsing twice, then both results are equal."""
        raw = make_connection("c1", legs=2)

        assert JourneyParser.parse_journey(raw, None) == JourneyParser.parse_journey(raw, None)

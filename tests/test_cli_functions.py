"""Tests for CLI helper functions."""

from oebb_journeys.adapters.oebb_api.journey_parser import JourneyParser
from oebb_journeys.cli import _build_options, _setup_argparse, format_journey, journey_to_dict
from tests.test_journey_paginator import make_connection, make_offer


def test_build_options_leaves_unset_values_out() -> None:
    """Given only origin and destination, when building options, then defaults stay implicit."""
    args = _setup_argparse().parse_args(["search", "8011160", "8002549"])

    assert _build_options(args) == {"prices": True, "sort_type": "DEPARTURE"}


def test_build_options_maps_flags() -> None:
    """Given all flags, when building options, then each lands on its option."""
    args = _setup_argparse().parse_args(
        [
            "search",
            "8011160",
            "1190100",
            "--when",
            "2026-11-02T05:00",
            "--results",
            "3",
            "--transfers",
            "1",
            "--interval",
            "60",
            "--no-prices",
            "--sort-type",
            "ARRIVAL",
        ]
    )

    assert _build_options(args) == {
        "prices": False,
        "sort_type": "ARRIVAL",
        "when": "2026-11-02T05:00",
        "results": 3,
        "transfers": 1,
        "interval": 60,
    }


def test_format_journey_shows_legs_and_price() -> None:
    """Given a priced two-leg journey, when formatting, then header and legs are printed."""
    journey = JourneyParser.parse_journey(make_connection("c1", legs=2), make_offer("c1", 59.0))

    text = format_journey(journey)

    lines = text.splitlines()
    assert len(lines) == 3
    assert "1 transfer(s), 59.00 EUR" in lines[0]
    assert "RJX 662" in lines[1]
    assert "(Bstg. 7)" in lines[1]


def test_format_journey_without_price() -> None:
    """Given no price, when formatting, then 'no price' is shown."""
    journey = JourneyParser.parse_journey(make_connection("c1"), None)

    assert "no price" in format_journey(journey)


def test_journey_to_dict_is_plain_data() -> None:
    """Given a journey, when converting, then nested models become dicts."""
    data = journey_to_dict(JourneyParser.parse_journey(make_connection("c1"), None))

    assert data["id"] == "c1"
    assert data["price"] is None
    assert data["legs"][0]["origin"] == {"id": "8011160", "name": "Station 8011160"}
    assert data["legs"][0]["line"]["operator"]["id"] == "oebb"

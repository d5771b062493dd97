"""Parser for ÖBB timetable responses into the canonical journey schema."""

from datetime import datetime
from typing import Any

from oebb_journeys.adapters.oebb_api.constants import (
    AVAILABLE_OFFER_STATE,
    CARRIER_TIMEZONE,
    CURRENCY,
    OEBB_OPERATOR,
)
from oebb_journeys.domain.models import Journey, Leg, Line, Price, Product, Station


class JourneyParser:
    """Maps raw connections, sections and offers onto domain models.

    All methods are pure. The backend contract is assumed to be honored, so
    structurally malformed records raise whatever the lookup raises.
    """

    @staticmethod
    def format_timestamp(value: str) -> str:
        """Normalize a backend timestamp to second-precision ISO-8601 in Vienna time.

        Naive timestamps are read as Vienna wall-clock time, offset-qualified
        ones are converted.
        """
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=CARRIER_TIMEZONE)
        else:
            parsed = parsed.astimezone(CARRIER_TIMEZONE)
        return parsed.replace(microsecond=0).isoformat()

    @staticmethod
    def parse_station(raw_station: dict[str, Any]) -> Station:
        """Build a Station from a section endpoint (``from`` / ``to``)."""
        return Station(id=str(raw_station["esn"]), name=raw_station["name"])

    @staticmethod
    def parse_line(category: dict[str, Any]) -> Line:
        """Build a Line from a section category."""
        name = category.get("name")
        number = category.get("number")
        line_name = Line.display_name(name, number)
        return Line(
            id=line_name,
            name=line_name,
            number=number,
            product=Product(
                name=name,
                short_name=category.get("shortName"),
                long_name=category.get("longName"),
            ),
            mode=JourneyParser._mode(category),
            is_public_transport=True,
            operator=OEBB_OPERATOR,
        )

    @staticmethod
    def _mode(category: dict[str, Any]) -> str:
        return "train" if category.get("train") else "bus"

    @staticmethod
    def parse_leg(section: dict[str, Any]) -> Leg:
        """Build a Leg from a connection section."""
        origin = section["from"]
        destination = section["to"]
        category = section["category"]
        return Leg(
            origin=JourneyParser.parse_station(origin),
            destination=JourneyParser.parse_station(destination),
            departure=JourneyParser.format_timestamp(origin["departure"]),
            arrival=JourneyParser.format_timestamp(destination["arrival"]),
            departure_platform=origin.get("departurePlatform"),
            arrival_platform=destination.get("arrivalPlatform"),
            has_realtime_information=bool(section.get("hasRealtime")),
            line=JourneyParser.parse_line(category),
            mode=JourneyParser._mode(category),
            is_public_transport=True,
            operator=OEBB_OPERATOR,
        )

    @staticmethod
    def parse_price(offer: dict[str, Any] | None) -> Price | None:
        """Build a Price from an offer, or None if the offer is unusable."""
        if not offer:
            return None

        amount = offer.get("price")
        if isinstance(amount, bool) or not isinstance(amount, int | float):
            return None
        if offer.get("offerError") or offer.get("availabilityState") != AVAILABLE_OFFER_STATE:
            return None

        return Price(
            currency=CURRENCY,
            amount=amount,
            is_first_class=bool(offer.get("firstClass")),
        )

    @staticmethod
    def parse_journey(raw_connection: dict[str, Any], offer: dict[str, Any] | None) -> Journey:
        """Build a Journey from a raw connection and its matching offer."""
        return Journey(
            id=raw_connection["id"],
            legs=tuple(JourneyParser.parse_leg(s) for s in raw_connection["sections"]),
            price=JourneyParser.parse_price(offer),
        )

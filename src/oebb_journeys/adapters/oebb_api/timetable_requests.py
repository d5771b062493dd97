"""Request bodies for the ÖBB timetable endpoints.

The first page of a search and the following scroll pages share most fields
but differ in endpoint and in the fields they carry, so each kind has its own
constructor.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from oebb_journeys.adapters.oebb_api.constants import (
    CARRIER_TIMEZONE,
    PAGE_SIZE,
    SCROLL_DIRECTION,
    TIMETABLE_ENTRYPOINT_ID,
    TIMETABLE_PATH,
    TIMETABLE_SCROLL_PATH,
)
from oebb_journeys.domain.models import PassengerProfile, SearchRequest


class PageKind(Enum):
    """Kind of timetable page request."""

    INITIAL = "initial"
    SCROLL = "scroll"


@dataclass(frozen=True)
class TimetablePageRequest:
    """A timetable call ready to be posted."""

    kind: PageKind
    path: str
    body: dict[str, Any]


def format_request_datetime(value: datetime) -> str:
    """Format a datetime as Vienna wall-clock time without offset, millisecond precision."""
    local = value.astimezone(CARRIER_TIMEZONE) if value.tzinfo else value
    return local.replace(tzinfo=None).isoformat(timespec="milliseconds")


def station_ref(station_id: str, name: str = "") -> dict[str, Any]:
    """Reference a station by its numeric code; the backend ignores the name."""
    return {"name": name, "number": int(station_id)}


def passenger_payload(profile: PassengerProfile) -> dict[str, Any]:
    """Serialize a passenger profile into the backend's passenger object."""
    flags = profile.accessibility_flags
    return {
        "me": profile.is_self,
        "remembered": False,
        "markedForDeath": False,
        "challengedFlags": {
            "hasHandicappedPass": flags.handicapped_pass,
            "hasAssistanceDog": flags.assistance_dog,
            "hasWheelchair": flags.wheelchair,
            "hasAttendant": flags.attendant,
        },
        "cards": list(profile.discount_cards),
        "relations": [],
        "id": profile.synthetic_id,
        "type": profile.type,
    }


def _common_fields(request: SearchRequest, travel_action_id: str) -> dict[str, Any]:
    return {
        "travelActionId": travel_action_id,
        "filter": request.filters.to_payload(),
        "entryPointId": TIMETABLE_ENTRYPOINT_ID,
        "sortType": request.sort_type,
        "from": station_ref(request.origin),
        "to": station_ref(request.destination),
    }


def build_initial_page_request(
    request: SearchRequest, travel_action_id: str
) -> TimetablePageRequest:
    """Build the request for the first page of a fresh search."""
    body = _common_fields(request, travel_action_id)
    body["datetimeDeparture"] = format_request_datetime(request.departure_time)
    body["passengers"] = [passenger_payload(p) for p in request.passengers]
    body["count"] = PAGE_SIZE
    return TimetablePageRequest(kind=PageKind.INITIAL, path=TIMETABLE_PATH, body=body)


def build_scroll_page_request(
    request: SearchRequest, travel_action_id: str, last_connection_id: str
) -> TimetablePageRequest:
    """Build the request for the page following ``last_connection_id``."""
    body = _common_fields(request, travel_action_id)
    body["connectionId"] = last_connection_id
    body["count"] = PAGE_SIZE
    body["direction"] = SCROLL_DIRECTION
    return TimetablePageRequest(kind=PageKind.SCROLL, path=TIMETABLE_SCROLL_PATH, body=body)

"""Resolution of the travel action handle required before a timetable search."""

import logging
from datetime import datetime
from typing import Any

from oebb_journeys.adapters.oebb_api.constants import (
    TIMETABLE_ENTRYPOINT_ID,
    TRAVEL_ACTION_MAX_ENTRIES,
    TRAVEL_ACTIONS_PATH,
)
from oebb_journeys.adapters.oebb_api.timetable_requests import (
    format_request_datetime,
    station_ref,
)
from oebb_journeys.domain.models import TravelAction
from oebb_journeys.domain.ports import SessionClient

logger = logging.getLogger(__name__)


def build_travel_actions_request(origin: str, destination: str, when: datetime) -> dict[str, Any]:
    """Build the travel actions body for an origin/destination/datetime triple."""
    return {
        "departureTime": True,
        "from": station_ref(origin),
        "to": station_ref(destination),
        "datetime": format_request_datetime(when),
        "customerVias": [],
        "travelActionTypes": [TIMETABLE_ENTRYPOINT_ID],
        "filter": {
            "productTypes": [],
            "history": True,
            "maxEntries": TRAVEL_ACTION_MAX_ENTRIES,
            "channel": "inet",
        },
    }


def parse_travel_action(raw: dict[str, Any]) -> TravelAction:
    """Build a TravelAction from a raw travel action record."""
    entrypoint = raw.get("entrypoint") or {}
    return TravelAction(id=raw["id"], entrypoint_kind=entrypoint.get("id"))


class TravelActionResolver:
    """Looks up the timetable travel action for a search."""

    def __init__(self, client: SessionClient) -> None:
        self._client = client

    async def resolve(self, origin: str, destination: str, when: datetime) -> TravelAction | None:
        """Return the first timetable travel action, or None if the backend offers none."""
        data = await self._client.post(
            TRAVEL_ACTIONS_PATH, build_travel_actions_request(origin, destination, when)
        )
        for raw in data.get("travelActions") or []:
            action = parse_travel_action(raw)
            if action.is_timetable:
                return action

        logger.info(f"No timetable travel action for {origin} -> {destination} at {when}")
        return None

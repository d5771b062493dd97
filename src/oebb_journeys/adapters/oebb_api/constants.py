"""Constants for the ÖBB ticket shop adapter.

The ticket shop serves a single carrier, so operator, currency and civil
timezone are fixed values rather than read from responses.
"""

from zoneinfo import ZoneInfo

from oebb_journeys.domain.models.operator import Operator

# API endpoints, relative to AppConfig.base_url
INIT_PATH = "/api/domain/v4/init"
TRAVEL_ACTIONS_PATH = "/api/offer/v2/travelActions"
TIMETABLE_PATH = "/api/hafas/v4/timetable"
TIMETABLE_SCROLL_PATH = "/api/hafas/v1/timetableScroll"
PRICES_PATH = "/api/offer/v1/prices"

# The timetable endpoints always answer with this many connections per page
PAGE_SIZE = 5
SCROLL_DIRECTION = "after"
TIMETABLE_ENTRYPOINT_ID = "timetable"
TRAVEL_ACTION_MAX_ENTRIES = 10
AVAILABLE_OFFER_STATE = "available"

CARRIER_TIMEZONE = ZoneInfo("Europe/Vienna")
CURRENCY = "EUR"

OEBB_OPERATOR = Operator(
    id="oebb",
    name="Österreichische Bundesbahnen",
    url="https://www.oebb.at/",
)

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

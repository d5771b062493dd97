"""Caller-facing search options and argument validation."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationError,
    field_validator,
)

from oebb_journeys.domain.errors import InvalidOptionsError
from oebb_journeys.domain.models.passenger_profile import DEFAULT_PASSENGER_TYPE
from oebb_journeys.domain.models.search_request import DEFAULT_SORT_TYPE

JOURNEY_FEATURES: dict[str, str] = {
    "results": "Max. number of results returned",
    "when": "Journey date, synonym to departure_after",
    "departure_after": "List journeys with a departure (first leg) after this date",
    "interval": "Results for how many minutes after when / departure_after",
    "transfers": "Max. number of transfers",
    "prices": "Add price information to journeys",
    "passengers": "List of passengers with type, discount cards and accessibility flags",
    "filters": "Filter options for journey search (e.g. regional_trains, direct, wheelchair, bikes)",
    "sort_type": "Sort type for results ('DEPARTURE' or another type the backend supports)",
}


class ChallengedFlags(BaseModel):
    """Accessibility flags of one passenger."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    has_handicapped_pass: bool = Field(default=False, alias="hasHandicappedPass")
    has_assistance_dog: bool = Field(default=False, alias="hasAssistanceDog")
    has_wheelchair: bool = Field(default=False, alias="hasWheelchair")
    has_attendant: bool = Field(default=False, alias="hasAttendant")

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class PassengerOptions(BaseModel):
    """One passenger as supplied by the caller."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = DEFAULT_PASSENGER_TYPE
    cards: list[Any] = Field(default_factory=list)
    challenged_flags: ChallengedFlags = Field(
        default_factory=ChallengedFlags, alias="challengedFlags"
    )

    @field_validator("type", mode="before")
    @classmethod
    def _null_type_is_default(cls, value: Any) -> Any:
        return DEFAULT_PASSENGER_TYPE if value is None else value

    @field_validator("cards", mode="before")
    @classmethod
    def _null_cards_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("challenged_flags", mode="before")
    @classmethod
    def _null_flags_is_default(cls, value: Any) -> Any:
        return {} if value is None else value


class FilterOptions(BaseModel):
    """Backend search filters as supplied by the caller."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    regional_trains: bool = Field(default=False, alias="regionaltrains")
    direct: bool = False
    wheelchair: bool = False
    bikes: bool = False
    trains: bool = False
    motorail: bool = False
    connections: list[Any] = Field(default_factory=list)


class JourneyOptions(BaseModel):
    """Options of a journey search.

    ``when`` wins over ``departure_after``; with neither set the search starts
    now. camelCase names (``departureAfter``, ``sortType``) are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    when: datetime | None = None
    departure_after: datetime | None = Field(default=None, alias="departureAfter")
    results: int | None = Field(default=None, ge=0)
    transfers: int | None = Field(default=None, ge=0)
    interval: int | None = Field(default=None, ge=0)
    prices: StrictBool = True
    passengers: list[PassengerOptions] = Field(default_factory=lambda: [PassengerOptions()])
    filters: FilterOptions = Field(default_factory=FilterOptions)
    sort_type: str = Field(default=DEFAULT_SORT_TYPE, alias="sortType", min_length=1)


def resolve_station_id(value: Any, role: str) -> str:
    """Return the station id of a string, a mapping with ``id`` or an object with ``id``.

    Raises:
        InvalidOptionsError: If no numeric station id can be found.
    """
    if isinstance(value, str):
        station_id = value
    elif isinstance(value, Mapping):
        station_id = value.get("id")
    else:
        station_id = getattr(value, "id", None)

    if isinstance(station_id, int) and not isinstance(station_id, bool):
        station_id = str(station_id)
    if not isinstance(station_id, str) or not station_id.strip().isdigit():
        raise InvalidOptionsError(f"{role} must be a numeric station id, got {station_id!r}")
    return station_id.strip()


def _describe(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        if field == "prices":
            messages.append("`prices` must be a boolean")
        else:
            messages.append(f"`{field}`: {item['msg']}")
    return "; ".join(messages)


def parse_options(options: JourneyOptions | Mapping[str, Any] | None) -> JourneyOptions:
    """Parse caller options into a JourneyOptions instance."""
    if isinstance(options, JourneyOptions):
        return options
    try:
        return JourneyOptions.model_validate(dict(options or {}))
    except ValidationError as e:
        raise InvalidOptionsError(_describe(e)) from e


def validate_arguments(
    origin: Any, destination: Any, options: JourneyOptions | Mapping[str, Any] | None
) -> tuple[str, str, JourneyOptions]:
    """Validate search arguments before any network call.

    Returns:
        Origin id, destination id and parsed options.

    Raises:
        InvalidOptionsError: If any argument is rejected.
    """
    return (
        resolve_station_id(origin, "origin"),
        resolve_station_id(destination, "destination"),
        parse_options(options),
    )

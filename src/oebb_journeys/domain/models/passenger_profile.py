"""Passenger profile domain model."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_PASSENGER_TYPE = "ADULT"


@dataclass(frozen=True)
class AccessibilityFlags:
    """Accessibility needs declared for a passenger."""

    handicapped_pass: bool = False
    assistance_dog: bool = False
    wheelchair: bool = False
    attendant: bool = False


@dataclass(frozen=True)
class PassengerProfile:
    """A passenger as the booking backend expects it.

    ``synthetic_id`` is only unique within one search request.
    """

    is_self: bool
    synthetic_id: int
    type: str = DEFAULT_PASSENGER_TYPE
    accessibility_flags: AccessibilityFlags = field(default_factory=AccessibilityFlags)
    discount_cards: tuple[Any, ...] = ()

"""Builds backend passenger profiles from caller passenger options."""

from collections.abc import Sequence
from datetime import datetime

from oebb_journeys.application.journey_options import PassengerOptions
from oebb_journeys.domain.models import AccessibilityFlags, PassengerProfile
from oebb_journeys.domain.models.passenger_profile import DEFAULT_PASSENGER_TYPE


def build_passenger_profiles(
    passengers: Sequence[PassengerOptions] | None, now: datetime
) -> tuple[PassengerProfile, ...]:
    """Map caller passengers 1:1 onto profiles, or return a single default adult.

    Ids are the current timestamp in seconds plus the list position, so they
    are unique within one request only.
    """
    base_id = round(now.timestamp())
    if not passengers:
        return (PassengerProfile(is_self=True, synthetic_id=base_id),)

    return tuple(
        PassengerProfile(
            is_self=index == 0,
            synthetic_id=base_id + index,
            type=passenger.type or DEFAULT_PASSENGER_TYPE,
            accessibility_flags=AccessibilityFlags(
                handicapped_pass=passenger.challenged_flags.has_handicapped_pass,
                assistance_dog=passenger.challenged_flags.has_assistance_dog,
                wheelchair=passenger.challenged_flags.has_wheelchair,
                attendant=passenger.challenged_flags.has_attendant,
            ),
            discount_cards=tuple(passenger.cards),
        )
        for index, passenger in enumerate(passengers)
    )

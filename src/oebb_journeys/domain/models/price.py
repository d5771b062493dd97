"""Price domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Price:
    """Price of a journey as quoted by a single offer snapshot."""

    currency: str
    amount: float
    is_first_class: bool

"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a rail station identified by its numeric station code."""

    id: str
    name: str

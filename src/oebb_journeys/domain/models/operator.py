"""Operator domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Operator:
    """Represents the company operating a line."""

    id: str
    name: str
    url: str | None = None

"""Line and product domain models."""

from dataclasses import dataclass

from oebb_journeys.domain.models.operator import Operator


@dataclass(frozen=True)
class Product:
    """Product (category) a line belongs to, e.g. "RJX" / "Railjet Xpress"."""

    name: str | None
    short_name: str | None
    long_name: str | None


@dataclass(frozen=True)
class Line:
    """Represents a public transport line."""

    id: str
    name: str
    number: str | None
    product: Product
    mode: str  # "train" or "bus"
    is_public_transport: bool
    operator: Operator

    @staticmethod
    def display_name(product_name: str | None, number: str | int | None) -> str:
        """Join the non-empty parts of product name and number with a space."""
        return " ".join(str(part) for part in (product_name, number) if part)

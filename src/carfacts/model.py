from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field

__all__ = [
    "Report",
    "Statistics",
    "Vehicle",
]


class Vehicle(BaseModel):
    """A single used-car listing as read from the dataset."""

    model_config = ConfigDict(frozen=True)
    name: str
    year: int
    selling_price: int
    fuel: str = ""
    transmission: str = ""


class Statistics(BaseModel):
    """Aggregate figures over a sequence of vehicles.

    `max_price` and `min_price` are `None` for an empty sequence.

    Examples:
        >>> Statistics(total=2, total_value=300, max_price=200, min_price=100).average_price
        150.0
        >>> Statistics().average_price is None
        True
    """

    model_config = ConfigDict(frozen=True)
    total: int = 0
    total_value: int = 0
    max_price: int | None = None
    min_price: int | None = None

    @computed_field
    @property
    def average_price(self) -> float | None:
        if self.total == 0:
            return None

        return self.total_value / self.total


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)
    preview: Sequence[Vehicle] = Field(default_factory=tuple)
    affordable: Sequence[Vehicle] = Field(default_factory=tuple)
    petrol_count: int = 0
    diesel_count: int = 0
    cheapest: Sequence[Vehicle] = Field(default_factory=tuple)
    marked_up: Sequence[Vehicle] = Field(default_factory=tuple)
    statistics: Statistics = Field(default_factory=Statistics)
    composed: Sequence[Vehicle] = Field(default_factory=tuple)

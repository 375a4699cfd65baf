"""
Composable building blocks for analysing a sequence of vehicles.

Every function returns a new sequence or value and leaves its input untouched,
so the results of one step can be fed into the next with `compose`.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial, reduce
from typing import Any, override

from .helpers import round_nearest
from .model import Statistics, Vehicle
from .typing import Predicate, ReducerFunc, Transform, Unary

__all__ = [
    "apply_markup",
    "calculate_stats",
    "compose",
    "count_by",
    "filter_by",
    "fuel_type",
    "negate",
    "price_between",
    "price_range",
    "sort_by_price",
    "take",
]


@dataclass(slots=True, frozen=True)
class filter_by[V](Transform[V]):
    """Keeps the values that satisfy a predicate, preserving their order.

    Examples:
        >>> filter_by(lambda x: x > 1)([3, 1, 2])
        [3, 2]
    """

    predicate: Predicate[V]

    @override
    def __call__(self, values: Sequence[V]) -> list[V]:
        return [value for value in values if self.predicate(value)]


@dataclass(slots=True, frozen=True)
class negate[V](Predicate[V]):
    predicate: Predicate[V]

    @override
    def __call__(self, value: V) -> bool:
        return not self.predicate(value)


@dataclass(slots=True, frozen=True)
class price_between(Predicate[Vehicle]):
    """True when the selling price lies in the closed interval [min, max]."""

    min: int
    max: int

    @override
    def __call__(self, value: Vehicle) -> bool:
        return self.min <= value.selling_price <= self.max


def price_range(min: int) -> Callable[[int], price_between]:
    """Curried constructor for `price_between`.

    Examples:
        >>> price_range(0)(300000)
        price_between(min=0, max=300000)
    """
    return partial(price_between, min)


@dataclass(slots=True, frozen=True)
class fuel_type(Predicate[Vehicle]):
    """True when the fuel matches exactly, including case."""

    type: str

    @override
    def __call__(self, value: Vehicle) -> bool:
        return value.fuel == self.type


@dataclass(slots=True, frozen=True)
class apply_markup(Transform[Vehicle]):
    """Raises every selling price by a percentage.

    Args:
        percentage: Markup in percent, e.g. `10` for ten percent.

    Returns:
        New vehicles whose prices are rounded to the nearest integer, halves upwards.
        All other fields are copied unchanged.
    """

    percentage: float

    @override
    def __call__(self, values: Sequence[Vehicle]) -> list[Vehicle]:
        factor = 1 + self.percentage / 100

        return [
            value.model_copy(
                update={"selling_price": round_nearest(value.selling_price * factor)}
            )
            for value in values
        ]


def sort_by_price(values: Sequence[Vehicle]) -> list[Vehicle]:
    """Sorts ascending by selling price; vehicles with equal prices keep their order."""
    return sorted(values, key=lambda value: value.selling_price)


@dataclass(slots=True, frozen=True)
class count_by[V](ReducerFunc[V, int]):
    """Counts the values that satisfy a predicate.

    Examples:
        >>> count_by(lambda x: x % 2 == 0)([1, 2, 3, 4])
        2
    """

    predicate: Predicate[V]

    @override
    def __call__(self, values: Sequence[V]) -> int:
        return reduce(
            lambda count, value: count + 1 if self.predicate(value) else count,
            values,
            0,
        )


def _accumulate(stats: Statistics, value: Vehicle) -> Statistics:
    price = value.selling_price

    return Statistics(
        total=stats.total + 1,
        total_value=stats.total_value + price,
        max_price=price if stats.max_price is None else max(stats.max_price, price),
        min_price=price if stats.min_price is None else min(stats.min_price, price),
    )


def calculate_stats(values: Sequence[Vehicle]) -> Statistics:
    """Computes count, sum, maximum and minimum of the selling prices in one pass."""
    return reduce(_accumulate, values, Statistics())


@dataclass(slots=True, frozen=True)
class take[V](Transform[V]):
    """Keeps the first `n` values.

    Examples:
        >>> take(2)([5, 6, 7])
        [5, 6]
    """

    n: int

    @override
    def __call__(self, values: Sequence[V]) -> list[V]:
        return list(values[: self.n])


def compose(*funcs: Unary) -> Unary:
    """Composes functions from right to left, so the last one is applied first.

    Examples:
        >>> compose(lambda x: x + 1, lambda x: x * 2)(5)
        11
        >>> compose()(5)
        5
    """

    def composed(value: Any) -> Any:
        return reduce(lambda result, func: func(result), reversed(funcs), value)

    return composed

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from . import constants, loaders
from .helpers import get_logger, round_nearest
from .model import Report, Statistics, Vehicle
from .transforms import (
    apply_markup,
    calculate_stats,
    compose,
    count_by,
    filter_by,
    fuel_type,
    price_range,
    sort_by_price,
    take,
)
from .typing import FilePath

__all__ = [
    "analyze",
    "render",
    "run",
]

logger = get_logger(__name__)

TITLE = "CAR SALES FUNCTIONAL PROGRAMMING ANALYSIS"
RULE = "=" * 46


def analyze(vehicles: Sequence[Vehicle]) -> Report:
    """Computes every report section from the full list of vehicles.

    Each section starts again from `vehicles`; no intermediate result is shared.
    """
    cheapest_diesel = compose(
        take(constants.TOP_N),
        sort_by_price,
        filter_by(fuel_type("Diesel")),
    )

    return Report(
        preview=take(constants.PREVIEW_SIZE)(vehicles),
        affordable=take(constants.PREVIEW_SIZE)(
            filter_by(
                price_range(constants.AFFORDABLE_MIN)(constants.AFFORDABLE_MAX)
            )(vehicles)
        ),
        petrol_count=count_by(fuel_type("Petrol"))(vehicles),
        diesel_count=count_by(fuel_type("Diesel"))(vehicles),
        cheapest=take(constants.TOP_N)(sort_by_price(vehicles)),
        marked_up=take(constants.TOP_N)(
            apply_markup(constants.MARKUP_PERCENTAGE)(vehicles)
        ),
        statistics=calculate_stats(vehicles),
        composed=cheapest_diesel(vehicles),
    )


def format_price(price: float | None) -> str:
    """Formats a price with currency and thousands separators.

    Examples:
        >>> format_price(1250000)
        'RM1,250,000'
        >>> format_price(None)
        'n/a'
    """
    if price is None:
        return "n/a"

    return f"{constants.CURRENCY}{round_nearest(price):,}"


def _heading(console: Console, text: str) -> None:
    console.print()
    console.print(Text(f" {text}", style="bold"), soft_wrap=True)


def _line(console: Console, text: str) -> None:
    console.print(Text(text), highlight=False, soft_wrap=True)


def _bullets(console: Console, vehicles: Sequence[Vehicle]) -> None:
    for vehicle in vehicles:
        _line(console, f"  • {vehicle.name} - {format_price(vehicle.selling_price)}")


def _statistics(console: Console, stats: Statistics) -> None:
    _line(console, f"  Total Vehicles: {stats.total}")
    _line(console, f"  Average Price: {format_price(stats.average_price)}")
    _line(console, f"  Highest Price: {format_price(stats.max_price)}")
    _line(console, f"  Lowest Price: {format_price(stats.min_price)}")


def render(report: Report, console: Console) -> None:
    console.print(Text(TITLE, style="bold"), soft_wrap=True)
    _line(console, RULE)

    _heading(console, f"PREVIEW OF VEHICLES (First {constants.PREVIEW_SIZE}):")
    for vehicle in report.preview:
        _line(
            console,
            f"{vehicle.name} ({vehicle.year}) - "
            f"{format_price(vehicle.selling_price)} - {vehicle.fuel}",
        )

    _heading(console, f"VEHICLES UNDER {constants.AFFORDABLE_MAX:,}:")
    _bullets(console, report.affordable)

    _heading(console, "FUEL TYPE DISTRIBUTION:")
    _line(console, f"  Petrol: {report.petrol_count} vehicles")
    _line(console, f"  Diesel: {report.diesel_count} vehicles")

    _heading(console, f"CHEAPEST VEHICLES (Top {constants.TOP_N}):")
    _bullets(console, report.cheapest)

    _heading(
        console,
        f"PRICES AFTER {constants.MARKUP_PERCENTAGE}% MARKUP (Top {constants.TOP_N}):",
    )
    _bullets(console, report.marked_up)

    _heading(console, "STATISTICAL ANALYSIS:")
    _statistics(console, report.statistics)

    _heading(console, "FUNCTION COMPOSITION EXAMPLE:")
    _line(console, f"(Filter Diesel + Sort by Price + Take First {constants.TOP_N})")
    _bullets(console, report.composed)


def run(path: FilePath, console: Console | None = None) -> Report:
    """Loads the dataset at `path`, analyses it and prints the report.

    Raises:
        OSError: If the dataset cannot be opened.
        DatasetReadError: If the dataset is not valid utf-8 csv.
        EmptyDatasetError: If no row could be loaded; nothing is analysed.
    """
    if console is None:
        console = Console()

    vehicles = loaders.path(path)

    _line(console, "CSV data loaded")
    _line(console, RULE)

    loaders.require_data(vehicles)

    logger.info(f"Analysing {len(vehicles)} vehicles from {path}")
    report = analyze(vehicles)
    render(report, console)

    return report

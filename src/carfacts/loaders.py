"""
This module reads the used-car dataset and coerces its rows into `Vehicle` records.
Rows that cannot be coerced are logged and left out.
"""

import csv as csvlib
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import polars as pl
from pydantic import ValidationError

from .helpers import get_logger, parse_int
from .model import Vehicle
from .typing import ConversionFunc, FilePath, RawRow

__all__ = [
    "DatasetReadError",
    "EmptyDatasetError",
    "csv",
    "path",
    "polars",
    "require_data",
    "vehicle",
    "vehicles",
]

logger = get_logger(__name__)

ReadableType = str | bytes | bytearray


class EmptyDatasetError(ValueError):
    """Raised when a dataset contains no usable rows."""


class DatasetReadError(Exception):
    """Raised when the dataset stream cannot be decoded or parsed as csv."""


def read(data: ReadableType) -> str:
    if isinstance(data, str):
        return data

    return data.decode("utf-8-sig")


@dataclass(slots=True, frozen=True)
class csv(ConversionFunc[Iterable[str] | ReadableType, list[dict[str, str]]]):
    """Reads csv data with a header row into a list of rows.

    Examples:
        >>> csv()("name,year\\nAlto,2010\\n")
        [{'name': 'Alto', 'year': '2010'}]
    """

    def __call__(self, source: Iterable[str] | ReadableType) -> list[dict[str, str]]:
        if isinstance(source, str | bytes | bytearray):
            source = read(source).splitlines()

        reader = csvlib.DictReader(source)  # pyright: ignore

        return list(reader)


def vehicle(row: RawRow) -> Vehicle:
    """Coerces a raw row into a `Vehicle`.

    Raises:
        ValidationError: If the name is missing or year/price are not numeric.

    Examples:
        >>> vehicle({"name": "Maruti 800", "year": "2007", "selling_price": "60000", "fuel": "Petrol", "transmission": "Manual"})
        Vehicle(name='Maruti 800', year=2007, selling_price=60000, fuel='Petrol', transmission='Manual')
    """
    return Vehicle.model_validate(
        {
            "name": row.get("name"),
            "year": parse_int(row.get("year")),
            "selling_price": parse_int(row.get("selling_price")),
            "fuel": row.get("fuel") or "",
            "transmission": row.get("transmission") or "",
        }
    )


def vehicles(rows: Iterable[RawRow]) -> list[Vehicle]:
    """Coerces rows into vehicles, rejecting rows without a name or a numeric year and price."""
    results: list[Vehicle] = []

    for idx, row in enumerate(rows):
        try:
            results.append(vehicle(row))
        except ValidationError as e:
            fields = ", ".join(str(error["loc"][0]) for error in e.errors())
            logger.warning(f"Skipping row {idx}: invalid {fields}")

    logger.info(f"Loaded {len(results)} vehicles")

    return results


def path(path: FilePath) -> list[Vehicle]:
    """Reads a csv file into a list of vehicles.

    Args:
        path: File path of the csv file.

    Raises:
        OSError: If the file cannot be opened or read.
        DatasetReadError: If the content is not valid utf-8 or not valid csv.
    """
    if isinstance(path, str):
        path = Path(path)

    with path.open(newline="", encoding="utf-8-sig") as fp:
        try:
            rows = csv()(fp)
        except (csvlib.Error, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise DatasetReadError(str(e)) from e

    return vehicles(rows)


def polars(df: pl.DataFrame) -> list[Vehicle]:
    """Converts a polars DataFrame with the dataset columns into a list of vehicles.

    Examples:
        >>> df = pl.DataFrame({"name": ["Alto"], "year": [2010], "selling_price": [120000]})
        >>> polars(df)[0].selling_price
        120000
    """
    return vehicles(df.iter_rows(named=True))


def require_data[T](data: Sequence[T]) -> Sequence[T]:
    """Returns the data unchanged, or raises `EmptyDatasetError` if it is empty.

    Examples:
        >>> require_data([1])
        [1]
    """
    if len(data) == 0:
        raise EmptyDatasetError("No data found in CSV")

    return data

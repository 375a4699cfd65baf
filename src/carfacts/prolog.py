"""
Exports the used-car dataset as a Prolog knowledge base.

Each accepted row becomes one fact:

    car(maruti_800_, 2005, 50000, 'petrol', 'manual').

The file ends with a comment line marking the end of the data. Rows without a usable
name, year or price are skipped without further notice.
"""

import csv as csvlib
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .helpers import get_logger, parse_int
from .typing import FilePath, RawRow

__all__ = [
    "END_MARKER",
    "CarFact",
    "ExportError",
    "export",
    "normalize_row",
    "write_facts",
]

logger = get_logger(__name__)

END_MARKER = " % --End of Data--"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_WHITESPACE = re.compile(r"\s")


class ExportError(Exception):
    """Raised when the input stream fails while facts are being written."""


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


@dataclass(slots=True, frozen=True)
class CarFact:
    name: str
    year: int
    price: int
    fuel: str
    transmission: str

    def to_prolog(self) -> str:
        """Formats the fact as one Prolog clause without trailing newline.

        Examples:
            >>> CarFact("maruti_800_", 2005, 50000, "petrol", "manual").to_prolog()
            "car(maruti_800_, 2005, 50000, 'petrol', 'manual')."
        """
        return (
            f"car({self.name}, {self.year}, {self.price}, "
            f"{_quote(self.fuel)}, {_quote(self.transmission)})."
        )


def _compact(value: str | None) -> str:
    if not value:
        return ""

    return _WHITESPACE.sub("", value.lower())


def normalize_row(row: RawRow) -> CarFact | None:
    """Normalizes a raw row into a fact, or returns `None` if the row is unusable.

    Examples:
        >>> normalize_row({"name": "Maruti 800!", "year": "2005", "selling_price": "50000", "fuel": "Petrol", "transmission": "Manual"})
        CarFact(name='maruti_800_', year=2005, price=50000, fuel='petrol', transmission='manual')
        >>> normalize_row({"name": "Maruti 800", "year": "2005", "selling_price": ""}) is None
        True
    """
    raw_name = row.get("name")

    if raw_name is None:
        return None

    name = _NON_ALNUM.sub("_", raw_name.lower())
    year = parse_int(row.get("year"))
    price = parse_int(row.get("selling_price"))

    if not (name and year and price):
        return None

    return CarFact(
        name=name,
        year=year,
        price=price,
        fuel=_compact(row.get("fuel")),
        transmission=_compact(row.get("transmission")),
    )


def write_facts(rows: Iterable[RawRow], fp: TextIO) -> int:
    """Writes one fact line per usable row followed by the end marker.

    Returns:
        The number of facts written.
    """
    written = 0

    for idx, row in enumerate(rows):
        fact = normalize_row(row)

        if fact is None:
            logger.debug(f"Skipping row {idx}")
            continue

        fp.write(fact.to_prolog() + "\n")
        written += 1

    fp.write(END_MARKER + "\n")

    return written


def export(input_path: FilePath, output_path: FilePath) -> int:
    """Converts a csv dataset into a Prolog fact file, overwriting any previous output.

    Args:
        input_path: File path of the csv dataset.
        output_path: File path of the generated `.pl` file. Missing parent directories are created.

    Returns:
        The number of facts written.

    Raises:
        OSError: If the input cannot be opened. The output is left untouched.
        ExportError: If reading fails midway. Facts written so far are kept, the end marker is not.
    """
    if isinstance(input_path, str):
        input_path = Path(input_path)

    if isinstance(output_path, str):
        output_path = Path(output_path)

    with input_path.open(newline="", encoding="utf-8-sig") as source:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with output_path.open("w", encoding="utf-8") as sink:
            try:
                written = write_facts(csvlib.DictReader(source), sink)
            except (OSError, csvlib.Error, UnicodeDecodeError) as e:
                logger.error(f"Failed to read {input_path}: {e}")
                raise ExportError(str(e)) from e

    logger.info(f"Wrote {written} facts to {output_path}")

    return written

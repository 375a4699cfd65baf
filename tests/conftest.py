"""Shared fixtures and helpers for carfacts tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from carfacts.model import Vehicle

HEADER = "name,year,selling_price,fuel,transmission"


@pytest.fixture(scope="session")
def dataset_path() -> Path:
    """Bundled sample dataset with 16 listings."""
    return Path(__file__).resolve().parents[1] / "data" / "car_details.csv"


@pytest.fixture(scope="session")
def vehicles() -> list[Vehicle]:
    """Eight listings with a price tie between index 2 and 5."""
    return [
        Vehicle(name="Maruti 800 AC", year=2007, selling_price=60000, fuel="Petrol", transmission="Manual"),
        Vehicle(name="Hyundai Verna 1.6 SX", year=2012, selling_price=600000, fuel="Diesel", transmission="Manual"),
        Vehicle(name="Datsun RediGO T Option", year=2017, selling_price=250000, fuel="Petrol", transmission="Manual"),
        Vehicle(name="Honda Amaze VX i-DTEC", year=2014, selling_price=450000, fuel="Diesel", transmission="Manual"),
        Vehicle(name="Maruti Celerio Green VXI", year=2017, selling_price=365000, fuel="CNG", transmission="Manual"),
        Vehicle(name="Tata Indigo Grand Petrol", year=2014, selling_price=250000, fuel="Petrol", transmission="Manual"),
        Vehicle(name="Toyota Corolla Altis 1.8 VL CVT", year=2018, selling_price=1650000, fuel="Petrol", transmission="Automatic"),
        Vehicle(name="Maruti Swift Dzire VDI", year=2009, selling_price=229999, fuel="Diesel", transmission="Manual"),
    ]  # fmt: skip


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Writes csv rows below the standard header and returns the file path."""

    def _write(*rows: str, name: str = "cars.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write

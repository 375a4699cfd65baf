import logging
import math
import re
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Literal

__all__ = [
    "get_logger",
    "optional_dependencies",
    "parse_int",
    "round_nearest",
]

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


@contextmanager
def optional_dependencies(
    error_handling: Literal["ignore", "warn", "raise"] = "ignore",
    extras_name: str | None = None,
) -> Generator[None, Any, None]:
    try:
        yield None
    except (ImportError, ModuleNotFoundError) as e:
        match error_handling:
            case "raise":
                if extras_name is not None:
                    print(f"Please install `carfacts[{extras_name}]`")

                raise e
            case "warn":
                print(f"Missing optional dependency: `{e.name}`")

                if extras_name is not None:
                    print(f"Please install `carfacts[{extras_name}]`")
            case "ignore":
                pass


def get_logger(obj: Any) -> logging.Logger:
    if isinstance(obj, str):
        return logging.getLogger(obj)

    if hasattr(obj, "__self__"):
        obj = obj.__self__

    if hasattr(obj, "__class__"):
        obj = obj.__class__

    name = obj.__module__

    if not name.endswith(obj.__qualname__):
        name += f".{obj.__qualname__}"

    return logging.getLogger(name)


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of a value, ignoring trailing garbage.

    Examples:
        >>> parse_int("2005")
        2005
        >>> parse_int(" 12.9 lakh")
        12
        >>> parse_int("abc") is None
        True
        >>> parse_int(None) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else int(value)

    match = _INT_PREFIX.match(str(value))

    if match is None:
        return None

    return int(match.group(1))


def round_nearest(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity.

    Examples:
        >>> round_nearest(2.5)
        3
        >>> round_nearest(-2.5)
        -2
        >>> round_nearest(55000.00000000001)
        55000
    """
    x = math.floor(value)

    if (value - x) < 0.50:
        return x

    return math.ceil(value)

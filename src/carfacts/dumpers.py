from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
import yaml as yamllib
from pydantic import BaseModel

from .typing import ConversionFunc, FilePath

__all__ = [
    "file",
    "json",
    "yaml",
]


def default_conversion_func(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    return obj


@dataclass(slots=True, frozen=True)
class yaml(ConversionFunc[Any, str]):
    """Writes an object to yaml."""

    conversion_func: ConversionFunc[Any, Any] = default_conversion_func

    def __call__(self, obj: Any) -> str:
        return yamllib.safe_dump(self.conversion_func(obj), sort_keys=False)


@dataclass(slots=True, frozen=True)
class json(ConversionFunc[Any, bytes]):
    """Writes an object to json bytes.

    Args:
        option: Serialization options, see orjson documentation.
            Multiple options can be combined using the bitwise OR operator `|`.

    Examples:
        >>> json()({"total": 3})
        b'{"total":3}'
    """

    option: int | None = None
    conversion_func: ConversionFunc[Any, Any] = default_conversion_func

    def __call__(self, obj: Any) -> bytes:
        return orjson.dumps(
            self.conversion_func(obj),
            option=self.option,
        )


Dumper = Callable[[Any], str | bytes]


dumpers: dict[str, Dumper] = {
    ".json": json(option=orjson.OPT_INDENT_2),
    ".yaml": yaml(),
    ".yml": yaml(),
}


def file(
    path: FilePath,
    data: Any,
    dumper: Dumper | None = None,
) -> None:
    """Writes arbitrary data to a file, choosing the format from its suffix.

    Args:
        path: Path of the output file.
        data: Data to write to the file.
        dumper: Function to use instead of the suffix-based default.

    Raises:
        ValueError: If no dumper is given and the suffix is not supported.
    """
    if isinstance(path, str):
        path = Path(path)

    if dumper is None and path.suffix not in dumpers:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    if dumper is None:
        dumper = dumpers[path.suffix]

    encoded_data = dumper(data)

    if isinstance(encoded_data, str):
        with open(path, "w") as f:
            f.write(encoded_data)

    elif isinstance(encoded_data, bytes):
        with open(path, "wb") as f:
            f.write(encoded_data)

    else:
        raise ValueError("Invalid dumper output type")

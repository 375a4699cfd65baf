from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

__all__ = [
    "ConversionFunc",
    "FilePath",
    "Predicate",
    "RawRow",
    "ReducerFunc",
    "Transform",
    "Unary",
]

type FilePath = str | Path
type RawRow = Mapping[str, str | None]
type Unary = Callable[[Any], Any]


class ConversionFunc[U, V](Protocol):
    """Converts a single value from type U to type V."""

    def __call__(
        self,
        batch: U,
        /,
    ) -> V: ...


class Predicate[V](Protocol):
    """Decides whether a single value satisfies a criterion."""

    def __call__(
        self,
        value: V,
        /,
    ) -> bool: ...


class Transform[V](Protocol):
    """Maps a sequence of values to a new sequence without mutating the input."""

    def __call__(
        self,
        values: Sequence[V],
        /,
    ) -> Sequence[V]: ...


class ReducerFunc[V, R](Protocol):
    """Folds a sequence of values into a single result."""

    def __call__(
        self,
        values: Sequence[V],
        /,
    ) -> R: ...

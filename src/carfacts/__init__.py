"""
Functional analysis of a used-car dataset and export of the listings as a Prolog knowledge base.

- `carfacts.loaders` reads the csv dataset into `carfacts.model.Vehicle` records.
- `carfacts.transforms` provides the composable filter, map, reduce and sort functions.
- `carfacts.report` prints the analysis report.
- `carfacts.prolog` writes the `car/5` fact base.
"""

import logging

from . import (
    constants,
    dumpers,
    helpers,
    loaders,
    model,
    prolog,
    report,
    transforms,
    typing,
)

__all__ = [
    "constants",
    "dumpers",
    "helpers",
    "loaders",
    "model",
    "prolog",
    "report",
    "transforms",
    "typing",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

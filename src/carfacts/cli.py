"""
Command line interface for analysing the used-car dataset and exporting it as Prolog facts.

    python -m carfacts analyze                      # report for the bundled dataset
    python -m carfacts analyze data.csv --output-path report.json
    python -m carfacts export                       # write prolog/car_knowledge_base.pl
    python -m carfacts --log-level INFO export data.csv facts.pl
"""

import logging
from pathlib import Path
from typing import Annotated

from rich import print
from rich.markup import escape

import carfacts
from carfacts import constants

with carfacts.helpers.optional_dependencies("raise", "cli"):
    import typer


__all__ = ["app"]

logger = carfacts.helpers.get_logger(__name__)

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def app_callback(
    log_level: Annotated[
        str, typer.Option(help="Logging level, e.g. DEBUG, INFO or WARNING.")
    ] = "WARNING",
):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    csv_path: Annotated[Path, typer.Argument()] = constants.CSV_PATH,
    output_path: Path | None = None,
) -> None:
    """Print the functional analysis report for a csv dataset."""
    try:
        report = carfacts.report.run(csv_path)
    except carfacts.loaders.EmptyDatasetError:
        logger.error(f"No usable rows in {csv_path}")
        print("Error: No data found in CSV!")
        raise typer.Exit(code=1)
    except (OSError, carfacts.loaders.DatasetReadError) as e:
        logger.error(f"Failed to read {csv_path}: {e}")
        print(f"File Read Error: {escape(str(e))}")
        raise typer.Exit(code=1)

    if output_path:
        carfacts.dumpers.file(output_path, report)
        print(f"Report written to: {escape(str(output_path))}")


@app.command()
def export(
    csv_path: Annotated[Path, typer.Argument()] = constants.CSV_PATH,
    prolog_path: Annotated[Path, typer.Argument()] = constants.PROLOG_PATH,
) -> None:
    """Write the csv dataset as a Prolog fact base."""
    print("Starting to write Prolog file...")

    try:
        written = carfacts.prolog.export(csv_path, prolog_path)
    except (OSError, carfacts.prolog.ExportError) as e:
        print(f"Error: {escape(str(e))}")
        raise typer.Exit(code=1)

    print(f"{written} facts written to: {escape(str(prolog_path))}")


if __name__ == "__main__":
    app()

from io import StringIO

import pytest

import carfacts
from carfacts.prolog import END_MARKER, CarFact, ExportError, normalize_row


def test_normalize_row():
    fact = normalize_row(
        {
            "name": "Maruti 800!",
            "year": "2005",
            "selling_price": "50000",
            "fuel": "Petrol",
            "transmission": "Manual",
        }
    )

    assert fact == CarFact("maruti_800_", 2005, 50000, "petrol", "manual")
    assert fact.to_prolog() == "car(maruti_800_, 2005, 50000, 'petrol', 'manual')."


@pytest.mark.parametrize(
    "row",
    [
        {"name": "Maruti 800", "year": "2005", "selling_price": ""},
        {"name": "Maruti 800", "year": "2005", "selling_price": "n/a"},
        {"name": "Maruti 800", "year": "2005", "selling_price": "0"},
        {"name": "Maruti 800", "year": "", "selling_price": "50000"},
        {"name": "", "year": "2005", "selling_price": "50000"},
        {"year": "2005", "selling_price": "50000"},
    ],
)
def test_normalize_row_rejects(row):
    assert normalize_row(row) is None


def test_normalize_row_compacts_fuel_and_transmission():
    fact = normalize_row(
        {
            "name": "Tata Nexon EV",
            "year": "2021",
            "selling_price": "1400000",
            "fuel": " Electric ",
            "transmission": "Semi Automatic",
        }
    )

    assert fact is not None
    assert fact.fuel == "electric"
    assert fact.transmission == "semiautomatic"


def test_normalize_row_defaults_missing_fields():
    fact = normalize_row({"name": "Alto", "year": "2010", "selling_price": "120000"})

    assert fact is not None
    assert fact.to_prolog() == "car(alto, 2010, 120000, '', '')."


def test_quotes_are_escaped():
    fact = CarFact("x", 2010, 1, "o'gas", "manual")

    assert fact.to_prolog() == "car(x, 2010, 1, 'o''gas', 'manual')."


def test_write_facts_skips_bad_rows():
    sink = StringIO()
    rows = [
        {"name": "Alto", "year": "2010", "selling_price": "120000", "fuel": "Petrol", "transmission": "Manual"},
        {"name": "Broken", "year": "2010", "selling_price": "", "fuel": "Petrol", "transmission": "Manual"},
        {"name": "Verna", "year": "2012", "selling_price": "600000", "fuel": "Diesel", "transmission": "Manual"},
    ]  # fmt: skip

    written = carfacts.prolog.write_facts(rows, sink)

    assert written == 2
    assert sink.getvalue().splitlines() == [
        "car(alto, 2010, 120000, 'petrol', 'manual').",
        "car(verna, 2012, 600000, 'diesel', 'manual').",
        END_MARKER,
    ]


def test_export_dataset(dataset_path, tmp_path):
    output = tmp_path / "prolog" / "car_knowledge_base.pl"

    written = carfacts.prolog.export(dataset_path, output)
    lines = output.read_text().splitlines()

    assert written == 16
    assert len(lines) == 17
    assert lines[0] == "car(maruti_800_ac, 2007, 60000, 'petrol', 'manual')."
    assert (
        lines[15]
        == "car(toyota_innova_2_5_g__diesel__7_seater, 2007, 200000, 'diesel', 'manual')."
    )
    assert lines[-1] == END_MARKER


def test_export_overwrites_previous_output(write_csv, tmp_path):
    output = tmp_path / "facts.pl"
    output.write_text("stale(fact).\n" * 10)

    carfacts.prolog.export(write_csv("Alto,2010,120000,Petrol,Manual"), output)

    assert output.read_text() == (
        "car(alto, 2010, 120000, 'petrol', 'manual').\n" + END_MARKER + "\n"
    )


def test_export_continues_after_bad_row(write_csv, tmp_path):
    output = tmp_path / "facts.pl"
    path = write_csv(
        "Alto,2010,,Petrol,Manual",
        "Verna,2012,600000,Diesel,Manual",
    )

    assert carfacts.prolog.export(path, output) == 1
    assert output.read_text().splitlines()[0].startswith("car(verna, 2012")


def test_export_header_only(write_csv, tmp_path):
    output = tmp_path / "facts.pl"

    assert carfacts.prolog.export(write_csv(), output) == 0
    assert output.read_text() == END_MARKER + "\n"


def test_export_missing_input_keeps_output(tmp_path):
    output = tmp_path / "facts.pl"

    with pytest.raises(FileNotFoundError):
        carfacts.prolog.export(tmp_path / "missing.csv", output)

    assert not output.exists()


def test_export_stream_error_keeps_written_facts(write_csv, tmp_path):
    output = tmp_path / "facts.pl"
    path = write_csv(
        "Alto,2010,120000,Petrol,Manual",
        "Verna,2012,600000,Diesel,Manual",
        "x" * 200_000 + ",2013,1,Petrol,Manual",
    )

    with pytest.raises(ExportError):
        carfacts.prolog.export(path, output)

    lines = output.read_text().splitlines()

    assert lines == [
        "car(alto, 2010, 120000, 'petrol', 'manual').",
        "car(verna, 2012, 600000, 'diesel', 'manual').",
    ]

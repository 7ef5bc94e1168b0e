"""Unit tests for reading and parsing the population CSV."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
import requests

from population_monde import loader
from population_monde.loader import load_population, parse_population_text, read_source

pytestmark = pytest.mark.unit


def test_parse_keeps_only_rows_with_numeric_year_and_population(records) -> None:
    """Rows with a non-numeric year or population are dropped, order is preserved."""

    assert records["zone"].tolist() == ["Europe", "Europe", "Asie", "Mars"]
    assert records["year"].tolist() == [2010, 2000, 2000, 2020]
    assert records["population"].tolist() == [736.4, 726.4, 3741.3, 5.0]
    assert records.index.tolist() == [0, 1, 2, 3]


def test_parse_column_types() -> None:
    """Year is an integer column and population a float column."""

    df = parse_population_text("h\nEurope,2000,700\n")

    assert str(df["year"].dtype) == "int64"
    assert str(df["population"].dtype) == "float64"
    assert df.loc[0, "population"] == 700.0


def test_parse_trims_zone_and_ignores_header() -> None:
    """The header line is never parsed and zone names lose surrounding spaces."""

    df = parse_population_text("Europe,1999,1\n  Océanie ,2010, 40.5\r\n")

    assert df["zone"].tolist() == ["Océanie"]
    assert df["year"].tolist() == [2010]
    assert df["population"].tolist() == [40.5]


def test_parse_truncates_decimal_years() -> None:
    """A decimal year keeps its integer part."""

    df = parse_population_text("h\nEurope,2000.7,1.5\n")

    assert df["year"].tolist() == [2000]


@pytest.mark.parametrize(
    "line",
    ["Europe,2000", "Europe", "Europe,,1.0", "Europe,2000,", "Europe,2000,inf", "Europe,2000,nan"],
)
def test_parse_drops_incomplete_or_non_finite_rows(line: str) -> None:
    """Missing fields and non-finite populations are treated as parse failures."""

    df = parse_population_text(f"h\n{line}\n")

    assert df.empty


def test_parse_drops_years_outside_int64_range() -> None:
    """Years too large for an int64 are dropped instead of wrapping to a wrong value."""

    df = parse_population_text("h\nEurope,99999999999999999999,1.0\nEurope,1e30,2.0\nEurope,-1e19,3.0\nAsie,2000,4.0\n")

    assert df["zone"].tolist() == ["Asie"]
    assert df["year"].tolist() == [2000]


def test_parse_ignores_extra_fields() -> None:
    """Only the first three fields of a line are read."""

    df = parse_population_text("h\nEurope,2000,700.5,extra,fields\n")

    assert df[["zone", "year", "population"]].values.tolist() == [["Europe", 2000, 700.5]]


def test_parse_header_only_returns_empty_frame() -> None:
    """A file with only a header yields no records but keeps the columns."""

    df = parse_population_text("Zone géographique,Année,Population\n")

    assert df.empty
    assert list(df.columns) == ["zone", "year", "population"]


def test_load_population_reads_local_file(sample_csv: Path) -> None:
    """Loading a path reads and parses the file."""

    df = load_population(sample_csv)

    assert len(df) == 4


def test_load_population_rereads_on_every_call(sample_csv: Path) -> None:
    """No cache: a changed file is visible on the next call."""

    first = load_population(sample_csv)
    sample_csv.write_text("h\nEurope,2000,1.0\n", encoding="utf-8")
    second = load_population(sample_csv)

    assert len(first) == 4
    assert len(second) == 1


def test_read_source_decodes_uploaded_bytes() -> None:
    """Uploaded file-like objects are read and decoded as UTF-8."""

    upload = io.BytesIO("h\nOcéanie,2000,31.4\n".encode("utf-8"))

    assert read_source(upload) == "h\nOcéanie,2000,31.4\n"


def test_read_source_missing_file_propagates(tmp_path: Path) -> None:
    """A missing local file raises instead of returning empty data."""

    with pytest.raises(FileNotFoundError):
        read_source(tmp_path / "absent.csv")


def test_read_source_fetches_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    """http(s) sources are fetched with requests."""

    calls = []

    class StubResponse:
        """Minimal requests.Response."""

        encoding = "utf-8"
        text = "h\nEurope,2000,1\n"

        def raise_for_status(self) -> None:
            return None

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return StubResponse()

    monkeypatch.setattr(loader.requests, "get", fake_get)

    df = load_population("https://example.org/population_monde.csv")

    assert calls == [("https://example.org/population_monde.csv", loader.FETCH_TIMEOUT)]
    assert df["zone"].tolist() == ["Europe"]


def test_read_source_http_error_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    """An HTTP error status is raised to the caller, without retry."""

    class NotFound:
        """Response that fails raise_for_status."""

        encoding = "utf-8"
        text = ""

        def raise_for_status(self) -> None:
            raise requests.HTTPError("404 Client Error")

    attempts = []

    def fake_get(url, timeout):
        attempts.append(url)
        return NotFound()

    monkeypatch.setattr(loader.requests, "get", fake_get)

    with pytest.raises(requests.HTTPError):
        read_source("http://example.org/missing.csv")
    assert len(attempts) == 1

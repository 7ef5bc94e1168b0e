"""Pytest fixtures shared across the population dashboard tests."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from population_monde.config import get_labels
from population_monde.loader import parse_population_text


SAMPLE_TEXT = "\n".join(
    [
        "Zone géographique,Année,Population",
        "Europe,2010,736.4",
        "Europe,2000,726.4",
        "Asie,2000,3741.3",
        "Mars,2020,5.0",
        "Asie,abc,12",
        "Afrique,1990,not-a-number",
        "",
    ]
)


@pytest.fixture
def sample_text() -> str:
    """Return raw CSV text with two malformed rows and one unknown zone."""

    return SAMPLE_TEXT


@pytest.fixture
def records(sample_text: str) -> pd.DataFrame:
    """Return the parsed records of ``sample_text``."""

    return parse_population_text(sample_text)


@pytest.fixture
def sample_csv(tmp_path: Path, sample_text: str) -> Path:
    """Write ``sample_text`` to a temporary CSV file and return its path."""

    path = tmp_path / "population_monde.csv"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def labels_fr() -> dict:
    """Return the French interface labels."""

    return get_labels("fr")

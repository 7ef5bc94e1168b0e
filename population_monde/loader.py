# -*- coding: utf-8 -*-
"""
Loading the population CSV
==========================

The source file has one header line (ignored) then comma-separated
``zone,year,population`` lines, without quoting.

- The zone is stripped of surrounding spaces.
- The year is read as an integer, the population as a float.
- Any line whose year or population does not parse is dropped
  (only counted on the debug log).

No cache: every call reads the source again.
"""

from __future__ import annotations
from pathlib import Path

import numpy as np
import pandas as pd
import requests
from structlog import get_logger

from population_monde.config import DEFAULT_DATA_PATH, FETCH_TIMEOUT, FIELD_DELIMITER

log = get_logger()

COLUMNS = ["zone", "year", "population"]


def read_source(source) -> str:
    """Return the full text of a local path, an http(s) URL or an uploaded file-like object.

    Errors (missing file, HTTP status) are not caught here.
    """
    if hasattr(source, "read"):  # uploaded file-like
        content = source.read()
        return content.decode("utf-8") if isinstance(content, bytes) else content

    if isinstance(source, str) and source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=FETCH_TIMEOUT)
        r.raise_for_status()
        r.encoding = r.encoding or "utf-8"
        return r.text

    return Path(source).read_text(encoding="utf-8")


def split_rows(text: str) -> list[list[str]]:
    # Header skipped; missing fields padded with "" so they fail to parse later.
    rows = []
    for line in text.splitlines()[1:]:
        if not line.strip():
            continue
        parts = line.split(FIELD_DELIMITER)
        parts += [""] * (len(COLUMNS) - len(parts))
        rows.append(parts[: len(COLUMNS)])
    return rows


def parse_population_text(text: str) -> pd.DataFrame:
    """
    Parse the raw CSV text into records.

    Returns a DataFrame with columns ``zone`` (str), ``year`` (int) and
    ``population`` (float), in source line order.
    """
    raw = pd.DataFrame(split_rows(text), columns=COLUMNS, dtype=str)

    zone = raw["zone"].str.strip()
    year = pd.to_numeric(raw["year"].str.strip(), errors="coerce")
    population = pd.to_numeric(raw["population"].str.strip(), errors="coerce")

    year = year.astype(float)
    population = population.astype(float)

    # Years must survive the int64 cast unchanged.
    keep = (
        year.notna() & np.isfinite(year) & (year.abs() < 2**63)
        & population.notna() & np.isfinite(population)
    )
    dropped = int((~keep).sum())
    if dropped:
        log.debug(f"Dropped {dropped} malformed row(s) (non-numeric or out-of-range year, non-numeric population)")

    # Decimal years are truncated toward zero, like an integer prefix parse.
    out = pd.DataFrame({
        "zone": zone[keep].astype(str),
        "year": np.trunc(year[keep]).astype("int64"),
        "population": population[keep].astype("float64"),
    }).reset_index(drop=True)
    return out


def load_population(source=DEFAULT_DATA_PATH) -> pd.DataFrame:
    """Read ``source`` and parse it; see :func:`parse_population_text`."""
    df = parse_population_text(read_source(source))
    log.debug(f"Loaded {len(df):,} population records from {getattr(source, 'name', source)}")
    return df

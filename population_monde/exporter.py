# -*- coding: utf-8 -*-
"""
Export of the filtered records
==============================

Output format: fixed header ``Zone géographique,Année,Population`` then one
``zone,year,population`` line per record, joined by ``\\n``.
No escaping: a zone containing a comma produces a line with an extra field.
"""

from __future__ import annotations
from pathlib import Path

import pandas as pd

from population_monde.config import EXPORT_HEADER, FIELD_DELIMITER


def filter_records(records: pd.DataFrame, zone: str | None = None) -> pd.DataFrame:
    if not zone:
        return records
    return records[records["zone"] == zone]


def format_population(value: float) -> str:
    # 701.0 -> "701", 700.5 -> "700.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def to_csv_text(records: pd.DataFrame) -> str:
    lines = [
        FIELD_DELIMITER.join([str(z), str(int(y)), format_population(p)])
        for z, y, p in records[["zone", "year", "population"]].itertuples(index=False)
    ]
    return EXPORT_HEADER + "\n" + "\n".join(lines)


def export_filtered(records: pd.DataFrame, zone: str | None = None) -> bytes:
    """CSV bytes (UTF-8) of the records of ``zone``, or of every record when ``zone`` is None."""
    return to_csv_text(filter_records(records, zone)).encode("utf-8")


def write_export(records: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_csv_text(records), encoding="utf-8")
    return path

# -*- coding: utf-8 -*-
"""
Chart series preparation
========================

From the (zone, year, population) records:

1. optional filter on one zone;
2. year axis = distinct years, sorted (after filtering);
3. one series per zone, aligned on that axis, 0.0 where the (zone, year) pair is missing;
4. one random color per series, drawn on every call.

When a (zone, year) pair repeats, the first record wins.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field

import pandas as pd

from population_monde.zones import distinct_zones


@dataclass
class Series:
    label: str
    points: list[float]
    color: str = "rgba(0, 0, 0, 1)"


@dataclass
class ChartData:
    years: list[int]
    series: list[Series] = field(default_factory=list)

    def to_long(self) -> pd.DataFrame:
        rows = [
            {"zone": s.label, "year": year, "population": value, "color": s.color}
            for s in self.series
            for year, value in zip(self.years, s.points)
        ]
        return pd.DataFrame(rows, columns=["zone", "year", "population", "color"])


def random_color(rng=None) -> str:
    rng = rng or random
    r, g, b = (rng.randint(0, 255) for _ in range(3))
    return f"rgba({r}, {g}, {b}, 1)"


def prepare_chart_data(records: pd.DataFrame, zone: str | None = None, rng=None) -> ChartData:
    filtered = records[records["zone"] == zone] if zone else records

    years = sorted(int(y) for y in filtered["year"].unique())
    zones = [zone] if zone else distinct_zones(filtered)

    # keep="first" -> first record of a (zone, year) pair wins
    first = filtered.drop_duplicates(subset=["zone", "year"], keep="first")
    lookup = {(z, int(y)): float(p) for z, y, p in first[["zone", "year", "population"]].itertuples(index=False)}

    series = [
        Series(
            label=z,
            points=[lookup.get((z, y), 0.0) for y in years],
            color=random_color(rng),
        )
        for z in zones
    ]
    return ChartData(years=years, series=series)

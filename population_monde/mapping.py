# -*- coding: utf-8 -*-
"""
Zone map
========

One marker per known zone (see ``ZONE_COORDINATES``) on an OpenStreetMap tile
layer. A marker's hover text lists every (year, population) line of the zone,
in source file order.

Zones missing from the table are skipped without error.
"""

from __future__ import annotations
from dataclasses import dataclass, field

import pandas as pd
import plotly.graph_objects as go
from structlog import get_logger

from population_monde.config import CORP, ZONE_COORDINATES

log = get_logger()


@dataclass
class ZonePopup:
    zone: str
    lat: float
    lon: float
    entries: list[tuple[int, float]] = field(default_factory=list)

    def render(self, labels: dict) -> str:
        lines = [f"<b>{self.zone}</b>"]
        lines += [
            f"{labels['year']} {year} : {population:,} {labels['unit']}"
            for year, population in self.entries
        ]
        return "<br>".join(lines)


def collect_popups(records: pd.DataFrame, coordinates: dict = ZONE_COORDINATES) -> dict[str, ZonePopup]:
    popups: dict[str, ZonePopup] = {}
    skipped = set()
    for zone, year, population in records[["zone", "year", "population"]].itertuples(index=False):
        coords = coordinates.get(zone)
        if coords is None:
            skipped.add(zone)
            continue
        if zone not in popups:
            popups[zone] = ZonePopup(zone=zone, lat=coords[0], lon=coords[1])
        popups[zone].entries.append((int(year), float(population)))
    if skipped:
        log.debug(f"No coordinates for zone(s) {sorted(skipped)}; no marker drawn")
    return popups


def build_marker_map(popups: dict[str, ZonePopup], labels: dict) -> go.Figure:
    markers = list(popups.values())
    fig = go.Figure(
        go.Scattermap(
            lat=[p.lat for p in markers],
            lon=[p.lon for p in markers],
            mode="markers",
            marker=dict(size=14, color=CORP["accent"]),
            text=[p.render(labels) for p in markers],
            hovertemplate="%{text}<extra></extra>",
            name=labels["zone"],
        )
    )
    fig.update_layout(
        map=dict(style="open-street-map", center=dict(lat=20, lon=0), zoom=0.6),
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor=CORP["bg"],
        font_color=CORP["text"],
        height=520,
    )
    return fig

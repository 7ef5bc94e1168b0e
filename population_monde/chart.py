# -*- coding: utf-8 -*-
"""
Line chart (Altair)
===================

One line per zone, zero-based Y axis, legend on top and a tooltip reading
"Population: <value> millions". Line colors come from the series.
"""

from __future__ import annotations

import altair as alt

from population_monde.config import CORP
from population_monde.series import ChartData


@alt.theme.register("corp", enable=False)
def corp_altair_theme():
    return {
        "config": {
            "view": {"stroke": "transparent"},
            "axis": {"labelColor": CORP["text"], "titleColor": CORP["text"]},
            "legend": {"labelColor": CORP["text"], "titleColor": CORP["text"], "labelFontSize": 14},
            "title": {"color": CORP["text"]},
            "mark": {"strokeWidth": 2},
        }
    }


def enable_corp_theme() -> None:
    alt.theme.enable("corp")


def format_number(value: float) -> str:
    # Thousands separators, at most 3 decimals, never an exponent.
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def tooltip_text(value: float, labels: dict) -> str:
    """Tooltip value with its unit; the field title supplies the "Population" prefix."""
    return f"{format_number(value)} {labels['unit']}"


def build_line_chart(chart_data: ChartData, labels: dict) -> alt.Chart:
    long = chart_data.to_long()
    long["tooltip"] = [tooltip_text(v, labels) for v in long["population"]]

    domain = [s.label for s in chart_data.series]
    colors = [s.color for s in chart_data.series]

    return (
        alt.Chart(long)
           .mark_line(point=True, interpolate="monotone")
           .encode(
               x=alt.X("year:O", title=labels["year"]),
               y=alt.Y("population:Q", title=labels["y_axis"], scale=alt.Scale(zero=True)),
               color=alt.Color(
                   "zone:N",
                   scale=alt.Scale(domain=domain, range=colors),
                   legend=alt.Legend(title=labels["zone"], orient="top"),
               ),
               tooltip=[
                   alt.Tooltip("zone:N", title=labels["zone"]),
                   alt.Tooltip("year:O", title=labels["year"]),
                   alt.Tooltip("tooltip:N", title=labels["population"]),
               ],
           )
           .properties(height=520)
    )

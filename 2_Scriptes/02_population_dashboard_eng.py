#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Streamlit Dashboard — World Population (EN)
===========================================

Purpose
-------
Explore ``1_Donnees/population_monde.csv`` (zone, year, population in millions):
- **Trends**: one line per geographic zone over the year axis, or a single zone via the filter.
- **Map**: one marker per known zone; hovering lists every year and population of that zone.
- **Export**: the sidebar button downloads the filtered rows as ``population_data.csv``.

How to adapt
------------
- Drop another file in 1_Donnees/ with the same ``zone,year,population`` layout.
- Add coordinates for new zones to ``ZONE_COORDINATES`` (population_monde/config.py);
  zones without coordinates still appear on the chart but get no map marker.

Run (PowerShell)
----------------
py -m streamlit run .\\2_Scriptes\\02_population_dashboard_eng.py
"""

from __future__ import annotations

from population_monde.dashboard import render_dashboard

render_dashboard("en")

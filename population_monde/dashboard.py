# -*- coding: utf-8 -*-
"""
Streamlit dashboard — World population
======================================

One page, two tabs:
  1) Trends — one line per zone (or only the selected zone) over the year axis.
  2) Map — one marker per known zone, hover text listing year / population.

Sidebar: zone dropdown (with an "all zones" entry) and a download button for
``population_data.csv``.

Streamlit reruns the script on every interaction: the data is read again, the
series rebuilt, and the chart and map of the previous run are replaced by the
ones drawn in this run. Nothing is cached or kept between runs.
"""

from __future__ import annotations
from pathlib import Path

import streamlit as st

from population_monde.chart import build_line_chart, enable_corp_theme
from population_monde.config import CORP, DEFAULT_DATA_PATH, EXPORT_FILENAME, EXPORT_MIME, get_labels
from population_monde.exporter import export_filtered, filter_records
from population_monde.loader import load_population
from population_monde.mapping import build_marker_map, collect_popups
from population_monde.series import prepare_chart_data
from population_monde.zones import zone_label, zone_options

# A tiny CSS injection to align Streamlit widgets with the house style.
CSS = f"""
<style>
.stApp {{ background-color: {CORP["bg"]}; color: {CORP["text"]}; }}
section[data-testid="stSidebar"] > div:first-child {{ background-color: {CORP["panel"]} !important; }}
.stButton button, .stDownloadButton button {{ background-color: {CORP["accent"]} !important; color: white !important; border: 0 !important; border-radius: 10px !important; }}
.stButton button:hover, .stDownloadButton button:hover {{ filter: brightness(0.95); }}
.stTabs [role="tablist"] button[role="tab"] {{ color: {CORP["text"]}; }}
.stTabs [role="tablist"] button[aria-selected="true"] {{ border-bottom: 3px solid {CORP["accent"]}; }}
label, .stSelectbox label {{ color: {CORP["text"]} !important; }}
</style>
"""


def resolve_source(source, labels: dict):
    """Default file if present, otherwise ask for an upload (stops the page until one is given)."""
    if source is not None:
        return source
    path = Path(DEFAULT_DATA_PATH)
    if path.exists():
        return path
    st.warning(labels["missing_file"].format(path=path))
    uploaded = st.file_uploader(labels["upload"], type=["csv"])
    if uploaded is None: st.stop()
    return uploaded


def render_dashboard(lang: str = "fr", source=None) -> None:
    labels = get_labels(lang)

    st.set_page_config(page_title=labels["page_title"], layout="wide")
    st.title(labels["title"])
    st.markdown(CSS, unsafe_allow_html=True)
    enable_corp_theme()

    source = resolve_source(source, labels)

    # Fresh read on every rerun; an upload has to be rewound first.
    if hasattr(source, "seek"): source.seek(0)
    records = load_population(source)
    if records.empty:
        st.info(labels["no_data"]); st.stop()

    # --- Sidebar: filter + export ------------------------------------------------------------------
    with st.sidebar:
        st.header(labels["sidebar_filter"])
        zone = st.selectbox(
            labels["zone"],
            options=zone_options(records),
            format_func=lambda z: zone_label(z, labels),
            index=0,
        )
        st.download_button(
            labels["download"],
            data=export_filtered(records, zone),
            file_name=EXPORT_FILENAME,
            mime=EXPORT_MIME,
        )

    tab_chart, tab_map = st.tabs([labels["tab_chart"], labels["tab_map"]])

    # =========================
    # Trends
    # =========================
    with tab_chart:
        chart_data = prepare_chart_data(records, zone)
        if not chart_data.years:
            st.info(labels["no_data"])
        else:
            st.subheader(zone_label(zone, labels))
            st.altair_chart(build_line_chart(chart_data, labels), use_container_width=True)
            st.write(labels["table"])
            st.dataframe(filter_records(records, zone), use_container_width=True, hide_index=True)

    # =========================
    # Map (unfiltered zones)
    # =========================
    with tab_map:
        st.caption(labels["map_caption"])
        popups = collect_popups(records)
        st.plotly_chart(build_marker_map(popups, labels), use_container_width=True)

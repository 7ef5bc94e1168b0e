# -*- coding: utf-8 -*-
"""
Constants shared by the dashboard and the scripts
=================================================

Paths, export file name and header, house palette, FR/EN labels and the
zone coordinate table. For another topic this is the only file to edit.
"""

from __future__ import annotations
from pathlib import Path

# --- Files ---------------------------------------------------------------------------------------
# The source CSV lives in 1_Donnees/ at the repository root.
DATA_DIR = Path(__file__).resolve().parent.parent / "1_Donnees"
DATA_FILENAME = "population_monde.csv"
DEFAULT_DATA_PATH = DATA_DIR / DATA_FILENAME

EXPORT_FILENAME = "population_data.csv"
EXPORT_HEADER = "Zone géographique,Année,Population"
EXPORT_MIME = "text/csv"

FIELD_DELIMITER = ","
FETCH_TIMEOUT = 60

# --- House palette (backgrounds, text, accent) ------------------------------------------------------
CORP = {
    "bg":      "#f5f0e6",
    "panel":   "#e7dfcf",
    "text":    "#2e2b26",
    "accent":  "#6b8e23",
}

# --- Approximate zone centroids (lat, lon) --------------------------------------------------------
# Zones missing from this table get no map marker.
ZONE_COORDINATES = {
    "Afrique":          (1.65, 17.68),
    "Asie":             (34.05, 100.62),
    "Europe":           (54.53, 15.26),
    "Amérique du Nord": (45.00, -100.00),
    "Amérique latine":  (-8.78, -55.49),
    "Océanie":          (-22.74, 140.02),
}

# --- Interface labels -----------------------------------------------------------------------------
LABELS = {
    "fr": {
        "page_title": "Population mondiale",
        "title": "Population mondiale par zone géographique",
        "all_zones": "Toutes les zones",
        "zone": "Zone géographique",
        "year": "Année",
        "population": "Population",
        "y_axis": "Population (en millions)",
        "unit": "millions",
        "tab_chart": "Courbes",
        "tab_map": "Carte",
        "sidebar_filter": "Filtre",
        "download": "Télécharger les données",
        "table": "Données affichées :",
        "no_data": "Aucune donnée pour cette sélection.",
        "missing_file": "CSV introuvable :\n{path}\nTéléversez-le ci-dessous.",
        "upload": "Téléverser le CSV de population",
        "map_caption": "Survolez un marqueur pour voir l'historique de la zone.",
    },
    "en": {
        "page_title": "World population",
        "title": "World population by geographic zone",
        "all_zones": "All zones",
        "zone": "Geographic zone",
        "year": "Year",
        "population": "Population",
        "y_axis": "Population (millions)",
        "unit": "millions",
        "tab_chart": "Trends",
        "tab_map": "Map",
        "sidebar_filter": "Filter",
        "download": "Download data",
        "table": "Data behind the chart:",
        "no_data": "No data for this selection.",
        "missing_file": "CSV not found at:\n{path}\nUpload it below.",
        "upload": "Upload the population CSV",
        "map_caption": "Hover a marker to see the zone's history.",
    },
}


def get_labels(lang: str) -> dict:
    return LABELS.get(lang, LABELS["fr"])

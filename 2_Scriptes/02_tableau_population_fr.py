#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tableau de bord Streamlit — Population mondiale (FR)
====================================================

Objectif
--------
Visualiser le fichier ``1_Donnees/population_monde.csv`` (zone, année, population en millions) :
- **Courbes** : une courbe par zone géographique sur l'axe des années, ou une seule zone via le filtre.
- **Carte** : un marqueur par zone connue ; l'infobulle liste toutes ses années et populations.
- **Export** : le bouton de la barre latérale télécharge les lignes filtrées dans ``population_data.csv``.

Comment adapter
---------------
- Remplacez le fichier dans 1_Donnees/ (même format : ``zone,année,population``).
- Ajoutez les coordonnées des nouvelles zones dans ``ZONE_COORDINATES`` (population_monde/config.py),
  sinon elles n'apparaissent pas sur la carte (elles restent sur le graphique).
- Les libellés, la palette et l'en-tête d'export sont aussi dans config.py.

Exécution (PowerShell)
----------------------
py -m streamlit run .\\2_Scriptes\\02_tableau_population_fr.py
"""

from __future__ import annotations

from population_monde.dashboard import render_dashboard

render_dashboard("fr")

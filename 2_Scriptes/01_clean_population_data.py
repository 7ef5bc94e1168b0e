#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Nettoyage du CSV de population mondiale
=======================================


But du script
-------------
Relire un CSV ``zone,année,population`` (une ligne d'en-tête, virgules, sans guillemets)
et réécrire uniquement les lignes exploitables, au format d'export du tableau de bord :
``Zone géographique,Année,Population``.


Règles
------
- La zone est nettoyée de ses espaces en début et fin.
- L'année doit se lire comme un nombre (une année décimale est tronquée).
- La population doit se lire comme un nombre fini.
- Les autres lignes sont écartées ; leur nombre est affiché à la fin.


Paramètres CLI
--------------
--input : Chemin du CSV brut (par défaut 1_Donnees/population_monde.csv)
--output : Chemin du CSV nettoyé (par défaut, <input>_clean.csv dans le dossier de l'input)


Exécution (PowerShell)
----------------------
py .\\2_Scriptes\\01_clean_population_data.py --input .\\1_Donnees\\population_monde.csv
"""


from __future__ import annotations
import argparse, sys
from pathlib import Path

from population_monde.config import DEFAULT_DATA_PATH
from population_monde.exporter import write_export
from population_monde.loader import load_population, split_rows


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default=str(DEFAULT_DATA_PATH), help="Chemin du CSV brut")
    ap.add_argument("--output", default="", help="Chemin du CSV nettoyé. Défaut : <input>_clean.csv")
    args = ap.parse_args()

    inp = Path(args.input)
    if not inp.exists():
        sys.exit(f"Input not found: {inp}")
    outp = Path(args.output) if args.output else (inp.parent / (inp.stem + "_clean.csv"))

    # Nombre de lignes non vides avant nettoyage, pour le bilan.
    n_raw = len(split_rows(inp.read_text(encoding="utf-8")))
    df = load_population(inp)

    write_export(df, outp)
    print(f"Wrote {len(df):,} rows to: {outp}")
    print(f"Dropped {n_raw - len(df):,} malformed row(s)")
    print("Zones:", df["zone"].drop_duplicates().tolist())


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Export the population rows of one zone (or all zones) to CSV
============================================================

Usage (PowerShell):
-------------------
py .\\2_Scriptes\\01b_filter_zone.py --input ".\\1_Donnees\\population_monde.csv" --zone "Europe"

What it expects:
----------------
A population CSV with a header line then ``zone,year,population`` rows.
Rows whose year or population is not a number are ignored.

What it does:
-------------
- Keeps only rows whose zone equals --zone (all rows when --zone is omitted).
- Writes them with the dashboard's export header ``Zone géographique,Année,Population``.
- Default output is ``population_data.csv`` next to the input, the same name the
  dashboard's download button uses.

Zone names are matched exactly (after trimming spaces in the source file).
"""

from __future__ import annotations
import argparse, sys
from pathlib import Path

from population_monde.config import DEFAULT_DATA_PATH, EXPORT_FILENAME
from population_monde.exporter import filter_records, write_export
from population_monde.loader import load_population

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default=str(DEFAULT_DATA_PATH), help="Path to the population CSV")
    ap.add_argument("--zone", default="", help="Zone to keep (default: all zones)")
    ap.add_argument("--output", default="", help=f"Path to write the CSV (default: {EXPORT_FILENAME} next to input)")
    args = ap.parse_args()

    inp = Path(args.input)
    if not inp.exists():
        sys.exit(f"Input not found: {inp}")

    outp = Path(args.output) if args.output else (inp.parent / EXPORT_FILENAME)

    df = load_population(inp)
    out = filter_records(df, args.zone or None)

    if args.zone and out.empty:
        print(f"Zone not found: {args.zone!r}. Known zones: {', '.join(df['zone'].drop_duplicates())}")

    write_export(out, outp)
    print(f"Wrote {len(out):,} rows to: {outp}")

if __name__ == "__main__":
    main()

# -*- coding: utf-8 -*-
"""Zone list for the dropdown, in first-seen order."""

from __future__ import annotations

import pandas as pd

ALL_ZONES = None


def distinct_zones(records: pd.DataFrame) -> list[str]:
    return records["zone"].drop_duplicates().tolist()


def zone_options(records: pd.DataFrame) -> list[str | None]:
    # None = "toutes les zones"
    return [ALL_ZONES] + distinct_zones(records)


def zone_label(zone: str | None, labels: dict) -> str:
    return labels["all_zones"] if zone is ALL_ZONES else str(zone)

# -*- coding: utf-8 -*-
"""World population: loading, series, export and map for the Streamlit dashboard."""

__version__ = "0.1.0"

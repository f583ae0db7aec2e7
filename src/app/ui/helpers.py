"""
Shared UI helper utilities for the yearcal Streamlit application.

Notes:
    - Pure functions over Polars frames; no Streamlit state manipulation.
"""

from __future__ import annotations

import polars as pl


def compute_year_kpis(df: pl.DataFrame) -> dict[str, float]:
    """Quick KPI metrics from a records frame (columns: date, value).

    Computes:
        - days_with_data: Number of days with a present value.
        - total: Sum of present values.
        - max: Largest present value.

    Args:
        df (pl.DataFrame): Frame from yearcal.viz.records_frame. Missing "value" yields zeros.

    Returns:
        dict[str, float]: KPI dictionary with keys "days_with_data", "total" and "max".
    """
    if df.is_empty() or "value" not in df.columns:
        return {"days_with_data": 0.0, "total": 0.0, "max": 0.0}
    present = df.drop_nulls("value")
    if present.is_empty():
        return {"days_with_data": 0.0, "total": 0.0, "max": 0.0}
    agg = present.select(
        pl.len().alias("_n"),
        pl.col("value").sum().alias("_sum"),
        pl.col("value").max().alias("_max"),
    )
    return {
        "days_with_data": float(agg.get_column("_n").item()),
        "total": float(agg.get_column("_sum").item()),
        "max": float(agg.get_column("_max").item()),
    }

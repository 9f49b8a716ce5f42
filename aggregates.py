# aggregates.py: summaries the scenes are drawn from (all recomputed on demand)

import numpy as np
import pandas as pd

from settings import TOP_N


def valid_rows(rows: pd.DataFrame) -> pd.DataFrame:
    #rows with both a numeric year and a numeric co2 value
    v = rows.dropna(subset=["year", "co2"])
    return v.astype({"year": "int64"})


def aggregate_global_by_year(rows: pd.DataFrame) -> pd.Series:
    """Total co2 per year, ascending by year. Years with no valid rows are absent."""
    v = valid_rows(rows)
    totals = v.groupby("year", sort=True)["co2"].sum()
    totals.name = "value"
    return totals


def top_n_for_latest_year(rows: pd.DataFrame, n: int = TOP_N) -> pd.DataFrame:
    years = rows["year"].dropna()
    if years.empty:
        return valid_rows(rows).iloc[0:0]
    latest = int(years.max())

    v = valid_rows(rows)
    latest_rows = v[v["year"] == latest]
    #stable so equal emitters keep their file order
    ranked = latest_rows.sort_values("co2", ascending=False, kind="stable")
    return ranked.head(n)


def series_for_country(rows: pd.DataFrame, country: str) -> pd.DataFrame:
    v = valid_rows(rows)
    match = v["country"].eq(country).fillna(False).astype(bool)
    return v[match].sort_values("year", kind="stable")


def peak_of(series: pd.DataFrame):
    """Row with the highest co2; ties go to the earliest year. None for an empty series."""
    if series.empty:
        return None
    ordered = series.sort_values("year", kind="stable")
    return ordered.iloc[int(np.argmax(ordered["co2"].to_numpy()))]


def distinct_countries(rows: pd.DataFrame) -> list[str]:
    #first-seen order, which is what the dropdown shows
    return [str(c) for c in rows["country"].dropna().unique()]

# data_prep.py: read the CO2 csv into a tidy (country, year, co2) frame

import logging

import numpy as np
import pandas as pd

from settings import COLUMN_MAP

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """The emissions dataset could not be loaded; nothing can be shown without it."""


def load_emissions(path) -> pd.DataFrame:
    #read the data
    try:
        raw = pd.read_csv(path)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset not found: {path}") from e
    except OSError as e:
        #directories, permissions, unreachable urls (URLError is an OSError)
        raise DatasetError(f"Could not read dataset {path}: {e}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not parse dataset {path}: {e}") from e

    missing = [c for c in COLUMN_MAP if c not in raw.columns]
    if missing:
        raise DatasetError(f"Missing columns in {path}: {missing}")

    df = tidy_rows(raw)
    logger.info("Loaded %d rows (%d countries) from %s",
                len(df), df["country"].nunique(), path)
    return df


def tidy_rows(raw: pd.DataFrame) -> pd.DataFrame:
    #keep + rename the columns we need
    df = raw[list(COLUMN_MAP)].rename(columns=COLUMN_MAP).copy()

    #numeric coercion; blanks/garbage become NA and get filtered per aggregate
    #inf or out-of-range values count as unparseable too
    year = pd.to_numeric(df["year"], errors="coerce").astype(float)
    year = year.where(np.isfinite(year) & (year.abs() < 1e9))
    df["year"] = year.round().astype("Int64")
    co2 = pd.to_numeric(df["co2"], errors="coerce").astype(float)
    df["co2"] = co2.where(np.isfinite(co2))
    df["country"] = df["country"].astype("string").str.strip()

    bad = int((df["year"].isna() | df["co2"].isna()).sum())
    if bad:
        logger.debug("%d rows have a non-numeric year or co2 value", bad)
    return df.reset_index(drop=True)

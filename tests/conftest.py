import pandas as pd
import pytest

from data_prep import tidy_rows


def make_rows(records):
    raw = pd.DataFrame(records, columns=["Entity", "Year", "Annual CO₂ emissions"])
    return tidy_rows(raw)


@pytest.fixture
def rows():
    return make_rows([
        ("US", 2018, 5000),
        ("US", 2019, 5200),
        ("CN", 2019, 9000),
    ])


@pytest.fixture
def story_rows():
    #covers the 1955 callout, a blank value, a junk year and a country with no valid rows
    return make_rows([
        ("World", 1950, 6000),
        ("World", 1955, 7500),
        ("World", 1960, 9300),
        ("France", 1955, 300),
        ("France", 1960, ""),
        ("Germany", 1960, 800),
        ("Germany", 1955, 800),
        ("Atlantis", "n/a", 10),
        ("Nowhere", 1960, "unknown"),
    ])


@pytest.fixture
def empty_rows():
    return make_rows([])


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "Entity,Code,Year,Annual CO₂ emissions\n"
        "US,USA,2018,5000\n"
        "US,USA,2019,5200\n"
        "CN,CHN,2019,9000\n"
        "CN,CHN,2020,\n",
        encoding="utf-8",
    )
    return path

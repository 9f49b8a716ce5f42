# settings.py: constants for the CO2 story plus env-driven runtime options

import os
from dataclasses import dataclass

# -------------------------
# Canvas and layout
# -------------------------
WIDTH = 1200
HEIGHT = 650

#shared by every scene so the axes line up when flipping through
MARGIN = dict(left=50, right=50, top=120, bottom=50)

TOP_N = 10
BAND_PADDING = 0.2

# -------------------------
# Dataset columns (raw name -> canonical name)
# -------------------------
COLUMN_MAP = {
    "Entity": "country",
    "Year": "year",
    "Annual CO₂ emissions": "co2",
}

# -------------------------
# Scene styling + text
# -------------------------
COLORS = {
    "trend": "#333",
    "bars": "#3498db",
    "country": "#2ecc71",
    "subtitle": "#666",
    "axis": "#999",
}
LINE_WIDTH = 2
TITLE_SIZE = 18
SUBTITLE_SIZE = 14

SCENE_TEXT = {
    "global_trend": {
        "title": "Global CO₂ Emissions Over Time",
        "subtitle": "Total worldwide CO₂ emissions, aggregated by year.",
    },
    "top_emitters": {
        "title": "Top 10 CO₂ Emitters in {year}",
        "subtitle": "The top 10 countries by total CO₂ emissions in the most recent year available.",
    },
    "country_explorer": {
        "title": "CO₂ Emissions for {country}",
        "subtitle": "Explore annual CO₂ emissions for individual countries.",
    },
}

#annotation year for the global trend callout
INDUSTRIAL_YEAR = 1955

EMPTY_MESSAGE = "No data for selected filters"


@dataclass(frozen=True)
class Settings:
    data_path: str = "data.csv"
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            data_path=env.get("CO2_STORY_DATA", cls.data_path),
            host=env.get("CO2_STORY_HOST", cls.host),
            port=int(env.get("CO2_STORY_PORT", cls.port)),
            debug=env.get("CO2_STORY_DEBUG", "").strip().lower() in ("1", "true", "yes", "on"),
            log_level=env.get("CO2_STORY_LOGLEVEL", cls.log_level).upper(),
        )

# scenes.py: the three story scenes as pure (rows, state) -> SceneView builders
#
# A renderer never touches plotly. It works out where things go in canvas pixels
# (lines, bars, ticks, one callout) and hands that back; canvas.py does the drawing.

import logging
from dataclasses import dataclass, field
from enum import IntEnum

import pandas as pd

from aggregates import (aggregate_global_by_year, distinct_countries, peak_of,
                        series_for_country, top_n_for_latest_year)
from scales import x_band, x_linear, y_linear
from settings import COLORS, INDUSTRIAL_YEAR, LINE_WIDTH, SCENE_TEXT, TOP_N

logger = logging.getLogger(__name__)


class Scene(IntEnum):
    GLOBAL_TREND = 0
    TOP_EMITTERS = 1
    COUNTRY_EXPLORER = 2


@dataclass
class SessionState:
    scene: int = Scene.GLOBAL_TREND
    country: str | None = None

    def to_dict(self) -> dict:
        return {"scene": int(self.scene), "country": self.country}

    @classmethod
    def from_dict(cls, data) -> "SessionState":
        if not data:
            return cls()
        return cls(scene=int(data.get("scene", 0)), country=data.get("country"))


# -------------------------
# Geometry description
# -------------------------
@dataclass
class LinePath:
    points: list[tuple[float, float]]
    color: str
    width: float = LINE_WIDTH


@dataclass
class Bar:
    x: float
    y: float
    width: float
    height: float
    color: str
    label: str = ""


@dataclass
class Annotation:
    x: float
    y: float
    dx: float
    dy: float
    title: str
    label: str
    align: str = "middle"


@dataclass
class Tick:
    position: float
    label: str


@dataclass
class Selector:
    options: list[str]
    value: str | None


@dataclass
class SceneView:
    scene: Scene
    title: str
    subtitle: str
    lines: list[LinePath] = field(default_factory=list)
    bars: list[Bar] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)
    x_ticks: list[Tick] = field(default_factory=list)
    y_ticks: list[Tick] = field(default_factory=list)
    selector: Selector | None = None

    @property
    def empty(self) -> bool:
        return not (self.lines or self.bars)


def _value_label(v: float) -> str:
    #emissions are in tonnes; billions read better on the axis
    if abs(v) >= 1e9:
        return f"{v / 1e9:g}B"
    if abs(v) >= 1e6:
        return f"{v / 1e6:g}M"
    if abs(v) >= 1e3:
        return f"{v / 1e3:g}k"
    return f"{v:g}"


def _linear_ticks(x, y):
    x_ticks = [Tick(x(t), str(int(t))) for t in x.ticks() if float(t).is_integer()]
    y_ticks = [Tick(y(t), _value_label(t)) for t in y.ticks()]
    return x_ticks, y_ticks


# -------------------------
# Scene 1. Global trend line
# -------------------------
def render_global_trend(rows: pd.DataFrame, state: SessionState) -> SceneView:
    text = SCENE_TEXT["global_trend"]
    view = SceneView(Scene.GLOBAL_TREND, text["title"], text["subtitle"])

    totals = aggregate_global_by_year(rows)
    if totals.empty:
        logger.info("Global trend: no valid rows to aggregate")
        return view

    x = x_linear(totals.index)
    y = y_linear(totals.max())
    view.lines.append(LinePath(
        points=[(x(yr), y(val)) for yr, val in totals.items()],
        color=COLORS["trend"],
    ))
    view.x_ticks, view.y_ticks = _linear_ticks(x, y)

    #fixed callout; omitted when the year isn't in the data
    if INDUSTRIAL_YEAR in totals.index:
        view.annotations.append(Annotation(
            x=x(INDUSTRIAL_YEAR), y=y(totals.loc[INDUSTRIAL_YEAR]),
            dx=-60, dy=-30,
            title="Industrial Growth",
            label="Emissions began rising rapidly after 1950",
            align="left",
        ))
    else:
        logger.debug("Global trend: %s not in data, skipping annotation", INDUSTRIAL_YEAR)
    return view


# -------------------------
# Scene 2. Top emitters bar chart
# -------------------------
def render_top_emitters(rows: pd.DataFrame, state: SessionState) -> SceneView:
    text = SCENE_TEXT["top_emitters"]
    top = top_n_for_latest_year(rows, TOP_N)

    latest = rows["year"].dropna()
    year_txt = str(int(latest.max())) if not latest.empty else "—"
    view = SceneView(Scene.TOP_EMITTERS, text["title"].format(year=year_txt), text["subtitle"])
    if top.empty:
        logger.info("Top emitters: nothing to rank")
        return view

    countries = top["country"].astype(str).tolist()
    x = x_band(countries)
    y = y_linear(top["co2"].max())
    base = y(0)
    for country, co2 in zip(countries, top["co2"]):
        top_y = y(co2)
        view.bars.append(Bar(
            x=x(country), y=top_y,
            width=x.bandwidth, height=base - top_y,
            color=COLORS["bars"], label=country,
        ))
    view.x_ticks = [Tick(x.center(c), c) for c in countries]
    view.y_ticks = [Tick(y(t), _value_label(t)) for t in y.ticks()]

    leader = countries[0]
    view.annotations.append(Annotation(
        x=x.center(leader), y=y(top["co2"].iloc[0]),
        dx=0, dy=-20,
        title="Top Emitter",
        label=f"{leader} leads CO₂ emissions this year",
    ))
    return view


# -------------------------
# Scene 3. Country explorer
# -------------------------
def render_country_explorer(rows: pd.DataFrame, state: SessionState) -> SceneView:
    text = SCENE_TEXT["country_explorer"]
    options = distinct_countries(rows)
    country = state.country if state.country in options else (options[0] if options else None)

    view = SceneView(
        Scene.COUNTRY_EXPLORER,
        text["title"].format(country=country or "—"),
        text["subtitle"],
        selector=Selector(options=options, value=country),
    )
    if country is None:
        logger.info("Country explorer: dataset has no countries")
        return view

    series = series_for_country(rows, country)
    if series.empty:
        logger.info("Country explorer: no valid rows for %s", country)
        return view

    x = x_linear(series["year"])
    y = y_linear(series["co2"].max())
    view.lines.append(LinePath(
        points=[(x(yr), y(v)) for yr, v in zip(series["year"], series["co2"])],
        color=COLORS["country"],
    ))
    view.x_ticks, view.y_ticks = _linear_ticks(x, y)

    peak = peak_of(series)
    if peak is not None:
        view.annotations.append(Annotation(
            x=x(peak["year"]), y=y(peak["co2"]),
            dx=0, dy=-40,
            title="Peak Emission",
            label=f"CO₂ peaked in {int(peak['year'])}",
        ))
    return view


RENDERERS = {
    Scene.GLOBAL_TREND: render_global_trend,
    Scene.TOP_EMITTERS: render_top_emitters,
    Scene.COUNTRY_EXPLORER: render_country_explorer,
}

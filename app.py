# app.py: Dash app for the CO2 story (three scenes, prev/next, country dropdown)

import logging

import pandas as pd
from dash import Dash, Input, Output, State, ctx, dcc, html

from controller import TOTAL_SCENES, SceneController
from data_prep import DatasetError, load_emissions
from scenes import SessionState
from settings import HEIGHT, WIDTH, Settings

logger = logging.getLogger(__name__)

APP_TITLE = "CO₂ Emissions: A Short Story"


#wrapper for control cards
def control_card(children, **style):
    return html.Div(
        children,
        style={
            "background":"#fff","border":"1px solid #e9ecef","borderRadius":"12px",
            "padding":"14px","boxShadow":"0 2px 8px rgba(0,0,0,0.04)", **style
        }
    )


def story_layout():
    return html.Div(
        [
            html.H2(APP_TITLE, style={"margin":"10px 0 8px 0"}),
            dcc.Store(id="session-state", data=SessionState().to_dict()),

            #nav row
            control_card([
                html.Div(
                    [
                        html.Button("◀ Previous", id="btn-prev", n_clicks=0),
                        html.Div(id="scene-readout", style={"opacity":0.8}),
                        html.Button("Next ▶", id="btn-next", n_clicks=0),
                    ],
                    style={"display":"flex","justifyContent":"space-between","alignItems":"center"}
                ),
                #scene-local: only shown on the country explorer
                html.Div(
                    dcc.Dropdown(id="ctl-country", options=[], value=None, clearable=False,
                                 placeholder="Select a country"),
                    id="country-wrap",
                    style={"display":"none"}
                ),
            ], margin="0 0 14px 0"),

            control_card([
                dcc.Graph(
                    id="fig-scene",
                    config={"displayModeBar": False, "staticPlot": False},
                    style={"width":f"{WIDTH}px","height":f"{HEIGHT}px"}
                )
            ]),
        ],
        style={"maxWidth":f"{WIDTH + 60}px","margin":"0 auto","padding":"12px"}
    )


def error_layout(message: str):
    #load failure is terminal; say so instead of showing a blank canvas
    return html.Div(
        [
            html.H2(APP_TITLE, style={"margin":"10px 0 8px 0"}),
            html.Div(
                [html.B("Could not load the emissions dataset."), html.Div(message)],
                id="load-error",
                style={
                    "background":"#fdecea","color":"#b71c1c","border":"1px solid #f5c6cb",
                    "borderRadius":"12px","padding":"14px"
                }
            ),
        ],
        style={"maxWidth":f"{WIDTH + 60}px","margin":"0 auto","padding":"12px"}
    )


def handle_trigger(rows: pd.DataFrame, trigger, country, state_data):
    """Apply one UI event to the session and return every callback output."""
    controller = SceneController(rows, SessionState.from_dict(state_data))
    if trigger == "btn-next":
        view = controller.advance()
    elif trigger == "btn-prev":
        view = controller.retreat()
    elif trigger == "ctl-country":
        view = controller.select_country(country)
    else:
        view = controller.render()

    if view.selector is not None:
        options = [{"label":c, "value":c} for c in view.selector.options]
        value = view.selector.value
        wrap_style = {"display":"block","marginTop":"10px"}
    else:
        options, value = [], None
        wrap_style = {"display":"none"}

    readout = f"Scene {controller.current_scene + 1} of {TOTAL_SCENES}"
    return (
        controller.state.to_dict(),
        controller.canvas.figure,
        options,
        value,
        wrap_style,
        readout,
        not controller.can_retreat,
        not controller.can_advance,
    )


def create_app(settings: Settings | None = None) -> Dash:
    settings = settings or Settings.from_env()

    app = Dash(__name__)
    app.title = APP_TITLE

    try:
        rows = load_emissions(settings.data_path)
    except DatasetError as e:
        logger.error("%s", e)
        app.layout = error_layout(str(e))
        return app

    app.layout = story_layout()

    #one callback for every trigger so the dropdown can feed back into itself
    @app.callback(
        Output("session-state","data"),
        Output("fig-scene","figure"),
        Output("ctl-country","options"),
        Output("ctl-country","value"),
        Output("country-wrap","style"),
        Output("scene-readout","children"),
        Output("btn-prev","disabled"),
        Output("btn-next","disabled"),
        Input("btn-prev","n_clicks"),
        Input("btn-next","n_clicks"),
        Input("ctl-country","value"),
        State("session-state","data"),
    )
    def _on_trigger(_prev, _next, country, state_data):
        return handle_trigger(rows, ctx.triggered_id, country, state_data)

    return app


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()

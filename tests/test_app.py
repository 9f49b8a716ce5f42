from app import create_app, handle_trigger
from scenes import Scene, SessionState
from settings import Settings


def _call(rows, trigger, country=None, state=None):
    state = state if state is not None else SessionState().to_dict()
    return handle_trigger(rows, trigger, country, state)


def test_initial_load_shows_global_trend(story_rows):
    state, fig, options, value, wrap, readout, prev_off, next_off = _call(story_rows, None)
    assert state == {"scene": 0, "country": None}
    assert fig.layout.annotations[0].text == "Global CO₂ Emissions Over Time"
    assert options == [] and value is None
    assert wrap["display"] == "none"
    assert readout == "Scene 1 of 3"
    assert prev_off and not next_off


def test_next_then_dropdown_then_prev(story_rows):
    state = _call(story_rows, "btn-next")[0]
    state = _call(story_rows, "btn-next", state=state)[0]
    assert state == {"scene": 2, "country": "World"}

    out = _call(story_rows, "ctl-country", "Germany", state)
    state, _, options, value, wrap, readout, prev_off, next_off = out
    assert state["country"] == "Germany"
    assert value == "Germany"
    assert {"label": "France", "value": "France"} in options
    assert wrap["display"] == "block"
    assert next_off and not prev_off

    state = _call(story_rows, "btn-prev", state=state)[0]
    assert state == {"scene": int(Scene.TOP_EMITTERS), "country": None}


def test_missing_dataset_shows_error(tmp_path):
    app = create_app(Settings(data_path=str(tmp_path / "missing.csv")))
    error = app.layout.children[1]
    assert error.id == "load-error"
    assert "missing.csv" in str(error.children[1].children)


def test_app_builds_with_dataset(csv_path):
    app = create_app(Settings(data_path=str(csv_path)))
    assert app.title.startswith("CO₂")
    assert len(app.callback_map) == 1


def test_unreachable_dataset_url_shows_error():
    app = create_app(Settings(data_path="http://127.0.0.1:9/data.csv"))
    error = app.layout.children[1]
    assert error.id == "load-error"
    assert "Could not read dataset" in str(error.children[1].children)


def test_directory_dataset_shows_error(tmp_path):
    app = create_app(Settings(data_path=str(tmp_path)))
    assert app.layout.children[1].id == "load-error"

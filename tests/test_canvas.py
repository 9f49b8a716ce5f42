from canvas import Canvas
from scenes import SessionState, render_global_trend, render_top_emitters
from settings import EMPTY_MESSAGE


def _texts(fig):
    return [a.text for a in fig.layout.annotations]


def test_draw_line_scene(story_rows):
    canvas = Canvas()
    fig = canvas.draw(render_global_trend(story_rows, SessionState()))
    assert len(fig.data) == 1
    assert fig.data[0].mode == "lines"
    texts = _texts(fig)
    assert "Global CO₂ Emissions Over Time" in texts
    assert any("Industrial Growth" in t for t in texts)
    assert list(fig.layout.yaxis.range) == [650, 0]


def test_draw_bars_as_shapes(rows):
    canvas = Canvas()
    fig = canvas.draw(render_top_emitters(rows, SessionState()))
    rects = [s for s in fig.layout.shapes if s.type == "rect"]
    assert len(rects) == 2
    assert len(fig.data) == 0


def test_clear_wipes_everything(rows):
    canvas = Canvas()
    canvas.draw(render_top_emitters(rows, SessionState()))
    canvas.clear()
    assert len(canvas.figure.data) == 0
    assert len(canvas.figure.layout.shapes) == 0
    assert len(canvas.figure.layout.annotations) == 0


def test_empty_view_shows_message(empty_rows):
    fig = Canvas().draw(render_global_trend(empty_rows, SessionState()))
    assert EMPTY_MESSAGE in _texts(fig)
    assert len(fig.data) == 0


def test_title_and_subtitle_are_paper_anchored(rows):
    fig = Canvas().draw(render_global_trend(rows, SessionState()))
    title, subtitle = fig.layout.annotations[:2]
    assert (title.xref, title.yref) == ("paper", "paper")
    assert (subtitle.xref, subtitle.yref) == ("paper", "paper")
    assert title.x == 0.5
    assert title.y > subtitle.y

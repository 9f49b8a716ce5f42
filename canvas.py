# canvas.py: draws a SceneView onto a plotly figure laid out in pixel space

import plotly.graph_objects as go

from settings import (COLORS, EMPTY_MESSAGE, HEIGHT, MARGIN, SUBTITLE_SIZE,
                      TITLE_SIZE, WIDTH)

_ALIGN = {"left": "left", "middle": "center", "right": "right"}


class Canvas:
    """One fixed-size drawing surface; every scene change wipes and redraws it."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self.figure = go.Figure()
        self.clear()

    def clear(self):
        fig = go.Figure()
        #y runs top-down like an svg, so scene geometry drops straight in
        fig.update_layout(
            template="plotly_white",
            width=self.width,
            height=self.height,
            margin=dict(l=0, r=0, t=0, b=0),
            showlegend=False,
            hovermode="closest",
            xaxis=dict(range=[0, self.width], visible=False, fixedrange=True),
            yaxis=dict(range=[self.height, 0], visible=False, fixedrange=True),
        )
        self.figure = fig
        return self

    def draw(self, view) -> go.Figure:
        fig = self.figure
        self._text(self.width / 2, 30, view.title, TITLE_SIZE, "#000")
        self._text(self.width / 2, 55, view.subtitle, SUBTITLE_SIZE, COLORS["subtitle"])

        if view.empty:
            self._text(self.width / 2, self.height / 2, EMPTY_MESSAGE, SUBTITLE_SIZE, COLORS["subtitle"])
            return fig

        self._axes(view)

        for line in view.lines:
            xs, ys = zip(*line.points) if line.points else ((), ())
            fig.add_trace(go.Scatter(
                x=list(xs), y=list(ys),
                mode="lines",
                line=dict(color=line.color, width=line.width),
                hoverinfo="skip",
            ))

        for bar in view.bars:
            fig.add_shape(
                type="rect",
                x0=bar.x, x1=bar.x + bar.width,
                y0=bar.y, y1=bar.y + bar.height,
                fillcolor=bar.color,
                line=dict(width=0),
                name=bar.label,
            )

        for note in view.annotations:
            fig.add_annotation(
                x=note.x, y=note.y,
                ax=note.dx, ay=note.dy,
                axref="pixel", ayref="pixel",
                text=f"<b>{note.title}</b><br>{note.label}",
                showarrow=True, arrowhead=0, arrowwidth=1,
                align=_ALIGN.get(note.align, "center"),
                font=dict(size=12),
            )
        return fig

    def _axes(self, view):
        base_y = self.height - MARGIN["bottom"]
        left_x = MARGIN["left"]
        axis = dict(color=COLORS["axis"], width=1)
        self.figure.add_shape(type="line", x0=left_x, x1=self.width - MARGIN["right"],
                              y0=base_y, y1=base_y, line=axis)
        self.figure.add_shape(type="line", x0=left_x, x1=left_x,
                              y0=base_y, y1=MARGIN["top"], line=axis)
        for t in view.x_ticks:
            self.figure.add_annotation(x=t.position, y=base_y + 6, text=t.label, showarrow=False,
                                       yanchor="top", font=dict(size=10, color=COLORS["axis"]))
        for t in view.y_ticks:
            self.figure.add_annotation(x=left_x - 6, y=t.position, text=t.label, showarrow=False,
                                       xanchor="right", font=dict(size=10, color=COLORS["axis"]))

    def _text(self, x, y, text, size, color):
        #paper-anchored; margins are zero so paper maps 1:1 onto canvas pixels
        self.figure.add_annotation(x=x / self.width, y=1 - y / self.height,
                                   xref="paper", yref="paper", text=text, showarrow=False,
                                   xanchor="center", yanchor="middle",
                                   font=dict(size=size, color=color))

    def to_dict(self) -> dict:
        return self.figure.to_dict()

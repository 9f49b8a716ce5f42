# controller.py: scene navigation over a read-only row set

import logging

import pandas as pd

from canvas import Canvas
from scenes import RENDERERS, Scene, SceneView, SessionState

logger = logging.getLogger(__name__)

TOTAL_SCENES = len(Scene)


class SceneController:
    """Holds the session state and swaps the canvas between scenes.

    Navigation clamps at both ends (no wraparound). Every render wipes the
    canvas and draws the selected scene from scratch, so rendering the same
    state twice gives the same figure.
    """

    def __init__(self, rows: pd.DataFrame, state: SessionState | None = None,
                 canvas: Canvas | None = None):
        self.rows = rows
        self.state = state if state is not None else SessionState()
        self.canvas = canvas if canvas is not None else Canvas()
        self.view: SceneView | None = None

    @property
    def current_scene(self) -> int:
        return int(self.state.scene)

    @property
    def can_advance(self) -> bool:
        return self.current_scene < TOTAL_SCENES - 1

    @property
    def can_retreat(self) -> bool:
        return self.current_scene > 0

    def advance(self) -> SceneView:
        if not self.can_advance:
            return self._current_view()
        self._enter(self.current_scene + 1)
        return self.render()

    def retreat(self) -> SceneView:
        if not self.can_retreat:
            return self._current_view()
        self._enter(self.current_scene - 1)
        return self.render()

    def select_country(self, country) -> SceneView:
        #dropdown only exists on the explorer; anything else is a stale event
        if self.current_scene == Scene.COUNTRY_EXPLORER:
            self.state.country = country
        else:
            logger.debug("Ignoring country selection %r outside the explorer", country)
        return self.render()

    def render(self, scene: int | None = None) -> SceneView:
        if scene is not None:
            self.state.scene = scene
        if not 0 <= self.current_scene < TOTAL_SCENES:
            raise ValueError(f"Scene index out of range: {self.current_scene}")

        self.canvas.clear()
        renderer = RENDERERS[Scene(self.current_scene)]
        view = renderer(self.rows, self.state)
        #explorer falls back to the first country; keep state in step with what's shown
        if view.selector is not None:
            self.state.country = view.selector.value
        self.canvas.draw(view)
        self.view = view
        return view

    def _current_view(self) -> SceneView:
        #boundary no-op: leave the canvas alone unless nothing has been drawn yet
        return self.view if self.view is not None else self.render()

    def _enter(self, scene: int):
        logger.debug("Scene %d -> %d", self.current_scene, scene)
        self.state.scene = scene
        #scene-local selection resets on every (re-)entry
        self.state.country = None

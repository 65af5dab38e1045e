"""
Clock (Orchestrator)
====================
Composes the time state and the hand geometry and exposes the three
operations a host drives: resize, tick and render.

Why is this file needed?
------------------------
1. Decoupling: It holds no Qt objects. Any host that can report a size, fire
   a tick, and fill polygons can drive it.
2. Consistency: Polygons are replaced all at once, so a render between two
   updates sees either the old set or the new set, never a mix.

Classes:
    Canvas: Protocol of the drawing surface the clock paints onto.
    Clock: The orchestrator.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Protocol, TYPE_CHECKING

import numpy as np

from customclocks.model.hands import (
    DRAW_ORDER, HAND_SPECS, HandKind, HandSpec, HandState, Surface, rotate_and_place, update_hand_state,
)
from customclocks.model.time_state import TimeState

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

ELAPSED_SECONDS_KEY = "elapsed_seconds"

DrawCommand = tuple[Any, ...]


class Canvas(Protocol):
    def draw_face(self, width: float, height: float) -> None: ...
    def fill_polygon(self, points: npt.NDArray[np.float64], color: str) -> None: ...


class Clock:
    """
    Analog clock state: elapsed time, surface, and the three hand polygons.

    Args:
        time_state: Counter driving the hands. Defaults to the current time.
        specs: Sizing constants per hand kind.
        on_changed: Called after the polygons are replaced, typically the
            host's "schedule a repaint" hook.
    """
    def __init__(
        self,
        time_state: Optional[TimeState] = None,
        specs: Mapping[HandKind, HandSpec] = HAND_SPECS,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self.time_state = time_state if time_state is not None else TimeState()
        self.specs = dict(specs)
        self.on_changed = on_changed

        self.surface = Surface()
        self.hand_states: dict[HandKind, HandState] = {}
        self.polygons: dict[HandKind, npt.NDArray[np.float64]] = {}
        self._update_hand_states()
        self._rotate_hands()

    # ------------------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------------------

    def on_resize(
        self,
        width: float,
        height: float,
        padding: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> None:
        """
        New outer size and (left, top, right, bottom) padding.
        Recomputes the full geometry of every hand.
        """
        self.surface = Surface.from_widget_size(width, height, padding)
        logger.debug(f"Surface resized to {self.surface.width:g}x{self.surface.height:g}")
        self._update_hand_states()
        self._rotate_hands()

    def on_tick(self) -> None:
        self.time_state.tick()
        self._rotate_hands()

    def render(self, canvas: Canvas) -> None:
        """Paint the face, then the hands in draw order."""
        canvas.draw_face(self.surface.width, self.surface.height)
        polygons = self.polygons
        for kind in DRAW_ORDER:
            canvas.fill_polygon(polygons[kind], self.specs[kind].color)

    def draw_list(self) -> list[DrawCommand]:
        """The render output as plain data: ("face", w, h) then ("polygon", kind, points) x3."""
        commands: list[DrawCommand] = [("face", self.surface.width, self.surface.height)]
        polygons = self.polygons
        commands.extend(("polygon", kind, polygons[kind].copy()) for kind in DRAW_ORDER)
        return commands

    # ------------------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------------------

    def save_state(self) -> dict[str, int]:
        return {ELAPSED_SECONDS_KEY: self.time_state.snapshot()}

    def restore_state(self, state: Mapping[str, Any]) -> None:
        """
        Restore the counter from `save_state` output. Geometry is not part of
        the saved state; it is rebuilt from the current surface.
        """
        value = state.get(ELAPSED_SECONDS_KEY)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning(f"Ignoring saved clock state without an integer '{ELAPSED_SECONDS_KEY}': {state!r}")
            return
        self.time_state.restore(value)
        logger.debug(f"Restored elapsed seconds: {self.time_state.elapsed_seconds}")
        self._rotate_hands()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _update_hand_states(self) -> None:
        self.hand_states = {kind: update_hand_state(spec, self.surface) for kind, spec in self.specs.items()}

    def _rotate_hands(self) -> None:
        angles = self.time_state.current_angles()
        # Build the full set before swapping it in
        polygons = {
            kind: rotate_and_place(self.hand_states[kind], angles.for_kind(kind), self.surface)
            for kind in DRAW_ORDER
        }
        self.polygons = polygons
        if self.on_changed is not None:
            self.on_changed()

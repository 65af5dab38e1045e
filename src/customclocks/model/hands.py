"""
Hand Geometry
=============
Turns a surface size and a rotation angle into the filled polygon of a clock
hand.

Each hand is a rectangle `2 * half_width` wide and `length` tall. The pivot
sits `protruding_length` above the rectangle's bottom edge, so a short tail
sticks out past the clock center opposite the tip. Polygons are always derived
from the unrotated base rectangle, never by rotating a previous polygon.

Classes:
    HandKind: Second / minute / hour.
    HandSpec: Per-kind sizing coefficients.
    Surface: Drawable area with its center.
    HandState: Sizing derived from a spec and a surface.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from customclocks.config import SIZE_DIVISOR
from customclocks.model.geometry_primitives import Point, Rectangle, rotate_about, translate

if TYPE_CHECKING:
    import numpy.typing as npt

# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class HandKind(StrEnum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"


# Later hands are painted over earlier ones.
DRAW_ORDER: tuple[HandKind, ...] = (HandKind.SECOND, HandKind.MINUTE, HandKind.HOUR)

# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class HandSpec:
    """
    Static sizing constants of one hand kind.
    """
    half_width_coefficient: int
    protruding_coefficient: int
    # Fraction of half the surface height used as the visible hand length
    height_coefficient: float
    color: str = "#000000"


HAND_SPECS: dict[HandKind, HandSpec] = {
    HandKind.SECOND: HandSpec(half_width_coefficient=1, protruding_coefficient=10, height_coefficient=1.0),
    HandKind.MINUTE: HandSpec(half_width_coefficient=2, protruding_coefficient=10, height_coefficient=0.75),
    HandKind.HOUR: HandSpec(half_width_coefficient=4, protruding_coefficient=10, height_coefficient=0.5),
}


@dataclass(frozen=True)
class Surface:
    """Drawable area, padding already removed."""
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_widget_size(
        cls,
        width: float,
        height: float,
        padding: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> Surface:
        """
        Build a surface from the outer size and (left, top, right, bottom) padding.
        Dimensions never go below zero.
        """
        left, top, right, bottom = padding
        return cls(
            width=max(0.0, float(width - (left + right))),
            height=max(0.0, float(height - (top + bottom))),
        )

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class HandState:
    """Sizing of one hand on one surface."""
    half_width: int
    protruding_length: int
    length: int
    base_rect: Rectangle

    @property
    def pivot(self) -> Point:
        """Point of the base rectangle that lands on the surface center."""
        return Point(self.half_width, self.length - self.protruding_length)


# ------------------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------------------
def compute_minimums(surface: Surface) -> tuple[int, int]:
    """
    Minimum half-width and minimum protruding length for a surface.

    The half-width is always derived from the surface width and the protruding
    length from the surface height, whatever the hand.
    """
    return int(surface.width // SIZE_DIVISOR), int(surface.height // SIZE_DIVISOR)


def update_hand_state(spec: HandSpec, surface: Surface) -> HandState:
    min_half_width, min_protruding = compute_minimums(surface)
    half_width = min_half_width * spec.half_width_coefficient
    protruding_length = min_protruding * spec.protruding_coefficient
    length = int(surface.center.y * spec.height_coefficient + protruding_length)
    return HandState(
        half_width=half_width,
        protruding_length=protruding_length,
        length=length,
        base_rect=Rectangle(0, 0, 2 * half_width, length),
    )


def rotate_and_place(state: HandState, angle_deg: float, surface: Surface) -> npt.NDArray[np.float64]:
    """
    Polygon of a hand rotated by `angle_deg` around the surface center.

    Args:
        state: Hand sizing from `update_hand_state`.
        angle_deg: Clockwise angle from 12 o'clock.
        surface: Surface whose center receives the pivot.

    Returns:
        (4, 2) array of corners, clockwise, starting from the rotated
        top-left corner of the base rectangle.
    """
    pivot = state.pivot
    rotated = rotate_about(state.base_rect.corners(), pivot, angle_deg)
    return translate(rotated, surface.center - pivot)

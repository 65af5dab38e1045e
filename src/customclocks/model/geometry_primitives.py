"""
Geometric Primitives for hand geometry.

All coordinates are screen coordinates: x grows to the right, y grows
downward. A positive rotation angle therefore turns clockwise on screen.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A 2D displacement.
    """
    x: float
    y: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A point on the drawing surface."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Rectangle:
    """
    An axis-aligned rectangle anchored at its top-left corner.
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def corners(self) -> npt.NDArray[np.float64]:
        """
        The four corners as a (4, 2) array, clockwise on screen starting at
        the top-left corner.
        """
        return np.array(
            [
                [self.left, self.top],
                [self.right, self.top],
                [self.right, self.bottom],
                [self.left, self.bottom],
            ],
            dtype=np.float64,
        )


def rotation_matrix(angle_deg: float) -> npt.NDArray[np.float64]:
    """2x2 matrix rotating clockwise on screen by `angle_deg`."""
    angle_rad = math.radians(angle_deg)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=np.float64)


def rotate_about(
    points: npt.NDArray[np.float64],
    pivot: Point,
    angle_deg: float,
) -> npt.NDArray[np.float64]:
    """
    Rotate an (N, 2) array of points about `pivot`.

    Args:
        points: Points to rotate, one (x, y) pair per row.
        pivot: Fixed point of the rotation.
        angle_deg: Clockwise angle in degrees.

    Returns:
        A new (N, 2) array; the input is left untouched.
    """
    origin = pivot.to_array()
    return (np.asarray(points, dtype=np.float64) - origin) @ rotation_matrix(angle_deg).T + origin


def translate(points: npt.NDArray[np.float64], offset: Vector) -> npt.NDArray[np.float64]:
    return np.asarray(points, dtype=np.float64) + offset.to_array()

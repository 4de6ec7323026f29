"""Plane geometry helpers used for movement, sight and hearing."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAP_SECTION_SIZE = 64.0
"""Width and height of one grid cell, in screen units."""


@dataclass(frozen=True)
class Vector2:
    """A point or direction in the plane."""

    x: float
    y: float

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)


def screen_to_grid(screen_pos: float) -> int:
    """Return the grid cell holding ``screen_pos``, truncated toward zero."""
    return int(screen_pos / MAP_SECTION_SIZE)


def grid_to_screen(grid_pos: int) -> float:
    """Return the screen coordinate of the corner of grid cell ``grid_pos``."""
    return grid_pos * MAP_SECTION_SIZE


def _side(p1: Vector2, p2: Vector2, p3: Vector2) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


def point_in_triangle(p1: Vector2, p2: Vector2, p3: Vector2, point: Vector2) -> bool:
    """Return True if ``point`` lies inside or on the edge of the triangle."""
    sides = (_side(point, p1, p2), _side(point, p2, p3), _side(point, p3, p1))
    has_negative = any(d < 0 for d in sides)
    has_positive = any(d > 0 for d in sides)
    return not (has_negative and has_positive)


def distance(p1: Vector2, p2: Vector2) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def rotation_of(vector: Vector2) -> float:
    """Return the angle in radians from the +y axis to ``vector``."""
    return math.atan2(vector.y, vector.x) - math.atan2(1.0, 0.0)


def rotate_point(point: Vector2, rotation: float) -> Vector2:
    """Rotate ``point`` about the origin by ``rotation`` radians."""
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    return Vector2(
        point.x * cos_r - point.y * sin_r,
        point.x * sin_r + point.y * cos_r,
    )
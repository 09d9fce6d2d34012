"""Leaf-node geometry helpers. No engine imports except the point record."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from app.engine.context import Point


def polar_to_cartesian(
    center_x: float, center_y: float, radius: float, angle_degrees: float,
) -> tuple[float, float]:
    """Polar → Cartesian with 0° pointing north (y decreases) and clockwise angles."""
    angle_radians = (angle_degrees - 90) * math.pi / 180.0
    return (
        center_x + radius * math.cos(angle_radians),
        center_y + radius * math.sin(angle_radians),
    )


def rotate_point(x: float, y: float, angle_degrees: float) -> tuple[float, float]:
    """Rotate (x, y) about the origin. Translate first to rotate about anything else."""
    rad = angle_degrees * math.pi / 180
    return (
        x * math.cos(rad) - y * math.sin(rad),
        x * math.sin(rad) + y * math.cos(rad),
    )


def _rotated_orbit(
    x: float, y: float, center_x: float, center_y: float, folds: int,
) -> list[Point]:
    step = 360 / folds
    orbit: list[Point] = []
    for i in range(folds):
        rx, ry = rotate_point(x - center_x, y - center_y, i * step)
        orbit.append(Point.dot(rx + center_x, ry + center_y))
    return orbit


def get_symmetry_points(
    x: float, y: float, center_x: float, center_y: float, symmetry_type: str,
) -> list[Point]:
    """Expand one source point into the orbit of a named symmetry class.

    radial = 4-fold rotation, bilateral = mirrors across both axes through the
    centre, rotational = 8-fold rotation. Any other value yields the source
    point alone.
    """
    if symmetry_type == "radial":
        return _rotated_orbit(x, y, center_x, center_y, 4)
    if symmetry_type == "bilateral":
        mx = 2 * center_x - x
        my = 2 * center_y - y
        return [Point.dot(x, y), Point.dot(mx, y), Point.dot(x, my), Point.dot(mx, my)]
    if symmetry_type == "rotational":
        return _rotated_orbit(x, y, center_x, center_y, 8)
    return [Point.dot(x, y)]


def generate_spiral(
    center_x: float, center_y: float, loops: int, spacing: float,
) -> list[Point]:
    """Archimedean spiral, 8 samples per loop, angle and radius growing in lockstep."""
    total_points = loops * 8
    points: list[Point] = []
    for i in range(total_points):
        t = i / total_points
        angle = t * loops * 360
        radius = t * spacing * loops
        points.append(Point.vertex(*polar_to_cartesian(center_x, center_y, radius, angle)))
    return points


def to_array(points: Sequence[Point]) -> NDArray[np.float64]:
    """Nx2 array of (x, y) for a point sequence."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    if len(points) == 0:
        return np.zeros(0)
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def polyline_length(points: NDArray[np.float64], closed: bool = False) -> float:
    """Total drawn length; closed polylines include the segment back to the start."""
    if len(points) < 2:
        return 0.0
    if closed:
        points = np.vstack([points, points[:1]])
    return float(arc_lengths(points)[-1])

"""Catmull-Rom splines: smooth curves that pass through every given point.

The ``tension`` parameter controls curviness: ``0.0`` gives straight lines
between points, ``0.5`` is standard Catmull-Rom, ``1.0`` is maximum
curvature and anything above exaggerates it.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

__all__ = [
    "Point2D",
    "PathEvaluate2D",
    "CatmullRomSpline",
    "tangent_angle",
    "tangent_angle_deg",
]

Point2D = tuple[float, float]


def _as_point(value: Sequence[float]) -> Point2D:
    x, y = value
    return (float(x), float(y))


class PathEvaluate2D(ABC):
    """A 2D curve that can be evaluated at progress ``t`` in ``[0, 1]``.

    ``default`` is returned when the path has too few points to answer.
    """

    @abstractmethod
    def evaluate(self, default: Sequence[float], t: float) -> Point2D:
        """Position on the path at progress ``t``."""

    @abstractmethod
    def tangent(self, default: Sequence[float], t: float) -> Point2D:
        """Tangent (direction vector) at progress ``t``."""


def _eval_cubic(
    p0: Point2D, cp1: Point2D, cp2: Point2D, p3: Point2D, t: float
) -> Point2D:
    inv = 1.0 - t
    a = inv * inv * inv
    b = 3.0 * inv * inv * t
    c = 3.0 * inv * t * t
    d = t * t * t
    return (
        a * p0[0] + b * cp1[0] + c * cp2[0] + d * p3[0],
        a * p0[1] + b * cp1[1] + c * cp2[1] + d * p3[1],
    )


def _eval_cubic_derivative(
    p0: Point2D, cp1: Point2D, cp2: Point2D, p3: Point2D, t: float
) -> Point2D:
    inv = 1.0 - t
    a = 3.0 * inv * inv
    b = 6.0 * inv * t
    c = 3.0 * t * t
    return (
        a * (cp1[0] - p0[0]) + b * (cp2[0] - cp1[0]) + c * (p3[0] - cp2[0]),
        a * (cp1[1] - p0[1]) + b * (cp2[1] - cp1[1]) + c * (p3[1] - cp2[1]),
    )


class CatmullRomSpline(PathEvaluate2D):
    """A Catmull-Rom spline through an ordered list of 2D points.

    Each segment is evaluated as a cubic Bezier whose control points are
    derived from the neighbouring knots.
    """

    __slots__ = ("_points", "_tension")

    def __init__(self, points: Iterable[Sequence[float]], tension: float = 0.5) -> None:
        self._points: tuple[Point2D, ...] = tuple(_as_point(p) for p in points)
        self._tension = max(float(tension), 0.0)

    def __repr__(self) -> str:
        return f"CatmullRomSpline(points={list(self._points)!r}, tension={self._tension!r})"

    @property
    def points(self) -> tuple[Point2D, ...]:
        """The knot points."""
        return self._points

    @property
    def tension(self) -> float:
        """The curviness parameter (never negative)."""
        return self._tension

    def with_tension(self, tension: float) -> CatmullRomSpline:
        """Return a copy with a new tension; negative values become ``0.0``."""
        return CatmullRomSpline(self._points, tension)

    def point_count(self) -> int:
        """Number of knot points."""
        return len(self._points)

    def segment_count(self) -> int:
        """Number of segments: one fewer than the points, at least zero."""
        return max(len(self._points) - 1, 0)

    def _control_points(self, i: int) -> tuple[Point2D, Point2D]:
        pts = self._points
        n = len(pts)
        p0 = pts[i - 1] if i > 0 else pts[0]
        p1 = pts[i]
        p2 = pts[i + 1]
        p3 = pts[i + 2] if i + 2 < n else pts[n - 1]
        k = self._tension / 3.0
        cp1 = (p1[0] + (p2[0] - p0[0]) * k, p1[1] + (p2[1] - p0[1]) * k)
        cp2 = (p2[0] - (p3[0] - p1[0]) * k, p2[1] - (p3[1] - p1[1]) * k)
        return cp1, cp2

    def _map_t(self, t: float) -> tuple[int, float]:
        seg_count = self.segment_count()
        if seg_count == 0:
            return 0, 0.0
        scaled = max(0.0, min(1.0, t)) * seg_count
        idx = min(math.floor(scaled), seg_count - 1)
        local = max(0.0, min(1.0, scaled - idx))
        return idx, local

    def evaluate(self, default: Sequence[float], t: float) -> Point2D:
        if not self._points:
            return _as_point(default)
        if len(self._points) == 1:
            return self._points[0]
        idx, local = self._map_t(t)
        cp1, cp2 = self._control_points(idx)
        return _eval_cubic(self._points[idx], cp1, cp2, self._points[idx + 1], local)

    def tangent(self, default: Sequence[float], t: float) -> Point2D:
        if len(self._points) < 2:
            return _as_point(default)
        idx, local = self._map_t(t)
        cp1, cp2 = self._control_points(idx)
        return _eval_cubic_derivative(
            self._points[idx], cp1, cp2, self._points[idx + 1], local
        )


def tangent_angle(tangent: Sequence[float]) -> float:
    """Angle of a tangent vector from the positive X axis, in radians."""
    return math.atan2(tangent[1], tangent[0])


def tangent_angle_deg(tangent: Sequence[float]) -> float:
    """Angle of a tangent vector from the positive X axis, in degrees."""
    return math.degrees(tangent_angle(tangent))
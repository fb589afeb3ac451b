"""Pointer drag tracking with velocity estimation and movement constraints.

:class:`DragState` follows a pointer and keeps a smoothed velocity. It can
restrict movement to a bounding box, to one axis or to a grid. It needs no
DOM or windowing system: feed it pointer coordinates and it does the maths.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

__all__ = [
    "Vec2",
    "PointerData",
    "DragAxis",
    "DragConstraints",
    "DragRelease",
    "DragState",
]

Vec2 = tuple[float, float]

# Weight of the newest velocity sample in the exponential moving average.
_VELOCITY_SMOOTHING = 0.8
_MIN_DT = 1e-6


def _vec2(value: Sequence[float]) -> Vec2:
    x, y = value
    return (float(x), float(y))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class PointerData:
    """Pointer sample shared by mouse, touch and pen input."""

    x: float = 0.0
    y: float = 0.0
    pressure: float = 0.0
    pointer_id: int = 0


class DragAxis(Enum):
    """The single axis a drag may be locked to."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class DragConstraints:
    """Limits applied to the dragged position.

    ``bounds`` is ``(min_x, min_y, max_x, max_y)``; ``snap_to_grid`` is
    ``(grid_x, grid_y)``, where a non-positive cell size leaves that axis free.
    """

    bounds: Optional[tuple[float, float, float, float]] = None
    axis_lock: Optional[DragAxis] = None
    snap_to_grid: Optional[Vec2] = None

    def __post_init__(self) -> None:
        if self.bounds is not None:
            min_x, min_y, max_x, max_y = (float(v) for v in self.bounds)
            if min_x > max_x or min_y > max_y:
                raise ValueError(f"bounds minimum exceeds maximum: {self.bounds!r}")
            object.__setattr__(self, "bounds", (min_x, min_y, max_x, max_y))
        if self.snap_to_grid is not None:
            object.__setattr__(self, "snap_to_grid", _vec2(self.snap_to_grid))
        if self.axis_lock is not None and not isinstance(self.axis_lock, DragAxis):
            object.__setattr__(self, "axis_lock", DragAxis(self.axis_lock))


@dataclass(frozen=True)
class DragRelease:
    """Where a drag ended and how fast the pointer was moving."""

    position: Vec2
    velocity: Vec2


class DragState:
    """Tracks a drag: position, smoothed velocity and constraints."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0),
        constraints: Optional[DragConstraints] = None,
    ) -> None:
        self._position: Vec2 = _vec2(position)
        self._velocity: Vec2 = (0.0, 0.0)
        self._dragging = False
        self._start_pointer: Vec2 = (0.0, 0.0)
        self._start_position: Vec2 = (0.0, 0.0)
        self._last_pointer: Vec2 = (0.0, 0.0)
        self._constraints = constraints if constraints is not None else DragConstraints()

    def __repr__(self) -> str:
        return (
            f"DragState(position={self._position!r}, velocity={self._velocity!r}, "
            f"dragging={self._dragging!r})"
        )

    @property
    def position(self) -> Vec2:
        """Current dragged position."""
        return self._position

    @property
    def velocity(self) -> Vec2:
        """Current smoothed velocity in units per second."""
        return self._velocity

    @property
    def is_dragging(self) -> bool:
        """Whether the pointer is held down."""
        return self._dragging

    @property
    def constraints(self) -> DragConstraints:
        """The constraints in force."""
        return self._constraints

    def with_constraints(self, constraints: DragConstraints) -> DragState:
        """Set the constraints and return this state for chaining."""
        self._constraints = constraints
        return self

    def with_position(self, position: Sequence[float]) -> DragState:
        """Set the position and return this state for chaining."""
        self._position = _vec2(position)
        return self

    def on_pointer_down(self, x: float, y: float) -> None:
        """Begin a drag at pointer coordinates ``(x, y)``."""
        pointer = (float(x), float(y))
        self._dragging = True
        self._start_pointer = pointer
        self._start_position = self._position
        self._last_pointer = pointer
        self._velocity = (0.0, 0.0)

    def on_pointer_move(self, x: float, y: float, dt: float) -> None:
        """Follow the pointer; ``dt`` is the time since the previous move.

        Moves are ignored unless a drag is in progress.
        """
        if not self._dragging:
            return
        x, y = float(x), float(y)
        candidate = (
            self._start_position[0] + x - self._start_pointer[0],
            self._start_position[1] + y - self._start_pointer[1],
        )
        new_position = self._apply_constraints(candidate)

        if dt > _MIN_DT:
            inst_vx = (x - self._last_pointer[0]) / dt
            inst_vy = (y - self._last_pointer[1]) / dt
            keep = 1.0 - _VELOCITY_SMOOTHING
            self._velocity = (
                _VELOCITY_SMOOTHING * inst_vx + keep * self._velocity[0],
                _VELOCITY_SMOOTHING * inst_vy + keep * self._velocity[1],
            )

        self._position = new_position
        self._last_pointer = (x, y)

    def release(self) -> DragRelease:
        """End the drag and report the final position and velocity."""
        self._dragging = False
        return DragRelease(self._position, self._velocity)

    def _apply_constraints(self, pos: Vec2) -> Vec2:
        x, y = pos
        c = self._constraints

        if c.axis_lock is DragAxis.X:
            y = self._start_position[1]
        elif c.axis_lock is DragAxis.Y:
            x = self._start_position[0]

        if c.bounds is not None:
            min_x, min_y, max_x, max_y = c.bounds
            x = max(min_x, min(max_x, x))
            y = max(min_y, min(max_y, y))

        if c.snap_to_grid is not None:
            grid_x, grid_y = c.snap_to_grid
            if grid_x > 0.0:
                x = _round_half_away(x / grid_x) * grid_x
            if grid_y > 0.0:
                y = _round_half_away(y / grid_y) * grid_y

        return (x, y)
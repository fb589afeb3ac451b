# spanda

Small, dependency-free building blocks for animation in Python:

- **Easing curves** (`spanda.easing_functions`, `spanda.easing`): the classic
  set (quad, cubic, quart, quint, sine, expo, circ, back, elastic, bounce),
  CSS `cubic-bezier()` and `steps()`, and parameterised curves (rough,
  slow-mo, expo-scale, wiggle, custom bounce).
- **Catmull-Rom splines** (`spanda.bezier`) that pass through every point,
  with tension control and tangent/rotation helpers.
- **Clocks** (`spanda.clock`) for wall time, for time you supply yourself, and
  fixed-step clocks that make tests deterministic.
- **Colour types and interpolation** (`spanda.colour`) in sRGB, linear RGB,
  CIE L\*a\*b\* and OKLCh.
- **Drag tracking** (`spanda.drag`) with axis lock, bounds, grid snapping and
  a smoothed velocity.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Easing

```python
from spanda.easing import Easing
from spanda.easing_functions import ease_out_elastic

Easing.EASE_OUT_BOUNCE.apply(0.5)
Easing.from_name("EaseInOutCubic").apply(0.25)
Easing.cubic_bezier(0.25, 0.1, 0.25, 1.0).apply(0.5)   # CSS "ease"
Easing.steps(4).apply(0.3)                              # 0.25
Easing.custom(lambda t: t * t)(0.5)                     # 0.25
Easing.wiggle(3.0, 0.3).apply(0.4)
ease_out_elastic(0.7)
```

`Easing.apply` (and calling an `Easing` directly) clamps its input to
`[0, 1]`. The plain functions in `spanda.easing_functions` do not clamp.
`Easing.all_named()` returns every built-in curve that takes no parameters.
`Easing.steps` and `Easing.rough_ease` reject non-integer or out-of-range
counts and seeds with `TypeError` / `ValueError`.

## Splines

```python
from spanda.bezier import CatmullRomSpline, tangent_angle_deg

spline = CatmullRomSpline([(0, 0), (100, 100), (200, 0)]).with_tension(0.5)
x, y = spline.evaluate((0, 0), 0.5)          # passes through (100, 100)
angle = tangent_angle_deg(spline.tangent((0, 0), 0.25))
spline.point_count(), spline.segment_count()  # 3, 2
```

The first argument to `evaluate` and `tangent` is returned when the spline has
too few points. Negative tension is treated as `0.0` (straight segments).

## Clocks

```python
from spanda.clock import ManualClock, MockClock, WallClock

clock = ManualClock()
clock.advance(0.1)
clock.advance(0.2)
clock.delta()          # 0.3, and the accumulator resets

MockClock(1 / 60).delta()   # always 1/60
WallClock().delta()         # seconds since the previous call
```

All three derive from the abstract `Clock`.

## Colour

```python
from spanda.colour import InLab, Srgba, lerp_in_lab, lerp_in_linear, lerp_in_oklch

red = Srgba(1.0, 0.0, 0.0, 1.0)
blue = Srgba(0.0, 0.0, 1.0, 1.0)

red.lerp(blue, 0.5)             # plain channel-wise blend
lerp_in_lab(red, blue, 0.5)     # perceptually even
lerp_in_oklch(red, blue, 0.5)   # with shortest-arc hue
lerp_in_linear(red, blue, 0.5)  # linear-light blend

InLab(red).lerp(InLab(blue), 0.5).colour
red.to_components()             # [1.0, 0.0, 0.0, 1.0]
Srgba.from_components([0.5, 0.3, 0.8, 1.0])
```

`Srgb`, `LinSrgba`, `LinSrgb`, `Lab`, `Laba`, `Oklch`, `Oklcha` and `Hsla`
also have `lerp`; the hue channels of `Oklch`, `Oklcha` and `Hsla` take the
shortest arc (see `lerp_hue`). The wrappers `InLab`, `InOklch` and
`InLinear` clamp their results to valid sRGB.

## Dragging

```python
from spanda.drag import DragAxis, DragConstraints, DragState

drag = DragState().with_constraints(DragConstraints(axis_lock=DragAxis.X))
drag.on_pointer_down(0, 0)
drag.on_pointer_move(50, 30, 1 / 60)
drag.position            # (50.0, 0.0)
release = drag.release() # DragRelease(position=..., velocity=...)
drag.is_dragging         # False
```

`DragConstraints` also takes `bounds=(min_x, min_y, max_x, max_y)` and
`snap_to_grid=(grid_x, grid_y)`. Moves while no drag is in progress are
ignored.

## What this package does not do

There are no tweens, keyframe tracks, timelines or physics simulations here,
and nothing that runs animations over time for you: you evaluate easings and
splines yourself, driving progress from one of the clocks. `DragState.release`
reports the final position and velocity but does not simulate momentum after
the pointer is let go. There is no command-line tool.
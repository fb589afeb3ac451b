"""Animation building blocks: easing curves, splines, clocks, colour blending and drag tracking."""

__version__ = "0.8.0"

__all__ = ["bezier", "clock", "colour", "drag", "easing", "easing_functions"]
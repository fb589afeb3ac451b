"""The :class:`Easing` value type: every built-in curve plus parameterised ones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional

from spanda import easing_functions as ef

__all__ = ["Easing"]

EasingFunc = Callable[[float], float]

_NAMED: dict[str, EasingFunc] = {
    "Linear": ef.linear,
    "EaseInQuad": ef.ease_in_quad,
    "EaseOutQuad": ef.ease_out_quad,
    "EaseInOutQuad": ef.ease_in_out_quad,
    "EaseInCubic": ef.ease_in_cubic,
    "EaseOutCubic": ef.ease_out_cubic,
    "EaseInOutCubic": ef.ease_in_out_cubic,
    "EaseInQuart": ef.ease_in_quart,
    "EaseOutQuart": ef.ease_out_quart,
    "EaseInOutQuart": ef.ease_in_out_quart,
    "EaseInQuint": ef.ease_in_quint,
    "EaseOutQuint": ef.ease_out_quint,
    "EaseInOutQuint": ef.ease_in_out_quint,
    "EaseInSine": ef.ease_in_sine,
    "EaseOutSine": ef.ease_out_sine,
    "EaseInOutSine": ef.ease_in_out_sine,
    "EaseInExpo": ef.ease_in_expo,
    "EaseOutExpo": ef.ease_out_expo,
    "EaseInOutExpo": ef.ease_in_out_expo,
    "EaseInCirc": ef.ease_in_circ,
    "EaseOutCirc": ef.ease_out_circ,
    "EaseInOutCirc": ef.ease_in_out_circ,
    "EaseInBack": ef.ease_in_back,
    "EaseOutBack": ef.ease_out_back,
    "EaseInOutBack": ef.ease_in_out_back,
    "EaseInElastic": ef.ease_in_elastic,
    "EaseOutElastic": ef.ease_out_elastic,
    "EaseInOutElastic": ef.ease_in_out_elastic,
    "EaseInBounce": ef.ease_in_bounce,
    "EaseOutBounce": ef.ease_out_bounce,
    "EaseInOutBounce": ef.ease_in_out_bounce,
}

_PARAMETRIC: dict[str, Callable[..., float]] = {
    "CubicBezier": ef.cubic_bezier_ease,
    "Steps": ef.steps_ease,
    "RoughEase": ef.rough_ease,
    "SlowMo": ef.slow_mo,
    "ExpoScale": ef.expo_scale,
    "Wiggle": ef.wiggle_ease,
    "CustomBounce": ef.custom_bounce,
}

_CUSTOM = "Custom"


def _constant_name(name: str) -> str:
    """``EaseInOutQuad`` -> ``EASE_IN_OUT_QUAD``."""
    return "".join(
        ("_" + ch if ch.isupper() and i else ch) for i, ch in enumerate(name)
    ).upper()


def _unsigned(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{what} must be in 0..=4294967295, got {value}")
    return value


@dataclass(frozen=True)
class Easing:
    """An easing curve mapping linear progress to curved progress.

    Named curves are available as class attributes (``Easing.EASE_OUT_BOUNCE``);
    parameterised ones come from the static constructors.
    """

    name: str
    params: tuple = ()
    func: Optional[EasingFunc] = field(default=None, repr=False)

    LINEAR: ClassVar[Easing]
    EASE_IN_QUAD: ClassVar[Easing]
    EASE_OUT_QUAD: ClassVar[Easing]
    EASE_IN_OUT_QUAD: ClassVar[Easing]
    EASE_IN_CUBIC: ClassVar[Easing]
    EASE_OUT_CUBIC: ClassVar[Easing]
    EASE_IN_OUT_CUBIC: ClassVar[Easing]
    EASE_IN_QUART: ClassVar[Easing]
    EASE_OUT_QUART: ClassVar[Easing]
    EASE_IN_OUT_QUART: ClassVar[Easing]
    EASE_IN_QUINT: ClassVar[Easing]
    EASE_OUT_QUINT: ClassVar[Easing]
    EASE_IN_OUT_QUINT: ClassVar[Easing]
    EASE_IN_SINE: ClassVar[Easing]
    EASE_OUT_SINE: ClassVar[Easing]
    EASE_IN_OUT_SINE: ClassVar[Easing]
    EASE_IN_EXPO: ClassVar[Easing]
    EASE_OUT_EXPO: ClassVar[Easing]
    EASE_IN_OUT_EXPO: ClassVar[Easing]
    EASE_IN_CIRC: ClassVar[Easing]
    EASE_OUT_CIRC: ClassVar[Easing]
    EASE_IN_OUT_CIRC: ClassVar[Easing]
    EASE_IN_BACK: ClassVar[Easing]
    EASE_OUT_BACK: ClassVar[Easing]
    EASE_IN_OUT_BACK: ClassVar[Easing]
    EASE_IN_ELASTIC: ClassVar[Easing]
    EASE_OUT_ELASTIC: ClassVar[Easing]
    EASE_IN_OUT_ELASTIC: ClassVar[Easing]
    EASE_IN_BOUNCE: ClassVar[Easing]
    EASE_OUT_BOUNCE: ClassVar[Easing]
    EASE_IN_OUT_BOUNCE: ClassVar[Easing]

    def __post_init__(self) -> None:
        if self.name == _CUSTOM:
            if not callable(self.func):
                raise TypeError("a custom easing needs a callable")
        elif self.name in _NAMED:
            if self.params or self.func is not None:
                raise ValueError(f"{self.name} takes no parameters")
        elif self.name not in _PARAMETRIC:
            raise ValueError(f"unknown easing: {self.name!r}")

    def apply(self, t: float) -> float:
        """Evaluate the curve at ``t``, clamped to ``[0, 1]`` first."""
        t = max(0.0, min(1.0, t))
        if self.func is not None:
            return self.func(t)
        named = _NAMED.get(self.name)
        if named is not None:
            return named(t)
        return _PARAMETRIC[self.name](t, *self.params)

    def __call__(self, t: float) -> float:
        return self.apply(t)

    def __repr__(self) -> str:
        if self.func is not None:
            return "Easing.Custom(<fn>)"
        if self.params:
            args = ", ".join(repr(p) for p in self.params)
            return f"Easing.{self.name}({args})"
        return f"Easing.{self.name}"

    # ── Constructors ────────────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str) -> Easing:
        """Look up a named (non-parameterised) curve by its name."""
        if name not in _NAMED:
            raise ValueError(f"unknown named easing: {name!r}")
        return cls(name)

    @staticmethod
    def custom(func: EasingFunc) -> Easing:
        """Wrap a user-supplied function ``t -> value``."""
        return Easing(_CUSTOM, (), func)

    @staticmethod
    def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
        """CSS ``cubic-bezier(x1, y1, x2, y2)``."""
        return Easing("CubicBezier", (float(x1), float(y1), float(x2), float(y2)))

    @staticmethod
    def steps(n: int) -> Easing:
        """CSS ``steps(n)``: ``n`` discrete jumps."""
        return Easing("Steps", (_unsigned(n, "n"),))

    @staticmethod
    def rough_ease(strength: float, points: int, seed: int) -> Easing:
        """Deterministic jitter overlaid on a linear curve."""
        return Easing(
            "RoughEase",
            (float(strength), _unsigned(points, "points"), _unsigned(seed, "seed")),
        )

    @staticmethod
    def slow_mo(ratio: float, power: float, yoyo_mode: bool) -> Easing:
        """Slow-fast-slow piecewise curve."""
        return Easing("SlowMo", (float(ratio), float(power), bool(yoyo_mode)))

    @staticmethod
    def expo_scale(start_scale: float, end_scale: float) -> Easing:
        """Perceptual exponential scale correction."""
        return Easing("ExpoScale", (float(start_scale), float(end_scale)))

    @staticmethod
    def wiggle(frequency: float, amplitude: float) -> Easing:
        """Sinusoidal wiggle around the linear curve."""
        return Easing("Wiggle", (float(frequency), float(amplitude)))

    @staticmethod
    def custom_bounce(strength: float, squash: float) -> Easing:
        """Parametric bounce with configurable decay and squash."""
        return Easing("CustomBounce", (float(strength), float(squash)))

    @staticmethod
    def all_named() -> tuple[Easing, ...]:
        """Every named (non-parameterised, non-custom) curve, in a fixed order."""
        return _ALL_NAMED


_ALL_NAMED: tuple[Easing, ...] = tuple(Easing(name) for name in _NAMED)

for _easing in _ALL_NAMED:
    setattr(Easing, _constant_name(_easing.name), _easing)
del _easing
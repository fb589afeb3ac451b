"""Pure easing functions mapping linear progress ``t`` to a curved output.

Each function expects ``t`` in ``[0.0, 1.0]``. They do not clamp their input;
:class:`spanda.easing.Easing` clamps before dispatching here.
"""

from __future__ import annotations

import math

__all__ = [
    "linear",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_quart",
    "ease_out_quart",
    "ease_in_out_quart",
    "ease_in_quint",
    "ease_out_quint",
    "ease_in_out_quint",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_in_circ",
    "ease_out_circ",
    "ease_in_out_circ",
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
    "ease_in_bounce",
    "ease_out_bounce",
    "ease_in_out_bounce",
    "cubic_bezier_ease",
    "steps_ease",
    "rough_ease",
    "slow_mo",
    "expo_scale",
    "wiggle_ease",
    "custom_bounce",
]

# Overshoot constant for Back easing (~10% pull-back).
_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1.0

# Elastic period constants.
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_ELASTIC_C5 = (2.0 * math.pi) / 4.5

_U32_MASK = 0xFFFFFFFF
_U32_MAX = float(_U32_MASK)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _sqrt(value: float) -> float:
    """Square root returning NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


# ── Linear ──────────────────────────────────────────────────────────────────


def linear(t: float) -> float:
    """Identity: constant speed."""
    return t


# ── Quad ────────────────────────────────────────────────────────────────────


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in: ``t²``."""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out: ``1 - (1-t)²``."""
    return 1.0 - (1.0 - t) * (1.0 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out."""
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


# ── Cubic ───────────────────────────────────────────────────────────────────


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in: ``t³``."""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out: ``1 - (1-t)³``."""
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out."""
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


# ── Quart ───────────────────────────────────────────────────────────────────


def ease_in_quart(t: float) -> float:
    """Quartic ease-in: ``t⁴``."""
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    """Quartic ease-out: ``1 - (1-t)⁴``."""
    return 1.0 - (1.0 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    """Quartic ease-in-out."""
    if t < 0.5:
        return 8.0 * t * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


# ── Quint ───────────────────────────────────────────────────────────────────


def ease_in_quint(t: float) -> float:
    """Quintic ease-in: ``t⁵``."""
    return t * t * t * t * t


def ease_out_quint(t: float) -> float:
    """Quintic ease-out: ``1 - (1-t)⁵``."""
    return 1.0 - (1.0 - t) ** 5


def ease_in_out_quint(t: float) -> float:
    """Quintic ease-in-out."""
    if t < 0.5:
        return 16.0 * t * t * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


# ── Sine ────────────────────────────────────────────────────────────────────


def ease_in_sine(t: float) -> float:
    """Sinusoidal ease-in."""
    return 1.0 - math.cos(t * math.pi / 2.0)


def ease_out_sine(t: float) -> float:
    """Sinusoidal ease-out."""
    return math.sin(t * math.pi / 2.0)


def ease_in_out_sine(t: float) -> float:
    """Sinusoidal ease-in-out."""
    return -(math.cos(math.pi * t) - 1.0) / 2.0


# ── Expo ────────────────────────────────────────────────────────────────────


def ease_in_expo(t: float) -> float:
    """Exponential ease-in."""
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * t - 10.0)


def ease_out_expo(t: float) -> float:
    """Exponential ease-out."""
    if t == 1.0:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def ease_in_out_expo(t: float) -> float:
    """Exponential ease-in-out."""
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


# ── Circ ────────────────────────────────────────────────────────────────────


def ease_in_circ(t: float) -> float:
    """Circular ease-in."""
    return 1.0 - _sqrt(1.0 - t * t)


def ease_out_circ(t: float) -> float:
    """Circular ease-out."""
    return _sqrt(1.0 - (t - 1.0) ** 2)


def ease_in_out_circ(t: float) -> float:
    """Circular ease-in-out."""
    if t < 0.5:
        return (1.0 - _sqrt(1.0 - (2.0 * t) ** 2)) / 2.0
    return (_sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) / 2.0


# ── Back ────────────────────────────────────────────────────────────────────


def ease_in_back(t: float) -> float:
    """Back ease-in: pulls back before moving forward."""
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def ease_out_back(t: float) -> float:
    """Back ease-out: overshoots, then settles."""
    u = t - 1.0
    return 1.0 + _BACK_C3 * u * u * u + _BACK_C1 * u * u


def ease_in_out_back(t: float) -> float:
    """Back ease-in-out."""
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((_BACK_C2 + 1.0) * 2.0 * t - _BACK_C2)) / 2.0
    return (
        (2.0 * t - 2.0) ** 2 * ((_BACK_C2 + 1.0) * (t * 2.0 - 2.0) + _BACK_C2) + 2.0
    ) / 2.0


# ── Elastic ─────────────────────────────────────────────────────────────────


def ease_in_elastic(t: float) -> float:
    """Elastic ease-in."""
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((10.0 * t - 10.75) * _ELASTIC_C4)


def ease_out_elastic(t: float) -> float:
    """Elastic ease-out."""
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return 2.0 ** (-10.0 * t) * math.sin((10.0 * t - 0.75) * _ELASTIC_C4) + 1.0


def ease_in_out_elastic(t: float) -> float:
    """Elastic ease-in-out."""
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    wave = math.sin((20.0 * t - 11.125) * _ELASTIC_C5)
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * wave) / 2.0
    return 2.0 ** (-20.0 * t + 10.0) * wave / 2.0 + 1.0


# ── Bounce ──────────────────────────────────────────────────────────────────


def ease_out_bounce(t: float) -> float:
    """Bounce ease-out: a ball bouncing to rest."""
    n = 7.5625
    d = 2.75
    if t < 1.0 / d:
        return n * t * t
    if t < 2.0 / d:
        u = t - 1.5 / d
        return n * u * u + 0.75
    if t < 2.5 / d:
        u = t - 2.25 / d
        return n * u * u + 0.9375
    u = t - 2.625 / d
    return n * u * u + 0.984375


def ease_in_bounce(t: float) -> float:
    """Bounce ease-in."""
    return 1.0 - ease_out_bounce(1.0 - t)


def ease_in_out_bounce(t: float) -> float:
    """Bounce ease-in-out."""
    if t < 0.5:
        return (1.0 - ease_out_bounce(1.0 - 2.0 * t)) / 2.0
    return (1.0 + ease_out_bounce(2.0 * t - 1.0)) / 2.0


# ── CSS cubic-bezier() ──────────────────────────────────────────────────────


def _sample_bezier(u: float, c1: float, c2: float) -> float:
    inv = 1.0 - u
    return 3.0 * inv * inv * u * c1 + 3.0 * inv * u * u * c2 + u * u * u


def _sample_bezier_derivative(u: float, c1: float, c2: float) -> float:
    inv = 1.0 - u
    return 3.0 * inv * inv * c1 + 6.0 * inv * u * (c2 - c1) + 3.0 * u * u * (1.0 - c2)


def cubic_bezier_ease(t: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Evaluate CSS ``cubic-bezier(x1, y1, x2, y2)`` at progress ``t``.

    Solves ``x(u) = t`` with Newton-Raphson, falling back to bisection, then
    returns ``y(u)``.
    """
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0

    u = t
    for _ in range(8):
        x = _sample_bezier(u, x1, x2) - t
        dx = _sample_bezier_derivative(u, x1, x2)
        if abs(dx) < 1e-10:
            break
        u = _clamp(u - x / dx, 0.0, 1.0)

    if abs(_sample_bezier(u, x1, x2) - t) > 1e-6:
        lo, hi = 0.0, 1.0
        u = t
        for _ in range(20):
            x_val = _sample_bezier(u, x1, x2) - t
            if abs(x_val) < 1e-7:
                break
            if x_val > 0.0:
                hi = u
            else:
                lo = u
            u = (lo + hi) * 0.5

    return _sample_bezier(u, y1, y2)


# ── CSS steps() ─────────────────────────────────────────────────────────────


def steps_ease(t: float, n: int) -> float:
    """Evaluate CSS ``steps(n)``: snap progress to ``n`` discrete jumps."""
    if n == 0 or t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return math.floor(t * n) / n


# ── Advanced parameterised easings ─────────────────────────────────────────


def _noise_at(i: int, seed: int) -> float:
    """Deterministic 32-bit hash noise in ``[-1, 1]``."""
    h = (i * 2654435761 + seed * 2246822519) & _U32_MASK
    h ^= h >> 16
    h = (h * 0x45D9F3B) & _U32_MASK
    h ^= h >> 16
    return (h / _U32_MAX) * 2.0 - 1.0


def rough_ease(t: float, strength: float, points: int, seed: int) -> float:
    """Linear curve with deterministic interpolated noise overlaid."""
    if points == 0 or strength == 0.0:
        return t
    scaled = t * points
    idx = min(int(scaled) if scaled > 0.0 else 0, points - 1)
    frac = scaled - idx

    n0 = _noise_at(idx, seed)
    n1 = _noise_at(idx + 1, seed) if idx + 1 < points else 0.0
    noise = n0 + (n1 - n0) * frac
    return _clamp(t + noise * strength, 0.0, 1.0)


def slow_mo(t: float, ratio: float, power: float, yoyo_mode: bool) -> float:
    """Slow-fast-slow piecewise curve; mirrored when ``yoyo_mode`` is set."""
    if yoyo_mode and t > 0.5:
        t = 1.0 - t
    ratio = _clamp(ratio, 0.0, 1.0)
    half_ratio = ratio * 0.5
    slow_end = 1.0 - half_ratio
    exponent = max(power, 0.01)

    if t < half_ratio:
        local = t / half_ratio
        return half_ratio * local ** (1.0 / exponent)
    if t > slow_end:
        local = (t - slow_end) / half_ratio
        return slow_end + (1.0 - slow_end) * local**exponent
    return t


def expo_scale(t: float, start_scale: float, end_scale: float) -> float:
    """Exponential scale correction, normalised to ``[0, 1]``."""
    start = max(start_scale, 0.001)
    end = max(end_scale, 0.001)
    if abs(start - end) < 1e-10:
        return t
    ratio = end / start
    return (start * ratio**t - start) / (end - start)


def wiggle_ease(t: float, frequency: float, amplitude: float) -> float:
    """Sinusoidal oscillation around the linear curve, clamped to ``[0, 1]``."""
    return _clamp(t + amplitude * math.sin(frequency * 2.0 * math.pi * t), 0.0, 1.0)


def custom_bounce(t: float, strength: float, squash: float) -> float:
    """Parametric bounce with configurable decay ``strength`` and ``squash``."""
    if t == 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    strength = _clamp(strength, 0.01, 1.0)
    bounces = max(math.ceil(1.0 / strength), 2)

    seg_start = 0.0
    seg_width = 1.0
    for _ in range(bounces):
        seg_end = seg_start + seg_width
        if t < seg_end or seg_width < 0.001:
            local = (t - seg_start) / seg_width
            if squash > 0.0:
                squashed = _clamp(0.5 + (local - 0.5) * (1.0 + squash), 0.0, 1.0)
            else:
                squashed = local
            height = 1.0 if seg_start == 0.0 else seg_width * 4.0
            arc = 4.0 * squashed * (1.0 - squashed)
            return _clamp(1.0 - min(height, 1.0) * (1.0 - arc), 0.0, 1.0)
        seg_start += seg_width
        seg_width *= strength

    return 1.0
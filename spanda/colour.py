"""Colour types and colour-space-aware interpolation.

The plain colour types (:class:`Srgba`, :class:`Lab`, :class:`Oklch`, ...)
interpolate channel by channel; hue channels take the shortest arc. The
wrappers :class:`InLab`, :class:`InOklch` and :class:`InLinear` hold an sRGB
colour but interpolate in another space, which avoids the dull, dark
midpoints of naive sRGB blending.
"""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, fields
from typing import Any, Sequence

__all__ = [
    "Srgba",
    "Srgb",
    "LinSrgba",
    "LinSrgb",
    "Lab",
    "Laba",
    "Oklch",
    "Oklcha",
    "Hsla",
    "InLab",
    "InOklch",
    "InLinear",
    "lerp_hue",
    "lerp_in_lab",
    "lerp_in_oklch",
    "lerp_in_linear",
]


def _mix(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _positive_degrees(hue: float) -> float:
    return hue % 360.0


def lerp_hue(a: float, b: float, t: float) -> float:
    """Interpolate two hues in degrees along the shortest arc, into ``[0, 360)``."""
    diff = b - a
    if diff > 180.0:
        diff -= 360.0
    if diff < -180.0:
        diff += 360.0
    return (a + diff * t) % 360.0


def _check_length(components: Sequence[float], count: int, name: str) -> list[float]:
    values = [float(c) for c in components]
    if len(values) != count:
        raise ValueError(f"{name} needs {count} components, got {len(values)}")
    return values


def _lerp_channels(a: Any, b: Any, t: float) -> Any:
    return type(a)(*(_mix(x, y, t) for x, y in zip(astuple(a), astuple(b))))


def _channels(colour: Any) -> list[float]:
    return [float(v) for v in astuple(colour)]


def _build(cls: type, components: Sequence[float]) -> Any:
    return cls(*_check_length(components, len(fields(cls)), cls.__name__))


# ── RGB ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Srgba:
    """Gamma-encoded sRGB with alpha, channels nominally in ``[0, 1]``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def lerp(self, other: Srgba, t: float) -> Srgba:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> Srgba:
        """Build a colour from four channel values."""
        return _build(cls, components)

    def clamped(self) -> Srgba:
        """All channels clamped to ``[0, 1]``."""
        return Srgba(*(_clamp01(v) for v in astuple(self)))


@dataclass(frozen=True)
class Srgb:
    """Gamma-encoded sRGB without alpha."""

    red: float
    green: float
    blue: float

    def lerp(self, other: Srgb, t: float) -> Srgb:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> Srgb:
        """Build a colour from three channel values."""
        return _build(cls, components)


@dataclass(frozen=True)
class LinSrgba:
    """Linear-light sRGB with alpha."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def lerp(self, other: LinSrgba, t: float) -> LinSrgba:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> LinSrgba:
        """Build a colour from four channel values."""
        return _build(cls, components)

    @classmethod
    def from_srgba(cls, colour: Srgba) -> LinSrgba:
        """Decode the sRGB transfer curve."""
        return cls(
            _decode(colour.red), _decode(colour.green), _decode(colour.blue), colour.alpha
        )

    def to_srgba(self) -> Srgba:
        """Encode with the sRGB transfer curve."""
        return Srgba(_encode(self.red), _encode(self.green), _encode(self.blue), self.alpha)


@dataclass(frozen=True)
class LinSrgb:
    """Linear-light sRGB without alpha."""

    red: float
    green: float
    blue: float

    def lerp(self, other: LinSrgb, t: float) -> LinSrgb:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> LinSrgb:
        """Build a colour from three channel values."""
        return _build(cls, components)


def _decode(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _encode(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1.0 / 2.4) - 0.055


# ── CIE L*a*b* (D65) ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Lab:
    """CIE L*a*b* colour (D65 white point)."""

    l: float  # noqa: E741
    a: float
    b: float

    def lerp(self, other: Lab, t: float) -> Lab:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> Lab:
        """Build a colour from three channel values."""
        return _build(cls, components)


@dataclass(frozen=True)
class Laba:
    """CIE L*a*b* colour with alpha (D65 white point)."""

    l: float  # noqa: E741
    a: float
    b: float
    alpha: float = 1.0

    def lerp(self, other: Laba, t: float) -> Laba:
        """Channel-wise linear interpolation towards ``other``."""
        return _lerp_channels(self, other, t)

    def to_components(self) -> list[float]:
        """The channels as a flat list of floats."""
        return _channels(self)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> Laba:
        """Build a colour from four channel values."""
        return _build(cls, components)

    @classmethod
    def from_srgba(cls, colour: Srgba) -> Laba:
        """Convert from sRGB."""
        lin = LinSrgba.from_srgba(colour)
        x, y, z = _linear_to_xyz(lin.red, lin.green, lin.blue)
        fx = _lab_f(x / _WHITE[0])
        fy = _lab_f(y / _WHITE[1])
        fz = _lab_f(z / _WHITE[2])
        return cls(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz), colour.alpha)

    def to_srgba(self) -> Srgba:
        """Convert to sRGB (not clamped)."""
        fy = (self.l + 16.0) / 116.0
        fx = fy + self.a / 500.0
        fz = fy - self.b / 200.0
        xr = fx**3 if fx**3 > _EPSILON else (116.0 * fx - 16.0) / _KAPPA
        yr = fy**3 if self.l > _KAPPA * _EPSILON else self.l / _KAPPA
        zr = fz**3 if fz**3 > _EPSILON else (116.0 * fz - 16.0) / _KAPPA
        r, g, b = _xyz_to_linear(xr * _WHITE[0], yr * _WHITE[1], zr * _WHITE[2])
        return LinSrgba(r, g, b, self.alpha).to_srgba()


_WHITE = (0.95047, 1.0, 1.08883)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _lab_f(t: float) -> float:
    return _cbrt(t) if t > _EPSILON else (_KAPPA * t + 16.0) / 116.0


def _linear_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    return (
        0.4124564 * r + 0.3575761 * g + 0.1804375 * b,
        0.2126729 * r + 0.7151522 * g + 0.0721750 * b,
        0.0193339 * r + 0.1191920 * g + 0.9503041 * b,
    )


def _xyz_to_linear(x: float, y: float, z: float) -> tuple[float, float, float]:
    return (
        3.2404542 * x - 1.5371385 * y - 0.4985314 * z,
        -0.9692660 * x + 1.8760108 * y + 0.0415560 * z,
        0.0556434 * x - 0.2040259 * y + 1.0572252 * z,
    )


# ── OKLCh ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Oklch:
    """OKLCh colour: lightness, chroma and hue in degrees."""

    l: float  # noqa: E741
    chroma: float
    hue: float

    def lerp(self, other: Oklch, t: float) -> Oklch:
        """Interpolate; the hue takes the shortest arc."""
        return Oklch(
            _mix(self.l, other.l, t),
            _mix(self.chroma, other.chroma, t),
            lerp_hue(_positive_degrees(self.hue), _positive_degrees(other.hue), t),
        )


@dataclass(frozen=True)
class Oklcha:
    """OKLCh colour with alpha."""

    l: float  # noqa: E741
    chroma: float
    hue: float
    alpha: float = 1.0

    def lerp(self, other: Oklcha, t: float) -> Oklcha:
        """Interpolate; the hue takes the shortest arc."""
        return Oklcha(
            _mix(self.l, other.l, t),
            _mix(self.chroma, other.chroma, t),
            lerp_hue(_positive_degrees(self.hue), _positive_degrees(other.hue), t),
            _mix(self.alpha, other.alpha, t),
        )

    @classmethod
    def from_srgba(cls, colour: Srgba) -> Oklcha:
        """Convert from sRGB."""
        lin = LinSrgba.from_srgba(colour)
        r, g, b = lin.red, lin.green, lin.blue
        l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
        m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
        s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
        lightness = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
        a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
        bb = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
        hue = _positive_degrees(math.degrees(math.atan2(bb, a)))
        return cls(lightness, math.hypot(a, bb), hue, colour.alpha)

    def to_srgba(self) -> Srgba:
        """Convert to sRGB (not clamped)."""
        h = math.radians(self.hue)
        a = self.chroma * math.cos(h)
        b = self.chroma * math.sin(h)
        l_ = self.l + 0.3963377774 * a + 0.2158037573 * b
        m_ = self.l - 0.1055613458 * a - 0.0638541728 * b
        s_ = self.l - 0.0894841775 * a - 1.2914855480 * b
        lc, mc, sc = l_**3, m_**3, s_**3
        return LinSrgba(
            4.0767416621 * lc - 3.3077115913 * mc + 0.2309699292 * sc,
            -1.2684380046 * lc + 2.6097574011 * mc - 0.3413193965 * sc,
            -0.0041960863 * lc - 0.7034186147 * mc + 1.7076147010 * sc,
            self.alpha,
        ).to_srgba()


# ── HSL ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Hsla:
    """HSL colour with alpha; hue in degrees."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def lerp(self, other: Hsla, t: float) -> Hsla:
        """Interpolate; the hue takes the shortest arc."""
        return Hsla(
            lerp_hue(_positive_degrees(self.hue), _positive_degrees(other.hue), t),
            _mix(self.saturation, other.saturation, t),
            _mix(self.lightness, other.lightness, t),
            _mix(self.alpha, other.alpha, t),
        )


# ── Colour-space-aware wrappers ─────────────────────────────────────────────


@dataclass(frozen=True)
class InLab:
    """An sRGB colour that interpolates in CIE L*a*b* space."""

    colour: Srgba

    def lerp(self, other: InLab, t: float) -> InLab:
        """Interpolate in Lab; the result is clamped to valid sRGB."""
        a = Laba.from_srgba(self.colour)
        b = Laba.from_srgba(other.colour)
        return InLab(a.lerp(b, t).to_srgba().clamped())

    def to_components(self) -> list[float]:
        """The wrapped sRGB channels as a flat list."""
        return self.colour.to_components()

    @classmethod
    def from_components(cls, components: Sequence[float]) -> InLab:
        """Wrap an sRGB colour built from four channel values."""
        return cls(Srgba.from_components(components))


@dataclass(frozen=True)
class InOklch:
    """An sRGB colour that interpolates in OKLCh space with shortest-arc hue."""

    colour: Srgba

    def lerp(self, other: InOklch, t: float) -> InOklch:
        """Interpolate in OKLCh; the result is clamped to valid sRGB."""
        a = Oklcha.from_srgba(self.colour)
        b = Oklcha.from_srgba(other.colour)
        return InOklch(a.lerp(b, t).to_srgba().clamped())

    def to_components(self) -> list[float]:
        """The wrapped sRGB channels as a flat list."""
        return self.colour.to_components()

    @classmethod
    def from_components(cls, components: Sequence[float]) -> InOklch:
        """Wrap an sRGB colour built from four channel values."""
        return cls(Srgba.from_components(components))


@dataclass(frozen=True)
class InLinear:
    """An sRGB colour that interpolates in linear-light RGB."""

    colour: Srgba

    def lerp(self, other: InLinear, t: float) -> InLinear:
        """Interpolate in linear RGB; the result is clamped to valid sRGB."""
        a = LinSrgba.from_srgba(self.colour)
        b = LinSrgba.from_srgba(other.colour)
        return InLinear(a.lerp(b, t).to_srgba().clamped())

    def to_components(self) -> list[float]:
        """The wrapped sRGB channels as a flat list."""
        return self.colour.to_components()

    @classmethod
    def from_components(cls, components: Sequence[float]) -> InLinear:
        """Wrap an sRGB colour built from four channel values."""
        return cls(Srgba.from_components(components))


# ── Convenience functions ───────────────────────────────────────────────────


def lerp_in_lab(a: Srgba, b: Srgba, t: float) -> Srgba:
    """Interpolate two sRGB colours in CIE L*a*b* space."""
    return InLab(a).lerp(InLab(b), t).colour


def lerp_in_oklch(a: Srgba, b: Srgba, t: float) -> Srgba:
    """Interpolate two sRGB colours in OKLCh space."""
    return InOklch(a).lerp(InOklch(b), t).colour


def lerp_in_linear(a: Srgba, b: Srgba, t: float) -> Srgba:
    """Interpolate two sRGB colours in linear RGB space."""
    return InLinear(a).lerp(InLinear(b), t).colour
import pytest

from spanda.colour import (
    Hsla,
    InLab,
    InLinear,
    InOklch,
    Lab,
    Laba,
    LinSrgba,
    Oklch,
    Oklcha,
    Srgb,
    Srgba,
    lerp_hue,
    lerp_in_lab,
    lerp_in_linear,
    lerp_in_oklch,
)

RED = Srgba(1.0, 0.0, 0.0, 1.0)
BLUE = Srgba(0.0, 0.0, 1.0, 1.0)
CYAN = Srgba(0.0, 1.0, 1.0, 1.0)


def _diff(a, b):
    return abs(a.red - b.red) + abs(a.green - b.green) + abs(a.blue - b.blue)


def test_srgba_lerp_endpoints():
    start = RED.lerp(BLUE, 0.0)
    assert start.red == pytest.approx(1.0, abs=1e-6)
    assert start.blue == pytest.approx(0.0, abs=1e-6)
    end = RED.lerp(BLUE, 1.0)
    assert end.red == pytest.approx(0.0, abs=1e-6)
    assert end.blue == pytest.approx(1.0, abs=1e-6)


def test_srgba_lerp_midpoint():
    mid = Srgba(0.0, 0.0, 0.0, 1.0).lerp(Srgba(1.0, 1.0, 1.0, 1.0), 0.5)
    assert (mid.red, mid.green, mid.blue) == pytest.approx((0.5, 0.5, 0.5), abs=1e-6)


def test_srgba_alpha_interpolation():
    mid = Srgba(1.0, 0.0, 0.0, 0.0).lerp(Srgba(1.0, 0.0, 0.0, 1.0), 0.5)
    assert mid.alpha == pytest.approx(0.5, abs=1e-6)


def test_srgb_lerp_midpoint():
    mid = Srgb(0.0, 0.0, 0.0).lerp(Srgb(1.0, 1.0, 1.0), 0.5)
    assert mid.red == pytest.approx(0.5, abs=1e-6)


def test_lab_lerp_midpoint():
    mid = Lab(0.0, -50.0, -50.0).lerp(Lab(100.0, 50.0, 50.0), 0.5)
    assert mid.l == pytest.approx(50.0, abs=1e-4)
    assert mid.a == pytest.approx(0.0, abs=1e-4)


def test_laba_lerp_alpha():
    mid = Laba(0.0, 0.0, 0.0, 0.0).lerp(Laba(100.0, 10.0, -10.0, 1.0), 0.5)
    assert (mid.l, mid.a, mid.b, mid.alpha) == pytest.approx((50.0, 5.0, -5.0, 0.5))


def test_lerp_hue_shortest_arc():
    result = lerp_hue(350.0, 10.0, 0.5)
    assert result == pytest.approx(0.0, abs=1e-4) or result == pytest.approx(360.0, abs=1e-4)


def test_lerp_hue_normal():
    assert lerp_hue(0.0, 90.0, 0.5) == pytest.approx(45.0, abs=1e-4)


def test_lerp_hue_wrap_backward():
    result = lerp_hue(10.0, 350.0, 0.5)
    assert result == pytest.approx(0.0, abs=1e-4) or result == pytest.approx(360.0, abs=1e-4)


def test_oklch_lerp_wraps_hue():
    mid = Oklch(0.5, 0.1, 340.0).lerp(Oklch(0.7, 0.3, 20.0), 0.5)
    assert (mid.l, mid.chroma) == pytest.approx((0.6, 0.2))
    assert mid.hue == pytest.approx(0.0, abs=1e-9) or mid.hue == pytest.approx(360.0)


def test_oklcha_lerp_negative_hue_is_normalised():
    mid = Oklcha(0.5, 0.1, -30.0, 0.0).lerp(Oklcha(0.5, 0.1, 30.0, 1.0), 0.5)
    assert mid.hue == pytest.approx(0.0, abs=1e-9) or mid.hue == pytest.approx(360.0)
    assert mid.alpha == pytest.approx(0.5)


def test_hsla_lerp():
    mid = Hsla(300.0, 0.0, 0.2, 1.0).lerp(Hsla(60.0, 1.0, 0.8, 0.0), 0.5)
    assert mid.hue == pytest.approx(0.0, abs=1e-9) or mid.hue == pytest.approx(360.0)
    assert (mid.saturation, mid.lightness, mid.alpha) == pytest.approx((0.5, 0.5, 0.5))


def test_in_lab_midpoint_differs_from_srgb():
    assert _diff(RED.lerp(CYAN, 0.5), lerp_in_lab(RED, CYAN, 0.5)) > 0.01


def test_in_lab_endpoints_preserved():
    start = InLab(RED).lerp(InLab(BLUE), 0.0)
    assert start.colour.red == pytest.approx(1.0, abs=1e-3)
    end = InLab(RED).lerp(InLab(BLUE), 1.0)
    assert end.colour.blue == pytest.approx(1.0, abs=1e-3)


def test_in_lab_result_is_valid_srgb():
    for i in range(11):
        c = lerp_in_lab(RED, BLUE, i / 10)
        assert all(0.0 <= v <= 1.0 for v in (c.red, c.green, c.blue, c.alpha))


def test_in_oklch_midpoint_differs_from_srgb():
    assert _diff(RED.lerp(BLUE, 0.5), lerp_in_oklch(RED, BLUE, 0.5)) > 0.01


def test_in_oklch_endpoints_preserved():
    end = InOklch(RED).lerp(InOklch(CYAN), 1.0)
    assert (end.colour.red, end.colour.green, end.colour.blue) == pytest.approx(
        (0.0, 1.0, 1.0), abs=1e-3
    )


def test_in_linear_endpoints_preserved():
    green = Srgba(0.0, 1.0, 0.0, 1.0)
    start = InLinear(RED).lerp(InLinear(green), 0.0)
    assert start.colour.red == pytest.approx(1.0, abs=1e-3)
    end = InLinear(RED).lerp(InLinear(green), 1.0)
    assert end.colour.green == pytest.approx(1.0, abs=1e-3)


def test_in_linear_midpoint_brighter_than_srgb():
    black = Srgba(0.0, 0.0, 0.0, 1.0)
    white = Srgba(1.0, 1.0, 1.0, 1.0)
    mid = lerp_in_linear(black, white, 0.5)
    assert mid.red > 0.7


def test_lab_known_values():
    white = Laba.from_srgba(Srgba(1.0, 1.0, 1.0, 1.0))
    assert (white.l, white.a, white.b) == pytest.approx((100.0, 0.0, 0.0), abs=1e-2)
    red = Laba.from_srgba(RED)
    assert (red.l, red.a, red.b) == pytest.approx((53.24, 80.09, 67.20), abs=0.05)


def test_oklch_known_values():
    red = Oklcha.from_srgba(RED)
    assert (red.l, red.chroma, red.hue) == pytest.approx((0.628, 0.2577, 29.23), abs=5e-3)


@pytest.mark.parametrize("colour", [Srgba(0.2, 0.7, 0.4, 0.9), Srgba(0.9, 0.1, 0.5, 1.0)])
def test_conversion_round_trips(colour):
    for back in (
        Laba.from_srgba(colour).to_srgba(),
        Oklcha.from_srgba(colour).to_srgba(),
        LinSrgba.from_srgba(colour).to_srgba(),
    ):
        assert (back.red, back.green, back.blue, back.alpha) == pytest.approx(
            (colour.red, colour.green, colour.blue, colour.alpha), abs=1e-4
        )


def test_srgba_spring_animatable_roundtrip():
    components = Srgba(0.5, 0.3, 0.8, 1.0).to_components()
    assert len(components) == 4
    rebuilt = Srgba.from_components(components)
    assert (rebuilt.red, rebuilt.green, rebuilt.blue) == pytest.approx((0.5, 0.3, 0.8))


def test_srgb_components_roundtrip():
    c = Srgb(0.1, 0.2, 0.3)
    assert Srgb.from_components(c.to_components()) == c


def test_in_lab_spring_animatable_roundtrip():
    components = InLab(Srgba(0.2, 0.7, 0.4, 0.9)).to_components()
    assert len(components) == 4
    rebuilt = InLab.from_components(components)
    assert rebuilt.colour.red == pytest.approx(0.2, abs=1e-6)


def test_from_components_wrong_length_raises():
    with pytest.raises(ValueError):
        Srgba.from_components([0.1, 0.2])
import pytest

from spanda.easing import Easing

NAMED_COUNT = 31


def _name_of(index):
    return Easing.all_named()[index].name


def test_all_named_has_every_builtin_curve():
    named = Easing.all_named()
    assert len(named) == NAMED_COUNT
    assert len({e.name for e in named}) == NAMED_COUNT
    assert named[0] == Easing.LINEAR
    assert named[-1] == Easing.EASE_IN_OUT_BOUNCE


@pytest.mark.parametrize("index", range(NAMED_COUNT), ids=_name_of)
def test_endpoints_for_all_named(index):
    easing = Easing.all_named()[index]
    assert abs(Easing.all_named()[index].apply(0.0)) < 1e-5
    assert abs(easing.apply(1.0) - 1.0) < 1e-5


@pytest.mark.parametrize("index", range(NAMED_COUNT), ids=_name_of)
def test_input_is_clamped(index):
    easing = Easing.all_named()[index]
    assert Easing.all_named()[index].apply(-0.5) == easing.apply(0.0)
    assert easing.apply(1.5) == easing.apply(1.0)


@pytest.mark.parametrize("index", range(NAMED_COUNT), ids=_name_of)
def test_names_are_non_empty_and_roundtrip(index):
    easing = Easing.all_named()[index]
    assert easing.name
    assert Easing.from_name(easing.name) == easing


def test_linear_is_identity():
    for i in range(11):
        t = i / 10
        assert abs(Easing.LINEAR.apply(t) - t) < 1e-7


def test_ease_in_out_cubic_is_symmetric():
    e = Easing.EASE_IN_OUT_CUBIC
    for i in range(1, 10):
        t = i / 10
        assert abs(e.apply(t) - (1.0 - e.apply(1.0 - t))) < 1e-6


def test_bounce_out_midpoint_is_above_half():
    assert Easing.EASE_OUT_BOUNCE.apply(0.5) > 0.5


def test_custom_easing_works():
    e = Easing.custom(lambda t: t * t)
    assert abs(e.apply(0.5) - 0.25) < 1e-7
    assert e.name == "Custom"


def test_custom_receives_clamped_input():
    e = Easing.custom(lambda t: t)
    assert e.apply(2.0) == 1.0
    assert e.apply(-1.0) == 0.0


def test_custom_equality_by_function_identity():
    def square(t):
        return t * t

    assert Easing.custom(square) == Easing.custom(square)
    assert Easing.custom(square) != Easing.custom(lambda t: t * t)


def test_custom_requires_callable():
    with pytest.raises(TypeError):
        Easing.custom(3)


def test_cubic_bezier_endpoints():
    e = Easing.cubic_bezier(0.25, 0.1, 0.25, 1.0)
    assert abs(e.apply(0.0)) < 1e-6
    assert abs(e.apply(1.0) - 1.0) < 1e-6


def test_cubic_bezier_css_ease():
    assert Easing.cubic_bezier(0.25, 0.1, 0.25, 1.0).apply(0.5) > 0.5


def test_cubic_bezier_linear_equivalent():
    lin = Easing.cubic_bezier(0.0, 0.0, 1.0, 1.0)
    for i in range(11):
        t = i / 10
        assert abs(lin.apply(t) - t) < 0.02


def test_cubic_bezier_ease_in_out():
    assert abs(Easing.cubic_bezier(0.42, 0.0, 0.58, 1.0).apply(0.5) - 0.5) < 0.05


def test_steps_basic():
    s = Easing.steps(4)
    expected = {0.0: 0.0, 0.1: 0.0, 0.3: 0.25, 0.5: 0.5, 0.8: 0.75, 1.0: 1.0}
    for t, value in expected.items():
        assert abs(s.apply(t) - value) < 1e-6


def test_steps_one():
    s = Easing.steps(1)
    assert abs(s.apply(0.0)) < 1e-6
    assert abs(s.apply(0.5)) < 1e-6
    assert abs(s.apply(1.0) - 1.0) < 1e-6


def test_steps_zero_returns_zero():
    assert abs(Easing.steps(0).apply(0.5)) < 1e-6


def test_steps_rejects_negative():
    with pytest.raises(ValueError):
        Easing.steps(-1)


def test_rough_ease_rejects_non_integer_points():
    with pytest.raises(TypeError):
        Easing.rough_ease(0.5, 2.5, 1)


def test_rough_ease_endpoints():
    e = Easing.rough_ease(0.5, 20, 42)
    assert abs(e.apply(0.0)) < 1e-5
    assert abs(e.apply(1.0) - 1.0) < 1e-5


def test_rough_ease_zero_strength_is_linear():
    e = Easing.rough_ease(0.0, 20, 42)
    for i in range(11):
        t = i / 10
        assert abs(e.apply(t) - t) < 1e-6


def test_rough_ease_is_deterministic():
    a = Easing.rough_ease(0.3, 10, 7)
    b = Easing.rough_ease(0.3, 10, 7)
    assert [a.apply(i / 20) for i in range(21)] == [b.apply(i / 20) for i in range(21)]


def test_slow_mo_endpoints():
    e = Easing.slow_mo(0.7, 0.7, False)
    assert abs(e.apply(0.0)) < 1e-5
    assert abs(e.apply(1.0) - 1.0) < 1e-5


def test_expo_scale_endpoints():
    e = Easing.expo_scale(1.0, 10.0)
    assert abs(e.apply(0.0)) < 1e-5
    assert abs(e.apply(1.0) - 1.0) < 1e-5


def test_expo_scale_equal_scales_is_linear():
    e = Easing.expo_scale(5.0, 5.0)
    for i in range(11):
        t = i / 10
        assert abs(e.apply(t) - t) < 1e-5


def test_wiggle_zero_amplitude_is_linear():
    e = Easing.wiggle(5.0, 0.0)
    for i in range(11):
        t = i / 10
        assert abs(e.apply(t) - t) < 1e-6


def test_wiggle_endpoints():
    e = Easing.wiggle(3.0, 0.3)
    assert abs(e.apply(0.0)) < 1e-5
    assert abs(e.apply(1.0) - 1.0) < 1e-2


def test_custom_bounce_endpoints():
    e = Easing.custom_bounce(0.5, 0.0)
    assert abs(e.apply(0.0)) < 1e-5
    assert abs(e.apply(1.0) - 1.0) < 1e-5


def test_parametric_equality_compares_params():
    assert Easing.steps(4) == Easing.steps(4)
    assert Easing.steps(4) != Easing.steps(5)
    assert Easing.wiggle(3.0, 0.3) == Easing.wiggle(3.0, 0.3)
    assert Easing.wiggle(3.0, 0.3) != Easing.expo_scale(3.0, 0.3)


def test_named_equality():
    assert Easing.EASE_IN_QUAD == Easing.from_name("EaseInQuad")
    assert Easing.EASE_IN_QUAD != Easing.EASE_OUT_QUAD


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        Easing("NoSuchCurve")
    with pytest.raises(ValueError):
        Easing.from_name("Steps")


def test_repr_forms():
    assert repr(Easing.LINEAR) == "Easing.Linear"
    assert repr(Easing.steps(3)) == "Easing.Steps(3)"
    assert repr(Easing.custom(lambda t: t)) == "Easing.Custom(<fn>)"


def test_callable_matches_apply():
    e = Easing.EASE_OUT_CUBIC
    assert e(0.3) == e.apply(0.3)
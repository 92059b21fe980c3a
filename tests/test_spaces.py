import dataclasses

import pytest

from pastel.color import Color
from pastel.helper import Fraction
from pastel.spaces import CMYK, HSLA, LMS, RGBA, XYZ, Format, LCh, Lab


def test_format_controls_spacing():
    color = Color.from_rgb(255, 127, 4)
    assert color.to_rgb_string(Format.SPACES) == "rgb(255, 127, 4)"
    assert color.to_rgb_string(Format.NO_SPACES) == "rgb(255,127,4)"


def test_rgba_display_integers():
    assert str(RGBA(255, 0, 0)) == "rgb(255, 0, 0)"


def test_lab_display_drops_trailing_zero():
    assert str(Lab(41.0, 83.0, -93.0)) == "Lab(41, 83, -93)"


def test_cmyk_display():
    assert str(CMYK(0.0, 0.0, 0.0, 0.0)) == "cmyk(0, 0, 0, 0)"


def test_hsla_display():
    assert str(HSLA(0.0, 1.0, 0.5)) == "hsl(0, 1, 0.5)"


def test_xyz_display_fraction():
    assert str(XYZ(0.25, 1.0, -0.5)) == "XYZ(0.25, 1, -0.5)"


def test_lms_display_matches_fields():
    lms = LMS(2.0, 3.0, 4.0)
    assert str(lms) == "LMS(2, 3, 4)"


def test_default_alpha_is_opaque():
    assert Lab(50.0, 0.0, 0.0).alpha == 1.0
    assert RGBA(1, 2, 3).alpha == 1.0


def test_value_types_are_immutable():
    lab = Lab(50.0, 10.0, 20.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        lab.l = 60.0  # type: ignore[misc]
    assert lab.l == 50.0
    assert lab.mix(lab, Fraction(0.5)) == lab


def test_equality_compares_fields():
    assert Lab(50.0, 10.0, 20.0, 0.5) == Lab(50.0, 10.0, 20.0, 0.5)
    assert not (Lab(50.0, 10.0, 20.0) == Lab(50.0, 10.0, 21.0))


@pytest.mark.parametrize(
    "first, second",
    [
        (Lab(10.0, -20.0, 30.0, 1.0), Lab(70.0, 40.0, -10.0, 0.5)),
        (RGBA(0.0, 0.25, 1.0, 1.0), RGBA(1.0, 0.75, 0.0, 0.2)),
        (HSLA(30.0, 0.5, 0.4, 1.0), HSLA(90.0, 0.9, 0.6, 0.3)),
        (LCh(40.0, 30.0, 60.0, 1.0), LCh(80.0, 50.0, 120.0, 0.4)),
    ],
)
def test_mix_endpoints(first, second):
    start = first.mix(second, Fraction(0.0))
    end = first.mix(second, Fraction(1.0))
    assert dataclasses.astuple(start) == pytest.approx(dataclasses.astuple(first))
    assert dataclasses.astuple(end) == pytest.approx(dataclasses.astuple(second))


def test_mix_clamps_fraction():
    first = Lab(10.0, -20.0, 30.0)
    second = Lab(70.0, 40.0, -10.0)
    over = first.mix(second, Fraction(3.0))
    under = first.mix(second, Fraction(-1.0))
    assert dataclasses.astuple(over) == pytest.approx(dataclasses.astuple(second))
    assert dataclasses.astuple(under) == pytest.approx(dataclasses.astuple(first))


def test_lab_mix_is_symmetric_at_midpoint():
    first = Lab(10.0, -20.0, 30.0, 1.0)
    second = Lab(70.0, 40.0, -10.0, 0.5)
    forward = first.mix(second, Fraction(0.5))
    backward = second.mix(first, Fraction(0.5))
    assert dataclasses.astuple(forward) == pytest.approx(dataclasses.astuple(backward))
    assert forward.l == pytest.approx(40.0)


def test_rgba_mix_lies_between_inputs():
    first = RGBA(0.1, 0.9, 0.3)
    second = RGBA(0.7, 0.2, 0.3)
    mixed = first.mix(second, Fraction(0.3))
    for channel in ("r", "g", "b"):
        low = min(getattr(first, channel), getattr(second, channel))
        high = max(getattr(first, channel), getattr(second, channel))
        assert low <= getattr(mixed, channel) <= high


@pytest.mark.parametrize("gray", [HSLA(0.0, 0.0, 0.0), HSLA(0.0, 0.0, 0.2), HSLA(0.0, 0.0, 1.0)])
def test_hsla_mix_with_gray_preserves_hue(gray):
    colored = HSLA(123.0, 0.5, 0.5)
    assert colored.mix(gray, Fraction(0.5)).h == 123.0
    assert gray.mix(colored, Fraction(0.5)).h == 123.0


def test_hsla_mix_takes_short_arc():
    first = HSLA(350.0, 1.0, 0.5)
    second = HSLA(10.0, 1.0, 0.5)
    assert first.mix(second, Fraction(0.5)).h == 0.0


def test_lch_mix_with_gray_preserves_hue():
    colored = LCh(50.0, 40.0, 200.0)
    gray = LCh(80.0, 0.05, 0.0)
    assert colored.mix(gray, Fraction(0.5)).h == 200.0
    assert gray.mix(colored, Fraction(0.25)).h == 200.0


def test_lch_mix_interpolates_lightness_and_chroma():
    first = LCh(40.0, 30.0, 60.0)
    second = LCh(80.0, 50.0, 60.0)
    mixed = first.mix(second, Fraction(0.5))
    assert first.l < mixed.l < second.l
    assert first.c < mixed.c < second.c
    assert mixed.h == 60.0
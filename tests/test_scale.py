import pytest

from pastel.color import Color
from pastel.helper import Fraction
from pastel.scale import ColorScale, ColorStop
from pastel.spaces import Lab


def mix_lab(a, b, fraction):
    return a.mix(b, fraction, Lab)


def test_add_preserves_ordering():
    scale = ColorScale()
    (
        scale.add_stop(Color.red(), Fraction(0.5))
        .add_stop(Color.gray(), Fraction(0.0))
        .add_stop(Color.blue(), Fraction(1.0))
    )
    assert [stop.color for stop in scale.stops] == [
        Color.gray(),
        Color.red(),
        Color.blue(),
    ]
    assert [stop.position.value for stop in scale.stops] == [0.0, 0.5, 1.0]


def test_add_stop_returns_scale():
    scale = ColorScale()
    assert scale.add_stop(Color.red(), 0.3) is scale


def test_add_stop_same_position_replaces():
    scale = ColorScale()
    scale.add_stop(Color.red(), 0.0).add_stop(Color.blue(), 0.0)
    assert len(scale.stops) == 1
    assert scale.stops[0] == ColorStop(Color.blue(), Fraction(0.0))


def test_empty_sample_none():
    assert ColorScale().sample(Fraction(0.0), mix_lab) is None


def test_one_color_sample_none():
    scale = ColorScale()
    scale.add_stop(Color.red(), Fraction(0.0))
    assert scale.sample(Fraction(0.0), mix_lab) is None


def test_sample_same_position():
    scale = ColorScale()
    (
        scale.add_stop(Color.red(), Fraction(0.0))
        .add_stop(Color.green(), Fraction(1.0))
        .add_stop(Color.blue(), Fraction(0.0))
        .add_stop(Color.white(), Fraction(1.0))
    )
    assert scale.sample(Fraction(0.0), mix_lab) == Color.blue()
    assert scale.sample(Fraction(1.0), mix_lab) == Color.white()


def test_sample():
    scale = ColorScale()
    scale.add_stop(Color.green(), Fraction(1.0)).add_stop(Color.red(), Fraction(0.0))
    expected = mix_lab(Color.red(), Color.green(), Fraction(0.5))
    assert scale.sample(Fraction(0.5), mix_lab) == expected


def test_sample_position():
    scale = ColorScale()
    (
        scale.add_stop(Color.green(), Fraction(0.5))
        .add_stop(Color.red(), Fraction(0.0))
        .add_stop(Color.blue(), Fraction(1.0))
    )
    assert scale.sample(Fraction(0.0), mix_lab) == Color.red()
    assert scale.sample(Fraction(0.5), mix_lab) == Color.green()
    assert scale.sample(Fraction(1.0), mix_lab) == Color.blue()

    assert scale.sample(Fraction(0.25), mix_lab) == mix_lab(
        Color.red(), Color.green(), Fraction(0.5)
    )
    assert scale.sample(Fraction(0.75), mix_lab) == mix_lab(
        Color.green(), Color.blue(), Fraction(0.5)
    )


@pytest.mark.parametrize("position", [0.0, 0.1, 0.9, 1.0])
def test_sample_outside_stops_none(position):
    scale = ColorScale()
    scale.add_stop(Color.red(), 0.2).add_stop(Color.blue(), 0.8)
    assert scale.sample(position, mix_lab) is None


def test_sample_accepts_float_position():
    scale = ColorScale()
    scale.add_stop(Color.red(), 0.0).add_stop(Color.blue(), 1.0)
    assert scale.sample(0.0, mix_lab) == Color.red()
    assert scale.sample(1.0, mix_lab) == Color.blue()
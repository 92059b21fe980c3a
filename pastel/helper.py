"""Numeric helpers shared by the color types: modulo, clamping and interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Fraction",
    "clamp",
    "hue_value",
    "interpolate",
    "interpolate_angle",
    "mod_positive",
]


def mod_positive(x: float, y: float) -> float:
    """Remainder of ``x / y`` that is never negative for a positive ``y``."""
    return math.fmod(math.fmod(x, y) + y, y)


def clamp(lower: float, upper: float, x: float) -> float:
    """Trim ``x`` so that it lies within ``[lower, upper]``."""
    return max(min(upper, x), lower)


@dataclass(frozen=True)
class Fraction:
    """A number in the closed interval [0, 1]; values outside are clamped."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clamp(0.0, 1.0, float(self.value)))


def interpolate(a: float, b: float, fraction: Fraction) -> float:
    """Linearly interpolate between ``a`` and ``b``."""
    return a + fraction.value * (b - a)


def interpolate_angle(a: float, b: float, fraction: Fraction) -> float:
    """Interpolate between two angles in degrees along the shorter arc."""
    paths = ((a, b), (a, b + 360.0), (a + 360.0, b))
    start, end = min(paths, key=lambda path: abs(path[0] - path[1]))
    return mod_positive(interpolate(start, end, fraction), 360.0)


def hue_value(unclipped: float) -> float:
    """Map an angle in degrees onto [0, 360], keeping exactly 360 as it is."""
    if unclipped == 360.0:
        return unclipped
    return mod_positive(unclipped, 360.0)
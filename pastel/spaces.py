"""Plain value types for the color spaces a color can be expressed in."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar, Union

from .helper import Fraction, interpolate, interpolate_angle

__all__ = [
    "CMYK",
    "HSLA",
    "LCh",
    "LMS",
    "Lab",
    "RGBA",
    "XYZ",
    "ColorblindnessType",
    "Format",
]

T = TypeVar("T", int, float)


def _format_scalar(x: Union[int, float]) -> str:
    """Render a number in plain decimal notation, without a trailing '.0'."""
    if isinstance(x, int) and not isinstance(x, bool):
        return str(x)
    x = float(x)
    if not math.isfinite(x):
        if math.isnan(x):
            return "NaN"
        return "inf" if x > 0 else "-inf"
    if x == 0.0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    if x.is_integer():
        return str(int(x))
    return format(Decimal(repr(x)), "f")


class Format(enum.Enum):
    """Whether formatted color strings put a space after each comma."""

    SPACES = "spaces"
    NO_SPACES = "no-spaces"

    @property
    def separator(self) -> str:
        return " " if self is Format.SPACES else ""


class ColorblindnessType(enum.Enum):
    """The kinds of color blindness that can be simulated."""

    PROTANOPIA = "protanopia"
    """Lack of red cones."""
    DEUTERANOPIA = "deuteranopia"
    """Lack of green cones."""
    TRITANOPIA = "tritanopia"
    """Lack of blue cones."""


@dataclass(frozen=True)
class RGBA(Generic[T]):
    """Red, green and blue channels (integers 0-255 or floats 0-1) plus alpha."""

    r: T
    g: T
    b: T
    alpha: float = 1.0

    def mix(self, other: RGBA, fraction: Fraction) -> RGBA[float]:
        return RGBA(
            interpolate(self.r, other.r, fraction),
            interpolate(self.g, other.g, fraction),
            interpolate(self.b, other.b, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return (
            f"rgb({_format_scalar(self.r)}, {_format_scalar(self.g)}, "
            f"{_format_scalar(self.b)})"
        )


@dataclass(frozen=True)
class HSLA:
    """Hue in degrees, saturation and lightness in [0, 1], plus alpha."""

    h: float
    s: float
    l: float  # noqa: E741
    alpha: float = 1.0

    def mix(self, other: HSLA, fraction: Fraction) -> HSLA:
        # Keep the hue of the colored side when the other side is gray.
        self_hue = other.h if self.s < 0.0001 else self.h
        other_hue = self.h if other.s < 0.0001 else other.h
        return HSLA(
            interpolate_angle(self_hue, other_hue, fraction),
            interpolate(self.s, other.s, fraction),
            interpolate(self.l, other.l, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return (
            f"hsl({_format_scalar(self.h)}, {_format_scalar(self.s)}, "
            f"{_format_scalar(self.l)})"
        )


@dataclass(frozen=True)
class XYZ:
    """Coordinates in the CIE 1931 XYZ color space, plus alpha."""

    x: float
    y: float
    z: float
    alpha: float = 1.0

    def __str__(self) -> str:
        return (
            f"XYZ({_format_scalar(self.x)}, {_format_scalar(self.y)}, "
            f"{_format_scalar(self.z)})"
        )


@dataclass(frozen=True)
class LMS:
    """Long-, medium- and short-wavelength cone responses, plus alpha."""

    l: float  # noqa: E741
    m: float
    s: float
    alpha: float = 1.0

    def __str__(self) -> str:
        return (
            f"LMS({_format_scalar(self.l)}, {_format_scalar(self.m)}, "
            f"{_format_scalar(self.s)})"
        )


@dataclass(frozen=True)
class Lab:
    """CIE L*a*b* coordinates, plus alpha."""

    l: float  # noqa: E741
    a: float
    b: float
    alpha: float = 1.0

    def mix(self, other: Lab, fraction: Fraction) -> Lab:
        return Lab(
            interpolate(self.l, other.l, fraction),
            interpolate(self.a, other.a, fraction),
            interpolate(self.b, other.b, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return (
            f"Lab({_format_scalar(self.l)}, {_format_scalar(self.a)}, "
            f"{_format_scalar(self.b)})"
        )


@dataclass(frozen=True)
class LCh:
    """CIE LCh coordinates (lightness, chroma, hue in degrees), plus alpha."""

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0

    def mix(self, other: LCh, fraction: Fraction) -> LCh:
        # Keep the hue of the colored side when the other side is gray.
        self_hue = other.h if self.c < 0.1 else self.h
        other_hue = self.h if other.c < 0.1 else other.h
        return LCh(
            interpolate(self.l, other.l, fraction),
            interpolate(self.c, other.c, fraction),
            interpolate_angle(self_hue, other_hue, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return (
            f"LCh({_format_scalar(self.l)}, {_format_scalar(self.c)}, "
            f"{_format_scalar(self.h)})"
        )


@dataclass(frozen=True)
class CMYK:
    """Cyan, magenta, yellow and black components."""

    c: float
    m: float
    y: float
    k: float

    def __str__(self) -> str:
        return (
            f"cmyk({_format_scalar(self.c)}, {_format_scalar(self.m)}, "
            f"{_format_scalar(self.y)}, {_format_scalar(self.k)})"
        )
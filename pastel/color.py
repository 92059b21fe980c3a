"""The central color type and its conversions between color spaces."""

from __future__ import annotations

import math
import operator
from typing import Callable, Union

from .helper import Fraction, clamp, hue_value, mod_positive
from .spaces import (
    CMYK,
    HSLA,
    LMS,
    RGBA,
    XYZ,
    ColorblindnessType,
    Format,
    LCh,
    Lab,
    _format_scalar,
)

__all__ = ["Color"]

# Illuminant D65 reference white, used by the Lab conversions.
_D65_XN = 0.950470
_D65_YN = 1.0
_D65_ZN = 1.088830

_LAB_DELTA = 6.0 / 29.0
_LAB_CUT = _LAB_DELTA**3

# Luminance at which black and white text give the same contrast.
_TEXT_COLOR_THRESHOLD = 0.179


def _to_byte(x: float) -> int:
    """Round a channel value to a byte, saturating at 0 and 255 (NaN gives 0)."""
    if math.isnan(x):
        return 0
    x = clamp(0.0, 255.0, x)
    return int(math.floor(x + 0.5))


def _check_byte(value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= 255:
        raise ValueError(f"RGB channel out of range 0-255: {value}")
    return value


class Color:
    """A color in the sRGB gamut, stored as hue, saturation, lightness and alpha.

    Two colors compare equal when their integer RGB values and alpha agree.
    """

    __slots__ = ("_hue", "_saturation", "_lightness", "_alpha")

    def __init__(
        self,
        hue: float = 0.0,
        saturation: float = 0.0,
        lightness: float = 0.0,
        alpha: float = 1.0,
    ) -> None:
        self._hue = float(hue)
        self._saturation = clamp(0.0, 1.0, float(saturation))
        self._lightness = clamp(0.0, 1.0, float(lightness))
        self._alpha = clamp(0.0, 1.0, float(alpha))

    # ----------------------------------------------------------------- creation

    @classmethod
    def from_hsla(
        cls, hue: float, saturation: float, lightness: float, alpha: float
    ) -> Color:
        return cls(hue, saturation, lightness, alpha)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        return cls(hue, saturation, lightness, 1.0)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, alpha: float) -> Color:
        """Create a color from integer channels in 0-255 and an alpha in [0, 1]."""
        r, g, b = _check_byte(r), _check_byte(g), _check_byte(b)
        max_chroma = max(r, g, b)
        min_chroma = min(r, g, b)
        chroma = max_chroma - min_chroma
        chroma_s = chroma / 255.0

        r_s = r / 255.0
        g_s = g / 255.0
        b_s = b / 255.0

        if chroma == 0:
            sector = 0.0
        elif r == max_chroma:
            sector = mod_positive((g_s - b_s) / chroma_s, 6.0)
        elif g == max_chroma:
            sector = (b_s - r_s) / chroma_s + 2.0
        else:
            sector = (r_s - g_s) / chroma_s + 4.0
        hue = 60.0 * sector

        lightness = (max_chroma + min_chroma) / (255.0 * 2.0)
        if chroma == 0:
            saturation = 0.0
        else:
            saturation = chroma_s / (1.0 - abs(2.0 * lightness - 1.0))
        return cls(hue, saturation, lightness, alpha)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_rgba_float(cls, r: float, g: float, b: float, alpha: float) -> Color:
        """Create a color from channels in [0, 1]; values outside are clamped."""
        return cls.from_rgba(
            _to_byte(255.0 * r), _to_byte(255.0 * g), _to_byte(255.0 * b), alpha
        )

    @classmethod
    def from_rgb_float(cls, r: float, g: float, b: float) -> Color:
        return cls.from_rgba_float(r, g, b, 1.0)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float) -> Color:
        """Create a color from CIE 1931 XYZ coordinates, clipped to the sRGB gamut."""

        def gamma(c: float) -> float:
            if c <= 0.0031308:
                return 12.92 * c
            return 1.055 * math.pow(c, 1.0 / 2.4) - 0.055

        r = gamma(3.2406 * x - 1.5372 * y - 0.4986 * z)
        g = gamma(-0.9689 * x + 1.8758 * y + 0.0415 * z)
        b = gamma(0.0557 * x - 0.2040 * y + 1.0570 * z)
        return cls.from_rgba_float(r, g, b, alpha)

    @classmethod
    def from_lms(cls, l: float, m: float, s: float, alpha: float) -> Color:  # noqa: E741
        """Create a color from LMS cone responses."""
        x = 1.91020 * l - 1.112120 * m + 0.201908 * s
        y = 0.37095 * l + 0.629054 * m + 0.000000 * s
        z = 0.00000 * l + 0.000000 * m + 1.000000 * s
        return cls.from_xyz(x, y, z, alpha)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float) -> Color:  # noqa: E741
        """Create a color from CIE L*a*b* coordinates, clipped to the sRGB gamut."""

        def finv(t: float) -> float:
            if t > _LAB_DELTA:
                return t**3
            return 3.0 * _LAB_DELTA * _LAB_DELTA * (t - 4.0 / 29.0)

        l_ = (l + 16.0) / 116.0
        x = _D65_XN * finv(l_ + a / 500.0)
        y = _D65_YN * finv(l_)
        z = _D65_ZN * finv(l_ - b / 200.0)
        return cls.from_xyz(x, y, z, alpha)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float) -> Color:  # noqa: E741
        """Create a color from CIE LCh coordinates (hue in degrees)."""
        rad = math.radians(h)
        return cls.from_lab(l, c * math.cos(rad), c * math.sin(rad), alpha)

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float) -> Color:
        r = 255.0 * ((1.0 - c) / 100.0) * ((1.0 - k) / 100.0)
        g = 255.0 * ((1.0 - m) / 100.0) * ((1.0 - k) / 100.0)
        b = 255.0 * ((1.0 - y) / 100.0) * ((1.0 - k) / 100.0)
        return cls.from_rgba_float(r, g, b, 1.0)

    # -------------------------------------------------------------- conversion

    @property
    def _hue_value(self) -> float:
        return hue_value(self._hue)

    def to_hsla(self) -> HSLA:
        return HSLA(self._hue_value, self._saturation, self._lightness, self._alpha)

    def to_hsl_string(self, fmt: Format) -> str:
        sep = fmt.separator
        return (
            f"hsl({self._hue_value:.0f},{sep}{100.0 * self._saturation:.1f}%,"
            f"{sep}{100.0 * self._lightness:.1f}%)"
        )

    def to_rgba_float(self) -> RGBA[float]:
        """Red, green, blue and alpha, all in [0, 1]."""
        h_s = self._hue_value / 60.0
        chroma = (1.0 - abs(2.0 * self._lightness - 1.0)) * self._saturation
        m = self._lightness - chroma / 2.0
        x = chroma * (1.0 - abs(math.fmod(h_s, 2.0) - 1.0))

        if h_s < 1.0:
            r, g, b = chroma, x, 0.0
        elif h_s < 2.0:
            r, g, b = x, chroma, 0.0
        elif h_s < 3.0:
            r, g, b = 0.0, chroma, x
        elif h_s < 4.0:
            r, g, b = 0.0, x, chroma
        elif h_s < 5.0:
            r, g, b = x, 0.0, chroma
        else:
            r, g, b = chroma, 0.0, x
        return RGBA(r + m, g + m, b + m, self._alpha)

    def to_rgba(self) -> RGBA[int]:
        """Integer red, green and blue in 0-255 plus alpha in [0, 1]."""
        c = self.to_rgba_float()
        return RGBA(
            _to_byte(255.0 * c.r),
            _to_byte(255.0 * c.g),
            _to_byte(255.0 * c.b),
            self._alpha,
        )

    def to_rgb_string(self, fmt: Format) -> str:
        rgba = self.to_rgba()
        sep = fmt.separator
        return f"rgb({rgba.r},{sep}{rgba.g},{sep}{rgba.b})"

    def to_cmyk(self) -> CMYK:
        rgba = self.to_rgba()
        r = rgba.r / 255.0
        g = rgba.g / 255.0
        b = rgba.b / 255.0
        if r >= g and r >= b:
            biggest = r
        elif g >= r and g >= b:
            biggest = g
        else:
            biggest = b
        k = 1.0 - biggest
        if biggest == 0.0:
            return CMYK(0.0, 0.0, 0.0, k)
        return CMYK(
            (1.0 - r - k) / biggest,
            (1.0 - g - k) / biggest,
            (1.0 - b - k) / biggest,
            k,
        )

    def to_cmyk_string(self, fmt: Format) -> str:
        cmyk = self.to_cmyk()
        sep = fmt.separator
        parts = (
            _format_scalar(float(_round_half_away(v * 100.0)))
            for v in (cmyk.c, cmyk.m, cmyk.y, cmyk.k)
        )
        return "cmyk(" + f",{sep}".join(parts) + ")"

    def to_rgb_float_string(self, fmt: Format) -> str:
        c = self.to_rgba_float()
        sep = fmt.separator
        return f"rgb({c.r:.3f},{sep}{c.g:.3f},{sep}{c.b:.3f})"

    def to_rgb_hex_string(self, leading_hash: bool) -> str:
        rgba = self.to_rgba()
        prefix = "#" if leading_hash else ""
        return f"{prefix}{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"

    def to_u32(self) -> int:
        """The color as an integer of the form 0xRRGGBB."""
        rgba = self.to_rgba()
        return (rgba.r << 16) + (rgba.g << 8) + rgba.b

    def to_xyz(self) -> XYZ:
        def linear(c: float) -> float:
            if c <= 0.04045:
                return c / 12.92
            return math.pow((c + 0.055) / 1.055, 2.4)

        rec = self.to_rgba_float()
        r = linear(rec.r)
        g = linear(rec.g)
        b = linear(rec.b)
        return XYZ(
            0.4124 * r + 0.3576 * g + 0.1805 * b,
            0.2126 * r + 0.7152 * g + 0.0722 * b,
            0.0193 * r + 0.1192 * g + 0.9505 * b,
            self._alpha,
        )

    def to_lms(self) -> LMS:
        xyz = self.to_xyz()
        x, y, z = xyz.x, xyz.y, xyz.z
        return LMS(
            0.38971 * x + 0.68898 * y - 0.07868 * z,
            -0.22981 * x + 1.18340 * y + 0.04641 * z,
            0.00000 * x + 0.00000 * y + 1.00000 * z,
            xyz.alpha,
        )

    def to_lab(self) -> Lab:
        rec = self.to_xyz()

        def f(t: float) -> float:
            if t > _LAB_CUT:
                return math.pow(t, 1.0 / 3.0)
            return (1.0 / 3.0) * (29.0 / 6.0) ** 2 * t + 4.0 / 29.0

        fy = f(rec.y / _D65_YN)
        return Lab(
            116.0 * fy - 16.0,
            500.0 * (f(rec.x / _D65_XN) - fy),
            200.0 * (fy - f(rec.z / _D65_ZN)),
            self._alpha,
        )

    def to_lab_string(self, fmt: Format) -> str:
        lab = self.to_lab()
        sep = fmt.separator
        return f"Lab({lab.l:.0f},{sep}{lab.a:.0f},{sep}{lab.b:.0f})"

    def to_lch(self) -> LCh:
        lab = self.to_lab()
        c = math.sqrt(lab.a * lab.a + lab.b * lab.b)
        h = mod_positive(math.degrees(math.atan2(lab.b, lab.a)), 360.0)
        return LCh(lab.l, c, h, lab.alpha)

    def to_lch_string(self, fmt: Format) -> str:
        lch = self.to_lch()
        sep = fmt.separator
        return f"LCh({lch.l:.0f},{sep}{lch.c:.0f},{sep}{lch.h:.0f})"

    # ------------------------------------------------------------ named colors

    @classmethod
    def black(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls.from_rgb(255, 0, 0)

    @classmethod
    def green(cls) -> Color:
        return cls.from_rgb(0, 128, 0)

    @classmethod
    def blue(cls) -> Color:
        return cls.from_rgb(0, 0, 255)

    @classmethod
    def yellow(cls) -> Color:
        return cls.from_rgb(255, 255, 0)

    @classmethod
    def fuchsia(cls) -> Color:
        return cls.from_rgb(255, 0, 255)

    @classmethod
    def aqua(cls) -> Color:
        return cls.from_rgb(0, 255, 255)

    @classmethod
    def lime(cls) -> Color:
        return cls.from_rgb(0, 255, 0)

    @classmethod
    def maroon(cls) -> Color:
        return cls.from_rgb(128, 0, 0)

    @classmethod
    def olive(cls) -> Color:
        return cls.from_rgb(128, 128, 0)

    @classmethod
    def navy(cls) -> Color:
        return cls.from_rgb(0, 0, 128)

    @classmethod
    def purple(cls) -> Color:
        return cls.from_rgb(128, 0, 128)

    @classmethod
    def teal(cls) -> Color:
        return cls.from_rgb(0, 128, 128)

    @classmethod
    def silver(cls) -> Color:
        return cls.from_rgb(192, 192, 192)

    @classmethod
    def gray(cls) -> Color:
        return cls.from_rgb(128, 128, 128)

    @classmethod
    def graytone(cls, lightness: float) -> Color:
        """A gray tone from 0.0 (black) to 1.0 (white)."""
        return cls.from_hsl(0.0, 0.0, lightness)

    # ------------------------------------------------------------ manipulation

    def rotate_hue(self, delta: float) -> Color:
        return Color(
            self._hue_value + delta, self._saturation, self._lightness, self._alpha
        )

    def complementary(self) -> Color:
        return self.rotate_hue(180.0)

    def lighten(self, f: float) -> Color:
        return Color(
            self._hue_value, self._saturation, self._lightness + f, self._alpha
        )

    def darken(self, f: float) -> Color:
        return self.lighten(-f)

    def saturate(self, f: float) -> Color:
        return Color(
            self._hue_value, self._saturation + f, self._lightness, self._alpha
        )

    def desaturate(self, f: float) -> Color:
        return self.saturate(-f)

    def simulate_colorblindness(self, cb_type: ColorblindnessType) -> Color:
        """Approximate how the color appears with the given color blindness."""
        lms = self.to_lms()
        l, m, s = lms.l, lms.m, lms.s  # noqa: E741
        if cb_type is ColorblindnessType.PROTANOPIA:
            l = 1.05118294 * m - 0.05116099 * s  # noqa: E741
        elif cb_type is ColorblindnessType.DEUTERANOPIA:
            m = 0.9513092 * l + 0.04866992 * s
        elif cb_type is ColorblindnessType.TRITANOPIA:
            s = -0.86744736 * l + 1.86727089 * m
        else:
            raise ValueError(f"unknown colorblindness type: {cb_type!r}")
        return Color.from_lms(l, m, s, lms.alpha)

    def to_gray(self) -> Color:
        """A gray tone with the same perceived lightness, keeping the hue."""
        lch = self.to_lch()
        gray = Color.from_lch(lch.l, 0.0, 0.0, 1.0).desaturate(1.0)
        return Color(self._hue, gray._saturation, gray._lightness, gray._alpha)

    # ------------------------------------------------------------- perception

    def brightness(self) -> float:
        """Perceived brightness in [0, 1]."""
        c = self.to_rgba_float()
        return (299.0 * c.r + 587.0 * c.g + 114.0 * c.b) / 1000.0

    def is_light(self) -> bool:
        return self.brightness() > 0.5

    def luminance(self) -> float:
        """Relative luminance as defined by WCAG, from 0.0 to 1.0."""

        def f(s: float) -> float:
            if s <= 0.03928:
                return s / 12.92
            return math.pow((s + 0.055) / 1.055, 2.4)

        c = self.to_rgba_float()
        return 0.2126 * f(c.r) + 0.7152 * f(c.g) + 0.0722 * f(c.b)

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio between two colors, from 1.0 to 21.0."""
        l_self = self.luminance()
        l_other = other.luminance()
        if l_self > l_other:
            return (l_self + 0.05) / (l_other + 0.05)
        return (l_other + 0.05) / (l_self + 0.05)

    def text_color(self) -> Color:
        """Black or white, whichever reads better on this background."""
        if self.luminance() > _TEXT_COLOR_THRESHOLD:
            return Color.black()
        return Color.white()

    # ------------------------------------------------------------------ mixing

    def mix(
        self,
        other: Color,
        fraction: Union[Fraction, float],
        space: type,
    ) -> Color:
        """Interpolate towards ``other`` in the color space ``space``.

        ``space`` is one of RGBA, HSLA, Lab or LCh; hues take the shorter arc.
        """
        if not isinstance(fraction, Fraction):
            fraction = Fraction(fraction)
        try:
            to_space, from_space = _MIX_SPACES[space]
        except (KeyError, TypeError):
            raise TypeError(f"cannot mix colors in space {space!r}") from None
        return from_space(to_space(self).mix(to_space(other), fraction))

    # -------------------------------------------------------------- protocols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    def __hash__(self) -> int:
        return hash(self.to_rgba())

    def __str__(self) -> str:
        return str(self.to_hsla())

    def __repr__(self) -> str:
        return f"Color.from_{self.to_rgb_string(Format.NO_SPACES)}"


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


_MIX_SPACES: dict[type, tuple[Callable[[Color], object], Callable[[object], Color]]] = {
    RGBA: (
        Color.to_rgba_float,
        lambda c: Color.from_rgba_float(c.r, c.g, c.b, c.alpha),
    ),
    HSLA: (
        Color.to_hsla,
        lambda c: Color.from_hsla(c.h, c.s, c.l, c.alpha),
    ),
    Lab: (
        Color.to_lab,
        lambda c: Color.from_lab(c.l, c.a, c.b, c.alpha),
    ),
    LCh: (
        Color.to_lch,
        lambda c: Color.from_lch(c.l, c.c, c.h, c.alpha),
    ),
}
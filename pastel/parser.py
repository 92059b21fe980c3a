"""Parsing of color descriptions such as ``#ff0077``, ``rgb(...)`` or ``hotpink``."""

from __future__ import annotations

import math
import re
from typing import Callable, Optional

from .color import Color
from .named import find_named_color

__all__ = ["parse_color"]

_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX = re.compile(r"#?([0-9a-fA-F]+)")
_SPACES = re.compile(r"[ \t]*")
_SPACES_REQUIRED = re.compile(r"[ \t]+")
_ALPHA = re.compile(r"[A-Za-z]+")

_ANGLE_UNITS: tuple[tuple[str, Callable[[float], float]], ...] = (
    ("turn", lambda turns: turns * 360.0),
    ("grad", lambda grads: grads * 360.0 / 400.0),
    ("rad", lambda rads: rads * 180.0 / math.pi),
)


class _NoMatch(Exception):
    """Raised when the text at the cursor does not fit the expected syntax."""


class _Cursor:
    """A position in the text being parsed, with small matching helpers."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos == len(self.text)

    def match(self, pattern: re.Pattern[str]) -> re.Match[str]:
        found = pattern.match(self.text, self.pos)
        if found is None:
            raise _NoMatch
        self.pos = found.end()
        return found

    def try_literal(self, literal: str, ignore_case: bool = False) -> bool:
        end = self.pos + len(literal)
        candidate = self.text[self.pos:end]
        if ignore_case:
            matched = candidate.lower() == literal.lower()
        else:
            matched = candidate == literal
        if matched:
            self.pos = end
        return matched

    def literal(self, literal: str, ignore_case: bool = False) -> None:
        if not self.try_literal(literal, ignore_case):
            raise _NoMatch

    def spaces(self) -> None:
        self.match(_SPACES)

    def number(self) -> float:
        return float(self.match(_FLOAT).group())

    def percentage(self) -> float:
        value = self.number()
        self.literal("%")
        return value / 100.0

    def separator(self) -> None:
        """A comma with optional blanks around it, or at least one blank."""
        start = self.pos
        try:
            self.spaces()
            self.literal(",")
            self.spaces()
        except _NoMatch:
            self.pos = start
            self.match(_SPACES_REQUIRED)

    def angle(self) -> float:
        """An angle in degrees; turns, grads and radians are converted."""
        start = self.pos
        for unit, to_degrees in _ANGLE_UNITS:
            self.pos = start
            value = self.number()
            if self.try_literal(unit):
                return to_degrees(value)
        self.pos = start
        value = self.number()
        if not self.try_literal("°"):
            self.try_literal("deg")
        return value


def _parse_hex(cursor: _Cursor) -> Color:
    digits = cursor.match(_HEX).group(1)
    if len(digits) == 6:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    elif len(digits) == 3:
        r, g, b = (int(digit, 16) * 17 for digit in digits)
    else:
        raise _NoMatch
    return Color.from_rgb(r, g, b)


def _parse_rgb_channels(cursor: _Cursor, channel: Callable[[], float]) -> Color:
    prefixed = cursor.try_literal("rgb(")
    cursor.spaces()
    r = channel()
    cursor.separator()
    g = channel()
    cursor.separator()
    b = channel()
    cursor.spaces()
    if prefixed:
        cursor.literal(")")
    return Color.from_rgb_float(r, g, b)


def _parse_numeric_rgb(cursor: _Cursor) -> Color:
    return _parse_rgb_channels(cursor, lambda: cursor.number() / 255.0)


def _parse_percentage_rgb(cursor: _Cursor) -> Color:
    return _parse_rgb_channels(cursor, cursor.percentage)


def _parse_hsl(cursor: _Cursor) -> Color:
    cursor.literal("hsl(")
    cursor.spaces()
    h = cursor.angle()
    cursor.separator()
    s = cursor.percentage()
    cursor.separator()
    lightness = cursor.percentage()
    cursor.spaces()
    cursor.literal(")")
    return Color.from_hsl(h, s, lightness)


def _parse_gray(cursor: _Cursor) -> Color:
    cursor.literal("gray(")
    cursor.spaces()
    start = cursor.pos
    try:
        value = cursor.percentage()
    except _NoMatch:
        cursor.pos = start
        value = cursor.number()
    if not value >= 0.0:
        raise _NoMatch
    cursor.spaces()
    cursor.literal(")")
    return Color.from_rgb_float(value, value, value)


def _parse_lab(cursor: _Cursor) -> Color:
    cursor.try_literal("cie", ignore_case=True)
    cursor.literal("lab(", ignore_case=True)
    cursor.spaces()
    lightness = cursor.number()
    cursor.separator()
    a = cursor.number()
    cursor.separator()
    b = cursor.number()
    alpha = 1.0
    start = cursor.pos
    try:
        cursor.separator()
        alpha = cursor.number()
    except _NoMatch:
        cursor.pos = start
    cursor.spaces()
    cursor.literal(")")
    return Color.from_lab(lightness, a, b, alpha)


def _parse_named(cursor: _Cursor) -> Color:
    name = cursor.match(_ALPHA).group()
    if not cursor.at_end():
        raise _NoMatch
    color = find_named_color(name)
    if color is None:
        raise _NoMatch
    return color


_PARSERS: tuple[Callable[[_Cursor], Color], ...] = (
    _parse_hex,
    _parse_numeric_rgb,
    _parse_percentage_rgb,
    _parse_hsl,
    _parse_gray,
    _parse_lab,
    _parse_named,
)


def parse_color(text: str) -> Optional[Color]:
    """Parse a color description, returning None if it is not understood.

    Accepted forms are hex codes, ``rgb(...)`` with numbers or percentages
    (the prefix is optional), ``hsl(...)``, ``gray(...)``, ``lab(...)`` and
    CSS color names.
    """
    stripped = text.strip()
    for parser in _PARSERS:
        cursor = _Cursor(stripped)
        try:
            color = parser(cursor)
        except _NoMatch:
            continue
        if cursor.at_end():
            return color
    return None
"""Color scales: ordered color stops sampled with a mixing function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from .color import Color
from .helper import Fraction

__all__ = ["ColorScale", "ColorStop"]

MixFunction = Callable[[Color, Color, Fraction], Color]


def _as_fraction(position: Union[Fraction, float]) -> Fraction:
    return position if isinstance(position, Fraction) else Fraction(position)


@dataclass
class ColorStop:
    """A color placed at a position from 0.0 (left end) to 1.0 (right end)."""

    color: Color
    position: Fraction


@dataclass
class ColorScale:
    """Color stops kept in ascending order of their position."""

    stops: list[ColorStop] = field(default_factory=list)

    def add_stop(self, color: Color, position: Union[Fraction, float]) -> ColorScale:
        """Place ``color`` at ``position``, replacing a stop already there.

        Returns the scale itself so that calls can be chained.
        """
        position = _as_fraction(position)
        for stop in self.stops:
            if stop.position.value == position.value:
                stop.color = color
                return self

        index = next(
            (
                i
                for i, stop in enumerate(self.stops)
                if position.value < stop.position.value
            ),
            len(self.stops),
        )
        self.stops.insert(index, ColorStop(color, position))
        return self

    def sample(
        self, position: Union[Fraction, float], mix: MixFunction
    ) -> Optional[Color]:
        """The color at ``position``, mixed from the two surrounding stops.

        Returns None when the scale has fewer than two stops or the position
        does not lie between two of them.
        """
        if len(self.stops) < 2:
            return None

        value = _as_fraction(position).value
        left = next(
            (stop for stop in reversed(self.stops) if value >= stop.position.value),
            None,
        )
        right = next(
            (stop for stop in self.stops if value <= stop.position.value), None
        )
        if left is None or right is None:
            return None

        span = right.position.value - left.position.value
        if span == 0.0:
            local = Fraction(1.0)
        else:
            local = Fraction((value - left.position.value) / span)
        return mix(left.color, right.color, local)
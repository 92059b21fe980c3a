# pastel

A small, dependency-free library for working with colors: convert between
color spaces, adjust hue, saturation and lightness, measure contrast, mix
colors, build color scales and parse color strings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Creating colors

```python
from pastel.color import Color

red = Color.from_rgb(255, 0, 0)
sky = Color.from_hsl(200.0, 0.8, 0.6)
lab = Color.from_lab(53.233, 80.109, 67.22, 1.0)
gray = Color.graytone(0.3)
```

Colors can also be built from floating point RGB (`from_rgb_float`,
`from_rgba_float`), XYZ, LMS, LCh and CMYK values (`from_xyz`, `from_lms`,
`from_lch`, `from_cmyk`). Integer RGB channels outside 0-255 raise
`ValueError`; other values are clamped into range.

Two colors compare equal when their integer RGB values and alpha are the
same, so `Color.from_hsl(120.0, 0.3, 0.5) == Color.from_hsl(480.0, 0.3, 0.5)`.

Shortcuts exist for a few basic colors: `black`, `white`, `red`, `green`,
`blue`, `yellow`, `fuchsia`, `aqua`, `lime`, `maroon`, `olive`, `navy`,
`purple`, `teal`, `silver` and `gray`.

## Parsing

```python
from pastel.parser import parse_color

parse_color("#ff0099")
parse_color("f09")
parse_color("rgb(100%, 0%, 60%)")
parse_color("255 0 153")
parse_color("hsl(0.25turn, 20%, 50%)")
parse_color("gray(0.4)")
parse_color("CIELab(15, 23, -43)")
parse_color("hotpink")
parse_color("not a color")   # None
```

Hue angles in `hsl(...)` may be given in degrees (plain, `deg` or `°`),
`rad`, `grad` or `turn`. Named colors are the CSS color keywords, matched
without regard to case; look one up directly with
`pastel.named.find_named_color("deeppink")`, or iterate over
`pastel.named.NAMED_COLORS`.

## Converting and formatting

```python
from pastel.spaces import Format

c = Color.from_rgb(255, 127, 4)
c.to_rgb_hex_string(True)          # '#ff7f04'
c.to_rgb_string(Format.SPACES)     # 'rgb(255, 127, 4)'
c.to_hsl_string(Format.NO_SPACES)  # 'hsl(30,100.0%,50.8%)'
c.to_cmyk_string(Format.SPACES)
c.to_lab(), c.to_lch(), c.to_xyz(), c.to_lms(), c.to_cmyk()
c.to_u32()                         # 0xff7f04
```

The conversions return frozen dataclasses from `pastel.spaces`: `RGBA`,
`HSLA`, `XYZ`, `LMS`, `Lab`, `LCh` and `CMYK`.

## Manipulating

```python
from pastel.spaces import ColorblindnessType

c.rotate_hue(120.0)
c.complementary()
c.lighten(0.2)
c.darken(0.2)
c.saturate(0.1)
c.desaturate(0.5)
c.to_gray()
c.simulate_colorblindness(ColorblindnessType.DEUTERANOPIA)
```

All of these return new colors; a `Color` is never changed in place.

## Contrast and readability

```python
Color.black().contrast_ratio(Color.white())   # 21.0
Color.graytone(0.4).text_color()              # white
c.luminance(), c.brightness(), c.is_light()
```

## Mixing and scales

```python
from pastel.helper import Fraction
from pastel.spaces import HSLA, Lab
from pastel.scale import ColorScale

Color.red().mix(Color.blue(), Fraction(0.5), HSLA)   # fuchsia

scale = ColorScale()
scale.add_stop(Color.red(), Fraction(0.0)).add_stop(Color.blue(), Fraction(1.0))
scale.sample(Fraction(0.25), lambda a, b, f: a.mix(b, f, Lab))
```

Colors can be mixed in `RGBA`, `HSLA`, `Lab` or `LCh`; hues follow the
shorter arc. `ColorScale.sample` returns `None` when the scale has fewer
than two stops.

## What this package does not do

It is a library only: there is no command-line tool. It also has no
random color generation and no search for sets of mutually distinct colors.
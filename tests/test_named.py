import pytest

from pastel.color import Color
from pastel.named import NAMED_COLORS, NamedColor, find_named_color


def test_table_has_all_css_colors():
    found = [nc for nc in NAMED_COLORS if find_named_color(nc.name) == nc.color]
    assert len(found) == 148


def test_names_are_unique_lowercase_and_sorted():
    names = [nc.name for nc in NAMED_COLORS]
    assert len(set(names)) == len(names)
    assert all(name == name.lower() and name.isalpha() for name in names)
    assert names == sorted(names)
    for nc in NAMED_COLORS:
        assert find_named_color(nc.name.upper()) == nc.color


def test_every_entry_is_found_by_its_name():
    for nc in NAMED_COLORS:
        assert find_named_color(nc.name) == nc.color


def test_lookup_ignores_case():
    assert find_named_color("black") == Color.black()
    assert find_named_color("blue") == Color.blue()
    assert find_named_color("Blue") == Color.blue()
    assert find_named_color("BLUE") == Color.blue()


def test_deeppink_value():
    assert find_named_color("deeppink") == Color.from_rgb(255, 20, 147)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", Color.red),
        ("green", Color.green),
        ("yellow", Color.yellow),
        ("fuchsia", Color.fuchsia),
        ("aqua", Color.aqua),
        ("lime", Color.lime),
        ("maroon", Color.maroon),
        ("olive", Color.olive),
        ("navy", Color.navy),
        ("purple", Color.purple),
        ("teal", Color.teal),
        ("silver", Color.silver),
        ("gray", Color.gray),
        ("white", Color.white),
    ],
)
def test_basic_names_match_color_constructors(name, expected):
    assert find_named_color(name) == expected()


@pytest.mark.parametrize(
    "first, second",
    [
        ("gray", "grey"),
        ("darkslategray", "darkslategrey"),
        ("aqua", "cyan"),
        ("fuchsia", "magenta"),
        ("lightgray", "lightgrey"),
    ],
)
def test_aliases_share_a_color(first, second):
    assert find_named_color(first) == find_named_color(second)


@pytest.mark.parametrize("name", ["whatever", "red blue", "", "bluee"])
def test_unknown_names_give_none(name):
    assert find_named_color(name) is None


def test_named_color_is_immutable():
    entry = NAMED_COLORS[0]
    assert isinstance(entry, NamedColor)
    with pytest.raises(AttributeError):
        entry.name = "other"
    assert entry.name == "aliceblue"
    assert find_named_color("aliceblue") == entry.color
    assert find_named_color("other") is None
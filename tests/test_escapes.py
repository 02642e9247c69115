import pytest

from asciify.escapes import (
    RESET,
    ColourMode,
    ansi256_escape,
    ansi256_index,
    format_cell,
    palette_escape,
    truecolor_escape,
)
from asciify.palette import by_name


def test_truecolor_escape():
    assert truecolor_escape(10, 20, 30) == "\033[38;2;10;20;30m"


def test_truecolor_cell_is_stable():
    first = format_cell("@", (10, 20, 30), ColourMode.TRUECOLOR)
    assert first == "\033[38;2;10;20;30m@\033[0m"
    assert all(format_cell("@", (10, 20, 30), ColourMode.TRUECOLOR) == first for _ in range(5))


def test_plain_cell_has_no_escapes():
    assert format_cell("#", None, ColourMode.PLAIN) == "#"
    assert format_cell("#", (1, 2, 3), ColourMode.PLAIN) == "#"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 16),
        (7, 16),
        (8, 232),
        (128, 243),
        (248, 255),
        (249, 231),
        (255, 231),
    ],
)
def test_ansi256_grayscale_ramp(value, expected):
    assert ansi256_index(value, value, value) == expected


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ((255, 0, 0), 196),
        ((0, 255, 0), 46),
        ((0, 0, 255), 21),
        ((255, 255, 0), 226),
        ((0, 0, 1), 16),
        # Channels are scaled but not floored individually: 16 + 90.35 + 7.53
        ((128, 64, 0), 113),
    ],
)
def test_ansi256_colour_cube(rgb, expected):
    assert ansi256_index(*rgb) == expected


def test_ansi256_index_range():
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                assert 16 <= ansi256_index(r, g, b) <= 255


def test_ansi256_cell():
    assert format_cell("S", (255, 0, 0), ColourMode.ANSI256) == "\033[38;5;196mS" + RESET
    assert ansi256_escape(232) == "\033[38;5;232m"


def test_palette_cell():
    assert format_cell("?", by_name("LightRed"), ColourMode.PALETTE) == "\033[91m?\033[0m"
    assert format_cell("?", by_name("Black"), ColourMode.PALETTE) == "\033[30m?\033[0m"
    assert palette_escape(by_name("LightGray")) == "\033[37m"
    assert palette_escape(by_name("DarkGray")) == "\033[90m"


def test_palette_mode_rejects_rgb():
    with pytest.raises(TypeError):
        format_cell("@", (1, 2, 3), ColourMode.PALETTE)


def test_rgb_modes_reject_palette_colour():
    with pytest.raises(TypeError):
        format_cell("@", by_name("Red"), ColourMode.TRUECOLOR)
    with pytest.raises(TypeError):
        format_cell("@", None, ColourMode.ANSI256)

import math
from enum import Enum

from asciify.palette import PaletteColor

CSI = "\033["
RESET = "\033[0m"


class ColourMode(Enum):
    PLAIN = "plain"
    PALETTE = "palette"  # 16 named colours
    ANSI256 = "ansi256"  # xterm 6x6x6 cube plus grayscale ramp
    TRUECOLOR = "truecolor"


def truecolor_escape(r: int, g: int, b: int) -> str:
    return f"{CSI}38;2;{r};{g};{b}m"


def ansi256_index(r: int, g: int, b: int) -> int:
    """Map an RGB triple onto the 256-colour palette.

    Grays use the 24-step ramp at 232-255, with the ends snapped to the
    cube's black (16) and white (231). Everything else goes to the 6x6x6 cube.
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return math.floor((r - 8) / 247 * 24) + 232
    return math.floor(16 + 36 * (r / 255 * 5) + 6 * (g / 255 * 5) + (b / 255 * 5))


def ansi256_escape(index: int) -> str:
    return f"{CSI}38;5;{index}m"


def palette_escape(colour: PaletteColor) -> str:
    return f"{CSI}{colour.sgr}m"


def format_cell(glyph: str, colour, mode: ColourMode) -> str:
    """Render one glyph, wrapped in a colour escape and reset unless mode is PLAIN."""
    if mode is ColourMode.PLAIN:
        return glyph
    if mode is ColourMode.PALETTE:
        if not isinstance(colour, PaletteColor):
            raise TypeError(f"Palette mode needs a PaletteColor, got {colour!r}")
        return f"{palette_escape(colour)}{glyph}{RESET}"
    if isinstance(colour, PaletteColor) or colour is None:
        raise TypeError(f"{mode.value} mode needs an (r, g, b) tuple, got {colour!r}")
    r, g, b = colour
    if mode is ColourMode.ANSI256:
        return f"{ansi256_escape(ansi256_index(r, g, b))}{glyph}{RESET}"
    return f"{truecolor_escape(r, g, b)}{glyph}{RESET}"

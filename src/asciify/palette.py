from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PaletteColor:
    name: str
    rgb: tuple[int, int, int]
    sgr: int  # foreground SGR parameter


# Order matters: ties go to the earlier entry
PALETTE: tuple[PaletteColor, ...] = (
    PaletteColor("Black", (0, 0, 0), 30),
    PaletteColor("Red", (205, 0, 0), 31),
    PaletteColor("Green", (0, 205, 0), 32),
    PaletteColor("Yellow", (205, 205, 0), 33),
    PaletteColor("Blue", (0, 0, 238), 34),
    PaletteColor("Magenta", (205, 0, 205), 35),
    PaletteColor("Cyan", (0, 205, 205), 36),
    PaletteColor("LightGray", (229, 229, 229), 37),
    PaletteColor("DarkGray", (127, 127, 127), 90),
    PaletteColor("LightRed", (255, 0, 0), 91),
    PaletteColor("LightGreen", (0, 255, 0), 92),
    PaletteColor("LightYellow", (255, 255, 0), 93),
    PaletteColor("LightBlue", (92, 92, 255), 94),
    PaletteColor("LightMagenta", (255, 0, 255), 95),
    PaletteColor("LightCyan", (0, 255, 255), 96),
    PaletteColor("White", (255, 255, 255), 97),
)

_BY_NAME = {colour.name: colour for colour in PALETTE}
_PALETTE_RGB = np.array([colour.rgb for colour in PALETTE], dtype=np.int32)

# Pixels matched at once; bounds the (block, 16, 3) difference table
MATCH_BLOCK = 1 << 16


def by_name(name: str) -> PaletteColor:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise LookupError(f"Unknown palette colour: {name!r}") from None


def nearest_palette_color(r: int, g: int, b: int) -> PaletteColor:
    """Palette entry closest to (r, g, b) by squared Euclidean distance."""
    best = PALETTE[0]
    best_dist = None
    for colour in PALETTE:
        pr, pg, pb = colour.rgb
        dist = (pr - r) ** 2 + (pg - g) ** 2 + (pb - b) ** 2
        if best_dist is None or dist < best_dist:
            best_dist = dist
            best = colour
    return best


def nearest_palette_indices(rgb: np.ndarray) -> np.ndarray:
    """Vectorized nearest_palette_color over an (..., 3) array, returning PALETTE indices.

    argmin picks the first minimum, so ties resolve the same way as the scalar version.
    """
    rgb = np.asarray(rgb, dtype=np.int32)
    flat = rgb.reshape(-1, 3)
    indices = np.empty(len(flat), dtype=np.intp)
    for start in range(0, len(flat), MATCH_BLOCK):
        diff = flat[start : start + MATCH_BLOCK, None, :] - _PALETTE_RGB
        # at most 3 * 255**2
        dist = (diff * diff).sum(axis=-1)
        indices[start : start + MATCH_BLOCK] = dist.argmin(axis=-1)
    return indices.reshape(rgb.shape[:-1])

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciify.cells import ResolvedCell, assemble
from asciify.errors import DecodeError, InvalidDimensionError
from asciify.escapes import ColourMode
from asciify.glyphs import ASCII_GLYPHS, BUCKET_SIZE, glyph_indices, luminance
from asciify.palette import PALETTE, nearest_palette_indices
from asciify.resample import resample

logger = logging.getLogger(__name__)

MAX_WIDTH = 4096


def load_image(source: Image.Image | str | Path) -> Image.Image:
    """Decode a path into an RGB image, or convert an already decoded one.

    Animated formats yield their first frame. Alpha is dropped.
    """
    if isinstance(source, Image.Image):
        return source.convert("RGB")
    try:
        with Image.open(source) as image:
            image.load()
            return image.convert("RGB")
    except FileNotFoundError as e:
        logger.debug("Image not found: %s", source)
        raise DecodeError(source, "file not found") from e
    except UnidentifiedImageError as e:
        logger.debug("Unrecognised image format: %s", source)
        raise DecodeError(source, "unrecognised image format") from e
    except Image.DecompressionBombError as e:
        logger.debug("Refusing oversized image %s: %s", source, e)
        raise DecodeError(source, str(e)) from e
    except (OSError, SyntaxError, ValueError) as e:
        # Pillow reports truncated or corrupt data through several exception types
        logger.debug("Failed to decode %s: %s", source, e)
        raise DecodeError(source, str(e) or type(e).__name__) from e


def validate_width(width: int) -> int:
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
        raise InvalidDimensionError(f"Width must be an integer, got {width!r}")
    if not 1 <= width <= MAX_WIDTH:
        raise InvalidDimensionError(f"Width must be between 1 and {MAX_WIDTH}, got {width}")
    return int(width)


def resolve_cells(image: Image.Image, mode: ColourMode, bucket_size: int = BUCKET_SIZE) -> list[ResolvedCell]:
    """Pair a glyph and a colour with every pixel, in row-major order."""
    if image.width == 0 or image.height == 0:
        return []

    rgb = np.asarray(image.convert("RGB"), dtype=np.int64).reshape(-1, 3)
    glyphs = [ASCII_GLYPHS[i] for i in glyph_indices(luminance(rgb), bucket_size)]

    if mode is ColourMode.PLAIN:
        return [ResolvedCell(glyph) for glyph in glyphs]

    if mode is ColourMode.PALETTE:
        colours = [PALETTE[i] for i in nearest_palette_indices(rgb)]
    else:
        colours = [(int(r), int(g), int(b)) for r, g, b in rgb]
    return [ResolvedCell(glyph, colour) for glyph, colour in zip(glyphs, colours)]


def convert(
    source: Image.Image | str | Path,
    width: int,
    correct_font: bool = True,
    mode: ColourMode = ColourMode.PLAIN,
    bucket_size: int = BUCKET_SIZE,
) -> list[str]:
    """Run the whole pipeline: decode, resample, quantize, and assemble lines."""
    width = validate_width(width)
    image = load_image(source)
    if image.width == 0 or image.height == 0:
        raise InvalidDimensionError(f"Source image has no pixels: {image.width}x{image.height}")

    scaled = resample(image, width, correct_font)
    cells = resolve_cells(scaled, mode, bucket_size)
    logger.debug("Resolved %d cells (%s mode)", len(cells), mode.value)
    return assemble(cells, scaled.width, mode)


def asciify(source: Image.Image | str | Path, width: int, correct_font: bool = True) -> list[str]:
    """Convert an image to lines of plain ASCII glyphs."""
    return convert(source, width, correct_font, ColourMode.PLAIN)


def asciify_color(
    source: Image.Image | str | Path,
    width: int,
    correct_font: bool = True,
    truecolor: bool = False,
    *,
    named_palette: bool = False,
) -> list[str]:
    """Convert an image to lines of ANSI-coloured glyphs.

    truecolor selects 24-bit escapes. Otherwise colours go through the
    256-colour cube and gray ramp, or the 16 named terminal colours when
    named_palette is set.
    """
    if truecolor:
        mode = ColourMode.TRUECOLOR
    elif named_palette:
        mode = ColourMode.PALETTE
    else:
        mode = ColourMode.ANSI256
    return convert(source, width, correct_font, mode)


def render(
    source: Image.Image | str | Path,
    width: int,
    correct_font: bool = True,
    mode: ColourMode = ColourMode.PLAIN,
) -> str:
    """Like convert, with the lines joined ready for printing."""
    return "\n".join(convert(source, width, correct_font, mode))

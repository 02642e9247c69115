import logging
import math

import numpy as np
from PIL import Image

from asciify.errors import InvalidDimensionError

logger = logging.getLogger(__name__)

# Terminal cells are taller than wide; squash rows so the output keeps its shape
FONT_HEIGHT_SCALAR = 3 / 5

GAUSSIAN_SIGMA = 0.5
GAUSSIAN_SUPPORT = 3.0


def target_size(source_width: int, source_height: int, target_width: int, correct_font: bool) -> tuple[int, int]:
    """Return (width, height) of the resampled image for a given column count."""
    if source_width <= 0 or source_height <= 0:
        raise InvalidDimensionError(f"Source image has no pixels: {source_width}x{source_height}")
    if target_width < 0:
        raise InvalidDimensionError(f"Target width must not be negative, got {target_width}")
    aspect_ratio = source_height / source_width
    height_scalar = FONT_HEIGHT_SCALAR if correct_font else 1.0
    return target_width, math.floor(aspect_ratio * target_width * height_scalar)


def _gaussian(x: np.ndarray) -> np.ndarray:
    return np.exp(-(x**2) / (2 * GAUSSIAN_SIGMA**2)) / (math.sqrt(2 * math.pi) * GAUSSIAN_SIGMA)


def gaussian_bands(src_len: int, dst_len: int) -> list[tuple[int, np.ndarray]]:
    """Per output pixel, the first contributing source index and its Gaussian weights.

    When downscaling the kernel is stretched by the scale ratio so every
    source pixel contributes. Each band is normalized to sum to one.
    """
    ratio = src_len / dst_len
    scale = max(ratio, 1.0)
    support = GAUSSIAN_SUPPORT * scale
    bands = []
    for out in range(dst_len):
        centre = (out + 0.5) * ratio
        left = min(max(int(math.floor(centre - support)), 0), src_len - 1)
        right = min(max(int(math.ceil(centre + support)), left + 1), src_len)
        weights = _gaussian((np.arange(left, right) - (centre - 0.5)) / scale)
        total = weights.sum()
        if total > 0:
            weights = weights / total
        bands.append((left, weights))
    return bands


def resample_axis(arr: np.ndarray, dst_len: int, axis: int) -> np.ndarray:
    """Resample one axis of an (h, w, 3) array, rounding back to 8 bits."""
    src = np.moveaxis(np.asarray(arr, dtype=np.float64), axis, 0)
    out = np.empty((dst_len,) + src.shape[1:])
    for i, (left, weights) in enumerate(gaussian_bands(src.shape[0], dst_len)):
        out[i] = np.tensordot(weights, src[left : left + len(weights)], axes=1)
    return np.moveaxis(np.clip(np.rint(out), 0, 255).astype(np.uint8), 0, axis)


def resample(image: Image.Image, target_width: int, correct_font: bool) -> Image.Image:
    """Resize an image to target_width columns, correcting for the font aspect.

    Returns an 8-bit RGB image. A zero target width or a height that rounds
    down to zero produces an empty image.
    """
    width, height = target_size(image.width, image.height, target_width, correct_font)
    logger.debug("Resampling %dx%d to %dx%d", image.width, image.height, width, height)
    if width == 0 or height == 0:
        return Image.new("RGB", (width, height))

    arr = np.asarray(image.convert("RGB"))
    # Rows first, then columns, with 8-bit rounding in between
    arr = resample_axis(arr, height, axis=0)
    arr = resample_axis(arr, width, axis=1)
    return Image.fromarray(np.ascontiguousarray(arr))

import numpy as np

# Ordered darkest/densest first
ASCII_GLYPHS = "@#S%?*+;:,."

# Width of the luminance range mapped to one glyph; 0..254 covers all 11 glyphs
BUCKET_SIZE = 25

MAX_INDEX = len(ASCII_GLYPHS) - 1

# Rec. 709 weights in parts per ten thousand; they sum to 10000 so white stays 255
LUMA_WEIGHTS = (2125, 7154, 721)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """Integer luminance of an (..., 3) RGB array, truncated toward zero."""
    rgb = np.asarray(rgb, dtype=np.int64)
    return (rgb @ np.array(LUMA_WEIGHTS, dtype=np.int64)) // 10000


def _check_bucket_size(bucket_size: int) -> None:
    if bucket_size <= 0:
        raise ValueError(f"Bucket size must be positive, got {bucket_size}")


def glyph_index(luminance: int, bucket_size: int = BUCKET_SIZE) -> int:
    """Index into ASCII_GLYPHS for a luminance value, clamped to the table."""
    _check_bucket_size(bucket_size)
    return min(max(int(luminance) // bucket_size, 0), MAX_INDEX)


def glyph_for(luminance: int, bucket_size: int = BUCKET_SIZE) -> str:
    return ASCII_GLYPHS[glyph_index(luminance, bucket_size)]


def glyph_indices(luma: np.ndarray, bucket_size: int = BUCKET_SIZE) -> np.ndarray:
    """Vectorized glyph_index over an array of luminance values."""
    _check_bucket_size(bucket_size)
    return np.clip(np.asarray(luma, dtype=np.int64) // bucket_size, 0, MAX_INDEX)

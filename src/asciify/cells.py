from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import NamedTuple, TypeVar

from asciify.errors import InvalidDimensionError
from asciify.escapes import ColourMode, format_cell
from asciify.palette import PaletteColor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolvedCell(NamedTuple):
    glyph: str
    colour: PaletteColor | tuple[int, int, int] | None = None


def chunked(items: Sequence[T], width: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of width items; the last may be shorter."""
    if width <= 0:
        raise InvalidDimensionError(f"Line width must be positive, got {width}")
    for start in range(0, len(items), width):
        yield items[start : start + width]


def assemble(cells: Sequence[ResolvedCell], width: int, mode: ColourMode = ColourMode.PLAIN) -> list[str]:
    """Format cells and break them into lines of width cells.

    Produces ceil(len(cells) / width) lines; no cells gives no lines.
    """
    lines = ["".join(format_cell(cell.glyph, cell.colour, mode) for cell in row) for row in chunked(cells, width)]
    logger.debug("Assembled %d cells into %d lines of width %d", len(cells), len(lines), width)
    return lines

"""
Pattern rasterizer - mirrored on/off grid expanded into a flat RGBA buffer

A 3x3 grid at scale 2 becomes

    1 1 2 2 3 3
    1 1 2 2 3 3
    4 4 5 5 6 6
    4 4 5 5 6 6
    7 7 8 8 9 9
    7 7 8 8 9 9

where the third column is the mirror of the first.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .bits import is_odd
from .color import WHITE_PIXEL, Color, derive_color

log = logging.getLogger(__name__)

RGBA_SIZE = 4


@dataclass(frozen=True)
class IconGeometry:
    height: int
    width: int
    scale: int

    @property
    def pixel_width(self) -> int:
        return self.width * self.scale

    @property
    def pixel_height(self) -> int:
        return self.height * self.scale

    @property
    def buffer_size(self) -> int:
        return self.pixel_width * self.pixel_height * RGBA_SIZE


def left_count(width: int) -> int:
    return (width + 1) // 2


def mirror_row(left: list, width: int) -> list:
    """Full row from its left half; the centre column of odd widths is not repeated."""
    row = list(left)
    i = len(left) - (1 if width % 2 == 0 else 2)
    while i >= 0:
        row.append(left[i])
        i -= 1
    return row


def logical_grid(digest, height: int, width: int) -> List[List[bool]]:
    """Unscaled on/off rows. One cursor runs across all rows, it is never reset."""
    cursor = 0
    rows = []
    for _ in range(height):
        left = []
        for _ in range(left_count(width)):
            left.append(is_odd(digest, cursor))
            cursor += 1
        rows.append(mirror_row(left, width))
    return rows


def rasterize(digest, height: int, width: int, scale: int, *,
              color: Optional[Color] = None, off: Color = WHITE_PIXEL) -> bytearray:
    geo = IconGeometry(height, width, scale)
    on_px = (color if color is not None else derive_color(digest)).to_rgba()
    off_px = off.to_rgba()

    buf = bytearray(geo.buffer_size)
    stride = geo.pixel_width * RGBA_SIZE
    block = stride * scale
    for y, cells in enumerate(logical_grid(digest, height, width)):
        line = b"".join((on_px if cell else off_px) * scale for cell in cells)
        buf[y * block:(y + 1) * block] = line * scale

    log.debug("rasterized %dx%d @%d -> %d bytes", height, width, scale, len(buf))
    return buf

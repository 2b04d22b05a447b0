"""
Color derivation - one saturated, never-too-dark RGBA color per digest
"""

import logging
from typing import NamedTuple

from identicon.config import ALPHA, MIN_COLOR_SUM, RESCUE_GREEN
from .bits import read_byte

log = logging.getLogger(__name__)


def _clamp(v) -> int:
    return max(0, min(255, int(round(v))))


class Color(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: int = ALPHA

    def to_rgba(self) -> bytes:
        return bytes(_clamp(c) for c in self)

    @property
    def hex(self) -> str:
        r, g, b, _ = self.to_rgba()
        return f"#{r:02x}{g:02x}{b:02x}"


WHITE_PIXEL = Color(255, 255, 255, 255)


def derive_color(digest) -> Color:
    """
    Red, green and blue are three 8-bit reads walking backwards from the end of
    the digest. The smallest channel is zeroed to avoid greys (blue unless red
    or green is strictly the smallest), an all-black result becomes green, and
    dark colors are scaled up until the channels sum to MIN_COLOR_SUM.
    Scaled channels stay floats; use ``Color.to_rgba`` when packing.
    """
    index = len(digest)
    red = read_byte(digest, index)
    index -= 8
    green = read_byte(digest, index)
    index -= 8
    blue = read_byte(digest, index)

    if red < green and red < blue:
        red = 0
    elif green < red and green < blue:
        green = 0
    else:
        blue = 0

    if red == 0 and green == 0 and blue == 0:
        green = RESCUE_GREEN

    total = red + green + blue
    if total < MIN_COLOR_SUM:
        k = MIN_COLOR_SUM / total
        red, green, blue = red * k, green * k, blue * k

    color = Color(red, green, blue, ALPHA)
    log.debug("derived color %s from %d-element digest", color, len(digest))
    return color

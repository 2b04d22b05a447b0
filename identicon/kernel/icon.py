"""
Identicon - validated generation from a username and PNG export
"""

import io
import logging
from dataclasses import dataclass, field

from PIL import Image

from identicon.config import (
    DIGEST_ALGORITHM, HEIGHT_RANGE, MARGIN, MARGIN_RANGE, SCALE_RANGE, WIDTH_RANGE,
)
from .color import Color, derive_color
from .digest import digest as make_digest
from .raster import IconGeometry, rasterize

log = logging.getLogger(__name__)


class IconSizeError(ValueError):
    def __init__(self, field_name: str, value=None):
        super().__init__(f"{field_name} is outside the specified range")
        self.field = field_name
        self.value = value


def _check(name, value, bounds):
    lo, hi = bounds
    if isinstance(value, bool) or not isinstance(value, int) or not lo <= value <= hi:
        raise IconSizeError(name, value)


def validate_dimensions(height, width, scale):
    _check("height", height, HEIGHT_RANGE)
    _check("width", width, WIDTH_RANGE)
    _check("scale", scale, SCALE_RANGE)


def validate_margin(margin):
    _check("margin", margin, MARGIN_RANGE)


@dataclass
class Identicon:
    username: str
    digest: str
    color: Color
    geometry: IconGeometry
    pixels: bytearray = field(repr=False)

    def to_image(self, margin: int = MARGIN) -> Image.Image:
        """RGBA image of the icon on a transparent canvas ``margin`` pixels wider on every side."""
        geo = self.geometry
        icon = Image.frombytes("RGBA", (geo.pixel_width, geo.pixel_height), bytes(self.pixels))
        if margin <= 0:
            return icon
        canvas = Image.new(
            "RGBA",
            (geo.pixel_width + 2 * margin, geo.pixel_height + 2 * margin),
            (0, 0, 0, 0),
        )
        canvas.paste(icon, (margin, margin))
        return canvas

    def to_png(self, margin: int = MARGIN) -> bytes:
        out = io.BytesIO()
        self.to_image(margin).save(out, format="PNG")
        return out.getvalue()

    def save(self, path: str, margin: int = MARGIN) -> str:
        self.to_image(margin).save(path, format="PNG")
        log.info("saved identicon for %r to %s", self.username, path)
        return path


def generate_icon(username: str, height: int, width: int, scale: int,
                  algorithm: str = DIGEST_ALGORITHM) -> Identicon:
    validate_dimensions(height, width, scale)
    d = make_digest(username, algorithm)
    color = derive_color(d)
    pixels = rasterize(d, height, width, scale, color=color)
    return Identicon(
        username=username or "",
        digest=d,
        color=color,
        geometry=IconGeometry(height, width, scale),
        pixels=pixels,
    )

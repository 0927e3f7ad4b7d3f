"""In-memory bitmaps built from raw byte arrays."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BitmapFormat(Enum):
    """Pixel layout of a bitmap's data."""

    RAW = 0
    INDEXED = 1
    MONO = 2
    RGB = 3
    RGBA = 4


_BYTES_PER_PIXEL = {
    BitmapFormat.INDEXED: 1,
    BitmapFormat.RAW: 1,
    BitmapFormat.RGB: 3,
    BitmapFormat.RGBA: 4,
}


def calc_size(width: int, height: int, format: BitmapFormat) -> int:
    """Return the number of data bytes a bitmap of this shape needs."""
    if format is BitmapFormat.MONO:
        return (width * height + 7) // 8
    return width * height * _BYTES_PER_PIXEL[format]


@dataclass(frozen=True)
class Bitmap:
    """A bitmap viewing a block of pixel bytes, with an optional RGB palette."""

    width: int = 0
    height: int = 0
    format: BitmapFormat = BitmapFormat.RAW
    data: bytes = b""
    palette: bytes | None = None
    palette_size: int = 0

    @classmethod
    def create(cls, data, width: int, height: int, format: BitmapFormat) -> "Bitmap":
        """Build a bitmap over ``data``; raise ValueError if data is missing or short."""
        if data is None:
            raise ValueError("bitmap data is missing")
        data = bytes(data)
        expected = calc_size(width, height, format)
        if len(data) < expected:
            raise ValueError(
                f"bitmap data too short: {len(data)} bytes, {expected} needed"
            )
        return cls(width=width, height=height, format=format, data=data)

    @classmethod
    def create_indexed(
        cls, data, width: int, height: int, palette, palette_size: int
    ) -> "Bitmap":
        """Build an indexed bitmap that maps pixel bytes through an RGB palette."""
        base = cls.create(data, width, height, BitmapFormat.INDEXED)
        return cls(
            width=base.width,
            height=base.height,
            format=base.format,
            data=base.data,
            palette=None if palette is None else bytes(palette),
            palette_size=palette_size,
        )

    def is_valid(self) -> bool:
        """Whether the bitmap has a shape, enough data and, if indexed, a palette."""
        if self.data is None or self.width == 0 or self.height == 0:
            return False
        if len(self.data) < calc_size(self.width, self.height, self.format):
            return False
        if self.format is BitmapFormat.INDEXED and self.palette_size == 0:
            return False
        return True

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_raw(self, x: int, y: int) -> int:
        """Raw value at (x, y): the bit, the byte, or the red component; 0 outside."""
        if not self.is_valid() or not self._in_bounds(x, y):
            return 0
        index = y * self.width + x
        if self.format is BitmapFormat.MONO:
            return (self.data[index // 8] >> (7 - index % 8)) & 1
        return self.data[index * _BYTES_PER_PIXEL[self.format]]

    def _palette_colour(self, index: int) -> tuple[int, int, int]:
        start = index * 3
        r, g, b = self.palette[start:start + 3]
        return r, g, b

    def pixel_rgb(self, x: int, y: int) -> tuple[int, int, int]:
        """Colour at (x, y) as an (r, g, b) tuple; black outside or when invalid."""
        if not self.is_valid() or not self._in_bounds(x, y):
            return 0, 0, 0
        fmt = self.format
        if fmt is BitmapFormat.MONO:
            bit = self.pixel_raw(x, y)
            if self.palette and self.palette_size > 0:
                return self._palette_colour(bit)
            level = 255 if bit else 0
            return level, level, level
        if fmt is BitmapFormat.INDEXED:
            index = self.pixel_raw(x, y)
            if self.palette and index < self.palette_size:
                return self._palette_colour(index)
            return 0, 0, 0
        if fmt is BitmapFormat.RAW:
            value = self.pixel_raw(x, y)
            return value, value, value
        offset = (y * self.width + x) * _BYTES_PER_PIXEL[fmt]
        r, g, b = self.data[offset:offset + 3]
        return r, g, b
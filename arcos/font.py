"""PSF1 font parsing and the VGA plane-2 glyph layout."""

from __future__ import annotations

PSF1_MAGIC = 0x0436
PSF1_HEADER_SIZE = 4
GLYPH_COUNT = 256
GLYPH_HEIGHT = 16
GLYPHS_SIZE = GLYPH_COUNT * GLYPH_HEIGHT
VGA_GLYPH_STRIDE = 32


class FontError(ValueError):
    """Raised when font data is missing, too short or has the wrong magic."""


def parse_psf1(data) -> bytes:
    """Return the 256 16-byte glyphs of a PSF1 font."""
    data = bytes(data)
    if len(data) < PSF1_HEADER_SIZE:
        raise FontError("font data shorter than a PSF1 header")
    magic = int.from_bytes(data[:2], "little")
    if magic != PSF1_MAGIC:
        raise FontError(f"not a PSF1 font (magic 0x{magic:04x})")
    glyphs = data[PSF1_HEADER_SIZE:PSF1_HEADER_SIZE + GLYPHS_SIZE]
    if len(glyphs) < GLYPHS_SIZE:
        raise FontError("PSF1 font holds fewer than 256 glyphs")
    return glyphs


def glyphs_from_array(data, is_psf: bool) -> bytes:
    """Glyphs from a PSF1 font, or from an array that is nothing but raw glyphs."""
    if not data or len(data) < PSF1_HEADER_SIZE:
        raise FontError("font data missing or too short")
    if is_psf:
        return parse_psf1(data)
    data = bytes(data)
    if len(data) < GLYPHS_SIZE:
        raise FontError("raw glyph data holds fewer than 256 glyphs")
    return data[:GLYPHS_SIZE]


def vga_font_memory(glyphs) -> bytes:
    """Lay glyphs out as VGA font memory: each 16-byte glyph in a 32-byte slot."""
    glyphs = bytes(glyphs)
    if len(glyphs) < GLYPHS_SIZE:
        raise FontError("fewer than 256 glyphs to load")
    memory = bytearray(GLYPH_COUNT * VGA_GLYPH_STRIDE)
    for index in range(GLYPH_COUNT):
        glyph = glyphs[index * GLYPH_HEIGHT:(index + 1) * GLYPH_HEIGHT]
        start = index * VGA_GLYPH_STRIDE
        memory[start:start + GLYPH_HEIGHT] = glyph
    return bytes(memory)
import pytest

from arcos.font import FontError, glyphs_from_array, parse_psf1, vga_font_memory

HEADER = bytes([0x36, 0x04, 0x00, 0x10])
GLYPHS = bytes(i % 256 for i in range(256 * 16))


def test_parse_psf1_returns_glyphs():
    assert parse_psf1(HEADER + GLYPHS) == GLYPHS


def test_parse_psf1_ignores_trailing_data():
    assert parse_psf1(HEADER + GLYPHS + b"\xff" * 40) == GLYPHS


def test_parse_psf1_bad_magic():
    with pytest.raises(FontError):
        parse_psf1(b"\x00\x00\x00\x10" + GLYPHS)


def test_parse_psf1_too_short():
    with pytest.raises(FontError):
        parse_psf1(HEADER + GLYPHS[:100])
    with pytest.raises(FontError):
        parse_psf1(HEADER[:2])


def test_glyphs_from_psf_array():
    assert glyphs_from_array(HEADER + GLYPHS, True) == GLYPHS


def test_glyphs_from_raw_array():
    assert glyphs_from_array(GLYPHS + b"extra", False) == GLYPHS


def test_glyphs_from_array_rejects_short_or_missing():
    with pytest.raises(FontError):
        glyphs_from_array(GLYPHS[:100], False)
    with pytest.raises(FontError):
        glyphs_from_array(b"", False)
    with pytest.raises(FontError):
        glyphs_from_array(None, True)


def test_raw_glyphs_are_not_a_psf():
    with pytest.raises(FontError):
        glyphs_from_array(GLYPHS, True)


def test_vga_memory_layout():
    memory = vga_font_memory(GLYPHS)
    assert len(memory) == 256 * 32
    for index in range(256):
        slot = memory[index * 32:(index + 1) * 32]
        assert slot[:16] == GLYPHS[index * 16:(index + 1) * 16]
        assert slot[16:] == bytes(16)


def test_vga_memory_round_trip_from_psf():
    memory = vga_font_memory(parse_psf1(HEADER + GLYPHS))
    rebuilt = b"".join(memory[i * 32:i * 32 + 16] for i in range(256))
    assert rebuilt == GLYPHS


def test_vga_memory_short_glyphs():
    with pytest.raises(FontError):
        vga_font_memory(GLYPHS[:-1])
import pytest

from arcos.bitmap import Bitmap, BitmapFormat
from arcos.commands import (
    FULL_BLOCK,
    bitmap_command,
    cat,
    lfetch,
    ls,
    man,
    mkdir_home,
    pid,
    render_bitmap,
    rmdir_home,
    touch,
)
from arcos.ramfs import RamFS
from arcos.screen import Screen

BLOCK = chr(FULL_BLOCK)


@pytest.fixture
def screen():
    return Screen()


@pytest.fixture
def fs():
    return RamFS()


def test_cat_without_name_prints_usage(screen, fs):
    cat(screen, fs, "")
    assert screen.row_text(0) == "Usage: cat <filename>"


def test_cat_prints_file_contents(screen, fs):
    fs.write("notes.txt", b"hello")
    cat(screen, fs, "notes.txt")
    assert screen.row_text(0) == "hello"
    assert screen.cursor == (0, 1)


def test_cat_stops_at_nul(screen, fs):
    fs.write("bin.dat", b"ab\x00cd")
    cat(screen, fs, "bin.dat")
    assert screen.row_text(0) == "ab"


def test_cat_missing_file(screen, fs):
    cat(screen, fs, "nope.txt")
    assert screen.row_text(0) == "File not found: nope.txt"


def test_ls_on_fresh_filesystem(screen, fs):
    ls(screen, fs)
    assert screen.row_text(0) == "(empty)"


def test_mkdir_home_creates_then_fails(screen, fs):
    mkdir_home(screen, fs)
    assert screen.row_text(0) == "Directory created: /home"
    assert fs.exists("/home")
    mkdir_home(screen, fs)
    assert screen.row_text(1) == "Failed to create directory or already exists"


def test_rmdir_home_missing(screen, fs):
    rmdir_home(screen, fs)
    assert screen.row_text(0) == "Directory not found or cannot be removed"


def test_rmdir_home_removes(screen, fs):
    fs.mkdir("/home")
    rmdir_home(screen, fs)
    assert screen.row_text(0) == "Directory removed: /home"
    assert not fs.exists("/home")


def test_touch_without_name_prints_usage(screen, fs):
    touch(screen, fs, "")
    assert screen.row_text(0) == "Usage: touch <filename>"


def test_touch_creates_file(screen, fs):
    touch(screen, fs, "a.txt")
    assert screen.row_text(0) == "File created: a.txt"
    assert fs.exists("a.txt")
    assert fs.size("a.txt") == 0


def test_touch_empties_existing_file(screen, fs):
    fs.write("a.txt", b"content")
    touch(screen, fs, "a.txt")
    assert fs.size("a.txt") == 0
    assert fs.read("a.txt") == b""


def test_lfetch_prints_logo(screen):
    lfetch(screen)
    assert screen.row_text(5) == "    ARCHAEOPATRYX"
    assert screen.row_text(1).endswith("proccesor:x86")


def test_pid_prints_table(screen):
    pid(screen)
    assert screen.row_text(0) == "procces_name:         procces_id:"
    assert screen.row_text(4) == ""
    assert screen.row_text(5) == "this services are hardcoded"


def test_man_prints_entries(screen):
    man(screen)
    assert screen.row_text(0) == "println - print serial line via cr/print.h"
    assert screen.row_text(1) == "printk - print from kernel root/kernel.h"


def test_render_bitmap_matches_pixels(screen):
    bmp = Bitmap.create(bytes([0b10010000]), 2, 2, BitmapFormat.MONO)
    render_bitmap(screen, bmp, 3, 2)
    for py in range(2):
        for px in range(2):
            expected = BLOCK if bmp.pixel_raw(px, py) else " "
            assert screen.char_at(3 + px, 2 + py) == expected


def test_render_invalid_bitmap_draws_nothing(screen):
    render_bitmap(screen, Bitmap(), 0, 0)
    assert screen.text() == ""
    assert screen.cursor == (0, 0)


def test_bitmap_command_default_image(screen):
    bitmap_command(screen, "")
    assert all(screen.row_text(y) == BLOCK * 16 for y in range(16))
    assert screen.row_text(16) == ""


def test_bitmap_command_draws_data(screen):
    bitmap_command(screen, "5 2 8 1 0xF0")
    row = [screen.char_at(x, 2) for x in range(5, 13)]
    assert row == [BLOCK] * 4 + [" "] * 4


def test_bitmap_command_accepts_braces_and_commas(screen):
    bitmap_command(screen, "0 0 16 1 {0xFF, 0x00}")
    assert screen.row_text(0) == BLOCK * 8


def test_bitmap_command_usage(screen):
    bitmap_command(screen, "1 2 3")
    assert screen.row_text(0) == "Usage: bitmap <x> <y> <w> <h> <data...>"


@pytest.mark.parametrize("args", ["0 0 0 4", "0 0 129 1", "0 0 4 65", "0 0 -2 2"])
def test_bitmap_command_dimensions_out_of_range(screen, args):
    bitmap_command(screen, args)
    assert screen.row_text(0) == "Error: Dimensions out of range."


def test_bitmap_command_short_data_draws_nothing(screen):
    bitmap_command(screen, "0 0 8 8 ff")
    assert screen.text() == ""
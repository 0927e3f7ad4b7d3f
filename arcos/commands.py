"""Shell commands that act on the screen and the in-memory filesystem."""

from __future__ import annotations

import re

from .bitmap import Bitmap, BitmapFormat, calc_size
from .ramfs import RamFS, RamFSError
from .screen import Screen

FULL_BLOCK = 0xDB

_CAT_LIMIT = 1023
_MAX_BITMAP_WIDTH = 128
_MAX_BITMAP_HEIGHT = 64
_MAX_BITMAP_BYTES = 512
# The built-in image: 16x16 with every pixel lit.
_DEFAULT_IMAGE = b"\xff" * 32
_DEFAULT_SIZE = 16

_INT = re.compile(r" *(-?\d+)")
_HEX_BYTE = re.compile(r"[ ,{]*(?:0[xX])?([0-9a-fA-F]{0,2})")


def _as_text(data: bytes) -> str:
    """Bytes up to the first NUL, one character per byte."""
    return data.split(b"\x00", 1)[0].decode("latin-1")


def cat(screen: Screen, fs: RamFS, filename: str) -> None:
    """Print a file's contents, or a usage or not-found message."""
    if not filename:
        screen.write("Usage: cat <filename>\n")
        return
    try:
        data = fs.read(filename, _CAT_LIMIT)
    except RamFSError:
        screen.write(f"File not found: {filename}\n")
        return
    screen.write(_as_text(data) + "\n")


def ls(screen: Screen, fs: RamFS) -> None:
    """Print the entries listed for the root directory."""
    names = fs.list("/")
    if names:
        screen.write("".join(f"{name} " for name in names) + "\n")
    else:
        screen.write("(empty)\n")


def mkdir_home(screen: Screen, fs: RamFS) -> None:
    """Create the /home directory and report the outcome."""
    try:
        fs.mkdir("/home")
    except RamFSError:
        screen.write("Failed to create directory or already exists\n")
    else:
        screen.write("Directory created: /home\n")


def rmdir_home(screen: Screen, fs: RamFS) -> None:
    """Remove the /home directory and report the outcome."""
    try:
        fs.delete("/home")
    except RamFSError:
        screen.write("Directory not found or cannot be removed\n")
    else:
        screen.write("Directory removed: /home\n")


def touch(screen: Screen, fs: RamFS, filename: str) -> None:
    """Create an empty file, or empty an existing one."""
    if not filename:
        screen.write("Usage: touch <filename>\n")
        return
    try:
        fs.create_file(filename)
    except RamFSError:
        try:
            fs.write(filename, b"")
        except RamFSError:
            screen.write("Failed to create file\n")
        else:
            screen.write(f"File updated: {filename}\n")
    else:
        screen.write(f"File created: {filename}\n")


def lfetch(screen: Screen) -> None:
    """Print the system summary with its logo."""
    screen.write("       /\\           memory:no data \n")
    screen.write("      /  \\          proccesor:x86\n")
    screen.write("     / /\\ \\        kernel:1.5kvf\n")
    screen.write("    / ____ \\        storage:raw\n")
    screen.write("   /_/    \\_\\    \n")
    screen.write("    ARCHAEOPATRYX\n")


def pid(screen: Screen) -> None:
    """Print the fixed process table."""
    screen.write("procces_name:         procces_id:\n")
    screen.write("shell                 01k\n")
    screen.write("kernel                02k\n")
    screen.write("ramfs                 --M\n\n")
    screen.write("this services are hardcoded\n")


def man(screen: Screen) -> None:
    """Print the short manual of output and input routines."""
    screen.write("println - print serial line via cr/print.h\n")
    screen.write("printk - print from kernel root/kernel.h\n")
    screen.write("input - inputs users buffer from os and prints cr/input.h\n")


def render_bitmap(screen: Screen, bitmap: Bitmap, x: int, y: int) -> None:
    """Draw a bitmap one cell per pixel: a full block when set, a space when not.

    Rows whose start lies off the screen are skipped.
    """
    if not bitmap.is_valid():
        return
    for row in range(bitmap.height):
        try:
            screen.move_cursor(x, y + row)
        except IndexError:
            continue
        for col in range(bitmap.width):
            screen.putchar(FULL_BLOCK if bitmap.pixel_raw(col, row) else " ")


def _parse_ints(args: str, count: int) -> tuple[list[int], int] | None:
    values: list[int] = []
    pos = 0
    for _ in range(count):
        match = _INT.match(args, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return values, pos


def _parse_bytes(args: str, pos: int, limit: int) -> bytes:
    data = bytearray()
    while len(data) < limit:
        match = _HEX_BYTE.match(args, pos)
        if match.end() == pos:
            break
        data.append(int(match.group(1) or "0", 16))
        pos = match.end()
    return bytes(data)


def bitmap_command(screen: Screen, args: str | None) -> None:
    """Handle ``bitmap <x> <y> <w> <h> <data...>``; with no arguments draw the built-in image."""
    if not args:
        image = Bitmap.create(_DEFAULT_IMAGE, _DEFAULT_SIZE, _DEFAULT_SIZE, BitmapFormat.MONO)
        render_bitmap(screen, image, 0, 0)
        return

    parsed = _parse_ints(args, 4)
    if parsed is None:
        screen.write("Usage: bitmap <x> <y> <w> <h> <data...>\n")
        return
    (x, y, width, height), pos = parsed

    if not (0 < width <= _MAX_BITMAP_WIDTH and 0 < height <= _MAX_BITMAP_HEIGHT):
        screen.write("Error: Dimensions out of range.\n")
        return

    expected = calc_size(width, height, BitmapFormat.MONO)
    data = _parse_bytes(args, pos, min(expected, _MAX_BITMAP_BYTES))
    if len(data) < expected:
        return

    render_bitmap(screen, Bitmap.create(data, width, height, BitmapFormat.MONO), x, y)
# arcos

`arcos` holds the building blocks of a tiny x86 text-mode hobby operating
system, written as plain Python: an 80×25 screen buffer with white-on-black
cells, an in-memory filesystem, a minimal FAT32 reader/writer over a sector
device, bitmaps, PSF1 font handling, PC scancode decoding and a set of shell
commands that draw on the screen and act on the filesystem.

It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Screen — `arcos.screen`

`Screen` is the 80×25 text buffer. `putchar` and `write` print at the
cursor; `\n` moves to the next row, `\b` steps back and blanks a cell, and
writing past the last row scrolls everything up by one. `put_at` stores a
character and attribute in a cell without moving the cursor; `char_at`,
`attr_at`, `row_text` and `text` read the buffer back. `move_cursor`,
`clear` and `scroll` do what their names say.

```python
from arcos.screen import Screen

screen = Screen()
screen.write("Welcome to ArcOS!\n")
print(screen.row_text(0))
```

## Drawing helpers — `arcos.ui`

`draw_box`, `draw_label` and `draw_header_bar` draw a `+`/`-`/`|` frame
with an optional title, a line of text, and a top row of `=` with a title,
all without moving the screen's cursor.

## RAM filesystem — `arcos.ramfs`

`RamFS` is a flat table of up to 128 entries addressed by full path; each
file holds up to 4096 bytes and anything longer is cut off. Paths go
through `normalize_path`, which drops a leading slash, collapses repeated
slashes and drops a trailing one. The methods are `mkdir`, `create_file`,
`write`, `read`, `list`, `delete`, `exists`, `size` and `reset`. Failures
(missing entry, existing directory, full table, writing or reading a
directory, removing the root) raise `RamFSError`.

```python
from arcos.ramfs import RamFS

fs = RamFS()
fs.write("notes.txt", b"hello")
print(fs.read("notes.txt", 1024), fs.size("notes.txt"))
```

## Shell commands — `arcos.commands`

Each command takes the `Screen` to print on and, where it needs one, the
`RamFS`:

- `cat(screen, fs, filename)` prints a file (at most 1023 bytes)
- `ls(screen, fs)` prints the entries listed for `/`, or `(empty)`
- `touch(screen, fs, filename)` creates or empties a file
- `mkdir_home` and `rmdir_home` create and remove `/home`
- `lfetch`, `pid` and `man` print fixed text
- `render_bitmap(screen, bitmap, x, y)` draws a bitmap, one cell per pixel
- `bitmap_command(screen, args)` parses `<x> <y> <w> <h> <hex bytes...>`
  and draws the 1-bit image; with no arguments it draws a built-in 16×16 one

```python
from arcos import commands
from arcos.ramfs import RamFS
from arcos.screen import Screen

screen, fs = Screen(), RamFS()
commands.touch(screen, fs, "notes.txt")
commands.bitmap_command(screen, "0 5 8 2 0xFF 0x81")
print(screen.text())
```

## Bitmaps — `arcos.bitmap`

`Bitmap` wraps raw pixel bytes in one of the `BitmapFormat` layouts (raw,
indexed with palette, 1-bit mono, RGB, RGBA). `Bitmap.create` and
`Bitmap.create_indexed` raise `ValueError` when the data is missing or too
short; `calc_size` gives the number of bytes a layout needs. `pixel_raw`
returns the bit, the byte or the red component, and `pixel_rgb` an
`(r, g, b)` tuple.

```python
from arcos.bitmap import Bitmap, BitmapFormat

icon = Bitmap.create(bytes([0x18, 0x3C, 0x7E, 0xFF, 0xFF, 0x7E, 0x3C, 0x18]),
                     8, 8, BitmapFormat.MONO)
print(icon.pixel_raw(3, 3), icon.pixel_rgb(0, 0))
```

## Keyboard — `arcos.keyboard`

`Keyboard` decodes PC set-1 scancodes. `feed` takes one scancode and
returns the key it produces or `None`; `read` turns a stream of scancodes
into the keys they produce. Shift and Caps Lock are tracked, and the arrow
keys come back as `ARROW_UP`, `ARROW_DOWN`, `ARROW_LEFT` and `ARROW_RIGHT`.

## Fonts — `arcos.font`

`parse_psf1` returns the 256 16-byte glyphs of a PSF1 font,
`glyphs_from_array` accepts PSF1 data or raw glyph data, and
`vga_font_memory` lays the glyphs out as VGA plane 2 expects, 32 bytes per
character. Bad or short data raises `FontError`.

## FAT32 — `arcos.fat32`

`Fat32` works on any object with `read_sector` and `write_sector`;
`MemoryDisk` is an in-memory one. `detect_partitions` finds FAT32
partitions in the MBR, `mount` makes one active, `list_dir` lists the root
directory, `read_file` follows a file's cluster chain, `format` writes a
minimal boot sector and `write_file` stores up to one cluster of data in
cluster 2 with a root entry for it. Errors raise `Fat32Error`.

## What it does not do

The package has no command to start and nothing that boots: there is no
login shell or line reader, no app menu, no boot splash and no script
runner. The pieces above are libraries to be called from Python; putting
them together into an interactive session is left to the caller.
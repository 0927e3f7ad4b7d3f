"""Parts of a small text-mode hobby OS: screen, RAM filesystem, FAT32, bitmaps, fonts, keyboard and commands."""

__version__ = "1.7.0"
"""An 80x25 text-mode screen with a scrolling output cursor."""

from __future__ import annotations

WIDTH = 80
HEIGHT = 25
WHITE_ON_BLACK = 0x0F

_CELLS = WIDTH * HEIGHT
_BLANK = " "


class Screen:
    """Character and attribute cells plus the cursor that output is written at."""

    def __init__(self) -> None:
        self._chars: list[str] = [_BLANK] * _CELLS
        self._attrs: list[int] = [WHITE_ON_BLACK] * _CELLS
        self._pos = 0

    @property
    def cursor(self) -> tuple[int, int]:
        """Current output position as (x, y)."""
        return self._pos % WIDTH, self._pos // WIDTH

    @staticmethod
    def _as_char(c: str | int) -> str:
        if isinstance(c, int):
            return chr(c)
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c

    @staticmethod
    def _index(x: int, y: int) -> int:
        index = y * WIDTH + x
        if not 0 <= index < _CELLS:
            raise IndexError(f"position ({x}, {y}) is off the screen")
        return index

    def _set(self, index: int, char: str, attr: int) -> None:
        self._chars[index] = char
        self._attrs[index] = attr

    def putchar(self, c: str | int) -> None:
        """Write one character at the cursor, handling newline and backspace."""
        char = self._as_char(c)
        if char == "\n":
            self._pos = (self._pos // WIDTH + 1) * WIDTH
        elif char == "\b":
            if self._pos > 0:
                self._pos -= 1
                self._set(self._pos, _BLANK, WHITE_ON_BLACK)
        else:
            self._set(self._pos, char, WHITE_ON_BLACK)
            self._pos += 1
        if self._pos >= _CELLS:
            self.scroll()

    def write(self, text: str) -> None:
        """Write every character of ``text`` at the cursor."""
        for char in text:
            self.putchar(char)

    def clear(self) -> None:
        """Blank every cell and move the cursor to the top left."""
        self._chars = [_BLANK] * _CELLS
        self._attrs = [WHITE_ON_BLACK] * _CELLS
        self._pos = 0

    def scroll(self) -> None:
        """Move every row up by one, blank the last row and put the cursor on it."""
        del self._chars[:WIDTH]
        del self._attrs[:WIDTH]
        self._chars.extend([_BLANK] * WIDTH)
        self._attrs.extend([WHITE_ON_BLACK] * WIDTH)
        self._pos = WIDTH * (HEIGHT - 1)

    def move_cursor(self, x: int, y: int) -> None:
        """Place the output cursor at (x, y)."""
        self._pos = self._index(x, y)

    def put_at(self, x: int, y: int, char: str | int, attr: int = WHITE_ON_BLACK) -> None:
        """Store a character and attribute directly in a cell, leaving the cursor alone.

        Positions are linear, so an ``x`` past the row end continues on the next row.
        """
        self._set(self._index(x, y), self._as_char(char), attr)

    def char_at(self, x: int, y: int) -> str:
        return self._chars[self._index(x, y)]

    def attr_at(self, x: int, y: int) -> int:
        return self._attrs[self._index(x, y)]

    def row_text(self, y: int) -> str:
        """Characters of row ``y`` with trailing blanks removed."""
        start = self._index(0, y)
        return "".join(self._chars[start:start + WIDTH]).rstrip(_BLANK)

    def text(self) -> str:
        """All rows joined by newlines, without trailing empty rows."""
        return "\n".join(self.row_text(y) for y in range(HEIGHT)).rstrip("\n")
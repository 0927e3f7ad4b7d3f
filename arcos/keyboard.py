"""PS/2 set-1 scancode decoding into characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

ARROW_UP = "\x01"
ARROW_DOWN = "\x02"
ARROW_LEFT = "\x03"
ARROW_RIGHT = "\x04"

_EXTENDED_PREFIX = 0xE0
_RELEASE_BIT = 0x80
_SHIFT_KEYS = (42, 54)
_CAPS_LOCK = 58
_ARROWS = {72: ARROW_UP, 80: ARROW_DOWN, 75: ARROW_LEFT, 77: ARROW_RIGHT}

_NORMAL = (
    "\x00\x1b1234567890-=\b"
    "\tqwertyuiop[]\n\x00"
    "asdfghjkl;'`\x00\\zxcvbnm,./\x00"
    "*\x00 \x00"
).ljust(128, "\x00")

_SHIFTED = (
    "\x00\x1b!@#$%^&*()_+\b"
    "\tQWERTYUIOP{}\n\x00"
    'ASDFGHJKL:"~\x00|ZXCVBNM<>?\x00'
    "*\x00 \x00"
).ljust(128, "\x00")


class Keyboard:
    """Stateful decoder tracking shift, caps lock and the extended-key prefix."""

    def __init__(self) -> None:
        self.shift = False
        self.caps = False
        self.extended = False

    def feed(self, scancode: int) -> str | None:
        """Decode one scancode; return the key it produces, or None."""
        if scancode == _EXTENDED_PREFIX:
            self.extended = True
            return None

        released = bool(scancode & _RELEASE_BIT)
        code = scancode & 0x7F

        if code in _SHIFT_KEYS:
            self.shift = not released
            return None

        if code == _CAPS_LOCK and not released:
            self.caps = not self.caps
            return None

        if self.extended and not released:
            self.extended = False
            if code in _ARROWS:
                return _ARROWS[code]

        self.extended = False

        if released:
            return None
        normal = _NORMAL[code]
        shifted = _SHIFTED[code]
        if "a" <= normal <= "z":
            key = shifted if self.shift != self.caps else normal
        else:
            key = shifted if self.shift else normal
        return key if key != "\x00" else None

    def read(self, scancodes: Iterable[int]) -> Iterator[str]:
        """Yield every key produced by a stream of scancodes."""
        for scancode in scancodes:
            key = self.feed(scancode)
            if key is not None:
                yield key